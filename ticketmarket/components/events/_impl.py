"""
EventRegistry - event creation, updates, cancellation and queries.

Key behaviors:
- Event ids are allocated monotonically; the caller becomes the organizer
- Updates apply only the fields present, after validating all of them
- total_tickets never decreases; raising it adds the delta to availability
- Cancellation is a status change; issued tickets stay valid and no refunds
  are issued
"""

from __future__ import annotations

import logging
from typing import Any

from ticketmarket.components.audit import AuditAction, AuditTrail, EntityType
from ticketmarket.core.store import MarketplaceStore, atomic
from ticketmarket.domain.entities import Event, EventStatus, Principal
from ticketmarket.domain.errors import ErrorKind, MarketplaceError
from ticketmarket.domain.policy import PolicyEngine

from .ports import ClockPort

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = frozenset(
    {
        "name",
        "date",
        "venue",
        "price",
        "total_tickets",
        "is_active",
        "description",
        "image_url",
    }
)


# --- Validation Functions ---


def validate_name(name: str) -> None:
    if not name:
        raise MarketplaceError(ErrorKind.INVALID_OPERATION)


def validate_date(date: int, now: int) -> None:
    if date < now:
        raise MarketplaceError(ErrorKind.INVALID_OPERATION)


def validate_price(price: int) -> None:
    if price < 0:
        raise MarketplaceError(ErrorKind.INVALID_OPERATION)


def validate_ticket_total(new_total: int, current_total: int = 0) -> None:
    if new_total < current_total or new_total < 0:
        raise MarketplaceError(ErrorKind.INVALID_OPERATION)


# --- Event Registry ---


class EventRegistry:
    """
    Event registry service.

    All public methods hold the store lock for their whole duration.
    """

    def __init__(
        self,
        store: MarketplaceStore,
        policy: PolicyEngine,
        clock: ClockPort,
        audit: AuditTrail,
    ) -> None:
        self._store = store
        self._policy = policy
        self._clock = clock
        self._audit = audit

    @atomic
    def create_event(
        self,
        caller: Principal,
        name: str,
        date: int,
        venue: str,
        price: int,
        total_tickets: int,
        description: str = "",
        image_url: str | None = None,
    ) -> Event:
        if not self._policy.can_create_event(self._store.role_of(caller)):
            logger.debug("create_event denied: caller=%s", caller)
            raise MarketplaceError(ErrorKind.NOT_AUTHORIZED)

        validate_name(name)
        validate_date(date, self._clock.now_unix())
        validate_ticket_total(total_tickets)
        validate_price(price)

        event = Event(
            event_id=self._store.allocate_event_id(),
            name=name,
            date=date,
            venue=venue,
            price=price,
            total_tickets=total_tickets,
            available_tickets=total_tickets,
            organizer=caller,
            status=EventStatus.ACTIVE,
            description=description,
            image_url=image_url,
        )
        self._store.insert_event(event)

        self._audit.record(
            AuditAction.CREATE,
            EntityType.EVENT,
            event.event_id,
            caller,
            {"total_tickets": total_tickets, "price": price},
        )
        logger.info("Event %d created by %s", event.event_id, caller)
        return event.model_copy(deep=True)

    @atomic
    def update_event(
        self,
        caller: Principal,
        event_id: int,
        updates: dict[str, Any],
    ) -> Event:
        """
        Apply a partial update.

        Keys absent from updates are left untouched. "image_url" mapped to
        None clears the image.
        """
        event = self._store.get_event(event_id)

        if not self._policy.can_manage_event(caller, self._store.role_of(caller), event):
            logger.debug("update_event denied: caller=%s event=%d", caller, event_id)
            raise MarketplaceError(ErrorKind.NOT_AUTHORIZED)

        unknown = set(updates) - UPDATABLE_FIELDS
        if unknown:
            raise MarketplaceError(ErrorKind.INVALID_OPERATION)

        # Validate every present field before writing any of them
        if "name" in updates:
            validate_name(updates["name"])
        if "date" in updates:
            validate_date(updates["date"], self._clock.now_unix())
        if "price" in updates:
            validate_price(updates["price"])
        if "total_tickets" in updates:
            validate_ticket_total(updates["total_tickets"], event.total_tickets)

        if "name" in updates:
            event.name = updates["name"]
        if "date" in updates:
            event.date = updates["date"]
        if "venue" in updates:
            event.venue = updates["venue"]
        if "price" in updates:
            event.price = updates["price"]
        if "total_tickets" in updates:
            added = updates["total_tickets"] - event.total_tickets
            event.available_tickets += added
            event.total_tickets = updates["total_tickets"]
        if "is_active" in updates:
            event.status = EventStatus.ACTIVE if updates["is_active"] else EventStatus.CANCELLED
        if "description" in updates:
            event.description = updates["description"]
        if "image_url" in updates:
            event.image_url = updates["image_url"]

        self._audit.record(
            AuditAction.UPDATE,
            EntityType.EVENT,
            event_id,
            caller,
            {"fields": sorted(updates)},
        )
        logger.info("Event %d updated by %s: %s", event_id, caller, sorted(updates))
        return event.model_copy(deep=True)

    @atomic
    def cancel_event(self, caller: Principal, event_id: int) -> bool:
        event = self._store.get_event(event_id)

        if not self._policy.can_manage_event(caller, self._store.role_of(caller), event):
            logger.debug("cancel_event denied: caller=%s event=%d", caller, event_id)
            raise MarketplaceError(ErrorKind.NOT_AUTHORIZED)

        # TODO: refund holders once a settlement adapter supports refunds
        event.status = EventStatus.CANCELLED

        self._audit.record(AuditAction.CANCEL, EntityType.EVENT, event_id, caller)
        logger.info("Event %d cancelled by %s", event_id, caller)
        return True

    @atomic
    def get_event(self, event_id: int) -> Event:
        return self._store.get_event(event_id).model_copy(deep=True)

    @atomic
    def list_events(self, active_only: bool = False) -> list[Event]:
        return [
            event.model_copy(deep=True)
            for event in self._store.iter_events()
            if event.is_active or not active_only
        ]
