"""
TicketEngine - ticket issuance, resale, transfer and invalidation.

State machine per ticket:
- Unsold: no ticket entity exists yet
- Valid/Owned: issued, current_price == original_price
- Listed for resale: current_price != original_price, owner unchanged
- Invalidated: terminal; ownership and history kept for audit

Key behaviors:
- purchase_history is append-only; entry 0 is the primary sale
- owner always equals the `to` of the last history entry
- Resale price is capped at floor(original_price * max_resale_multiplier)
- Settlement is requested before any state changes; a declined settlement
  leaves the store untouched
"""

from __future__ import annotations

import logging

from ticketmarket.components.audit import AuditAction, AuditTrail, EntityType
from ticketmarket.core.store import MarketplaceStore, atomic
from ticketmarket.domain.entities import (
    Principal,
    Ticket,
    TicketMetadata,
    TicketStatus,
    TicketTransfer,
)
from ticketmarket.domain.errors import ErrorKind, MarketplaceError
from ticketmarket.domain.policy import PolicyEngine
from ticketmarket.domain.pricing import (
    DEFAULT_MAX_RESALE_MULTIPLIER,
    is_within_resale_cap,
    max_resale_price,
)
from ticketmarket.domain.state import transition_ticket

from .ports import ClockPort, SettlementPort

logger = logging.getLogger(__name__)

DEFAULT_TICKET_CLASS = "Standard"


class TicketEngine:
    """
    Ticket lifecycle and resale service.

    All public methods hold the store lock for their whole duration.
    """

    def __init__(
        self,
        store: MarketplaceStore,
        policy: PolicyEngine,
        clock: ClockPort,
        settlement: SettlementPort,
        audit: AuditTrail,
        max_resale_multiplier: float = DEFAULT_MAX_RESALE_MULTIPLIER,
        default_ticket_class: str = DEFAULT_TICKET_CLASS,
    ) -> None:
        self._store = store
        self._policy = policy
        self._clock = clock
        self._settlement = settlement
        self._audit = audit
        self._multiplier = max_resale_multiplier
        self._ticket_class = default_ticket_class

    def _settle(self, payer: Principal, payee: Principal, amount: int, token_id: int | None) -> None:
        result = self._settlement.settle(payer, payee, amount, token_id)
        if not result.approved:
            logger.debug("Settlement declined: payer=%s amount=%d", payer, amount)
            raise MarketplaceError(ErrorKind.INSUFFICIENT_FUNDS)

    # --- Primary sale ---

    @atomic
    def purchase_ticket(self, caller: Principal, event_id: int) -> Ticket:
        event = self._store.get_event(event_id)
        now = self._clock.now_unix()

        if not event.is_active:
            raise MarketplaceError(ErrorKind.INVALID_OPERATION)
        if event.available_tickets == 0:
            raise MarketplaceError(ErrorKind.SOLD_OUT)
        if event.date < now:
            raise MarketplaceError(ErrorKind.INVALID_OPERATION)

        self._settle(caller, event.organizer, event.price, None)

        token_id = self._store.allocate_token_id()
        ticket = Ticket(
            token_id=token_id,
            event_id=event_id,
            owner=caller,
            original_price=event.price,
            current_price=event.price,
            purchase_history=[
                TicketTransfer(
                    from_principal=event.organizer,
                    to=caller,
                    price=event.price,
                    timestamp=now,
                )
            ],
            status=TicketStatus.VALID,
            metadata=TicketMetadata(
                event_name=event.name,
                ticket_class=self._ticket_class,
                seat_info=None,
                purchase_date=now,
            ),
        )
        self._store.insert_ticket(ticket)
        event.available_tickets -= 1

        self._audit.record(
            AuditAction.PURCHASE,
            EntityType.TICKET,
            token_id,
            caller,
            {"event_id": event_id, "price": event.price},
        )
        logger.info("Ticket %d for event %d sold to %s", token_id, event_id, caller)
        return ticket.model_copy(deep=True)

    # --- Resale ---

    @atomic
    def list_ticket_for_resale(self, caller: Principal, token_id: int, price: int) -> Ticket:
        ticket = self._store.get_ticket(token_id)

        if ticket.owner != caller:
            logger.debug("list denied: caller=%s token=%d", caller, token_id)
            raise MarketplaceError(ErrorKind.NOT_AUTHORIZED)
        if not ticket.is_valid or price < 0:
            raise MarketplaceError(ErrorKind.INVALID_OPERATION)
        if not is_within_resale_cap(price, ticket.original_price, self._multiplier):
            raise MarketplaceError(ErrorKind.LIMIT_EXCEEDED)

        ticket.current_price = price

        self._audit.record(
            AuditAction.LIST, EntityType.TICKET, token_id, caller, {"price": price}
        )
        logger.info("Ticket %d listed by %s at %d", token_id, caller, price)
        return ticket.model_copy(deep=True)

    @atomic
    def buy_resale_ticket(self, caller: Principal, token_id: int) -> Ticket:
        ticket = self._store.get_ticket(token_id)

        if ticket.owner == caller:
            raise MarketplaceError(ErrorKind.INVALID_OPERATION)

        event = self._store.get_event(ticket.event_id)

        if not event.is_active or event.date < self._clock.now_unix():
            raise MarketplaceError(ErrorKind.INVALID_OPERATION)
        if not ticket.is_valid:
            raise MarketplaceError(ErrorKind.INVALID_OPERATION)

        previous_owner = ticket.owner
        price = ticket.current_price
        self._settle(caller, previous_owner, price, token_id)

        transfer = TicketTransfer(
            from_principal=previous_owner,
            to=caller,
            price=price,
            timestamp=self._clock.now_unix(),
        )
        self._store.reassign_owner(ticket, transfer)

        self._audit.record(
            AuditAction.RESALE,
            EntityType.TICKET,
            token_id,
            caller,
            {"from": previous_owner, "price": price},
        )
        logger.info("Ticket %d resold %s -> %s at %d", token_id, previous_owner, caller, price)
        return ticket.model_copy(deep=True)

    # --- Transfer / invalidation ---

    @atomic
    def transfer_ticket(self, caller: Principal, token_id: int, recipient: Principal) -> Ticket:
        ticket = self._store.get_ticket(token_id)

        if ticket.owner != caller:
            logger.debug("transfer denied: caller=%s token=%d", caller, token_id)
            raise MarketplaceError(ErrorKind.NOT_AUTHORIZED)
        if recipient == caller or not ticket.is_valid:
            raise MarketplaceError(ErrorKind.INVALID_OPERATION)

        transfer = TicketTransfer(
            from_principal=caller,
            to=recipient,
            price=0,
            timestamp=self._clock.now_unix(),
        )
        self._store.reassign_owner(ticket, transfer)

        self._audit.record(
            AuditAction.TRANSFER, EntityType.TICKET, token_id, caller, {"to": recipient}
        )
        logger.info("Ticket %d transferred %s -> %s", token_id, caller, recipient)
        return ticket.model_copy(deep=True)

    @atomic
    def invalidate_ticket(self, caller: Principal, token_id: int) -> Ticket:
        ticket = self._store.get_ticket(token_id)
        event = self._store.get_event(ticket.event_id)

        if not self._policy.can_invalidate_ticket(caller, event):
            logger.debug("invalidate denied: caller=%s token=%d", caller, token_id)
            raise MarketplaceError(ErrorKind.NOT_AUTHORIZED)

        if not ticket.is_valid:
            return ticket.model_copy(deep=True)

        updated = transition_ticket(ticket, TicketStatus.INVALIDATED)
        self._store.replace_ticket(updated)

        self._audit.record(AuditAction.INVALIDATE, EntityType.TICKET, token_id, caller)
        logger.info("Ticket %d invalidated by %s", token_id, caller)
        return updated.model_copy(deep=True)

    # --- Queries ---

    @atomic
    def verify_ticket(self, token_id: int, owner: Principal) -> bool:
        ticket = self._store.get_ticket(token_id)
        return ticket.is_valid and ticket.owner == owner

    @atomic
    def get_ticket(self, token_id: int) -> Ticket:
        return self._store.get_ticket(token_id).model_copy(deep=True)

    @atomic
    def get_event_tickets(self, event_id: int) -> list[Ticket]:
        return [
            ticket.model_copy(deep=True)
            for ticket in self._store.iter_tickets()
            if ticket.event_id == event_id
        ]

    @atomic
    def get_user_tickets(self, user: Principal) -> list[Ticket]:
        return [
            self._store.get_ticket(token_id).model_copy(deep=True)
            for token_id in self._store.tokens_of(user)
        ]

    @atomic
    def max_resale_price(self, token_id: int) -> int:
        ticket = self._store.get_ticket(token_id)
        return max_resale_price(ticket.original_price, self._multiplier)
