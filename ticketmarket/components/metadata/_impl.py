"""
MetadataService - public read-only views over the store.

Key behaviors:
- Token metadata carries eventId and isValid as string properties
- Unknown tokens yield None rather than an error
- Event statistics are restricted to the organizer or an Admin
"""

from __future__ import annotations

import logging

from ticketmarket.core.store import MarketplaceStore, atomic
from ticketmarket.domain.entities import Event, EventStats, Principal, TokenMetadata
from ticketmarket.domain.errors import ErrorKind, MarketplaceError
from ticketmarket.domain.policy import PolicyEngine

logger = logging.getLogger(__name__)


class MetadataService:
    def __init__(self, store: MarketplaceStore, policy: PolicyEngine) -> None:
        self._store = store
        self._policy = policy

    @atomic
    def get_token_metadata(self, token_id: int) -> TokenMetadata | None:
        ticket = self._store.find_ticket(token_id)
        if ticket is None:
            return None

        return TokenMetadata(
            token_id=token_id,
            owner=ticket.owner,
            metadata_blob=None,
            properties=[
                ("eventId", str(ticket.event_id)),
                ("isValid", "true" if ticket.is_valid else "false"),
            ],
            is_approved=False,
        )

    @atomic
    def total_supply(self) -> int:
        return self._store.minted_count

    @atomic
    def balance_of(self, owner: Principal) -> int:
        return len(self._store.tokens_of(owner))

    @atomic
    def owner_of(self, token_id: int) -> Principal | None:
        ticket = self._store.find_ticket(token_id)
        return ticket.owner if ticket else None

    @atomic
    def tokens_of(self, owner: Principal) -> list[int]:
        return self._store.tokens_of(owner)

    @atomic
    def get_organizer_events(self, organizer: Principal) -> list[Event]:
        return [
            self._store.get_event(event_id).model_copy(deep=True)
            for event_id in self._store.event_ids_of(organizer)
        ]

    @atomic
    def get_event_stats(self, caller: Principal, event_id: int) -> EventStats:
        """
        Sales figures for one event.

        Revenue is the sum of primary-sale prices; resales do not count.
        """
        event = self._store.get_event(event_id)

        if not self._policy.can_manage_event(caller, self._store.role_of(caller), event):
            logger.debug("get_event_stats denied: caller=%s event=%d", caller, event_id)
            raise MarketplaceError(ErrorKind.NOT_AUTHORIZED)

        total_sold = 0
        total_revenue = 0
        valid_tickets = 0
        for ticket in self._store.iter_tickets():
            if ticket.event_id != event_id:
                continue
            total_sold += 1
            total_revenue += ticket.original_price
            if ticket.is_valid:
                valid_tickets += 1

        return EventStats(
            total_sold=total_sold,
            total_revenue=total_revenue,
            valid_tickets=valid_tickets,
        )
