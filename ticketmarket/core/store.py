"""
MarketplaceStore - in-memory relational store.

Holds events, tickets, roles and the two derived reverse indexes
(owner -> token ids, organizer -> event ids).

Key behaviors:
- Ids are allocated monotonically from 1 and never reused
- Entities are never removed
- Every ownership change goes through reassign_owner(), which updates the
  ticket, its history and both owner index entries together
- One re-entrant lock guards the whole store; services hold it for the
  full span of each public operation (see atomic())
"""

from __future__ import annotations

import functools
import threading
from collections.abc import Callable, Iterator
from typing import Any, TypeVar

from ticketmarket.domain.entities import (
    Event,
    Principal,
    RoleType,
    Ticket,
    TicketTransfer,
)
from ticketmarket.domain.errors import ErrorKind, MarketplaceError

F = TypeVar("F", bound=Callable[..., Any])


class MarketplaceStore:
    """Single shared store instance for one marketplace."""

    def __init__(self, owner: Principal) -> None:
        self.owner = owner
        self.lock = threading.RLock()
        self._next_event_id = 1
        self._next_token_id = 1
        self._events: dict[int, Event] = {}
        self._tickets: dict[int, Ticket] = {}
        self._roles: dict[Principal, RoleType] = {owner: RoleType.ADMIN}
        self._user_tickets: dict[Principal, list[int]] = {}
        self._organizer_events: dict[Principal, list[int]] = {}

    # --- Id allocation ---

    def allocate_event_id(self) -> int:
        event_id = self._next_event_id
        self._next_event_id += 1
        return event_id

    def allocate_token_id(self) -> int:
        token_id = self._next_token_id
        self._next_token_id += 1
        return token_id

    @property
    def minted_count(self) -> int:
        return self._next_token_id - 1

    # --- Events ---

    def get_event(self, event_id: int) -> Event:
        """Return the stored event. Raises NOT_FOUND."""
        event = self._events.get(event_id)
        if event is None:
            raise MarketplaceError(ErrorKind.NOT_FOUND)
        return event

    def insert_event(self, event: Event) -> Event:
        if event.event_id in self._events:
            raise MarketplaceError(ErrorKind.ALREADY_EXISTS)
        self._events[event.event_id] = event
        self._organizer_events.setdefault(event.organizer, []).append(event.event_id)
        return event

    def iter_events(self) -> Iterator[Event]:
        for event_id in sorted(self._events):
            yield self._events[event_id]

    def event_ids_of(self, organizer: Principal) -> list[int]:
        return list(self._organizer_events.get(organizer, []))

    # --- Tickets ---

    def get_ticket(self, token_id: int) -> Ticket:
        """Return the stored ticket. Raises NOT_FOUND."""
        ticket = self._tickets.get(token_id)
        if ticket is None:
            raise MarketplaceError(ErrorKind.NOT_FOUND)
        return ticket

    def find_ticket(self, token_id: int) -> Ticket | None:
        return self._tickets.get(token_id)

    def insert_ticket(self, ticket: Ticket) -> Ticket:
        if ticket.token_id in self._tickets:
            raise MarketplaceError(ErrorKind.ALREADY_EXISTS)
        self._tickets[ticket.token_id] = ticket
        self._user_tickets.setdefault(ticket.owner, []).append(ticket.token_id)
        return ticket

    def replace_ticket(self, ticket: Ticket) -> Ticket:
        """Swap in a new version of an existing ticket (owner must not change)."""
        current = self.get_ticket(ticket.token_id)
        if current.owner != ticket.owner:
            raise ValueError("Ownership changes must go through reassign_owner")
        self._tickets[ticket.token_id] = ticket
        return ticket

    def reassign_owner(self, ticket: Ticket, transfer: TicketTransfer) -> Ticket:
        """
        Append transfer to the ticket history and move it to transfer.to.

        The previous owner is read before anything is mutated.
        """
        previous_owner = ticket.owner
        if transfer.from_principal != previous_owner:
            raise ValueError("Transfer must originate from the current owner")

        ticket.purchase_history.append(transfer)
        ticket.owner = transfer.to

        tokens = self._user_tickets.get(previous_owner)
        if tokens is not None and ticket.token_id in tokens:
            tokens.remove(ticket.token_id)
        self._user_tickets.setdefault(transfer.to, []).append(ticket.token_id)
        return ticket

    def iter_tickets(self) -> Iterator[Ticket]:
        for token_id in sorted(self._tickets):
            yield self._tickets[token_id]

    def tokens_of(self, owner: Principal) -> list[int]:
        return list(self._user_tickets.get(owner, []))

    def index_owners(self) -> list[Principal]:
        return list(self._user_tickets)

    # --- Roles ---

    def role_of(self, principal: Principal) -> RoleType:
        return self._roles.get(principal, RoleType.USER)

    def set_role(self, principal: Principal, role: RoleType) -> None:
        self._roles[principal] = role


def atomic(method: F) -> F:
    """Run a service method while holding its store lock."""

    @functools.wraps(method)
    def wrapper(self: Any, *args: Any, **kwargs: Any) -> Any:
        with self._store.lock:
            return method(self, *args, **kwargs)

    return wrapper  # type: ignore[return-value]
