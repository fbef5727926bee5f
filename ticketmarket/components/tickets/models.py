"""
Tickets component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass

from ticketmarket.domain.entities import Principal, Ticket
from ticketmarket.domain.errors import ErrorKind

# --- Input Models ---


@dataclass(frozen=True)
class PurchaseTicketInput:
    """Input for a primary-sale purchase."""

    caller: Principal
    event_id: int


@dataclass(frozen=True)
class ListForResaleInput:
    """Input for listing a ticket for resale."""

    caller: Principal
    token_id: int
    price: int


@dataclass(frozen=True)
class BuyResaleInput:
    """Input for buying a ticket from its current owner."""

    caller: Principal
    token_id: int


@dataclass(frozen=True)
class TransferTicketInput:
    """Input for a zero-price transfer."""

    caller: Principal
    token_id: int
    recipient: Principal


@dataclass(frozen=True)
class InvalidateTicketInput:
    """Input for invalidating a ticket."""

    caller: Principal
    token_id: int


@dataclass(frozen=True)
class VerifyTicketInput:
    """Input for gate verification."""

    token_id: int
    owner: Principal


@dataclass(frozen=True)
class GetTicketInput:
    """Input for getting a ticket."""

    token_id: int


@dataclass(frozen=True)
class EventTicketsInput:
    """Input for listing the tickets of an event."""

    event_id: int


@dataclass(frozen=True)
class UserTicketsInput:
    """Input for listing the tickets a principal owns."""

    owner: Principal


# --- Output Models ---


@dataclass(frozen=True)
class TicketOutput:
    """Output from a ticket operation."""

    ticket: Ticket | None
    error: ErrorKind | None = None
    success: bool = True


@dataclass(frozen=True)
class VerifyOutput:
    """Output from verification."""

    verified: bool
    error: ErrorKind | None = None
    success: bool = True


@dataclass(frozen=True)
class TicketListOutput:
    """Output from list operations."""

    tickets: tuple[Ticket, ...]
    total: int


@dataclass(frozen=True)
class ResaleQuoteInput:
    """Input for quoting the resale cap of a ticket."""

    token_id: int


@dataclass(frozen=True)
class ResaleQuoteOutput:
    """Output from a resale quote."""

    token_id: int
    max_price: int | None
    error: ErrorKind | None = None
    success: bool = True
