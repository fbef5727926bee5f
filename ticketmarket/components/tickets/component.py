"""
Tickets component - Ticket lifecycle and resale entry points.

Invariants:
- I1: owner == purchase_history[-1].to after every mutation
- I2: current_price <= floor(original_price * max_resale_multiplier)
- I3: owner index holds exactly the tickets each principal owns
- I4: Invalidated tickets never change hands again
- I5: verify/get never mutate
"""

from __future__ import annotations

from collections.abc import Callable

from ticketmarket.domain.entities import Ticket
from ticketmarket.domain.errors import MarketplaceError

from ._impl import TicketEngine
from .models import (
    BuyResaleInput,
    EventTicketsInput,
    GetTicketInput,
    InvalidateTicketInput,
    ListForResaleInput,
    PurchaseTicketInput,
    ResaleQuoteInput,
    ResaleQuoteOutput,
    TicketListOutput,
    TicketOutput,
    TransferTicketInput,
    UserTicketsInput,
    VerifyOutput,
    VerifyTicketInput,
)


def _ticket_output(call: Callable[[], Ticket]) -> TicketOutput:
    try:
        return TicketOutput(ticket=call())
    except MarketplaceError as e:
        return TicketOutput(ticket=None, error=e.kind, success=False)


def run_purchase(inp: PurchaseTicketInput, engine: TicketEngine) -> TicketOutput:
    """Buy a new ticket for an event."""
    return _ticket_output(lambda: engine.purchase_ticket(inp.caller, inp.event_id))


def run_list_for_resale(inp: ListForResaleInput, engine: TicketEngine) -> TicketOutput:
    """Set a resale price on an owned ticket."""
    return _ticket_output(
        lambda: engine.list_ticket_for_resale(inp.caller, inp.token_id, inp.price)
    )


def run_buy_resale(inp: BuyResaleInput, engine: TicketEngine) -> TicketOutput:
    """Buy a ticket from its current owner at its current price."""
    return _ticket_output(lambda: engine.buy_resale_ticket(inp.caller, inp.token_id))


def run_transfer(inp: TransferTicketInput, engine: TicketEngine) -> TicketOutput:
    """Give a ticket to another principal."""
    return _ticket_output(
        lambda: engine.transfer_ticket(inp.caller, inp.token_id, inp.recipient)
    )


def run_invalidate(inp: InvalidateTicketInput, engine: TicketEngine) -> TicketOutput:
    """Invalidate a ticket."""
    return _ticket_output(lambda: engine.invalidate_ticket(inp.caller, inp.token_id))


def run_get(inp: GetTicketInput, engine: TicketEngine) -> TicketOutput:
    """Get a ticket by token ID."""
    return _ticket_output(lambda: engine.get_ticket(inp.token_id))


def run_verify(inp: VerifyTicketInput, engine: TicketEngine) -> VerifyOutput:
    """Check a ticket at the gate."""
    try:
        verified = engine.verify_ticket(inp.token_id, inp.owner)
    except MarketplaceError as e:
        return VerifyOutput(verified=False, error=e.kind, success=False)

    return VerifyOutput(verified=verified)


def run_event_tickets(inp: EventTicketsInput, engine: TicketEngine) -> TicketListOutput:
    """All tickets issued for an event, in token order."""
    tickets = engine.get_event_tickets(inp.event_id)
    return TicketListOutput(tickets=tuple(tickets), total=len(tickets))


def run_user_tickets(inp: UserTicketsInput, engine: TicketEngine) -> TicketListOutput:
    """Tickets a principal owns, in acquisition order."""
    tickets = engine.get_user_tickets(inp.owner)
    return TicketListOutput(tickets=tuple(tickets), total=len(tickets))


def run_resale_quote(inp: ResaleQuoteInput, engine: TicketEngine) -> ResaleQuoteOutput:
    """Highest price the ticket may be listed at."""
    try:
        max_price = engine.max_resale_price(inp.token_id)
    except MarketplaceError as e:
        return ResaleQuoteOutput(
            token_id=inp.token_id, max_price=None, error=e.kind, success=False
        )

    return ResaleQuoteOutput(token_id=inp.token_id, max_price=max_price)


def run(
    inp: (
        PurchaseTicketInput
        | ListForResaleInput
        | BuyResaleInput
        | TransferTicketInput
        | InvalidateTicketInput
        | GetTicketInput
        | VerifyTicketInput
        | EventTicketsInput
        | UserTicketsInput
        | ResaleQuoteInput
    ),
    engine: TicketEngine,
) -> TicketOutput | VerifyOutput | TicketListOutput | ResaleQuoteOutput:
    if isinstance(inp, PurchaseTicketInput):
        return run_purchase(inp, engine)
    elif isinstance(inp, ListForResaleInput):
        return run_list_for_resale(inp, engine)
    elif isinstance(inp, BuyResaleInput):
        return run_buy_resale(inp, engine)
    elif isinstance(inp, TransferTicketInput):
        return run_transfer(inp, engine)
    elif isinstance(inp, InvalidateTicketInput):
        return run_invalidate(inp, engine)
    elif isinstance(inp, GetTicketInput):
        return run_get(inp, engine)
    elif isinstance(inp, VerifyTicketInput):
        return run_verify(inp, engine)
    elif isinstance(inp, EventTicketsInput):
        return run_event_tickets(inp, engine)
    elif isinstance(inp, UserTicketsInput):
        return run_user_tickets(inp, engine)
    elif isinstance(inp, ResaleQuoteInput):
        return run_resale_quote(inp, engine)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
