"""
Tickets component - Ticket lifecycle and resale engine.

Issue, resell, transfer, invalidate and verify tickets.
"""

from ._impl import DEFAULT_TICKET_CLASS, TicketEngine
from .component import (
    run,
    run_buy_resale,
    run_event_tickets,
    run_get,
    run_invalidate,
    run_list_for_resale,
    run_purchase,
    run_resale_quote,
    run_transfer,
    run_user_tickets,
    run_verify,
)
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
from .ports import ClockPort, SettlementPort

__all__ = [
    # Entry points
    "run",
    "run_buy_resale",
    "run_event_tickets",
    "run_get",
    "run_invalidate",
    "run_list_for_resale",
    "run_purchase",
    "run_resale_quote",
    "run_transfer",
    "run_user_tickets",
    "run_verify",
    # Service
    "DEFAULT_TICKET_CLASS",
    "TicketEngine",
    # Input models
    "BuyResaleInput",
    "EventTicketsInput",
    "GetTicketInput",
    "InvalidateTicketInput",
    "ListForResaleInput",
    "PurchaseTicketInput",
    "ResaleQuoteInput",
    "TransferTicketInput",
    "UserTicketsInput",
    "VerifyTicketInput",
    # Output models
    "ResaleQuoteOutput",
    "TicketListOutput",
    "TicketOutput",
    "VerifyOutput",
    # Ports
    "ClockPort",
    "SettlementPort",
]
