"""
Metadata component - Token and event query facade.

Invariants:
- I1: Every query is read-only
- I2: balance_of(p) == len(tokens_of(p))
- I3: total_supply counts every token ever minted
"""

from __future__ import annotations

from ticketmarket.domain.errors import MarketplaceError

from ._impl import MetadataService
from .models import (
    BalanceOfInput,
    EventStatsInput,
    EventStatsOutput,
    OrganizerEventsInput,
    OrganizerEventsOutput,
    OwnerOfInput,
    OwnerOfOutput,
    TokenCountOutput,
    TokenMetadataInput,
    TokenMetadataOutput,
    TotalSupplyInput,
)


def run_token_metadata(inp: TokenMetadataInput, service: MetadataService) -> TokenMetadataOutput:
    return TokenMetadataOutput(metadata=service.get_token_metadata(inp.token_id))


def run_owner_of(inp: OwnerOfInput, service: MetadataService) -> OwnerOfOutput:
    return OwnerOfOutput(token_id=inp.token_id, owner=service.owner_of(inp.token_id))


def run_balance_of(inp: BalanceOfInput, service: MetadataService) -> TokenCountOutput:
    """Number of tokens a principal holds, with their ids."""
    token_ids = service.tokens_of(inp.owner)
    return TokenCountOutput(count=len(token_ids), token_ids=tuple(token_ids))


def run_total_supply(inp: TotalSupplyInput, service: MetadataService) -> TokenCountOutput:
    return TokenCountOutput(count=service.total_supply())


def run_organizer_events(
    inp: OrganizerEventsInput, service: MetadataService
) -> OrganizerEventsOutput:
    events = service.get_organizer_events(inp.organizer)
    return OrganizerEventsOutput(events=tuple(events), total=len(events))


def run_event_stats(inp: EventStatsInput, service: MetadataService) -> EventStatsOutput:
    """Sales figures for an event."""
    try:
        stats = service.get_event_stats(inp.caller, inp.event_id)
    except MarketplaceError as e:
        return EventStatsOutput(stats=None, error=e.kind, success=False)

    return EventStatsOutput(stats=stats)


def run(
    inp: (
        TokenMetadataInput
        | OwnerOfInput
        | BalanceOfInput
        | TotalSupplyInput
        | OrganizerEventsInput
        | EventStatsInput
    ),
    service: MetadataService,
) -> (
    TokenMetadataOutput
    | OwnerOfOutput
    | TokenCountOutput
    | OrganizerEventsOutput
    | EventStatsOutput
):
    if isinstance(inp, TokenMetadataInput):
        return run_token_metadata(inp, service)
    elif isinstance(inp, OwnerOfInput):
        return run_owner_of(inp, service)
    elif isinstance(inp, BalanceOfInput):
        return run_balance_of(inp, service)
    elif isinstance(inp, TotalSupplyInput):
        return run_total_supply(inp, service)
    elif isinstance(inp, OrganizerEventsInput):
        return run_organizer_events(inp, service)
    elif isinstance(inp, EventStatsInput):
        return run_event_stats(inp, service)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
