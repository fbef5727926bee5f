"""
Metadata component - Read-only token and event queries.
"""

from ._impl import MetadataService
from .component import (
    run,
    run_balance_of,
    run_event_stats,
    run_organizer_events,
    run_owner_of,
    run_token_metadata,
    run_total_supply,
)
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

__all__ = [
    # Entry points
    "run",
    "run_balance_of",
    "run_event_stats",
    "run_organizer_events",
    "run_owner_of",
    "run_token_metadata",
    "run_total_supply",
    # Service
    "MetadataService",
    # Models
    "BalanceOfInput",
    "EventStatsInput",
    "EventStatsOutput",
    "OrganizerEventsInput",
    "OrganizerEventsOutput",
    "OwnerOfInput",
    "OwnerOfOutput",
    "TokenCountOutput",
    "TokenMetadataInput",
    "TokenMetadataOutput",
    "TotalSupplyInput",
]
