"""
Metadata component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass

from ticketmarket.domain.entities import Event, EventStats, Principal, TokenMetadata
from ticketmarket.domain.errors import ErrorKind

# --- Input Models ---


@dataclass(frozen=True)
class TokenMetadataInput:
    token_id: int


@dataclass(frozen=True)
class OwnerOfInput:
    token_id: int


@dataclass(frozen=True)
class BalanceOfInput:
    owner: Principal


@dataclass(frozen=True)
class TotalSupplyInput:
    pass


@dataclass(frozen=True)
class OrganizerEventsInput:
    organizer: Principal


@dataclass(frozen=True)
class EventStatsInput:
    """Input for event statistics (organizer or Admin only)."""

    caller: Principal
    event_id: int


# --- Output Models ---


@dataclass(frozen=True)
class TokenMetadataOutput:
    """Output for token metadata; metadata is None for unknown tokens."""

    metadata: TokenMetadata | None


@dataclass(frozen=True)
class OwnerOfOutput:
    token_id: int
    owner: Principal | None


@dataclass(frozen=True)
class TokenCountOutput:
    """Output for balance and supply queries."""

    count: int
    token_ids: tuple[int, ...] = ()


@dataclass(frozen=True)
class OrganizerEventsOutput:
    events: tuple[Event, ...]
    total: int


@dataclass(frozen=True)
class EventStatsOutput:
    stats: EventStats | None
    error: ErrorKind | None = None
    success: bool = True
