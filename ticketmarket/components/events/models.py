"""
Events component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass

from ticketmarket.domain.entities import Event, Principal
from ticketmarket.domain.errors import ErrorKind

# --- Input Models ---


@dataclass(frozen=True)
class CreateEventInput:
    """Input for creating an event."""

    caller: Principal
    name: str
    date: int
    venue: str
    price: int
    total_tickets: int
    description: str = ""
    image_url: str | None = None


@dataclass(frozen=True)
class UpdateEventInput:
    """
    Input for updating an event.

    None means "leave unchanged". Set clear_image_url to remove the image.
    """

    caller: Principal
    event_id: int
    name: str | None = None
    date: int | None = None
    venue: str | None = None
    price: int | None = None
    total_tickets: int | None = None
    is_active: bool | None = None
    description: str | None = None
    image_url: str | None = None
    clear_image_url: bool = False


@dataclass(frozen=True)
class CancelEventInput:
    """Input for cancelling an event."""

    caller: Principal
    event_id: int


@dataclass(frozen=True)
class GetEventInput:
    """Input for getting an event."""

    event_id: int


@dataclass(frozen=True)
class ListEventsInput:
    """Input for listing events."""

    active_only: bool = False


# --- Output Models ---


@dataclass(frozen=True)
class EventOutput:
    """Output from an event operation."""

    event: Event | None
    error: ErrorKind | None = None
    success: bool = True


@dataclass(frozen=True)
class CancelEventOutput:
    """Output from cancellation."""

    cancelled: bool
    error: ErrorKind | None = None
    success: bool = True


@dataclass(frozen=True)
class EventListOutput:
    """Output from list operation."""

    events: tuple[Event, ...]
    total: int
