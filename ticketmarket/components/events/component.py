"""
Events component - Event registry entry points.

Invariants:
- I1: 0 <= available_tickets <= total_tickets
- I2: total_tickets never decreases
- I3: Only the organizer or an Admin may update or cancel
- I4: A rejected update changes nothing
"""

from __future__ import annotations

from typing import Any

from ticketmarket.domain.errors import MarketplaceError

from ._impl import EventRegistry
from .models import (
    CancelEventInput,
    CancelEventOutput,
    CreateEventInput,
    EventListOutput,
    EventOutput,
    GetEventInput,
    ListEventsInput,
    UpdateEventInput,
)


def run_create(inp: CreateEventInput, registry: EventRegistry) -> EventOutput:
    """Create a new event owned by the caller."""
    try:
        event = registry.create_event(
            inp.caller,
            name=inp.name,
            date=inp.date,
            venue=inp.venue,
            price=inp.price,
            total_tickets=inp.total_tickets,
            description=inp.description,
            image_url=inp.image_url,
        )
    except MarketplaceError as e:
        return EventOutput(event=None, error=e.kind, success=False)

    return EventOutput(event=event)


def run_update(inp: UpdateEventInput, registry: EventRegistry) -> EventOutput:
    """Update an existing event."""
    # Build updates dict from non-None fields
    updates: dict[str, Any] = {}
    if inp.name is not None:
        updates["name"] = inp.name
    if inp.date is not None:
        updates["date"] = inp.date
    if inp.venue is not None:
        updates["venue"] = inp.venue
    if inp.price is not None:
        updates["price"] = inp.price
    if inp.total_tickets is not None:
        updates["total_tickets"] = inp.total_tickets
    if inp.is_active is not None:
        updates["is_active"] = inp.is_active
    if inp.description is not None:
        updates["description"] = inp.description
    if inp.clear_image_url:
        updates["image_url"] = None
    elif inp.image_url is not None:
        updates["image_url"] = inp.image_url

    try:
        event = registry.update_event(inp.caller, inp.event_id, updates)
    except MarketplaceError as e:
        return EventOutput(event=None, error=e.kind, success=False)

    return EventOutput(event=event)


def run_cancel(inp: CancelEventInput, registry: EventRegistry) -> CancelEventOutput:
    """Cancel an event."""
    try:
        cancelled = registry.cancel_event(inp.caller, inp.event_id)
    except MarketplaceError as e:
        return CancelEventOutput(cancelled=False, error=e.kind, success=False)

    return CancelEventOutput(cancelled=cancelled)


def run_get(inp: GetEventInput, registry: EventRegistry) -> EventOutput:
    """Get an event by ID."""
    try:
        event = registry.get_event(inp.event_id)
    except MarketplaceError as e:
        return EventOutput(event=None, error=e.kind, success=False)

    return EventOutput(event=event)


def run_list(inp: ListEventsInput, registry: EventRegistry) -> EventListOutput:
    """List events in id order."""
    events = registry.list_events(active_only=inp.active_only)
    return EventListOutput(events=tuple(events), total=len(events))


def run(
    inp: CreateEventInput | UpdateEventInput | CancelEventInput | GetEventInput | ListEventsInput,
    registry: EventRegistry,
) -> EventOutput | CancelEventOutput | EventListOutput:
    if isinstance(inp, CreateEventInput):
        return run_create(inp, registry)
    elif isinstance(inp, UpdateEventInput):
        return run_update(inp, registry)
    elif isinstance(inp, CancelEventInput):
        return run_cancel(inp, registry)
    elif isinstance(inp, GetEventInput):
        return run_get(inp, registry)
    elif isinstance(inp, ListEventsInput):
        return run_list(inp, registry)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
