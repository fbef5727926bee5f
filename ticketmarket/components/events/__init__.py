"""
Events component - Event registry.

Create, update, cancel and query events.
"""

from ._impl import EventRegistry
from .component import run, run_cancel, run_create, run_get, run_list, run_update
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
from .ports import ClockPort

__all__ = [
    # Entry points
    "run",
    "run_cancel",
    "run_create",
    "run_get",
    "run_list",
    "run_update",
    # Service
    "EventRegistry",
    # Input models
    "CancelEventInput",
    "CreateEventInput",
    "GetEventInput",
    "ListEventsInput",
    "UpdateEventInput",
    # Output models
    "CancelEventOutput",
    "EventListOutput",
    "EventOutput",
    # Ports
    "ClockPort",
]
