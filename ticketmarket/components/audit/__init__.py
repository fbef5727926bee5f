"""
Audit component.

Append-only trail of marketplace mutations and its query API.
"""

from ._impl import (
    AuditAction,
    AuditEntry,
    AuditQuery,
    AuditTrail,
    EntityType,
    InMemoryAuditRepo,
)
from .component import run, run_get, run_query
from .models import (
    AuditEntryOutput,
    AuditListOutput,
    AuditValidationError,
    GetAuditEntryInput,
    QueryAuditInput,
)
from .ports import AuditRepoPort, ClockPort

__all__ = [
    # Entry points
    "run",
    "run_get",
    "run_query",
    # Service
    "AuditTrail",
    "InMemoryAuditRepo",
    # Models
    "AuditAction",
    "AuditEntry",
    "AuditEntryOutput",
    "AuditListOutput",
    "AuditQuery",
    "AuditValidationError",
    "EntityType",
    "GetAuditEntryInput",
    "QueryAuditInput",
    # Ports
    "AuditRepoPort",
    "ClockPort",
]
