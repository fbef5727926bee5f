"""
Audit component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from uuid import UUID

from ticketmarket.domain.entities import Principal

from ._impl import AuditEntry

# --- Validation Error ---


@dataclass(frozen=True)
class AuditValidationError:
    """Audit validation error."""

    code: str
    message: str
    field: str | None = None


# --- Input Models ---


@dataclass(frozen=True)
class QueryAuditInput:
    """Input for querying audit logs."""

    entity_type: str | None = None
    entity_id: str | None = None
    actor: Principal | None = None
    action: str | None = None
    limit: int = 100
    offset: int = 0


@dataclass(frozen=True)
class GetAuditEntryInput:
    """Input for getting a specific audit entry."""

    entry_id: UUID


# --- Output Models ---


@dataclass(frozen=True)
class AuditListOutput:
    """Output for audit query."""

    entries: tuple[AuditEntry, ...]
    total: int
    errors: list[AuditValidationError] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class AuditEntryOutput:
    """Output for single audit entry."""

    entry: AuditEntry | None
    errors: list[AuditValidationError] = field(default_factory=list)
    success: bool = True
