"""
AuditTrail - append-only record of marketplace mutations.

Key behaviors:
- One entry per successful mutation (events, tickets, roles)
- Capture actor, target, action, metadata
- Query by entity, actor, action; newest first
- Immutable entries (no update/delete)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from uuid import UUID, uuid4

from ticketmarket.domain.entities import Principal

from .ports import AuditRepoPort, ClockPort

# --- Enums ---


class AuditAction(str, Enum):
    """Audit action types."""

    CREATE = "create"
    UPDATE = "update"
    CANCEL = "cancel"
    PURCHASE = "purchase"
    LIST = "list"
    RESALE = "resale"
    TRANSFER = "transfer"
    INVALIDATE = "invalidate"
    ASSIGN_ROLE = "assign_role"


class EntityType(str, Enum):
    """Entity types that can be audited."""

    EVENT = "event"
    TICKET = "ticket"
    ROLE = "role"


# --- Audit Entry Model ---


@dataclass(frozen=True)
class AuditEntry:
    """Immutable audit log entry."""

    id: UUID
    sequence: int
    timestamp: int
    action: AuditAction
    entity_type: EntityType
    entity_id: str | None
    actor: Principal | None
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class AuditQuery:
    """Query parameters for audit log."""

    entity_type: EntityType | None = None
    entity_id: str | None = None
    actor: Principal | None = None
    action: AuditAction | None = None
    limit: int = 100
    offset: int = 0


def _matches(entry: AuditEntry, query: AuditQuery) -> bool:
    if query.entity_type and entry.entity_type != query.entity_type:
        return False
    if query.entity_id and entry.entity_id != query.entity_id:
        return False
    if query.actor and entry.actor != query.actor:
        return False
    if query.action and entry.action != query.action:
        return False
    return True


# --- In-Memory Repository ---


class InMemoryAuditRepo:
    """In-memory audit repository."""

    def __init__(self) -> None:
        self._entries: list[AuditEntry] = []

    def save(self, entry: AuditEntry) -> AuditEntry:
        self._entries.append(entry)
        return entry

    def get_by_id(self, entry_id: UUID) -> AuditEntry | None:
        return next((e for e in self._entries if e.id == entry_id), None)

    def query(self, query: AuditQuery) -> list[AuditEntry]:
        results = [e for e in self._entries if _matches(e, query)]

        # Newest first; sequence breaks ties within one second
        results.sort(key=lambda e: (e.timestamp, e.sequence), reverse=True)

        return results[query.offset : query.offset + query.limit]

    def count(self, query: AuditQuery) -> int:
        return sum(1 for e in self._entries if _matches(e, query))

    def __len__(self) -> int:
        return len(self._entries)


# --- Audit Service ---


class AuditTrail:
    """Records and queries audit entries."""

    def __init__(
        self,
        clock: ClockPort,
        repo: AuditRepoPort | None = None,
        enabled: bool = True,
    ) -> None:
        self._repo = repo or InMemoryAuditRepo()
        self._clock = clock
        self._enabled = enabled
        self._sequence = 0

    @property
    def enabled(self) -> bool:
        return self._enabled

    def record(
        self,
        action: AuditAction,
        entity_type: EntityType,
        entity_id: int | str | None,
        actor: Principal | None,
        metadata: dict[str, Any] | None = None,
    ) -> AuditEntry | None:
        """
        Append an entry.

        Returns None if auditing is disabled.
        """
        if not self._enabled:
            return None

        self._sequence += 1
        entry = AuditEntry(
            id=uuid4(),
            sequence=self._sequence,
            timestamp=self._clock.now_unix(),
            action=action,
            entity_type=entity_type,
            entity_id=None if entity_id is None else str(entity_id),
            actor=actor,
            metadata=metadata or {},
        )
        return self._repo.save(entry)

    def get(self, entry_id: UUID) -> AuditEntry | None:
        return self._repo.get_by_id(entry_id)

    def query(self, query: AuditQuery) -> list[AuditEntry]:
        return self._repo.query(query)

    def count(self, query: AuditQuery) -> int:
        return self._repo.count(query)

    def for_entity(
        self, entity_type: EntityType, entity_id: int | str, limit: int = 50
    ) -> list[AuditEntry]:
        """Get audit trail for a specific entity."""
        return self.query(
            AuditQuery(entity_type=entity_type, entity_id=str(entity_id), limit=limit)
        )
