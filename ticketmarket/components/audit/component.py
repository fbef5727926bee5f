"""
Audit component - Audit trail querying.

Invariants:
- I1: Every successful mutation is recorded exactly once
- I2: Audit entries are immutable
- I3: Actor identity captured
- I4: Failed operations leave no entry
"""

from __future__ import annotations

from ._impl import AuditAction, AuditQuery, AuditTrail, EntityType
from .models import (
    AuditEntryOutput,
    AuditListOutput,
    AuditValidationError,
    GetAuditEntryInput,
    QueryAuditInput,
)


def run_query(inp: QueryAuditInput, *, trail: AuditTrail) -> AuditListOutput:
    """
    Query the audit trail.

    Args:
        inp: Input containing query filters.
        trail: Audit trail service.

    Returns:
        AuditListOutput with matching entries, newest first.
    """
    try:
        entity_type = EntityType(inp.entity_type) if inp.entity_type else None
        action = AuditAction(inp.action) if inp.action else None
    except ValueError as e:
        return AuditListOutput(
            entries=(),
            total=0,
            errors=[AuditValidationError(code="invalid_enum", message=str(e))],
            success=False,
        )

    if inp.limit < 1 or inp.offset < 0:
        return AuditListOutput(
            entries=(),
            total=0,
            errors=[
                AuditValidationError(
                    code="invalid_pagination",
                    message="limit must be positive and offset non-negative",
                    field="limit" if inp.limit < 1 else "offset",
                )
            ],
            success=False,
        )

    query = AuditQuery(
        entity_type=entity_type,
        entity_id=inp.entity_id,
        actor=inp.actor,
        action=action,
        limit=inp.limit,
        offset=inp.offset,
    )

    return AuditListOutput(
        entries=tuple(trail.query(query)),
        total=trail.count(query),
    )


def run_get(inp: GetAuditEntryInput, *, trail: AuditTrail) -> AuditEntryOutput:
    """Get specific audit entry."""
    entry = trail.get(inp.entry_id)

    if entry is None:
        return AuditEntryOutput(
            entry=None,
            errors=[
                AuditValidationError(
                    code="not_found",
                    message=f"Audit entry {inp.entry_id} not found",
                )
            ],
            success=False,
        )

    return AuditEntryOutput(entry=entry)


def run(
    inp: QueryAuditInput | GetAuditEntryInput,
    *,
    trail: AuditTrail,
) -> AuditListOutput | AuditEntryOutput:
    """
    Main entry point for the audit component.

    Dispatches to appropriate handler based on input type.
    """
    if isinstance(inp, QueryAuditInput):
        return run_query(inp, trail=trail)
    elif isinstance(inp, GetAuditEntryInput):
        return run_get(inp, trail=trail)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
