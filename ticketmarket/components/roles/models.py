"""
Roles component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass

from ticketmarket.domain.entities import Principal, RoleType
from ticketmarket.domain.errors import ErrorKind

# --- Input Models ---


@dataclass(frozen=True)
class AssignRoleInput:
    """Input for assigning a role."""

    caller: Principal
    target: Principal
    role: RoleType | str


@dataclass(frozen=True)
class GetRoleInput:
    """Input for looking up a principal's role."""

    principal: Principal


# --- Output Models ---


@dataclass(frozen=True)
class AssignRoleOutput:
    """Output from role assignment."""

    assigned: bool
    error: ErrorKind | None = None
    success: bool = True


@dataclass(frozen=True)
class RoleOutput:
    """Output from role lookup."""

    principal: Principal
    role: RoleType
