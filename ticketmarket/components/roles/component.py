"""
Roles component - Authorization layer entry points.

Invariants:
- I1: Only Admins assign roles
- I2: Unassigned principals resolve to the user role
"""

from __future__ import annotations

from ticketmarket.domain.entities import RoleType
from ticketmarket.domain.errors import ErrorKind, MarketplaceError

from ._impl import RoleService
from .models import AssignRoleInput, AssignRoleOutput, GetRoleInput, RoleOutput


def run_assign_role(inp: AssignRoleInput, service: RoleService) -> AssignRoleOutput:
    """Assign a role to a principal."""
    try:
        role = RoleType(inp.role)
    except ValueError:
        return AssignRoleOutput(
            assigned=False, error=ErrorKind.INVALID_OPERATION, success=False
        )

    try:
        assigned = service.assign_role(inp.caller, inp.target, role)
    except MarketplaceError as e:
        return AssignRoleOutput(assigned=False, error=e.kind, success=False)

    return AssignRoleOutput(assigned=assigned)


def run_get_role(inp: GetRoleInput, service: RoleService) -> RoleOutput:
    """Look up a principal's role."""
    return RoleOutput(principal=inp.principal, role=service.get_user_role(inp.principal))


def run(
    inp: AssignRoleInput | GetRoleInput,
    service: RoleService,
) -> AssignRoleOutput | RoleOutput:
    if isinstance(inp, AssignRoleInput):
        return run_assign_role(inp, service)
    elif isinstance(inp, GetRoleInput):
        return run_get_role(inp, service)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
