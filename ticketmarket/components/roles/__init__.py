"""
Roles component - Role assignment and lookup.
"""

from ._impl import RoleService
from .component import run, run_assign_role, run_get_role
from .models import AssignRoleInput, AssignRoleOutput, GetRoleInput, RoleOutput

__all__ = [
    # Entry points
    "run",
    "run_assign_role",
    "run_get_role",
    # Service
    "RoleService",
    # Models
    "AssignRoleInput",
    "AssignRoleOutput",
    "GetRoleInput",
    "RoleOutput",
]
