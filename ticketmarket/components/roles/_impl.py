"""
RoleService - role assignment and lookup.

Exactly one role per principal; principals without an assignment are users.
Only Admins may assign roles. Assignment overwrites unconditionally, so an
Admin can demote anyone, including themselves.
"""

from __future__ import annotations

import logging

from ticketmarket.components.audit import AuditAction, AuditTrail, EntityType
from ticketmarket.core.store import MarketplaceStore, atomic
from ticketmarket.domain.entities import Principal, RoleType
from ticketmarket.domain.errors import ErrorKind, MarketplaceError
from ticketmarket.domain.policy import PolicyEngine

logger = logging.getLogger(__name__)


class RoleService:
    def __init__(
        self,
        store: MarketplaceStore,
        policy: PolicyEngine,
        audit: AuditTrail,
    ) -> None:
        self._store = store
        self._policy = policy
        self._audit = audit

    @atomic
    def assign_role(self, caller: Principal, target: Principal, role: RoleType) -> bool:
        if not self._policy.can_assign_roles(self._store.role_of(caller)):
            logger.debug("assign_role denied: caller=%s target=%s", caller, target)
            raise MarketplaceError(ErrorKind.NOT_AUTHORIZED)

        previous = self._store.role_of(target)
        self._store.set_role(target, role)

        self._audit.record(
            AuditAction.ASSIGN_ROLE,
            EntityType.ROLE,
            target,
            caller,
            {"from": previous.value, "to": role.value},
        )
        logger.info("Role of %s set to %s by %s", target, role.value, caller)
        return True

    @atomic
    def get_user_role(self, principal: Principal) -> RoleType:
        return self._store.role_of(principal)
