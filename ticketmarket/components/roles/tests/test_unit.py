"""
Roles component unit tests.
"""

from __future__ import annotations

import pytest

from ticketmarket.components.audit import AuditAction, AuditTrail, EntityType
from ticketmarket.components.roles import (
    AssignRoleInput,
    GetRoleInput,
    RoleService,
    run,
    run_assign_role,
    run_get_role,
)
from ticketmarket.core.store import MarketplaceStore
from ticketmarket.domain.entities import RoleType
from ticketmarket.domain.errors import ErrorKind
from ticketmarket.domain.policy import PolicyEngine
from ticketmarket.rules.models import Rules

OWNER = "platform-owner"
ALICE = "alice"
BOB = "bob"


class MockClock:
    def now_unix(self) -> int:
        return 1_700_000_000


@pytest.fixture
def store() -> MarketplaceStore:
    return MarketplaceStore(OWNER)


@pytest.fixture
def audit() -> AuditTrail:
    return AuditTrail(MockClock())


@pytest.fixture
def service(store: MarketplaceStore, audit: AuditTrail) -> RoleService:
    return RoleService(store, PolicyEngine(Rules(), OWNER), audit)


def test_owner_starts_as_admin(service: RoleService) -> None:
    assert run_get_role(GetRoleInput(principal=OWNER), service).role == RoleType.ADMIN


def test_unassigned_principal_is_user(service: RoleService) -> None:
    result = run_get_role(GetRoleInput(principal="nobody"), service)

    assert result.principal == "nobody"
    assert result.role == RoleType.USER


def test_admin_assigns_role(service: RoleService, audit: AuditTrail) -> None:
    result = run_assign_role(
        AssignRoleInput(caller=OWNER, target=ALICE, role=RoleType.ORGANIZER), service
    )

    assert result.success is True
    assert result.assigned is True
    assert service.get_user_role(ALICE) == RoleType.ORGANIZER

    entry = audit.for_entity(EntityType.ROLE, ALICE)[0]
    assert entry.action == AuditAction.ASSIGN_ROLE
    assert entry.metadata == {"from": "user", "to": "organizer"}


def test_role_accepted_as_string(service: RoleService) -> None:
    result = run_assign_role(AssignRoleInput(caller=OWNER, target=ALICE, role="admin"), service)

    assert result.success is True
    assert service.get_user_role(ALICE) == RoleType.ADMIN


def test_unknown_role_string(service: RoleService) -> None:
    result = run_assign_role(AssignRoleInput(caller=OWNER, target=ALICE, role="root"), service)

    assert result.success is False
    assert result.error == ErrorKind.INVALID_OPERATION


def test_non_admin_cannot_assign(service: RoleService, audit: AuditTrail) -> None:
    result = run_assign_role(
        AssignRoleInput(caller=ALICE, target=BOB, role=RoleType.ADMIN), service
    )

    assert result.success is False
    assert result.assigned is False
    assert result.error == ErrorKind.NOT_AUTHORIZED
    assert service.get_user_role(BOB) == RoleType.USER
    assert len(audit.for_entity(EntityType.ROLE, BOB)) == 0


def test_organizer_cannot_assign(service: RoleService, store: MarketplaceStore) -> None:
    store.set_role(ALICE, RoleType.ORGANIZER)

    result = run_assign_role(
        AssignRoleInput(caller=ALICE, target=BOB, role=RoleType.ORGANIZER), service
    )

    assert result.error == ErrorKind.NOT_AUTHORIZED


def test_admin_can_demote_self(service: RoleService) -> None:
    run_assign_role(AssignRoleInput(caller=OWNER, target=OWNER, role=RoleType.USER), service)

    assert service.get_user_role(OWNER) == RoleType.USER
    again = run_assign_role(
        AssignRoleInput(caller=OWNER, target=OWNER, role=RoleType.ADMIN), service
    )
    assert again.error == ErrorKind.NOT_AUTHORIZED


def test_dispatch(service: RoleService) -> None:
    run(AssignRoleInput(caller=OWNER, target=ALICE, role=RoleType.ORGANIZER), service)

    assert run(GetRoleInput(principal=ALICE), service).role == RoleType.ORGANIZER

    with pytest.raises(ValueError):
        run(object(), service)  # type: ignore[arg-type]
