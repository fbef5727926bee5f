"""
Events component unit tests.

Tests for event creation, partial updates, cancellation and queries.
"""

from __future__ import annotations

import pytest

from ticketmarket.components.audit import AuditAction, AuditTrail, EntityType
from ticketmarket.components.events import (
    CancelEventInput,
    CreateEventInput,
    EventRegistry,
    GetEventInput,
    ListEventsInput,
    UpdateEventInput,
    run,
    run_cancel,
    run_create,
    run_get,
    run_list,
    run_update,
)
from ticketmarket.core.store import MarketplaceStore
from ticketmarket.domain.entities import EventStatus, RoleType
from ticketmarket.domain.errors import ErrorKind, MarketplaceError
from ticketmarket.domain.policy import PolicyEngine
from ticketmarket.rules.models import RbacRules, Rules

NOW = 1_700_000_000
DAY = 86_400

OWNER = "platform-owner"
ORGANIZER = "organizer-1"
OTHER = "someone-else"


# --- Mock Implementations ---


class MockClock:
    """Mock clock for deterministic testing."""

    def __init__(self, now: int = NOW) -> None:
        self._now = now

    def now_unix(self) -> int:
        return self._now

    def advance(self, seconds: int) -> None:
        self._now += seconds


# --- Fixtures ---


@pytest.fixture
def clock() -> MockClock:
    return MockClock()


@pytest.fixture
def store() -> MarketplaceStore:
    return MarketplaceStore(OWNER)


@pytest.fixture
def audit(clock: MockClock) -> AuditTrail:
    return AuditTrail(clock)


@pytest.fixture
def registry(store: MarketplaceStore, clock: MockClock, audit: AuditTrail) -> EventRegistry:
    return EventRegistry(store, PolicyEngine(Rules(), OWNER), clock, audit)


def _create(registry: EventRegistry, caller: str = ORGANIZER, **overrides):
    fields = {
        "name": "Spring Concert",
        "date": NOW + 30 * DAY,
        "venue": "Main Hall",
        "price": 100,
        "total_tickets": 2,
    }
    fields.update(overrides)
    return run_create(CreateEventInput(caller=caller, **fields), registry)


# --- Create ---


class TestCreateEvent:
    def test_create_success(self, registry: EventRegistry) -> None:
        result = _create(registry)

        assert result.success is True
        assert result.error is None
        event = result.event
        assert event is not None
        assert event.event_id == 1
        assert event.organizer == ORGANIZER
        assert event.available_tickets == 2
        assert event.total_tickets == 2
        assert event.status == EventStatus.ACTIVE
        assert event.is_active is True
        assert event.description == ""
        assert event.image_url is None

    def test_ids_are_sequential(self, registry: EventRegistry) -> None:
        first = _create(registry)
        second = _create(registry, name="Autumn Concert")

        assert first.event.event_id == 1
        assert second.event.event_id == 2

    def test_optional_fields(self, registry: EventRegistry) -> None:
        result = _create(registry, description="Open air", image_url="https://img/1.png")

        assert result.event.description == "Open air"
        assert result.event.image_url == "https://img/1.png"

    def test_empty_name_rejected(self, registry: EventRegistry, store: MarketplaceStore) -> None:
        result = _create(registry, name="")

        assert result.success is False
        assert result.error == ErrorKind.INVALID_OPERATION
        assert list(store.iter_events()) == []

    def test_past_date_rejected(self, registry: EventRegistry) -> None:
        result = _create(registry, date=NOW - 1)

        assert result.success is False
        assert result.error == ErrorKind.INVALID_OPERATION

    def test_negative_price_rejected(self, registry: EventRegistry) -> None:
        result = _create(registry, price=-1)

        assert result.error == ErrorKind.INVALID_OPERATION

    def test_zero_tickets_allowed(self, registry: EventRegistry) -> None:
        result = _create(registry, total_tickets=0)

        assert result.success is True
        assert result.event.available_tickets == 0

    def test_rbac_can_forbid_creation(
        self, store: MarketplaceStore, clock: MockClock, audit: AuditTrail
    ) -> None:
        rules = Rules(rbac=RbacRules(roles={"admin": ["*"], "organizer": ["events:*"]}))
        registry = EventRegistry(store, PolicyEngine(rules, OWNER), clock, audit)

        assert _create(registry, caller=OTHER).error == ErrorKind.NOT_AUTHORIZED

        store.set_role(OTHER, RoleType.ORGANIZER)
        assert _create(registry, caller=OTHER).success is True

    def test_create_is_audited(self, registry: EventRegistry, audit: AuditTrail) -> None:
        _create(registry)

        entries = audit.for_entity(EntityType.EVENT, 1)
        assert len(entries) == 1
        assert entries[0].action == AuditAction.CREATE
        assert entries[0].actor == ORGANIZER


# --- Update ---


class TestUpdateEvent:
    def test_partial_update_keeps_other_fields(self, registry: EventRegistry) -> None:
        _create(registry)

        result = run_update(
            UpdateEventInput(caller=ORGANIZER, event_id=1, venue="Side Hall"), registry
        )

        assert result.success is True
        assert result.event.venue == "Side Hall"
        assert result.event.name == "Spring Concert"
        assert result.event.price == 100

    def test_raising_total_adds_to_availability(
        self, registry: EventRegistry, store: MarketplaceStore
    ) -> None:
        _create(registry)
        store.get_event(1).available_tickets = 0  # both sold

        result = run_update(
            UpdateEventInput(caller=ORGANIZER, event_id=1, total_tickets=5), registry
        )

        assert result.event.total_tickets == 5
        assert result.event.available_tickets == 3

    def test_lowering_total_rejected(self, registry: EventRegistry) -> None:
        _create(registry, total_tickets=5)

        result = run_update(
            UpdateEventInput(caller=ORGANIZER, event_id=1, total_tickets=4), registry
        )

        assert result.error == ErrorKind.INVALID_OPERATION

    def test_rejected_update_changes_nothing(self, registry: EventRegistry) -> None:
        _create(registry)

        result = run_update(
            UpdateEventInput(
                caller=ORGANIZER, event_id=1, venue="Elsewhere", date=NOW - DAY
            ),
            registry,
        )

        assert result.success is False
        assert registry.get_event(1).venue == "Main Hall"

    def test_empty_name_rejected(self, registry: EventRegistry) -> None:
        _create(registry)

        result = run_update(UpdateEventInput(caller=ORGANIZER, event_id=1, name=""), registry)

        assert result.error == ErrorKind.INVALID_OPERATION

    def test_non_organizer_rejected(self, registry: EventRegistry) -> None:
        _create(registry)

        result = run_update(UpdateEventInput(caller=OTHER, event_id=1, name="Mine"), registry)

        assert result.success is False
        assert result.error == ErrorKind.NOT_AUTHORIZED

    def test_admin_may_update(self, registry: EventRegistry) -> None:
        _create(registry)

        result = run_update(UpdateEventInput(caller=OWNER, event_id=1, price=80), registry)

        assert result.success is True
        assert result.event.price == 80

    def test_unknown_event(self, registry: EventRegistry) -> None:
        result = run_update(UpdateEventInput(caller=ORGANIZER, event_id=99, name="x"), registry)

        assert result.error == ErrorKind.NOT_FOUND

    def test_deactivate_and_reactivate(self, registry: EventRegistry) -> None:
        _create(registry)

        off = run_update(UpdateEventInput(caller=ORGANIZER, event_id=1, is_active=False), registry)
        assert off.event.status == EventStatus.CANCELLED

        on = run_update(UpdateEventInput(caller=ORGANIZER, event_id=1, is_active=True), registry)
        assert on.event.status == EventStatus.ACTIVE

    def test_clear_image_url(self, registry: EventRegistry) -> None:
        _create(registry, image_url="https://img/1.png")

        result = run_update(
            UpdateEventInput(caller=ORGANIZER, event_id=1, clear_image_url=True), registry
        )

        assert result.event.image_url is None

    def test_unknown_field_rejected(self, registry: EventRegistry) -> None:
        _create(registry)

        with pytest.raises(MarketplaceError) as exc:
            registry.update_event(ORGANIZER, 1, {"organizer": OTHER})
        assert exc.value.kind == ErrorKind.INVALID_OPERATION

    def test_update_is_audited(self, registry: EventRegistry, audit: AuditTrail) -> None:
        _create(registry)
        run_update(UpdateEventInput(caller=ORGANIZER, event_id=1, venue="Side Hall"), registry)

        latest = audit.for_entity(EntityType.EVENT, 1)[0]
        assert latest.action == AuditAction.UPDATE
        assert latest.metadata["fields"] == ["venue"]


# --- Cancel ---


class TestCancelEvent:
    def test_cancel_success(self, registry: EventRegistry) -> None:
        _create(registry)

        result = run_cancel(CancelEventInput(caller=ORGANIZER, event_id=1), registry)

        assert result.cancelled is True
        event = registry.get_event(1)
        assert event.status == EventStatus.CANCELLED
        assert event.available_tickets == 2

    def test_cancel_not_authorized(self, registry: EventRegistry) -> None:
        _create(registry)

        result = run_cancel(CancelEventInput(caller=OTHER, event_id=1), registry)

        assert result.cancelled is False
        assert result.error == ErrorKind.NOT_AUTHORIZED
        assert registry.get_event(1).is_active is True

    def test_cancel_unknown(self, registry: EventRegistry) -> None:
        result = run_cancel(CancelEventInput(caller=ORGANIZER, event_id=7), registry)

        assert result.error == ErrorKind.NOT_FOUND


# --- Queries ---


class TestEventQueries:
    def test_get_returns_copy(self, registry: EventRegistry, store: MarketplaceStore) -> None:
        _create(registry)

        result = run_get(GetEventInput(event_id=1), registry)
        result.event.available_tickets = 0

        assert store.get_event(1).available_tickets == 2

    def test_get_unknown(self, registry: EventRegistry) -> None:
        result = run_get(GetEventInput(event_id=3), registry)

        assert result.success is False
        assert result.error == ErrorKind.NOT_FOUND

    def test_list_filters_inactive(self, registry: EventRegistry) -> None:
        _create(registry)
        _create(registry, name="Second")
        run_cancel(CancelEventInput(caller=ORGANIZER, event_id=1), registry)

        everything = run_list(ListEventsInput(), registry)
        active = run_list(ListEventsInput(active_only=True), registry)

        assert [e.event_id for e in everything.events] == [1, 2]
        assert active.total == 1
        assert active.events[0].event_id == 2

    def test_dispatch(self, registry: EventRegistry) -> None:
        created = run(
            CreateEventInput(
                caller=ORGANIZER,
                name="Gig",
                date=NOW + DAY,
                venue="Club",
                price=10,
                total_tickets=1,
            ),
            registry,
        )
        fetched = run(GetEventInput(event_id=created.event.event_id), registry)

        assert fetched.event.name == "Gig"

    def test_dispatch_unknown_input(self, registry: EventRegistry) -> None:
        with pytest.raises(ValueError):
            run(object(), registry)  # type: ignore[arg-type]
