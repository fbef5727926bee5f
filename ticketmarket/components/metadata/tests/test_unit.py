"""
Metadata component unit tests.

Tests for token metadata, supply and balance queries, organizer listings
and event statistics.
"""

from __future__ import annotations

import pytest

from ticketmarket.components.metadata import (
    BalanceOfInput,
    EventStatsInput,
    MetadataService,
    OrganizerEventsInput,
    OwnerOfInput,
    TokenMetadataInput,
    TotalSupplyInput,
    run,
    run_balance_of,
    run_event_stats,
    run_organizer_events,
    run_owner_of,
    run_token_metadata,
    run_total_supply,
)
from ticketmarket.core.store import MarketplaceStore
from ticketmarket.domain.entities import (
    Event,
    RoleType,
    Ticket,
    TicketStatus,
    TicketTransfer,
)
from ticketmarket.domain.errors import ErrorKind
from ticketmarket.domain.policy import PolicyEngine
from ticketmarket.rules.models import Rules

NOW = 1_700_000_000

OWNER = "platform-owner"
ORGANIZER = "organizer-1"
ALICE = "alice"
BOB = "bob"


# --- Helpers ---


def _add_event(store: MarketplaceStore, organizer: str = ORGANIZER, price: int = 100) -> Event:
    event = Event(
        event_id=store.allocate_event_id(),
        name="Spring Concert",
        date=NOW + 86_400,
        venue="Main Hall",
        price=price,
        total_tickets=10,
        available_tickets=10,
        organizer=organizer,
    )
    return store.insert_event(event)


def _add_ticket(store: MarketplaceStore, event: Event, owner: str) -> Ticket:
    event.available_tickets -= 1
    ticket = Ticket(
        token_id=store.allocate_token_id(),
        event_id=event.event_id,
        owner=owner,
        original_price=event.price,
        current_price=event.price,
        purchase_history=[
            TicketTransfer(from_principal=event.organizer, to=owner, price=event.price, timestamp=NOW)
        ],
    )
    return store.insert_ticket(ticket)


# --- Fixtures ---


@pytest.fixture
def store() -> MarketplaceStore:
    return MarketplaceStore(OWNER)


@pytest.fixture
def service(store: MarketplaceStore) -> MetadataService:
    return MetadataService(store, PolicyEngine(Rules(), OWNER))


# --- Token queries ---


class TestTokenQueries:
    def test_token_metadata(self, store: MarketplaceStore, service: MetadataService) -> None:
        event = _add_event(store)
        _add_ticket(store, event, ALICE)

        metadata = run_token_metadata(TokenMetadataInput(token_id=1), service).metadata

        assert metadata is not None
        assert metadata.token_id == 1
        assert metadata.owner == ALICE
        assert metadata.metadata_blob is None
        assert metadata.properties == [("eventId", "1"), ("isValid", "true")]
        assert metadata.is_approved is False

    def test_token_metadata_invalidated(
        self, store: MarketplaceStore, service: MetadataService
    ) -> None:
        event = _add_event(store)
        ticket = _add_ticket(store, event, ALICE)
        ticket.status = TicketStatus.INVALIDATED

        metadata = service.get_token_metadata(1)

        assert ("isValid", "false") in metadata.properties

    def test_token_metadata_unknown(self, service: MetadataService) -> None:
        assert run_token_metadata(TokenMetadataInput(token_id=4), service).metadata is None

    def test_owner_of(self, store: MarketplaceStore, service: MetadataService) -> None:
        event = _add_event(store)
        _add_ticket(store, event, BOB)

        assert run_owner_of(OwnerOfInput(token_id=1), service).owner == BOB
        assert run_owner_of(OwnerOfInput(token_id=2), service).owner is None

    def test_balance_and_supply(self, store: MarketplaceStore, service: MetadataService) -> None:
        event = _add_event(store)
        _add_ticket(store, event, ALICE)
        _add_ticket(store, event, ALICE)
        _add_ticket(store, event, BOB)

        alice = run_balance_of(BalanceOfInput(owner=ALICE), service)

        assert alice.count == 2
        assert alice.token_ids == (1, 2)
        assert service.balance_of(BOB) == 1
        assert service.balance_of("nobody") == 0
        assert run_total_supply(TotalSupplyInput(), service).count == 3

    def test_supply_counts_tickets_that_moved(
        self, store: MarketplaceStore, service: MetadataService
    ) -> None:
        event = _add_event(store)
        ticket = _add_ticket(store, event, ALICE)
        store.reassign_owner(
            ticket, TicketTransfer(from_principal=ALICE, to=BOB, price=0, timestamp=NOW)
        )

        assert service.total_supply() == 1
        assert service.tokens_of(ALICE) == []
        assert service.tokens_of(BOB) == [1]


# --- Event queries ---


class TestEventQueries:
    def test_organizer_events(self, store: MarketplaceStore, service: MetadataService) -> None:
        _add_event(store)
        _add_event(store, organizer="organizer-2")
        _add_event(store)

        result = run_organizer_events(OrganizerEventsInput(organizer=ORGANIZER), service)

        assert result.total == 2
        assert [e.event_id for e in result.events] == [1, 3]

    def test_organizer_events_are_copies(
        self, store: MarketplaceStore, service: MetadataService
    ) -> None:
        _add_event(store)

        service.get_organizer_events(ORGANIZER)[0].name = "Changed"

        assert store.get_event(1).name == "Spring Concert"

    def test_event_stats(self, store: MarketplaceStore, service: MetadataService) -> None:
        event = _add_event(store, price=50)
        _add_ticket(store, event, ALICE)
        _add_ticket(store, event, BOB)
        third = _add_ticket(store, event, BOB)
        third.status = TicketStatus.INVALIDATED

        result = run_event_stats(EventStatsInput(caller=ORGANIZER, event_id=1), service)

        assert result.success is True
        assert result.stats.total_sold == 3
        assert result.stats.total_revenue == 150
        assert result.stats.valid_tickets == 2

    def test_event_stats_ignores_other_events(
        self, store: MarketplaceStore, service: MetadataService
    ) -> None:
        first = _add_event(store)
        second = _add_event(store)
        _add_ticket(store, second, ALICE)

        stats = service.get_event_stats(ORGANIZER, first.event_id)

        assert stats.total_sold == 0
        assert stats.total_revenue == 0

    def test_event_stats_admin(self, store: MarketplaceStore, service: MetadataService) -> None:
        _add_event(store)
        store.set_role(BOB, RoleType.ADMIN)

        assert run_event_stats(EventStatsInput(caller=BOB, event_id=1), service).success is True

    def test_event_stats_not_authorized(
        self, store: MarketplaceStore, service: MetadataService
    ) -> None:
        _add_event(store)

        result = run_event_stats(EventStatsInput(caller=ALICE, event_id=1), service)

        assert result.success is False
        assert result.stats is None
        assert result.error == ErrorKind.NOT_AUTHORIZED

    def test_event_stats_unknown(self, service: MetadataService) -> None:
        result = run_event_stats(EventStatsInput(caller=OWNER, event_id=9), service)

        assert result.error == ErrorKind.NOT_FOUND

    def test_dispatch(self, store: MarketplaceStore, service: MetadataService) -> None:
        _add_event(store)

        assert run(TotalSupplyInput(), service).count == 0
        assert run(OrganizerEventsInput(organizer=ORGANIZER), service).total == 1

        with pytest.raises(ValueError):
            run(object(), service)  # type: ignore[arg-type]
