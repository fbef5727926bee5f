from __future__ import annotations

from dataclasses import dataclass

from ticketmarket.adapters.clock import SystemClock
from ticketmarket.adapters.settlement_stub import SettlementStubAdapter
from ticketmarket.components.audit import AuditTrail
from ticketmarket.components.events import EventRegistry
from ticketmarket.components.metadata import MetadataService
from ticketmarket.components.roles import RoleService
from ticketmarket.components.tickets import TicketEngine
from ticketmarket.core.store import MarketplaceStore
from ticketmarket.domain.entities import Principal
from ticketmarket.domain.policy import PolicyEngine
from ticketmarket.ports.clock import ClockPort
from ticketmarket.ports.settlement import SettlementPort
from ticketmarket.rules.models import Rules


@dataclass
class MarketplaceContext:
    store: MarketplaceStore
    policy: PolicyEngine
    audit: AuditTrail
    events: EventRegistry
    tickets: TicketEngine
    roles: RoleService
    metadata: MetadataService
    settlement: SettlementPort
    clock: ClockPort
    rules: Rules

    @classmethod
    def create(
        cls,
        owner: Principal,
        rules: Rules | None = None,
        clock: ClockPort | None = None,
        settlement: SettlementPort | None = None,
    ) -> MarketplaceContext:
        """Wire one marketplace instance. The owner starts out as Admin."""
        rules = rules or Rules()
        clock = clock or SystemClock()
        settlement = settlement or SettlementStubAdapter()

        store = MarketplaceStore(owner)
        policy = PolicyEngine(rules, owner)
        audit = AuditTrail(clock, enabled=rules.audit.enabled)

        return cls(
            store=store,
            policy=policy,
            audit=audit,
            events=EventRegistry(store, policy, clock, audit),
            tickets=TicketEngine(
                store,
                policy,
                clock,
                settlement,
                audit,
                max_resale_multiplier=rules.pricing.max_resale_multiplier,
                default_ticket_class=rules.tickets.default_class,
            ),
            roles=RoleService(store, policy, audit),
            metadata=MetadataService(store, policy),
            settlement=settlement,
            clock=clock,
            rules=rules,
        )
