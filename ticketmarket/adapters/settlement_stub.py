"""
Settlement stub adapter.

Stub implementation of SettlementPort that approves every sale.
Payment settlement is not performed by the marketplace core; this adapter
stands in for the external payment rails.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ticketmarket.domain.entities import Principal
from ticketmarket.ports.settlement import SettlementPort, SettlementResult

logger = logging.getLogger(__name__)


@dataclass
class SettlementStubAdapter:
    """
    Stub settlement adapter.

    Approves every request and remembers it. Individual payers can be
    marked as declined for testing.
    """

    _declined_payers: set[Principal] = field(default_factory=set)
    requests: list[SettlementResult] = field(default_factory=list)

    def settle(
        self,
        payer: Principal,
        payee: Principal,
        amount: int,
        token_id: int | None = None,
    ) -> SettlementResult:
        approved = payer not in self._declined_payers

        logger.debug(
            "SettlementStubAdapter.settle: payer=%s payee=%s amount=%d token_id=%s approved=%s",
            payer,
            payee,
            amount,
            token_id,
            approved,
        )

        result = SettlementResult(
            approved=approved,
            payer=payer,
            payee=payee,
            amount=amount,
            reference=f"stub-{len(self.requests) + 1}",
        )
        self.requests.append(result)
        return result

    # --- Testing Helpers ---

    def decline_payer(self, payer: Principal) -> None:
        """Make every settlement charged to payer fail."""
        self._declined_payers.add(payer)

    def clear_overrides(self) -> None:
        self._declined_payers.clear()


def _verify_protocol_compliance() -> None:
    """Verify SettlementStubAdapter satisfies SettlementPort protocol."""
    adapter: SettlementPort = SettlementStubAdapter()
    _ = adapter


_verify_protocol_compliance()
