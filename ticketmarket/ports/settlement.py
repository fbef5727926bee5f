"""
Settlement port interface.

External interface for the payment rails that move funds when a ticket
changes hands. The marketplace core only asks for approval; it never moves
funds itself.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from ticketmarket.domain.entities import Principal

# --- Models ---


@dataclass(frozen=True)
class SettlementResult:
    """
    Result of a settlement request.

    Attributes:
        approved: Whether the payment rail accepted the charge
        payer: Principal being charged
        payee: Principal being paid
        amount: Nominal price in integer units
        reference: Optional rail-specific reference
    """

    approved: bool
    payer: Principal
    payee: Principal
    amount: int
    reference: str | None = None


# --- Port Interface ---


class SettlementPort(Protocol):
    """
    Port for payment settlement.

    Implementations:
    - SettlementStubAdapter: Always approves (no funds move)
    - Wallet/ledger adapters: Real settlement (out of scope)
    """

    def settle(
        self,
        payer: Principal,
        payee: Principal,
        amount: int,
        token_id: int | None = None,
    ) -> SettlementResult:
        """
        Request settlement of a ticket sale.

        Args:
            payer: Buyer principal
            payee: Seller principal (organizer on primary sale)
            amount: Nominal price
            token_id: Ticket being sold, None before the token is minted

        Returns:
            SettlementResult; approved=False makes the sale fail.
        """
        ...
