"""
Tickets component - Port interfaces.
"""

from __future__ import annotations

from typing import Protocol

from ticketmarket.ports.settlement import SettlementPort, SettlementResult


class ClockPort(Protocol):
    """Wall clock used for purchase timestamps and past-date checks."""

    def now_unix(self) -> int:
        """Get current time as unix seconds."""
        ...


__all__ = ["ClockPort", "SettlementPort", "SettlementResult"]
