"""
Events component - Port interfaces.
"""

from __future__ import annotations

from typing import Protocol


class ClockPort(Protocol):
    """Wall clock used for past-date checks."""

    def now_unix(self) -> int:
        """Get current time as unix seconds."""
        ...
