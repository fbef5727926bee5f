from typing import Protocol


class ClockPort(Protocol):
    def now_unix(self) -> int:
        """Return current time as unix seconds."""
        ...
