from pathlib import Path

import pytest

from ticketmarket.context import MarketplaceContext
from ticketmarket.rules.loader import load_rules

NOW = 1_700_000_000
DAY = 86_400

OWNER = "platform-owner"


class MockClock:
    """Settable clock shared by every service of a test context."""

    def __init__(self, now: int = NOW) -> None:
        self._now = now

    def now_unix(self) -> int:
        return self._now

    def advance(self, seconds: int) -> None:
        self._now += seconds


@pytest.fixture
def project_root() -> Path:
    return Path(__file__).parent.parent


@pytest.fixture
def rules_path(project_root: Path) -> Path:
    return project_root / "rules.yaml"


@pytest.fixture
def clock() -> MockClock:
    return MockClock()


@pytest.fixture
def ctx(rules_path: Path, clock: MockClock) -> MarketplaceContext:
    """
    A full marketplace wired from the real rules.yaml, a mock clock and the
    settlement stub.
    """
    return MarketplaceContext.create(OWNER, rules=load_rules(rules_path), clock=clock)
