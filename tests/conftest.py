from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta

import pytest


@dataclass
class FakeClock:
    """Deterministic clock advancing one minute per reading."""

    current: datetime = field(default_factory=lambda: datetime(2026, 1, 1, 9, 0, 0))
    step: timedelta = timedelta(minutes=1)
    calls: int = 0

    def __call__(self) -> datetime:
        value = self.current
        self.current += self.step
        self.calls += 1
        return value


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()
