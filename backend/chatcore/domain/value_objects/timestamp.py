"""
Timestamp Value Object - Creation time in epoch milliseconds.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from datetime import datetime, timezone


@dataclass(frozen=True, order=True)
class Timestamp:
    ms: int

    def __post_init__(self):
        if isinstance(self.ms, bool) or not isinstance(self.ms, int):
            raise ValueError(f"Timestamp must be integer milliseconds, got {self.ms!r}")

    @classmethod
    def now(cls) -> Timestamp:
        return cls(time.time_ns() // 1_000_000)

    @classmethod
    def from_ms(cls, ms: int) -> Timestamp:
        return cls(int(ms))

    def in_ms(self) -> int:
        return self.ms

    def to_datetime(self) -> datetime:
        return datetime.fromtimestamp(self.ms / 1000, tz=timezone.utc)

    def __str__(self) -> str:
        return self.to_datetime().isoformat()
