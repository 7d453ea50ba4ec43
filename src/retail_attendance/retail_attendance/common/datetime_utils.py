from __future__ import annotations

from datetime import datetime
from typing import Callable, Optional

Clock = Callable[[], datetime]


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def isoformat(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None


def minutes_between(start: datetime, end: datetime) -> int:
    """Whole minutes from start to end, rounded half up, never negative."""
    seconds = max((end - start).total_seconds(), 0.0)
    return int((seconds + 30) // 60)
