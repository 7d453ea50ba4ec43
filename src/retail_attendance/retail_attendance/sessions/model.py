from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class SessionRecord:
    """Server-side session state bound to an opaque cookie token."""

    token_hash: str
    user_id: int
    store_id: Optional[int]
    is_admin: bool
    login_time: datetime
    expires_at: datetime

    def is_expired(self, now: datetime) -> bool:
        return now >= self.expires_at
