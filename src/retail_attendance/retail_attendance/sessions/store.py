"""Server-side session records.

The client only ever sees a random token (inside Flask's signed cookie); the
store keys records by the SHA-256 of that token. Sessions end a fixed number
of hours after login no matter how active the client is; expired records are
dropped when looked up and whenever a new session is created.
"""
from __future__ import annotations

import hashlib
import logging
import secrets
import threading
from datetime import datetime, timedelta
from typing import Optional

from ..core.constants import DEFAULT_SESSION_HOURS
from ..users.model import User
from .model import SessionRecord

logger = logging.getLogger(__name__)


def generate_token() -> str:
    return secrets.token_hex(32)


def hash_token(token: str) -> str:
    return hashlib.sha256(token.encode("utf-8")).hexdigest()


class SessionStore:
    def __init__(self, *, lifetime: timedelta = timedelta(hours=DEFAULT_SESSION_HOURS)):
        self._lifetime = lifetime
        self._lock = threading.Lock()
        self._records: dict[str, SessionRecord] = {}

    def create(self, user: User, *, is_admin: bool, now: datetime) -> tuple[SessionRecord, str]:
        """Returns (record, plaintext_token)."""
        token = generate_token()
        record = SessionRecord(
            token_hash=hash_token(token),
            user_id=user.user_id,
            store_id=user.store_id,
            is_admin=bool(is_admin),
            login_time=now,
            expires_at=now + self._lifetime,
        )
        with self._lock:
            self._purge_locked(now)
            self._records[record.token_hash] = record
        return record, token

    def get(self, token: Optional[str], *, now: datetime) -> Optional[SessionRecord]:
        if not token:
            return None
        key = hash_token(token)
        with self._lock:
            record = self._records.get(key)
            if record and record.is_expired(now):
                logger.info("Session for user %s expired at %s", record.user_id, record.expires_at.isoformat())
                del self._records[key]
                return None
            return record

    def revoke(self, token: Optional[str]) -> bool:
        if not token:
            return False
        with self._lock:
            return self._records.pop(hash_token(token), None) is not None

    def purge_expired(self, *, now: datetime) -> int:
        with self._lock:
            return self._purge_locked(now)

    def _purge_locked(self, now: datetime) -> int:
        expired = [k for k, r in self._records.items() if r.is_expired(now)]
        for k in expired:
            del self._records[k]
        if expired:
            logger.info("Purged %d expired sessions", len(expired))
        return len(expired)

    def __len__(self) -> int:
        return len(self._records)
