from __future__ import annotations

from functools import wraps
from typing import Optional

from flask import g, jsonify, session

from ..common.datetime_utils import Clock
from .model import SessionRecord
from .store import SessionStore

SESSION_COOKIE_KEY = "sid"


class SessionGuards:
    """Binds Flask's cookie session to server-side session records.

    ``login_required`` admits any live session (401 otherwise);
    ``admin_required`` additionally needs an admin session (403 otherwise).
    Neither touches application state on rejection.
    """

    def __init__(self, store: SessionStore, clock: Clock):
        self._store = store
        self._clock = clock

    def current(self) -> Optional[SessionRecord]:
        return self._store.get(session.get(SESSION_COOKIE_KEY), now=self._clock())

    def start(self, token: str) -> None:
        self.end()
        session.clear()
        session.permanent = True
        session[SESSION_COOKIE_KEY] = token

    def end(self) -> None:
        self._store.revoke(session.get(SESSION_COOKIE_KEY))
        session.pop(SESSION_COOKIE_KEY, None)

    def login_required(self, view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            record = self.current()
            if not record:
                return jsonify({"message": "Unauthorized"}), 401
            g.session_record = record
            return view(*args, **kwargs)

        return wrapper

    def admin_required(self, view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            record = self.current()
            if not record:
                return jsonify({"message": "Unauthorized"}), 401
            if not record.is_admin:
                return jsonify({"message": "Forbidden"}), 403
            g.session_record = record
            return view(*args, **kwargs)

        return wrapper
