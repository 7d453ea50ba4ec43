from __future__ import annotations

from typing import Optional, Protocol

from werkzeug.security import check_password_hash, generate_password_hash


class PasswordVerifier(Protocol):
    def hash(self, password: str) -> str:
        raise NotImplementedError

    def verify(self, password_hash: Optional[str], password: str) -> bool:
        raise NotImplementedError


class WerkzeugPasswordVerifier(PasswordVerifier):
    """Salted hashes via werkzeug.security."""

    def hash(self, password: str) -> str:
        return generate_password_hash(password)

    def verify(self, password_hash: Optional[str], password: str) -> bool:
        if not password_hash:
            return False
        try:
            return check_password_hash(password_hash, password)
        except ValueError:
            # e.g. placeholder hashes or corrupted values
            return False
