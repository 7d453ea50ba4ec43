from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import User


class UserRepository(Protocol):
    """Repository interface for User.

    Note (DIP): services depend on this interface, not on a concrete store.
    """

    def get_by_id(self, user_id: int) -> Optional[User]:
        raise NotImplementedError

    def get_by_phone(self, phone: str) -> Optional[User]:
        raise NotImplementedError

    def create_user(
        self,
        *,
        phone: str,
        store_id: int,
        is_admin: bool = False,
        password_hash: Optional[str] = None,
    ) -> User:
        raise NotImplementedError

    def list_all(self) -> Sequence[User]:
        raise NotImplementedError
