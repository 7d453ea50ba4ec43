from __future__ import annotations

from typing import Optional, Sequence

from ..core.exceptions import ConflictError
from ..database.memory import MemoryDatabase
from .model import User
from .repository import UserRepository


class MemoryUserRepository(UserRepository):
    def __init__(self, db: MemoryDatabase):
        self._db = db
        self._by_phone: dict[str, int] = {}

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self._db.table("users").get(user_id)

    def get_by_phone(self, phone: str) -> Optional[User]:
        user_id = self._by_phone.get(phone)
        if user_id is None:
            return None
        return self.get_by_id(user_id)

    def create_user(
        self,
        *,
        phone: str,
        store_id: int,
        is_admin: bool = False,
        password_hash: Optional[str] = None,
    ) -> User:
        with self._db.transaction() as db:
            if phone in self._by_phone:
                raise ConflictError(f"Phone number already registered: {phone}")
            user = User(
                user_id=db.next_id("users"),
                phone=phone,
                store_id=int(store_id),
                is_admin=bool(is_admin),
                password_hash=password_hash,
            )
            db.table("users")[user.user_id] = user
            self._by_phone[phone] = user.user_id
            return user

    def list_all(self) -> Sequence[User]:
        return sorted(self._db.table("users").values(), key=lambda u: u.user_id)
