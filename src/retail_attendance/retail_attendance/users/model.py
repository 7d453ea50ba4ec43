from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class User:
    """Domain entity: a field staff member or an admin.

    ``store_id`` is the home store; staff may only log in there. Only a salted
    password hash is kept, and only admins have one.
    """

    user_id: int
    phone: str
    store_id: int
    is_admin: bool = False
    password_hash: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "id": self.user_id,
            "phone": self.phone,
            "storeId": self.store_id,
            "isAdmin": self.is_admin,
        }
