from __future__ import annotations

import threading
from typing import Optional, Sequence

from ..core.enums import Role
from .model import User
from .repository import UserRepository


class InMemoryUserRepository(UserRepository):
    def __init__(self):
        self._lock = threading.Lock()
        self._by_id: dict[int, User] = {}
        self._next_id = 1

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self._by_id.get(int(user_id))

    def get_by_username(self, username: str) -> Optional[User]:
        for user in self._by_id.values():
            if user.username == username:
                return user
        return None

    def create_user(self, *, full_name: str, username: str, password_hash: str, role: Role) -> int:
        with self._lock:
            user_id = self._next_id
            self._next_id += 1
            self._by_id[user_id] = User(
                user_id=user_id,
                full_name=full_name,
                username=username,
                password_hash=password_hash,
                role=role,
                is_active=True,
            )
            return user_id

    def list_all(self) -> Sequence[User]:
        return sorted(self._by_id.values(), key=lambda u: u.user_id)
