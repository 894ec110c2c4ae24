from __future__ import annotations

from typing import Optional, Protocol

from .model import User


class UserRepository(Protocol):
    def get_by_email(self, email: str) -> Optional[User]:
        raise NotImplementedError

    def create_user(self, *, username: str, email: str, password_hash: str) -> int:
        """Insert a user; a taken email raises `ConflictError`."""

        raise NotImplementedError
