from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """Registered account. `password_hash` never leaves the service layer."""

    id: int
    username: str
    email: str
    password_hash: str


@dataclass(frozen=True)
class SessionUser:
    """What login hands back and what a session remembers."""

    id: int
    username: str
    email: str

    def to_dict(self) -> dict:
        return {"id": self.id, "username": self.username, "email": self.email}
