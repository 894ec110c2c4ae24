from __future__ import annotations

from typing import Optional

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import require_fields
from ..core.exceptions import AuthenticationError, ConflictError
from .model import SessionUser
from .repository import UserRepository
from .session_store import InMemorySessionStore

INVALID_CREDENTIALS = "Invalid credentials"


class AuthService:
    """Use cases: register, login, logout.

    Login failures share one message whether the email is unknown or the
    password is wrong.
    """

    def __init__(
        self,
        users: UserRepository,
        sessions: InMemorySessionStore,
        *,
        hash_method: str = "scrypt",
    ):
        self._users = users
        self._sessions = sessions
        self._hash_method = hash_method

    def register(self, *, firstname: str, lastname: str, email: str, password: str) -> int:
        require_fields(
            {"firstname": firstname, "lastname": lastname, "email": email, "password": password},
            ("firstname", "lastname", "email", "password"),
        )

        username = f"{str(firstname).strip()} {str(lastname).strip()}".strip()
        password_hash = generate_password_hash(password, method=self._hash_method)
        try:
            return self._users.create_user(username=username, email=email, password_hash=password_hash)
        except ConflictError as e:
            raise ConflictError("Email already registered") from e

    def authenticate(self, *, email: str, password: str) -> SessionUser:
        require_fields({"email": email, "password": password}, ("email", "password"))

        user = self._users.get_by_email(email)
        if not user:
            raise AuthenticationError(INVALID_CREDENTIALS)

        try:
            ok = check_password_hash(user.password_hash, password)
        except ValueError:
            # stored value is not a werkzeug hash (e.g. a placeholder)
            ok = False

        if not ok:
            raise AuthenticationError(INVALID_CREDENTIALS)

        return SessionUser(id=user.id, username=user.username, email=user.email)

    def login(self, *, email: str, password: str) -> tuple[SessionUser, str]:
        """Authenticate and open a session. Returns the user and the session id."""
        user = self.authenticate(email=email, password=password)
        return user, self._sessions.create(user)

    def logout(self, session_id: Optional[str]) -> None:
        self._sessions.destroy(session_id)

    def current_user(self, session_id: Optional[str]) -> SessionUser:
        user = self._sessions.get(session_id)
        if not user:
            raise AuthenticationError("Not logged in")
        return user
