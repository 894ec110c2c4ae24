from __future__ import annotations

import secrets
import threading
from typing import Dict, Optional

from .model import SessionUser


class InMemorySessionStore:
    """Server-side sessions keyed by an opaque id.

    Lives as long as the process. Entries go away only on logout.
    """

    def __init__(self):
        self._sessions: Dict[str, SessionUser] = {}
        self._lock = threading.Lock()

    def create(self, user: SessionUser) -> str:
        session_id = secrets.token_urlsafe(32)
        with self._lock:
            self._sessions[session_id] = user
        return session_id

    def get(self, session_id: Optional[str]) -> Optional[SessionUser]:
        if not session_id:
            return None
        with self._lock:
            return self._sessions.get(session_id)

    def destroy(self, session_id: Optional[str]) -> bool:
        if not session_id:
            return False
        with self._lock:
            return self._sessions.pop(session_id, None) is not None

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)
