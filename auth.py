"""
Credentials, sessions and the auth gate.

A session is an opaque random token handed to the client in an HTTP-only
cookie and mapped server-side to a user id with an expiry. The gate itself,
``resolve_identity``, is a pure function of the token, the session store and
the current time.
"""

import hashlib
import logging
import secrets
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Callable, Dict, Optional, Tuple

from fastapi import Depends, HTTPException, Request, Response

from config import Settings
from database import MemoryStorage
from schemas import User

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


# -------------------- Passwords --------------------

def hash_password(password: str, salt: Optional[str] = None, *, iterations: int) -> Tuple[str, str]:
    if not salt:
        salt = secrets.token_hex(16)
    h = hashlib.pbkdf2_hmac("sha256", password.encode(), salt.encode(), iterations).hex()
    return h, salt


def verify_password(password: str, salt: str, expected_hash: str, iterations: int) -> bool:
    h, _ = hash_password(password, salt, iterations=iterations)
    return secrets.compare_digest(h, expected_hash)


# -------------------- Sessions --------------------

@dataclass(frozen=True)
class Session:
    user_id: str
    expires_at: datetime


class SessionStore:
    def __init__(self, ttl: timedelta = timedelta(days=7), clock: Clock = utcnow):
        self.ttl = ttl
        self.clock = clock
        self._sessions: Dict[str, Session] = {}

    def issue(self, user_id: str) -> str:
        now = self.clock()
        self._sessions = {t: s for t, s in self._sessions.items() if s.expires_at > now}
        token = secrets.token_urlsafe(32)
        self._sessions[token] = Session(user_id=user_id, expires_at=now + self.ttl)
        return token

    def get(self, token: str) -> Optional[Session]:
        return self._sessions.get(token)

    def revoke(self, token: str) -> None:
        self._sessions.pop(token, None)

    def __len__(self) -> int:
        return len(self._sessions)


def resolve_identity(token: Optional[str], sessions: SessionStore, now: Optional[datetime] = None) -> Optional[str]:
    """Return the user id a token authenticates, or None for an anonymous caller."""
    if not token:
        return None
    session = sessions.get(token)
    if session is None:
        return None
    if (now or sessions.clock()) >= session.expires_at:
        logger.debug("Session for user %s expired", session.user_id)
        sessions.revoke(token)
        return None
    return session.user_id


# -------------------- Dependencies --------------------

def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_storage(request: Request) -> MemoryStorage:
    return request.app.state.storage


def get_sessions(request: Request) -> SessionStore:
    return request.app.state.sessions


def session_token(request: Request, settings: Settings = Depends(get_settings)) -> Optional[str]:
    return request.cookies.get(settings.SESSION_COOKIE_NAME)


def optional_user(
    token: Optional[str] = Depends(session_token),
    sessions: SessionStore = Depends(get_sessions),
    storage: MemoryStorage = Depends(get_storage),
) -> Optional[User]:
    user_id = resolve_identity(token, sessions)
    if user_id is None:
        return None
    user = storage.users.get_by_id(user_id)
    if user is None:
        # session outlived its user (store reset)
        sessions.revoke(token)
    return user


def auth_dependency(user: Optional[User] = Depends(optional_user)) -> User:
    if user is None:
        raise HTTPException(status_code=401, detail="Authentication required")
    return user


def start_session(
    response: Response,
    user: User,
    sessions: SessionStore,
    settings: Settings,
    previous: Optional[str] = None,
) -> str:
    """Issue a fresh token, dropping whichever one the client presented."""
    if previous:
        sessions.revoke(previous)
    token = sessions.issue(user.id)
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=token,
        max_age=int(sessions.ttl.total_seconds()),
        httponly=True,
        secure=settings.COOKIE_SECURE,
        samesite="lax",
    )
    return token


def end_session(response: Response, token: Optional[str], sessions: SessionStore, settings: Settings) -> None:
    if token:
        sessions.revoke(token)
    response.delete_cookie(settings.SESSION_COOKIE_NAME)
