"""Session Store — maps opaque session tokens to usernames in a key-value store.

Invariants:
    - Keys are "session:<token>", values are the username, every key has the fixed TTL
    - Tokens come from secrets.token_urlsafe (cryptographically secure, never timestamps)
    - resolve() raises UnauthenticatedError for blank, unknown, expired or empty records;
      an expired session is indistinguishable from one never issued
    - No local caching: every resolve() is one round trip to the key-value store
    - Backend failures propagate as StoreError; they are not turned into 401s

Design Decisions:
    - Revocation (revoke) offered for logout; expiry itself stays with the backend TTL
    - Sessions cannot be listed: the adapter only knows the key it is asked about
"""

import logging
import secrets

from orderflow.core.domain_types import SessionToken, Username
from orderflow.core.errors import UnauthenticatedError
from orderflow.core.repository_protocols import KeyValueStore
from orderflow.services.deadlines import run_with_deadline

logger = logging.getLogger(__name__)

SESSION_KEY_PREFIX = "session:"


def session_key(token: str) -> str:
    return f"{SESSION_KEY_PREFIX}{token}"


class SessionStore:
    """Session adapter over a KeyValueStore."""

    def __init__(
        self,
        store: KeyValueStore,
        ttl_seconds: int = 3600,
        token_bytes: int = 32,
        timeout_seconds: float | None = None,
    ):
        self._store = store
        self.ttl_seconds = ttl_seconds
        self._token_bytes = token_bytes
        self._timeout = timeout_seconds

    async def create_session(self, username: Username) -> SessionToken:
        """Issue a new token for `username` and persist it with the TTL."""
        token = SessionToken(secrets.token_urlsafe(self._token_bytes))
        await run_with_deadline(
            self._store.set(session_key(token), username, self.ttl_seconds),
            "session.create", self._timeout,
        )
        logger.info("Session created", extra={"username": username})
        return token

    async def resolve(self, token: str | None) -> Username:
        """Return the username behind `token` or raise UnauthenticatedError."""
        if not token:
            raise UnauthenticatedError("missing session")
        username = await run_with_deadline(
            self._store.get(session_key(token)), "session.resolve", self._timeout,
        )
        if not username:
            raise UnauthenticatedError("invalid or expired session")
        return Username(username)

    async def revoke(self, token: str | None) -> bool:
        """Delete the session; True if a live session was removed."""
        if not token:
            return False
        removed = await run_with_deadline(
            self._store.delete(session_key(token)), "session.revoke", self._timeout,
        )
        if removed:
            logger.info("Session revoked")
        return removed
