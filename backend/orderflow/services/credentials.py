"""Credential Verification — the check performed before a session is issued.

Invariants:
    - A blank username is always rejected
    - UsernameOnlyVerifier does NOT check passwords

Design Decisions:
    - UsernameOnlyVerifier keeps the established login behaviour (any non-empty
      username is accepted) instead of inventing a password scheme; it warns
      once at startup so deployments notice
    - Real verification plugs in through the CredentialVerifier protocol
"""

import logging

from orderflow.core.domain_types import Username

logger = logging.getLogger(__name__)


class UsernameOnlyVerifier:
    """Accepts any non-empty username. Passwords are ignored.

    TODO: replace with a verifier backed by an identity provider before
    exposing the service beyond trusted networks.
    """

    def __init__(self) -> None:
        logger.warning(
            "Login accepts any non-empty username; passwords are not verified",
        )

    async def verify(self, username: Username, password: str) -> bool:
        return bool(username and username.strip())
