"""Dependencies — access to lifespan-built components and the session gate.

Invariants:
    - Components are read from app.state, populated once by the lifespan;
      routes never construct or look up storage clients themselves
    - require_session: no cookie → 401; cookie not resolvable → 401;
      otherwise an AuthenticatedUser is handed to the route
    - The gate keeps no state between requests

Design Decisions:
    - Dependency functions per component so tests swap them with
      app.dependency_overrides
    - Identity travels as a typed AuthenticatedUser argument, not a context bag
"""

import logging

from fastapi import Depends, Request

from orderflow.config import Settings, get_settings
from orderflow.core.domain_types import AuthenticatedUser, SessionToken
from orderflow.core.errors import UnauthenticatedError
from orderflow.core.repository_protocols import CredentialVerifier
from orderflow.services.order_service import OrderService
from orderflow.services.session_store import SessionStore

logger = logging.getLogger(__name__)


def get_order_service(request: Request) -> OrderService:
    return request.app.state.order_service


def get_session_store(request: Request) -> SessionStore:
    return request.app.state.session_store


def get_credential_verifier(request: Request) -> CredentialVerifier:
    return request.app.state.credential_verifier


async def require_session(
    request: Request,
    sessions: SessionStore = Depends(get_session_store),
    settings: Settings = Depends(get_settings),
) -> AuthenticatedUser:
    """Session gate for protected routes."""
    token = request.cookies.get(settings.session_cookie_name)
    if not token:
        logger.info(
            "Rejected request without session cookie",
            extra={"path": request.url.path},
        )
        raise UnauthenticatedError("missing session")
    username = await sessions.resolve(token)
    return AuthenticatedUser(username=username, session_token=SessionToken(token))
