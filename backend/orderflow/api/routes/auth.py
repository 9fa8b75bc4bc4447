"""Auth Routes — login issues a session cookie, logout revokes it.

Invariants:
    - POST /api/v1/login: blank username → 400; rejected credentials → 401;
      success → 200 + cookie (HttpOnly, Path=/, Max-Age = session TTL)
    - POST /api/v1/logout: 204 whether or not a live session was revoked;
      a session-store failure propagates as StoreError (500), cookie kept
    - The session token is only ever sent in Set-Cookie, never in a body or log

Design Decisions:
    - Credentials checked through the injected CredentialVerifier
      (services/credentials.py documents that passwords are not verified today)
    - SameSite=Lax and a configurable Secure flag (on by default: the service runs behind TLS)
"""

import logging

from fastapi import APIRouter, Depends, Request, Response, status

from orderflow.api.dependencies import get_credential_verifier, get_session_store
from orderflow.config import Settings, get_settings
from orderflow.core.domain_types import Username
from orderflow.core.errors import UnauthenticatedError
from orderflow.core.repository_protocols import CredentialVerifier
from orderflow.schemas.auth import LoginRequest, LoginResponse
from orderflow.services.session_store import SessionStore

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1", tags=["auth"])


@router.post("/login", response_model=LoginResponse)
async def login(
    body: LoginRequest,
    response: Response,
    sessions: SessionStore = Depends(get_session_store),
    verifier: CredentialVerifier = Depends(get_credential_verifier),
    settings: Settings = Depends(get_settings),
):
    """Authenticate and set the session cookie."""
    username = Username(body.username)
    if not await verifier.verify(username, body.password):
        raise UnauthenticatedError("invalid credentials")

    token = await sessions.create_session(username)
    response.set_cookie(
        key=settings.session_cookie_name,
        value=token,
        max_age=sessions.ttl_seconds,
        expires=sessions.ttl_seconds,
        path="/",
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax",
    )
    return LoginResponse(username=username, expires_in=sessions.ttl_seconds)


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(
    request: Request,
    response: Response,
    sessions: SessionStore = Depends(get_session_store),
    settings: Settings = Depends(get_settings),
):
    """Revoke the current session (if any) and clear the cookie."""
    await sessions.revoke(request.cookies.get(settings.session_cookie_name))
    response.delete_cookie(
        key=settings.session_cookie_name,
        path="/",
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax",
    )
