"""
Request dependencies shared by the routers.

The ServiceFactory lives on ``app.state`` (placed there by the lifespan
hook). Protected routes take the caller's SessionContext, which is decoded
from the bearer token and nothing else.
"""

from __future__ import annotations

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from gitfit.factory import ServiceFactory
from gitfit.application.context import SessionContext
from gitfit.domain.exceptions import AuthenticationError

_bearer = HTTPBearer(auto_error=False)


def get_factory(request: Request) -> ServiceFactory:
    factory = getattr(request.app.state, "factory", None)
    if factory is None:
        raise RuntimeError("ServiceFactory not initialized.")
    return factory


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_session(
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer),
    factory: ServiceFactory = Depends(get_factory),
) -> SessionContext:
    """Context for the token's user; 401 when the token is absent or invalid."""
    if credentials is None:
        raise _unauthorized("Not authenticated.")
    try:
        return factory.create_authentication_service().open_session(credentials.credentials)
    except AuthenticationError as exc:
        raise _unauthorized(str(exc)) from exc
