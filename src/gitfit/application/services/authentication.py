"""
application.services.authentication - Accounts and bearer tokens.

A token is a signed SessionContext. Its claims carry the user id (``sub``)
and login that every tracking call needs, so adapters rebuild the context
from the token alone and never from client-side state.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Any

import bcrypt
from jose import JWTError, jwt

from gitfit.domain.entities import Credentials, User
from gitfit.domain.exceptions import AuthenticationError, DuplicateLoginError
from gitfit.domain.ports import CredentialsRepository, UserRepository
from gitfit.application.context import SessionContext
from gitfit.application.dto import AuthToken, LoginRequest, RegisterRequest

logger = logging.getLogger(__name__)

TOKEN_ALGORITHM = "HS256"


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("ascii")


def password_matches(password: str, password_hash: str) -> bool:
    return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("ascii"))


class AuthenticationService:
    """Registers accounts and converts between tokens and session contexts."""

    def __init__(
        self,
        user_repo: UserRepository,
        credentials_repo: CredentialsRepository,
        secret: str,
        expiry_hours: int = 24,
    ):
        self._users = user_repo
        self._credentials = credentials_repo
        self._secret = secret
        self._expiry = timedelta(hours=expiry_hours)

    async def register(self, request: RegisterRequest) -> AuthToken:
        if await self._credentials.find_by_login(request.login) is not None:
            raise DuplicateLoginError(f"Login '{request.login}' is already taken.")

        user_id = await self._users.save(User(
            user_name=request.login,
            first_name=request.first_name,
            last_name=request.last_name,
        ))
        await self._credentials.add(Credentials(
            user_id=user_id,
            login=request.login,
            password_hash=hash_password(request.password),
        ))
        return self.issue(SessionContext(user_id=user_id, login=request.login))

    async def login(self, request: LoginRequest) -> AuthToken:
        credentials = await self._credentials.find_by_login(request.login)
        if credentials is None or not password_matches(request.password, credentials.password_hash):
            logger.info("Rejected login for '%s'", request.login)
            raise AuthenticationError("Invalid login or password.")
        return self.issue(SessionContext(user_id=credentials.user_id, login=credentials.login))

    def open_session(self, token: str) -> SessionContext:
        """Context for a valid, unexpired token."""
        return self._context_from(self._decode(token))

    async def refresh(self, token: str) -> AuthToken:
        """Re-issue a token, expired or not, while its user still exists."""
        ctx = self._context_from(self._decode(token, verify_exp=False))
        if await self._users.get_by_id(ctx.user_id) is None:
            raise AuthenticationError("User no longer exists.")
        logger.info("Refreshed token for user %d", ctx.user_id)
        return self.issue(ctx)

    def issue(self, ctx: SessionContext) -> AuthToken:
        expires_at = datetime.now(timezone.utc) + self._expiry
        claims = {"sub": str(ctx.user_id), "login": ctx.login, "exp": expires_at}
        return AuthToken(
            access_token=jwt.encode(claims, self._secret, algorithm=TOKEN_ALGORITHM),
            user_id=ctx.user_id,
            login=ctx.login,
            expires_at=expires_at,
        )

    def _decode(self, token: str, verify_exp: bool = True) -> dict[str, Any]:
        try:
            return jwt.decode(
                token, self._secret,
                algorithms=[TOKEN_ALGORITHM],
                options={"verify_exp": verify_exp},
            )
        except JWTError as exc:
            raise AuthenticationError(f"Invalid token: {exc}") from exc

    @staticmethod
    def _context_from(claims: dict[str, Any]) -> SessionContext:
        try:
            user_id = int(claims["sub"])
        except (KeyError, TypeError, ValueError):
            raise AuthenticationError("Token does not name a user.") from None
        return SessionContext(user_id=user_id, login=claims.get("login", ""))
