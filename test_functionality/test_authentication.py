"""
Test registration, login and bearer tokens.
"""
import asyncio
from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt

from gitfit.application.context import SessionContext
from gitfit.application.dto import LoginRequest, RegisterRequest
from gitfit.domain.exceptions import AuthenticationError, DuplicateLoginError


def test_register_then_login(factory):
    auth = factory.create_authentication_service()
    registered = asyncio.run(auth.register(RegisterRequest(login="carol", password="hunter22", first_name="Carol")))
    logged_in = asyncio.run(auth.login(LoginRequest(login="carol", password="hunter22")))

    assert registered.user_id == logged_in.user_id
    ctx = auth.open_session(logged_in.access_token)
    assert ctx.user_id == registered.user_id
    assert ctx.login == "carol"

    user = asyncio.run(factory.create_user_repository().get_by_id(registered.user_id))
    assert user.user_name == "carol"
    assert user.first_name == "Carol"


def test_token_claims_carry_the_session(factory, settings):
    auth = factory.create_authentication_service()
    token = asyncio.run(auth.register(RegisterRequest(login="ivan", password="hunter22")))

    claims = jwt.decode(token.access_token, settings.jwt_secret, algorithms=["HS256"])
    assert claims["sub"] == str(token.user_id)
    assert claims["login"] == "ivan"
    assert "role" not in claims
    assert token.expires_at > datetime.now(timezone.utc)


def test_duplicate_login_rejected(factory):
    auth = factory.create_authentication_service()
    asyncio.run(auth.register(RegisterRequest(login="dave", password="hunter22")))
    with pytest.raises(DuplicateLoginError):
        asyncio.run(auth.register(RegisterRequest(login="dave", password="other-pass")))


def test_wrong_password_rejected(factory):
    auth = factory.create_authentication_service()
    asyncio.run(auth.register(RegisterRequest(login="erin", password="hunter22")))
    with pytest.raises(AuthenticationError):
        asyncio.run(auth.login(LoginRequest(login="erin", password="wrong-pass")))
    with pytest.raises(AuthenticationError):
        asyncio.run(auth.login(LoginRequest(login="nobody", password="hunter22")))


def test_garbage_token_rejected(factory):
    with pytest.raises(AuthenticationError):
        factory.create_authentication_service().open_session("not-a-jwt")


def test_token_without_subject_rejected(factory, settings):
    token = jwt.encode({"login": "ghost"}, settings.jwt_secret, algorithm="HS256")
    with pytest.raises(AuthenticationError):
        factory.create_authentication_service().open_session(token)


def test_expired_token_refreshes_for_same_user(factory, settings):
    auth = factory.create_authentication_service()
    token = asyncio.run(auth.register(RegisterRequest(login="frank", password="hunter22")))
    expired = jwt.encode(
        {
            "sub": str(token.user_id),
            "login": "frank",
            "exp": datetime.now(timezone.utc) - timedelta(hours=1),
        },
        settings.jwt_secret,
        algorithm="HS256",
    )
    with pytest.raises(AuthenticationError):
        auth.open_session(expired)

    refreshed = asyncio.run(auth.refresh(expired))
    assert refreshed.user_id == token.user_id
    assert auth.open_session(refreshed.access_token).login == "frank"


def test_refresh_rejects_unknown_user(factory):
    auth = factory.create_authentication_service()
    stray = auth.issue(SessionContext(user_id=999, login="nobody"))
    with pytest.raises(AuthenticationError):
        asyncio.run(auth.refresh(stray.access_token))
