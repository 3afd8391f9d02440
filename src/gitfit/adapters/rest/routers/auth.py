"""Account endpoints. Each success answers with a fresh bearer token."""

from fastapi import APIRouter, Depends, HTTPException, status

from gitfit.factory import ServiceFactory
from gitfit.domain.exceptions import AuthenticationError, DuplicateLoginError
from gitfit.application.dto import AuthToken, LoginRequest, RegisterRequest
from gitfit.application.services.authentication import AuthenticationService
from gitfit.adapters.rest.dependencies import get_factory
from gitfit.adapters.rest.schemas import LoginBody, RefreshBody, RegisterBody, TokenResponse

router = APIRouter(prefix="/auth", tags=["auth"])


def _auth_service(factory: ServiceFactory = Depends(get_factory)) -> AuthenticationService:
    return factory.create_authentication_service()


def _token_out(token: AuthToken) -> TokenResponse:
    return TokenResponse(
        access_token=token.access_token,
        token_type=token.token_type,
        user_id=token.user_id,
        login=token.login,
        expires_at=token.expires_at,
    )


@router.post("/register", response_model=TokenResponse, status_code=201)
async def register(body: RegisterBody, auth: AuthenticationService = Depends(_auth_service)):
    try:
        token = await auth.register(RegisterRequest(**body.model_dump()))
    except DuplicateLoginError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    return _token_out(token)


@router.post("/login", response_model=TokenResponse)
async def login(body: LoginBody, auth: AuthenticationService = Depends(_auth_service)):
    try:
        token = await auth.login(LoginRequest(**body.model_dump()))
    except AuthenticationError as exc:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(exc)) from exc
    return _token_out(token)


@router.post("/refresh", response_model=TokenResponse)
async def refresh(body: RefreshBody, auth: AuthenticationService = Depends(_auth_service)):
    """Swap a live or expired token for one with a new expiry."""
    try:
        token = await auth.refresh(body.token)
    except AuthenticationError as exc:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(exc)) from exc
    return _token_out(token)
