"""Protected profile endpoints."""

from fastapi import APIRouter, Depends

from gitfit.factory import ServiceFactory
from gitfit.application.context import SessionContext
from gitfit.adapters.rest.dependencies import get_factory, get_session
from gitfit.adapters.rest.schemas import ProfileBody, ProfileOut

router = APIRouter(prefix="/profile", tags=["profile"])


@router.get("")
async def get_profile(
    ctx: SessionContext = Depends(get_session),
    factory: ServiceFactory = Depends(get_factory),
):
    service = factory.create_profile_service()
    user_entity = await factory.create_user_repository().get_by_id(ctx.user_id)
    current = await service.get_current_profile(ctx)
    history = await service.get_profile_history(ctx)
    return {
        "user_name": user_entity.user_name if user_entity else "",
        "first_name": user_entity.first_name if user_entity else "",
        "last_name": user_entity.last_name if user_entity else "",
        "current": ProfileOut.from_entity(current),
        "history": [ProfileOut.from_entity(p) for p in history],
    }


@router.post("", response_model=ProfileOut, status_code=201)
async def save_profile(
    body: ProfileBody,
    ctx: SessionContext = Depends(get_session),
    factory: ServiceFactory = Depends(get_factory),
):
    """Store a new profile snapshot; it becomes the current one."""
    service = factory.create_profile_service()
    await service.save_profile(ctx, body.to_entity())
    return ProfileOut.from_entity(await service.get_current_profile(ctx))
