"""Protected food and water tracking endpoints, mounted at /api/tracking."""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from gitfit.factory import ServiceFactory
from gitfit.domain.exceptions import EntryNotFoundError, InvalidDateRangeError
from gitfit.application.context import SessionContext
from gitfit.adapters.rest.dependencies import get_factory, get_session
from gitfit.adapters.rest.schemas import (
    DailySummaryOut,
    FoodCreatedOut,
    FoodEntryBody,
    FoodEntryOut,
    TotalsOut,
    WaterCountOut,
)

router = APIRouter(prefix="/api/tracking", tags=["tracking"])


@router.get("/food", response_model=list[FoodEntryOut])
async def list_food(
    start: Optional[date] = Query(None, description="YYYY-MM-DD, inclusive"),
    finish: Optional[date] = Query(None, description="YYYY-MM-DD, inclusive"),
    ctx: SessionContext = Depends(get_session),
    factory: ServiceFactory = Depends(get_factory),
):
    """Lifetime food entries, or the entries within [start, finish]."""
    service = factory.create_tracking_service()
    try:
        entries = await service.list_food(ctx, start, finish)
    except InvalidDateRangeError as exc:
        raise HTTPException(status_code=422, detail=str(exc))
    return [FoodEntryOut.from_entity(e) for e in entries]


@router.post("/food", response_model=FoodCreatedOut, status_code=201)
async def add_food(
    body: FoodEntryBody,
    ctx: SessionContext = Depends(get_session),
    factory: ServiceFactory = Depends(get_factory),
):
    service = factory.create_tracking_service()
    entry_id = await service.log_food(ctx, body.to_entity())
    return FoodCreatedOut(id=entry_id)


@router.get("/food/{entry_id}", response_model=FoodEntryOut)
async def get_food(
    entry_id: int,
    ctx: SessionContext = Depends(get_session),
    factory: ServiceFactory = Depends(get_factory),
):
    service = factory.create_tracking_service()
    try:
        entry = await service.get_food(ctx, entry_id)
    except EntryNotFoundError:
        raise HTTPException(status_code=404, detail="Food entry not found")
    return FoodEntryOut.from_entity(entry)


@router.delete("/food/{entry_id}", status_code=204)
async def remove_food(
    entry_id: int,
    ctx: SessionContext = Depends(get_session),
    factory: ServiceFactory = Depends(get_factory),
):
    service = factory.create_tracking_service()
    try:
        await service.remove_food(ctx, entry_id)
    except EntryNotFoundError:
        raise HTTPException(status_code=404, detail="Food entry not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/water", response_model=WaterCountOut, status_code=201)
async def add_water(
    ctx: SessionContext = Depends(get_session),
    factory: ServiceFactory = Depends(get_factory),
):
    """Log one 8 oz. cup of water and return today's count."""
    service = factory.create_tracking_service()
    await service.log_water(ctx)
    today = factory.today()
    return WaterCountOut(date=today, cups=await service.water_count(ctx, today))


@router.get("/water", response_model=WaterCountOut)
async def water_count(
    day: Optional[date] = Query(None, alias="date", description="YYYY-MM-DD, defaults to today"),
    ctx: SessionContext = Depends(get_session),
    factory: ServiceFactory = Depends(get_factory),
):
    service = factory.create_tracking_service()
    day = day or factory.today()
    return WaterCountOut(date=day, cups=await service.water_count(ctx, day))


@router.get("/summary", response_model=DailySummaryOut)
async def daily_summary(
    day: Optional[date] = Query(None, alias="date", description="YYYY-MM-DD, defaults to today"),
    ctx: SessionContext = Depends(get_session),
    factory: ServiceFactory = Depends(get_factory),
):
    service = factory.create_tracking_service()
    summary = await service.daily_summary(ctx, day or factory.today())
    return DailySummaryOut(
        date=summary.day,
        totals=TotalsOut(
            calories=summary.totals.calories,
            fat=summary.totals.fat,
            protein=summary.totals.protein,
            carbohydrates=summary.totals.carbohydrates,
        ),
        entry_count=summary.entry_count,
        water_cups=summary.water_cups,
        calorie_goal=summary.calorie_goal,
        water_goal=summary.water_goal,
        calories_remaining=summary.calories_remaining,
        water_remaining=summary.water_remaining,
    )
