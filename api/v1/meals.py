# api/v1/meals.py
from __future__ import annotations
from fastapi import APIRouter, Depends, status

from core.models.meal import Meal
from core.session import TrackerSession
from services.tracker import get_tracker
from api.v1.schemas import DailySummary

router = APIRouter()


@router.get(
    "",
    response_model=list[Meal],
    status_code=status.HTTP_200_OK,
    summary="List today's meals, newest first",
)
async def list_meals(tracker: TrackerSession = Depends(get_tracker)) -> list[Meal]:
    return list(tracker.ledger.meals)


@router.get(
    "/summary",
    response_model=DailySummary,
    summary="Calories left against the daily goal",
)
async def daily_summary(tracker: TrackerSession = Depends(get_tracker)) -> DailySummary:
    ledger = tracker.ledger
    return DailySummary(
        daily_goal=ledger.daily_goal,
        calories_consumed=ledger.calories_consumed(),
        calories_remaining=ledger.calories_remaining(),
        meal_count=len(ledger),
        totals=ledger.totals(),
    )
