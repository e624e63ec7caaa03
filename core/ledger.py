"""
core/ledger.py
────────────────────────────────────────────────────────────────────────
In-memory meal ledger for one tracker session.

* newest meal first, append-only (no update / delete)
* seeded with two sample meals at start-up, reset on restart
* calories remaining = daily goal − Σ calories (never clamped)
"""

from __future__ import annotations

import logging
import uuid
from datetime import datetime
from typing import Callable, Iterable, Iterator

from core.models.meal import Meal, NutritionInfo, NutritionTotals

_LOG = logging.getLogger(__name__)

DEFAULT_DAILY_GOAL = 2000

# ────────────────────────────────────────────────────────────────────
SEED_MEALS: tuple[Meal, ...] = (
    Meal(
        id="1",
        meal_name="Caesar Salad",
        meal_type="Lunch",
        calories=133,
        protein=12,
        carbs=10,
        fats=5,
        health_score=8,
        advice="A light and healthy choice with lean protein.",
        timestamp="9:00am",
        image_url="https://images.unsplash.com/photo-1550304943-4f24f54ddde9?q=80&w=800&auto=format&fit=crop",
    ),
    Meal(
        id="2",
        meal_name="Sweet Corn Panner",
        meal_type="Dinner",
        calories=455,
        protein=25,
        carbs=55,
        fats=15,
        health_score=6,
        advice="A balanced meal with good amount of carbs and protein.",
        timestamp="9:00am",
        image_url="https://images.unsplash.com/photo-1540189549336-e6e99c3679fe?q=80&w=800&auto=format&fit=crop",
    ),
)


def format_clock(moment: datetime) -> str:
    """Short 12-hour clock: ``9:41am``, ``12:05pm``."""
    hour = moment.hour % 12 or 12
    suffix = "am" if moment.hour < 12 else "pm"
    return f"{hour}:{moment.minute:02d}{suffix}"


def calories_remaining(meals: Iterable[Meal], daily_goal: int = DEFAULT_DAILY_GOAL) -> int:
    return daily_goal - sum(m.calories for m in meals)


# ──────────────────────────────────────────────────────────────────────
#  Ledger
# ──────────────────────────────────────────────────────────────────────
class MealLedger:
    """Ordered, newest-first collection of accepted meals."""

    def __init__(
        self,
        seed: Iterable[Meal] = SEED_MEALS,
        daily_goal: int = DEFAULT_DAILY_GOAL,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self._meals: list[Meal] = list(seed)
        self.daily_goal = daily_goal
        self._clock = clock

    # --------------- read side --------------------------------------
    @property
    def meals(self) -> tuple[Meal, ...]:
        return tuple(self._meals)

    def __len__(self) -> int:
        return len(self._meals)

    def __iter__(self) -> Iterator[Meal]:
        return iter(tuple(self._meals))

    def calories_consumed(self) -> int:
        return sum(m.calories for m in self._meals)

    def calories_remaining(self) -> int:
        return calories_remaining(self._meals, self.daily_goal)

    def totals(self) -> NutritionTotals:
        return NutritionTotals(
            calories=self.calories_consumed(),
            carbs=sum(m.carbs for m in self._meals),
            protein=sum(m.protein for m in self._meals),
            fats=sum(m.fats for m in self._meals),
        )

    # --------------- write side -------------------------------------
    def append_meal(self, info: NutritionInfo, image_ref: str) -> Meal:
        """Stamp `info` with a fresh id, the local clock time and `image_ref`,
        then put it at the head of the ledger."""
        meal = Meal(
            **info.model_dump(include=set(NutritionInfo.model_fields)),
            id=uuid.uuid4().hex,
            timestamp=format_clock(self._clock()),
            image_url=image_ref,
        )
        self._meals.insert(0, meal)
        _LOG.info(
            "meal %s added: %s (%d kcal), %d kcal left",
            meal.id, meal.meal_name, meal.calories, self.calories_remaining(),
        )
        return meal
