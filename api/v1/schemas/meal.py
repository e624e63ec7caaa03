from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from core.models.meal import NutritionTotals


class DailySummary(BaseModel):
    daily_goal: int
    calories_consumed: int
    calories_remaining: int      # may be negative
    meal_count: int
    totals: NutritionTotals

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
