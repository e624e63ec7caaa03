from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# camelCase on the wire (Gemini schema + page), snake_case in Python
_WIRE = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class NutritionInfo(BaseModel):
    """Nutrition estimate for one photographed meal, as returned by Gemini."""

    meal_name: str = Field(..., description="The name of the meal, e.g., 'Pancakes with blueberries & syrup'.")
    meal_type: str = Field(..., description="The type of meal, e.g., 'Breakfast', 'Lunch', 'Dinner', 'Snack'.")
    calories: int = Field(..., description="Estimated total calories.")
    carbs: int = Field(..., description="Estimated carbohydrates in grams.")
    protein: int = Field(..., description="Estimated protein in grams.")
    fats: int = Field(..., description="Estimated fats in grams.")
    health_score: int = Field(..., description="A health score from 1 (unhealthy) to 10 (very healthy).")
    advice: str = Field(..., description="A short piece of advice for this meal.")

    model_config = _WIRE


class Meal(NutritionInfo):
    """An accepted analysis stamped with id, clock time and image reference."""

    id: str
    timestamp: str      # display clock, e.g. "9:41am"
    image_url: str      # not persisted; object/data URL of the photo

    model_config = ConfigDict(**_WIRE, frozen=True)


class NutritionTotals(BaseModel):
    calories: int = 0
    carbs: int = 0
    protein: int = 0
    fats: int = 0

    model_config = _WIRE


class AnalysisResult(BaseModel):
    """A finished analysis waiting for the user to accept or dismiss it."""

    nutrition: NutritionInfo
    image_url: str

    model_config = ConfigDict(**_WIRE, frozen=True)
