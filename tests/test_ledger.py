# tests/test_ledger.py
from __future__ import annotations

from datetime import datetime

import pytest
from pydantic import ValidationError

from core.ledger import SEED_MEALS, MealLedger, calories_remaining, format_clock
from core.models.meal import NutritionInfo


@pytest.fixture
def soup() -> NutritionInfo:
    return NutritionInfo(
        meal_name="Tomato Soup",
        meal_type="Lunch",
        calories=300,
        carbs=30,
        protein=6,
        fats=12,
        health_score=7,
        advice="Add some beans for protein.",
    )


# ── calories remaining ───────────────────────────────────────────────
def test_seed_scenario(soup):
    ledger = MealLedger(daily_goal=2000)
    assert ledger.calories_consumed() == 588
    assert ledger.calories_remaining() == 1412

    meal = ledger.append_meal(soup, "blob:meal-1")

    assert ledger.calories_consumed() == 888
    assert ledger.calories_remaining() == 1112
    assert ledger.meals[0] is meal


def test_empty_ledger_has_full_goal():
    assert MealLedger(seed=(), daily_goal=2000).calories_remaining() == 2000
    assert calories_remaining([], 1800) == 1800


def test_remaining_is_not_clamped(soup):
    ledger = MealLedger(seed=(), daily_goal=500)
    ledger.append_meal(soup, "a")
    ledger.append_meal(soup, "b")
    assert ledger.calories_remaining() == -100


def test_module_function_matches_method():
    ledger = MealLedger()
    assert calories_remaining(ledger, ledger.daily_goal) == ledger.calories_remaining()


# ── append ───────────────────────────────────────────────────────────
def test_same_info_twice_gives_two_meals(soup):
    ledger = MealLedger(seed=())
    first = ledger.append_meal(soup, "blob:1")
    second = ledger.append_meal(soup, "blob:2")

    assert len(ledger) == 2
    assert first.id != second.id
    assert [m.id for m in ledger] == [second.id, first.id]


def test_meal_carries_nutrition_and_stamp(soup):
    ledger = MealLedger(seed=(), clock=lambda: datetime(2024, 5, 1, 21, 41))
    meal = ledger.append_meal(soup, "blob:soup")

    assert meal.meal_name == "Tomato Soup"
    assert meal.calories == 300
    assert meal.timestamp == "9:41pm"
    assert meal.image_url == "blob:soup"


def test_meals_are_frozen(soup):
    meal = MealLedger(seed=()).append_meal(soup, "x")
    with pytest.raises(ValidationError):
        meal.calories = 0


def test_meals_view_is_read_only():
    ledger = MealLedger()
    assert isinstance(ledger.meals, tuple)
    assert len(ledger) == len(SEED_MEALS)


def test_totals_sum_macros(soup):
    ledger = MealLedger()
    ledger.append_meal(soup, "x")
    t = ledger.totals()
    assert (t.calories, t.protein, t.carbs, t.fats) == (888, 43, 95, 32)


# ── clock format ─────────────────────────────────────────────────────
@pytest.mark.parametrize(
    "moment, expected",
    [
        (datetime(2024, 1, 1, 9, 41), "9:41am"),
        (datetime(2024, 1, 1, 0, 5), "12:05am"),
        (datetime(2024, 1, 1, 12, 0), "12:00pm"),
        (datetime(2024, 1, 1, 13, 7), "1:07pm"),
    ],
)
def test_format_clock(moment, expected):
    assert format_clock(moment) == expected


def test_append_is_logged(soup, caplog):
    with caplog.at_level("INFO", logger="core.ledger"):
        MealLedger(seed=()).append_meal(soup, "x")
    assert "Tomato Soup" in caplog.text
