"""
Shared fixtures: a fake Gemini SDK client (no network) and a fresh
tracker session per test.
"""
from __future__ import annotations

import json
from unittest.mock import AsyncMock, MagicMock

import pytest

from core.ledger import MealLedger
from core.session import TrackerSession
from services.gemini import NutritionAnalyzer

@pytest.fixture
def pancakes() -> dict:
    return {
        "mealName": "Pancakes with blueberries & syrup",
        "mealType": "Breakfast",
        "calories": 300,
        "carbs": 45,
        "protein": 8,
        "fats": 10,
        "healthScore": 5,
        "advice": "Swap the syrup for fresh fruit to cut added sugar.",
    }


@pytest.fixture
def gemini_client(pancakes) -> MagicMock:
    """Stands in for `genai.Client`; only `aio.models.generate_content` is used."""
    client = MagicMock()
    client.aio.models.generate_content = AsyncMock(
        return_value=MagicMock(text=json.dumps(pancakes))
    )
    return client


@pytest.fixture
def client_factory(gemini_client) -> MagicMock:
    return MagicMock(return_value=gemini_client)


@pytest.fixture
def analyzer(client_factory) -> NutritionAnalyzer:
    return NutritionAnalyzer(
        api_key="test-key",
        model="gemini-2.5-flash",
        timeout_s=1.0,
        client_factory=client_factory,
    )


@pytest.fixture
def ledger() -> MealLedger:
    return MealLedger(daily_goal=2000)


@pytest.fixture
def tracker(analyzer, ledger) -> TrackerSession:
    return TrackerSession(analyzer, ledger)
