# services/tracker.py
"""Process-wide tracker session used by the routers.

Built once at import so concurrent first requests share one session.
"""
from __future__ import annotations

import logging

from config import settings
from core.ledger import MealLedger
from core.session import TrackerSession
from services.gemini import get_analyzer

_LOG = logging.getLogger(__name__)


def _build_tracker() -> TrackerSession:
    analyzer = get_analyzer()
    if not analyzer.configured:
        _LOG.warning("GEMINI_API_KEY not set; photo analysis will be refused")
    return TrackerSession(
        analyzer, MealLedger(daily_goal=settings.daily_calorie_goal)
    )


_SESSION: TrackerSession = _build_tracker()


def get_tracker() -> TrackerSession:
    return _SESSION
