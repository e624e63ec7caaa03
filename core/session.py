"""
core/session.py
────────────────────────────────────────────────────────────────────────
Application state for the single-page tracker.

    idle ──submit──▶ analyzing ──ok──▶ result_ready ──accept──▶ idle
                         │                   │
                         └──error──▶ idle    └──dismiss──▶ idle

A submit while `analyzing` is rejected with `AnalysisInProgressError`;
the in-flight call is left alone. The check runs before the first
`await`, so on one event loop two submits can never both start.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Protocol

from core.exceptions import (
    AnalysisError,
    AnalysisInProgressError,
    ConfigurationError,
    NoPendingResultError,
)
from core.ledger import MealLedger
from core.models.meal import AnalysisResult, Meal, NutritionInfo
from services.images import ImageSource, encode_image

_LOG = logging.getLogger(__name__)


class View(str, Enum):
    idle = "idle"
    analyzing = "analyzing"
    result_ready = "result_ready"


class Tab(str, Enum):
    home = "home"
    analytics = "analytics"
    settings = "settings"


class Analyzer(Protocol):
    configured: bool

    async def analyze(self, image: ImageSource, mime_type: str | None = None) -> NutritionInfo: ...


class TrackerSession:
    def __init__(self, analyzer: Analyzer, ledger: MealLedger | None = None):
        self.analyzer = analyzer
        self.ledger = ledger if ledger is not None else MealLedger()
        self.view = View.idle
        self.active_tab = Tab.home
        self.error: str | None = None
        self.pending: AnalysisResult | None = None

    # ----------------------------------------------------------------
    async def submit(
        self,
        image: ImageSource,
        mime_type: str | None = None,
        image_ref: str | None = None,
    ) -> AnalysisResult:
        if self.view is View.analyzing:
            _LOG.warning("submit rejected: analysis already in flight")
            raise AnalysisInProgressError()

        self.view = View.analyzing
        self.error = None
        self.pending = None
        try:
            if not self.analyzer.configured:
                raise ConfigurationError()
            if image_ref is None:
                image = encode_image(image, mime_type)
                image_ref = image.data_url
            info = await self.analyzer.analyze(image, mime_type)
            self.pending = AnalysisResult(nutrition=info, image_url=image_ref)
        except AnalysisError as exc:
            self.error = exc.message
            raise
        finally:
            # failure and cancellation both land back on idle
            self.view = View.result_ready if self.pending is not None else View.idle
        return self.pending

    def accept(self) -> Meal:
        if self.view is not View.result_ready or self.pending is None:
            raise NoPendingResultError()
        result, self.pending = self.pending, None
        self.view = View.idle
        return self.ledger.append_meal(result.nutrition, result.image_url)

    def dismiss(self) -> None:
        if self.view is View.result_ready:
            self.pending = None
            self.view = View.idle

    def select_tab(self, tab: Tab | str) -> Tab:
        self.active_tab = Tab(tab)
        return self.active_tab

    def snapshot(self) -> dict[str, Any]:
        return {
            "view": self.view,
            "active_tab": self.active_tab,
            "error": self.error,
            "pending": self.pending,
        }
