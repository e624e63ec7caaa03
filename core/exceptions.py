"""
core/exceptions.py
────────────────────────────────────────────────────────────────────────
Error taxonomy shared by the analysis client, the tracker session and the
HTTP layer. Every error carries a user-facing `message`, the HTTP status the
routers answer with, and optional `details` for logs.
"""

from __future__ import annotations

from typing import Any

ANALYSIS_FAILED_MESSAGE = (
    "Failed to analyze nutritional information. Please try again."
)


class TrackerError(Exception):
    """Base class for every error raised by the tracker."""

    status_code: int = 500

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


# ──────────────────────────────────────────────────────────────────────
#  Analysis failures
# ──────────────────────────────────────────────────────────────────────
class AnalysisError(TrackerError):
    """An image analysis did not produce a nutrition record.

    Callers only need to catch this class; the subclasses exist for logs
    and for choosing an HTTP status.
    """

    status_code = 502

    def __init__(
        self,
        message: str = ANALYSIS_FAILED_MESSAGE,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, details=details)


class ConfigurationError(AnalysisError):
    """No Gemini credential is configured; raised before any network I/O."""

    status_code = 503

    def __init__(self, config_key: str = "GEMINI_API_KEY"):
        super().__init__(
            "Nutrition analysis is not configured. Please try again later.",
            details={"config_key": config_key},
        )


class EncodingError(AnalysisError):
    """The submitted image could not be read or base64-encoded."""

    status_code = 400


class RemoteServiceError(AnalysisError):
    """Network failure, error status, timeout or unusable JSON from Gemini."""

    status_code = 502


# ──────────────────────────────────────────────────────────────────────
#  Session state conflicts
# ──────────────────────────────────────────────────────────────────────
class SessionStateError(TrackerError):
    status_code = 409


class AnalysisInProgressError(SessionStateError):
    def __init__(self):
        super().__init__("An analysis is already in progress.")


class NoPendingResultError(SessionStateError):
    def __init__(self):
        super().__init__("There is no analysis result to accept.")
