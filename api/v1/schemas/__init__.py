"""Re-export individual schema modules for easy imports."""

from .meal import DailySummary
from .session import SessionOut, TabIn

__all__ = [
    "DailySummary",
    "SessionOut",
    "TabIn",
]
