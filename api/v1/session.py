# api/v1/session.py
from __future__ import annotations
from fastapi import APIRouter, Depends

from core.session import TrackerSession
from services.tracker import get_tracker
from api.v1.schemas import SessionOut, TabIn

router = APIRouter()


@router.get("", response_model=SessionOut)
async def get_session_state(tracker: TrackerSession = Depends(get_tracker)) -> SessionOut:
    return SessionOut.model_validate(tracker.snapshot())


@router.put("/tab", response_model=SessionOut)
async def select_tab(
    body: TabIn,
    tracker: TrackerSession = Depends(get_tracker),
) -> SessionOut:
    tracker.select_tab(body.tab)
    return SessionOut.model_validate(tracker.snapshot())
