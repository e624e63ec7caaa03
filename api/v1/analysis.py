# api/v1/analysis.py
from __future__ import annotations

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status

from core.exceptions import EncodingError, TrackerError
from core.models.meal import AnalysisResult, Meal
from core.session import TrackerSession
from services.tracker import get_tracker
from api.v1.schemas import SessionOut

router = APIRouter()


@router.post(
    "",
    response_model=AnalysisResult,
    summary="Analyze one meal photo",
)
async def analyze_photo(
    file: UploadFile = File(...),
    image_url: str | None = Form(None),
    tracker: TrackerSession = Depends(get_tracker),
) -> AnalysisResult:
    """
    Send the photo to Gemini and hold the estimate until it is accepted.
    `image_url` is the page's own reference to the photo; without it the
    photo's data URL is stored on the meal.
    """
    try:
        try:
            data = await file.read()
        except OSError as exc:
            raise EncodingError(details={"reason": str(exc)}) from exc
        return await tracker.submit(data, mime_type=file.content_type, image_ref=image_url)
    except TrackerError as exc:
        raise HTTPException(status_code=exc.status_code, detail=exc.message) from exc


@router.post(
    "/accept",
    response_model=Meal,
    status_code=status.HTTP_201_CREATED,
    summary="Add the pending analysis to today's meals",
)
async def accept_analysis(tracker: TrackerSession = Depends(get_tracker)) -> Meal:
    try:
        return tracker.accept()
    except TrackerError as exc:
        raise HTTPException(status_code=exc.status_code, detail=exc.message) from exc


@router.post(
    "/dismiss",
    response_model=SessionOut,
    summary="Discard the pending analysis",
)
async def dismiss_analysis(tracker: TrackerSession = Depends(get_tracker)) -> SessionOut:
    tracker.dismiss()
    return SessionOut.model_validate(tracker.snapshot())
