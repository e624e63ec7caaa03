# api/v1/router.py
from fastapi import APIRouter

from . import analysis, meals, session

api_router = APIRouter()

api_router.include_router(meals.router, prefix="/meals", tags=["Meals"])
api_router.include_router(analysis.router, prefix="/analysis", tags=["Analysis"])
api_router.include_router(session.router, prefix="/session", tags=["Session"])
