"""
AI Proxy Routes

Forward chat, roadmap, career path, ROI and dashboard requests to the LLM provider with
static prompt templates. ROI analyses are persisted to `roi_simulations`.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError

from db import get_db
from models.models import CareerPathRequest, ChatRequest, ProfileRequest, RoiRequest, RoiSimulation
from .ai.advisor import AIAdvisor
from .routes import get_advisor

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["ai"])


def _require(ai: AIAdvisor) -> None:
    if not ai.is_configured:
        raise HTTPException(status_code=503, detail="Service unavailable (API Key Missing)")


@router.post("/chat", summary="Counsellor chat")
def chat(request: ChatRequest, ai: AIAdvisor = Depends(get_advisor)):
    _require(ai)
    reply = ai.chat(
        [m.model_dump() for m in request.messages],
        student_year=request.studentYear,
    )
    if reply is None:
        raise HTTPException(status_code=500, detail="Failed to process chat request")
    return reply


@router.post("/career-roadmap", summary="Generate career roadmaps")
def career_roadmap(request: ProfileRequest, ai: AIAdvisor = Depends(get_advisor)):
    if not request.profile:
        raise HTTPException(status_code=400, detail="Profile data required")
    _require(ai)

    roadmaps = ai.career_roadmaps(request.profile)
    if roadmaps is None:
        raise HTTPException(status_code=500, detail="Failed to generate roadmaps")
    return roadmaps


@router.post("/career/roadmap", summary="Career options or timelines for a chosen path")
def career_path(request: CareerPathRequest, ai: AIAdvisor = Depends(get_advisor)):
    """
    Without `selectedPath`: four suggested career options.
    With `selectedPath`: fast-track, growth and mastery timelines for it.
    """
    _require(ai)

    plan = ai.career_path_plan(request.userProfile or {}, request.selectedPath)
    if plan is None:
        raise HTTPException(status_code=500, detail="Failed to generate intelligence")
    return plan


@router.post("/dashboard-insights", summary="Generate dashboard insights")
def dashboard_insights(request: ProfileRequest, ai: AIAdvisor = Depends(get_advisor)):
    if not request.profile:
        raise HTTPException(status_code=400, detail="Profile data required")
    _require(ai)

    insights = ai.dashboard_insights(request.profile, request.language)
    if insights is None:
        raise HTTPException(status_code=500, detail="Failed to generate insights")
    return insights


@router.post("/roi/analyze", summary="Analyze study-abroad ROI")
def roi_analyze(
    request: RoiRequest,
    ai: AIAdvisor = Depends(get_advisor),
):
    if not request.targetCountry or not request.userBudget:
        raise HTTPException(status_code=400, detail="Target country and budget are required.")
    _require(ai)

    analysis = ai.roi_analysis(request.targetCountry, request.userBudget)
    if analysis is None:
        raise HTTPException(status_code=500, detail="Failed to generate ROI analysis")

    # A failed save is logged but does not fail the request
    try:
        with get_db() as db:
            RoiSimulation.record(
                db,
                user_id=request.userId,
                target_country=request.targetCountry,
                budget=request.userBudget,
                analysis=analysis,
            )
    except SQLAlchemyError as e:
        logger.error(f"Failed to save ROI simulation: {e}")

    return analysis
