"""
Guidance API Routes

Exposes the guidance engine via REST API: profile aggregation, eligibility
matching, intelligence summary and career mapping.
"""

import logging
import traceback
import uuid
from functools import lru_cache
from typing import Optional, List, Dict, Any

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from .logic.contracts import ExtractedDocument, StudentProfile, UnifiedProfile
from .logic.engine import GuidanceEngine
from .logic.matcher import eligible_only
from .logic.profile_builder import build_profile
from .logic.synthesizer import synthesize
from .logic.career_mapping import generate_career_map, evaluate_global_options
from .logic.document_analyzer import classify_document
from .ai.advisor import AIAdvisor, advisor

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/guidance", tags=["guidance"])


# =============================================================================
# REQUEST/RESPONSE SCHEMAS
# =============================================================================

class DocumentBatch(BaseModel):
    """Request body carrying extracted documents."""
    documents: List[ExtractedDocument] = Field(
        default_factory=list,
        description="Extracted documents for one student",
    )


class AnalyzeRequest(BaseModel):
    """Request body for the full pipeline."""
    documents: List[ExtractedDocument] = Field(default_factory=list)
    studentProfile: Optional[StudentProfile] = Field(
        default=None,
        description="Form data used for eligibility matching",
    )


class ClassifyRequest(BaseModel):
    fileName: str


class ExplainRequest(BaseModel):
    studentProfile: StudentProfile


# =============================================================================
# DEPENDENCIES
# =============================================================================

@lru_cache(maxsize=1)
def get_engine() -> GuidanceEngine:
    return GuidanceEngine()


def get_advisor() -> AIAdvisor:
    return advisor


# =============================================================================
# ENDPOINTS
# =============================================================================

@router.post("/profile", summary="Build a unified profile from documents")
def build_unified_profile(request: DocumentBatch):
    """Merge extracted documents into one unified profile."""
    profile = build_profile(request.documents)
    return _dump(profile)


@router.post("/eligibility", summary="Check eligibility against the rule table")
def check_eligibility(
    profile: StudentProfile,
    eligible: bool = Query(default=False, description="Return eligible rules only"),
    engine: GuidanceEngine = Depends(get_engine),
):
    """
    Evaluate every rule for the student.

    **Response:**
    - `results`: one entry per rule that survived the country filter
    - `totalRules` / `totalEligible`: summary counts
    """
    try:
        results = engine.check_eligibility(profile)
        total = len(results)
        total_eligible = len(eligible_only(results))
        if eligible:
            results = eligible_only(results)
        return {
            "results": [_dump(r) for r in results],
            "totalRules": total,
            "totalEligible": total_eligible,
        }
    except Exception as e:
        logger.error(f"Eligibility check failed: {e}")
        return JSONResponse(
            status_code=500,
            content={"error": str(e), "trace": traceback.format_exc()}
        )


@router.post("/intelligence", summary="Dashboard summary for a profile")
def intelligence_summary(profile: UnifiedProfile):
    return _dump(synthesize(profile))


@router.post("/career-map", summary="Career paths for a profile")
def career_map(profile: UnifiedProfile):
    return {
        "careerPaths": [_dump(p) for p in generate_career_map(profile)],
        "globalOptions": [_dump(o) for o in evaluate_global_options(profile)],
    }


@router.post("/analyze", summary="Run the full guidance pipeline")
def analyze(
    request: AnalyzeRequest,
    engine: GuidanceEngine = Depends(get_engine),
):
    """
    Documents -> unified profile -> intelligence summary, career map and
    (when `studentProfile` is given) eligibility results.
    """
    try:
        output = engine.analyze(request.documents, request.studentProfile)
        return _dump(output)
    except Exception as e:
        logger.error(f"Guidance pipeline failed: {e}")
        return JSONResponse(
            status_code=500,
            content={"error": str(e), "trace": traceback.format_exc()}
        )


@router.post("/documents/classify", summary="Guess document kind from a file name")
def classify(request: ClassifyRequest):
    kind, level = classify_document(request.fileName)
    return {
        "fileName": request.fileName,
        "documentKind": kind.value,
        "educationLevel": level.value if level else None,
    }


@router.post("/explain", summary="AI explanation of eligibility results")
def explain(
    request: ExplainRequest,
    engine: GuidanceEngine = Depends(get_engine),
    ai: AIAdvisor = Depends(get_advisor),
):
    if not ai.is_configured:
        raise HTTPException(status_code=503, detail="Service unavailable (API Key Missing)")

    results = [_dump(r) for r in engine.check_eligibility(request.studentProfile)]
    request_id = str(uuid.uuid4())

    explanation = ai.explain_eligibility(
        request_id=request_id,
        student_profile=_dump(request.studentProfile),
        results=results,
    )
    if explanation is None:
        raise HTTPException(status_code=500, detail="Failed to generate explanation")

    return {"requestId": request_id, "results": results, "aiExplanation": explanation}


@router.get("/rules", summary="List the eligibility rule table")
def list_rules(engine: GuidanceEngine = Depends(get_engine)):
    return {"rules": [_dump(rule) for rule in engine.rules], "count": len(engine.rules)}


# =============================================================================
# HEALTH CHECK
# =============================================================================

@router.get("/health", summary="Guidance engine health check")
def health_check(engine: GuidanceEngine = Depends(get_engine)):
    """Check if the guidance engine is operational."""
    return {"status": "ok", "engine": "guidance", "version": engine.version, "rules": len(engine.rules)}


def _dump(model: BaseModel) -> Dict[str, Any]:
    """Convert a contract model to a camelCase JSON-serializable dict."""
    return model.model_dump(by_alias=True, mode="json")
