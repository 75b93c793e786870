"""
Intelligence Synthesizer

Derives the dashboard summary from a unified profile. Only the dominant
stream and the risk analysis are computed from the input; country tables,
pathways and the timeline are fixed reference data.
"""

import logging
from typing import List

from .contracts import (
    AcademicSummary,
    IntelligenceSummary,
    PathwayResult,
    RiskAnalysis,
    TimelineStep,
    UnifiedProfile,
)
from .constants import (
    ADMISSION_PROBABILITY_BY_COUNTRY,
    COMMERCE_KEYWORDS,
    DEFAULT_INSIGHT_SUBJECTS,
    GLOBAL_PATHS,
    INDIA_PATHS,
    LOW_RISK_GPA_THRESHOLD,
    MISSION_TIMELINE,
    RISK_FACTOR_LOW_GPA,
    RISK_FACTOR_NO_ENTRANCE_SCORES,
    ROI_FORECAST_BY_COUNTRY,
    STEM_KEYWORDS,
    STREAM_ARTS,
    STREAM_COMMERCE,
    STREAM_STEM,
    STREAM_UNKNOWN,
    VISA_CONFIDENCE_BY_COUNTRY,
)
from .career_mapping import generate_career_map

logger = logging.getLogger(__name__)


def infer_dominant_stream(profile: UnifiedProfile) -> str:
    """
    Classify the strongest subject as STEM, Commerce or Arts/Humanities
    by keyword membership. No subjects -> "General".
    """
    if not profile.subject_strength:
        return STREAM_UNKNOWN

    top_subject = profile.subject_strength[0].subject
    if any(keyword in top_subject for keyword in STEM_KEYWORDS):
        return STREAM_STEM
    if any(keyword in top_subject for keyword in COMMERCE_KEYWORDS):
        return STREAM_COMMERCE
    return STREAM_ARTS


def assess_risk(profile: UnifiedProfile) -> RiskAnalysis:
    """Low risk only for GPA strictly above 3.0; a zero GPA is Medium."""
    level = "Low" if profile.gpa > LOW_RISK_GPA_THRESHOLD else "Medium"

    factors: List[str] = []
    if profile.gpa < LOW_RISK_GPA_THRESHOLD:
        factors.append(RISK_FACTOR_LOW_GPA)
    if not profile.entrance_scores:
        factors.append(RISK_FACTOR_NO_ENTRANCE_SCORES)

    return RiskAnalysis(level=level, factors=factors)


def synthesize(profile: UnifiedProfile) -> IntelligenceSummary:
    """
    Build the intelligence summary for a profile.

    Args:
        profile: Unified profile

    Returns:
        IntelligenceSummary (always complete, defaults for absent data)
    """
    dominant_stream = infer_dominant_stream(profile)
    risk = assess_risk(profile)

    logger.debug("Synthesized summary: stream=%s risk=%s", dominant_stream, risk.level)

    return IntelligenceSummary(
        academic_summary=AcademicSummary(
            dominant_stream=dominant_stream,
            global_equivalence=f"WES US GPA: {profile.gpa:.1f}/4.0",
        ),
        india_paths=[PathwayResult(**path) for path in INDIA_PATHS],
        global_paths=[PathwayResult(**path) for path in GLOBAL_PATHS],
        career_roles=[path.title for path in generate_career_map(profile)],
        admission_probability=dict(ADMISSION_PROBABILITY_BY_COUNTRY),
        visa_confidence=dict(VISA_CONFIDENCE_BY_COUNTRY),
        roi_forecast=dict(ROI_FORECAST_BY_COUNTRY),
        risk_analysis=risk,
        ai_insight=_insight(profile),
        mission_timeline=[TimelineStep(**step) for step in MISSION_TIMELINE],
    )


def _insight(profile: UnifiedProfile) -> str:
    subjects = ""
    if profile.education_history:
        subjects = ", ".join(profile.education_history[0].subjects)
    return f"Strong academic trajectory in {subjects or DEFAULT_INSIGHT_SUBJECTS}."
