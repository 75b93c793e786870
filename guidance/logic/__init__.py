"""
Guidance Logic Module

Provides the deterministic profile aggregation, eligibility matching and
intelligence synthesis for the career-guidance dashboard.
"""

from .contracts import (
    ExtractedDocument,
    ExtractedEntities,
    DocumentKind,
    EducationLevel,
    StudentLevel,
    StudentProfile,
    UnifiedProfile,
    EducationRecord,
    SubjectScore,
    EntranceScore,
    EligibilityRule,
    EligibilityResult,
    IntelligenceSummary,
    CareerPath,
    GlobalOpportunity,
    GuidanceOutput,
)
from .profile_builder import build_profile
from .matcher import evaluate, evaluate_rule, normalize_stream, eligible_only
from .synthesizer import synthesize
from .career_mapping import generate_career_map, evaluate_global_options
from .document_analyzer import classify_document
from .rules import load_rules, RuleTableError
from .engine import GuidanceEngine, get_guidance

__all__ = [
    # Main engine
    "GuidanceEngine",
    "get_guidance",

    # Core operations
    "build_profile",
    "evaluate",
    "evaluate_rule",
    "normalize_stream",
    "eligible_only",
    "synthesize",
    "generate_career_map",
    "evaluate_global_options",
    "classify_document",
    "load_rules",
    "RuleTableError",

    # Contracts
    "ExtractedDocument",
    "ExtractedEntities",
    "DocumentKind",
    "EducationLevel",
    "StudentLevel",
    "StudentProfile",
    "UnifiedProfile",
    "EducationRecord",
    "SubjectScore",
    "EntranceScore",
    "EligibilityRule",
    "EligibilityResult",
    "IntelligenceSummary",
    "CareerPath",
    "GlobalOpportunity",
    "GuidanceOutput",
]
