"""
Guidance Engine

Main orchestrator that combines the aggregator, matcher, synthesizer and
career mapping into a single pipeline.
This is the primary entry point for analysing a student's documents.
"""

import logging
import time
import uuid
from typing import List, Optional, Sequence

from .contracts import (
    EligibilityResult,
    EligibilityRule,
    ExtractedDocument,
    GuidanceOutput,
    StudentProfile,
    UnifiedProfile,
)
from .constants import ENGINE_VERSION
from .profile_builder import build_profile
from .matcher import evaluate
from .synthesizer import synthesize
from .career_mapping import generate_career_map, evaluate_global_options
from .rules import load_rules

logger = logging.getLogger(__name__)


class GuidanceEngine:
    """
    Runs the guidance pipeline for one request.

    Pipeline flow:
    1. Profile Aggregation - Merge extracted documents into a UnifiedProfile
    2. Intelligence Synthesis - Dominant stream, risk, country tables
    3. Career Mapping - Career paths and overseas options
    4. Rule Matching - Eligibility per rule (when a StudentProfile is given)

    The engine only holds the read-only rule table, so one instance can
    serve any number of requests.
    """

    def __init__(self, rules: Optional[Sequence[EligibilityRule]] = None):
        """
        Args:
            rules: Rule table. If None, the bundled table is loaded.
        """
        self.rules = tuple(rules) if rules is not None else load_rules()
        self.version = ENGINE_VERSION

    def check_eligibility(self, profile: StudentProfile) -> List[EligibilityResult]:
        return evaluate(profile, self.rules)

    def analyze(
        self,
        documents: List[ExtractedDocument],
        student_profile: Optional[StudentProfile] = None
    ) -> GuidanceOutput:
        """
        Analyse a batch of documents.

        Args:
            documents: Extracted documents for one student
            student_profile: Optional form data for eligibility matching

        Returns:
            GuidanceOutput with profile, summary, career map and eligibility
        """
        start_time = time.perf_counter()

        profile = build_profile(documents)
        intelligence = synthesize(profile)
        career_paths = generate_career_map(profile)
        global_options = evaluate_global_options(profile)

        eligibility: List[EligibilityResult] = []
        if student_profile is not None:
            eligibility = self.check_eligibility(student_profile)

        processing_time = (time.perf_counter() - start_time) * 1000

        return GuidanceOutput(
            request_id=str(uuid.uuid4()),
            profile=profile,
            intelligence=intelligence,
            career_paths=career_paths,
            global_options=global_options,
            eligibility=eligibility,
            total_rules_evaluated=len(eligibility),
            total_eligible=sum(1 for r in eligibility if r.is_eligible),
            processing_time_ms=round(processing_time, 2),
            engine_version=self.version,
            warnings=_generate_warnings(documents, profile, student_profile),
        )


def _generate_warnings(
    documents: List[ExtractedDocument],
    profile: UnifiedProfile,
    student_profile: Optional[StudentProfile]
) -> List[str]:
    """Generate any warnings for the output."""
    warnings = []

    if not documents:
        warnings.append("No documents supplied. Upload marksheets or transcripts for a fuller profile.")
    elif not profile.education_history:
        warnings.append("No education level detected in the uploaded documents.")

    if profile.gpa == 0:
        warnings.append("GPA not available. Risk analysis defaults to Medium.")

    if student_profile is None:
        warnings.append("Student profile not provided. Eligibility was not evaluated.")

    if warnings:
        logger.info("Guidance output carries %d warnings", len(warnings))

    return warnings


def get_guidance(
    documents: List[ExtractedDocument],
    student_profile: Optional[StudentProfile] = None
) -> GuidanceOutput:
    """Convenience function to run the pipeline with the bundled rules."""
    engine = GuidanceEngine()
    return engine.analyze(documents, student_profile)
