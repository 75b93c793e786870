"""
Rule Matcher

Checks a student profile against the eligibility rule table.
Every surviving rule produces a result; failed conditions are collected as
human-readable reasons instead of stopping at the first failure.
All logic is deterministic and side-effect free.
"""

import logging
from typing import Iterable, List, Optional

from .contracts import EligibilityResult, EligibilityRule, StudentProfile
from .constants import ANY_STREAM, STREAM_MAPPING, TWELFTH_GRADE_CHECK_LEVELS

logger = logging.getLogger(__name__)


def normalize_stream(raw_stream: Optional[str]) -> str:
    """Map a raw field of study to Science/Commerce/Arts, or Any if unmapped."""
    return STREAM_MAPPING.get(raw_stream or "", ANY_STREAM)


def matches_target_country(rule: EligibilityRule, target_countries: List[str]) -> bool:
    """
    International rules only apply when the rule name mentions one of the
    student's target countries. Local rules and empty target lists always pass.
    """
    if not rule.is_international or not target_countries:
        return True
    rule_name = rule.name.lower()
    return any(country.lower() in rule_name for country in target_countries)


def evaluate_rule(profile: StudentProfile, rule: EligibilityRule) -> EligibilityResult:
    """
    Evaluate a single rule against a profile.

    Args:
        profile: Student's marks, stream and subject scores
        rule: Rule to check

    Returns:
        EligibilityResult with all failure reasons
    """
    reasons: List[str] = []

    # Missing marks count as zero, so they fail any positive threshold
    percentage10 = profile.percentage10 or 0.0
    percentage12 = profile.percentage12 or 0.0

    # 10th grade marks
    if percentage10 < rule.min_percentage10:
        reasons.append(f"10th Grade Marks < {_fmt(rule.min_percentage10)}%")

    # 12th grade marks only matter before a degree
    if profile.education_level in TWELFTH_GRADE_CHECK_LEVELS:
        if percentage12 < rule.min_percentage12:
            reasons.append(f"12th Grade Marks < {_fmt(rule.min_percentage12)}%")

    # Stream
    stream = normalize_stream(profile.stream)
    if rule.required_stream != ANY_STREAM and stream != rule.required_stream and stream != ANY_STREAM:
        reasons.append(f"Requires {rule.required_stream} background")

    # Required subjects
    missing_subjects = [
        subject for subject in rule.required_subjects
        if _below(profile.percentage_subjects.get(subject), rule.min_subject_score)
    ]
    if missing_subjects:
        reasons.append(f"Low/Missing scores in: {', '.join(missing_subjects)}")

    return EligibilityResult(
        rule_id=rule.id,
        career_name=rule.name,
        is_eligible=not reasons,
        reasons=reasons,
        admission_probability=rule.admission_probability_base,
        roi=rule.roi,
        visa_probability=rule.visa_probability_base if rule.is_international else None,
        risk_level=rule.risk_level,
        roadmap=rule.roadmap,
    )


def evaluate(
    profile: StudentProfile,
    rules: Iterable[EligibilityRule]
) -> List[EligibilityResult]:
    """
    Evaluate every applicable rule against a profile.

    International rules that do not mention any of the student's target
    countries are skipped. Ineligible rules are still returned.

    Args:
        profile: Student profile
        rules: Rule table, in display order

    Returns:
        List of EligibilityResult, one per surviving rule
    """
    results: List[EligibilityResult] = []
    skipped = 0

    for rule in rules:
        if not matches_target_country(rule, profile.target_countries):
            skipped += 1
            continue
        results.append(evaluate_rule(profile, rule))

    logger.debug(
        "Evaluated %d rules (%d skipped by country filter), %d eligible",
        len(results), skipped, sum(1 for r in results if r.is_eligible),
    )
    return results


def eligible_only(results: List[EligibilityResult]) -> List[EligibilityResult]:
    """Filter results down to eligible rules."""
    return [r for r in results if r.is_eligible]


def _below(score: Optional[float], minimum: float) -> bool:
    return score is None or score < minimum


def _fmt(value: float) -> str:
    return f"{value:g}"
