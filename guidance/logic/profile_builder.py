"""
Profile Aggregator

Merges the records extracted from each uploaded document into one
UnifiedProfile: education history, GPA, strongest subjects,
certifications and entrance exam scores.

Every input is treated permissively. Missing fields fall back to defaults
and no exception is raised for malformed documents.
"""

import logging
import math
import os
from typing import Dict, List, Optional

from .contracts import (
    DocumentKind,
    EducationRecord,
    EntranceScore,
    ExtractedDocument,
    ExtractedEntities,
    PersonalInfo,
    SubjectScore,
    UnifiedProfile,
)
from .constants import (
    DEFAULT_INSTITUTION,
    DEFAULT_RECORD_YEAR,
    DEFAULT_SCORE_LABEL,
    DEFAULT_STREAM,
    DEFAULT_STUDENT_NAME,
    EDUCATION_LEVEL_RANK,
    ENTRANCE_SCORE_PLACEHOLDER,
    KNOWN_EXAMS,
    PERCENTAGE_TO_GPA_DIVISOR,
    TOP_SUBJECT_LIMIT,
)

logger = logging.getLogger(__name__)


def build_profile(documents: List[ExtractedDocument]) -> UnifiedProfile:
    """
    Build a unified profile from extracted documents.

    Args:
        documents: Zero or more extracted documents, in upload order

    Returns:
        UnifiedProfile (empty history and zero GPA for no documents)
    """
    history: List[EducationRecord] = []
    certifications: List[str] = []
    entrance_scores: List[EntranceScore] = []
    subject_scores: Dict[str, List[float]] = {}
    student_name: Optional[str] = None

    gpa_total = 0.0
    gpa_count = 0

    for doc in documents or []:
        entities = doc.entities or ExtractedEntities()

        if student_name is None and entities.student_name:
            student_name = entities.student_name

        # 1. Education history and GPA contribution
        if entities.education_level:
            history.append(_education_record(entities))

            contribution = _gpa_contribution(entities)
            if contribution is not None:
                gpa_total += contribution
                gpa_count += 1

        # 2. Subject scores are pooled from every document
        for subject, score in entities.subjects.items():
            if score is None:
                continue
            subject_scores.setdefault(subject, []).append(float(score))

        # 3. Entrance exams and certifications
        if doc.document_kind == DocumentKind.SCORE_CARD:
            entrance_scores.append(EntranceScore(
                exam=_exam_name(doc.file_name),
                score=ENTRANCE_SCORE_PLACEHOLDER,
            ))
        elif doc.document_kind == DocumentKind.CERTIFICATE:
            certifications.append(_strip_extension(doc.file_name))

    gpa = round(gpa_total / gpa_count, 2) if gpa_count > 0 else 0.0

    # Stable sort keeps upload order between equally ranked levels
    history.sort(key=lambda record: EDUCATION_LEVEL_RANK.get(record.level, 0), reverse=True)

    logger.debug(
        "Built profile from %d documents: %d history records, %d subjects, gpa=%s",
        len(documents or []), len(history), len(subject_scores), gpa,
    )

    return UnifiedProfile(
        personal=PersonalInfo(name=student_name or DEFAULT_STUDENT_NAME),
        education_history=history,
        subject_strength=rank_subjects(subject_scores),
        gpa=gpa,
        certifications=certifications,
        entrance_scores=entrance_scores,
    )


def rank_subjects(
    subject_scores: Dict[str, List[float]],
    limit: int = TOP_SUBJECT_LIMIT
) -> List[SubjectScore]:
    """Mean score per subject, strongest first, truncated to `limit`."""
    averaged = [
        SubjectScore(subject=subject, score=_round_half_up(sum(scores) / len(scores)))
        for subject, scores in subject_scores.items()
        if scores
    ]
    averaged.sort(key=lambda s: s.score, reverse=True)
    return averaged[:limit]


def _education_record(entities: ExtractedEntities) -> EducationRecord:
    return EducationRecord(
        level=entities.education_level,
        institution=entities.institution or DEFAULT_INSTITUTION,
        year=entities.year or DEFAULT_RECORD_YEAR,
        score=_score_label(entities),
        stream=entities.stream or DEFAULT_STREAM,
        subjects=list(entities.subjects.keys()),
    )


def _gpa_contribution(entities: ExtractedEntities) -> Optional[float]:
    # A zero GPA or percentage counts as not reported
    if entities.gpa:
        return entities.gpa
    if entities.percentage:
        return entities.percentage / PERCENTAGE_TO_GPA_DIVISOR
    return None


def _score_label(entities: ExtractedEntities) -> str:
    if entities.gpa:
        return f"{entities.gpa:.1f} GPA"
    if entities.percentage is not None:
        return f"{entities.percentage:g}%"
    return DEFAULT_SCORE_LABEL


def _exam_name(file_name: str) -> str:
    stem = _strip_extension(file_name).upper()
    for exam in KNOWN_EXAMS:
        if exam in stem:
            return exam
    return stem


def _strip_extension(file_name: str) -> str:
    root, _ = os.path.splitext(file_name or "")
    return root


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))
