"""
Data Contracts for the Guidance Engine

Defines Pydantic models for extracted documents and student profiles (input)
and unified profiles, eligibility results and intelligence summaries (output).
These contracts are the API boundary for the guidance engine.

Python attributes are snake_case; JSON uses camelCase aliases and both forms
are accepted on input.
"""

from typing import Any, Dict, List, Optional
from enum import Enum

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serialising to camelCase field names."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        use_enum_values = True


# =============================================================================
# INPUT CONTRACTS
# =============================================================================

class DocumentKind(str, Enum):
    """Kind of uploaded document, as reported by the document analyzer."""
    MARKSHEET = "Marksheet"
    TRANSCRIPT = "Transcript"
    CERTIFICATE = "Certificate"
    SCORE_CARD = "ScoreCard"
    UNKNOWN = "Unknown"


_DOCUMENT_KIND_VALUES = tuple(kind.value for kind in DocumentKind)


class EducationLevel(str, Enum):
    """Education level a document belongs to."""
    TENTH = "10th"
    TWELFTH = "12th"
    DIPLOMA = "Diploma"
    BACHELOR = "Bachelor"
    MASTER = "Master"
    PHD = "PhD"


class StudentLevel(str, Enum):
    """Student's current education level, as entered on the profile form."""
    HIGH_SCHOOL = "High School"
    DIPLOMA = "Diploma"
    BACHELORS = "Bachelor's"
    MASTERS = "Master's"


class ExtractedEntities(CamelModel):
    """Fields pulled out of a single document. Every field is optional."""
    student_name: Optional[str] = None
    # Kept as a plain string: unrecognised levels rank last instead of failing
    education_level: Optional[str] = None
    institution: Optional[str] = None
    year: Optional[int] = None
    stream: Optional[str] = None
    gpa: Optional[float] = None
    percentage: Optional[float] = None
    subjects: Dict[str, Optional[float]] = Field(default_factory=dict)

    @field_validator("subjects", mode="before")
    @classmethod
    def _none_subjects(cls, value):
        return value or {}


class ExtractedDocument(CamelModel):
    """
    One uploaded file after OCR / document analysis.
    Produced by an external collaborator and consumed once by the aggregator.
    """
    file_name: str = ""
    document_kind: DocumentKind = DocumentKind.UNKNOWN
    confidence: float = 0.0
    raw_text: Optional[str] = None
    entities: ExtractedEntities = Field(default_factory=ExtractedEntities)

    @field_validator("confidence", mode="before")
    @classmethod
    def _clamp_confidence(cls, value):
        # OCR scores slightly outside [0, 1] are clamped, not rejected
        if value is None:
            return 0.0
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return min(max(float(value), 0.0), 1.0)
        return value

    @field_validator("document_kind", mode="before")
    @classmethod
    def _unknown_kind(cls, value):
        if isinstance(value, DocumentKind) or value in _DOCUMENT_KIND_VALUES:
            return value
        return DocumentKind.UNKNOWN

    @field_validator("entities", mode="before")
    @classmethod
    def _none_entities(cls, value):
        return value or {}


class StudentProfile(CamelModel):
    """
    Input contract for the rule matcher.
    Built by the caller from form entries or a stored profile record.
    """
    education_level: StudentLevel = StudentLevel.HIGH_SCHOOL
    percentage10: Optional[float] = None
    percentage12: Optional[float] = None
    gpa: Optional[float] = None
    stream: str = ""  # raw label, e.g. "Computer Science", "Business"
    percentage_subjects: Dict[str, float] = Field(default_factory=dict)
    target_countries: List[str] = Field(default_factory=list)


class EligibilityRule(CamelModel):
    """
    One opportunity (degree, scholarship, career path) from the static
    rule table. Read-only reference data.
    """
    id: str
    name: str
    min_percentage10: float = 0.0
    min_percentage12: float = 0.0
    required_stream: str = "Any"  # Science/Commerce/Arts/Any
    required_subjects: List[str] = Field(default_factory=list)
    min_subject_score: float = 0.0
    admission_probability_base: float = 0.0
    roi: str = ""
    risk_level: str = ""
    is_international: bool = False
    visa_probability_base: Optional[float] = None
    roadmap: Optional[Any] = None  # opaque payload rendered by the UI

    class Config:
        frozen = True


# =============================================================================
# OUTPUT CONTRACTS
# =============================================================================

class PersonalInfo(CamelModel):
    name: str = "User"
    email: Optional[str] = None


class EducationRecord(CamelModel):
    """One entry of the education history."""
    level: str
    institution: str
    year: Optional[int] = None
    score: str  # display string: "85%" or "8.2 GPA"
    stream: str
    subjects: List[str] = Field(default_factory=list)


class SubjectScore(CamelModel):
    subject: str
    score: float


class EntranceScore(CamelModel):
    exam: str
    score: str


class UnifiedProfile(CamelModel):
    """
    Single merged representation of a student's academic history.
    Never mutated after it is built; re-running analysis builds a new one.
    """
    personal: PersonalInfo = Field(default_factory=PersonalInfo)
    education_history: List[EducationRecord] = Field(default_factory=list)
    subject_strength: List[SubjectScore] = Field(default_factory=list)
    gpa: float = 0.0
    certifications: List[str] = Field(default_factory=list)
    entrance_scores: List[EntranceScore] = Field(default_factory=list)

    class Config:
        frozen = True


class EligibilityResult(CamelModel):
    """Outcome of checking one rule against one profile."""
    rule_id: str
    career_name: str
    is_eligible: bool = True
    reasons: List[str] = Field(default_factory=list)
    admission_probability: float = 0.0
    roi: str = ""
    visa_probability: Optional[float] = None
    risk_level: str = ""
    roadmap: Optional[Any] = None


class AcademicSummary(CamelModel):
    dominant_stream: str
    global_equivalence: str


class PathwayResult(CamelModel):
    """Degree or job pathway shown on the intelligence dashboard."""
    country: str
    title: str
    type: str  # Academic/Professional
    probability: float  # 0-100
    roi: str
    cost: str
    duration: str


class RiskAnalysis(CamelModel):
    level: str  # Low/Medium/High
    factors: List[str] = Field(default_factory=list)


class TimelineStep(CamelModel):
    month: str
    title: str
    description: str
    status: str  # Completed/Active/Pending


class IntelligenceSummary(CamelModel):
    """Dashboard summary derived from a unified profile."""
    academic_summary: AcademicSummary
    india_paths: List[PathwayResult] = Field(default_factory=list)
    global_paths: List[PathwayResult] = Field(default_factory=list)
    career_roles: List[str] = Field(default_factory=list)
    admission_probability: Dict[str, float] = Field(default_factory=dict)
    visa_confidence: Dict[str, float] = Field(default_factory=dict)
    roi_forecast: Dict[str, str] = Field(default_factory=dict)
    risk_analysis: RiskAnalysis
    ai_insight: str = ""
    mission_timeline: List[TimelineStep] = Field(default_factory=list)


class CareerPath(CamelModel):
    title: str
    match_score: float
    description: str
    reasoning: List[str] = Field(default_factory=list)
    salary_range: str
    job_outlook: str  # Growing/Stable/Declining
    skills_gap: List[str] = Field(default_factory=list)


class GlobalOpportunity(CamelModel):
    university: str
    country: str
    program: str
    probability: float
    tuition: str
    requirements: List[str] = Field(default_factory=list)


class GuidanceOutput(CamelModel):
    """
    Output of a full engine run: profile, summary, career map and
    (when a student profile was supplied) eligibility results.
    """
    request_id: Optional[str] = None
    profile: UnifiedProfile
    intelligence: IntelligenceSummary
    career_paths: List[CareerPath] = Field(default_factory=list)
    global_options: List[GlobalOpportunity] = Field(default_factory=list)
    eligibility: List[EligibilityResult] = Field(default_factory=list)
    total_rules_evaluated: int = 0
    total_eligible: int = 0
    processing_time_ms: Optional[float] = None
    engine_version: str = "1.0.0"
    warnings: List[str] = Field(default_factory=list)
