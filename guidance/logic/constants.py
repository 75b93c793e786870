"""
Guidance Engine Constants

Rank tables, keyword tables and the static reference data shown on the
dashboard. All values are deterministic with no AI/ML components.
"""

from typing import Dict, List, Tuple

# =============================================================================
# PROFILE AGGREGATION
# =============================================================================

# Education level rank (higher = more advanced). Unlisted levels rank 0.
EDUCATION_LEVEL_RANK: Dict[str, int] = {
    "10th": 1,
    "12th": 2,
    "Diploma": 2,
    "Bachelor": 3,
    "Master": 4,
    "PhD": 5,
}

# Percentage -> GPA crude normalization divisor (90% -> 4.5)
PERCENTAGE_TO_GPA_DIVISOR = 20.0

TOP_SUBJECT_LIMIT = 5

DEFAULT_STUDENT_NAME = "User"
DEFAULT_INSTITUTION = "Unknown Institute"
DEFAULT_STREAM = "General"
DEFAULT_SCORE_LABEL = "N/A"
DEFAULT_RECORD_YEAR = 2023

# Exam tokens recognised in score card file names, checked in order
KNOWN_EXAMS: Tuple[str, ...] = ("IELTS", "TOEFL", "GRE", "GMAT", "SAT", "PTE")
ENTRANCE_SCORE_PLACEHOLDER = "Detected"

# =============================================================================
# RULE MATCHING
# =============================================================================

ANY_STREAM = "Any"

# Raw field of study -> coarse academic stream
STREAM_MAPPING: Dict[str, str] = {
    "Science (PCM)": "Science",
    "Science (PCB)": "Science",
    "Commerce": "Commerce",
    "Arts": "Arts",
    "Computer Science": "Science",
    "Mechanical": "Science",
    "Electrical": "Science",
    "Civil": "Science",
    "IT": "Science",
    "Business": "Commerce",
    "Finance": "Commerce",
    "Humanities": "Arts",
    "Psychology": "Arts",
    "Design": "Arts",
    "Law": "Arts",
    "Medical": "Science",
    "Biotechnology": "Science",
    "AI & Data Science": "Science",
    "Open / Undecided": ANY_STREAM,
}

# Levels for which the 12th grade threshold is checked
TWELFTH_GRADE_CHECK_LEVELS = ("High School", "Diploma")

# =============================================================================
# INTELLIGENCE SYNTHESIS
# =============================================================================

STEM_KEYWORDS: Tuple[str, ...] = ("Math", "Physics", "CS", "Data")
COMMERCE_KEYWORDS: Tuple[str, ...] = ("Business", "Account", "Econ")

STREAM_STEM = "STEM"
STREAM_COMMERCE = "Commerce"
STREAM_ARTS = "Arts/Humanities"
STREAM_UNKNOWN = "General"

# Strictly greater than this GPA is Low risk
LOW_RISK_GPA_THRESHOLD = 3.0

RISK_FACTOR_LOW_GPA = "GPA below 3.0"
RISK_FACTOR_NO_ENTRANCE_SCORES = "No entrance exam scores on record"

DEFAULT_INSIGHT_SUBJECTS = "Core Subjects"

ADMISSION_PROBABILITY_BY_COUNTRY: Dict[str, int] = {
    "Germany": 88,
    "USA": 82,
    "Canada": 72,
    "UK": 65,
}

VISA_CONFIDENCE_BY_COUNTRY: Dict[str, int] = {
    "Germany": 98,
    "USA": 65,
    "Canada": 92,
    "UK": 85,
}

ROI_FORECAST_BY_COUNTRY: Dict[str, str] = {
    "Germany": "$140k avg",
    "USA": "$180k avg",
    "Canada": "$120k avg",
}

INDIA_PATHS: List[dict] = [
    {"country": "India", "title": "Software Engineer @ Tier 1", "type": "Professional",
     "probability": 92, "roi": "High", "cost": "₹0", "duration": "Immediate"},
    {"country": "India", "title": "Product Management @ Fintech", "type": "Professional",
     "probability": 78, "roi": "Very High", "cost": "₹0", "duration": "1-2 Years"},
]

GLOBAL_PATHS: List[dict] = [
    {"country": "Germany", "title": "Data Scientist (Work Permit)", "type": "Professional",
     "probability": 85, "roi": "Extreme", "cost": "€0", "duration": "24 Mo"},
    {"country": "Canada", "title": "Cloud Architect (PR Track)", "type": "Professional",
     "probability": 74, "roi": "High", "cost": "CAD 45k", "duration": "18 Mo"},
]

MISSION_TIMELINE: List[dict] = [
    {"month": "MAR", "title": "Profile Lockdown",
     "description": "Finalize document verification and core subject strengths.", "status": "Completed"},
    {"month": "APR", "title": "Language Proficiency",
     "description": "Target IELTS 7.5+ or TOEFL 100 benchmark.", "status": "Active"},
    {"month": "MAY", "title": "Strategic Applications",
     "description": "Submit applications to target-sector universities.", "status": "Pending"},
    {"month": "JUN", "title": "Visa Preparation",
     "description": "Start financial documentation for embassy clearance.", "status": "Pending"},
    {"month": "JUL", "title": "Departure",
     "description": "Final relocation and university enrollment.", "status": "Pending"},
]

# =============================================================================
# CAREER MAPPING
# =============================================================================

STRONG_SUBJECT_SCORE = 80

GLOBAL_OPTIONS: List[dict] = [
    {
        "university": "Technical University of Munich",
        "country": "Germany",
        "program": "M.Sc. in Data Engineering",
        "tuition": "Zero Tuition (Semester Fee ~€150)",
        "probability": 88,
        "requirements": ["IELTS 6.5+", "German A1 (Recommended)", "CGPA > 7.5"],
    },
    {
        "university": "University of Toronto",
        "country": "Canada",
        "program": "Master of Applied Computing",
        "tuition": "CAD 45,000/year",
        "probability": 72,
        "requirements": ["GRE 310+", "IELTS 7.5", "2 LoRs"],
    },
    {
        "university": "Imperial College London",
        "country": "UK",
        "program": "MSc Artificial Intelligence",
        "tuition": "£38,500",
        "probability": 65,
        "requirements": ["First Class Degree", "Math Background", "Statement of Purpose"],
    },
    {
        "university": "Arizona State University",
        "country": "USA",
        "program": "MS in Computer Science",
        "tuition": "$54,000",
        "probability": 82,
        "requirements": ["GRE 300+", "TOEFL 90", "GPA 3.0+"],
    },
]

ENGINE_VERSION = "1.0.0"
