from typing import Dict, Any, List, Optional
import json
from .prompts import (
    SAFETY_RULES,
    EXPLAINER_ROLE_DEFINITION,
    EXPLAINER_OUTPUT_FORMAT,
    ROADMAP_OUTPUT_FORMAT,
    ROI_OUTPUT_FORMAT,
    DASHBOARD_OUTPUT_FORMAT,
    CAREER_TIMELINES_OUTPUT_FORMAT,
    CAREER_OPTIONS_OUTPUT_FORMAT,
)


def _join(values: Optional[List[Any]]) -> str:
    return ", ".join(str(v) for v in (values or []))


def _amount(value: float) -> str:
    value = float(value)
    return f"{value:.0f}" if value.is_integer() else f"{value:.2f}"


def build_explainer_system_prompt() -> str:
    """Constructs the static system prompt for eligibility explanations."""
    rules_str = "\n".join([f"- {rule}" for rule in SAFETY_RULES])

    return f"""{EXPLAINER_ROLE_DEFINITION}

SAFETY RULES (NON-NEGOTIABLE):
{rules_str}

OUTPUT FORMAT:
{EXPLAINER_OUTPUT_FORMAT}
"""


def build_explainer_user_prompt(student_profile: Dict[str, Any], results: List[Dict[str, Any]], limit: int = 8) -> str:
    """
    Constructs the user prompt from the student profile and eligibility results.
    Truncates results to save tokens.
    """
    profile_summary = {
        "education_level": student_profile.get("educationLevel"),
        "marks_10th": student_profile.get("percentage10"),
        "marks_12th": student_profile.get("percentage12"),
        "stream": student_profile.get("stream"),
        "subjects": student_profile.get("percentageSubjects"),
        "countries": student_profile.get("targetCountries"),
    }

    minimized = _minimize_results(results[:limit])
    eligible = sum(1 for r in results if r.get("isEligible"))

    return f"""
STUDENT PROFILE:
{json.dumps(profile_summary, indent=2)}

ENGINE OUTPUT SUMMARY:
- Total Rules Evaluated: {len(results)}
- Total Eligible: {eligible}

ELIGIBILITY RESULTS:
{json.dumps(minimized, indent=2)}

TASK:
Explain these results to the student. Adhere strictly to the safety rules.
"""


def _minimize_results(results: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Helper to reduce result dict size for prompt."""
    minimized = []
    for r in results:
        minimized.append({
            "rule_id": r.get("ruleId"),
            "name": r.get("careerName"),
            "eligible": r.get("isEligible"),
            "reasons": r.get("reasons"),
            "admission_probability": r.get("admissionProbability"),
            "risk": r.get("riskLevel"),
        })
    return minimized


def build_roadmap_system_prompt(profile: Dict[str, Any]) -> str:
    return f"""
You are a career engine. Analyze the user's profile and generate 3 distinct career roadmaps
(Fast-Track, Growth, Mastery) to help them achieve their career goal.

User Profile:
- Name: {profile.get("full_name")}
- Current Status: {profile.get("current_year")}
- Major: {profile.get("major")}
- Skills: {_join(profile.get("skills"))}
- Career Goal: {profile.get("career_goal")}
- Target Country: {profile.get("target_country")}
{ROADMAP_OUTPUT_FORMAT}"""


def build_roi_system_prompt(target_country: str, budget: float) -> str:
    return f"""You are a financial career strategist.
Analyze the student's target: {target_country} and budget: {_amount(budget)}.
If the target is over budget (approx 20% buffer), recommend a cheaper alternative with similar academic quality.
{ROI_OUTPUT_FORMAT}"""


def build_roi_user_prompt(target_country: str, budget: float) -> str:
    return f"Analyze ROI for studying in {target_country} with a budget of {_amount(budget)}."


def build_dashboard_system_prompt(profile: Dict[str, Any], language: str = "en") -> str:
    return f"""
You are a strategic guidance AI. Analyze the student's profile and generate a JSON dashboard.

IMPORTANT: Output the content in this language: {language} (ISO Code).
Keep names of programming languages (Java, Python) and technical terms (CGPA, ROI) in English if common in that language.

Student Profile:
- Name: {profile.get("name")}
- 10th Marks: {profile.get("marks_10th")}
- 12th Marks: {profile.get("marks_12th")}
- Skills: {_join(profile.get("skills"))}
- Interests: {_join(profile.get("interests"))}
- Strengths: {_join(profile.get("strengths"))}
- Weaknesses: {_join(profile.get("weaknesses"))}
{DASHBOARD_OUTPUT_FORMAT}"""


def build_career_timelines_prompt(user_profile: Dict[str, Any], selected_path: str) -> str:
    return f"""
You are an expert career strategist. The user has chosen the career path: "{selected_path}".
Their profile: {json.dumps(user_profile)}
{CAREER_TIMELINES_OUTPUT_FORMAT}"""


def build_career_options_prompt(user_profile: Dict[str, Any]) -> str:
    return f"""
Analyze this student profile and suggest 4 optimal career paths.
Profile: {json.dumps(user_profile)}
{CAREER_OPTIONS_OUTPUT_FORMAT}"""
