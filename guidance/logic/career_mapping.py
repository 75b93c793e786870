"""
Career Mapping

Suggests career paths from the strongest subjects of a unified profile.
"""

from typing import List

from .contracts import CareerPath, GlobalOpportunity, UnifiedProfile
from .constants import GLOBAL_OPTIONS, STRONG_SUBJECT_SCORE


def subject_score(profile: UnifiedProfile, keyword: str) -> float:
    """Score of the first strong subject whose name contains `keyword`, else 0."""
    for entry in profile.subject_strength:
        if keyword in entry.subject:
            return entry.score
    return 0


def generate_career_map(profile: UnifiedProfile) -> List[CareerPath]:
    paths: List[CareerPath] = []

    math = subject_score(profile, "Math")
    cs = (
        subject_score(profile, "Computer")
        or subject_score(profile, "CS")
        or subject_score(profile, "Technology")
    )
    physics = subject_score(profile, "Physics")

    if math > STRONG_SUBJECT_SCORE and cs > STRONG_SUBJECT_SCORE:
        paths.append(CareerPath(
            title="AI Research Scientist",
            match_score=96,
            description="Develop new algorithms and models for artificial intelligence.",
            reasoning=["Strong Mathematics base", "High proficiency in CS"],
            salary_range="$120k - $200k",
            job_outlook="Growing",
            skills_gap=["Python", "TensorFlow", "Linear Algebra"],
        ))

    if physics > STRONG_SUBJECT_SCORE and math > STRONG_SUBJECT_SCORE:
        paths.append(CareerPath(
            title="Robotics Engineer",
            match_score=88,
            description="Design and build autonomous robotic systems.",
            reasoning=["Strong Physics application", "Mathematical modeling skills"],
            salary_range="$90k - $150k",
            job_outlook="Growing",
            skills_gap=["ROS", "C++", "Control Systems"],
        ))

    # Always offered
    paths.append(CareerPath(
        title="Software Developer",
        match_score=85,
        description="Build scalable web and mobile applications.",
        reasoning=["Good logical reasoning", "Technical aptitude"],
        salary_range="$80k - $130k",
        job_outlook="Stable",
        skills_gap=["React", "Node.js", "System Design"],
    ))

    return paths


def evaluate_global_options(profile: UnifiedProfile) -> List[GlobalOpportunity]:
    """Reference list of overseas programs shown alongside the career map."""
    return [GlobalOpportunity(**option) for option in GLOBAL_OPTIONS]
