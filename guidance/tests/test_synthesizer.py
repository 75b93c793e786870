"""
Tests for the intelligence synthesizer and career mapping.
"""

from guidance.logic import (
    UnifiedProfile,
    build_profile,
    evaluate_global_options,
    generate_career_map,
    synthesize,
)
from guidance.logic.contracts import EntranceScore, SubjectScore
from guidance.logic.synthesizer import assess_risk, infer_dominant_stream
from conftest import make_document


def _profile(subjects=(), gpa=0.0, exams=()):
    return UnifiedProfile(
        subject_strength=[SubjectScore(subject=s, score=score) for s, score in subjects],
        gpa=gpa,
        entrance_scores=[EntranceScore(exam=e, score="Detected") for e in exams],
    )


def test_risk_boundary_is_strict():
    assert synthesize(_profile(gpa=3.0)).risk_analysis.level == "Medium"
    assert synthesize(_profile(gpa=3.01)).risk_analysis.level == "Low"


def test_zero_gpa_is_medium_risk():
    risk = assess_risk(_profile(gpa=0))

    assert risk.level == "Medium"
    assert risk.factors == ["GPA below 3.0", "No entrance exam scores on record"]


def test_risk_factors_at_threshold():
    risk = assess_risk(_profile(gpa=3.0, exams=["IELTS"]))

    assert risk.level == "Medium"
    assert risk.factors == []


def test_low_risk_without_exams_still_lists_factor():
    risk = assess_risk(_profile(gpa=3.8))

    assert risk.level == "Low"
    assert risk.factors == ["No entrance exam scores on record"]


def test_dominant_stream_keywords():
    assert infer_dominant_stream(_profile([("Mathematics", 90)])) == "STEM"
    assert infer_dominant_stream(_profile([("Data Structures", 88)])) == "STEM"
    assert infer_dominant_stream(_profile([("CS", 95)])) == "STEM"
    assert infer_dominant_stream(_profile([("Business Studies", 90)])) == "Commerce"
    assert infer_dominant_stream(_profile([("Accountancy", 90)])) == "Commerce"
    assert infer_dominant_stream(_profile([("Economics", 90)])) == "Commerce"
    assert infer_dominant_stream(_profile([("History", 90)])) == "Arts/Humanities"
    assert infer_dominant_stream(_profile()) == "General"


def test_dominant_stream_uses_top_subject_only():
    profile = _profile([("History", 95), ("Mathematics", 90)])

    assert infer_dominant_stream(profile) == "Arts/Humanities"


def test_summary_of_empty_profile_is_complete():
    summary = synthesize(build_profile([]))

    assert summary.academic_summary.dominant_stream == "General"
    assert summary.academic_summary.global_equivalence == "WES US GPA: 0.0/4.0"
    assert summary.risk_analysis.level == "Medium"
    assert summary.ai_insight == "Strong academic trajectory in Core Subjects."
    assert summary.career_roles == ["Software Developer"]
    assert summary.admission_probability["Germany"] == 88
    assert summary.visa_confidence["Canada"] == 92
    assert summary.roi_forecast["USA"] == "$180k avg"
    assert len(summary.india_paths) == 2
    assert len(summary.global_paths) == 2
    assert [step.status for step in summary.mission_timeline][:2] == ["Completed", "Active"]


def test_summary_reflects_profile():
    docs = [
        make_document("marks_12.pdf", education_level="12th", gpa=3.5,
                      subjects={"Math": 92, "CS": 95, "Physics": 85}),
    ]

    summary = synthesize(build_profile(docs))

    assert summary.academic_summary.dominant_stream == "STEM"
    assert summary.academic_summary.global_equivalence == "WES US GPA: 3.5/4.0"
    assert summary.risk_analysis.level == "Low"
    assert summary.ai_insight == "Strong academic trajectory in Math, CS, Physics."
    assert summary.career_roles == ["AI Research Scientist", "Robotics Engineer", "Software Developer"]


def test_static_tables_are_not_shared_between_calls():
    first = synthesize(_profile())
    first.admission_probability["Germany"] = 0

    assert synthesize(_profile()).admission_probability["Germany"] == 88


def test_career_map_strong_math_and_cs():
    paths = generate_career_map(_profile([("Mathematics", 90), ("Computer Science", 85)]))

    assert [p.title for p in paths] == ["AI Research Scientist", "Software Developer"]
    assert paths[0].match_score == 96


def test_career_map_physics_and_math():
    paths = generate_career_map(_profile([("Physics", 90), ("Math", 85)]))

    assert [p.title for p in paths] == ["Robotics Engineer", "Software Developer"]


def test_career_map_threshold_is_strict():
    paths = generate_career_map(_profile([("Math", 80), ("CS", 99)]))

    assert [p.title for p in paths] == ["Software Developer"]


def test_global_options_reference_list():
    options = evaluate_global_options(_profile())

    assert [o.country for o in options] == ["Germany", "Canada", "UK", "USA"]
    assert options[0].university == "Technical University of Munich"
