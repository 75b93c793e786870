"""
Test the guidance engine pipeline end to end.
"""

from guidance.logic import GuidanceEngine, StudentProfile, get_guidance
from conftest import make_document


def _documents():
    return [
        make_document("marks_10.pdf", education_level="10th", percentage=85,
                      subjects={"Mathematics": 85, "Science": 82, "English": 78}),
        make_document("marks_12.pdf", education_level="12th", percentage=90,
                      subjects={"Physics": 78, "Chemistry": 85, "Math": 92, "English": 88, "CS": 95}),
        make_document("ielts_result.pdf", "ScoreCard"),
    ]


def test_engine_full_pipeline(science_rule, daad_rule, open_rule):
    engine = GuidanceEngine(rules=[science_rule, daad_rule, open_rule])
    student = StudentProfile(
        percentage10=85, percentage12=90, stream="Science (PCM)",
        percentage_subjects={"Math": 92}, target_countries=["Germany"],
    )

    output = engine.analyze(_documents(), student)

    assert output.request_id
    assert output.engine_version == "1.0.0"
    assert [r.level for r in output.profile.education_history] == ["12th", "10th"]
    assert output.profile.gpa == 4.38  # (4.25 + 4.5) / 2
    assert output.profile.entrance_scores[0].exam == "IELTS"
    assert output.intelligence.academic_summary.dominant_stream == "STEM"
    assert output.intelligence.risk_analysis.level == "Low"
    assert output.total_rules_evaluated == 3
    assert output.total_eligible == 3
    assert [p.title for p in output.career_paths][-1] == "Software Developer"
    assert len(output.global_options) == 4
    assert output.warnings == []


def test_engine_without_student_profile(science_rule):
    output = GuidanceEngine(rules=[science_rule]).analyze(_documents())

    assert output.eligibility == []
    assert output.total_rules_evaluated == 0
    assert "Student profile not provided. Eligibility was not evaluated." in output.warnings


def test_engine_with_no_documents(open_rule):
    output = GuidanceEngine(rules=[open_rule]).analyze([], StudentProfile())

    assert output.profile.gpa == 0
    assert output.intelligence.risk_analysis.level == "Medium"
    assert output.total_eligible == 1
    assert output.warnings == [
        "No documents supplied. Upload marksheets or transcripts for a fuller profile.",
        "GPA not available. Risk analysis defaults to Medium.",
    ]


def test_engine_check_eligibility_uses_its_rules(science_rule):
    engine = GuidanceEngine(rules=[science_rule])

    results = engine.check_eligibility(StudentProfile())

    assert [r.rule_id for r in results] == ["btech"]
    assert engine.rules == (science_rule,)


def test_get_guidance_uses_bundled_rules():
    output = get_guidance(_documents(), StudentProfile(target_countries=["USA"]))

    ids = [r.rule_id for r in output.eligibility]
    assert "usa-ms-cs" in ids
    assert "daad-germany" not in ids
