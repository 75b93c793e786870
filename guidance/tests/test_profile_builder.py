"""
Tests for the profile aggregator.
"""

import pytest
from pydantic import ValidationError

from guidance.logic import build_profile, ExtractedDocument
from conftest import make_document


def test_empty_input_builds_empty_profile():
    profile = build_profile([])

    assert profile.education_history == []
    assert profile.subject_strength == []
    assert profile.gpa == 0
    assert profile.certifications == []
    assert profile.entrance_scores == []
    assert profile.personal.name == "User"


def test_gpa_averages_gpa_and_converted_percentage():
    docs = [
        make_document("degree.pdf", "Transcript", education_level="Bachelor", gpa=8.0),
        make_document("marks_12.pdf", education_level="12th", percentage=90),
    ]

    profile = build_profile(docs)

    assert profile.gpa == pytest.approx(6.25)


def test_gpa_prefers_gpa_over_percentage_on_same_document():
    docs = [make_document("degree.pdf", "Transcript", education_level="Bachelor", gpa=8.0, percentage=40)]

    assert build_profile(docs).gpa == pytest.approx(8.0)


def test_document_without_marks_does_not_dilute_gpa():
    docs = [
        make_document("degree.pdf", "Transcript", education_level="Bachelor", gpa=8.0),
        make_document("marks_10.pdf", education_level="10th"),
    ]

    profile = build_profile(docs)

    assert profile.gpa == pytest.approx(8.0)
    assert len(profile.education_history) == 2


def test_gpa_rounded_to_two_decimals():
    docs = [
        make_document("a.pdf", education_level="10th", gpa=7.0),
        make_document("b.pdf", education_level="12th", gpa=8.0),
        make_document("c.pdf", education_level="Bachelor", gpa=8.0),
    ]

    assert build_profile(docs).gpa == 7.67


def test_subject_strength_keeps_top_five_descending():
    subjects = {
        "Art": 10, "Music": 20, "History": 30, "Geography": 40,
        "English": 50, "Chemistry": 60, "Physics": 70, "Math": 80,
    }
    docs = [make_document("marks_12.pdf", education_level="12th", subjects=subjects)]

    strength = build_profile(docs).subject_strength

    assert len(strength) == 5
    assert [s.subject for s in strength] == ["Math", "Physics", "Chemistry", "English", "Geography"]
    assert [s.score for s in strength] == [80, 70, 60, 50, 40]


def test_subject_scores_are_averaged_across_documents():
    docs = [
        make_document("marks_10.pdf", education_level="10th", subjects={"Math": 85, "English": 70}),
        make_document("marks_12.pdf", education_level="12th", subjects={"Math": 90}),
    ]

    strength = {s.subject: s.score for s in build_profile(docs).subject_strength}

    assert strength["Math"] == 88  # 87.5 rounds half up
    assert strength["English"] == 70


def test_education_history_sorted_by_level_rank():
    docs = [
        make_document("marks_10.pdf", education_level="10th"),
        make_document("masters.pdf", "Transcript", education_level="Master"),
        make_document("marks_12.pdf", education_level="12th"),
    ]

    history = build_profile(docs).education_history

    assert [r.level for r in history] == ["Master", "12th", "10th"]


def test_unrecognised_level_sorts_last():
    docs = [
        make_document("other.pdf", education_level="Postdoc"),
        make_document("marks_10.pdf", education_level="10th"),
    ]

    history = build_profile(docs).education_history

    assert [r.level for r in history] == ["10th", "Postdoc"]


def test_education_record_defaults_and_score_labels():
    docs = [
        make_document("marks_12.pdf", education_level="12th", percentage=90, subjects={"Math": 92, "CS": 95}),
        make_document("degree.pdf", "Transcript", education_level="Bachelor", gpa=8.0, institution="Metro Tech",
                      year=2024, stream="Computer Science"),
        make_document("marks_10.pdf", education_level="10th"),
    ]

    history = build_profile(docs).education_history
    bachelor, twelfth, tenth = history

    assert bachelor.score == "8.0 GPA"
    assert bachelor.institution == "Metro Tech"
    assert bachelor.year == 2024
    assert bachelor.stream == "Computer Science"

    assert twelfth.score == "90%"
    assert twelfth.institution == "Unknown Institute"
    assert twelfth.stream == "General"
    assert twelfth.subjects == ["Math", "CS"]

    assert tenth.score == "N/A"


def test_document_without_level_still_contributes_subjects():
    docs = [make_document("notes.pdf", "Unknown", subjects={"Biology": 77}, gpa=9.0)]

    profile = build_profile(docs)

    assert profile.education_history == []
    assert profile.gpa == 0
    assert [(s.subject, s.score) for s in profile.subject_strength] == [("Biology", 77)]


def test_certificates_and_score_cards():
    docs = [
        make_document("aws_cloud_practitioner.pdf", "Certificate"),
        make_document("my_ielts_result.pdf", "ScoreCard"),
        make_document("duolingo.png", "ScoreCard"),
    ]

    profile = build_profile(docs)

    assert profile.certifications == ["aws_cloud_practitioner"]
    assert [(e.exam, e.score) for e in profile.entrance_scores] == [
        ("IELTS", "Detected"),
        ("DUOLINGO", "Detected"),
    ]


def test_student_name_taken_from_first_document_reporting_it():
    docs = [
        make_document("marks_10.pdf", education_level="10th"),
        make_document("marks_12.pdf", education_level="12th", student_name="Alex Doe"),
        make_document("degree.pdf", education_level="Bachelor", student_name="A. Doe"),
    ]

    assert build_profile(docs).personal.name == "Alex Doe"


def test_accepts_camel_case_documents():
    doc = ExtractedDocument.model_validate({
        "fileName": "marks_10.pdf",
        "documentKind": "Marksheet",
        "confidence": 0.91,
        "entities": {"educationLevel": "10th", "percentage": 80, "subjects": {"Science": 82}},
    })

    profile = build_profile([doc])

    assert profile.gpa == pytest.approx(4.0)
    assert profile.education_history[0].level == "10th"


def test_unknown_document_kind_is_tolerated():
    doc = ExtractedDocument.model_validate({"fileName": "passport.pdf", "documentKind": "Passport", "entities": None})

    profile = build_profile([doc])

    assert doc.document_kind == "Unknown"
    assert profile.certifications == []


def test_profile_is_immutable():
    profile = build_profile([])

    with pytest.raises(ValidationError):
        profile.gpa = 4.0


def test_camel_case_serialization():
    docs = [make_document("marks_12.pdf", education_level="12th", percentage=90, subjects={"Math": 92})]

    data = build_profile(docs).model_dump(by_alias=True)

    assert set(data) == {
        "personal", "educationHistory", "subjectStrength", "gpa", "certifications", "entranceScores",
    }
    assert data["subjectStrength"] == [{"subject": "Math", "score": 92}]


def test_record_without_year_defaults_to_2023():
    profile = build_profile([make_document("marks_12.pdf", education_level="12th", percentage=70)])

    assert profile.education_history[0].year == 2023


@pytest.mark.parametrize("raw,expected", [(1.02, 1.0), (-0.1, 0.0), (0.5, 0.5), (None, 0.0)])
def test_out_of_range_confidence_is_clamped(raw, expected):
    doc = ExtractedDocument.model_validate({"fileName": "marks_10.pdf", "confidence": raw})

    assert doc.confidence == expected
