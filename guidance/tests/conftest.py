"""
Shared fixtures for the guidance test suite.

DATABASE_URL is pointed at a throwaway SQLite file before anything imports db.py.
"""

import os
import sys
import tempfile
from types import SimpleNamespace
from unittest.mock import MagicMock

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

_DB_DIR = tempfile.mkdtemp(prefix="guidance-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_DB_DIR, 'test.db')}"

import pytest

from guidance.logic.contracts import (
    EligibilityRule,
    ExtractedDocument,
    ExtractedEntities,
)


def completion(content, role="assistant"):
    """Shape of an OpenAI chat completion response."""
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(role=role, content=content))])


def fake_llm_client(content='{"ok": true}'):
    client = MagicMock()
    client.chat.completions.create.return_value = completion(content)
    return client


def make_document(file_name="doc.pdf", kind="Marksheet", **entities):
    return ExtractedDocument(
        file_name=file_name,
        document_kind=kind,
        confidence=0.9,
        entities=ExtractedEntities(**entities),
    )


@pytest.fixture
def science_rule():
    return EligibilityRule(
        id="btech",
        name="B.Tech Computer Science",
        min_percentage10=60,
        min_percentage12=70,
        required_stream="Science",
        required_subjects=["Math"],
        min_subject_score=70,
        admission_probability_base=78,
        roi="High",
        risk_level="Low",
        roadmap={"steps": ["JEE Main"]},
    )


@pytest.fixture
def daad_rule():
    return EligibilityRule(
        id="daad",
        name="DAAD Germany Scholarship",
        required_stream="Any",
        admission_probability_base=55,
        roi="Extreme",
        risk_level="Medium",
        is_international=True,
        visa_probability_base=92,
    )


@pytest.fixture
def open_rule():
    """A rule with every threshold at zero."""
    return EligibilityRule(id="open", name="Open Foundation Course", required_stream="Any")


@pytest.fixture
def offline_advisor(monkeypatch):
    from guidance.ai.advisor import AIAdvisor

    monkeypatch.delenv("GROQ_API_KEY", raising=False)
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    return AIAdvisor()


@pytest.fixture
def app_client():
    from fastapi.testclient import TestClient
    from main import app

    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()
