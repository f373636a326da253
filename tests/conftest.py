"""
Test configuration for PrepDeck tests.

This module provides shared fixtures for unit and integration tests.
"""
# Set test environment variables BEFORE any imports that might use them
import os
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient

from app.config import get_settings
from app.models.question_models import AnswerCandidate
from app.services.interview_prep_service import InterviewPrepService


@pytest.fixture
def settings():
    """Application settings."""
    return get_settings()


@pytest.fixture
def client():
    """FastAPI test client."""
    from app.main import app
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def service(settings):
    """Interview prep service with default tagging."""
    return InterviewPrepService(settings=settings)


@pytest.fixture
def specific_answer():
    """Factory for answers that pass the generic-answer filter."""
    def _make(topic: str) -> str:
        return f"Walk through a concrete project where you handled {topic}, with numbers on the outcome."
    return _make


@pytest.fixture
def sample_pairs(specific_answer):
    """Three well-formed question/answer pairs."""
    questions = [
        "How would you design a rate limiter for a public API?",
        "Tell me about a time you disagreed with a teammate.",
        "Why do you want to work at Acme?",
    ]
    return [AnswerCandidate(question=q, answer=specific_answer(f"topic {i}")) for i, q in enumerate(questions)]
