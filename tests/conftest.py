"""Shared fixtures for Lantern tests."""

from typing import Any, Dict

import pytest

from lantern.core.config import Settings
from lantern.services.catalog_service import CareerCatalog
from lantern.utils.constants import QuestionIds


def subject_ratings(**overrides: int) -> Dict[str, int]:
    """Ratings for every subject, 3 unless overridden."""
    ratings = {
        "math": 3,
        "science": 3,
        "english": 3,
        "history": 3,
        "art": 3,
        "technology": 3,
        "physical_ed": 3,
        "languages": 3,
        "business": 3,
    }
    ratings.update(overrides)
    return ratings


@pytest.fixture
def catalog() -> CareerCatalog:
    return CareerCatalog()


@pytest.fixture
def test_settings() -> Settings:
    """Settings with every external provider switched off."""
    return Settings(
        APP_ENV="test",
        USE_REAL_AI=False,
        USE_REAL_JOBS=False,
        OPENAI_API_KEY=None,
        GOOGLE_API_KEY=None,
        ADZUNA_APP_ID=None,
        ADZUNA_API_KEY=None,
    )


@pytest.fixture
def decided_nurse_answers() -> Dict[str, Any]:
    """A decided healthcare student willing to pursue an associate degree."""
    return {
        QuestionIds.GRADE_ZIP: {"grade": 11, "zipCode": "30301"},
        QuestionIds.CAREER_KNOWLEDGE: "yes",
        QuestionIds.CAREER_CATEGORY: "healthcare",
        QuestionIds.ACADEMIC_PERFORMANCE: subject_ratings(science=5, english=4),
        QuestionIds.EDUCATION_WILLINGNESS: "associate",
        QuestionIds.INTERESTS_TEXT: "I volunteer at the hospital and like helping patients",
        QuestionIds.EXPERIENCE_TEXT: "Certified in first aid through the Red Cross",
        QuestionIds.CONSTRAINTS: ["stay_close_home"],
        QuestionIds.IMPACT_INSPIRATION: "I want to care for people when they are sick",
    }


@pytest.fixture
def undecided_answers() -> Dict[str, Any]:
    """An undecided student leaning toward technology."""
    return {
        QuestionIds.GRADE_ZIP: {"grade": "10", "zipCode": "94105"},
        QuestionIds.CAREER_KNOWLEDGE: "no",
        QuestionIds.ACADEMIC_PERFORMANCE: subject_ratings(math=5, technology=5, art=2),
        QuestionIds.EDUCATION_WILLINGNESS: "bachelor",
        QuestionIds.INTERESTS_TEXT: "I like coding small video game projects and building websites",
        QuestionIds.EXPERIENCE_TEXT: "Helped run the computer lab after school",
        QuestionIds.TRAITS: ["analytical", "problem_solver", "curious"],
        QuestionIds.CONSTRAINTS: ["open_relocating"],
        QuestionIds.IMPACT_INSPIRATION: "Build tools that make everyday life easier",
    }
