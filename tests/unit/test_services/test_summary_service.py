"""Unit tests for the parent summary and counselor notes."""

import pytest

from lantern.llm.fallback_handler import FallbackHandler
from lantern.schemas.career_schemas import LocalOpportunities
from lantern.services.path_service import PathState
from lantern.services.profile_service import ProfileBuilder
from lantern.services.scoring_service import ScoringService
from lantern.services.summary_service import SummaryService, career_readiness
from lantern.utils.constants import CareerReadiness, QuestionIds


@pytest.fixture
def nurse(catalog, decided_nurse_answers):
    profile = ProfileBuilder(catalog).build_profile(decided_nurse_answers, PathState.DECIDED)
    matches = ScoringService().score(profile, catalog)
    return profile, matches


@pytest.fixture
def explorer(catalog, undecided_answers):
    profile = ProfileBuilder(catalog).build_profile(undecided_answers, PathState.UNDECIDED)
    matches = ScoringService().score(profile, catalog)
    return profile, matches


@pytest.fixture
def top_augmentation(catalog):
    career = catalog.get("rn-001")
    return lambda match: FallbackHandler().build_augmentation(career, match, [])


class TestCareerReadiness:
    """Readiness levels from path and match strength."""

    def test_decided_with_strong_match(self, nurse):
        assert career_readiness(*nurse) == CareerReadiness.HIGH

    def test_undecided_with_inferred_category(self, explorer):
        assert career_readiness(*explorer) == CareerReadiness.MODERATE

    def test_undecided_without_category(self, explorer):
        profile, matches = explorer
        profile = profile.model_copy(update={"selected_category": None})

        assert career_readiness(profile, matches) == CareerReadiness.DEVELOPING


class TestParentSummary:
    """Test cases for SummaryService.build_parent_summary."""

    def test_parent_summary(self, nurse, top_augmentation):
        profile, matches = nurse

        summary = SummaryService().build_parent_summary(profile, matches, top_augmentation(matches[0]))

        assert "strong potential for Registered Nurse" in summary.overview
        assert "science, english" in summary.overview
        assert summary.key_recommendations == [
            "Explore Registered Nurse (100% match), which needs associate degree"
        ]
        assert summary.support_actions[0] == "Encourage enrollment in Biology, Chemistry"
        assert summary.timeline_highlights[0].startswith("Grade 11")
        assert summary.timeline_highlights[1].startswith("Grade 12")
        assert summary.timeline_highlights[-1] == "Career entry: Target Registered Nurse positions averaging $75,000 a year"

    def test_senior_timeline_has_no_next_grade(self, catalog, decided_nurse_answers, top_augmentation):
        decided_nurse_answers[QuestionIds.GRADE_ZIP] = {"grade": 12, "zipCode": "30301"}
        profile = ProfileBuilder(catalog).build_profile(decided_nurse_answers, PathState.DECIDED)
        matches = ScoringService().score(profile, catalog)

        summary = SummaryService().build_parent_summary(profile, matches, top_augmentation(matches[0]))

        assert len(summary.timeline_highlights) == 3

    def test_local_salary_preferred(self, nurse, top_augmentation):
        profile, matches = nurse
        local = LocalOpportunities(estimated_jobs=40, average_local_salary=81000, distance_from_student=25)
        matches = [matches[0].model_copy(update={"local_opportunities": local})]

        summary = SummaryService().build_parent_summary(profile, matches, top_augmentation(matches[0]))

        assert "$81,000" in summary.timeline_highlights[-1]


class TestCounselorNotes:
    """Test cases for SummaryService.build_counselor_notes."""

    def test_counselor_notes(self, nurse):
        profile, matches = nurse

        notes = SummaryService().build_counselor_notes(profile, matches, [])

        assert notes.career_readiness == CareerReadiness.HIGH
        assert notes.assessment_insights[0] == "Student is in grade 11 and shows high career readiness"
        assert "Career category: Healthcare" in notes.assessment_insights
        assert "Constraints: stay close to home" in notes.assessment_insights
        assert notes.recommendation_rationale[0].startswith("Registered Nurse (100%): ")
        assert len(notes.parent_meeting_topics) == 4

    def test_flags_become_insights(self, nurse):
        profile, matches = nurse

        notes = SummaryService().build_counselor_notes(
            profile, matches, ["conflicting_location_constraints", "minimal_free_text:experience"]
        )

        assert any("clarify location priorities" in i for i in notes.assessment_insights)
        assert "Very little detail in the experience answer; follow up in conversation" in notes.assessment_insights

    def test_local_market_in_rationale(self, nurse):
        profile, matches = nurse
        local = LocalOpportunities(estimated_jobs=40, average_local_salary=81000, distance_from_student=25)
        matches = [matches[0].model_copy(update={"local_opportunities": local})]

        notes = SummaryService().build_counselor_notes(profile, matches, [])

        assert notes.recommendation_rationale[-1] == "Local job market shows 40 listings within 25 miles"

    def test_support_confidence_included(self, catalog, decided_nurse_answers):
        decided_nurse_answers[QuestionIds.SUPPORT_CONFIDENCE] = "My aunt is a nurse and will help me"
        profile = ProfileBuilder(catalog).build_profile(decided_nurse_answers, PathState.DECIDED)
        matches = ScoringService().score(profile, catalog)

        notes = SummaryService().build_counselor_notes(profile, matches, [])

        assert "On support: My aunt is a nurse and will help me" in notes.assessment_insights

    def test_developing_readiness_adds_exploration(self, explorer):
        profile, matches = explorer
        profile = profile.model_copy(update={"selected_category": None})

        notes = SummaryService().build_counselor_notes(profile, matches, [])

        assert notes.career_readiness == CareerReadiness.DEVELOPING
        assert notes.follow_up_actions[0].startswith("Arrange career exploration")
