"""Unit tests for the deterministic fallback handler."""

import pytest

from lantern.llm.fallback_handler import DEFAULT_ACTION_ITEMS, FallbackHandler, FallbackReason
from lantern.schemas.career_schemas import MatchResult
from lantern.services.skill_service import SkillGapResolver
from lantern.utils.constants import ActionPriority, Sector


def match_for(career, score=100.0):
    return MatchResult(
        career_id=career.id,
        title=career.title,
        sector=career.sector,
        required_education=career.required_education,
        match_score=score,
        average_salary=career.average_salary,
    )


class TestFallbackHandler:
    """Test cases for FallbackHandler."""

    @pytest.fixture
    def handler(self):
        return FallbackHandler()

    @pytest.fixture
    def nurse(self, catalog):
        return catalog.get("rn-001")

    def test_career_pathway(self, handler, nurse):
        pathway = handler.career_pathway(nurse)

        assert pathway.steps[0] == "Complete high school with focus on subjects relevant to Registered Nurse"
        assert pathway.steps[1] == "Pursue associate degree training for Registered Nurse"
        assert "NCLEX-RN" in pathway.steps[2]
        assert pathway.timeline == "2-4 years"
        assert pathway.requirements == ["High school diploma", "associate degree", "NCLEX-RN"]

    def test_high_school_pathway_has_no_program_step(self, handler, catalog):
        pathway = handler.career_pathway(catalog.get("const-001"))

        assert len(pathway.steps) == 5
        assert not any(step.startswith("Pursue") for step in pathway.steps)
        assert pathway.requirements == ["High school diploma", "OSHA 10"]
        assert pathway.timeline == "0-1 years"

    def test_career_without_certifications(self, handler, catalog):
        pathway = handler.career_pathway(catalog.get("graph-001"))

        assert "Professional certifications" in pathway.steps[2]
        assert pathway.requirements[-1] == "Professional development"

    def test_academic_plan_uses_sector_courses(self, handler, nurse):
        plan = handler.academic_plan(nurse)

        assert plan.current_year[0].course_name == "Biology"
        assert plan.next_year[0].course_name == "Chemistry"
        assert plan.long_term[0].course_name == "Anatomy and Physiology"
        assert plan.current_year[0].career_connection == "Registered Nurse"

    def test_action_items(self, handler):
        items = handler.action_items()

        assert len(items) == len(DEFAULT_ACTION_ITEMS)
        assert [item.priority for item in items[:2]] == [ActionPriority.HIGH, ActionPriority.HIGH]
        assert items[0].timeline == "This week"

    def test_explanation(self, handler, nurse):
        assert handler.explanation(match_for(nurse, 88.0)).startswith("Registered Nurse scored 88%")

    def test_build_augmentation_is_complete(self, handler, nurse):
        gaps = SkillGapResolver().skill_gaps_for(Sector.HEALTHCARE, [])

        augmentation = handler.build_augmentation(
            nurse, match_for(nurse), gaps, FallbackReason.PROVIDER_DISABLED
        )

        assert augmentation.academic_plan.current_year
        assert augmentation.career_pathway.steps
        assert augmentation.skill_gaps == gaps
        assert len(augmentation.action_items) == 4
        assert augmentation.explanation

    @pytest.mark.parametrize("career_id", ["rn-001", "const-001", "swdev-001", "graph-001", "accountant-001"])
    def test_every_sector_produces_content(self, handler, catalog, career_id):
        career = catalog.get(career_id)

        augmentation = handler.build_augmentation(career, match_for(career), [])

        assert augmentation.academic_plan.long_term
        assert augmentation.career_pathway.requirements[0] == "High school diploma"
