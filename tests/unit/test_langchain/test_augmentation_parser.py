"""Unit tests for the augmentation output parser."""

import json

import pytest
from langchain_core.exceptions import OutputParserException

from lantern.langchain_handlers.parsers.augmentation_parser import AugmentationOutputParser
from lantern.utils.constants import ActionPriority, SkillImportance


class TestAugmentationOutputParser:
    """Test cases for AugmentationOutputParser."""

    @pytest.fixture
    def parser(self):
        return AugmentationOutputParser()

    @pytest.fixture
    def valid_payload(self):
        return {
            "academicPlan": {
                "currentYear": [{"courseName": "Biology", "reasoning": "Foundation", "priority": "Essential"}],
                "nextYear": [{"courseName": "Chemistry"}],
                "longTerm": [],
            },
            "careerPathway": {
                "steps": ["Finish high school", "Complete an ADN program", "Pass the NCLEX-RN"],
                "timeline": "2-3 years",
                "requirements": ["NCLEX-RN"],
            },
            "skillGaps": [{"skill": "Medical Terminology", "importance": "critical", "howToAcquire": "Take a course"}],
            "actionItems": [{"title": "Shadow a nurse", "priority": "HIGH", "timeline": "This month"}],
            "explanation": "Nursing fits your interest in helping patients.",
        }

    def test_parse_valid_response(self, parser, valid_payload):
        augmentation = parser.parse(json.dumps(valid_payload))

        assert augmentation.academic_plan.current_year[0].course_name == "Biology"
        assert augmentation.career_pathway.steps[-1] == "Pass the NCLEX-RN"
        assert augmentation.skill_gaps[0].importance == SkillImportance.CRITICAL
        assert augmentation.skill_gaps[0].how_to_acquire == "Take a course"
        assert augmentation.action_items[0].priority == ActionPriority.HIGH
        assert augmentation.explanation.startswith("Nursing")

    def test_parse_fenced_response(self, parser, valid_payload):
        text = f"Here is the plan:\n```json\n{json.dumps(valid_payload)}\n```"

        augmentation = parser.parse(text)

        assert augmentation.action_items[0].title == "Shadow a nurse"

    def test_parse_damaged_response(self, parser):
        text = '{careerPathway: {"steps": ["a", "b",],}, "explanation": "ok"}'

        augmentation = parser.parse(text)

        assert augmentation.career_pathway.steps == ["a", "b"]

    def test_bare_strings_are_normalized(self, parser):
        text = json.dumps({
            "academicPlan": {"currentYear": ["Algebra II"]},
            "careerPathway": ["Graduate", "Apprentice"],
            "skillGaps": ["Wiring"],
            "actionItems": ["Visit a job site"],
        })

        augmentation = parser.parse(text)

        assert augmentation.academic_plan.current_year[0].course_name == "Algebra II"
        assert augmentation.career_pathway.steps == ["Graduate", "Apprentice"]
        assert augmentation.skill_gaps[0].skill == "Wiring"
        assert augmentation.skill_gaps[0].importance == SkillImportance.IMPORTANT
        assert augmentation.action_items[0].priority == ActionPriority.MEDIUM

    def test_missing_sections_default_to_empty(self, parser):
        augmentation = parser.parse('{"explanation": "Short"}')

        assert augmentation.skill_gaps == []
        assert augmentation.academic_plan.current_year == []

    def test_unrepairable_text(self, parser):
        with pytest.raises(OutputParserException) as exc_info:
            parser.parse("I cannot help with that.")

        assert exc_info.value.llm_output == "I cannot help with that."

    def test_non_object_json(self, parser):
        with pytest.raises(OutputParserException):
            parser.parse("[1, 2, 3]")

    def test_schema_violation(self, parser):
        with pytest.raises(OutputParserException):
            parser.parse('{"skillGaps": [{"skill": ""}]}')

    def test_format_instructions_describe_schema(self, parser):
        instructions = parser.get_format_instructions()

        assert "academicPlan" in instructions
        assert "skillGaps" in instructions
        assert parser._type == "augmentation_parser"
