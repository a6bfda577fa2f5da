"""Prompt templates for per-career augmentation.

The human message carries a context document: the full student profile, the
scored matches, the career in focus and any contradiction flags found in the
answers, so the model can address inconsistencies instead of ignoring them.
"""

import json
from typing import Any, Dict, List, Optional, Tuple

from langchain_core.prompts import (
    ChatPromptTemplate,
    HumanMessagePromptTemplate,
    SystemMessagePromptTemplate,
)

from lantern.data.mappings import SUBJECT_SECTORS
from lantern.schemas.career_schemas import CareerRecord, MatchResult
from lantern.schemas.profile_schemas import StudentProfile
from lantern.utils.constants import Constraint, ScoringConstants, Subject
from lantern.utils.validators import is_low_information_text

EDUCATION_EXCEEDS_WILLINGNESS = "education_exceeds_willingness"
MINIMAL_FREE_TEXT = "minimal_free_text"
LOW_SUBJECT_ALIGNMENT = "low_subject_alignment"
CONFLICTING_LOCATION_CONSTRAINTS = "conflicting_location_constraints"


def detect_contradictions(
    profile: StudentProfile,
    matches: List[MatchResult],
    named_career: Optional[CareerRecord] = None
) -> List[str]:
    """Find answers that disagree with each other or with the matches.

    The education filter on the decided path drops the student's named
    career when it needs more education than they are willing to pursue,
    so that career is checked directly rather than through the matches.

    Args:
        profile: Student profile
        matches: Selected matches, best first
        named_career: Catalog record for the career the student named

    Returns:
        List[str]: Flags in a stable order
    """
    flags: List[str] = []

    willingness = profile.education_willingness.ordinal
    candidates = [match.required_education for match in matches]
    if named_career is not None:
        candidates.append(named_career.required_education)
    if any(level.ordinal > willingness for level in candidates):
        flags.append(EDUCATION_EXCEEDS_WILLINGNESS)

    for field_name, text in profile.free_text_fields().items():
        if is_low_information_text(text):
            flags.append(f"{MINIMAL_FREE_TEXT}:{field_name}")

    if matches:
        sector = matches[0].sector
        aligned = [
            profile.subject_ratings[subject]
            for subject in Subject
            if sector in SUBJECT_SECTORS[subject]
        ]
        if not aligned or max(aligned) < ScoringConstants.MODERATE_INTEREST_RATING:
            flags.append(LOW_SUBJECT_ALIGNMENT)

    if {Constraint.STAY_CLOSE_HOME, Constraint.OPEN_RELOCATING} <= profile.constraints:
        flags.append(CONFLICTING_LOCATION_CONSTRAINTS)

    return flags


class AugmentationPrompts:
    """Prompt templates for career augmentation."""

    SYSTEM_PROMPT = """You are an experienced high school career counselor. You turn a scored career match into concrete, encouraging guidance a teenager can act on.

Your guidance must:
1. Be specific to the student's grade, subjects and stated interests
2. Stay realistic about the education the student is willing to pursue
3. Recommend actual high school courses and activities
4. Address any contradiction flags in the context honestly and kindly
5. Keep skill gaps within the career's own field

{format_instructions}"""

    HUMAN_PROMPT = """Create an academic plan, career pathway, skill gaps and action items for the career in focus.

CAREER IN FOCUS:
{focus}

STUDENT CONTEXT:
{context}"""

    @classmethod
    def get_template(cls) -> ChatPromptTemplate:
        return ChatPromptTemplate.from_messages([
            SystemMessagePromptTemplate.from_template(cls.SYSTEM_PROMPT),
            HumanMessagePromptTemplate.from_template(cls.HUMAN_PROMPT),
        ])

    @classmethod
    def build_context(
        cls,
        profile: StudentProfile,
        matches: List[MatchResult],
        flags: List[str],
        named_career: Optional[CareerRecord] = None
    ) -> Dict[str, Any]:
        """Assemble the context document embedded in the prompt."""
        context = {
            "profile": profile.to_json_dict(),
            "matches": [
                {
                    "careerId": match.career_id,
                    "title": match.title,
                    "sector": match.sector.value,
                    "requiredEducation": match.required_education.value,
                    "matchScore": match.match_score,
                    "reasoningFactors": match.reasoning_factors,
                }
                for match in matches
            ],
            "contradictionFlags": flags,
        }
        if named_career is not None:
            context["namedCareer"] = {
                "careerId": named_career.id,
                "title": named_career.title,
                "requiredEducation": named_career.required_education.value,
                "inMatches": any(match.career_id == named_career.id for match in matches),
            }
        return context

    @classmethod
    def format_prompt(
        cls,
        profile: StudentProfile,
        matches: List[MatchResult],
        focus: MatchResult,
        format_instructions: str,
        flags: List[str],
        named_career: Optional[CareerRecord] = None
    ) -> Tuple[str, str]:
        """Render the system and human prompt strings.

        Returns:
            Tuple[str, str]: (system prompt, user prompt)
        """
        context = cls.build_context(profile, matches, flags, named_career)
        focus_doc = {
            "careerId": focus.career_id,
            "title": focus.title,
            "sector": focus.sector.value,
            "requiredEducation": focus.required_education.value,
            "matchScore": focus.match_score,
            "skillGaps": [gap.to_json_dict() for gap in focus.skill_gaps],
        }

        system_message, human_message = cls.get_template().format_messages(
            format_instructions=format_instructions,
            focus=json.dumps(focus_doc, indent=2),
            context=json.dumps(context, indent=2),
        )
        return system_message.content, human_message.content


__all__ = [
    "AugmentationPrompts",
    "detect_contradictions",
    "EDUCATION_EXCEEDS_WILLINGNESS",
    "MINIMAL_FREE_TEXT",
    "LOW_SUBJECT_ALIGNMENT",
    "CONFLICTING_LOCATION_CONSTRAINTS",
]
