"""Recommendation bundle and AI augmentation schemas."""

from datetime import datetime, timezone
from typing import Any, List, Optional

from pydantic import Field, field_validator

from lantern.schemas.base import FrozenSchema
from lantern.schemas.career_schemas import CareerPathway, MatchResult, SkillGap
from lantern.utils.constants import (
    ActionPriority,
    CareerClarity,
    CareerReadiness,
    Provenance,
)


class CourseRecommendation(FrozenSchema):
    """A course suggested for the student's academic plan."""

    course_name: str = Field(..., min_length=1)
    reasoning: str = Field(default="")
    career_connection: Optional[str] = None
    skills_developed: List[str] = Field(default_factory=list)
    priority: str = Field(default="Recommended")


class AcademicPlan(FrozenSchema):
    current_year: List[CourseRecommendation] = Field(default_factory=list)
    next_year: List[CourseRecommendation] = Field(default_factory=list)
    long_term: List[CourseRecommendation] = Field(default_factory=list)


class ActionItem(FrozenSchema):
    """A concrete next step for the student."""

    title: str = Field(..., min_length=1)
    description: str = Field(default="")
    priority: ActionPriority = Field(default=ActionPriority.MEDIUM)
    timeline: str = Field(default="")

    @field_validator("priority", mode="before")
    def normalize_priority(cls, v: Any) -> Any:
        if isinstance(v, ActionPriority):
            return v
        if isinstance(v, str) and v.strip().lower() in {p.value for p in ActionPriority}:
            return v.strip().lower()
        return ActionPriority.MEDIUM


class AIAugmentation(FrozenSchema):
    """Narrative guidance for one career.

    Parsed from model output when the provider succeeds, otherwise built
    from the deterministic templates. Either way every field is present.
    """

    academic_plan: AcademicPlan = Field(default_factory=AcademicPlan)
    career_pathway: CareerPathway = Field(default_factory=CareerPathway)
    skill_gaps: List[SkillGap] = Field(default_factory=list)
    action_items: List[ActionItem] = Field(default_factory=list)
    explanation: Optional[str] = None


class ParentSummary(FrozenSchema):
    """Plain-language summary written for parents."""

    overview: str
    key_recommendations: List[str] = Field(default_factory=list)
    support_actions: List[str] = Field(default_factory=list)
    timeline_highlights: List[str] = Field(default_factory=list)


class CounselorNotes(FrozenSchema):
    """Structured notes for the student's school counselor."""

    career_readiness: CareerReadiness
    assessment_insights: List[str] = Field(default_factory=list)
    recommendation_rationale: List[str] = Field(default_factory=list)
    follow_up_actions: List[str] = Field(default_factory=list)
    parent_meeting_topics: List[str] = Field(default_factory=list)


class RecommendationBundle(FrozenSchema):
    """Complete result of one assessment submission."""

    path: CareerClarity
    matches: List[MatchResult] = Field(..., min_length=1)
    parent_summary: ParentSummary
    counselor_notes: CounselorNotes
    academic_plan: AcademicPlan
    action_items: List[ActionItem] = Field(default_factory=list)
    provenance: Provenance
    contradiction_flags: List[str] = Field(default_factory=list)
    generated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


__all__ = [
    "CourseRecommendation",
    "AcademicPlan",
    "ActionItem",
    "AIAugmentation",
    "ParentSummary",
    "CounselorNotes",
    "RecommendationBundle",
]
