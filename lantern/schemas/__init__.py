"""Pydantic schemas for profiles, careers and recommendation bundles."""

from lantern.schemas.career_schemas import (
    CareerPathway,
    CareerRecord,
    LocalOpportunities,
    MatchResult,
    SkillGap,
)
from lantern.schemas.profile_schemas import StudentProfile
from lantern.schemas.recommendation_schemas import (
    AcademicPlan,
    ActionItem,
    AIAugmentation,
    CounselorNotes,
    CourseRecommendation,
    ParentSummary,
    RecommendationBundle,
)

__all__ = [
    "AcademicPlan",
    "ActionItem",
    "AIAugmentation",
    "CareerPathway",
    "CareerRecord",
    "CounselorNotes",
    "CourseRecommendation",
    "LocalOpportunities",
    "MatchResult",
    "ParentSummary",
    "RecommendationBundle",
    "SkillGap",
    "StudentProfile",
]
