"""Career catalog and match result schemas.

This module defines the immutable reference record for a career and the
per-run ``MatchResult`` produced by the scoring engine, together with the
optional enrichment payloads (skill gaps, pathway, local market data)
attached to it later in the pipeline.
"""

from typing import Any, List, Optional, Tuple

from pydantic import Field, field_validator

from lantern.schemas.base import FrozenSchema
from lantern.utils.constants import EducationLevel, Sector, SkillImportance


class CareerRecord(FrozenSchema):
    """Read-only catalog entry for a single career."""

    id: str = Field(..., min_length=1, description="Stable career identifier")
    title: str = Field(..., min_length=1, description="Career title")
    sector: Sector = Field(..., description="Catalog sector")
    required_education: EducationLevel = Field(..., description="Typical entry education")
    average_salary: float = Field(..., ge=0, description="National average salary in USD")
    description: str = Field(default="", description="Short description")
    skills: Tuple[str, ...] = Field(default=(), description="Skill tags")
    certifications: Tuple[str, ...] = Field(default=(), description="Common certifications")
    growth_outlook: Optional[str] = Field(default=None, description="Employment outlook")


class SkillGap(FrozenSchema):
    """A skill the student should develop for a career."""

    skill: str = Field(..., min_length=1)
    importance: SkillImportance = Field(default=SkillImportance.IMPORTANT)
    how_to_acquire: str = Field(default="")
    sector: Optional[Sector] = Field(
        default=None, description="Sector the skill belongs to; None for general skills"
    )

    @field_validator("importance", mode="before")
    def normalize_importance(cls, v: Any) -> Any:
        """Accept any casing from model output; unknown values become Important."""
        if isinstance(v, SkillImportance):
            return v
        if isinstance(v, str):
            for level in SkillImportance:
                if v.strip().lower() == level.value.lower():
                    return level
        return SkillImportance.IMPORTANT


class CareerPathway(FrozenSchema):
    """Ordered steps from high school into a career."""

    steps: List[str] = Field(default_factory=list)
    timeline: str = Field(default="2-4 years")
    requirements: List[str] = Field(default_factory=list)


class LocalOpportunities(FrozenSchema):
    """Job market data near the student's zip code."""

    estimated_jobs: int = Field(..., ge=0, description="Listings found in the search radius")
    average_local_salary: float = Field(..., ge=0, description="Average advertised salary")
    distance_from_student: int = Field(..., ge=0, description="Search radius in miles")
    source: str = Field(default="adzuna", description="Job data provider")


class MatchResult(FrozenSchema):
    """Score and explanation for one career against one profile."""

    career_id: str
    title: str
    sector: Sector
    required_education: EducationLevel
    match_score: float = Field(..., ge=0, le=100)
    reasoning_factors: List[str] = Field(default_factory=list)
    average_salary: float = Field(..., ge=0, description="Static catalog salary")
    local_opportunities: Optional[LocalOpportunities] = None
    career_pathway: Optional[CareerPathway] = None
    skill_gaps: List[SkillGap] = Field(default_factory=list)
    explanation: Optional[str] = None
    ai_generated: bool = Field(
        default=False, description="Whether pathway/explanation came from the AI provider"
    )


__all__ = [
    "CareerRecord",
    "SkillGap",
    "CareerPathway",
    "LocalOpportunities",
    "MatchResult",
]
