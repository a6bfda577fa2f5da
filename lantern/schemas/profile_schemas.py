"""Student profile schema.

A ``StudentProfile`` is built once per assessment submission by the profile
builder and is immutable input to every downstream component.
"""

from typing import Dict, FrozenSet, Optional

from pydantic import Field, field_validator, model_validator

from lantern.schemas.base import FrozenSchema
from lantern.utils.constants import (
    CareerCategory,
    CareerClarity,
    Constraint,
    EducationLevel,
    PersonalTrait,
    ScoringConstants,
    Subject,
    ValidationConstants,
)


class StudentProfile(FrozenSchema):
    """Normalized, validated view of one student's assessment answers."""

    grade: int = Field(
        ...,
        ge=ValidationConstants.MIN_GRADE,
        le=ValidationConstants.MAX_GRADE,
        description="High-school grade",
    )
    zip_code: str = Field(..., pattern=r"^\d{5}$", description="5-digit US zip code")
    career_clarity: CareerClarity = Field(..., description="Assessment branch taken")
    selected_category: Optional[CareerCategory] = Field(
        default=None, description="Chosen or inferred career category"
    )
    specific_career_id: Optional[str] = Field(
        default=None, description="Catalog id of a specific career the student named"
    )
    specific_career_text: Optional[str] = Field(
        default=None, description="Free text when the student's career is not listed"
    )
    education_willingness: EducationLevel = Field(
        ..., description="Most education the student is willing to pursue"
    )
    subject_ratings: Dict[Subject, int] = Field(
        ..., description="Interest/strength rating per subject, 1-5"
    )
    personal_traits: FrozenSet[PersonalTrait] = Field(default_factory=frozenset)
    constraints: FrozenSet[Constraint] = Field(default_factory=frozenset)
    interests: str = Field(default="", description="Interests and hobbies free text")
    experience: str = Field(default="", description="Work or volunteer experience free text")
    impact_inspiration: str = Field(default="", description="Desired impact and inspiration free text")
    support_confidence: Optional[str] = Field(
        default=None, description="How supported the student feels in their plans"
    )

    @field_validator("subject_ratings")
    def validate_subject_ratings(cls, v: Dict[Subject, int]) -> Dict[Subject, int]:
        """Every subject must carry a rating from 1 to 5."""
        missing = [subject.value for subject in Subject if subject not in v]
        if missing:
            raise ValueError(f"Missing subject ratings: {missing}")
        for subject, rating in v.items():
            if not ValidationConstants.MIN_SUBJECT_RATING <= rating <= ValidationConstants.MAX_SUBJECT_RATING:
                raise ValueError(f"Rating for {subject.value} must be between 1 and 5")
        return v

    @field_validator("education_willingness")
    def validate_education_willingness(cls, v: EducationLevel) -> EducationLevel:
        if v not in EducationLevel.willingness_levels():
            raise ValueError("educationWillingness must be a post-secondary level")
        return v

    @model_validator(mode="after")
    def validate_decided_category(self) -> "StudentProfile":
        """Decided students always carry an explicit category."""
        if self.career_clarity == CareerClarity.DECIDED and self.selected_category is None:
            raise ValueError("Decided profiles require a selected career category")
        return self

    @property
    def is_decided(self) -> bool:
        return self.career_clarity == CareerClarity.DECIDED

    def high_interest_subjects(self) -> list:
        """Subjects rated 4 or 5, strongest first, ties in subject order."""
        rated = [
            (subject, rating) for subject, rating in self.subject_ratings.items()
            if rating >= ScoringConstants.HIGH_INTEREST_RATING
        ]
        order = list(Subject)
        rated.sort(key=lambda item: (-item[1], order.index(item[0])))
        return [subject for subject, _ in rated]

    def free_text_fields(self) -> Dict[str, str]:
        """Free-text answers keyed by field name."""
        return {
            "interests": self.interests,
            "experience": self.experience,
            "impactInspiration": self.impact_inspiration,
        }


__all__ = ["StudentProfile"]
