"""Input validation utilities for Lantern.

Each validator takes one raw answer value and returns a ``ValidationResult``
carrying either the cleaned value or the list of problems found. The profile
builder collects the results and raises a single ``ValidationError``.
"""

from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Type, Union

from pydantic import BaseModel, Field

from lantern.utils.constants import (
    EducationLevel,
    Subject,
    ValidationConstants,
)


class ValidationResult(BaseModel):
    """Result of a validation operation."""

    is_valid: bool = Field(..., description="Whether validation passed")
    errors: List[str] = Field(default_factory=list, description="List of validation errors")
    warnings: List[str] = Field(default_factory=list, description="List of validation warnings")
    cleaned_value: Optional[Any] = Field(default=None, description="Cleaned/normalized value")

    def add_error(self, error: str) -> None:
        """Add a validation error."""
        self.errors.append(error)
        self.is_valid = False

    def add_warning(self, warning: str) -> None:
        """Add a validation warning."""
        self.warnings.append(warning)

    @classmethod
    def success(cls, cleaned_value: Optional[Any] = None) -> "ValidationResult":
        """Create a successful validation result."""
        return cls(is_valid=True, cleaned_value=cleaned_value)

    @classmethod
    def failure(cls, errors: Union[str, List[str]]) -> "ValidationResult":
        """Create a failed validation result."""
        if isinstance(errors, str):
            errors = [errors]
        return cls(is_valid=False, errors=errors)


def validate_zip_code(zip_code: Any) -> ValidationResult:
    """Validate a US 5-digit zip code.

    Args:
        zip_code: Raw zip code answer

    Returns:
        ValidationResult: Validation result with the stripped zip code
    """
    if zip_code is None or (isinstance(zip_code, str) and not zip_code.strip()):
        return ValidationResult.failure("zipCode is required")

    cleaned = str(zip_code).strip()
    if not ValidationConstants.ZIP_CODE_PATTERN.match(cleaned):
        return ValidationResult.failure("zipCode must be exactly 5 digits")

    return ValidationResult.success(cleaned)


def validate_grade(grade: Any) -> ValidationResult:
    """Validate a high-school grade.

    Integers and numeric strings are accepted; booleans and fractional
    values are not.

    Args:
        grade: Raw grade answer

    Returns:
        ValidationResult: Validation result with the grade as an int
    """
    if grade is None or isinstance(grade, bool):
        return ValidationResult.failure("grade is required")

    if isinstance(grade, int):
        value = grade
    elif isinstance(grade, str) and grade.strip().isdecimal():
        value = int(grade.strip())
    else:
        return ValidationResult.failure("grade must be a whole number")

    if not ValidationConstants.MIN_GRADE <= value <= ValidationConstants.MAX_GRADE:
        return ValidationResult.failure(
            f"grade must be between {ValidationConstants.MIN_GRADE} "
            f"and {ValidationConstants.MAX_GRADE}"
        )

    return ValidationResult.success(value)


def validate_subject_ratings(ratings: Any) -> ValidationResult:
    """Validate that every subject carries an integer rating from 1 to 5.

    A missing subject is a hard failure, never a warning. Error strings
    name the offending subject so the caller can report field names.

    Args:
        ratings: Mapping of subject name to rating

    Returns:
        ValidationResult: Validation result with a ``Dict[Subject, int]``
    """
    if not isinstance(ratings, dict) or not ratings:
        return ValidationResult.failure("subjectRatings is required")

    normalized = {str(key).strip().lower(): value for key, value in ratings.items()}
    result = ValidationResult.success()
    cleaned: Dict[Subject, int] = {}

    for subject in Subject:
        if subject.value not in normalized:
            result.add_error(f"subjectRatings.{subject.value} is missing")
            continue

        raw = normalized[subject.value]
        if isinstance(raw, bool):
            result.add_error(f"subjectRatings.{subject.value} must be an integer")
            continue
        if isinstance(raw, str) and raw.strip().isdecimal():
            raw = int(raw.strip())
        if not isinstance(raw, int):
            result.add_error(f"subjectRatings.{subject.value} must be an integer")
            continue
        if not ValidationConstants.MIN_SUBJECT_RATING <= raw <= ValidationConstants.MAX_SUBJECT_RATING:
            result.add_error(f"subjectRatings.{subject.value} must be between 1 and 5")
            continue

        cleaned[subject] = raw

    known = {subject.value for subject in Subject}
    for key in normalized:
        if key not in known:
            result.add_warning(f"Ignoring unknown subject: {key}")

    if result.is_valid:
        result.cleaned_value = cleaned
    return result


def validate_education_willingness(level: Any) -> ValidationResult:
    """Validate the student's education willingness answer."""
    if not level:
        return ValidationResult.failure("educationWillingness is required")

    cleaned = str(level).strip().lower()
    for allowed in EducationLevel.willingness_levels():
        if cleaned == allowed.value:
            return ValidationResult.success(allowed)

    return ValidationResult.failure(
        "educationWillingness must be one of: "
        + ", ".join(level.value for level in EducationLevel.willingness_levels())
    )


def validate_enum_value(value: Any, enum_class: Type[Enum], field_name: str) -> ValidationResult:
    """Validate a single enum tag.

    Args:
        value: Raw value
        enum_class: Enum the value must belong to
        field_name: Field name used in error messages

    Returns:
        ValidationResult: Validation result with the enum member
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        return ValidationResult.failure(f"{field_name} is required")

    try:
        return ValidationResult.success(enum_class(str(value).strip().lower()))
    except ValueError:
        return ValidationResult.failure(f"{field_name} has unknown value: {value}")


def validate_enum_set(values: Any, enum_class: Type[Enum], field_name: str) -> ValidationResult:
    """Validate a list of enum tags and return them as a frozenset.

    An empty or missing list is valid and yields an empty set.
    """
    if values is None:
        return ValidationResult.success(frozenset())

    if isinstance(values, str):
        values = [values]
    if not isinstance(values, Iterable):
        return ValidationResult.failure(f"{field_name} must be a list")

    result = ValidationResult.success()
    cleaned = set()
    for value in values:
        item = validate_enum_value(value, enum_class, field_name)
        if item.is_valid:
            cleaned.add(item.cleaned_value)
        else:
            result.errors.extend(item.errors)
            result.is_valid = False

    if result.is_valid:
        result.cleaned_value = frozenset(cleaned)
    return result


def clean_free_text(text: Any) -> str:
    """Normalize whitespace in a free-text answer."""
    if text is None:
        return ""
    return " ".join(str(text).split())


def is_low_information_text(text: Optional[str]) -> bool:
    """Check whether a free-text answer carries too little information.

    Args:
        text: Free-text answer

    Returns:
        bool: True for empty, filler, or very short answers
    """
    cleaned = clean_free_text(text).lower()
    if not cleaned:
        return True
    if cleaned.strip(".! ") in ValidationConstants.LOW_INFORMATION_ANSWERS:
        return True
    return len(cleaned.split()) < ValidationConstants.MIN_INFORMATIVE_WORDS


__all__ = [
    "ValidationResult",
    "validate_zip_code",
    "validate_grade",
    "validate_subject_ratings",
    "validate_education_willingness",
    "validate_enum_value",
    "validate_enum_set",
    "clean_free_text",
    "is_low_information_text",
]
