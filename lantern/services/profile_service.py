"""Profile builder service.

Converts raw assessment answers, keyed by question id, into a validated
``StudentProfile``. Each assessment path has its own strategy that knows
which questions are mandatory. All problems are collected and reported in
a single ``ValidationError``; a partial profile is never returned.
"""

import re
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Dict, FrozenSet, Iterable, List, Mapping, Optional, Union

from lantern.data.mappings import CATEGORY_KEYWORDS, TRAIT_CATEGORY_WEIGHTS
from lantern.schemas.profile_schemas import StudentProfile
from lantern.services.catalog_service import CareerCatalog
from lantern.services.path_service import REQUIRED_QUESTIONS, PathState
from lantern.utils.constants import (
    CareerCategory,
    CareerClarity,
    Constraint,
    PersonalTrait,
    QuestionIds,
    ScoringConstants,
)
from lantern.utils.exceptions import ValidationError
from lantern.utils.logger import get_logger
from lantern.utils.validators import (
    ValidationResult,
    clean_free_text,
    validate_education_willingness,
    validate_enum_set,
    validate_enum_value,
    validate_grade,
    validate_subject_ratings,
    validate_zip_code,
)

logger = get_logger(__name__)


def keyword_category_scores(text: str, points: int) -> Dict[CareerCategory, int]:
    """Score categories by keyword hits in free text.

    Keywords match at the start of a word, so "teach" also matches
    "teaching".

    Args:
        text: Free text to scan
        points: Points awarded per keyword hit

    Returns:
        Dict[CareerCategory, int]: Non-zero scores only
    """
    lowered = text.lower()
    scores: Dict[CareerCategory, int] = {}
    if not lowered:
        return scores

    for category, keywords in CATEGORY_KEYWORDS.items():
        hits = sum(1 for keyword in keywords if re.search(r"\b" + re.escape(keyword), lowered))
        if hits:
            scores[category] = hits * points
    return scores


def infer_category(
    interests: str,
    experience: str,
    traits: Iterable[PersonalTrait]
) -> Optional[CareerCategory]:
    """Infer the most likely category for an undecided student.

    Args:
        interests: Interests and hobbies text
        experience: Work or volunteer experience text
        traits: Selected personality traits

    Returns:
        Optional[CareerCategory]: Highest scoring category, ties broken by
        category declaration order, or None when nothing scored
    """
    totals: Dict[CareerCategory, int] = {}

    for source in (
        keyword_category_scores(interests, ScoringConstants.INTEREST_KEYWORD_POINTS),
        keyword_category_scores(experience, ScoringConstants.EXPERIENCE_KEYWORD_POINTS),
    ):
        for category, points in source.items():
            totals[category] = totals.get(category, 0) + points

    for trait in traits:
        for category, points in TRAIT_CATEGORY_WEIGHTS.get(trait, {}).items():
            totals[category] = totals.get(category, 0) + points

    best: Optional[CareerCategory] = None
    best_score = 0
    for category in CareerCategory:
        score = totals.get(category, 0)
        if score > best_score:
            best, best_score = category, score
    return best


class ProfileStrategy(ABC):
    """Conversion rules shared by both assessment paths."""

    path: PathState

    def __init__(self, catalog: CareerCatalog):
        self.catalog = catalog

    @property
    def required_questions(self) -> FrozenSet[str]:
        return REQUIRED_QUESTIONS[self.path]

    def build(self, answers: Mapping[str, Any]) -> StudentProfile:
        """Build a profile or raise ``ValidationError`` listing every problem."""
        errors: List[str] = []
        messages: List[str] = []

        missing = sorted(q for q in self.required_questions if _is_blank(answers.get(q)))
        errors.extend(missing)
        messages.extend(f"{q} is required" for q in missing)

        fields: Dict[str, Any] = {"career_clarity": CareerClarity(self.path.value)}
        self._collect_common(answers, fields, errors, messages, missing)
        self._collect_path_fields(answers, fields, errors, messages, missing)

        if errors:
            logger.info(
                "Assessment answers failed validation",
                extra={"path": self.path.value, "validation_errors": errors},
            )
            raise ValidationError(
                "Assessment answers are incomplete or invalid: " + "; ".join(messages),
                validation_errors=errors,
            )

        return StudentProfile(**fields)

    @abstractmethod
    def _collect_path_fields(
        self,
        answers: Mapping[str, Any],
        fields: Dict[str, Any],
        errors: List[str],
        messages: List[str],
        missing: List[str]
    ) -> None:
        """Parse the questions specific to this path into ``fields``."""

    def _collect_common(
        self,
        answers: Mapping[str, Any],
        fields: Dict[str, Any],
        errors: List[str],
        messages: List[str],
        missing: List[str]
    ) -> None:
        if QuestionIds.GRADE_ZIP not in missing:
            basic = answers.get(QuestionIds.GRADE_ZIP)
            if not isinstance(basic, Mapping):
                _record(errors, messages, QuestionIds.GRADE_ZIP,
                        ValidationResult.failure(f"{QuestionIds.GRADE_ZIP} must be an object"))
            else:
                grade = validate_grade(basic.get("grade"))
                zip_code = validate_zip_code(basic.get("zipCode", basic.get("zip_code")))
                self._apply(fields, "grade", grade, errors, messages, "grade")
                self._apply(fields, "zip_code", zip_code, errors, messages, "zipCode")

        if QuestionIds.ACADEMIC_PERFORMANCE not in missing:
            ratings = validate_subject_ratings(answers.get(QuestionIds.ACADEMIC_PERFORMANCE))
            if ratings.is_valid:
                fields["subject_ratings"] = ratings.cleaned_value
            else:
                for error in ratings.errors:
                    errors.append(error.split(" ")[0])
                    messages.append(error)

        if QuestionIds.EDUCATION_WILLINGNESS not in missing:
            education = validate_education_willingness(answers.get(QuestionIds.EDUCATION_WILLINGNESS))
            self._apply(fields, "education_willingness", education, errors, messages,
                        "educationWillingness")

        constraints = validate_enum_set(
            answers.get(QuestionIds.CONSTRAINTS), Constraint, "constraints"
        )
        self._apply(fields, "constraints", constraints, errors, messages, "constraints")

        fields["interests"] = clean_free_text(answers.get(QuestionIds.INTERESTS_TEXT))
        fields["experience"] = clean_free_text(answers.get(QuestionIds.EXPERIENCE_TEXT))
        fields["impact_inspiration"] = clean_free_text(answers.get(QuestionIds.IMPACT_INSPIRATION))

        support = clean_free_text(answers.get(QuestionIds.SUPPORT_CONFIDENCE))
        fields["support_confidence"] = support or None

    @staticmethod
    def _apply(
        fields: Dict[str, Any],
        key: str,
        result: ValidationResult,
        errors: List[str],
        messages: List[str],
        field_name: str
    ) -> None:
        if result.is_valid:
            fields[key] = result.cleaned_value
        else:
            _record(errors, messages, field_name, result)


class DecidedProfileStrategy(ProfileStrategy):
    """Students who already know the kind of career they want."""

    path = PathState.DECIDED

    def _collect_path_fields(self, answers, fields, errors, messages, missing) -> None:
        if QuestionIds.CAREER_CATEGORY not in missing:
            category = validate_enum_value(
                answers.get(QuestionIds.CAREER_CATEGORY), CareerCategory, "careerCategory"
            )
            self._apply(fields, "selected_category", category, errors, messages, "careerCategory")

        specific = answers.get(QuestionIds.SPECIFIC_CAREER)
        if _is_blank(specific):
            return

        specific = str(specific).strip()
        if specific.lower() == QuestionIds.OTHER_CAREER:
            text = clean_free_text(answers.get(QuestionIds.SPECIFIC_CAREER_OTHER))
            fields["specific_career_text"] = text or None
            match = self.catalog.find_by_title(text) if text else None
            if match is not None:
                fields["specific_career_id"] = match.id
        elif self.catalog.get(specific) is not None:
            fields["specific_career_id"] = specific
        else:
            errors.append("specificCareer")
            messages.append(f"specificCareer has unknown career id: {specific}")


class UndecidedProfileStrategy(ProfileStrategy):
    """Students exploring options; category is inferred from signals."""

    path = PathState.UNDECIDED

    def _collect_path_fields(self, answers, fields, errors, messages, missing) -> None:
        traits = validate_enum_set(answers.get(QuestionIds.TRAITS), PersonalTrait, "personalTraits")
        self._apply(fields, "personal_traits", traits, errors, messages, "personalTraits")

        if errors:
            return

        fields["selected_category"] = infer_category(
            fields["interests"], fields["experience"], fields["personal_traits"]
        )


class ProfileBuilder:
    """Entry point that dispatches raw answers to the right strategy."""

    def __init__(self, catalog: Optional[CareerCatalog] = None):
        self.catalog = catalog or CareerCatalog()
        self._strategies: Dict[PathState, ProfileStrategy] = {
            PathState.DECIDED: DecidedProfileStrategy(self.catalog),
            PathState.UNDECIDED: UndecidedProfileStrategy(self.catalog),
        }

    def build_profile(
        self,
        raw_answers: Mapping[str, Any],
        path: Union[PathState, CareerClarity, str]
    ) -> StudentProfile:
        """Convert raw answers into a ``StudentProfile``.

        Args:
            raw_answers: Answers keyed by question id
            path: Assessment path the answers belong to

        Returns:
            StudentProfile: Validated, immutable profile

        Raises:
            ValidationError: If any mandatory answer is missing or invalid
        """
        if not isinstance(raw_answers, Mapping):
            raise ValidationError("Raw answers must be a mapping of question id to answer")

        try:
            state = PathState(path.value if isinstance(path, Enum) else str(path).lower())
        except ValueError:
            state = None
        if state not in self._strategies:
            raise ValidationError(f"Unknown assessment path: {path!r}", field="path", value=str(path))

        profile = self._strategies[state].build(raw_answers)
        logger.debug(
            "Built student profile",
            extra={"path": state.value, "category": getattr(profile.selected_category, "value", None)},
        )
        return profile


def _record(errors: List[str], messages: List[str], field_name: str, result: ValidationResult) -> None:
    errors.append(field_name)
    messages.extend(result.errors)


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, set, frozenset, dict)):
        return len(value) == 0
    return False


__all__ = [
    "ProfileBuilder",
    "ProfileStrategy",
    "DecidedProfileStrategy",
    "UndecidedProfileStrategy",
    "infer_category",
    "keyword_category_scores",
]
