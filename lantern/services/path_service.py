"""Assessment path determination.

A two-state machine decides, from the single branching answer "do you
already know what career you want?", which question subset the profile
builder must see and which scoring configuration the engine applies. Once a
path is chosen for a submission it is terminal.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, FrozenSet, Mapping, Optional, Union

from lantern.utils.constants import CareerClarity, QuestionIds
from lantern.utils.exceptions import PathStateError, ValidationError
from lantern.utils.logger import get_logger

logger = get_logger(__name__)


class PathState(str, Enum):
    UNDETERMINED = "undetermined"
    DECIDED = "decided"
    UNDECIDED = "undecided"


@dataclass(frozen=True)
class ScoringConfig:
    """Per-path weights for the scoring engine.

    The four component weights of a path add up to 100.
    """

    category_weight: float
    education_weight: float
    subject_weight: float
    trait_weight: float
    specific_career_bonus: float
    education_hard_filter: bool
    use_score_threshold: bool


DECIDED_SCORING = ScoringConfig(
    category_weight=50.0,
    education_weight=30.0,
    subject_weight=20.0,
    trait_weight=0.0,
    specific_career_bonus=10.0,
    education_hard_filter=True,
    use_score_threshold=True,
)

UNDECIDED_SCORING = ScoringConfig(
    category_weight=35.0,
    education_weight=25.0,
    subject_weight=25.0,
    trait_weight=15.0,
    specific_career_bonus=0.0,
    education_hard_filter=False,
    use_score_threshold=False,
)

# The branching question itself is consumed by the machine, not the builder
_COMMON_QUESTIONS = frozenset({
    QuestionIds.GRADE_ZIP,
    QuestionIds.ACADEMIC_PERFORMANCE,
    QuestionIds.EDUCATION_WILLINGNESS,
})

REQUIRED_QUESTIONS = {
    PathState.DECIDED: _COMMON_QUESTIONS | {QuestionIds.CAREER_CATEGORY},
    PathState.UNDECIDED: _COMMON_QUESTIONS | {QuestionIds.INTERESTS_TEXT, QuestionIds.TRAITS},
}

SCORING_CONFIGS = {
    PathState.DECIDED: DECIDED_SCORING,
    PathState.UNDECIDED: UNDECIDED_SCORING,
}


class AssessmentPath:
    """State machine for one submission's assessment branch."""

    def __init__(self):
        self._state = PathState.UNDETERMINED

    @property
    def state(self) -> PathState:
        return self._state

    @property
    def is_terminal(self) -> bool:
        return self._state != PathState.UNDETERMINED

    def choose(self, branch_answer: Union[str, bool, CareerClarity]) -> PathState:
        """Transition out of ``UNDETERMINED`` using the branching answer.

        Args:
            branch_answer: Answer to the career-knowledge question, or an explicit path

        Returns:
            PathState: The terminal state chosen

        Raises:
            PathStateError: If a path was already chosen
            ValidationError: If the answer cannot be interpreted
        """
        if self.is_terminal:
            raise PathStateError(
                f"Assessment path already determined as '{self._state.value}'",
                current_state=self._state.value,
            )

        self._state = self._interpret(branch_answer)
        logger.debug(f"Assessment path chosen: {self._state.value}")
        return self._state

    def resolve(
        self,
        raw_answers: Mapping[str, Any],
        explicit_path: Optional[Union[str, CareerClarity]] = None
    ) -> PathState:
        """Choose the path from an explicit argument or the raw answers.

        An explicit path wins over the branching answer.
        """
        if explicit_path is not None:
            return self.choose(explicit_path)

        if QuestionIds.CAREER_KNOWLEDGE not in raw_answers:
            raise ValidationError(
                "Cannot determine assessment path",
                field=QuestionIds.CAREER_KNOWLEDGE,
                validation_errors=[QuestionIds.CAREER_KNOWLEDGE],
            )
        return self.choose(raw_answers[QuestionIds.CAREER_KNOWLEDGE])

    @property
    def required_questions(self) -> FrozenSet[str]:
        return REQUIRED_QUESTIONS[self._require_terminal()]

    @property
    def scoring_config(self) -> ScoringConfig:
        return SCORING_CONFIGS[self._require_terminal()]

    @property
    def career_clarity(self) -> CareerClarity:
        return CareerClarity(self._require_terminal().value)

    def _require_terminal(self) -> PathState:
        if not self.is_terminal:
            raise PathStateError(
                "Assessment path has not been determined yet",
                current_state=self._state.value,
            )
        return self._state

    @staticmethod
    def _interpret(answer: Union[str, bool, CareerClarity]) -> PathState:
        if isinstance(answer, CareerClarity):
            return PathState(answer.value)
        if isinstance(answer, bool):
            return PathState.DECIDED if answer else PathState.UNDECIDED

        normalized = str(answer).strip().lower()
        if normalized in QuestionIds.DECIDED_ANSWERS:
            return PathState.DECIDED
        if normalized in QuestionIds.UNDECIDED_ANSWERS:
            return PathState.UNDECIDED

        raise ValidationError(
            f"Unrecognised answer to the career knowledge question: {answer!r}",
            field=QuestionIds.CAREER_KNOWLEDGE,
            value=answer,
            validation_errors=[QuestionIds.CAREER_KNOWLEDGE],
        )


__all__ = [
    "PathState",
    "ScoringConfig",
    "DECIDED_SCORING",
    "UNDECIDED_SCORING",
    "REQUIRED_QUESTIONS",
    "AssessmentPath",
]
