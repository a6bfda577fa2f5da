"""Output parser for career augmentation responses.

Turns raw model text into an ``AIAugmentation``. The text is first run
through the JSON repair state machine, then lightly normalized (models
sometimes answer with bare strings where objects are expected) and finally
validated with pydantic.
"""

from typing import Any, Dict, List

from langchain_core.exceptions import OutputParserException
from langchain_core.output_parsers import BaseOutputParser
from pydantic import ValidationError as PydanticValidationError

from lantern.langchain_handlers.parsers.json_repair import (
    DEFAULT_MAX_ATTEMPTS,
    JSONRepairer,
    JSONRepairError,
)
from lantern.schemas.recommendation_schemas import AIAugmentation
from lantern.utils.logger import get_logger

logger = get_logger(__name__)


class AugmentationOutputParser(BaseOutputParser[AIAugmentation]):
    """Parser for per-career augmentation responses."""

    max_attempts: int = DEFAULT_MAX_ATTEMPTS

    def parse(self, text: str) -> AIAugmentation:
        """Parse LLM response into an ``AIAugmentation``.

        Raises:
            OutputParserException: If the text cannot be repaired or validated
        """
        try:
            result = JSONRepairer(self.max_attempts).repair(text)
        except JSONRepairError as e:
            logger.warning(
                "Augmentation JSON could not be repaired",
                extra={"attempts": e.attempts, "transforms": [t.value for t in e.transforms]},
            )
            raise OutputParserException(
                f"Failed to parse augmentation JSON: {e}", llm_output=text
            ) from e

        if not isinstance(result.data, dict):
            raise OutputParserException(
                "Augmentation response must be a JSON object", llm_output=text
            )

        try:
            return AIAugmentation.model_validate(self._normalize(result.data))
        except PydanticValidationError as e:
            raise OutputParserException(
                f"Augmentation response failed validation: {e}", llm_output=text
            ) from e

    def _normalize(self, data: Dict[str, Any]) -> Dict[str, Any]:
        data = dict(data)

        plan = data.get("academicPlan")
        if isinstance(plan, dict):
            data["academicPlan"] = {
                key: self._courses(value) for key, value in plan.items()
            }

        pathway = data.get("careerPathway")
        if isinstance(pathway, list):
            data["careerPathway"] = {"steps": [str(step) for step in pathway]}

        gaps = data.get("skillGaps")
        if isinstance(gaps, list):
            data["skillGaps"] = [
                {"skill": gap} if isinstance(gap, str) else gap for gap in gaps
            ]

        items = data.get("actionItems")
        if isinstance(items, list):
            data["actionItems"] = [
                {"title": item} if isinstance(item, str) else item for item in items
            ]

        return data

    @staticmethod
    def _courses(value: Any) -> Any:
        if not isinstance(value, list):
            return value
        courses: List[Any] = []
        for course in value:
            courses.append({"courseName": course} if isinstance(course, str) else course)
        return courses

    def get_format_instructions(self) -> str:
        return """Return ONLY valid JSON. No additional text or explanations outside the JSON object.

{
  "academicPlan": {
    "currentYear": [{"courseName": "...", "reasoning": "...", "careerConnection": "...", "skillsDeveloped": ["..."], "priority": "Essential|Highly Recommended|Recommended"}],
    "nextYear": [...],
    "longTerm": [...]
  },
  "careerPathway": {"steps": ["..."], "timeline": "...", "requirements": ["..."]},
  "skillGaps": [{"skill": "...", "importance": "Critical|Important|Beneficial", "howToAcquire": "..."}],
  "actionItems": [{"title": "...", "description": "...", "priority": "high|medium|low", "timeline": "..."}],
  "explanation": "2-3 sentences on why this career fits the student"
}"""

    @property
    def _type(self) -> str:
        return "augmentation_parser"


__all__ = ["AugmentationOutputParser"]
