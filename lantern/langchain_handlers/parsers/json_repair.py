"""JSON repair for model output.

Model responses are frequently almost-JSON: wrapped in markdown fences,
preceded by chatter, or carrying stray commas and unquoted keys. The
``JSONRepairer`` is a small state machine: parse, classify the failure,
apply exactly one named transform, parse again. Each transform runs at most
once and the loop ends after ``max_attempts`` parses or the first success.
Input that already parses is returned untouched.
"""

import json
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

from lantern.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_MAX_ATTEMPTS = 5

# Empty augmentation structure used as the base for template content
FALLBACK_SKELETON = (
    '{"academicPlan":{"currentYear":[],"nextYear":[],"longTerm":[]},'
    '"careerPathway":{"steps":[],"timeline":"2-4 years","requirements":[]},'
    '"skillGaps":[],"actionItems":[]}'
)

_FENCE = re.compile(r"```(?:json|JSON)?\s*(.*?)```", re.DOTALL)
_CONTROL_CHARS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f]")
_BARE_KEY = re.compile(r"([{,]\s*)([A-Za-z_][A-Za-z0-9_]*)\s*:")
_BARE_KEY_AT = re.compile(r"\s*[A-Za-z_][A-Za-z0-9_]*\s*:")
_PROPERTY_NAME_ERROR = "Expecting property name enclosed in double quotes"


class RepairTransform(str, Enum):
    """Named repair steps, in the order they are tried by default."""

    EXTRACT_OBJECT = "extract_object"
    NORMALIZE_COMMAS = "normalize_commas"
    QUOTE_BARE_KEYS = "quote_bare_keys"
    AGGRESSIVE_COMMAS = "aggressive_commas"


@dataclass
class RepairResult:
    """Outcome of a successful repair."""

    data: Any
    text: str
    attempts: int
    transforms: List[RepairTransform] = field(default_factory=list)

    @property
    def was_repaired(self) -> bool:
        return bool(self.transforms)


class JSONRepairError(ValueError):
    """Raised when no sequence of transforms yields valid JSON."""

    def __init__(
        self,
        message: str,
        attempts: int,
        transforms: List[RepairTransform],
        last_error: Optional[json.JSONDecodeError] = None
    ):
        super().__init__(message)
        self.attempts = attempts
        self.transforms = transforms
        self.last_error = last_error


def extract_object(text: str) -> str:
    """Strip code fences, cut everything outside the outermost object, drop control characters."""
    fenced = _FENCE.search(text)
    if fenced:
        text = fenced.group(1)

    start = text.find("{")
    end = text.rfind("}")
    if start != -1 and end > start:
        text = text[start:end + 1]

    return _CONTROL_CHARS.sub("", text).strip()


def normalize_commas(text: str) -> str:
    """Remove leading, duplicate and trailing commas."""
    text = re.sub(r"{\s*,+\s*", "{", text)
    text = re.sub(r"\[\s*,+\s*", "[", text)
    text = re.sub(r",\s*,+", ",", text)
    text = re.sub(r",(\s*[}\]])", r"\1", text)
    return text


def quote_bare_keys(text: str) -> str:
    return _BARE_KEY.sub(r'\1"\2":', text)


def aggressive_commas(text: str) -> str:
    """Strip every comma after an opener or comma, then insert missing separators."""
    text = re.sub(r"([{\[,])(\s*),+", r"\1\2", text)
    text = re.sub(r",(\s*[}\]])", r"\1", text)
    text = re.sub(r"}(\s*){", r"},\1{", text)
    text = re.sub(r"](\s*)\[", r"],\1[", text)
    text = re.sub(r'"(\s*\n\s*)"', r'",\1"', text)
    text = re.sub(r'([}\]])(\s*\n\s*)"', r'\1,\2"', text)
    return text


TRANSFORMS: Dict[RepairTransform, Callable[[str], str]] = {
    RepairTransform.EXTRACT_OBJECT: extract_object,
    RepairTransform.NORMALIZE_COMMAS: normalize_commas,
    RepairTransform.QUOTE_BARE_KEYS: quote_bare_keys,
    RepairTransform.AGGRESSIVE_COMMAS: aggressive_commas,
}


class JSONRepairer:
    """Parse-classify-transform loop over the named transforms."""

    def __init__(self, max_attempts: int = DEFAULT_MAX_ATTEMPTS):
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.max_attempts = max_attempts

    def repair(self, text: str) -> RepairResult:
        """Parse ``text``, repairing it if needed.

        Args:
            text: Raw model output

        Returns:
            RepairResult: Parsed data and the text that parsed

        Raises:
            JSONRepairError: If attempts or transforms run out first
        """
        current = text or ""
        applied: List[RepairTransform] = []
        attempts = 0
        last_error: Optional[json.JSONDecodeError] = None

        while attempts < self.max_attempts:
            attempts += 1
            try:
                data = json.loads(current)
            except json.JSONDecodeError as e:
                last_error = e
            else:
                if applied:
                    logger.debug(
                        "Repaired model JSON",
                        extra={"attempts": attempts, "transforms": [t.value for t in applied]},
                    )
                return RepairResult(data=data, text=current, attempts=attempts, transforms=applied)

            if attempts >= self.max_attempts:
                break

            # Pick transforms until one actually changes the text
            while True:
                transform = self.classify(current, last_error, applied)
                if transform is None:
                    raise self._exhausted(attempts, applied, last_error)
                applied.append(transform)
                repaired = TRANSFORMS[transform](current)
                if repaired != current:
                    current = repaired
                    break

        raise self._exhausted(attempts, applied, last_error)

    @staticmethod
    def classify(
        text: str,
        error: json.JSONDecodeError,
        applied: List[RepairTransform]
    ) -> Optional[RepairTransform]:
        """Choose the next transform for a parse failure.

        Returns:
            Optional[RepairTransform]: Next untried transform, or None when all were tried
        """
        def untried(preferred: RepairTransform) -> Optional[RepairTransform]:
            if preferred not in applied:
                return preferred
            for transform in RepairTransform:
                if transform not in applied:
                    return transform
            return None

        stripped = text.strip()
        if "```" in stripped or not stripped.startswith("{") or not stripped.endswith("}"):
            return untried(RepairTransform.EXTRACT_OBJECT)

        rest = text[error.pos:]
        if error.msg.startswith(_PROPERTY_NAME_ERROR):
            if rest.lstrip().startswith((",", "}")):
                if RepairTransform.NORMALIZE_COMMAS not in applied:
                    return RepairTransform.NORMALIZE_COMMAS
                return untried(RepairTransform.AGGRESSIVE_COMMAS)
            if _BARE_KEY_AT.match(rest):
                return untried(RepairTransform.QUOTE_BARE_KEYS)
            return untried(RepairTransform.AGGRESSIVE_COMMAS)

        if error.msg.startswith("Expecting value") or rest.lstrip().startswith(","):
            return untried(RepairTransform.NORMALIZE_COMMAS)

        if error.msg.startswith("Expecting ',' delimiter"):
            return untried(RepairTransform.AGGRESSIVE_COMMAS)

        return untried(RepairTransform.EXTRACT_OBJECT)

    @staticmethod
    def _exhausted(
        attempts: int,
        applied: List[RepairTransform],
        last_error: Optional[json.JSONDecodeError]
    ) -> JSONRepairError:
        return JSONRepairError(
            f"Could not repair JSON after {attempts} attempts: {last_error}",
            attempts=attempts,
            transforms=list(applied),
            last_error=last_error,
        )


def repair_json(text: str, max_attempts: int = DEFAULT_MAX_ATTEMPTS) -> RepairResult:
    """Convenience wrapper around ``JSONRepairer.repair``."""
    return JSONRepairer(max_attempts).repair(text)


__all__ = [
    "FALLBACK_SKELETON",
    "RepairTransform",
    "RepairResult",
    "JSONRepairError",
    "JSONRepairer",
    "repair_json",
    "extract_object",
    "normalize_commas",
    "quote_bare_keys",
    "aggressive_commas",
]
