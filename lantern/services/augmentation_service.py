"""AI augmentation service.

Asks the generative provider for narrative guidance about one career and
parses the answer. Any failure on the way (disabled provider, timeout,
provider error, unrepairable output) is logged as an ``AugmentationFailure``
and answered with deterministic template content, so callers always receive
a complete augmentation.
"""

import asyncio
from dataclasses import dataclass
from typing import Dict, List, Optional

from langchain_core.exceptions import OutputParserException

from lantern.langchain_handlers.parsers.augmentation_parser import AugmentationOutputParser
from lantern.langchain_handlers.prompts.augmentation_prompts import (
    AugmentationPrompts,
    detect_contradictions,
)
from lantern.llm.base_llm import GenerativeTextProvider, LLMError
from lantern.llm.fallback_handler import FallbackHandler, FallbackReason
from lantern.schemas.career_schemas import CareerRecord, MatchResult, SkillGap
from lantern.schemas.profile_schemas import StudentProfile
from lantern.schemas.recommendation_schemas import AIAugmentation
from lantern.services.catalog_service import CareerCatalog
from lantern.utils.exceptions import AugmentationFailure
from lantern.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class AugmentationOutcome:
    """An augmentation plus whether it came from the model."""

    augmentation: AIAugmentation
    ai_generated: bool
    failure: Optional[AugmentationFailure] = None


def merge_skill_gaps(resolved: List[SkillGap], suggested: List[SkillGap]) -> List[SkillGap]:
    """Keep the resolver's skills, taking AI acquisition advice for matching names only."""
    advice: Dict[str, str] = {
        gap.skill.strip().lower(): gap.how_to_acquire
        for gap in suggested
        if gap.how_to_acquire
    }
    return [
        gap.model_copy(update={"how_to_acquire": advice[gap.skill.strip().lower()]})
        if gap.skill.strip().lower() in advice else gap
        for gap in resolved
    ]


class AugmentationService:
    """Produces per-career augmentations with deterministic fallback."""

    def __init__(
        self,
        provider: Optional[GenerativeTextProvider],
        catalog: CareerCatalog,
        fallback_handler: Optional[FallbackHandler] = None,
        parser: Optional[AugmentationOutputParser] = None,
        timeout: float = 10.0
    ):
        """Initialize augmentation service.

        Args:
            provider: Generative-text provider, or None when AI is disabled
            catalog: Career catalog used for template content
            fallback_handler: Template builder
            parser: Output parser for model responses
            timeout: Seconds allowed for one provider call
        """
        self.provider = provider
        self.catalog = catalog
        self.fallback_handler = fallback_handler or FallbackHandler()
        self.parser = parser or AugmentationOutputParser()
        self.timeout = timeout

    @property
    def enabled(self) -> bool:
        return self.provider is not None

    async def augment(
        self,
        profile: StudentProfile,
        matches: List[MatchResult],
        focus: MatchResult
    ) -> AugmentationOutcome:
        """Augment one career with model output or template content.

        Args:
            profile: Student profile
            matches: All selected matches, for context
            focus: Match being augmented, with resolved skill gaps

        Returns:
            AugmentationOutcome: Never raises for provider problems
        """
        if self.provider is None:
            return self.template(focus, FallbackReason.PROVIDER_DISABLED)

        named_career = self.catalog.named_career(profile)
        flags = detect_contradictions(profile, matches, named_career)
        system_prompt, prompt = AugmentationPrompts.format_prompt(
            profile, matches, focus, self.parser.get_format_instructions(), flags, named_career
        )

        try:
            raw = await asyncio.wait_for(
                self.provider.generate_text(prompt, system_prompt=system_prompt),
                timeout=self.timeout,
            )
            parsed = self.parser.parse(raw)
        except asyncio.TimeoutError as e:
            return self._recover(focus, FallbackReason.TIMEOUT, f"Timed out after {self.timeout}s", e)
        except LLMError as e:
            return self._recover(focus, FallbackReason.PROVIDER_ERROR, e.message, e)
        except OutputParserException as e:
            return self._recover(focus, FallbackReason.UNPARSEABLE, str(e), e)
        except Exception as e:
            logger.warning("Unexpected augmentation error", exc_info=True)
            return self._recover(focus, FallbackReason.PROVIDER_ERROR, str(e), e)

        return AugmentationOutcome(augmentation=self._complete(parsed, focus), ai_generated=True)

    def template(self, focus: MatchResult, reason: FallbackReason) -> AugmentationOutcome:
        """Deterministic augmentation for a career."""
        augmentation = self.fallback_handler.build_augmentation(
            self._career_for(focus), focus, focus.skill_gaps, reason
        )
        return AugmentationOutcome(augmentation=augmentation, ai_generated=False)

    def _recover(
        self,
        focus: MatchResult,
        reason: FallbackReason,
        message: str,
        cause: Exception
    ) -> AugmentationOutcome:
        failure = AugmentationFailure(
            f"AI augmentation failed for {focus.title}: {message}",
            career_id=focus.career_id,
            reason=reason.value,
            cause=cause,
        )
        logger.warning(str(failure), extra={"career_id": focus.career_id, "reason": reason.value})

        outcome = self.template(focus, reason)
        return AugmentationOutcome(
            augmentation=outcome.augmentation, ai_generated=False, failure=failure
        )

    def _complete(self, parsed: AIAugmentation, focus: MatchResult) -> AIAugmentation:
        """Fill any section the model left empty from the template."""
        template = self.fallback_handler.build_augmentation(
            self._career_for(focus), focus, focus.skill_gaps
        )
        plan = parsed.academic_plan
        has_plan = plan.current_year or plan.next_year or plan.long_term

        return parsed.model_copy(update={
            "academic_plan": plan if has_plan else template.academic_plan,
            "career_pathway": (
                parsed.career_pathway if parsed.career_pathway.steps else template.career_pathway
            ),
            "skill_gaps": merge_skill_gaps(focus.skill_gaps, parsed.skill_gaps),
            "action_items": parsed.action_items or template.action_items,
            "explanation": parsed.explanation or template.explanation,
        })

    def _career_for(self, focus: MatchResult) -> CareerRecord:
        career = self.catalog.get(focus.career_id)
        if career is not None:
            return career
        return CareerRecord(
            id=focus.career_id,
            title=focus.title,
            sector=focus.sector,
            required_education=focus.required_education,
            average_salary=focus.average_salary,
        )


__all__ = ["AugmentationService", "AugmentationOutcome", "merge_skill_gaps"]
