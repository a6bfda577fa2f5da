"""Recommendation orchestration.

Runs one assessment submission end to end: path, profile, scoring, skill
gaps, AI augmentation, market data, summaries. Input and structural errors
propagate to the caller; provider problems are absorbed by the augmentation
and market components and only show up in the bundle's provenance.
"""

import asyncio
from typing import Any, List, Mapping, Optional, Union

from lantern.core.config import Settings, get_settings
from lantern.langchain_handlers.parsers.augmentation_parser import AugmentationOutputParser
from lantern.langchain_handlers.prompts.augmentation_prompts import detect_contradictions
from lantern.llm.fallback_handler import FallbackHandler, FallbackReason
from lantern.llm.llm_factory import LLMFactory
from lantern.schemas.career_schemas import MatchResult
from lantern.schemas.recommendation_schemas import RecommendationBundle
from lantern.services.augmentation_service import AugmentationOutcome, AugmentationService
from lantern.services.catalog_service import CareerCatalog
from lantern.services.market_service import LocalMarketAugmenter
from lantern.services.path_service import AssessmentPath
from lantern.services.profile_service import ProfileBuilder
from lantern.services.scoring_service import ScoringService
from lantern.services.skill_service import SkillGapResolver
from lantern.services.summary_service import SummaryService
from lantern.utils.constants import CareerClarity, Provenance
from lantern.utils.logger import PerformanceLogger, get_logger

logger = get_logger(__name__)


class RecommendationService:
    """Entry point for assessment submissions."""

    def __init__(
        self,
        catalog: CareerCatalog,
        augmentation_service: AugmentationService,
        market_augmenter: LocalMarketAugmenter,
        profile_builder: Optional[ProfileBuilder] = None,
        scoring_service: Optional[ScoringService] = None,
        skill_resolver: Optional[SkillGapResolver] = None,
        summary_service: Optional[SummaryService] = None,
        max_ai_augmented: int = 3
    ):
        self.catalog = catalog
        self.augmentation_service = augmentation_service
        self.market_augmenter = market_augmenter
        self.profile_builder = profile_builder or ProfileBuilder(catalog)
        self.scoring_service = scoring_service or ScoringService()
        self.skill_resolver = skill_resolver or SkillGapResolver()
        self.summary_service = summary_service or SummaryService()
        self.max_ai_augmented = max_ai_augmented

    async def submit(
        self,
        raw_answers: Mapping[str, Any],
        path: Optional[Union[str, CareerClarity]] = None
    ) -> RecommendationBundle:
        """Turn raw assessment answers into a recommendation bundle.

        Args:
            raw_answers: Answers keyed by question id
            path: Explicit assessment path; otherwise read from the answers

        Returns:
            RecommendationBundle: Complete recommendations

        Raises:
            ValidationError: If answers are missing or invalid
            PathStateError: If the path machine is misused
            NoEligibleCareersError: If no career survives scoring
        """
        with PerformanceLogger("submit_assessment", logger) as perf:
            state = AssessmentPath().resolve(raw_answers, path)
            profile = self.profile_builder.build_profile(raw_answers, state)

            matches = self.scoring_service.score(profile, self.catalog)

            interest_sectors = self.skill_resolver.interest_sectors_for(profile)
            matches = [
                match.model_copy(update={
                    "skill_gaps": self.skill_resolver.skill_gaps_for(match.sector, interest_sectors)
                })
                for match in matches
            ]

            ai_targets = matches[:self.max_ai_augmented]
            outcomes: List[AugmentationOutcome] = list(await asyncio.gather(
                *(self.augmentation_service.augment(profile, matches, match) for match in ai_targets)
            ))
            outcomes.extend(
                self.augmentation_service.template(match, FallbackReason.BEYOND_AI_LIMIT)
                for match in matches[self.max_ai_augmented:]
            )
            matches = [self._apply(match, outcome) for match, outcome in zip(matches, outcomes)]

            matches = await self.market_augmenter.enrich(
                matches, profile.zip_code, self.market_augmenter.radius_for(profile)
            )

            flags = detect_contradictions(profile, matches, self.catalog.named_career(profile))
            top_augmentation = outcomes[0].augmentation
            provenance = self._provenance(outcomes[:len(ai_targets)])

            bundle = RecommendationBundle(
                path=profile.career_clarity,
                matches=matches,
                parent_summary=self.summary_service.build_parent_summary(
                    profile, matches, top_augmentation
                ),
                counselor_notes=self.summary_service.build_counselor_notes(profile, matches, flags),
                academic_plan=top_augmentation.academic_plan,
                action_items=top_augmentation.action_items,
                provenance=provenance,
                contradiction_flags=flags,
            )

        logger.info(
            "Assessment submission completed",
            extra={
                "path": bundle.path.value,
                "matches": len(bundle.matches),
                "provenance": bundle.provenance.value,
                "flags": bundle.contradiction_flags,
                "duration_ms": perf.duration_ms,
            },
        )
        return bundle

    async def aclose(self) -> None:
        """Close the HTTP clients held by the AI and job providers."""
        if self.augmentation_service.provider is not None:
            await self.augmentation_service.provider.aclose()
        if self.market_augmenter.provider is not None:
            await self.market_augmenter.provider.aclose()

    async def __aenter__(self) -> "RecommendationService":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    @staticmethod
    def _apply(match: MatchResult, outcome: AugmentationOutcome) -> MatchResult:
        augmentation = outcome.augmentation
        return match.model_copy(update={
            "career_pathway": augmentation.career_pathway,
            "skill_gaps": augmentation.skill_gaps,
            "explanation": augmentation.explanation,
            "ai_generated": outcome.ai_generated,
        })

    def _provenance(self, outcomes: List[AugmentationOutcome]) -> Provenance:
        if not self.augmentation_service.enabled:
            return Provenance.FALLBACK

        succeeded = sum(1 for outcome in outcomes if outcome.ai_generated)
        if outcomes and succeeded == len(outcomes):
            return Provenance.FULL
        if succeeded:
            return Provenance.PARTIAL
        return Provenance.FALLBACK


def build_recommendation_service(settings: Optional[Settings] = None) -> RecommendationService:
    """Wire the service graph once from settings.

    Args:
        settings: Application settings; defaults to ``get_settings()``

    Returns:
        RecommendationService: Ready-to-use service
    """
    settings = settings or get_settings()
    catalog = CareerCatalog()

    augmentation_service = AugmentationService(
        provider=LLMFactory.create_from_settings(settings),
        catalog=catalog,
        fallback_handler=FallbackHandler(),
        parser=AugmentationOutputParser(max_attempts=settings.JSON_REPAIR_MAX_ATTEMPTS),
        timeout=settings.AI_REQUEST_TIMEOUT,
    )

    service = RecommendationService(
        catalog=catalog,
        augmentation_service=augmentation_service,
        market_augmenter=LocalMarketAugmenter.from_settings(settings),
        max_ai_augmented=settings.MAX_AI_AUGMENTED_CAREERS,
    )
    logger.info(
        "Recommendation service ready",
        extra={
            "careers": len(catalog),
            "ai_enabled": augmentation_service.enabled,
            "jobs_enabled": service.market_augmenter.enabled,
        },
    )
    return service


__all__ = ["RecommendationService", "build_recommendation_service"]
