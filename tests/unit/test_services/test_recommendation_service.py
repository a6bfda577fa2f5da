"""Unit tests for RecommendationService orchestration."""

import json
from unittest.mock import AsyncMock, Mock

import pytest

from lantern.data.career_catalog import DEFAULT_CAREERS
from lantern.llm.base_llm import LLMError
from lantern.services.augmentation_service import AugmentationService
from lantern.services.catalog_service import CareerCatalog
from lantern.services.market_service import JobSearchResult, LocalMarketAugmenter
from lantern.services.recommendation_service import RecommendationService
from lantern.utils.constants import CareerClarity, Provenance, QuestionIds
from lantern.utils.exceptions import NoEligibleCareersError, ValidationError

AI_RESPONSE = json.dumps({
    "careerPathway": {"steps": ["Graduate", "Study", "Work"], "timeline": "4 years"},
    "actionItems": [{"title": "Build a portfolio website", "priority": "high"}],
    "explanation": "Generated explanation.",
})


def build_service(catalog, provider=None, market_provider=None, max_ai_augmented=3):
    return RecommendationService(
        catalog=catalog,
        augmentation_service=AugmentationService(provider=provider, catalog=catalog),
        market_augmenter=LocalMarketAugmenter(market_provider),
        max_ai_augmented=max_ai_augmented,
    )


def mock_provider(side_effect):
    provider = Mock()
    provider.generate_text = AsyncMock(side_effect=side_effect)
    return provider


class TestRecommendationService:
    """Test cases for RecommendationService.submit."""

    @pytest.mark.asyncio
    async def test_decided_nurse_without_ai(self, catalog, decided_nurse_answers):
        bundle = await build_service(catalog).submit(decided_nurse_answers)

        assert bundle.path == CareerClarity.DECIDED
        assert [m.career_id for m in bundle.matches] == ["rn-001"]
        assert bundle.provenance == Provenance.FALLBACK
        assert bundle.contradiction_flags == []

        nurse = bundle.matches[0]
        assert not nurse.ai_generated
        assert nurse.career_pathway.steps
        assert [g.skill for g in nurse.skill_gaps] == ["Communication", "Medical Terminology", "Patient Care Basics"]
        assert nurse.explanation
        assert nurse.local_opportunities is None

        assert bundle.academic_plan.current_year[0].course_name == "Biology"
        assert len(bundle.action_items) == 4
        assert "Registered Nurse" in bundle.parent_summary.overview

    @pytest.mark.asyncio
    async def test_full_provenance(self, catalog, undecided_answers):
        provider = mock_provider([AI_RESPONSE] * 3)

        bundle = await build_service(catalog, provider).submit(undecided_answers)

        assert bundle.provenance == Provenance.FULL
        assert all(m.ai_generated for m in bundle.matches)
        assert bundle.action_items[0].title == "Build a portfolio website"
        assert provider.generate_text.await_count == 3

    @pytest.mark.asyncio
    async def test_partial_provenance(self, catalog, undecided_answers):
        provider = mock_provider([AI_RESPONSE, LLMError("down"), AI_RESPONSE])

        bundle = await build_service(catalog, provider).submit(undecided_answers)

        assert bundle.provenance == Provenance.PARTIAL
        assert [m.ai_generated for m in bundle.matches] == [True, False, True]
        assert bundle.matches[1].career_pathway.steps

    @pytest.mark.asyncio
    async def test_every_call_failing_is_fallback(self, catalog, undecided_answers):
        provider = mock_provider(LLMError("down"))

        bundle = await build_service(catalog, provider).submit(undecided_answers)

        assert bundle.provenance == Provenance.FALLBACK
        assert not any(m.ai_generated for m in bundle.matches)

    @pytest.mark.asyncio
    async def test_ai_limit(self, catalog, undecided_answers):
        provider = mock_provider([AI_RESPONSE])

        bundle = await build_service(catalog, provider, max_ai_augmented=1).submit(undecided_answers)

        assert provider.generate_text.await_count == 1
        assert [m.ai_generated for m in bundle.matches] == [True, False, False]
        assert bundle.provenance == Provenance.FULL
        assert all(m.career_pathway.steps for m in bundle.matches)

    @pytest.mark.asyncio
    async def test_market_data_attached(self, catalog, undecided_answers):
        market = Mock()
        market.search = AsyncMock(return_value=JobSearchResult(count=9, mean_salary=120000, source="adzuna"))

        bundle = await build_service(catalog, market_provider=market).submit(undecided_answers)

        assert all(m.local_opportunities.estimated_jobs == 9 for m in bundle.matches)
        # The explorer is open to relocating
        assert bundle.matches[0].local_opportunities.distance_from_student == 100
        market.search.assert_any_await("Software Developer", "94105", 100)

    @pytest.mark.asyncio
    async def test_explicit_path_wins(self, catalog, undecided_answers):
        undecided_answers[QuestionIds.CAREER_KNOWLEDGE] = "yes"

        bundle = await build_service(catalog).submit(undecided_answers, path="undecided")

        assert bundle.path == CareerClarity.UNDECIDED

    @pytest.mark.asyncio
    async def test_invalid_answers_propagate(self, catalog, decided_nurse_answers):
        del decided_nurse_answers[QuestionIds.EDUCATION_WILLINGNESS]

        with pytest.raises(ValidationError) as exc_info:
            await build_service(catalog).submit(decided_nurse_answers)

        assert exc_info.value.validation_errors == [QuestionIds.EDUCATION_WILLINGNESS]

    @pytest.mark.asyncio
    async def test_missing_branch_answer(self, catalog, decided_nurse_answers):
        del decided_nurse_answers[QuestionIds.CAREER_KNOWLEDGE]

        with pytest.raises(ValidationError):
            await build_service(catalog).submit(decided_nurse_answers)

    @pytest.mark.asyncio
    async def test_no_eligible_careers(self, decided_nurse_answers):
        catalog = CareerCatalog([c for c in DEFAULT_CAREERS if c.id == "physician-001"])

        with pytest.raises(NoEligibleCareersError):
            await build_service(catalog).submit(decided_nurse_answers)

    @pytest.mark.asyncio
    async def test_named_career_above_willingness_is_flagged(self, catalog, decided_nurse_answers):
        decided_nurse_answers[QuestionIds.SPECIFIC_CAREER] = "physician-001"
        provider = mock_provider([AI_RESPONSE])

        bundle = await build_service(catalog, provider).submit(decided_nurse_answers)

        assert [m.career_id for m in bundle.matches] == ["rn-001"]
        assert bundle.contradiction_flags == ["education_exceeds_willingness"]
        prompt = provider.generate_text.call_args.args[0]
        assert '"careerId": "physician-001"' in prompt
        assert "education_exceeds_willingness" in prompt


class TestRecommendationServiceLifecycle:
    """Test provider cleanup."""

    @pytest.mark.asyncio
    async def test_aclose_closes_both_providers(self, catalog):
        provider = mock_provider([AI_RESPONSE])
        provider.aclose = AsyncMock()
        market = Mock()
        market.aclose = AsyncMock()

        await build_service(catalog, provider, market).aclose()

        provider.aclose.assert_awaited_once()
        market.aclose.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_aclose_without_providers(self, catalog):
        await build_service(catalog).aclose()

    @pytest.mark.asyncio
    async def test_context_manager_closes_on_error(self, catalog, decided_nurse_answers):
        provider = mock_provider([AI_RESPONSE])
        provider.aclose = AsyncMock()
        del decided_nurse_answers[QuestionIds.EDUCATION_WILLINGNESS]

        with pytest.raises(ValidationError):
            async with build_service(catalog, provider) as service:
                await service.submit(decided_nurse_answers)

        provider.aclose.assert_awaited_once()
