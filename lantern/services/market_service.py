"""Local job market augmentation.

Attaches job counts and advertised salaries near the student's zip code to
each match. Lookups run concurrently; a failed lookup only affects its own
career, which is returned without local data.
"""

import asyncio
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

import httpx
from pydantic import BaseModel, Field

from lantern.core.config import Settings, get_settings
from lantern.schemas.career_schemas import LocalOpportunities, MatchResult
from lantern.schemas.profile_schemas import StudentProfile
from lantern.utils.constants import Constraint
from lantern.utils.exceptions import EnrichmentFailure
from lantern.utils.logger import get_logger

logger = get_logger(__name__)

# Adzuna rejects larger search distances
MAX_SEARCH_DISTANCE_MILES = 100


class JobSearchResult(BaseModel):
    """Summary of a job search around one location."""

    count: int = Field(..., ge=0, description="Number of listings found")
    mean_salary: Optional[float] = Field(default=None, ge=0, description="Mean advertised salary")
    source: str = Field(..., description="Provider name")


class JobSearchProvider(ABC):
    """Interface for job market data sources."""

    name: str

    @abstractmethod
    async def search(self, title: str, zip_code: str, radius_miles: int) -> JobSearchResult:
        """Search listings for a title near a zip code.

        Raises:
            EnrichmentFailure: If the lookup fails or returns malformed data
        """

    async def aclose(self) -> None:
        """Release network resources; a no-op for providers without any."""


class AdzunaJobProvider(JobSearchProvider):
    """Adzuna job search API client."""

    name = "adzuna"

    def __init__(
        self,
        app_id: str,
        app_key: str,
        country: str = "us",
        base_url: str = "https://api.adzuna.com/v1/api/jobs",
        timeout: float = 10.0,
        results_per_page: int = 20,
        http_client: Optional[httpx.AsyncClient] = None
    ):
        self.app_id = app_id
        self.app_key = app_key
        self.country = country
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.results_per_page = results_per_page
        self.client = http_client or httpx.AsyncClient(timeout=timeout)

    @classmethod
    def from_settings(cls, settings: Settings) -> "AdzunaJobProvider":
        return cls(
            app_id=settings.ADZUNA_APP_ID,
            app_key=settings.ADZUNA_API_KEY,
            country=settings.ADZUNA_COUNTRY,
            base_url=settings.ADZUNA_BASE_URL,
            timeout=settings.JOB_SEARCH_TIMEOUT,
            results_per_page=settings.JOB_RESULTS_PER_PAGE,
        )

    def build_params(self, title: str, zip_code: str, radius_miles: int) -> Dict[str, Any]:
        params: Dict[str, Any] = {
            "app_id": self.app_id,
            "app_key": self.app_key,
            "results_per_page": self.results_per_page,
            "what": title,
            "where": zip_code,
        }
        if 0 < radius_miles <= MAX_SEARCH_DISTANCE_MILES:
            params["distance"] = radius_miles
        return params

    async def search(self, title: str, zip_code: str, radius_miles: int) -> JobSearchResult:
        url = f"{self.base_url}/{self.country}/search/1"

        try:
            response = await self.client.get(
                url, params=self.build_params(title, zip_code, radius_miles), timeout=self.timeout
            )
        except httpx.TimeoutException as e:
            raise EnrichmentFailure(
                f"Job search timed out for {title}", provider=self.name, cause=e
            )
        except httpx.RequestError as e:
            raise EnrichmentFailure(
                f"Job search request failed for {title}: {e}", provider=self.name, cause=e
            )

        if response.status_code != 200:
            raise EnrichmentFailure(
                f"Job search returned HTTP {response.status_code} for {title}",
                provider=self.name,
                status_code=response.status_code,
            )

        try:
            payload = response.json()
            count = int(payload["count"])
        except (ValueError, KeyError, TypeError) as e:
            raise EnrichmentFailure(
                f"Malformed job search response for {title}", provider=self.name, cause=e
            )

        return JobSearchResult(
            count=max(count, 0),
            mean_salary=self._mean_salary(payload),
            source=self.name,
        )

    @staticmethod
    def _mean_salary(payload: Dict[str, Any]) -> Optional[float]:
        mean = payload.get("mean")
        if isinstance(mean, (int, float)) and mean > 0:
            return float(mean)

        salaries = []
        for job in payload.get("results") or []:
            low, high = job.get("salary_min"), job.get("salary_max")
            if isinstance(low, (int, float)) and isinstance(high, (int, float)):
                salaries.append((low + high) / 2)
            elif isinstance(low, (int, float)) or isinstance(high, (int, float)):
                salaries.append(float(low if isinstance(low, (int, float)) else high))

        if not salaries:
            return None
        return sum(salaries) / len(salaries)

    async def aclose(self) -> None:
        await self.client.aclose()


class LocalMarketAugmenter:
    """Adds local job market data to matches."""

    def __init__(
        self,
        provider: Optional[JobSearchProvider],
        default_radius_miles: int = 25,
        relocation_radius_miles: int = 100
    ):
        self.provider = provider
        self.default_radius_miles = default_radius_miles
        self.relocation_radius_miles = relocation_radius_miles

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "LocalMarketAugmenter":
        """Build the augmenter; it is inert unless live job data is configured."""
        settings = settings or get_settings()
        provider = AdzunaJobProvider.from_settings(settings) if settings.jobs_enabled() else None
        if provider is None:
            logger.info("Live job data disabled, matches will not carry local opportunities")
        return cls(
            provider,
            default_radius_miles=settings.JOB_SEARCH_RADIUS_MILES,
            relocation_radius_miles=settings.RELOCATION_RADIUS_MILES,
        )

    @property
    def enabled(self) -> bool:
        return self.provider is not None

    def radius_for(self, profile: StudentProfile) -> int:
        if Constraint.OPEN_RELOCATING in profile.constraints:
            return self.relocation_radius_miles
        return self.default_radius_miles

    async def enrich(
        self,
        matches: List[MatchResult],
        zip_code: str,
        radius_miles: Optional[int] = None
    ) -> List[MatchResult]:
        """Attach local opportunities to each match.

        Args:
            matches: Matches to enrich
            zip_code: Student's zip code
            radius_miles: Search radius; defaults to the standard radius

        Returns:
            List[MatchResult]: Matches in the same order, enriched where the lookup succeeded
        """
        if self.provider is None or not matches:
            return list(matches)

        radius = radius_miles or self.default_radius_miles
        return list(await asyncio.gather(
            *(self._enrich_one(match, zip_code, radius) for match in matches)
        ))

    async def _enrich_one(self, match: MatchResult, zip_code: str, radius: int) -> MatchResult:
        try:
            result = await self.provider.search(match.title, zip_code, radius)
        except EnrichmentFailure as e:
            logger.warning(
                f"Market enrichment skipped for {match.title}: {e.message}",
                extra={"career_id": match.career_id, "provider": e.provider, "status_code": e.status_code},
            )
            return match
        except Exception as e:
            logger.warning(
                f"Unexpected market enrichment error for {match.title}: {e}",
                extra={"career_id": match.career_id},
                exc_info=True,
            )
            return match

        local = LocalOpportunities(
            estimated_jobs=result.count,
            average_local_salary=round(
                result.mean_salary if result.mean_salary is not None else match.average_salary
            ),
            distance_from_student=radius,
            source=result.source,
        )
        return match.model_copy(update={"local_opportunities": local})


__all__ = [
    "JobSearchResult",
    "JobSearchProvider",
    "AdzunaJobProvider",
    "LocalMarketAugmenter",
]
