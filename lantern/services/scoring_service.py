"""Weighted scoring engine.

Scores every catalog career against a student profile using the weights of
the profile's assessment path, then applies that path's selection policy.
Scoring is synchronous and pure: the same profile and catalog always give
the same ordered result.
"""

from typing import List, Optional, Tuple

from lantern.data.mappings import CATEGORY_SECTORS, SUBJECT_SECTORS, TRAIT_SECTORS
from lantern.schemas.career_schemas import CareerRecord, MatchResult
from lantern.schemas.profile_schemas import StudentProfile
from lantern.services.catalog_service import CareerCatalog
from lantern.services.path_service import SCORING_CONFIGS, PathState, ScoringConfig
from lantern.utils.constants import ScoringConstants, Subject
from lantern.utils.exceptions import NoEligibleCareersError
from lantern.utils.logger import PerformanceLogger, get_logger

logger = get_logger(__name__)


def education_credit(profile: StudentProfile, career: CareerRecord) -> Optional[float]:
    """Credit for how well the career's education fits the student's plans.

    Returns:
        Optional[float]: Credit in [0, 1], or None when the career needs more
        education than the student is willing to pursue
    """
    gap = profile.education_willingness.ordinal - career.required_education.ordinal
    if gap < 0:
        return None
    if gap == 0:
        return ScoringConstants.EDUCATION_EXACT_CREDIT
    if gap == 1:
        return ScoringConstants.EDUCATION_ONE_UNDER_CREDIT
    return ScoringConstants.EDUCATION_FAR_UNDER_CREDIT


def subject_credit(profile: StudentProfile, career: CareerRecord) -> Tuple[float, Optional[Subject]]:
    """Best rating credit among subjects with affinity to the career's sector."""
    best, best_subject = 0.0, None
    for subject in Subject:
        if career.sector not in SUBJECT_SECTORS[subject]:
            continue
        credit = ScoringConstants.SUBJECT_RATING_CREDIT.get(profile.subject_ratings[subject], 0.0)
        if credit > best:
            best, best_subject = credit, subject
    return best, best_subject


def trait_credit(profile: StudentProfile, career: CareerRecord) -> Tuple[float, int]:
    if not profile.personal_traits:
        return 0.0, 0
    matches = sum(1 for trait in profile.personal_traits if career.sector in TRAIT_SECTORS[trait])
    denominator = min(len(profile.personal_traits), ScoringConstants.TRAIT_SATURATION)
    return min(matches / denominator, 1.0), matches


class ScoringService:
    """Scores and selects careers for a profile."""

    def score(self, profile: StudentProfile, catalog: CareerCatalog) -> List[MatchResult]:
        """Score the catalog and apply the path's selection policy.

        Args:
            profile: Validated student profile
            catalog: Career catalog to score

        Returns:
            List[MatchResult]: Selected matches, best first

        Raises:
            NoEligibleCareersError: If the catalog is empty or no career
                survives the education filter
        """
        path = PathState(profile.career_clarity.value)
        config = SCORING_CONFIGS[path]

        with PerformanceLogger("score_careers", logger, extra={"path": path.value}):
            scored = self.score_all(profile, catalog, config)

            if not scored:
                raise NoEligibleCareersError(path=path.value, catalog_size=len(catalog))

            selected = self.select(scored, config)

        logger.info(
            "Scored career catalog",
            extra={
                "path": path.value,
                "eligible": len(scored),
                "selected": len(selected),
                "top_score": selected[0].match_score,
            },
        )
        return selected

    def score_all(
        self,
        profile: StudentProfile,
        catalog: CareerCatalog,
        config: ScoringConfig
    ) -> List[MatchResult]:
        """Score every eligible career, sorted by score with catalog order on ties."""
        results = []
        for career in catalog.list_careers():
            result = self.score_career(profile, career, config)
            if result is not None:
                results.append(result)

        # sorted() is stable, so equal scores keep insertion order
        return sorted(results, key=lambda match: -match.match_score)

    def score_career(
        self,
        profile: StudentProfile,
        career: CareerRecord,
        config: ScoringConfig
    ) -> Optional[MatchResult]:
        """Score a single career, or return None if the hard filter excludes it."""
        factors: List[str] = []
        total = 0.0

        category_sectors = CATEGORY_SECTORS.get(profile.selected_category, ())
        if career.sector in category_sectors:
            total += config.category_weight
            factors.append(
                f"{career.sector.display_name} matches your interest in "
                f"{profile.selected_category.display_name}"
            )

        education = education_credit(profile, career)
        if education is None:
            if config.education_hard_filter:
                return None
            education = ScoringConstants.EDUCATION_OVER_CREDIT
            factors.append(
                f"Requires {career.required_education.display_name}, more education "
                f"than you currently plan"
            )
        elif education == ScoringConstants.EDUCATION_EXACT_CREDIT:
            factors.append(
                f"{career.required_education.display_name} fits your education plans"
            )
        else:
            factors.append(
                f"Needs {career.required_education.display_name}, within your education plans"
            )
        total += config.education_weight * education

        subjects, best_subject = subject_credit(profile, career)
        if best_subject is not None:
            total += config.subject_weight * subjects
            factors.append(
                f"Builds on your {best_subject.value.replace('_', ' ')} rating of "
                f"{profile.subject_ratings[best_subject]}/5"
            )

        if config.trait_weight:
            traits, matched = trait_credit(profile, career)
            if matched:
                total += config.trait_weight * traits
                factors.append(f"{matched} of your personal traits suit {career.sector.display_name}")

        if config.specific_career_bonus and profile.specific_career_id == career.id:
            total += config.specific_career_bonus
            factors.append("This is the career you named")

        score = round(min(total, ScoringConstants.MAX_SCORE), ScoringConstants.SCORE_PRECISION)

        return MatchResult(
            career_id=career.id,
            title=career.title,
            sector=career.sector,
            required_education=career.required_education,
            match_score=score,
            reasoning_factors=factors,
            average_salary=career.average_salary,
        )

    @staticmethod
    def select(scored: List[MatchResult], config: ScoringConfig) -> List[MatchResult]:
        """Apply the selection policy to an already sorted list.

        With a threshold, every career at or above it is kept, capped; when
        none qualifies the top few are kept instead. Without a threshold the
        top few are always kept.
        """
        if config.use_score_threshold:
            qualifying = [
                match for match in scored
                if match.match_score >= ScoringConstants.DECIDED_THRESHOLD
            ]
            if qualifying:
                return qualifying[:ScoringConstants.DECIDED_MAX_RESULTS]

        return scored[:ScoringConstants.DEFAULT_RESULT_COUNT]


__all__ = ["ScoringService", "education_credit", "subject_credit", "trait_credit"]
