"""Deterministic fallback content for AI augmentation.

When the generative provider is disabled, times out, errors, or returns
output that cannot be repaired, the augmentation service asks this handler
for template content instead. The result always has every field populated
so downstream consumers never see a partially filled augmentation.
"""

from enum import Enum
from typing import List, Optional

from lantern.data.mappings import SECTOR_COURSES
from lantern.langchain_handlers.parsers.json_repair import FALLBACK_SKELETON
from lantern.schemas.career_schemas import CareerPathway, CareerRecord, MatchResult, SkillGap
from lantern.schemas.recommendation_schemas import (
    AcademicPlan,
    ActionItem,
    AIAugmentation,
    CourseRecommendation,
)
from lantern.utils.constants import ActionPriority, EducationLevel
from lantern.utils.logger import get_logger

logger = get_logger(__name__)


class FallbackReason(str, Enum):
    """Why deterministic content was used instead of model output."""

    PROVIDER_DISABLED = "provider_disabled"
    PROVIDER_ERROR = "provider_error"
    TIMEOUT = "timeout"
    UNPARSEABLE = "unparseable"
    BEYOND_AI_LIMIT = "beyond_ai_limit"


# (title, description, priority, timeline)
DEFAULT_ACTION_ITEMS = (
    ("Meet with your school counselor",
     "Discuss your career interests and plan your remaining high school courses",
     ActionPriority.HIGH, "This week"),
    ("Research training programs",
     "Look up colleges and training programs that lead to careers you are considering",
     ActionPriority.HIGH, "This month"),
    ("Find volunteer opportunities",
     "Get hands-on experience in a field related to your career interests",
     ActionPriority.MEDIUM, "Next month"),
    ("Network with professionals",
     "Talk with people who work in the careers you are exploring",
     ActionPriority.MEDIUM, "Next 3 months"),
)

_TIMELINES = {
    EducationLevel.HIGH_SCHOOL: "0-1 years",
    EducationLevel.CERTIFICATE: "1-3 years",
    EducationLevel.ASSOCIATE: "2-4 years",
    EducationLevel.BACHELOR: "4-6 years",
    EducationLevel.ADVANCED: "6-10 years",
}


class FallbackHandler:
    """Builds template augmentations from catalog data and resolved skills."""

    def career_pathway(self, career: CareerRecord) -> CareerPathway:
        """Generic education-to-employment pathway for a career."""
        education = career.required_education.display_name
        certifications = list(career.certifications) or ["Professional certifications"]

        steps = [
            f"Complete high school with focus on subjects relevant to {career.title}",
            f"Obtain required certifications for {career.title}: {', '.join(certifications)}",
            f"Gain hands-on experience in {career.title} through internships or entry-level positions",
            f"Apply for {career.title} positions in the {career.sector.display_name} sector",
            f"Build expertise and advance in your {career.title} career",
        ]
        if career.required_education != EducationLevel.HIGH_SCHOOL:
            steps.insert(1, f"Pursue {education} training for {career.title}")

        requirements = ["High school diploma"]
        if career.required_education != EducationLevel.HIGH_SCHOOL:
            requirements.append(education)
        requirements.extend(career.certifications or ("Professional development",))

        return CareerPathway(
            steps=steps,
            timeline=_TIMELINES[career.required_education],
            requirements=requirements,
        )

    def academic_plan(self, career: CareerRecord) -> AcademicPlan:
        """Sector-specific three-horizon course plan."""
        current, upcoming, later = SECTOR_COURSES[career.sector]

        def course(definition) -> CourseRecommendation:
            return CourseRecommendation(
                course_name=definition.course_name,
                reasoning=definition.reasoning,
                career_connection=career.title,
                priority=definition.priority,
            )

        return AcademicPlan(
            current_year=[course(current)],
            next_year=[course(upcoming)],
            long_term=[course(later)],
        )

    def action_items(self) -> List[ActionItem]:
        return [
            ActionItem(title=title, description=description, priority=priority, timeline=timeline)
            for title, description, priority, timeline in DEFAULT_ACTION_ITEMS
        ]

    def explanation(self, match: MatchResult) -> str:
        return (
            f"{match.title} scored {match.match_score:g}% based on your assessment "
            f"responses and shows strong alignment with your interests."
        )

    def build_augmentation(
        self,
        career: CareerRecord,
        match: MatchResult,
        skill_gaps: List[SkillGap],
        reason: Optional[FallbackReason] = None
    ) -> AIAugmentation:
        """Build a complete template augmentation for one career.

        Args:
            career: Catalog record of the career
            match: Scored match for the career
            skill_gaps: Skill gaps from the sector resolver
            reason: Why the template is being used

        Returns:
            AIAugmentation: Fully populated augmentation
        """
        base = AIAugmentation.model_validate_json(FALLBACK_SKELETON)

        augmentation = base.model_copy(update={
            "academic_plan": self.academic_plan(career),
            "career_pathway": self.career_pathway(career),
            "skill_gaps": list(skill_gaps),
            "action_items": self.action_items(),
            "explanation": self.explanation(match),
        })

        logger.debug(
            "Built fallback augmentation",
            extra={"career_id": career.id, "reason": reason.value if reason else None},
        )
        return augmentation


__all__ = ["FallbackHandler", "FallbackReason", "DEFAULT_ACTION_ITEMS"]
