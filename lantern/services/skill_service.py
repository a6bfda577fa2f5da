"""Sector skill resolver.

Skill gaps for a career come only from that career's sector, plus at most
one complementary skill from a compatible secondary interest. Incompatible
interests never leak skills into a career's list.
"""

from typing import Iterable, List

from lantern.data.mappings import (
    CATEGORY_SECTORS,
    COMMUNICATION_SKILL,
    COMPLEMENTARY_SKILLS,
    SECTOR_SKILLS,
    TRAIT_SECTORS,
    SkillDefinition,
    are_sectors_compatible,
)
from lantern.schemas.career_schemas import SkillGap
from lantern.schemas.profile_schemas import StudentProfile
from lantern.services.profile_service import keyword_category_scores
from lantern.utils.constants import CareerCategory, PersonalTrait, Sector
from lantern.utils.logger import get_logger

logger = get_logger(__name__)


def _to_gap(definition: SkillDefinition, sector=None) -> SkillGap:
    return SkillGap(
        skill=definition.skill,
        importance=definition.importance,
        how_to_acquire=definition.how_to_acquire,
        sector=sector,
    )


class SkillGapResolver:
    """Resolves the skills a student should build for a career sector."""

    def skill_gaps_for(
        self,
        top_career_sector: Sector,
        student_interest_sectors: Iterable[Sector]
    ) -> List[SkillGap]:
        """Resolve skill gaps for one career.

        Args:
            top_career_sector: Sector of the career being explained
            student_interest_sectors: The student's interest sectors, most relevant first

        Returns:
            List[SkillGap]: Communication, the two sector skills, and at most
            one complementary skill
        """
        gaps = [_to_gap(COMMUNICATION_SKILL)]
        gaps.extend(_to_gap(definition, top_career_sector) for definition in SECTOR_SKILLS[top_career_sector])

        for sector in student_interest_sectors:
            if sector == top_career_sector:
                continue
            if are_sectors_compatible(top_career_sector, sector):
                gaps.append(_to_gap(COMPLEMENTARY_SKILLS[sector], sector))
                break

        return gaps

    def interest_sectors_for(self, profile: StudentProfile) -> List[Sector]:
        """Derive a student's interest sectors, most relevant first.

        Sectors come from the selected category, then categories hinted at
        by the free-text answers, then personal traits. Duplicates are
        dropped, keeping the first occurrence.
        """
        ordered: List[Sector] = []

        def add(sectors: Iterable[Sector]) -> None:
            for sector in sectors:
                if sector not in ordered:
                    ordered.append(sector)

        if profile.selected_category is not None:
            add(CATEGORY_SECTORS[profile.selected_category])

        text = f"{profile.interests} {profile.experience}".strip()
        hinted = keyword_category_scores(text, 1)
        for category in sorted(hinted, key=lambda c: (-hinted[c], list(CareerCategory).index(c))):
            add(CATEGORY_SECTORS[category])

        for trait in PersonalTrait:
            if trait in profile.personal_traits:
                add(TRAIT_SECTORS[trait])

        return ordered


__all__ = ["SkillGapResolver"]
