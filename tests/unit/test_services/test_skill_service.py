"""Unit tests for the sector skill resolver."""

import pytest

from lantern.services.path_service import PathState
from lantern.services.profile_service import ProfileBuilder
from lantern.services.skill_service import SkillGapResolver
from lantern.utils.constants import Sector, SkillImportance


class TestSkillGapResolver:
    """Test cases for SkillGapResolver."""

    @pytest.fixture
    def resolver(self):
        return SkillGapResolver()

    def test_sector_skills_only(self, resolver):
        gaps = resolver.skill_gaps_for(Sector.HEALTHCARE, [Sector.HEALTHCARE])

        assert [g.skill for g in gaps] == ["Communication", "Medical Terminology", "Patient Care Basics"]
        assert gaps[0].importance == SkillImportance.CRITICAL
        assert gaps[0].sector is None
        assert all(g.sector == Sector.HEALTHCARE for g in gaps[1:])

    def test_compatible_secondary_adds_one_skill(self, resolver):
        gaps = resolver.skill_gaps_for(Sector.HEALTHCARE, [Sector.SCIENCE, Sector.EDUCATION])

        assert len(gaps) == 4
        assert gaps[-1].skill == "Scientific Method"
        assert gaps[-1].sector == Sector.SCIENCE

    def test_skips_incompatible_to_find_compatible(self, resolver):
        gaps = resolver.skill_gaps_for(Sector.HEALTHCARE, [Sector.CREATIVE, Sector.PUBLIC_SERVICE])

        assert gaps[-1].sector == Sector.PUBLIC_SERVICE

    def test_incompatible_interest_never_leaks(self, resolver):
        gaps = resolver.skill_gaps_for(Sector.CREATIVE, [Sector.TECHNOLOGY])

        assert len(gaps) == 3
        assert {g.sector for g in gaps} <= {None, Sector.CREATIVE}
        assert "Programming Fundamentals" not in [g.skill for g in gaps]

    def test_no_interests(self, resolver):
        assert len(resolver.skill_gaps_for(Sector.FINANCE, [])) == 3

    @pytest.mark.parametrize("sector", list(Sector))
    def test_every_sector_resolves(self, resolver, sector):
        gaps = resolver.skill_gaps_for(sector, list(Sector))

        assert 3 <= len(gaps) <= 4
        assert all(g.sector in (None, sector) for g in gaps[:3])

    def test_resolution_is_pure(self, resolver):
        interests = [Sector.SCIENCE]

        first = resolver.skill_gaps_for(Sector.TECHNOLOGY, interests)
        second = resolver.skill_gaps_for(Sector.TECHNOLOGY, interests)

        assert first == second
        assert interests == [Sector.SCIENCE]


class TestInterestSectors:
    """Test derivation of a student's interest sectors."""

    @pytest.fixture
    def resolver(self):
        return SkillGapResolver()

    def test_decided_nurse(self, resolver, catalog, decided_nurse_answers):
        profile = ProfileBuilder(catalog).build_profile(decided_nurse_answers, PathState.DECIDED)

        assert resolver.interest_sectors_for(profile) == [Sector.HEALTHCARE]

    def test_undecided_explorer(self, resolver, catalog, undecided_answers):
        profile = ProfileBuilder(catalog).build_profile(undecided_answers, PathState.UNDECIDED)

        sectors = resolver.interest_sectors_for(profile)

        assert sectors[0] == Sector.TECHNOLOGY
        assert len(sectors) == len(set(sectors))
        assert Sector.INFRASTRUCTURE in sectors

    def test_explorer_gets_complementary_skill(self, resolver, catalog, undecided_answers):
        profile = ProfileBuilder(catalog).build_profile(undecided_answers, PathState.UNDECIDED)

        gaps = resolver.skill_gaps_for(Sector.TECHNOLOGY, resolver.interest_sectors_for(profile))

        assert gaps[-1].skill == "Spatial Reasoning"
