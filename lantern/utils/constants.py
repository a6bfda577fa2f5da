"""Constants and enums for the Lantern career engine.

This module defines the enumerations shared by the profile builder, the
scoring engine and the augmentation layer, together with the fixed question
ids of the assessment and the numeric constants used for scoring.
"""

import re
from enum import Enum
from typing import Dict, List


# ============================================================================
# CORE ENUMS
# ============================================================================

class Sector(str, Enum):
    """Fixed classification of every career in the catalog."""

    HEALTHCARE = "healthcare"
    INFRASTRUCTURE = "infrastructure"
    TECHNOLOGY = "technology"
    EDUCATION = "education"
    BUSINESS = "business"
    CREATIVE = "creative"
    PUBLIC_SERVICE = "public-service"
    AGRICULTURE = "agriculture"
    TRANSPORTATION = "transportation"
    HOSPITALITY = "hospitality"
    MANUFACTURING = "manufacturing"
    RETAIL = "retail"
    FINANCE = "finance"
    LEGAL = "legal"
    SCIENCE = "science"

    @property
    def display_name(self) -> str:
        return self.value.replace("-", " ").title()


class EducationLevel(str, Enum):
    """Education levels, ordered from least to most schooling."""

    HIGH_SCHOOL = "high_school"
    CERTIFICATE = "certificate"
    ASSOCIATE = "associate"
    BACHELOR = "bachelor"
    ADVANCED = "advanced"

    @property
    def ordinal(self) -> int:
        return _EDUCATION_ORDINALS[self]

    @property
    def display_name(self) -> str:
        return _EDUCATION_DISPLAY_NAMES[self]

    @classmethod
    def willingness_levels(cls) -> List["EducationLevel"]:
        """Levels a student may choose as their education willingness."""
        return [cls.CERTIFICATE, cls.ASSOCIATE, cls.BACHELOR, cls.ADVANCED]


_EDUCATION_ORDINALS: Dict[EducationLevel, int] = {
    EducationLevel.HIGH_SCHOOL: 0,
    EducationLevel.CERTIFICATE: 1,
    EducationLevel.ASSOCIATE: 2,
    EducationLevel.BACHELOR: 3,
    EducationLevel.ADVANCED: 4,
}

_EDUCATION_DISPLAY_NAMES: Dict[EducationLevel, str] = {
    EducationLevel.HIGH_SCHOOL: "high school diploma",
    EducationLevel.CERTIFICATE: "certificate or trade program",
    EducationLevel.ASSOCIATE: "associate degree",
    EducationLevel.BACHELOR: "bachelor's degree",
    EducationLevel.ADVANCED: "advanced degree",
}


class CareerClarity(str, Enum):
    """Branch of the assessment chosen by the student."""

    DECIDED = "decided"
    UNDECIDED = "undecided"


class CareerCategory(str, Enum):
    """Coarse self-reported work-type buckets."""

    HARD_HAT_BUILDING = "hard_hat_building"
    HARD_HAT_DESIGN = "hard_hat_design"
    DATA_ANALYSIS = "data_analysis"
    TECHNOLOGY = "technology"
    EDUCATION_COACHING = "education_coaching"
    HEALTHCARE = "healthcare"
    PUBLIC_SAFETY = "public_safety"
    RESEARCH_INNOVATION = "research_innovation"
    CREATIVE_ARTS = "creative_arts"
    BUSINESS_MANAGEMENT = "business_management"
    LAW_LEGAL = "law_legal"
    AGRICULTURE_ENVIRONMENT = "agriculture_environment"
    TRANSPORTATION_LOGISTICS = "transportation_logistics"
    HOSPITALITY_SERVICE = "hospitality_service"

    @property
    def display_name(self) -> str:
        return self.value.replace("_", " ").title()


class Subject(str, Enum):
    """School subjects every student rates from 1 to 5."""

    MATH = "math"
    SCIENCE = "science"
    ENGLISH = "english"
    HISTORY = "history"
    ART = "art"
    TECHNOLOGY = "technology"
    PHYSICAL_ED = "physical_ed"
    LANGUAGES = "languages"
    BUSINESS = "business"


class PersonalTrait(str, Enum):
    """Personality traits a student may select."""

    ANALYTICAL = "analytical"
    CREATIVE = "creative"
    HELPFUL = "helpful"
    LEADER = "leader"
    DETAIL_ORIENTED = "detail_oriented"
    PROBLEM_SOLVER = "problem_solver"
    HANDS_ON = "hands_on"
    COMMUNICATOR = "communicator"
    TEAM_PLAYER = "team_player"
    INDEPENDENT = "independent"
    CURIOUS = "curious"
    COLLABORATIVE = "collaborative"


class Constraint(str, Enum):
    """Practical constraints a student may report."""

    STAY_CLOSE_HOME = "stay_close_home"
    OPEN_RELOCATING = "open_relocating"
    FLEXIBLE_HOURS = "flexible_hours"


class SkillImportance(str, Enum):
    CRITICAL = "Critical"
    IMPORTANT = "Important"
    BENEFICIAL = "Beneficial"


class ActionPriority(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Provenance(str, Enum):
    """Whether AI augmentation succeeded for a bundle."""

    FULL = "full"
    PARTIAL = "partial"
    FALLBACK = "fallback"


class CareerReadiness(str, Enum):
    HIGH = "high"
    MODERATE = "moderate"
    DEVELOPING = "developing"


# ============================================================================
# ASSESSMENT QUESTION IDS
# ============================================================================

class QuestionIds:
    """Raw answer keys submitted by the assessment front end."""

    GRADE_ZIP = "q1_grade_zip"
    CAREER_KNOWLEDGE = "q3_career_knowledge"
    CAREER_CATEGORY = "q3a_career_categories"
    SPECIFIC_CAREER = "q3a1_specific_career"
    SPECIFIC_CAREER_OTHER = "q3a1_specific_career_other"
    ACADEMIC_PERFORMANCE = "q4_academic_performance"
    EDUCATION_WILLINGNESS = "q5_education_willingness"
    INTERESTS_TEXT = "q8_interests_text"
    EXPERIENCE_TEXT = "q9_experience_text"
    TRAITS = "q10_traits"
    CONSTRAINTS = "q14_constraints"
    SUPPORT_CONFIDENCE = "q17_support_confidence"
    IMPACT_INSPIRATION = "q19_20_impact_inspiration"

    # Answers to the branching question
    DECIDED_ANSWERS = frozenset({"yes", "y", "true", "decided"})
    UNDECIDED_ANSWERS = frozenset({"no", "n", "false", "undecided", "not_sure", "unsure"})

    OTHER_CAREER = "other"


# ============================================================================
# VALIDATION AND SCORING CONSTANTS
# ============================================================================

class ValidationConstants:
    """Validation rules and patterns."""

    ZIP_CODE_PATTERN = re.compile(r"^\d{5}$")

    MIN_GRADE = 9
    MAX_GRADE = 12

    MIN_SUBJECT_RATING = 1
    MAX_SUBJECT_RATING = 5

    # Free text shorter than this many words is treated as low information
    MIN_INFORMATIVE_WORDS = 3
    LOW_INFORMATION_ANSWERS = frozenset({
        "idk", "i don't know", "i dont know", "dunno", "none", "nothing",
        "n/a", "na", "no", "not sure", "nope", "?", "-",
    })


class ScoringConstants:
    """Constants for the weighted career scoring."""

    # Education gap (willingness minus requirement) to component credit
    EDUCATION_EXACT_CREDIT = 1.0
    EDUCATION_ONE_UNDER_CREDIT = 0.6
    EDUCATION_FAR_UNDER_CREDIT = 0.2
    EDUCATION_OVER_CREDIT = 0.0

    # Subject rating to component credit
    SUBJECT_RATING_CREDIT = {
        5: 1.0,
        4: 0.8,
        3: 0.4,
        2: 0.0,
        1: 0.0,
    }
    HIGH_INTEREST_RATING = 4
    MODERATE_INTEREST_RATING = 3

    # Traits needed for full trait credit
    TRAIT_SATURATION = 3

    MAX_SCORE = 100.0
    SCORE_PRECISION = 1

    # Selection policy
    DECIDED_THRESHOLD = 90.0
    DECIDED_MAX_RESULTS = 5
    DEFAULT_RESULT_COUNT = 3

    # Keyword weights for undecided category inference
    INTEREST_KEYWORD_POINTS = 4
    EXPERIENCE_KEYWORD_POINTS = 5


__all__ = [
    "Sector",
    "EducationLevel",
    "CareerClarity",
    "CareerCategory",
    "Subject",
    "PersonalTrait",
    "Constraint",
    "SkillImportance",
    "ActionPriority",
    "Provenance",
    "CareerReadiness",
    "QuestionIds",
    "ValidationConstants",
    "ScoringConstants",
]
