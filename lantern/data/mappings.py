"""Lookup tables that drive scoring, skill resolution and fallback content.

Every table is keyed by an enum from ``lantern.utils.constants`` and must
cover all of its members; ``tests/unit/test_services/test_catalog_service.py``
enforces that so no sector silently falls through to generic content.
"""

from typing import Dict, FrozenSet, NamedTuple, Tuple

from lantern.utils.constants import (
    CareerCategory,
    PersonalTrait,
    Sector,
    SkillImportance,
    Subject,
)


class SkillDefinition(NamedTuple):
    skill: str
    importance: SkillImportance
    how_to_acquire: str


class CourseDefinition(NamedTuple):
    course_name: str
    reasoning: str
    priority: str


# ============================================================================
# CATEGORY -> SECTORS
# ============================================================================

CATEGORY_SECTORS: Dict[CareerCategory, Tuple[Sector, ...]] = {
    CareerCategory.HARD_HAT_BUILDING: (Sector.INFRASTRUCTURE, Sector.MANUFACTURING),
    CareerCategory.HARD_HAT_DESIGN: (Sector.INFRASTRUCTURE, Sector.CREATIVE),
    CareerCategory.DATA_ANALYSIS: (Sector.BUSINESS, Sector.FINANCE, Sector.SCIENCE),
    CareerCategory.TECHNOLOGY: (Sector.TECHNOLOGY,),
    CareerCategory.EDUCATION_COACHING: (Sector.EDUCATION,),
    CareerCategory.HEALTHCARE: (Sector.HEALTHCARE,),
    CareerCategory.PUBLIC_SAFETY: (Sector.PUBLIC_SERVICE,),
    CareerCategory.RESEARCH_INNOVATION: (Sector.SCIENCE, Sector.TECHNOLOGY),
    CareerCategory.CREATIVE_ARTS: (Sector.CREATIVE,),
    CareerCategory.BUSINESS_MANAGEMENT: (Sector.BUSINESS, Sector.FINANCE),
    CareerCategory.LAW_LEGAL: (Sector.LEGAL, Sector.PUBLIC_SERVICE),
    CareerCategory.AGRICULTURE_ENVIRONMENT: (Sector.AGRICULTURE, Sector.SCIENCE),
    CareerCategory.TRANSPORTATION_LOGISTICS: (Sector.TRANSPORTATION,),
    CareerCategory.HOSPITALITY_SERVICE: (Sector.HOSPITALITY, Sector.RETAIL),
}


# ============================================================================
# SUBJECT / TRAIT AFFINITIES
# ============================================================================

SUBJECT_SECTORS: Dict[Subject, Tuple[Sector, ...]] = {
    Subject.MATH: (
        Sector.INFRASTRUCTURE, Sector.TECHNOLOGY, Sector.FINANCE,
        Sector.SCIENCE, Sector.BUSINESS, Sector.MANUFACTURING,
    ),
    Subject.SCIENCE: (Sector.HEALTHCARE, Sector.SCIENCE, Sector.AGRICULTURE),
    Subject.ENGLISH: (Sector.EDUCATION, Sector.LEGAL, Sector.CREATIVE, Sector.BUSINESS),
    Subject.HISTORY: (Sector.EDUCATION, Sector.LEGAL, Sector.PUBLIC_SERVICE),
    Subject.ART: (Sector.CREATIVE,),
    Subject.TECHNOLOGY: (
        Sector.TECHNOLOGY, Sector.INFRASTRUCTURE, Sector.MANUFACTURING, Sector.TRANSPORTATION,
    ),
    Subject.PHYSICAL_ED: (Sector.PUBLIC_SERVICE, Sector.HEALTHCARE, Sector.AGRICULTURE),
    Subject.LANGUAGES: (Sector.EDUCATION, Sector.HOSPITALITY, Sector.LEGAL, Sector.RETAIL),
    Subject.BUSINESS: (Sector.BUSINESS, Sector.FINANCE, Sector.RETAIL, Sector.HOSPITALITY),
}

TRAIT_SECTORS: Dict[PersonalTrait, Tuple[Sector, ...]] = {
    PersonalTrait.ANALYTICAL: (Sector.TECHNOLOGY, Sector.FINANCE, Sector.SCIENCE, Sector.BUSINESS),
    PersonalTrait.CREATIVE: (Sector.CREATIVE, Sector.TECHNOLOGY),
    PersonalTrait.HELPFUL: (
        Sector.HEALTHCARE, Sector.EDUCATION, Sector.PUBLIC_SERVICE, Sector.HOSPITALITY,
    ),
    PersonalTrait.LEADER: (Sector.BUSINESS, Sector.PUBLIC_SERVICE, Sector.EDUCATION),
    PersonalTrait.DETAIL_ORIENTED: (
        Sector.FINANCE, Sector.HEALTHCARE, Sector.LEGAL, Sector.MANUFACTURING,
    ),
    PersonalTrait.PROBLEM_SOLVER: (Sector.TECHNOLOGY, Sector.INFRASTRUCTURE, Sector.SCIENCE),
    PersonalTrait.HANDS_ON: (
        Sector.INFRASTRUCTURE, Sector.MANUFACTURING, Sector.AGRICULTURE, Sector.TRANSPORTATION,
    ),
    PersonalTrait.COMMUNICATOR: (
        Sector.EDUCATION, Sector.LEGAL, Sector.RETAIL, Sector.HOSPITALITY, Sector.BUSINESS,
    ),
    PersonalTrait.TEAM_PLAYER: (Sector.HEALTHCARE, Sector.PUBLIC_SERVICE, Sector.HOSPITALITY),
    PersonalTrait.INDEPENDENT: (Sector.CREATIVE, Sector.TRANSPORTATION, Sector.AGRICULTURE),
    PersonalTrait.CURIOUS: (Sector.SCIENCE, Sector.TECHNOLOGY),
    PersonalTrait.COLLABORATIVE: (Sector.EDUCATION, Sector.HEALTHCARE, Sector.BUSINESS),
}


# ============================================================================
# UNDECIDED CATEGORY INFERENCE
# ============================================================================

CATEGORY_KEYWORDS: Dict[CareerCategory, Tuple[str, ...]] = {
    CareerCategory.HARD_HAT_BUILDING: (
        "build", "construction", "tools", "fix", "repair", "wood", "weld", "electrical", "plumbing",
    ),
    CareerCategory.HARD_HAT_DESIGN: (
        "design", "architecture", "blueprint", "drafting", "cad", "bridge",
    ),
    CareerCategory.DATA_ANALYSIS: (
        "data", "numbers", "statistics", "spreadsheet", "analyze", "math",
    ),
    CareerCategory.TECHNOLOGY: (
        "computer", "coding", "programming", "software", "video game", "tech", "robot", "website",
    ),
    CareerCategory.EDUCATION_COACHING: (
        "teach", "tutor", "coach", "mentor", "kids", "children", "camp counselor",
    ),
    CareerCategory.HEALTHCARE: (
        "health", "medical", "hospital", "nurse", "doctor", "patient", "heal", "first aid",
    ),
    CareerCategory.PUBLIC_SAFETY: (
        "police", "fire", "rescue", "protect", "military", "emergency", "safety",
    ),
    CareerCategory.RESEARCH_INNOVATION: (
        "research", "experiment", "science", "lab", "discover", "invent",
    ),
    CareerCategory.CREATIVE_ARTS: (
        "art", "draw", "paint", "music", "photo", "writing", "film", "create",
    ),
    CareerCategory.BUSINESS_MANAGEMENT: (
        "business", "sell", "money", "entrepreneur", "manage", "marketing",
    ),
    CareerCategory.LAW_LEGAL: (
        "law", "lawyer", "debate", "justice", "court", "rights",
    ),
    CareerCategory.AGRICULTURE_ENVIRONMENT: (
        "farm", "animals", "plants", "garden", "outdoors", "environment", "nature",
    ),
    CareerCategory.TRANSPORTATION_LOGISTICS: (
        "cars", "trucks", "driving", "engines", "planes", "mechanic",
    ),
    CareerCategory.HOSPITALITY_SERVICE: (
        "cook", "food", "restaurant", "hotel", "travel", "customer", "retail", "store",
    ),
}

# Points a selected trait adds to each category during inference
TRAIT_CATEGORY_WEIGHTS: Dict[PersonalTrait, Dict[CareerCategory, int]] = {
    PersonalTrait.ANALYTICAL: {
        CareerCategory.DATA_ANALYSIS: 5, CareerCategory.RESEARCH_INNOVATION: 4,
        CareerCategory.TECHNOLOGY: 3,
    },
    PersonalTrait.CREATIVE: {
        CareerCategory.CREATIVE_ARTS: 5, CareerCategory.HARD_HAT_DESIGN: 3,
    },
    PersonalTrait.HELPFUL: {
        CareerCategory.HEALTHCARE: 5, CareerCategory.EDUCATION_COACHING: 4,
        CareerCategory.PUBLIC_SAFETY: 3,
    },
    PersonalTrait.LEADER: {
        CareerCategory.BUSINESS_MANAGEMENT: 5, CareerCategory.PUBLIC_SAFETY: 3,
    },
    PersonalTrait.DETAIL_ORIENTED: {
        CareerCategory.DATA_ANALYSIS: 4, CareerCategory.LAW_LEGAL: 3,
        CareerCategory.HEALTHCARE: 2,
    },
    PersonalTrait.PROBLEM_SOLVER: {
        CareerCategory.TECHNOLOGY: 5, CareerCategory.HARD_HAT_DESIGN: 3,
        CareerCategory.RESEARCH_INNOVATION: 3,
    },
    PersonalTrait.HANDS_ON: {
        CareerCategory.HARD_HAT_BUILDING: 6, CareerCategory.TRANSPORTATION_LOGISTICS: 4,
        CareerCategory.AGRICULTURE_ENVIRONMENT: 3,
    },
    PersonalTrait.COMMUNICATOR: {
        CareerCategory.EDUCATION_COACHING: 5, CareerCategory.LAW_LEGAL: 4,
        CareerCategory.HOSPITALITY_SERVICE: 3,
    },
    PersonalTrait.TEAM_PLAYER: {
        CareerCategory.HEALTHCARE: 3, CareerCategory.PUBLIC_SAFETY: 3,
        CareerCategory.HOSPITALITY_SERVICE: 2,
    },
    PersonalTrait.INDEPENDENT: {
        CareerCategory.CREATIVE_ARTS: 3, CareerCategory.TRANSPORTATION_LOGISTICS: 3,
    },
    PersonalTrait.CURIOUS: {
        CareerCategory.RESEARCH_INNOVATION: 5, CareerCategory.TECHNOLOGY: 2,
    },
    PersonalTrait.COLLABORATIVE: {
        CareerCategory.EDUCATION_COACHING: 3, CareerCategory.BUSINESS_MANAGEMENT: 3,
        CareerCategory.HEALTHCARE: 2,
    },
}


# ============================================================================
# SKILLS
# ============================================================================

COMMUNICATION_SKILL = SkillDefinition(
    "Communication",
    SkillImportance.CRITICAL,
    "Join speech/debate club, practice presentations",
)

SECTOR_SKILLS: Dict[Sector, Tuple[SkillDefinition, SkillDefinition]] = {
    Sector.HEALTHCARE: (
        SkillDefinition("Medical Terminology", SkillImportance.CRITICAL,
                        "Take a health sciences course or an online certification"),
        SkillDefinition("Patient Care Basics", SkillImportance.IMPORTANT,
                        "Earn CPR/First Aid certification and volunteer at a clinic"),
    ),
    Sector.INFRASTRUCTURE: (
        SkillDefinition("Technical Drawing", SkillImportance.IMPORTANT,
                        "Take drafting or CAD classes and read construction plans"),
        SkillDefinition("Jobsite Safety", SkillImportance.CRITICAL,
                        "Complete an OSHA 10 safety course"),
    ),
    Sector.TECHNOLOGY: (
        SkillDefinition("Programming Fundamentals", SkillImportance.CRITICAL,
                        "Take computer science classes and build small projects"),
        SkillDefinition("Troubleshooting", SkillImportance.IMPORTANT,
                        "Practice diagnosing hardware and software problems"),
    ),
    Sector.EDUCATION: (
        SkillDefinition("Lesson Planning", SkillImportance.IMPORTANT,
                        "Volunteer as a tutor and prepare short lessons"),
        SkillDefinition("Classroom Leadership", SkillImportance.CRITICAL,
                        "Lead a club activity or assist a teacher"),
    ),
    Sector.BUSINESS: (
        SkillDefinition("Business Writing", SkillImportance.IMPORTANT,
                        "Take a business or marketing elective"),
        SkillDefinition("Spreadsheet Analysis", SkillImportance.CRITICAL,
                        "Learn Excel or Google Sheets through online tutorials"),
    ),
    Sector.CREATIVE: (
        SkillDefinition("Design Portfolio", SkillImportance.CRITICAL,
                        "Build a portfolio of your best creative work"),
        SkillDefinition("Visual Composition", SkillImportance.IMPORTANT,
                        "Take art and design classes and study layout principles"),
    ),
    Sector.PUBLIC_SERVICE: (
        SkillDefinition("Emergency Response", SkillImportance.CRITICAL,
                        "Complete CPR/First Aid training and join a cadet program"),
        SkillDefinition("Physical Fitness", SkillImportance.IMPORTANT,
                        "Follow a consistent training plan and join a sports team"),
    ),
    Sector.AGRICULTURE: (
        SkillDefinition("Animal and Plant Science", SkillImportance.CRITICAL,
                        "Take agriculture or biology classes and join FFA or 4-H"),
        SkillDefinition("Equipment Operation", SkillImportance.IMPORTANT,
                        "Work a seasonal farm or landscaping job"),
    ),
    Sector.TRANSPORTATION: (
        SkillDefinition("Vehicle Systems", SkillImportance.CRITICAL,
                        "Take an automotive class or shadow a mechanic"),
        SkillDefinition("Route and Logistics Planning", SkillImportance.IMPORTANT,
                        "Practice map reading and learn logistics software basics"),
    ),
    Sector.HOSPITALITY: (
        SkillDefinition("Customer Service", SkillImportance.CRITICAL,
                        "Work a part-time job serving customers"),
        SkillDefinition("Food Safety", SkillImportance.IMPORTANT,
                        "Earn a food handler certificate"),
    ),
    Sector.MANUFACTURING: (
        SkillDefinition("Machine Operation", SkillImportance.CRITICAL,
                        "Take shop class and learn to read technical specifications"),
        SkillDefinition("Quality Control", SkillImportance.IMPORTANT,
                        "Practice precise measurement with calipers and gauges"),
    ),
    Sector.RETAIL: (
        SkillDefinition("Sales Techniques", SkillImportance.IMPORTANT,
                        "Work part-time in a store and study product knowledge"),
        SkillDefinition("Inventory Management", SkillImportance.CRITICAL,
                        "Help track stock for a school store or fundraiser"),
    ),
    Sector.FINANCE: (
        SkillDefinition("Financial Literacy", SkillImportance.CRITICAL,
                        "Take a personal finance or accounting class"),
        SkillDefinition("Accounting Software", SkillImportance.IMPORTANT,
                        "Learn QuickBooks or spreadsheet bookkeeping online"),
    ),
    Sector.LEGAL: (
        SkillDefinition("Legal Research", SkillImportance.CRITICAL,
                        "Join mock trial and practice researching case law"),
        SkillDefinition("Persuasive Writing", SkillImportance.IMPORTANT,
                        "Write argumentative essays and join the debate team"),
    ),
    Sector.SCIENCE: (
        SkillDefinition("Laboratory Techniques", SkillImportance.CRITICAL,
                        "Take lab-based science courses and enter a science fair"),
        SkillDefinition("Data Analysis", SkillImportance.IMPORTANT,
                        "Learn statistics and practice with real data sets"),
    ),
}

# One skill a compatible secondary interest can contribute
COMPLEMENTARY_SKILLS: Dict[Sector, SkillDefinition] = {
    Sector.HEALTHCARE: SkillDefinition("Health Literacy", SkillImportance.BENEFICIAL,
                                       "Take a health or anatomy elective"),
    Sector.INFRASTRUCTURE: SkillDefinition("Spatial Reasoning", SkillImportance.BENEFICIAL,
                                           "Work on building or modeling projects"),
    Sector.TECHNOLOGY: SkillDefinition("Digital Tools", SkillImportance.BENEFICIAL,
                                       "Learn a productivity or automation tool"),
    Sector.EDUCATION: SkillDefinition("Mentoring", SkillImportance.BENEFICIAL,
                                      "Mentor a younger student"),
    Sector.BUSINESS: SkillDefinition("Project Management", SkillImportance.BENEFICIAL,
                                     "Organize a school event from start to finish"),
    Sector.CREATIVE: SkillDefinition("Visual Storytelling", SkillImportance.BENEFICIAL,
                                     "Create posters or short videos for a club"),
    Sector.PUBLIC_SERVICE: SkillDefinition("Community Engagement", SkillImportance.BENEFICIAL,
                                           "Volunteer with a local community organization"),
    Sector.AGRICULTURE: SkillDefinition("Environmental Awareness", SkillImportance.BENEFICIAL,
                                        "Join an environmental or garden club"),
    Sector.TRANSPORTATION: SkillDefinition("Mechanical Aptitude", SkillImportance.BENEFICIAL,
                                           "Help maintain bikes, small engines or vehicles"),
    Sector.HOSPITALITY: SkillDefinition("Event Coordination", SkillImportance.BENEFICIAL,
                                        "Help plan a school dance or banquet"),
    Sector.MANUFACTURING: SkillDefinition("Process Improvement", SkillImportance.BENEFICIAL,
                                          "Learn basic lean manufacturing ideas"),
    Sector.RETAIL: SkillDefinition("Merchandising", SkillImportance.BENEFICIAL,
                                   "Design a display for a school store"),
    Sector.FINANCE: SkillDefinition("Budgeting", SkillImportance.BENEFICIAL,
                                    "Manage the budget for a club or personal savings"),
    Sector.LEGAL: SkillDefinition("Ethics and Compliance", SkillImportance.BENEFICIAL,
                                  "Read about professional codes of conduct"),
    Sector.SCIENCE: SkillDefinition("Scientific Method", SkillImportance.BENEFICIAL,
                                    "Run a small experiment and document the results"),
}


# ============================================================================
# SECTOR COMPATIBILITY (symmetric)
# ============================================================================

_COMPATIBLE_PAIRS: Tuple[Tuple[Sector, Sector], ...] = (
    (Sector.HEALTHCARE, Sector.SCIENCE),
    (Sector.HEALTHCARE, Sector.PUBLIC_SERVICE),
    (Sector.HEALTHCARE, Sector.EDUCATION),
    (Sector.TECHNOLOGY, Sector.SCIENCE),
    (Sector.TECHNOLOGY, Sector.BUSINESS),
    (Sector.TECHNOLOGY, Sector.FINANCE),
    (Sector.TECHNOLOGY, Sector.INFRASTRUCTURE),
    (Sector.INFRASTRUCTURE, Sector.MANUFACTURING),
    (Sector.INFRASTRUCTURE, Sector.TRANSPORTATION),
    (Sector.MANUFACTURING, Sector.TRANSPORTATION),
    (Sector.BUSINESS, Sector.FINANCE),
    (Sector.BUSINESS, Sector.RETAIL),
    (Sector.BUSINESS, Sector.HOSPITALITY),
    (Sector.BUSINESS, Sector.LEGAL),
    (Sector.HOSPITALITY, Sector.RETAIL),
    (Sector.CREATIVE, Sector.EDUCATION),
    (Sector.CREATIVE, Sector.HOSPITALITY),
    (Sector.CREATIVE, Sector.RETAIL),
    (Sector.EDUCATION, Sector.PUBLIC_SERVICE),
    (Sector.LEGAL, Sector.PUBLIC_SERVICE),
    (Sector.AGRICULTURE, Sector.SCIENCE),
)

SECTOR_COMPATIBILITY: Dict[Sector, FrozenSet[Sector]] = {
    sector: frozenset(
        [b for a, b in _COMPATIBLE_PAIRS if a == sector]
        + [a for a, b in _COMPATIBLE_PAIRS if b == sector]
    )
    for sector in Sector
}


def are_sectors_compatible(primary: Sector, secondary: Sector) -> bool:
    """Check whether a secondary interest may contribute skills to a career sector."""
    return secondary in SECTOR_COMPATIBILITY[primary]


# ============================================================================
# FALLBACK ACADEMIC PLAN
# ============================================================================

# (current year, next year, long term) courses per sector
SECTOR_COURSES: Dict[Sector, Tuple[CourseDefinition, CourseDefinition, CourseDefinition]] = {
    Sector.HEALTHCARE: (
        CourseDefinition("Biology", "Essential foundation for healthcare careers", "Essential"),
        CourseDefinition("Chemistry", "Required for nursing and medical programs", "Essential"),
        CourseDefinition("Anatomy and Physiology", "Prepares you for clinical coursework", "Highly Recommended"),
    ),
    Sector.INFRASTRUCTURE: (
        CourseDefinition("Geometry", "Essential for construction and engineering work", "Essential"),
        CourseDefinition("Shop/Industrial Arts", "Hands-on experience with tools and materials", "Highly Recommended"),
        CourseDefinition("Physics", "Explains the forces behind structures and systems", "Recommended"),
    ),
    Sector.TECHNOLOGY: (
        CourseDefinition("Computer Science Principles", "Introduces programming and computing", "Essential"),
        CourseDefinition("Algebra II", "Builds the math behind algorithms", "Highly Recommended"),
        CourseDefinition("AP Computer Science A", "Prepares you for college-level programming", "Recommended"),
    ),
    Sector.EDUCATION: (
        CourseDefinition("English Language Arts", "Strengthens communication for teaching", "Essential"),
        CourseDefinition("Psychology", "Explains how students learn and develop", "Highly Recommended"),
        CourseDefinition("Child Development", "Prepares you for working with young learners", "Recommended"),
    ),
    Sector.BUSINESS: (
        CourseDefinition("Introduction to Business", "Covers how organizations operate", "Essential"),
        CourseDefinition("Statistics", "Supports data-driven decisions", "Highly Recommended"),
        CourseDefinition("Marketing", "Builds customer and market understanding", "Recommended"),
    ),
    Sector.CREATIVE: (
        CourseDefinition("Art and Design", "Develops core visual skills", "Essential"),
        CourseDefinition("Digital Media", "Teaches industry design tools", "Highly Recommended"),
        CourseDefinition("Portfolio Development", "Prepares work samples for applications", "Recommended"),
    ),
    Sector.PUBLIC_SERVICE: (
        CourseDefinition("Government and Civics", "Explains how public agencies work", "Essential"),
        CourseDefinition("Health and First Aid", "Prepares you for emergency situations", "Highly Recommended"),
        CourseDefinition("Criminal Justice or Fire Science", "Introduces public safety careers", "Recommended"),
    ),
    Sector.AGRICULTURE: (
        CourseDefinition("Agricultural Science", "Covers crops, soil and animal care", "Essential"),
        CourseDefinition("Biology", "Explains living systems on the farm", "Highly Recommended"),
        CourseDefinition("Environmental Science", "Connects agriculture to ecosystems", "Recommended"),
    ),
    Sector.TRANSPORTATION: (
        CourseDefinition("Automotive Technology", "Hands-on work with vehicle systems", "Essential"),
        CourseDefinition("Physics", "Explains engines, motion and energy", "Highly Recommended"),
        CourseDefinition("Driver Education", "Required for most transportation roles", "Recommended"),
    ),
    Sector.HOSPITALITY: (
        CourseDefinition("Culinary Arts", "Builds kitchen and food safety skills", "Essential"),
        CourseDefinition("Foreign Language", "Helps you serve diverse guests", "Highly Recommended"),
        CourseDefinition("Hospitality Management", "Introduces hotel and event operations", "Recommended"),
    ),
    Sector.MANUFACTURING: (
        CourseDefinition("Shop/Industrial Arts", "Hands-on experience with machines", "Essential"),
        CourseDefinition("Technical Math", "Supports measurement and tolerances", "Highly Recommended"),
        CourseDefinition("Engineering Design", "Introduces CAD and production planning", "Recommended"),
    ),
    Sector.RETAIL: (
        CourseDefinition("Introduction to Business", "Covers sales and store operations", "Essential"),
        CourseDefinition("Marketing", "Explains how products reach customers", "Highly Recommended"),
        CourseDefinition("Personal Finance", "Builds money handling skills", "Recommended"),
    ),
    Sector.FINANCE: (
        CourseDefinition("Accounting", "Teaches bookkeeping and financial statements", "Essential"),
        CourseDefinition("Statistics", "Supports financial analysis", "Highly Recommended"),
        CourseDefinition("Economics", "Explains markets and financial decisions", "Recommended"),
    ),
    Sector.LEGAL: (
        CourseDefinition("Government and Civics", "Explains how laws are made", "Essential"),
        CourseDefinition("AP English Language", "Builds argument and analysis skills", "Highly Recommended"),
        CourseDefinition("Law and Society", "Introduces the justice system", "Recommended"),
    ),
    Sector.SCIENCE: (
        CourseDefinition("Chemistry", "Builds laboratory and analytical skills", "Essential"),
        CourseDefinition("Physics", "Develops quantitative problem solving", "Highly Recommended"),
        CourseDefinition("AP Biology or AP Environmental Science", "Prepares you for research coursework", "Recommended"),
    ),
}


__all__ = [
    "SkillDefinition",
    "CourseDefinition",
    "CATEGORY_SECTORS",
    "SUBJECT_SECTORS",
    "TRAIT_SECTORS",
    "CATEGORY_KEYWORDS",
    "TRAIT_CATEGORY_WEIGHTS",
    "COMMUNICATION_SKILL",
    "SECTOR_SKILLS",
    "COMPLEMENTARY_SKILLS",
    "SECTOR_COMPATIBILITY",
    "SECTOR_COURSES",
    "are_sectors_compatible",
]
