"""Lantern utilities package.

This package provides logging, the exception hierarchy, shared constants and
input validators used throughout the Lantern engine.
"""

from lantern.utils.constants import (
    CareerCategory,
    CareerClarity,
    Constraint,
    EducationLevel,
    PersonalTrait,
    QuestionIds,
    ScoringConstants,
    Sector,
    Subject,
    ValidationConstants,
)
from lantern.utils.exceptions import (
    AugmentationFailure,
    ConfigurationError,
    EnrichmentFailure,
    LanternError,
    NoEligibleCareersError,
    PathStateError,
    ValidationError,
)
from lantern.utils.logger import PerformanceLogger, get_logger, setup_logging

__all__ = [
    # Constants
    "CareerCategory",
    "CareerClarity",
    "Constraint",
    "EducationLevel",
    "PersonalTrait",
    "QuestionIds",
    "ScoringConstants",
    "Sector",
    "Subject",
    "ValidationConstants",

    # Exceptions
    "AugmentationFailure",
    "ConfigurationError",
    "EnrichmentFailure",
    "LanternError",
    "NoEligibleCareersError",
    "PathStateError",
    "ValidationError",

    # Logging
    "PerformanceLogger",
    "get_logger",
    "setup_logging",
]
