"""Custom exception classes for Lantern.

Input and structural problems (``ValidationError``, ``PathStateError``,
``NoEligibleCareersError``) propagate to the caller. Downstream provider
problems (``AugmentationFailure``, ``EnrichmentFailure``) are raised inside
their component and absorbed at its boundary, where they are logged and
converted into a degraded but complete result.
"""

from typing import Any, Dict, List, Optional


class LanternError(Exception):
    """Base exception class for all Lantern application errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        """Initialize Lantern error.

        Args:
            message: Error message
            error_code: Application-specific error code
            details: Additional error details
            cause: Underlying exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.cause = cause

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary representation.

        Returns:
            Dict[str, Any]: Exception data
        """
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code,
            "details": self.details,
            "cause": str(self.cause) if self.cause else None,
        }

    def __str__(self) -> str:
        parts = [self.message]
        if self.error_code:
            parts.append(f"Code: {self.error_code}")
        if self.details:
            parts.append(f"Details: {self.details}")
        return " | ".join(parts)


class ValidationError(LanternError):
    """Raised when raw assessment answers cannot form a valid profile."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Optional[Any] = None,
        validation_errors: Optional[List[str]] = None,
        **kwargs
    ):
        """Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            value: Invalid value
            validation_errors: Names of every missing or invalid field
            **kwargs: Additional arguments for parent class
        """
        details = kwargs.get("details", {})
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = value
        if validation_errors:
            details["validation_errors"] = validation_errors

        kwargs["details"] = details
        kwargs.setdefault("error_code", "VALIDATION_ERROR")
        super().__init__(message, **kwargs)

        self.field = field
        self.value = value
        self.validation_errors = validation_errors or []


class PathStateError(LanternError):
    """Raised on an illegal transition of the assessment path machine."""

    def __init__(self, message: str, current_state: Optional[str] = None, **kwargs):
        details = kwargs.get("details", {})
        if current_state:
            details["current_state"] = current_state

        kwargs["details"] = details
        kwargs.setdefault("error_code", "INVALID_PATH_STATE")
        super().__init__(message, **kwargs)

        self.current_state = current_state


class NoEligibleCareersError(LanternError):
    """Raised when scoring leaves no viable career for the student."""

    def __init__(
        self,
        message: str = "No eligible careers for this profile",
        path: Optional[str] = None,
        catalog_size: Optional[int] = None,
        **kwargs
    ):
        """Initialize no-eligible-careers error.

        Args:
            message: Error message
            path: Assessment path that was scored
            catalog_size: Number of careers considered
            **kwargs: Additional arguments for parent class
        """
        details = kwargs.get("details", {})
        if path:
            details["path"] = path
        if catalog_size is not None:
            details["catalog_size"] = catalog_size

        kwargs["details"] = details
        kwargs.setdefault("error_code", "NO_ELIGIBLE_CAREERS")
        super().__init__(message, **kwargs)

        self.path = path
        self.catalog_size = catalog_size


class AugmentationFailure(LanternError):
    """AI augmentation failed; recovered locally with deterministic content."""

    def __init__(
        self,
        message: str,
        career_id: Optional[str] = None,
        reason: Optional[str] = None,
        **kwargs
    ):
        details = kwargs.get("details", {})
        if career_id:
            details["career_id"] = career_id
        if reason:
            details["reason"] = reason

        kwargs["details"] = details
        kwargs.setdefault("error_code", "AUGMENTATION_FAILED")
        super().__init__(message, **kwargs)

        self.career_id = career_id
        self.reason = reason


class EnrichmentFailure(LanternError):
    """Market data lookup failed for a single career."""

    def __init__(
        self,
        message: str,
        career_id: Optional[str] = None,
        provider: Optional[str] = None,
        status_code: Optional[int] = None,
        **kwargs
    ):
        details = kwargs.get("details", {})
        if career_id:
            details["career_id"] = career_id
        if provider:
            details["provider"] = provider
        if status_code is not None:
            details["status_code"] = status_code

        kwargs["details"] = details
        kwargs.setdefault("error_code", "ENRICHMENT_FAILED")
        super().__init__(message, **kwargs)

        self.career_id = career_id
        self.provider = provider
        self.status_code = status_code


class ConfigurationError(LanternError):
    """Exception for configuration errors."""

    def __init__(self, message: str, config_key: Optional[str] = None, **kwargs):
        details = kwargs.get("details", {})
        if config_key:
            details["config_key"] = config_key

        kwargs["details"] = details
        kwargs.setdefault("error_code", "CONFIGURATION_ERROR")
        super().__init__(message, **kwargs)

        self.config_key = config_key


__all__ = [
    "LanternError",
    "ValidationError",
    "PathStateError",
    "NoEligibleCareersError",
    "AugmentationFailure",
    "EnrichmentFailure",
    "ConfigurationError",
]
