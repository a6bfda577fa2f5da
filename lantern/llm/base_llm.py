"""Base generative-text provider interface and common types for Lantern.

This module defines the abstract provider every AI backend implements, the
request/response models passed between the augmentation service and a
provider, and the LLM error hierarchy providers map HTTP failures onto.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional

import httpx
from pydantic import BaseModel, Field

from lantern.utils.logger import get_logger

logger = get_logger(__name__)


class LLMProvider(str, Enum):
    """Enumeration of supported LLM providers."""

    OPENAI = "openai"
    GEMINI = "gemini"


class LLMRole(str, Enum):
    """Message roles in LLM conversations."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


class LLMMessage(BaseModel):
    """A message in an LLM conversation."""

    role: LLMRole = Field(..., description="Role of the message sender")
    content: str = Field(..., description="Message content")


class LLMUsage(BaseModel):
    """Token usage information from LLM response."""

    prompt_tokens: int = Field(default=0, ge=0, description="Tokens used in the prompt")
    completion_tokens: int = Field(default=0, ge=0, description="Tokens used in the completion")
    total_tokens: int = Field(default=0, ge=0, description="Total tokens used")


class LLMRequest(BaseModel):
    """Request to an LLM provider."""

    messages: List[LLMMessage] = Field(..., min_length=1, description="Conversation messages")
    model: str = Field(..., min_length=1, description="Model to use")
    temperature: float = Field(default=0.3, ge=0, le=2, description="Sampling temperature")
    max_tokens: Optional[int] = Field(default=None, ge=1, description="Maximum tokens to generate")
    purpose: Optional[str] = Field(None, description="Purpose of the request")


class LLMResponse(BaseModel):
    """Response from an LLM provider."""

    content: str = Field(..., description="Generated content")
    model: str = Field(..., description="Model that generated the response")
    usage: LLMUsage = Field(default_factory=LLMUsage, description="Token usage information")
    finish_reason: Optional[str] = Field(None, description="Reason the generation stopped")
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    provider: LLMProvider = Field(..., description="LLM provider used")
    latency_ms: Optional[float] = Field(None, ge=0, description="Response latency in milliseconds")


class LLMError(Exception):
    """Base exception for LLM-related errors."""

    def __init__(
        self,
        message: str,
        provider: Optional[LLMProvider] = None,
        model: Optional[str] = None,
        error_code: Optional[str] = None,
        original_error: Optional[Exception] = None
    ):
        """Initialize LLM error.

        Args:
            message: Error message
            provider: LLM provider where error occurred
            model: Model being used when error occurred
            error_code: Provider-specific error code
            original_error: Original exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.provider = provider
        self.model = model
        self.error_code = error_code
        self.original_error = original_error


class LLMRateLimitError(LLMError):
    """Exception raised when rate limits are exceeded."""

    def __init__(
        self,
        message: str = "Rate limit exceeded",
        retry_after: Optional[int] = None,
        **kwargs
    ):
        super().__init__(message, **kwargs)
        self.retry_after = retry_after


class LLMQuotaError(LLMError):
    """Exception raised when usage quotas are exceeded."""
    pass


class LLMAuthenticationError(LLMError):
    """Exception raised when authentication fails."""
    pass


class LLMValidationError(LLMError):
    """Exception raised when request validation fails."""
    pass


class LLMTimeoutError(LLMError):
    """Exception raised when requests timeout."""
    pass


class GenerativeTextProvider(ABC):
    """Abstract base class for all generative-text providers.

    Providers make exactly one outbound request per call and never retry;
    callers decide what to do with a failure.
    """

    provider: LLMProvider

    def __init__(
        self,
        api_key: str,
        model: str,
        timeout: float = 10.0,
        temperature: float = 0.3,
        max_tokens: Optional[int] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        **kwargs
    ):
        """Initialize provider.

        Args:
            api_key: API key for the provider
            model: Default model to use
            timeout: Request timeout in seconds
            temperature: Default sampling temperature
            max_tokens: Default completion limit
            http_client: Preconfigured client, mainly for tests
            **kwargs: Additional provider-specific arguments
        """
        if not api_key:
            raise LLMAuthenticationError(
                "API key is required", provider=getattr(self, "provider", None), model=model
            )

        self.api_key = api_key
        self.model = model
        self.timeout = timeout
        self.temperature = temperature
        self.max_tokens = max_tokens

        self.client = http_client or self._setup_client(**kwargs)

    @abstractmethod
    def _setup_client(self, **kwargs) -> httpx.AsyncClient:
        """Create the provider-specific HTTP client."""

    @abstractmethod
    async def generate(self, request: LLMRequest) -> LLMResponse:
        """Generate a response from the LLM.

        Args:
            request: LLM request with messages and parameters

        Returns:
            LLMResponse: Generated response with usage information

        Raises:
            LLMError: If generation fails
        """

    async def generate_text(self, prompt: str, system_prompt: Optional[str] = None) -> str:
        """Generate plain text for a single prompt.

        Args:
            prompt: User prompt
            system_prompt: Optional system instructions

        Returns:
            str: Raw model output

        Raises:
            LLMError: If generation fails
        """
        messages = []
        if system_prompt:
            messages.append(LLMMessage(role=LLMRole.SYSTEM, content=system_prompt))
        messages.append(LLMMessage(role=LLMRole.USER, content=prompt))

        request = LLMRequest(
            messages=messages,
            model=self.model,
            temperature=self.temperature,
            max_tokens=self.max_tokens,
        )
        self._validate_common_params(request)

        response = await self.generate(request)
        logger.debug(
            "LLM response received",
            extra={
                "provider": self.provider.value,
                "model": response.model,
                "latency_ms": response.latency_ms,
                "total_tokens": response.usage.total_tokens,
            },
        )
        return response.content

    def get_model_info(self) -> Dict[str, Any]:
        return {
            "provider": self.provider.value,
            "model": self.model,
            "timeout": self.timeout,
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
        }

    def _validate_common_params(self, request: LLMRequest) -> None:
        """Validate common request parameters.

        Raises:
            LLMValidationError: If validation fails
        """
        for i, message in enumerate(request.messages):
            if not message.content.strip():
                raise LLMValidationError(
                    f"Message {i} cannot be empty", provider=self.provider, model=request.model
                )

    def _raise_for_status(self, response: httpx.Response, model: str) -> None:
        """Map a non-success HTTP response onto the LLM error hierarchy."""
        if response.status_code == 200:
            return

        message = self._error_message(response)

        if response.status_code in (401, 403):
            raise LLMAuthenticationError(
                f"Authentication failed: {message}", provider=self.provider, model=model,
                error_code=str(response.status_code)
            )

        if response.status_code == 429:
            retry_after = response.headers.get("Retry-After")
            raise LLMRateLimitError(
                message or "Rate limit exceeded",
                provider=self.provider,
                model=model,
                retry_after=int(retry_after) if retry_after and retry_after.isdecimal() else None,
                error_code="429",
            )

        if response.status_code == 402:
            raise LLMQuotaError("Quota exceeded", provider=self.provider, model=model, error_code="402")

        if response.status_code == 400:
            raise LLMValidationError(
                message or "Invalid request", provider=self.provider, model=model, error_code="400"
            )

        raise LLMError(
            f"API request failed: {message or 'Unknown error'}",
            provider=self.provider,
            model=model,
            error_code=str(response.status_code),
        )

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            payload = response.json()
        except ValueError:
            return response.text[:200]
        if not isinstance(payload, dict):
            return response.text[:200]
        error = payload.get("error", {})
        if isinstance(error, dict):
            return str(error.get("message", ""))
        return str(error)

    async def aclose(self) -> None:
        await self.client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()


__all__ = [
    "LLMProvider",
    "LLMRole",
    "LLMMessage",
    "LLMUsage",
    "LLMRequest",
    "LLMResponse",
    "LLMError",
    "LLMRateLimitError",
    "LLMQuotaError",
    "LLMAuthenticationError",
    "LLMValidationError",
    "LLMTimeoutError",
    "GenerativeTextProvider",
]
