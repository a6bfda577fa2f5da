"""OpenAI chat completions provider for Lantern."""

import time
from typing import Any, Dict, Optional

import httpx

from lantern.llm.base_llm import (
    GenerativeTextProvider,
    LLMError,
    LLMProvider,
    LLMRequest,
    LLMResponse,
    LLMTimeoutError,
    LLMUsage,
)
from lantern.utils.logger import get_logger

logger = get_logger(__name__)


class OpenAILLM(GenerativeTextProvider):
    """OpenAI provider speaking the chat completions API."""

    provider = LLMProvider.OPENAI

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-3.5-turbo",
        base_url: str = "https://api.openai.com/v1",
        organization: Optional[str] = None,
        **kwargs
    ):
        """Initialize OpenAI provider.

        Args:
            api_key: OpenAI API key
            model: Model to use
            base_url: Base URL for OpenAI API
            organization: OpenAI organization ID
            **kwargs: Additional arguments for parent class
        """
        self.base_url = base_url
        self.organization = organization

        super().__init__(api_key, model, **kwargs)

    def _setup_client(self, **kwargs) -> httpx.AsyncClient:
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

        if self.organization:
            headers["OpenAI-Organization"] = self.organization

        return httpx.AsyncClient(
            base_url=self.base_url,
            headers=headers,
            timeout=self.timeout
        )

    async def generate(self, request: LLMRequest) -> LLMResponse:
        """Generate a completion with a single API call.

        Args:
            request: LLM request

        Returns:
            LLMResponse: Generated response
        """
        start_time = time.time()
        payload = self._prepare_api_request(request)

        try:
            response = await self.client.post("/chat/completions", json=payload)
        except httpx.TimeoutException as e:
            raise LLMTimeoutError(
                f"Request timed out after {self.timeout}s",
                provider=self.provider,
                model=request.model,
                original_error=e
            )
        except httpx.RequestError as e:
            raise LLMError(
                f"Request failed: {str(e)}",
                provider=self.provider,
                model=request.model,
                original_error=e
            )

        self._raise_for_status(response, request.model)

        latency_ms = (time.time() - start_time) * 1000
        return self._parse_response(response, request, latency_ms)

    def _prepare_api_request(self, request: LLMRequest) -> Dict[str, Any]:
        payload = {
            "model": request.model,
            "messages": [
                {"role": msg.role.value, "content": msg.content}
                for msg in request.messages
            ],
            "temperature": request.temperature,
        }

        if request.max_tokens is not None:
            payload["max_tokens"] = request.max_tokens

        return payload

    def _parse_response(
        self,
        response: httpx.Response,
        request: LLMRequest,
        latency_ms: float
    ) -> LLMResponse:
        try:
            response_data = response.json()
            choice = response_data["choices"][0]
            content = choice["message"]["content"] or ""
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise LLMError(
                "Malformed response from OpenAI",
                provider=self.provider,
                model=request.model,
                original_error=e
            )

        usage_data = response_data.get("usage") or {}
        usage = LLMUsage(
            prompt_tokens=usage_data.get("prompt_tokens", 0),
            completion_tokens=usage_data.get("completion_tokens", 0),
            total_tokens=usage_data.get("total_tokens", 0),
        )

        return LLMResponse(
            content=content,
            model=response_data.get("model", request.model),
            usage=usage,
            finish_reason=choice.get("finish_reason"),
            provider=self.provider,
            latency_ms=latency_ms
        )


__all__ = ["OpenAILLM"]
