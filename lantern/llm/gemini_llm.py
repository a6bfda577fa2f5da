"""Google Gemini provider for Lantern."""

import time
from typing import Any, Dict, Optional

import httpx

from lantern.llm.base_llm import (
    GenerativeTextProvider,
    LLMError,
    LLMProvider,
    LLMRequest,
    LLMResponse,
    LLMRole,
    LLMTimeoutError,
    LLMUsage,
)
from lantern.utils.logger import get_logger

logger = get_logger(__name__)


class GeminiLLM(GenerativeTextProvider):
    """Google Gemini provider using the generateContent endpoint."""

    provider = LLMProvider.GEMINI

    def __init__(
        self,
        api_key: str,
        model: str = "gemini-1.5-flash",
        base_url: str = "https://generativelanguage.googleapis.com/v1beta",
        **kwargs
    ):
        """Initialize Gemini provider.

        Args:
            api_key: Google API key
            model: Model to use
            base_url: Base URL for Google AI API
            **kwargs: Additional arguments for parent class
        """
        self.base_url = base_url

        super().__init__(api_key, model, **kwargs)

    def _setup_client(self, **kwargs) -> httpx.AsyncClient:
        # Google AI takes the API key as a query parameter
        return httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout
        )

    async def generate(self, request: LLMRequest) -> LLMResponse:
        """Generate content with a single API call.

        Args:
            request: LLM request

        Returns:
            LLMResponse: Generated response
        """
        start_time = time.time()
        payload = self._prepare_api_request(request)
        endpoint = f"/models/{request.model}:generateContent"

        try:
            response = await self.client.post(endpoint, json=payload, params={"key": self.api_key})
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
        contents = []
        system_text: Optional[str] = None

        for msg in request.messages:
            if msg.role == LLMRole.SYSTEM:
                system_text = msg.content
                continue
            role = "user" if msg.role == LLMRole.USER else "model"
            contents.append({"role": role, "parts": [{"text": msg.content}]})

        generation_config: Dict[str, Any] = {"temperature": request.temperature}
        if request.max_tokens is not None:
            generation_config["maxOutputTokens"] = request.max_tokens

        payload: Dict[str, Any] = {
            "contents": contents,
            "generationConfig": generation_config,
        }
        if system_text:
            payload["systemInstruction"] = {"parts": [{"text": system_text}]}

        return payload

    def _parse_response(
        self,
        response: httpx.Response,
        request: LLMRequest,
        latency_ms: float
    ) -> LLMResponse:
        try:
            response_data = response.json()
        except ValueError as e:
            raise LLMError(
                "Malformed response from Gemini",
                provider=self.provider,
                model=request.model,
                original_error=e
            )

        candidates = response_data.get("candidates") or []
        if not candidates:
            raise LLMError(
                "Gemini returned no candidates",
                provider=self.provider,
                model=request.model,
            )

        candidate = candidates[0]
        parts = candidate.get("content", {}).get("parts", [])
        content = "".join(part.get("text", "") for part in parts)

        usage_metadata = response_data.get("usageMetadata", {})
        input_tokens = usage_metadata.get("promptTokenCount", 0)
        output_tokens = usage_metadata.get("candidatesTokenCount", 0)

        return LLMResponse(
            content=content,
            model=request.model,
            usage=LLMUsage(
                prompt_tokens=input_tokens,
                completion_tokens=output_tokens,
                total_tokens=usage_metadata.get("totalTokenCount", input_tokens + output_tokens),
            ),
            finish_reason=candidate.get("finishReason"),
            provider=self.provider,
            latency_ms=latency_ms
        )


__all__ = ["GeminiLLM"]
