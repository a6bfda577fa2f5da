"""Unit tests for the OpenAI and Gemini providers.

HTTP traffic is served by ``httpx.MockTransport`` so no request leaves the
process.
"""

import json

import httpx
import pytest

from lantern.llm.base_llm import (
    LLMAuthenticationError,
    LLMError,
    LLMQuotaError,
    LLMRateLimitError,
    LLMTimeoutError,
    LLMValidationError,
)
from lantern.llm.gemini_llm import GeminiLLM
from lantern.llm.openai_llm import OpenAILLM


def mock_client(handler, base_url):
    return httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url=base_url)


def openai_llm(handler, **kwargs):
    return OpenAILLM(
        api_key="sk-test",
        http_client=mock_client(handler, "https://api.openai.com/v1"),
        **kwargs,
    )


def gemini_llm(handler, **kwargs):
    return GeminiLLM(
        api_key="g-test",
        http_client=mock_client(handler, "https://generativelanguage.googleapis.com/v1beta"),
        **kwargs,
    )


class TestOpenAILLM:
    """Test cases for OpenAILLM."""

    def test_requires_api_key(self):
        with pytest.raises(LLMAuthenticationError):
            OpenAILLM(api_key="")

    @pytest.mark.asyncio
    async def test_generate_text(self):
        captured = {}

        def handler(request):
            captured["path"] = request.url.path
            captured["body"] = json.loads(request.content)
            return httpx.Response(200, json={
                "model": "gpt-3.5-turbo",
                "choices": [{"message": {"content": '{"explanation": "hi"}'}, "finish_reason": "stop"}],
                "usage": {"prompt_tokens": 10, "completion_tokens": 5, "total_tokens": 15},
            })

        llm = openai_llm(handler, max_tokens=500)
        content = await llm.generate_text("Explain nursing", system_prompt="Be brief")

        assert content == '{"explanation": "hi"}'
        assert captured["path"] == "/v1/chat/completions"
        assert captured["body"]["messages"][0] == {"role": "system", "content": "Be brief"}
        assert captured["body"]["max_tokens"] == 500
        assert captured["body"]["temperature"] == 0.3
        await llm.aclose()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status,error_class", [
        (401, LLMAuthenticationError),
        (403, LLMAuthenticationError),
        (429, LLMRateLimitError),
        (402, LLMQuotaError),
        (400, LLMValidationError),
        (500, LLMError),
    ])
    async def test_status_mapping(self, status, error_class):
        def handler(request):
            return httpx.Response(status, json={"error": {"message": "nope"}})

        llm = openai_llm(handler)

        with pytest.raises(error_class) as exc_info:
            await llm.generate_text("hello")

        assert exc_info.value.error_code == str(status)

    @pytest.mark.asyncio
    async def test_rate_limit_retry_after(self):
        def handler(request):
            return httpx.Response(429, headers={"Retry-After": "30"}, json={"error": {"message": "slow down"}})

        with pytest.raises(LLMRateLimitError) as exc_info:
            await openai_llm(handler).generate_text("hello")

        assert exc_info.value.retry_after == 30

    @pytest.mark.asyncio
    async def test_non_decimal_retry_after_is_ignored(self):
        def handler(request):
            return httpx.Response(429, headers={"Retry-After": "³⁰".encode("utf-8")}, json={"error": {"message": "slow down"}})

        with pytest.raises(LLMRateLimitError) as exc_info:
            await openai_llm(handler).generate_text("hello")

        assert exc_info.value.retry_after is None

    @pytest.mark.asyncio
    async def test_error_body_that_is_a_list(self):
        def handler(request):
            return httpx.Response(400, json=[{"error": {"message": "bad request"}}])

        with pytest.raises(LLMValidationError) as exc_info:
            await openai_llm(handler).generate_text("hello")

        assert exc_info.value.error_code == "400"
        assert "bad request" in exc_info.value.message

    @pytest.mark.asyncio
    async def test_timeout(self):
        def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        with pytest.raises(LLMTimeoutError):
            await openai_llm(handler).generate_text("hello")

    @pytest.mark.asyncio
    async def test_connection_error(self):
        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        with pytest.raises(LLMError):
            await openai_llm(handler).generate_text("hello")

    @pytest.mark.asyncio
    async def test_malformed_response(self):
        def handler(request):
            return httpx.Response(200, json={"choices": []})

        with pytest.raises(LLMError):
            await openai_llm(handler).generate_text("hello")

    @pytest.mark.asyncio
    async def test_empty_prompt_is_rejected(self):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(200, json={})

        with pytest.raises(LLMValidationError):
            await openai_llm(handler).generate_text("   ")
        assert calls == []


class TestGeminiLLM:
    """Test cases for GeminiLLM."""

    @pytest.mark.asyncio
    async def test_generate_text(self):
        captured = {}

        def handler(request):
            captured["path"] = request.url.path
            captured["key"] = request.url.params["key"]
            captured["body"] = json.loads(request.content)
            return httpx.Response(200, json={
                "candidates": [{
                    "content": {"parts": [{"text": '{"explanation": '}, {"text": '"hi"}'}]},
                    "finishReason": "STOP",
                }],
                "usageMetadata": {"promptTokenCount": 7, "candidatesTokenCount": 3},
            })

        llm = gemini_llm(handler)
        content = await llm.generate_text("Explain nursing", system_prompt="Be brief")

        assert content == '{"explanation": "hi"}'
        assert captured["path"] == "/v1beta/models/gemini-1.5-flash:generateContent"
        assert captured["key"] == "g-test"
        assert captured["body"]["systemInstruction"] == {"parts": [{"text": "Be brief"}]}
        assert captured["body"]["contents"] == [{"role": "user", "parts": [{"text": "Explain nursing"}]}]

    @pytest.mark.asyncio
    async def test_no_candidates(self):
        def handler(request):
            return httpx.Response(200, json={"candidates": []})

        with pytest.raises(LLMError):
            await gemini_llm(handler).generate_text("hello")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status,error_class", [
        (403, LLMAuthenticationError),
        (429, LLMRateLimitError),
        (503, LLMError),
    ])
    async def test_status_mapping(self, status, error_class):
        def handler(request):
            return httpx.Response(status, text="service unavailable")

        with pytest.raises(error_class):
            await gemini_llm(handler).generate_text("hello")
