"""Generative-text provider integration for Lantern.

This module provides the provider abstraction with OpenAI and Google Gemini
implementations, the factory that selects one from settings, and the
deterministic fallback content used when no provider output is available.
"""

from lantern.llm.base_llm import GenerativeTextProvider, LLMError, LLMProvider, LLMRequest, LLMResponse
from lantern.llm.fallback_handler import FallbackHandler, FallbackReason
from lantern.llm.gemini_llm import GeminiLLM
from lantern.llm.llm_factory import LLMFactory
from lantern.llm.openai_llm import OpenAILLM

__all__ = [
    # Base classes and types
    "GenerativeTextProvider",
    "LLMError",
    "LLMProvider",
    "LLMRequest",
    "LLMResponse",

    # Factory and fallback
    "LLMFactory",
    "FallbackHandler",
    "FallbackReason",

    # Provider implementations
    "OpenAILLM",
    "GeminiLLM",
]
