"""LLM factory for creating the generative-text provider.

The provider is chosen once at process start from settings and injected into
the augmentation service. Nothing else reads AI flags from the environment.
"""

from typing import Dict, List, Optional, Type

from lantern.core.config import Settings, get_settings
from lantern.llm.base_llm import GenerativeTextProvider, LLMProvider
from lantern.llm.gemini_llm import GeminiLLM
from lantern.llm.openai_llm import OpenAILLM
from lantern.utils.exceptions import ConfigurationError
from lantern.utils.logger import get_logger

logger = get_logger(__name__)


class LLMFactory:
    """Factory for creating generative-text providers."""

    # Registry of provider implementations
    _providers: Dict[LLMProvider, Type[GenerativeTextProvider]] = {
        LLMProvider.OPENAI: OpenAILLM,
        LLMProvider.GEMINI: GeminiLLM,
    }

    @classmethod
    def create_llm(
        cls,
        provider: LLMProvider,
        api_key: str,
        model: str,
        **kwargs
    ) -> GenerativeTextProvider:
        """Create a provider instance.

        Args:
            provider: LLM provider to use
            api_key: API key for the provider
            model: Model to use
            **kwargs: Additional configuration for the provider

        Returns:
            GenerativeTextProvider: Configured provider

        Raises:
            ConfigurationError: If the provider is not supported or has no key
        """
        if provider not in cls._providers:
            raise ConfigurationError(f"Unsupported provider: {provider}", config_key="LLM_PROVIDER")

        if not api_key:
            raise ConfigurationError(f"API key not provided for {provider.value}")

        instance = cls._providers[provider](api_key=api_key, model=model, **kwargs)
        logger.info(f"Created LLM provider: {provider.value}:{model}")
        return instance

    @classmethod
    def create_from_settings(cls, settings: Optional[Settings] = None) -> Optional[GenerativeTextProvider]:
        """Create the configured provider, or None when AI is disabled.

        AI counts as disabled when ``USE_REAL_AI`` is false or the selected
        provider has no API key.

        Args:
            settings: Application settings; defaults to ``get_settings()``

        Returns:
            Optional[GenerativeTextProvider]: Provider instance or None
        """
        settings = settings or get_settings()

        if not settings.ai_enabled():
            logger.info(
                "AI augmentation disabled, deterministic content will be used",
                extra={"use_real_ai": settings.USE_REAL_AI, "provider": settings.LLM_PROVIDER},
            )
            return None

        provider = LLMProvider(settings.LLM_PROVIDER)
        config = settings.get_llm_config(provider.value)
        return cls.create_llm(provider, **config)

    @classmethod
    def get_available_providers(cls) -> List[LLMProvider]:
        return list(cls._providers.keys())

    @classmethod
    def register_provider(
        cls,
        provider: LLMProvider,
        provider_class: Type[GenerativeTextProvider]
    ) -> None:
        """Register a provider implementation.

        Args:
            provider: Provider identifier
            provider_class: Implementation class
        """
        if not issubclass(provider_class, GenerativeTextProvider):
            raise ValueError("Provider class must inherit from GenerativeTextProvider")

        cls._providers[provider] = provider_class
        logger.info(f"Registered LLM provider: {provider.value}")


__all__ = ["LLMFactory"]
