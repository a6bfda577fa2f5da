"""Unit tests for application settings."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from lantern.core.config import Settings


def make_settings(**overrides) -> Settings:
    values = {
        "APP_ENV": "test",
        "USE_REAL_AI": False,
        "USE_REAL_JOBS": False,
        "OPENAI_API_KEY": None,
        "GOOGLE_API_KEY": None,
        "ADZUNA_APP_ID": None,
        "ADZUNA_API_KEY": None,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


class TestSettingsValidation:
    """Test field validators."""

    def test_defaults(self):
        settings = make_settings()
        assert settings.AI_REQUEST_TIMEOUT == 10.0
        assert settings.JSON_REPAIR_MAX_ATTEMPTS == 5
        assert settings.MAX_AI_AUGMENTED_CAREERS == 3
        assert settings.JOB_SEARCH_RADIUS_MILES == 25
        assert settings.RELOCATION_RADIUS_MILES == 100
        assert settings.OPENAI_MODEL == "gpt-3.5-turbo"

    def test_unknown_environment_is_rejected(self):
        with pytest.raises(PydanticValidationError):
            make_settings(APP_ENV="qa")

    def test_provider_names_are_normalized(self):
        assert make_settings(LLM_PROVIDER=" OpenAI ").LLM_PROVIDER == "openai"
        assert make_settings(LLM_PROVIDER="Google").LLM_PROVIDER == "gemini"

    def test_unknown_provider_is_rejected(self):
        with pytest.raises(PydanticValidationError):
            make_settings(LLM_PROVIDER="anthropic")

    def test_log_level_is_uppercased(self):
        assert make_settings(LOG_LEVEL="warning").LOG_LEVEL == "WARNING"

    def test_production_never_logs_debug(self):
        settings = make_settings(APP_ENV="production", LOG_LEVEL="debug")
        assert settings.is_production()
        assert settings.LOG_LEVEL == "INFO"

    def test_radius_above_limit_is_rejected(self):
        with pytest.raises(PydanticValidationError):
            make_settings(RELOCATION_RADIUS_MILES=250)


class TestSettingsHelpers:
    """Test provider gating helpers."""

    def test_ai_requires_flag_and_key(self):
        assert not make_settings(USE_REAL_AI=True).ai_enabled()
        assert not make_settings(OPENAI_API_KEY="sk-test").ai_enabled()
        assert make_settings(USE_REAL_AI=True, OPENAI_API_KEY="sk-test").ai_enabled()

    def test_ai_key_follows_selected_provider(self):
        settings = make_settings(USE_REAL_AI=True, LLM_PROVIDER="gemini", OPENAI_API_KEY="sk-test")
        assert not settings.ai_enabled()

    def test_jobs_require_both_credentials(self):
        assert not make_settings(USE_REAL_JOBS=True, ADZUNA_APP_ID="app").jobs_enabled()
        assert make_settings(
            USE_REAL_JOBS=True, ADZUNA_APP_ID="app", ADZUNA_API_KEY="key"
        ).jobs_enabled()

    def test_llm_config_for_each_provider(self):
        settings = make_settings(OPENAI_API_KEY="sk-test", GOOGLE_API_KEY="g-test")

        openai_config = settings.get_llm_config("openai")
        assert openai_config["api_key"] == "sk-test"
        assert openai_config["timeout"] == settings.AI_REQUEST_TIMEOUT

        gemini_config = settings.get_llm_config("gemini")
        assert gemini_config["api_key"] == "g-test"
        assert gemini_config["model"] == settings.GOOGLE_MODEL

        assert settings.get_llm_config("unknown") == {}

    def test_gemini_has_its_own_sampling_settings(self):
        settings = make_settings(
            OPENAI_MAX_TOKENS=1500, OPENAI_TEMPERATURE=0.9,
            GOOGLE_MAX_TOKENS=800, GOOGLE_TEMPERATURE=0.2,
        )

        gemini_config = settings.get_llm_config("gemini")
        assert gemini_config["max_tokens"] == 800
        assert gemini_config["temperature"] == 0.2
        assert settings.get_llm_config("openai")["max_tokens"] == 1500
