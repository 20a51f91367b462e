"""Tests for provider implementations and the provider registry."""

import logging

import pytest
from langchain_anthropic import ChatAnthropic
from langchain_google_genai import (
    ChatGoogleGenerativeAI,
    HarmBlockThreshold,
    HarmCategory,
    Modality,
)
from langchain_groq import ChatGroq
from langchain_openai import ChatOpenAI
from langchain_xai import ChatXAI

from modelhub.exceptions import ProviderNotFoundError
from modelhub.models import GOOGLE_PROVIDER_OPTIONS
from modelhub.providers import (
    AnthropicProvider,
    GeminiProvider,
    GroqProvider,
    OpenAIProvider,
    XAIProvider,
)
from modelhub.providers.deferred import DeferredChatModel
from modelhub.providers.gemini import to_client_kwargs
from modelhub.registry import ProviderRegistry, get_registry


class TestProviderRegistry:
    """Tests for ProviderRegistry."""

    def test_global_registry_has_all_families(self):
        assert get_registry().list_providers() == [
            "openai",
            "anthropic",
            "groq",
            "xai",
            "gemini",
        ]

    def test_get_unknown_provider(self):
        registry = ProviderRegistry()
        registry.register(OpenAIProvider)

        with pytest.raises(ProviderNotFoundError, match="Available providers: openai"):
            registry.get("mistral")

    def test_provider_classes_in_registration_order(self):
        registry = ProviderRegistry()
        registry.register(GroqProvider)
        registry.register(XAIProvider)

        assert registry.provider_classes() == [GroqProvider, XAIProvider]

    def test_replacement_keeps_position(self, caplog):
        class PinnedGroqProvider(GroqProvider):
            pass

        registry = ProviderRegistry()
        registry.register(GroqProvider)
        registry.register(XAIProvider)

        with caplog.at_level(logging.DEBUG, logger="modelhub.registry"):
            registry.register(PinnedGroqProvider)

        assert registry.list_providers() == ["groq", "xai"]
        assert registry.get("groq") is PinnedGroqProvider
        assert "Replacing groq provider" in caplog.text

    def test_contains(self):
        registry = ProviderRegistry()
        registry.register(AnthropicProvider)

        assert "anthropic" in registry
        assert "openai" not in registry


@pytest.mark.parametrize(
    "provider_class, model, expected_class",
    [
        (OpenAIProvider, "gpt-4.1-mini", ChatOpenAI),
        (AnthropicProvider, "claude-3-7-sonnet-20250219", ChatAnthropic),
        (GroqProvider, "qwen-qwq-32b", ChatGroq),
        (XAIProvider, "grok-3-mini-latest", ChatXAI),
        (GeminiProvider, "gemini-2.0-flash", ChatGoogleGenerativeAI),
    ],
)
def test_model_for_builds_provider_chat_model(provider_class, model, expected_class):
    provider = provider_class(api_key="test-key")

    chat_model = provider.model_for(model)

    assert isinstance(chat_model, expected_class)


@pytest.mark.parametrize(
    "provider_class, credential_key",
    [
        (OpenAIProvider, "OPENAI_API_KEY"),
        (AnthropicProvider, "ANTHROPIC_API_KEY"),
        (GroqProvider, "GROQ_API_KEY"),
        (XAIProvider, "XAI_API_KEY"),
        (GeminiProvider, "GOOGLE_GENERATIVE_AI_API_KEY"),
    ],
)
def test_credential_keys(provider_class, credential_key):
    assert provider_class().credential_key == credential_key


def test_openai_binds_api_key():
    chat_model = OpenAIProvider(api_key="sk-bound").model_for("gpt-4.1-mini")

    assert chat_model.model_name == "gpt-4.1-mini"
    assert chat_model.openai_api_key.get_secret_value() == "sk-bound"


def test_temperature_passed_through():
    chat_model = OpenAIProvider(api_key="sk").model_for("gpt-4.1-mini", temperature=0.3)
    assert chat_model.temperature == 0.3


def test_missing_api_key_only_warns(caplog):
    with caplog.at_level(logging.WARNING):
        AnthropicProvider().validate_config({"api_key": None})

    assert "Anthropic API key not provided" in caplog.text


def test_provider_options_ignored_outside_gemini(caplog):
    with caplog.at_level(logging.WARNING):
        chat_model = GroqProvider(api_key="gsk").model_for(
            "qwen-qwq-32b", provider_options=GOOGLE_PROVIDER_OPTIONS
        )

    assert isinstance(chat_model, ChatGroq)
    assert "does not accept provider options" in caplog.text


class TestGeminiOptions:
    """Tests for Gemini provider option translation."""

    def test_client_kwargs(self):
        kwargs = to_client_kwargs(GOOGLE_PROVIDER_OPTIONS)

        assert kwargs["response_modalities"] == [Modality.TEXT]
        assert kwargs["thinking_budget"] == 1024
        assert kwargs["safety_settings"] == {
            HarmCategory.HARM_CATEGORY_DANGEROUS_CONTENT: HarmBlockThreshold.BLOCK_MEDIUM_AND_ABOVE,
            HarmCategory.HARM_CATEGORY_HATE_SPEECH: HarmBlockThreshold.BLOCK_MEDIUM_AND_ABOVE,
            HarmCategory.HARM_CATEGORY_HARASSMENT: HarmBlockThreshold.BLOCK_MEDIUM_AND_ABOVE,
            HarmCategory.HARM_CATEGORY_SEXUALLY_EXPLICIT: HarmBlockThreshold.BLOCK_MEDIUM_AND_ABOVE,
        }

    def test_options_applied_to_chat_model(self):
        chat_model = GeminiProvider(api_key="g-key").model_for(
            "gemini-2.0-flash", provider_options=GOOGLE_PROVIDER_OPTIONS
        )

        assert chat_model.thinking_budget == 1024
        assert len(chat_model.safety_settings) == 4


def test_missing_api_key_defers_client(clean_env):
    chat_model = XAIProvider().model_for("grok-3-mini-latest")

    assert isinstance(chat_model, DeferredChatModel)
    assert chat_model.provider == "xai"
    assert chat_model.backend_model == "grok-3-mini-latest"
    assert not chat_model.built


def test_explicit_api_key_builds_client():
    chat_model = GroqProvider().model_for("qwen-qwq-32b", api_key="gsk-explicit")
    assert isinstance(chat_model, ChatGroq)
