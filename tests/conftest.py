"""Shared fixtures for model hub tests."""

from typing import Any, Dict, Optional

import pytest
from langchain_core.language_models import BaseChatModel
from langchain_core.language_models.fake_chat_models import FakeListChatModel

from modelhub.config import GoogleProviderOptions
from modelhub.providers.base import ModelProvider
from modelhub.registry import ProviderRegistry
from modelhub.settings import HubSettings

CREDENTIAL_KEYS = {
    "openai": "OPENAI_API_KEY",
    "anthropic": "ANTHROPIC_API_KEY",
    "groq": "GROQ_API_KEY",
    "xai": "XAI_API_KEY",
    "gemini": "GOOGLE_GENERATIVE_AI_API_KEY",
}


def make_fake_provider(provider_name: str, fail: bool = False):
    """Provider class that builds FakeListChatModel instances.

    The bound API key is recorded in the model's metadata.
    """

    class FakeProvider(ModelProvider):
        @property
        def name(self) -> str:
            return provider_name

        @property
        def credential_key(self) -> str:
            return CREDENTIAL_KEYS[provider_name]

        @property
        def credentials_field(self) -> str:
            return "google_api_key" if provider_name == "gemini" else f"{provider_name}_api_key"

        def validate_config(self, config: Dict[str, Any]) -> None:
            pass

        def create_model(
            self,
            model: str,
            temperature: Optional[float] = None,
            provider_options: Optional[GoogleProviderOptions] = None,
            **kwargs: Any,
        ) -> BaseChatModel:
            if fail:
                raise RuntimeError(f"{provider_name} client unavailable")
            return FakeListChatModel(
                responses=[f"{model} says <think>hmm</think>hello"],
                metadata={"model": model, "api_key": kwargs.get("api_key")},
            )

    FakeProvider.__name__ = f"Fake{provider_name.title()}Provider"
    return FakeProvider


@pytest.fixture
def fake_registry():
    """Provider registry with a fake provider for every family."""
    registry = ProviderRegistry()
    for name in CREDENTIAL_KEYS:
        registry.register(make_fake_provider(name))
    return registry


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every provider API key from the environment."""
    for key in CREDENTIAL_KEYS.values():
        monkeypatch.delenv(key, raising=False)
    monkeypatch.delenv("GOOGLE_API_KEY", raising=False)


@pytest.fixture
def api_keys(monkeypatch, clean_env):
    """Set a dummy API key for every provider."""
    keys = {key: f"test-{name}-key" for name, key in CREDENTIAL_KEYS.items()}
    for key, value in keys.items():
        monkeypatch.setenv(key, value)
    return keys


@pytest.fixture
def hub_settings(tmp_path):
    """Settings with a key store inside the test directory."""
    return HubSettings(key_store_path=tmp_path / "keys.env")
