"""Base interface for LLM providers."""

from abc import ABC, abstractmethod
from functools import partial
from typing import Any, Dict, Optional

from langchain_core.language_models import BaseChatModel

from ..config import GoogleProviderOptions
from .deferred import DeferredChatModel


class ModelProvider(ABC):
    """Abstract base class for LLM providers.

    A provider instance is bound to one credential (and optionally a base
    URL) and hands out chat models for specific backend model versions via
    ``model_for``.

    Each provider implementation must:
    1. Specify a unique provider name
    2. Name the credential key it is configured with
    3. Implement model creation logic
    4. Validate provider-specific configuration
    """

    def __init__(self, api_key: Optional[str] = None, base_url: Optional[str] = None):
        """Bind provider to credentials.

        Args:
            api_key: Provider API key (None leaves it to the client library)
            base_url: Optional API base URL override
        """
        self.api_key = api_key
        self.base_url = base_url

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider identifier (e.g., 'openai', 'anthropic')."""
        pass

    @property
    @abstractmethod
    def credential_key(self) -> str:
        """Environment / key store name of the API key."""
        pass

    @property
    def credentials_field(self) -> str:
        """Field name in ProviderCredentials."""
        return f"{self.name}_api_key"

    @abstractmethod
    def create_model(
        self,
        model: str,
        temperature: Optional[float] = None,
        provider_options: Optional[GoogleProviderOptions] = None,
        **kwargs: Any,
    ) -> BaseChatModel:
        """Create and configure the model instance.

        Args:
            model: Model name/identifier
            temperature: Optional sampling temperature
            provider_options: Optional provider-specific generation options
            **kwargs: Provider-specific additional arguments

        Returns:
            Configured BaseChatModel instance
        """
        pass

    @abstractmethod
    def validate_config(self, config: Dict[str, Any]) -> None:
        """Validate provider-specific configuration.

        Args:
            config: Configuration dictionary

        Raises:
            ConfigurationError: If configuration is invalid
        """
        pass

    def model_for(self, model: str, **kwargs: Any) -> BaseChatModel:
        """Create a model bound to this provider's credentials.

        Without an API key the client is not built here: a DeferredChatModel
        builds it on first use, so the missing key only fails that model.

        Args:
            model: Backend model version (e.g., 'gpt-4.1-mini')
            **kwargs: Passed through to create_model

        Returns:
            Configured BaseChatModel instance
        """
        self.validate_config(
            {"api_key": self.api_key, "base_url": self.base_url, **kwargs}
        )
        if self.api_key:
            kwargs.setdefault("api_key", self.api_key)
        if self.base_url:
            kwargs.setdefault("base_url", self.base_url)
        if kwargs.get("temperature") is None:
            kwargs.pop("temperature", None)
        if not kwargs.get("api_key"):
            return DeferredChatModel(
                provider=self.name,
                backend_model=model,
                builder=partial(self.create_model, model=model, **kwargs),
            )
        return self.create_model(model=model, **kwargs)
