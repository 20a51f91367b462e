"""OpenAI provider implementation."""

import logging
from typing import Any, Dict, Optional

from langchain_core.language_models import BaseChatModel
from langchain_openai import ChatOpenAI

from ..config import GoogleProviderOptions
from .base import ModelProvider

logger = logging.getLogger(__name__)


class OpenAIProvider(ModelProvider):
    """OpenAI provider implementation."""

    @property
    def name(self) -> str:
        """Provider identifier."""
        return "openai"

    @property
    def credential_key(self) -> str:
        return "OPENAI_API_KEY"

    def validate_config(self, config: Dict[str, Any]) -> None:
        """Validate OpenAI-specific configuration.

        Args:
            config: Configuration dictionary
        """
        if not config.get("api_key"):
            logger.warning("OpenAI API key not provided")

        if config.get("provider_options") is not None:
            logger.warning("OpenAI does not accept provider options, will be ignored")

    def create_model(
        self,
        model: str,
        temperature: Optional[float] = None,
        provider_options: Optional[GoogleProviderOptions] = None,
        **kwargs: Any,
    ) -> BaseChatModel:
        """Create OpenAI ChatModel instance.

        Args:
            model: Model name (e.g., 'gpt-4.1-mini')
            temperature: Optional sampling temperature
            provider_options: Ignored for OpenAI
            **kwargs: Additional arguments (api_key, base_url, etc.)

        Returns:
            Configured ChatOpenAI instance
        """
        if temperature is not None:
            kwargs["temperature"] = temperature

        return ChatOpenAI(model=model, **kwargs)
