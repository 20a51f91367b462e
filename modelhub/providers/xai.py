"""xAI provider implementation."""

import logging
from typing import Any, Dict, Optional

from langchain_core.language_models import BaseChatModel
from langchain_xai import ChatXAI

from ..config import GoogleProviderOptions
from .base import ModelProvider

logger = logging.getLogger(__name__)


class XAIProvider(ModelProvider):
    """xAI provider implementation.

    Supports Grok models through xAI's OpenAI-compatible API.
    """

    @property
    def name(self) -> str:
        """Provider identifier."""
        return "xai"

    @property
    def credential_key(self) -> str:
        return "XAI_API_KEY"

    def validate_config(self, config: Dict[str, Any]) -> None:
        """Validate xAI-specific configuration.

        Args:
            config: Configuration dictionary
        """
        if not config.get("api_key"):
            logger.warning("xAI API key not provided")

        if config.get("provider_options") is not None:
            logger.warning("xAI does not accept provider options, will be ignored")

    def create_model(
        self,
        model: str,
        temperature: Optional[float] = None,
        provider_options: Optional[GoogleProviderOptions] = None,
        **kwargs: Any,
    ) -> BaseChatModel:
        """Create xAI ChatModel instance.

        Args:
            model: Model name (e.g., 'grok-3-mini-latest')
            temperature: Optional sampling temperature
            provider_options: Ignored for xAI
            **kwargs: Additional arguments (api_key, base_url, etc.)

        Returns:
            Configured ChatXAI instance
        """
        if temperature is not None:
            kwargs["temperature"] = temperature

        # ChatXAI uses its own field names
        if "api_key" in kwargs:
            kwargs["xai_api_key"] = kwargs.pop("api_key")
        if "base_url" in kwargs:
            kwargs["xai_api_base"] = kwargs.pop("base_url")

        return ChatXAI(model=model, **kwargs)
