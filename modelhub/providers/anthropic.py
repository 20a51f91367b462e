"""Anthropic provider implementation."""

import logging
from typing import Any, Dict, Optional

from langchain_anthropic import ChatAnthropic
from langchain_core.language_models import BaseChatModel

from ..config import GoogleProviderOptions
from .base import ModelProvider

logger = logging.getLogger(__name__)


class AnthropicProvider(ModelProvider):
    """Anthropic provider implementation.

    Supports Claude models.
    """

    @property
    def name(self) -> str:
        """Provider identifier."""
        return "anthropic"

    @property
    def credential_key(self) -> str:
        return "ANTHROPIC_API_KEY"

    def validate_config(self, config: Dict[str, Any]) -> None:
        """Validate Anthropic-specific configuration.

        Args:
            config: Configuration dictionary
        """
        if not config.get("api_key"):
            logger.warning("Anthropic API key not provided")

        if config.get("provider_options") is not None:
            logger.warning(
                "Anthropic does not accept provider options, will be ignored"
            )

    def create_model(
        self,
        model: str,
        temperature: Optional[float] = None,
        provider_options: Optional[GoogleProviderOptions] = None,
        **kwargs: Any,
    ) -> BaseChatModel:
        """Create Anthropic ChatModel instance.

        Args:
            model: Model name (e.g., 'claude-3-7-sonnet-20250219')
            temperature: Optional sampling temperature
            provider_options: Ignored for Anthropic
            **kwargs: Additional arguments (api_key, base_url, etc.)

        Returns:
            Configured ChatAnthropic instance
        """
        if temperature is not None:
            kwargs["temperature"] = temperature

        return ChatAnthropic(model=model, **kwargs)
