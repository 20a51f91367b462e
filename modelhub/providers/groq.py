"""Groq provider implementation."""

import logging
from typing import Any, Dict, Optional

from langchain_core.language_models import BaseChatModel
from langchain_groq import ChatGroq

from ..config import GoogleProviderOptions
from .base import ModelProvider

logger = logging.getLogger(__name__)


class GroqProvider(ModelProvider):
    """Groq provider implementation.

    High-throughput inference for open-weight models. Reasoning models
    served here (e.g. QwQ) interleave their chain of thought in
    ``<think>`` tags.
    """

    @property
    def name(self) -> str:
        """Provider identifier."""
        return "groq"

    @property
    def credential_key(self) -> str:
        return "GROQ_API_KEY"

    def validate_config(self, config: Dict[str, Any]) -> None:
        """Validate Groq-specific configuration.

        Args:
            config: Configuration dictionary
        """
        if not config.get("api_key"):
            logger.warning("Groq API key not provided")

        if config.get("provider_options") is not None:
            logger.warning("Groq does not accept provider options, will be ignored")

    def create_model(
        self,
        model: str,
        temperature: Optional[float] = None,
        provider_options: Optional[GoogleProviderOptions] = None,
        **kwargs: Any,
    ) -> BaseChatModel:
        """Create Groq ChatModel instance.

        Args:
            model: Model name (e.g., 'qwen-qwq-32b')
            temperature: Optional sampling temperature
            provider_options: Ignored for Groq
            **kwargs: Additional arguments (api_key, base_url, etc.)

        Returns:
            Configured ChatGroq instance
        """
        if temperature is not None:
            kwargs["temperature"] = temperature

        return ChatGroq(model=model, **kwargs)
