"""Google Gemini provider implementation."""

import logging
from typing import Any, Dict, Optional

from langchain_core.language_models import BaseChatModel
from langchain_google_genai import (
    ChatGoogleGenerativeAI,
    HarmBlockThreshold,
    HarmCategory,
    Modality,
)

from ..config import GoogleProviderOptions
from .base import ModelProvider

logger = logging.getLogger(__name__)


def to_client_kwargs(options: GoogleProviderOptions) -> Dict[str, Any]:
    """Translate provider options into ChatGoogleGenerativeAI arguments.

    Args:
        options: Gemini provider options

    Returns:
        Keyword arguments for the ChatGoogleGenerativeAI constructor
    """
    return {
        "response_modalities": [Modality[m] for m in options.response_modalities],
        "thinking_budget": options.thinking_config.thinking_budget,
        "safety_settings": {
            HarmCategory[s.category]: HarmBlockThreshold[s.threshold]
            for s in options.safety_settings
        },
    }


class GeminiProvider(ModelProvider):
    """Google Gemini provider implementation.

    Supports Google's Gemini models with safety settings, response
    modalities and a thinking budget.
    """

    @property
    def name(self) -> str:
        """Provider identifier."""
        return "gemini"

    @property
    def credential_key(self) -> str:
        return "GOOGLE_GENERATIVE_AI_API_KEY"

    @property
    def credentials_field(self) -> str:
        return "google_api_key"

    def validate_config(self, config: Dict[str, Any]) -> None:
        """Validate Gemini-specific configuration.

        Args:
            config: Configuration dictionary
        """
        if not config.get("api_key"):
            logger.warning("Google API key not provided")

    def create_model(
        self,
        model: str,
        temperature: Optional[float] = None,
        provider_options: Optional[GoogleProviderOptions] = None,
        **kwargs: Any,
    ) -> BaseChatModel:
        """Create Gemini ChatModel instance.

        Args:
            model: Model name (e.g., 'gemini-2.0-flash')
            temperature: Optional sampling temperature
            provider_options: Safety, modality and thinking options
            **kwargs: Additional arguments (api_key, base_url, etc.)

        Returns:
            Configured ChatGoogleGenerativeAI instance
        """
        if temperature is not None:
            kwargs["temperature"] = temperature

        # Rename api_key to google_api_key if present
        if "api_key" in kwargs:
            kwargs["google_api_key"] = kwargs.pop("api_key")

        if provider_options is not None:
            kwargs.update(to_client_kwargs(provider_options))

        return ChatGoogleGenerativeAI(model=model, **kwargs)
