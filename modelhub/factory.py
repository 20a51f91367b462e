"""Model factory for creating LLM instances."""

import logging
from typing import Dict, Optional

from langchain_core.language_models import BaseChatModel

from .config import ModelDefinition, ProviderCredentials
from .exceptions import ModelCreationError
from .middleware import REASONING_TAG, ReasoningChatModel
from .providers.base import ModelProvider
from .registry import ProviderRegistry, get_registry

logger = logging.getLogger(__name__)


class ModelFactory:
    """Factory for creating LLM models from static definitions.

    Provider clients are created once per provider family, bound to that
    family's credential, and reused for every model of the family.
    """

    def __init__(
        self,
        credentials: Optional[ProviderCredentials] = None,
        base_urls: Optional[Dict[str, str]] = None,
        temperature: Optional[float] = None,
        registry: Optional[ProviderRegistry] = None,
    ):
        """Initialize factory with credentials.

        Args:
            credentials: Provider credentials (if None, providers must supply their own)
            base_urls: Optional base URL override per provider name
            temperature: Optional sampling temperature for every model
            registry: Provider registry (defaults to the global one)
        """
        self._credentials = credentials or ProviderCredentials()
        self._base_urls = base_urls or {}
        self._temperature = temperature
        self._registry = registry or get_registry()
        self._providers: Dict[str, ModelProvider] = {}

    def provider(self, name: str) -> ModelProvider:
        """Get the provider client for a family, creating it on first use.

        Args:
            name: Provider name

        Returns:
            Provider bound to its credential

        Raises:
            ProviderNotFoundError: If provider not registered
        """
        if name not in self._providers:
            provider_class = self._registry.get(name)
            self._providers[name] = provider_class(
                api_key=self._credentials.for_provider(name),
                base_url=self._base_urls.get(name),
            )
            logger.debug(f"Created {name} provider client")
        return self._providers[name]

    def create_model(self, definition: ModelDefinition) -> BaseChatModel:
        """Create a model instance from a definition.

        Provider options are applied by the provider. Models that need
        reasoning extraction are then wrapped in ReasoningChatModel, which
        also records the options; all others are returned as built.

        Args:
            definition: Model definition

        Returns:
            Configured BaseChatModel instance

        Raises:
            ModelCreationError: If model creation fails
        """
        try:
            provider = self.provider(definition.provider)

            kwargs = {"temperature": self._temperature}
            if definition.provider_options is not None:
                kwargs["provider_options"] = definition.provider_options

            model = provider.model_for(definition.model, **kwargs)

            if definition.extract_reasoning:
                model = ReasoningChatModel(
                    model=model,
                    tag_name=REASONING_TAG,
                    provider_options=definition.provider_options,
                )

            logger.info(f"Created {definition.provider} model: {definition.model}")
            return model

        except Exception as e:
            logger.error(f"Failed to create model {definition.id}: {e}")
            raise ModelCreationError(
                f"Model creation failed for '{definition.id}': {e}"
            ) from e

    def provider_count(self) -> int:
        """Number of provider clients created so far."""
        return len(self._providers)
