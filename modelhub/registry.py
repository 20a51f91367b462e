"""Registry of provider families available to the model factory."""

import logging
from typing import Dict, List, Type

from .exceptions import ProviderNotFoundError
from .providers.base import ModelProvider

logger = logging.getLogger(__name__)


class ProviderRegistry:
    """Maps a provider family name to the class that builds its models.

    Registration order is kept; credentials are resolved in that order.
    Registering a second class under an existing name replaces the first
    without moving it.
    """

    def __init__(self):
        self._providers: Dict[str, Type[ModelProvider]] = {}

    def register(self, provider_class: Type[ModelProvider]) -> None:
        """Register a provider class under its ``name``.

        Example:
            >>> registry = ProviderRegistry()
            >>> registry.register(GroqProvider)
            >>> registry.list_providers()
            ['groq']
        """
        # Providers take no required arguments, so an unbound instance names the family
        family = provider_class().name
        if family in self._providers:
            logger.debug(f"Replacing {family} provider with {provider_class.__name__}")
        self._providers[family] = provider_class
        logger.debug(f"Registered {family} provider: {provider_class.__name__}")

    def get(self, name: str) -> Type[ModelProvider]:
        """Look up the class for a provider family.

        Raises:
            ProviderNotFoundError: If no class is registered under name
        """
        try:
            return self._providers[name]
        except KeyError:
            raise ProviderNotFoundError(
                f"Provider '{name}' not found. "
                f"Available providers: {', '.join(self._providers)}"
            ) from None

    def __contains__(self, name: object) -> bool:
        return name in self._providers

    def list_providers(self) -> List[str]:
        """Family names, in registration order."""
        return list(self._providers)

    def provider_classes(self) -> List[Type[ModelProvider]]:
        """Provider classes, in registration order."""
        return list(self._providers.values())


_registry = ProviderRegistry()


def get_registry() -> ProviderRegistry:
    """Registry that ``modelhub`` fills with the built-in providers on import."""
    return _registry
