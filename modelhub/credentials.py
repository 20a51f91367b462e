"""Credential resolution for provider API keys.

Credentials are resolved through an ordered list of sources. The first
source that returns a non-empty value wins; a key found nowhere resolves to
None without raising.
"""

import logging
import os
from abc import ABC, abstractmethod
from typing import Iterable, List, Mapping, Optional, Sequence, Type

from .config import ProviderCredentials
from .keystore import KeyStore
from .providers.base import ModelProvider

logger = logging.getLogger(__name__)


class CredentialSource(ABC):
    """A single place a credential may come from."""

    name: str = "source"

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the value for key, or None when absent."""
        pass


class EnvironmentSource(CredentialSource):
    """Process environment variables."""

    name = "environment"

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        self._environ = environ

    def get(self, key: str) -> Optional[str]:
        environ = os.environ if self._environ is None else self._environ
        return environ.get(key) or None


class KeyStoreSource(CredentialSource):
    """Persistent key store, consulted only when its file exists."""

    name = "key store"

    def __init__(self, store: KeyStore):
        self.store = store

    def get(self, key: str) -> Optional[str]:
        if not self.store.available:
            return None
        return self.store.get(key) or None


class CredentialResolver:
    """Resolve credentials from an ordered list of sources."""

    def __init__(self, sources: Sequence[CredentialSource]):
        self.sources: List[CredentialSource] = list(sources)

    def resolve(self, key: str) -> Optional[str]:
        """Resolve a credential by key name.

        Args:
            key: Key name (e.g., 'OPENAI_API_KEY')

        Returns:
            First non-empty value across sources, or None
        """
        for source in self.sources:
            value = source.get(key)
            if value:
                logger.debug(f"Resolved {key} from {source.name}")
                return value
        logger.debug(f"No value found for {key}")
        return None

    def resolve_all(
        self, provider_classes: Iterable[Type[ModelProvider]]
    ) -> ProviderCredentials:
        """Resolve the credential of every provider family.

        Args:
            provider_classes: Provider classes to resolve keys for

        Returns:
            Frozen ProviderCredentials
        """
        fields = {}
        for provider_class in provider_classes:
            provider = provider_class()
            fields[provider.credentials_field] = self.resolve(provider.credential_key)
        return ProviderCredentials(**fields)


def default_resolver(store: KeyStore) -> CredentialResolver:
    """Build the standard environment-then-key-store resolver."""
    return CredentialResolver([EnvironmentSource(), KeyStoreSource(store)])
