"""Model registry and the unified accessor over it."""

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Callable, Dict, Iterator, List, Optional, Sequence

from langchain_core.language_models import BaseChatModel

from .catalog import ModelCatalog
from .config import GoogleProviderOptions, ModelDefinition, ModelInfo
from .credentials import CredentialResolver, default_resolver
from .exceptions import ConfigurationError, UnknownModelError
from .factory import ModelFactory
from .keystore import KeyStore
from .models import DEFAULT_MODEL, MODEL_DEFINITIONS
from .registry import ProviderRegistry, get_registry
from .settings import HubSettings, settings as default_settings

logger = logging.getLogger(__name__)


class ModelRegistry(Mapping):
    """Immutable, ordered mapping of model identifier to model instance."""

    def __init__(
        self,
        models: Dict[str, BaseChatModel],
        definitions: Sequence[ModelDefinition],
    ):
        self._models = MappingProxyType(dict(models))
        self._definitions = MappingProxyType({d.id: d for d in definitions})

    def __getitem__(self, model_id: str) -> BaseChatModel:
        try:
            return self._models[model_id]
        except KeyError:
            raise UnknownModelError(model_id, list(self._models)) from None

    def __iter__(self) -> Iterator[str]:
        return iter(self._models)

    def __len__(self) -> int:
        return len(self._models)

    def definition(self, model_id: str) -> ModelDefinition:
        """Get the definition an entry was built from."""
        if model_id not in self._definitions:
            raise UnknownModelError(model_id, list(self._models))
        return self._definitions[model_id]

    def provider_options(self, model_id: str) -> Optional[GoogleProviderOptions]:
        """Get the provider options attached to an entry, if any."""
        return self.definition(model_id).provider_options


def build_registry(
    definitions: Sequence[ModelDefinition], factory: ModelFactory
) -> ModelRegistry:
    """Build every model in definitions.

    Args:
        definitions: Model definitions, in identifier order
        factory: Model factory bound to credentials

    Returns:
        Fully populated ModelRegistry

    Raises:
        ConfigurationError: If an identifier is defined twice
        ModelCreationError: If any model fails to build
    """
    models: Dict[str, BaseChatModel] = {}
    for definition in definitions:
        if definition.id in models:
            raise ConfigurationError(f"Duplicate model identifier: {definition.id}")
        models[definition.id] = factory.create_model(definition)
    logger.info(f"Built model registry with {len(models)} models")
    return ModelRegistry(models, definitions)


class ModelHub:
    """Uniform, name-keyed access to every registered model.

    The hub owns an immutable ModelRegistry. ``reconfigure()`` resolves
    credentials again and swaps in a freshly built registry; a failed
    rebuild leaves the current registry in place.
    """

    def __init__(
        self,
        settings: Optional[HubSettings] = None,
        resolver: Optional[CredentialResolver] = None,
        definitions: Sequence[ModelDefinition] = MODEL_DEFINITIONS,
        default_model: str = DEFAULT_MODEL,
        provider_registry: Optional[ProviderRegistry] = None,
    ):
        """Initialize hub and build all models.

        Args:
            settings: Hub settings (defaults to environment-loaded settings)
            resolver: Credential resolver (defaults to environment, then key store)
            definitions: Model definitions, in identifier order
            default_model: Identifier returned by default_model
            provider_registry: Provider registry (defaults to the global one)

        Raises:
            ConfigurationError: If definitions are inconsistent
            ModelCreationError: If any model fails to build
        """
        self.settings = settings or default_settings
        self.key_store = KeyStore(self.settings.key_store_path)
        self.resolver = resolver or default_resolver(self.key_store)
        self._definitions = tuple(definitions)
        self._provider_registry = provider_registry or get_registry()
        self.catalog = ModelCatalog(self._definitions)

        if default_model not in self.catalog:
            raise ConfigurationError(
                f"Default model '{default_model}' is not a registered model"
            )
        self._default_model = default_model

        self._registry = self._build()

    @property
    def registry(self) -> ModelRegistry:
        return self._registry

    @property
    def models(self) -> List[str]:
        """All model identifiers, in registry order."""
        return list(self._registry)

    @property
    def default_model(self) -> str:
        return self._default_model

    def language_model(self, model_id: str) -> BaseChatModel:
        """Get a model by identifier.

        Raises:
            UnknownModelError: If the identifier is not registered
        """
        return self._registry[model_id]

    def info(self, model_id: str) -> ModelInfo:
        """Get display metadata for a model.

        Raises:
            UnknownModelError: If the identifier is not registered
        """
        return self.catalog.lookup(model_id)

    def __getitem__(self, model_id: str) -> BaseChatModel:
        return self.language_model(model_id)

    def __contains__(self, model_id: object) -> bool:
        return model_id in self._registry

    def reconfigure(self) -> None:
        """Re-resolve credentials and rebuild every model."""
        logger.info("Reconfiguring model hub")
        self._registry = self._build()

    def watch(self, key_store: Optional[KeyStore] = None) -> Callable[[], None]:
        """Reconfigure whenever an API key changes in the key store.

        Any changed key containing the reload marker triggers a full
        rebuild, regardless of which provider it belongs to.

        Args:
            key_store: Store to watch (defaults to the hub's own store)

        Returns:
            Function that stops watching
        """
        store = key_store or self.key_store
        marker = self.settings.reload_key_marker

        def on_change(key: str) -> None:
            if marker in key:
                logger.info(f"{key} changed, rebuilding models")
                self.reconfigure()

        return store.subscribe(on_change)

    def _build(self) -> ModelRegistry:
        credentials = self.resolver.resolve_all(
            self._provider_registry.provider_classes()
        )
        factory = ModelFactory(
            credentials=credentials,
            base_urls={"gemini": self.settings.google_base_url},
            temperature=self.settings.temperature,
            registry=self._provider_registry,
        )
        registry = build_registry(self._definitions, factory)
        if set(registry) != set(self.catalog):
            raise ConfigurationError("Model registry and catalog keys differ")
        return registry


def create_hub(**kwargs) -> ModelHub:
    """Create a new, independently configured ModelHub."""
    return ModelHub(**kwargs)


_hub: Optional[ModelHub] = None


def get_hub() -> ModelHub:
    """Get the process-wide ModelHub, building it on first use.

    Returns:
        Global ModelHub instance
    """
    global _hub
    if _hub is None:
        _hub = ModelHub()
    return _hub
