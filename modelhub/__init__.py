"""Multi-provider chat model hub.

Builds LangChain chat models for several providers (OpenAI, Anthropic,
Groq, xAI, Google Gemini) and exposes them under short, stable
identifiers together with display metadata.

Key features:
- One name-keyed lookup across all providers
- Credentials from the environment, falling back to a persistent key store
- Reasoning extraction for models that emit ``<think>`` tags
- Fixed safety, modality and thinking options for Gemini models
- Explicit reconfiguration when stored API keys change
"""

from .catalog import ModelCatalog
from .config import (
    GoogleProviderOptions,
    ModelDefinition,
    ModelInfo,
    ProviderCredentials,
    SafetySetting,
    ThinkingConfig,
)
from .credentials import (
    CredentialResolver,
    CredentialSource,
    EnvironmentSource,
    KeyStoreSource,
)
from .exceptions import (
    ConfigurationError,
    ModelHubError,
    ModelCreationError,
    ProviderNotFoundError,
    UnknownModelError,
)
from .factory import ModelFactory
from .hub import ModelHub, ModelRegistry, build_registry, create_hub, get_hub
from .keystore import KeyStore
from .middleware import REASONING_TAG, ReasoningChatModel, extract_reasoning, get_reasoning
from .models import DEFAULT_MODEL, GOOGLE_PROVIDER_OPTIONS, MODEL_DEFINITIONS, MODELS
from .providers.deferred import DeferredChatModel
from .registry import ProviderRegistry, get_registry

# Auto-register all providers
from .providers import (
    AnthropicProvider,
    GeminiProvider,
    GroqProvider,
    OpenAIProvider,
    XAIProvider,
)

_registry = get_registry()
_registry.register(OpenAIProvider)
_registry.register(AnthropicProvider)
_registry.register(GroqProvider)
_registry.register(XAIProvider)
_registry.register(GeminiProvider)

MODEL_DETAILS = ModelCatalog(MODEL_DEFINITIONS)

__all__ = [
    "ModelHub",
    "ModelRegistry",
    "ModelCatalog",
    "ModelFactory",
    "ModelDefinition",
    "ModelInfo",
    "GoogleProviderOptions",
    "SafetySetting",
    "ThinkingConfig",
    "ProviderCredentials",
    "ProviderRegistry",
    "CredentialResolver",
    "CredentialSource",
    "EnvironmentSource",
    "KeyStoreSource",
    "KeyStore",
    "ReasoningChatModel",
    "DeferredChatModel",
    "extract_reasoning",
    "get_reasoning",
    "REASONING_TAG",
    "MODELS",
    "MODEL_DEFINITIONS",
    "MODEL_DETAILS",
    "DEFAULT_MODEL",
    "GOOGLE_PROVIDER_OPTIONS",
    "ModelHubError",
    "ProviderNotFoundError",
    "ModelCreationError",
    "ConfigurationError",
    "UnknownModelError",
    "build_registry",
    "create_hub",
    "get_hub",
    "get_registry",
]
