"""Configuration schemas for models and provider options."""

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

HarmCategory = Literal[
    "HARM_CATEGORY_DANGEROUS_CONTENT",
    "HARM_CATEGORY_HATE_SPEECH",
    "HARM_CATEGORY_HARASSMENT",
    "HARM_CATEGORY_SEXUALLY_EXPLICIT",
]

HarmBlockThreshold = Literal[
    "BLOCK_LOW_AND_ABOVE",
    "BLOCK_MEDIUM_AND_ABOVE",
    "BLOCK_HIGH_AND_ABOVE",
    "BLOCK_ONLY_HIGH",
]

ResponseModality = Literal["TEXT", "IMAGE"]

ProviderName = Literal["openai", "anthropic", "groq", "xai", "gemini"]


class SafetySetting(BaseModel):
    """Per-harm-category block threshold."""

    category: HarmCategory
    threshold: HarmBlockThreshold

    model_config = {"frozen": True}


class ThinkingConfig(BaseModel):
    """Cap on internal reasoning effort."""

    thinking_budget: int = Field(ge=0)

    model_config = {"frozen": True}


class GoogleProviderOptions(BaseModel):
    """Generation options attached to Gemini models at construction time.

    Attributes:
        response_modalities: Output modalities the model may produce
        thinking_config: Reasoning budget
        safety_settings: Block thresholds per harm category
    """

    response_modalities: List[ResponseModality]
    thinking_config: ThinkingConfig
    safety_settings: List[SafetySetting]

    model_config = {"frozen": True}


class ModelInfo(BaseModel):
    """Descriptive metadata for a registered model.

    Attributes:
        provider: Display name of the provider
        name: Display name of the model
        description: Human readable description
        api_version: Backend model version string
        capabilities: Ordered capability tags
    """

    provider: str
    name: str
    description: str
    api_version: str = Field(alias="apiVersion")
    capabilities: List[str]

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class ModelDefinition(BaseModel):
    """Static definition of one registry entry.

    Attributes:
        id: Logical model identifier used for lookups
        provider: Provider family that builds the model
        model: Backend model name passed to the provider
        extract_reasoning: Wrap the model with reasoning extraction
        provider_options: Optional provider-specific generation options
        info: Metadata shown for this identifier
    """

    id: str
    provider: ProviderName
    model: str
    extract_reasoning: bool = False
    provider_options: Optional[GoogleProviderOptions] = None
    info: ModelInfo

    model_config = {"frozen": True}


class ProviderCredentials(BaseModel):
    """Resolved provider credentials.

    Kept apart from ModelDefinition so credentials are never serialized or
    logged with model configurations.
    """

    openai_api_key: Optional[str] = None
    anthropic_api_key: Optional[str] = None
    groq_api_key: Optional[str] = None
    xai_api_key: Optional[str] = None
    google_api_key: Optional[str] = None

    model_config = {"frozen": True}

    def for_provider(self, provider: str) -> Optional[str]:
        """Get the API key for a provider family.

        Args:
            provider: Provider name

        Returns:
            API key or None
        """
        key_mapping = {
            "openai": self.openai_api_key,
            "anthropic": self.anthropic_api_key,
            "groq": self.groq_api_key,
            "xai": self.xai_api_key,
            "gemini": self.google_api_key,
        }
        return key_mapping.get(provider)
