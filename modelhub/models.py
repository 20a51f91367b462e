"""Static model definitions.

Registry entries and catalog metadata are both derived from
``MODEL_DEFINITIONS``; its order is the public identifier order.
"""

from typing import Tuple

from .config import (
    GoogleProviderOptions,
    ModelDefinition,
    ModelInfo,
    SafetySetting,
    ThinkingConfig,
)

GOOGLE_PROVIDER_OPTIONS = GoogleProviderOptions(
    response_modalities=["TEXT"],
    thinking_config=ThinkingConfig(thinking_budget=1024),
    safety_settings=[
        SafetySetting(
            category="HARM_CATEGORY_DANGEROUS_CONTENT",
            threshold="BLOCK_MEDIUM_AND_ABOVE",
        ),
        SafetySetting(
            category="HARM_CATEGORY_HATE_SPEECH",
            threshold="BLOCK_MEDIUM_AND_ABOVE",
        ),
        SafetySetting(
            category="HARM_CATEGORY_HARASSMENT",
            threshold="BLOCK_MEDIUM_AND_ABOVE",
        ),
        SafetySetting(
            category="HARM_CATEGORY_SEXUALLY_EXPLICIT",
            threshold="BLOCK_MEDIUM_AND_ABOVE",
        ),
    ],
)

MODEL_DEFINITIONS: Tuple[ModelDefinition, ...] = (
    ModelDefinition(
        id="gpt-4.1-mini",
        provider="openai",
        model="gpt-4.1-mini",
        info=ModelInfo(
            provider="OpenAI",
            name="GPT-4.1 Mini",
            description="Compact version of OpenAI's GPT-4.1 with good balance of capabilities, including vision.",
            api_version="gpt-4.1-mini",
            capabilities=["Balance", "Creative", "Vision"],
        ),
    ),
    ModelDefinition(
        id="claude-3-7-sonnet",
        provider="anthropic",
        model="claude-3-7-sonnet-20250219",
        info=ModelInfo(
            provider="Anthropic",
            name="Claude 3.7 Sonnet",
            description="Latest version of Anthropic's Claude 3.7 Sonnet with strong reasoning and coding capabilities.",
            api_version="claude-3-7-sonnet-20250219",
            capabilities=["Reasoning", "Efficient", "Agentic"],
        ),
    ),
    ModelDefinition(
        id="qwen-qwq",
        provider="groq",
        model="qwen-qwq-32b",
        extract_reasoning=True,
        info=ModelInfo(
            provider="Groq",
            name="Qwen QWQ",
            description="Latest version of Alibaba's Qwen QWQ with strong reasoning and coding capabilities.",
            api_version="qwen-qwq",
            capabilities=["Reasoning", "Efficient", "Agentic"],
        ),
    ),
    ModelDefinition(
        id="grok-3-mini",
        provider="xai",
        model="grok-3-mini-latest",
        info=ModelInfo(
            provider="XAI",
            name="Grok 3 Mini",
            description="Latest version of XAI's Grok 3 Mini with strong reasoning and coding capabilities.",
            api_version="grok-3-mini-latest",
            capabilities=["Reasoning", "Efficient", "Agentic"],
        ),
    ),
    ModelDefinition(
        id="gemini-pro",
        provider="gemini",
        model="gemini-pro",
        extract_reasoning=True,
        provider_options=GOOGLE_PROVIDER_OPTIONS,
        info=ModelInfo(
            provider="Google",
            name="Gemini Pro",
            description="Google's Gemini Pro model with strong reasoning, coding, and multimodal capabilities.",
            api_version="gemini-pro",
            capabilities=["Reasoning", "Multimodal", "Coding"],
        ),
    ),
    ModelDefinition(
        id="gemini-2-5-flash-preview",
        provider="gemini",
        model="gemini-2.5-flash-preview-04-17",
        extract_reasoning=True,
        provider_options=GOOGLE_PROVIDER_OPTIONS,
        info=ModelInfo(
            provider="Google",
            name="Gemini 2.5 Flash Preview",
            description="Latest preview version of Gemini 2.5 Flash with improved speed and capabilities.",
            api_version="gemini-2.5-flash-preview-04-17",
            capabilities=["Fast", "Preview", "Improved"],
        ),
    ),
    ModelDefinition(
        id="gemini-2-5-pro-exp",
        provider="gemini",
        model="gemini-2.5-pro-exp-03-25",
        extract_reasoning=True,
        provider_options=GOOGLE_PROVIDER_OPTIONS,
        info=ModelInfo(
            provider="Google",
            name="Gemini 2.5 Pro Experimental",
            description="Experimental version of Gemini 2.5 Pro with advanced features and capabilities.",
            api_version="gemini-2.5-pro-exp-03-25",
            capabilities=["Advanced", "Experimental", "Enhanced"],
        ),
    ),
    ModelDefinition(
        id="gemini-2-0-flash",
        provider="gemini",
        model="gemini-2.0-flash",
        extract_reasoning=True,
        provider_options=GOOGLE_PROVIDER_OPTIONS,
        info=ModelInfo(
            provider="Google",
            name="Gemini 2.0 Flash",
            description="Fast and efficient version of Gemini 2.0 optimized for quick responses.",
            api_version="gemini-2.0-flash",
            capabilities=["Fast", "Efficient", "Optimized"],
        ),
    ),
)

DEFAULT_MODEL = "qwen-qwq"

MODELS = [definition.id for definition in MODEL_DEFINITIONS]
