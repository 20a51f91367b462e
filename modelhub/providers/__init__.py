"""Provider implementations for different LLM services."""

from .anthropic import AnthropicProvider
from .base import ModelProvider
from .deferred import DeferredChatModel
from .gemini import GeminiProvider
from .groq import GroqProvider
from .openai import OpenAIProvider
from .xai import XAIProvider

__all__ = [
    "ModelProvider",
    "DeferredChatModel",
    "OpenAIProvider",
    "AnthropicProvider",
    "GroqProvider",
    "XAIProvider",
    "GeminiProvider",
]
