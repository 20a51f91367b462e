"""Reasoning extraction for models that inline their chain of thought.

Some models emit their reasoning inside a delimiter tag, e.g.
``<think>...</think>``, ahead of the answer. ``ReasoningChatModel`` wraps
such a model and moves the tagged segments out of the message content into
``additional_kwargs["reasoning_content"]``, the key LangChain integrations
use for reasoning output.
"""

import re
from typing import Any, List, Optional, Tuple

from langchain_core.callbacks import (
    AsyncCallbackManagerForLLMRun,
    CallbackManagerForLLMRun,
)
from langchain_core.language_models import BaseChatModel
from langchain_core.messages import AIMessage, BaseMessage
from langchain_core.outputs import ChatGeneration, ChatResult

from .config import GoogleProviderOptions

REASONING_TAG = "think"
REASONING_KEY = "reasoning_content"


def extract_reasoning(
    text: str, tag_name: str = REASONING_TAG, separator: str = "\n"
) -> Tuple[str, str]:
    """Split tagged reasoning out of generated text.

    Args:
        text: Generated text
        tag_name: Delimiter tag name, without angle brackets
        separator: Joins multiple reasoning segments

    Returns:
        Tuple of (text without reasoning, reasoning)

    Example:
        >>> extract_reasoning("A<think>B</think>C")
        ('AC', 'B')
    """
    tag = re.escape(tag_name)
    pattern = re.compile(rf"<{tag}>(.*?)</{tag}>", re.DOTALL)
    segments = pattern.findall(text)
    if not segments:
        return text, ""
    return pattern.sub("", text), separator.join(segments)


def get_reasoning(message: BaseMessage) -> str:
    """Return the reasoning channel of a message ('' when empty)."""
    return message.additional_kwargs.get(REASONING_KEY, "")


class ReasoningChatModel(BaseChatModel):
    """Chat model wrapper that extracts tagged reasoning from responses.

    Generation is delegated unchanged to the wrapped model. Provider options
    are recorded here for inspection; they are applied by the provider when
    the wrapped model is built.
    """

    model: BaseChatModel
    tag_name: str = REASONING_TAG
    start_with_reasoning: bool = False
    provider_options: Optional[GoogleProviderOptions] = None

    @property
    def _llm_type(self) -> str:
        return f"reasoning-{self.model._llm_type}"

    @property
    def _identifying_params(self) -> dict:
        return {"tag_name": self.tag_name, **self.model._identifying_params}

    def _generate(
        self,
        messages: List[BaseMessage],
        stop: Optional[List[str]] = None,
        run_manager: Optional[CallbackManagerForLLMRun] = None,
        **kwargs: Any,
    ) -> ChatResult:
        message = self.model.invoke(messages, stop=stop, **kwargs)
        return self._to_result(message)

    async def _agenerate(
        self,
        messages: List[BaseMessage],
        stop: Optional[List[str]] = None,
        run_manager: Optional[AsyncCallbackManagerForLLMRun] = None,
        **kwargs: Any,
    ) -> ChatResult:
        message = await self.model.ainvoke(messages, stop=stop, **kwargs)
        return self._to_result(message)

    def _split(self, text: str) -> Tuple[str, str]:
        if self.start_with_reasoning and not text.startswith(f"<{self.tag_name}>"):
            text = f"<{self.tag_name}>{text}"
        return extract_reasoning(text, self.tag_name)

    def _to_result(self, message: BaseMessage) -> ChatResult:
        reasoning: List[str] = []
        if isinstance(message.content, str):
            content, found = self._split(message.content)
            if found:
                reasoning.append(found)
        else:
            content = []
            for block in message.content:
                if isinstance(block, str):
                    text, found = self._split(block)
                    content.append(text)
                elif isinstance(block, dict) and block.get("type") == "text":
                    text, found = self._split(block.get("text", ""))
                    content.append({**block, "text": text})
                else:
                    content.append(block)
                    continue
                if found:
                    reasoning.append(found)

        additional_kwargs = dict(message.additional_kwargs)
        if reasoning:
            existing = additional_kwargs.get(REASONING_KEY)
            additional_kwargs[REASONING_KEY] = "\n".join(
                ([existing] if existing else []) + reasoning
            )

        extracted = AIMessage(
            content=content,
            additional_kwargs=additional_kwargs,
            response_metadata=getattr(message, "response_metadata", {}),
            usage_metadata=getattr(message, "usage_metadata", None),
            tool_calls=getattr(message, "tool_calls", []),
            id=message.id,
        )
        return ChatResult(generations=[ChatGeneration(message=extracted)])
