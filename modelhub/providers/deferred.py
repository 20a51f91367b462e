"""Chat model whose provider client is built on first use."""

import logging
from typing import Any, Callable, List, Optional

from langchain_core.callbacks import (
    AsyncCallbackManagerForLLMRun,
    CallbackManagerForLLMRun,
)
from langchain_core.language_models import BaseChatModel
from langchain_core.messages import BaseMessage
from langchain_core.outputs import ChatGeneration, ChatResult
from pydantic import PrivateAttr

from ..exceptions import ModelCreationError

logger = logging.getLogger(__name__)


class DeferredChatModel(BaseChatModel):
    """Placeholder for a model registered without a credential.

    Several LangChain clients refuse to construct without an API key. The
    registry still lists such models; the client is built the first time
    the model generates, so a missing key only fails the model that needs it.
    """

    provider: str
    backend_model: str
    builder: Callable[[], BaseChatModel]

    _client: Optional[BaseChatModel] = PrivateAttr(default=None)

    @property
    def _llm_type(self) -> str:
        return f"deferred-{self.provider}"

    @property
    def _identifying_params(self) -> dict:
        return {"provider": self.provider, "model": self.backend_model}

    @property
    def built(self) -> bool:
        """Whether the provider client has been created."""
        return self._client is not None

    def client(self) -> BaseChatModel:
        """Build the provider client on first call and return it.

        Raises:
            ModelCreationError: If the provider client cannot be built
        """
        if self._client is None:
            try:
                self._client = self.builder()
            except Exception as e:
                logger.error(f"Failed to create {self.provider} model: {e}")
                raise ModelCreationError(
                    f"Model creation failed for {self.provider} model "
                    f"'{self.backend_model}': {e}"
                ) from e
            logger.info(f"Created deferred {self.provider} model: {self.backend_model}")
        return self._client

    def _generate(
        self,
        messages: List[BaseMessage],
        stop: Optional[List[str]] = None,
        run_manager: Optional[CallbackManagerForLLMRun] = None,
        **kwargs: Any,
    ) -> ChatResult:
        message = self.client().invoke(messages, stop=stop, **kwargs)
        return ChatResult(generations=[ChatGeneration(message=message)])

    async def _agenerate(
        self,
        messages: List[BaseMessage],
        stop: Optional[List[str]] = None,
        run_manager: Optional[AsyncCallbackManagerForLLMRun] = None,
        **kwargs: Any,
    ) -> ChatResult:
        message = await self.client().ainvoke(messages, stop=stop, **kwargs)
        return ChatResult(generations=[ChatGeneration(message=message)])
