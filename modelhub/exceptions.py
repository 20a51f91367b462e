"""Errors raised while building or looking up hub models."""

from typing import List


class ModelHubError(Exception):
    """Root of every error raised by modelhub."""


class ProviderNotFoundError(ModelHubError):
    """A model definition names a provider family nobody registered."""


class ModelCreationError(ModelHubError):
    """A provider client could not build a chat model.

    Raised while the registry is built when a credential is present, or on
    first use of a model whose client was deferred for lack of one.
    """


class ConfigurationError(ModelHubError):
    """Model definitions or hub settings are inconsistent."""


class UnknownModelError(ModelHubError, KeyError):
    """A lookup used an identifier that is not in the registry.

    Also a KeyError, so the registry behaves like any other mapping.
    """

    def __init__(self, model_id: str, available: List[str]):
        self.model_id = model_id
        self.available = available
        super().__init__(
            f"Model '{model_id}' not found. Available models: {', '.join(available)}"
        )

    def __str__(self) -> str:
        return self.args[0]
