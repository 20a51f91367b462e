"""Metadata catalog for registered models."""

from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List

from .config import ModelDefinition, ModelInfo
from .exceptions import ConfigurationError, UnknownModelError


class ModelCatalog:
    """Read-only mapping of model identifier to ModelInfo."""

    def __init__(self, definitions: Iterable[ModelDefinition]):
        entries: Dict[str, ModelInfo] = {}
        for definition in definitions:
            if definition.id in entries:
                raise ConfigurationError(f"Duplicate model identifier: {definition.id}")
            entries[definition.id] = definition.info
        self._entries = MappingProxyType(entries)

    def lookup(self, model_id: str) -> ModelInfo:
        """Get metadata for a model.

        Raises:
            UnknownModelError: If the identifier is not catalogued
        """
        try:
            return self._entries[model_id]
        except KeyError:
            raise UnknownModelError(model_id, self.ids()) from None

    def ids(self) -> List[str]:
        return list(self._entries)

    def as_dict(self) -> Dict[str, dict]:
        """Metadata keyed by identifier, serialized with display field names."""
        return {
            model_id: info.model_dump(by_alias=True)
            for model_id, info in self._entries.items()
        }

    def __getitem__(self, model_id: str) -> ModelInfo:
        return self.lookup(model_id)

    def __contains__(self, model_id: object) -> bool:
        return model_id in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)
