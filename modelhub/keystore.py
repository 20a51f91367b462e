"""Persistent key/value store for provider API keys.

Keys are kept in a dotenv-format file so they survive restarts and can be
edited by hand. Subscribers are notified with the name of every key that
changes, whether through this object or by an edit on disk picked up by
``refresh()``.
"""

import logging
from pathlib import Path
from typing import Callable, Dict, List, Optional, Union

from dotenv import dotenv_values, set_key, unset_key

logger = logging.getLogger(__name__)

KeyChangeListener = Callable[[str], None]


class KeyStore:
    """Dotenv file backed key store with change notification."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self._listeners: List[KeyChangeListener] = []
        self._snapshot: Dict[str, Optional[str]] = self._read()

    @property
    def available(self) -> bool:
        """Whether the backing file exists."""
        return self.path.is_file()

    def get(self, key: str) -> Optional[str]:
        """Read a value straight from disk.

        Args:
            key: Key name (e.g., 'OPENAI_API_KEY')

        Returns:
            Stored value or None
        """
        return self._read().get(key)

    def set(self, key: str, value: str) -> None:
        """Store a value and notify subscribers if it changed."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.touch(exist_ok=True)
        set_key(str(self.path), key, value, quote_mode="never")
        logger.debug(f"Stored key {key} in {self.path}")
        self.refresh()

    def unset(self, key: str) -> None:
        """Remove a value and notify subscribers if it was present."""
        if not self.available:
            return
        if key in self._read():
            unset_key(str(self.path), key, quote_mode="never")
            logger.debug(f"Removed key {key} from {self.path}")
        self.refresh()

    def subscribe(self, listener: KeyChangeListener) -> Callable[[], None]:
        """Register a change listener.

        Args:
            listener: Called with the changed key name

        Returns:
            Function that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def refresh(self) -> List[str]:
        """Reload the file and notify subscribers of every changed key.

        A listener that raises is logged and skipped; every other listener
        still sees every changed key.

        Returns:
            Changed key names, in sorted order
        """
        current = self._read()
        changed = sorted(
            key
            for key in set(self._snapshot) | set(current)
            if self._snapshot.get(key) != current.get(key)
        )
        self._snapshot = current
        for key in changed:
            logger.info(f"Key store entry changed: {key}")
            for listener in list(self._listeners):
                try:
                    listener(key)
                except Exception:
                    logger.exception(f"Key store listener failed for {key}")
        return changed

    def _read(self) -> Dict[str, Optional[str]]:
        if not self.available:
            return {}
        return dict(dotenv_values(self.path))
