from __future__ import annotations

from typing import Dict, Optional


class InMemoryKeyValueStore:
    """Process-local backend, used by the testing settings."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value
