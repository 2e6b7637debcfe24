from __future__ import annotations

from typing import Optional, Protocol


class KeyValueStore(Protocol):
    """Generic string key-value store the roster snapshots are written to.

    Note (DIP): the store depends on this interface, not on a concrete backend.
    """

    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set(self, key: str, value: str) -> None:
        raise NotImplementedError
