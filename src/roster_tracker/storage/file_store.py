from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional, Union

from ..core.exceptions import StorageError

logger = logging.getLogger(__name__)


class JsonFileKeyValueStore:
    """One ``<key>.json`` file per slot inside a directory.

    Writes go to a temporary file first and are then renamed over the slot, so
    a crash mid-save leaves the previous snapshot readable.
    """

    def __init__(self, dir_path: Union[str, Path]):
        self._dir = Path(dir_path)

    @property
    def path(self) -> Path:
        return self._dir

    def _slot(self, key: str) -> Path:
        if not key or os.sep in key or key.startswith("."):
            raise StorageError(f"Invalid storage key: {key!r}")
        return self._dir / f"{key}.json"

    def get(self, key: str) -> Optional[str]:
        slot = self._slot(key)
        if not slot.exists():
            return None
        try:
            return slot.read_text(encoding="utf-8")
        except OSError as e:
            raise StorageError(f"Cannot read {slot}: {e}") from e

    def set(self, key: str, value: str) -> None:
        slot = self._slot(key)
        tmp = slot.with_name(slot.name + ".tmp")
        try:
            self._dir.mkdir(parents=True, exist_ok=True)
            tmp.write_text(value, encoding="utf-8")
            os.replace(tmp, slot)
        except OSError as e:
            raise StorageError(f"Cannot write {slot}: {e}") from e
        logger.debug("wrote %s (%d bytes)", slot, len(value))
