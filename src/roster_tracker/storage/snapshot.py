"""JSON codec between the key-value slots and the in-memory collections."""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, List, Optional, Sequence, TypeVar

from ..core.exceptions import StorageError
from .repository import KeyValueStore

logger = logging.getLogger(__name__)

T = TypeVar("T")


def load_collection(
    storage: KeyValueStore,
    key: str,
    from_dict: Callable[[dict], T],
    *,
    skip_reason: Optional[Callable[[dict], Optional[str]]] = None,
) -> List[T]:
    """Read one slot; an absent key is an empty collection, not an error.

    ``skip_reason`` lets a record type drop known-unusable entries (with a
    warning) instead of failing the whole load.
    """
    raw = storage.get(key)
    if raw is None or not raw.strip():
        return []

    try:
        items = json.loads(raw)
    except json.JSONDecodeError as e:
        raise StorageError(f"Snapshot {key!r} is not valid JSON: {e}") from e

    # localStorage.setItem(key, JSON.stringify(null)) leaves "null" behind
    if items is None:
        return []
    if not isinstance(items, list):
        raise StorageError(f"Snapshot {key!r} must be a JSON array, got {type(items).__name__}")

    out: List[T] = []
    try:
        for i, item in enumerate(items):
            reason = skip_reason(item) if skip_reason and isinstance(item, dict) else None
            if reason:
                logger.warning("skipping %s[%d]: %s", key, i, reason)
                continue
            out.append(from_dict(item))
    except (KeyError, TypeError, ValueError) as e:
        raise StorageError(f"Snapshot {key!r} has a malformed record: {e}") from e
    return out


def dump_collection(records: Sequence[Any]) -> str:
    return json.dumps([r.to_dict() for r in records], ensure_ascii=False)


def save_collection(storage: KeyValueStore, key: str, records: Sequence[Any]) -> None:
    storage.set(key, dump_collection(records))
