from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import List

from ..roster.events import StoreEvent


@dataclass(frozen=True)
class ActivityEntry:
    timestamp: datetime
    text: str

    def to_dict(self) -> dict:
        return {"time": self.timestamp.strftime("%H:%M:%S"), "text": self.text}


class ActivityFeed:
    """Most-recent-first log of successful mutations.

    Kept in memory only; it starts empty on every process start. Subscribe it
    to a ``RosterStore`` with ``store.subscribe(feed.handle)``.
    """

    def __init__(self):
        self._entries: List[ActivityEntry] = []

    def handle(self, event: StoreEvent) -> None:
        self._entries.insert(0, ActivityEntry(timestamp=event.occurred_at, text=event.message))

    @property
    def entries(self) -> List[ActivityEntry]:
        return list(self._entries)

    def is_empty(self) -> bool:
        return not self._entries

    def __len__(self) -> int:
        return len(self._entries)
