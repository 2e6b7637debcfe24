from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Union

from ..attendance.model import AttendanceRecord
from ..core.enums import ChangeKind
from ..performance.model import ScoreRecord
from ..students.model import Student


@dataclass(frozen=True)
class StoreEvent:
    """Announced to listeners after a mutation has been saved."""

    kind: ChangeKind
    message: str
    occurred_at: datetime
    record: Union[Student, AttendanceRecord, ScoreRecord]


StoreListener = Callable[[StoreEvent], None]
