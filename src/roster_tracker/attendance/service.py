from __future__ import annotations

from typing import Optional, Union

from ..common.validators import as_text
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from ..roster.store import RosterStore
from .model import AttendanceRecord


class AttendanceService:
    def __init__(self, store: RosterStore):
        self._store = store

    def mark(self, roll_no: Optional[str], status: Union[AttendanceStatus, str, None]) -> Optional[AttendanceRecord]:
        """Record today's status for the selected student.

        No selection is a no-op and returns None.
        """
        roll_no = as_text(roll_no)
        if not roll_no:
            return None

        try:
            status = AttendanceStatus(status)
        except ValueError:
            raise ValidationError("Status must be Present or Absent")

        return self._store.record_attendance(roll_no, status)
