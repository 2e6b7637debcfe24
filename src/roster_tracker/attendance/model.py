from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..common.datetime_utils import parse_iso_date
from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one attendance mark for one student on one day."""

    record_id: str
    roll_no: str
    work_date: date
    status: AttendanceStatus

    @property
    def is_present(self) -> bool:
        return self.status == AttendanceStatus.PRESENT

    def to_dict(self) -> dict:
        return {
            "id": self.record_id,
            "rollNo": self.roll_no,
            "date": self.work_date.isoformat(),
            "status": self.status.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "AttendanceRecord":
        # Older snapshots carry millisecond timestamps as ids.
        return cls(
            record_id=str(data["id"]),
            roll_no=str(data["rollNo"]),
            work_date=parse_iso_date(data["date"]),
            status=AttendanceStatus(data["status"]),
        )
