from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Attendance status as stored in the snapshot."""

    PRESENT = "Present"
    ABSENT = "Absent"


class ChangeKind(str, Enum):
    """Kind of mutation announced by the store to its listeners."""

    STUDENT_ENROLLED = "STUDENT_ENROLLED"
    ATTENDANCE_RECORDED = "ATTENDANCE_RECORDED"
    SCORE_RECORDED = "SCORE_RECORDED"


class ErrorCode(str, Enum):
    INVALID_FORMAT = "INVALID_FORMAT"
    DUPLICATE_ROLL_NO = "DUPLICATE_ROLL_NO"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"
