from __future__ import annotations

from dataclasses import dataclass

from ..students.model import Semester


@dataclass(frozen=True)
class RosterStats:
    """Dashboard summary; same shape whether or not the roster is empty."""

    total_students: int = 0
    avg_attendance: int = 0
    avg_performance: int = 0
    at_risk_count: int = 0

    def to_dict(self) -> dict:
        return {
            "totalStudents": self.total_students,
            "avgAttendance": self.avg_attendance,
            "avgPerformance": self.avg_performance,
            "atRiskCount": self.at_risk_count,
        }


@dataclass(frozen=True)
class StudentSummary:
    """Read-model for the student listing."""

    roll_no: str
    name: str
    semester: Semester
    present: int
    total: int
    attendance_pct: int
    at_risk: bool

    def to_dict(self) -> dict:
        return {
            "rollNo": self.roll_no,
            "name": self.name,
            "semester": self.semester,
            "present": self.present,
            "total": self.total,
            "attendancePct": self.attendance_pct,
            "atRisk": self.at_risk,
        }
