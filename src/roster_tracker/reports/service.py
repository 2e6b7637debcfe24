from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..common.numbers import percentage, round_half_up
from ..common.validators import normalize_roll_no
from ..core.constants import AT_RISK_THRESHOLD
from ..performance.model import ScoreRecord
from ..students.model import Student
from .model import RosterStats, StudentSummary


@dataclass
class _Tally:
    present: int = 0
    total: int = 0

    @property
    def ratio_pct(self) -> float:
        return 100 * self.present / self.total if self.total else 0.0


def _tally_attendance(records: Sequence[AttendanceRecord]) -> Dict[str, _Tally]:
    tallies: Dict[str, _Tally] = {}
    for r in records:
        t = tallies.setdefault(normalize_roll_no(r.roll_no), _Tally())
        t.total += 1
        if r.is_present:
            t.present += 1
    return tallies


def _is_at_risk(tally: Optional[_Tally]) -> bool:
    # No records means no data, not a failing student.
    if tally is None or tally.total == 0:
        return False
    return tally.ratio_pct < AT_RISK_THRESHOLD


def compute_stats(
    students: Sequence[Student],
    attendance: Sequence[AttendanceRecord],
    scores: Sequence[ScoreRecord],
) -> RosterStats:
    """Aggregate the dashboard numbers from scratch.

    Attendance is averaged over all records (not per student), so records for
    roll numbers that are not on the roster still count. Same for scores.
    """
    total_students = len(students)
    if total_students == 0:
        return RosterStats()

    tallies = _tally_attendance(attendance)
    total_present = sum(t.present for t in tallies.values())
    avg_attendance = percentage(total_present, len(attendance))

    at_risk = sum(1 for s in students if _is_at_risk(tallies.get(normalize_roll_no(s.roll_no))))

    avg_performance = round_half_up(sum(r.score for r in scores) / len(scores)) if scores else 0

    return RosterStats(
        total_students=total_students,
        avg_attendance=avg_attendance,
        avg_performance=avg_performance,
        at_risk_count=at_risk,
    )


def student_summaries(students: Sequence[Student], attendance: Sequence[AttendanceRecord]) -> List[StudentSummary]:
    tallies = _tally_attendance(attendance)
    out: List[StudentSummary] = []
    for s in students:
        t = tallies.get(normalize_roll_no(s.roll_no)) or _Tally()
        out.append(
            StudentSummary(
                roll_no=s.roll_no,
                name=s.name,
                semester=s.semester,
                present=t.present,
                total=t.total,
                attendance_pct=percentage(t.present, t.total),
                at_risk=_is_at_risk(t),
            )
        )
    return out
