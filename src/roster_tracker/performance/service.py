from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..common.validators import as_text, parse_score
from ..roster.store import RosterStore
from .classifier import classify
from .model import ScoreRecord


@dataclass(frozen=True)
class ScoreAnalysis:
    """Feedback shown after marks are entered; never persisted."""

    record: ScoreRecord
    student_name: str
    grade: str
    remark: str

    def to_dict(self) -> dict:
        return {
            "record": self.record.to_dict(),
            "studentName": self.student_name,
            "score": self.record.score,
            "grade": self.grade,
            "remark": self.remark,
        }


class PerformanceService:
    def __init__(self, store: RosterStore):
        self._store = store

    def add_marks(self, *, roll_no: Optional[str], subject: str, score) -> Optional[ScoreAnalysis]:
        roll_no = as_text(roll_no)
        if not roll_no:
            return None

        value = parse_score(score)
        record = self._store.record_score(roll_no, as_text(subject), value)
        insight = classify(record.score)
        return ScoreAnalysis(
            record=record,
            student_name=self._store.display_name(roll_no),
            grade=insight.grade,
            remark=insight.remark,
        )
