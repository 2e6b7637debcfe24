from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import parse_iso_datetime


@dataclass(frozen=True)
class ScoreRecord:
    """Domain entity: marks scored by a student in one subject."""

    record_id: str
    roll_no: str
    subject: str
    score: int
    recorded_at: datetime

    def to_dict(self) -> dict:
        return {
            "id": self.record_id,
            "rollNo": self.roll_no,
            "subject": self.subject,
            "score": self.score,
            "date": self.recorded_at.isoformat(),
        }

    @staticmethod
    def skip_reason(data: dict) -> Optional[str]:
        # JSON.stringify(NaN) wrote null scores in the browser build
        if data.get("score") is None:
            return "score is null"
        return None

    @classmethod
    def from_dict(cls, data: dict) -> "ScoreRecord":
        return cls(
            record_id=str(data["id"]),
            roll_no=str(data["rollNo"]),
            subject=str(data.get("subject", "")),
            score=int(data["score"]),
            recorded_at=parse_iso_datetime(data["date"]),
        )
