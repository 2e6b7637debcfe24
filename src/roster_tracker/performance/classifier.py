from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple


@dataclass(frozen=True)
class GradeRemark:
    grade: str
    remark: str


# Highest threshold first; the first band the score reaches wins.
GRADE_LADDER: Sequence[Tuple[int, GradeRemark]] = (
    (90, GradeRemark("O", "Outstanding performance! Consistent excellence.")),
    (80, GradeRemark("A+", "Excellent work. Keep maintaining this standard.")),
    (70, GradeRemark("A", "Good performance, but there is room for optimization.")),
    (60, GradeRemark("B", "Above average. Needs more focus on core concepts.")),
    (50, GradeRemark("C", "Average. Requires consistent practice to improve.")),
)
FAILING = GradeRemark("F", "Critical: Needs Improvement. Recommend remedial sessions.")


def classify(score: int) -> GradeRemark:
    """Map a score to its grade and feedback remark.

    Scores are not clamped: 150 is still an "O" and -20 an "F".
    """
    for threshold, result in GRADE_LADDER:
        if score >= threshold:
            return result
    return FAILING
