from __future__ import annotations

from dataclasses import dataclass
from typing import Union

Semester = Union[int, str]


@dataclass(frozen=True)
class Student:
    """Domain entity: Student on the roster.

    Note: Plain data object. The roll number keeps the spelling it was enrolled
    with; comparisons go through ``common.validators.normalize_roll_no``.
    """

    roll_no: str
    name: str
    semester: Semester = ""

    @property
    def label(self) -> str:
        return f"{self.name} ({self.roll_no})"

    def to_dict(self) -> dict:
        return {"rollNo": self.roll_no, "name": self.name, "semester": self.semester}

    @classmethod
    def from_dict(cls, data: dict) -> "Student":
        return cls(
            roll_no=str(data["rollNo"]),
            name=str(data["name"]),
            semester=data.get("semester", ""),
        )
