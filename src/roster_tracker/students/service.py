from __future__ import annotations

from typing import List

from ..common.validators import as_text, require_non_empty, require_valid_roll_no, roll_no_hint
from ..reports.model import StudentSummary
from ..reports.service import student_summaries
from ..roster.store import RosterStore
from .model import Semester, Student


class StudentService:
    """Use case: enroll students and list the roster."""

    def __init__(self, store: RosterStore):
        self._store = store

    def enroll(self, *, roll_no: str, name: str, semester: Semester) -> Student:
        roll_no = require_valid_roll_no(as_text(roll_no))
        name = require_non_empty(name, "Name")
        if isinstance(semester, str):
            semester = semester.strip()
        return self._store.enroll_student(roll_no, name, semester)

    def get(self, roll_no: str):
        return self._store.find_student(roll_no)

    def list_students(self) -> List[StudentSummary]:
        return student_summaries(self._store.students, self._store.attendance_logs)

    def dropdown_options(self) -> List[dict]:
        return [{"value": s.roll_no, "label": s.label} for s in self._store.students]

    @staticmethod
    def roll_no_hint(value: str) -> str:
        return roll_no_hint(value)
