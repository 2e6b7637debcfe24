"""The roster store: single owner and writer of all tracker state.

Students, attendance records and score records live in memory and are written
back to the key-value store as three whole JSON snapshots after every
mutation. Listeners are told about each change once the snapshot is saved, so
whatever renders the data can recompute from current state.
"""

from __future__ import annotations

import logging
import uuid
from datetime import datetime
from typing import Callable, List, Optional, Tuple, Union

from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import now_local
from ..common.validators import normalize_roll_no, parse_score
from ..core.constants import ATTENDANCE_KEY, PERFORMANCE_KEY, STUDENTS_KEY
from ..core.enums import AttendanceStatus, ChangeKind
from ..core.exceptions import DuplicateRollNoError, StorageError, ValidationError
from ..performance.model import ScoreRecord
from ..reports.model import RosterStats
from ..reports.service import compute_stats
from ..storage.repository import KeyValueStore
from ..storage.snapshot import load_collection, save_collection
from ..students.model import Semester, Student
from .events import StoreEvent, StoreListener

logger = logging.getLogger(__name__)

DUPLICATE_ROLL_NO_MESSAGE = "Roll No already exists."


def new_record_id() -> str:
    return uuid.uuid4().hex


class RosterStore:
    def __init__(
        self,
        storage: KeyValueStore,
        *,
        clock: Callable[[], datetime] = now_local,
        id_factory: Callable[[], str] = new_record_id,
        replace_same_day_attendance: bool = False,
    ):
        self._storage = storage
        self._clock = clock
        self._new_id = id_factory
        self._replace_same_day = bool(replace_same_day_attendance)
        self._listeners: List[StoreListener] = []

        self._students: List[Student] = load_collection(storage, STUDENTS_KEY, Student.from_dict)
        self._attendance: List[AttendanceRecord] = load_collection(storage, ATTENDANCE_KEY, AttendanceRecord.from_dict)
        self._scores: List[ScoreRecord] = load_collection(
            storage, PERFORMANCE_KEY, ScoreRecord.from_dict, skip_reason=ScoreRecord.skip_reason
        )

        logger.debug(
            "loaded roster snapshot: %d students, %d attendance, %d scores",
            len(self._students),
            len(self._attendance),
            len(self._scores),
        )

    # --- queries ---

    @property
    def students(self) -> Tuple[Student, ...]:
        return tuple(self._students)

    @property
    def attendance_logs(self) -> Tuple[AttendanceRecord, ...]:
        return tuple(self._attendance)

    @property
    def performance_logs(self) -> Tuple[ScoreRecord, ...]:
        return tuple(self._scores)

    def find_student(self, roll_no: str) -> Optional[Student]:
        key = normalize_roll_no(roll_no)
        for s in self._students:
            if normalize_roll_no(s.roll_no) == key:
                return s
        return None

    def display_name(self, roll_no: str) -> str:
        """Student name, or the raw roll number when nobody is enrolled under it."""
        student = self.find_student(roll_no)
        return student.name if student else roll_no

    def compute_stats(self) -> RosterStats:
        return compute_stats(self._students, self._attendance, self._scores)

    # --- change notification ---

    def subscribe(self, listener: StoreListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, kind: ChangeKind, message: str, record) -> None:
        event = StoreEvent(kind=kind, message=message, occurred_at=self._clock(), record=record)
        for listener in list(self._listeners):
            # Already saved; listener failures are logged, not raised.
            try:
                listener(event)
            except Exception:
                logger.exception("listener %r failed on %s", listener, kind.value)

    # --- persistence ---

    def save(self) -> None:
        save_collection(self._storage, STUDENTS_KEY, self._students)
        save_collection(self._storage, ATTENDANCE_KEY, self._attendance)
        save_collection(self._storage, PERFORMANCE_KEY, self._scores)
        logger.debug("saved roster snapshot")

    def _commit(self, undo: Callable[[], None]) -> None:
        """Save, or undo the in-memory change and put the previous snapshot back."""
        try:
            self.save()
        except StorageError:
            undo()
            try:
                self.save()
            except StorageError:
                logger.exception("could not restore roster snapshot after failed save")
            raise

    # --- mutations ---

    def enroll_student(self, roll_no: str, name: str, semester: Semester) -> Student:
        """Append a student; the roll number must be unique ignoring case.

        Format checks belong to the caller (see ``common.validators``).
        """
        if self.find_student(roll_no) is not None:
            raise DuplicateRollNoError(DUPLICATE_ROLL_NO_MESSAGE)

        student = Student(roll_no=roll_no, name=name, semester=semester)
        self._students.append(student)
        self._commit(self._students.pop)

        message = f"Added new student: {student.name} ({student.roll_no})"
        logger.info(message)
        self._notify(ChangeKind.STUDENT_ENROLLED, message, student)
        return student

    def record_attendance(self, roll_no: str, status: Union[AttendanceStatus, str]) -> AttendanceRecord:
        """Mark a student present/absent for today.

        The roll number is not checked against the roster. A second mark for the
        same student and day is appended unless the store was built with
        ``replace_same_day_attendance``.
        """
        try:
            status = AttendanceStatus(status)
        except ValueError:
            raise ValidationError(f"Unknown attendance status: {status!r}")

        record = AttendanceRecord(
            record_id=self._new_id(),
            roll_no=roll_no,
            work_date=self._clock().date(),
            status=status,
        )

        index = self._same_day_index(record) if self._replace_same_day else None
        if index is None:
            self._attendance.append(record)
            self._commit(self._attendance.pop)
        else:
            previous = self._attendance[index]
            self._attendance[index] = record

            def restore() -> None:
                self._attendance[index] = previous

            self._commit(restore)

        message = f"Marked {status.value} for {self.display_name(roll_no)}"
        logger.info(message)
        self._notify(ChangeKind.ATTENDANCE_RECORDED, message, record)
        return record

    def _same_day_index(self, record: AttendanceRecord) -> Optional[int]:
        key = normalize_roll_no(record.roll_no)
        for i, r in enumerate(self._attendance):
            if r.work_date == record.work_date and normalize_roll_no(r.roll_no) == key:
                return i
        return None

    def record_score(self, roll_no: str, subject: str, score) -> ScoreRecord:
        """Append marks; non-numeric scores raise ``InvalidFormatError``, nothing is clamped."""
        record = ScoreRecord(
            record_id=self._new_id(),
            roll_no=roll_no,
            subject=subject,
            score=parse_score(score),
            recorded_at=self._clock(),
        )
        self._scores.append(record)
        self._commit(self._scores.pop)

        message = f"Added marks for {self.display_name(roll_no)} in {subject}"
        logger.info(message)
        self._notify(ChangeKind.SCORE_RECORDED, message, record)
        return record
