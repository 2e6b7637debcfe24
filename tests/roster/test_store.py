from __future__ import annotations

import json
from datetime import date

import pytest

from roster_tracker.core.enums import AttendanceStatus, ChangeKind
from roster_tracker.core.exceptions import DuplicateRollNoError, InvalidFormatError, StorageError, ValidationError
from roster_tracker.roster.store import RosterStore
from roster_tracker.storage.memory_store import InMemoryKeyValueStore


def test_enroll_then_lookup(store):
    store.enroll_student("A101", "Asha", 3)

    found = store.find_student("A101")
    assert found is not None
    assert found.name == "Asha"
    assert found.semester == 3


def test_duplicate_roll_number_rejected(store):
    store.enroll_student("A101", "Asha", 3)

    with pytest.raises(DuplicateRollNoError, match="already exists"):
        store.enroll_student("A101", "Other", 4)
    assert len(store.students) == 1


def test_duplicate_check_ignores_case(store):
    store.enroll_student("A101", "Asha", 3)

    with pytest.raises(DuplicateRollNoError):
        store.enroll_student("a101", "Other", 4)
    assert len(store.students) == 1
    assert store.find_student("a101").roll_no == "A101"


def test_enroll_persists_snapshot(store, storage):
    store.enroll_student("A101", "Asha", "3")

    assert json.loads(storage.get("students")) == [{"rollNo": "A101", "name": "Asha", "semester": "3"}]
    assert json.loads(storage.get("attendanceLogs")) == []
    assert json.loads(storage.get("performanceLogs")) == []


def test_record_attendance_uses_clock_and_id_factory(store, storage):
    rec = store.record_attendance("A101", "Present")

    assert rec.record_id == "r1"
    assert rec.work_date == date(2026, 3, 2)
    assert rec.status == AttendanceStatus.PRESENT
    assert json.loads(storage.get("attendanceLogs")) == [
        {"id": "r1", "rollNo": "A101", "date": "2026-03-02", "status": "Present"}
    ]


def test_attendance_for_unknown_student_is_recorded(store):
    store.record_attendance("Z999", AttendanceStatus.ABSENT)

    assert len(store.attendance_logs) == 1


def test_same_day_attendance_appends_duplicates(store):
    store.enroll_student("A101", "Asha", 3)
    store.record_attendance("A101", AttendanceStatus.PRESENT)
    store.record_attendance("A101", AttendanceStatus.ABSENT)

    logs = store.attendance_logs
    assert len(logs) == 2
    assert {r.record_id for r in logs} == {"r1", "r2"}


def test_same_day_attendance_replaced_when_configured(storage, clock, ids):
    store = RosterStore(storage, clock=clock, id_factory=ids, replace_same_day_attendance=True)
    store.record_attendance("A101", AttendanceStatus.PRESENT)
    store.record_attendance("a101", AttendanceStatus.ABSENT)

    logs = store.attendance_logs
    assert len(logs) == 1
    assert logs[0].status == AttendanceStatus.ABSENT

    clock.advance(days=1)
    store.record_attendance("A101", AttendanceStatus.PRESENT)
    assert len(store.attendance_logs) == 2


def test_unknown_status_rejected(store):
    with pytest.raises(ValidationError):
        store.record_attendance("A101", "Late")
    assert store.attendance_logs == ()


def test_record_score_coerces_and_keeps_timestamp(store, fixed_now):
    rec = store.record_score("A101", "Math", "87")

    assert rec.score == 87
    assert rec.recorded_at == fixed_now
    assert store.performance_logs[0].subject == "Math"


def test_non_numeric_score_is_rejected_and_not_saved(store, storage):
    with pytest.raises(InvalidFormatError):
        store.record_score("A101", "Math", "abc")

    assert store.performance_logs == ()
    assert storage.get("performanceLogs") is None


def test_score_not_clamped(store):
    assert store.record_score("A101", "Math", 150).score == 150


def test_compute_stats_on_store(store):
    store.enroll_student("A101", "Asha", 1)
    for status in ("Present", "Present", "Absent"):
        store.record_attendance("A101", status)
    for value in (90, 80, 70):
        store.record_score("A101", "Math", value)

    stats = store.compute_stats()
    assert stats.total_students == 1
    assert stats.avg_attendance == 67
    assert stats.at_risk_count == 1
    assert stats.avg_performance == 80


def test_listeners_receive_events_after_save(store, storage):
    seen = []

    def listener(event):
        seen.append((event.kind, event.message, storage.get("students") is not None))

    store.subscribe(listener)
    store.enroll_student("A101", "Asha", 3)
    store.record_attendance("A101", "Absent")
    store.record_attendance("X1", "Present")
    store.record_score("A101", "Physics", 72)

    assert seen == [
        (ChangeKind.STUDENT_ENROLLED, "Added new student: Asha (A101)", True),
        (ChangeKind.ATTENDANCE_RECORDED, "Marked Absent for Asha", True),
        (ChangeKind.ATTENDANCE_RECORDED, "Marked Present for X1", True),
        (ChangeKind.SCORE_RECORDED, "Added marks for Asha in Physics", True),
    ]


def test_failed_mutations_are_not_announced(store):
    seen = []
    store.subscribe(seen.append)
    store.enroll_student("A101", "Asha", 3)

    with pytest.raises(DuplicateRollNoError):
        store.enroll_student("A101", "Asha", 3)
    with pytest.raises(InvalidFormatError):
        store.record_score("A101", "Math", "")

    assert len(seen) == 1


def test_unsubscribe(store):
    seen = []
    unsubscribe = store.subscribe(seen.append)
    unsubscribe()
    unsubscribe()

    store.enroll_student("A101", "Asha", 3)
    assert seen == []


def test_reload_from_storage(store, storage, clock, ids):
    store.enroll_student("A101", "Asha", 3)
    store.record_attendance("A101", "Present")
    store.record_score("A101", "Math", 91)

    reloaded = RosterStore(storage, clock=clock, id_factory=ids)

    assert reloaded.students == store.students
    assert reloaded.attendance_logs == store.attendance_logs
    assert reloaded.performance_logs == store.performance_logs


def test_absent_keys_load_as_empty():
    store = RosterStore(InMemoryKeyValueStore())

    assert store.students == ()
    assert store.attendance_logs == ()
    assert store.performance_logs == ()
    assert store.compute_stats().total_students == 0


def test_loads_snapshot_written_by_browser_build():
    storage = InMemoryKeyValueStore(
        {
            "students": json.dumps([{"rollNo": "101", "name": "Ravi", "semester": "2"}]),
            "attendanceLogs": json.dumps([{"id": 1767000000000, "rollNo": "101", "date": "2026-01-05", "status": "Absent"}]),
            "performanceLogs": json.dumps(
                [{"id": 1767000000001, "rollNo": "101", "subject": "DBMS", "score": 64, "date": "2026-01-05T10:20:30.000Z"}]
            ),
            "null": "null",
        }
    )

    store = RosterStore(storage)

    assert store.attendance_logs[0].record_id == "1767000000000"
    assert store.performance_logs[0].recorded_at.year == 2026
    assert store.compute_stats().at_risk_count == 1


def test_corrupt_snapshot_raises_storage_error():
    with pytest.raises(StorageError):
        RosterStore(InMemoryKeyValueStore({"students": "{not json"}))


def test_non_array_snapshot_raises_storage_error():
    with pytest.raises(StorageError):
        RosterStore(InMemoryKeyValueStore({"students": json.dumps({"rollNo": "A1"})}))


def test_null_snapshot_loads_as_empty():
    assert RosterStore(InMemoryKeyValueStore({"students": "null"})).students == ()


def test_display_name_falls_back_to_roll_no(store):
    store.enroll_student("A101", "Asha", 3)

    assert store.display_name("a101") == "Asha"
    assert store.display_name("Q7") == "Q7"


class FailingStorage(InMemoryKeyValueStore):
    """Raises on writes to the listed keys while armed."""

    def __init__(self, fail_keys=("students", "attendanceLogs", "performanceLogs")):
        super().__init__()
        self.fail_keys = set(fail_keys)
        self.armed = False

    def set(self, key, value):
        if self.armed and key in self.fail_keys:
            raise StorageError(f"disk full writing {key}")
        super().set(key, value)


def test_failed_enroll_is_rolled_back_and_can_be_retried(clock, ids):
    storage = FailingStorage()
    store = RosterStore(storage, clock=clock, id_factory=ids)
    seen = []
    store.subscribe(seen.append)

    storage.armed = True
    with pytest.raises(StorageError):
        store.enroll_student("A101", "Asha", 3)

    assert store.students == ()
    assert storage.get("students") is None
    assert seen == []

    storage.armed = False
    store.enroll_student("A101", "Asha", 3)
    assert len(store.students) == 1


def test_failed_attendance_and_score_are_rolled_back(clock, ids):
    storage = FailingStorage()
    store = RosterStore(storage, clock=clock, id_factory=ids)
    store.record_attendance("A101", "Present")
    store.record_score("A101", "Math", 80)

    storage.armed = True
    with pytest.raises(StorageError):
        store.record_attendance("A101", "Absent")
    with pytest.raises(StorageError):
        store.record_score("A101", "Math", 40)

    assert [r.status for r in store.attendance_logs] == [AttendanceStatus.PRESENT]
    assert [r.score for r in store.performance_logs] == [80]

    storage.armed = False
    store.save()
    assert len(json.loads(storage.get("attendanceLogs"))) == 1
    assert len(json.loads(storage.get("performanceLogs"))) == 1


def test_failed_same_day_replacement_restores_previous_record(clock, ids):
    storage = FailingStorage()
    store = RosterStore(storage, clock=clock, id_factory=ids, replace_same_day_attendance=True)
    first = store.record_attendance("A101", "Present")

    storage.armed = True
    with pytest.raises(StorageError):
        store.record_attendance("A101", "Absent")

    assert store.attendance_logs == (first,)


def test_partial_save_failure_restores_written_slots(clock, ids):
    storage = FailingStorage(fail_keys=("attendanceLogs",))
    store = RosterStore(storage, clock=clock, id_factory=ids)
    storage.armed = True

    with pytest.raises(StorageError, match="attendanceLogs"):
        store.enroll_student("A101", "Asha", 3)

    assert store.students == ()
    assert json.loads(storage.get("students")) == []


def test_failing_listener_does_not_fail_the_mutation(store, storage):
    seen = []

    def broken(event):
        raise RuntimeError("render failed")

    store.subscribe(broken)
    store.subscribe(seen.append)

    student = store.enroll_student("A101", "Asha", 3)

    assert store.students == (student,)
    assert json.loads(storage.get("students"))[0]["rollNo"] == "A101"
    assert len(seen) == 1


def test_null_scores_from_browser_build_are_skipped():
    storage = InMemoryKeyValueStore(
        {
            "students": json.dumps([{"rollNo": "101", "name": "Ravi", "semester": "2"}]),
            "performanceLogs": json.dumps(
                [
                    {"id": 1, "rollNo": "101", "subject": "DBMS", "score": None, "date": "2026-01-05T10:20:30.000Z"},
                    {"id": 2, "rollNo": "101", "subject": "OS", "score": 70, "date": "2026-01-06T10:20:30.000Z"},
                ]
            ),
        }
    )

    store = RosterStore(storage)

    assert [r.record_id for r in store.performance_logs] == ["2"]
    assert store.compute_stats().avg_performance == 70
