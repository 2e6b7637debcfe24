from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

from .activity.feed import ActivityFeed
from .attendance.service import AttendanceService
from .common.datetime_utils import now_local
from .core.exceptions import StorageError
from .performance.service import PerformanceService
from .roster.store import RosterStore, new_record_id
from .storage.file_store import JsonFileKeyValueStore
from .storage.memory_store import InMemoryKeyValueStore
from .storage.repository import KeyValueStore
from .students.service import StudentService


@dataclass(frozen=True)
class Container:
    storage: KeyValueStore
    store: RosterStore
    activity_feed: ActivityFeed

    student_service: StudentService
    attendance_service: AttendanceService
    performance_service: PerformanceService


def build_storage(storage_config: dict) -> KeyValueStore:
    backend = str(storage_config.get("backend", "file")).lower()
    if backend == "memory":
        return InMemoryKeyValueStore()
    if backend == "file":
        dir_path = storage_config.get("dir")
        if not dir_path:
            raise StorageError("STORAGE_DIR is required for the file backend")
        return JsonFileKeyValueStore(dir_path)
    raise StorageError(f"Unknown storage backend: {backend!r}")


def build_container(
    *,
    storage_config: dict,
    replace_same_day_attendance: bool = False,
    storage: Optional[KeyValueStore] = None,
    clock: Callable[[], datetime] = now_local,
    id_factory: Callable[[], str] = new_record_id,
) -> Container:
    storage = storage if storage is not None else build_storage(storage_config)
    store = RosterStore(
        storage,
        clock=clock,
        id_factory=id_factory,
        replace_same_day_attendance=replace_same_day_attendance,
    )

    activity_feed = ActivityFeed()
    store.subscribe(activity_feed.handle)

    return Container(
        storage=storage,
        store=store,
        activity_feed=activity_feed,
        student_service=StudentService(store),
        attendance_service=AttendanceService(store),
        performance_service=PerformanceService(store),
    )
