"""Enroll a few demo students into the configured storage.

Students whose roll number is already on the roster are skipped.
"""

from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for p in (REPO_ROOT, REPO_ROOT / "src"):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))

from config import get_settings_module

from roster_tracker.container import build_container
from roster_tracker.core.exceptions import DuplicateRollNoError

DEMO_STUDENTS = [
    ("A101", "Aarav Sharma", 3),
    ("A102", "Diya Patel", 3),
    ("A103", "Kabir Singh", 3),
    ("B201", "Meera Iyer", 5),
    ("B202", "Rohan Das", 5),
]


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    container = build_container(storage_config=dict(settings.STORAGE_CONFIG))

    added = 0
    for roll_no, name, semester in DEMO_STUDENTS:
        try:
            container.student_service.enroll(roll_no=roll_no, name=name, semester=semester)
            added += 1
        except DuplicateRollNoError:
            continue

    print(f"OK: Seeded roster -> {settings.STORAGE_CONFIG} (added={added}, total={len(container.store.students)})")


if __name__ == "__main__":
    main()
