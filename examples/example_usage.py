"""Example: drive the service layer directly (no Flask).

Controllers are a thin layer; the rules live in the store and the services.
"""

import importlib

from config import get_settings_module

from roster_tracker.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(storage_config=settings.STORAGE_CONFIG)
    print(container.store.compute_stats().to_dict())
    for row in container.student_service.list_students():
        print(row.to_dict())


if __name__ == "__main__":
    main()
