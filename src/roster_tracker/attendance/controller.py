from __future__ import annotations

from flask import Flask

from ..common.http import domain_error, form_data, internal_error, ok
from ..core.exceptions import DomainError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance", methods=["POST"], endpoint="mark_attendance")
    def mark_attendance():
        data = form_data()
        try:
            record = container.attendance_service.mark(data.get("rollNo"), data.get("status"))
        except DomainError as e:
            return domain_error(e)
        except Exception:
            return internal_error("marking attendance")

        if record is None:
            return ok({"applied": False})
        return ok({"applied": True, "message": "Attendance marked!", "record": record.to_dict()})
