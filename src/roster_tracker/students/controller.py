from __future__ import annotations

from flask import Flask, request

from ..common.http import domain_error, form_data, internal_error, ok
from ..core.exceptions import DomainError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/students", methods=["GET"], endpoint="list_students")
    def list_students():
        rows = container.student_service.list_students()
        return ok({"students": [r.to_dict() for r in rows]})

    @app.route("/api/students/options", methods=["GET"], endpoint="student_options")
    def student_options():
        return ok({"options": container.student_service.dropdown_options()})

    @app.route("/api/students/validate", methods=["GET"], endpoint="validate_roll_no")
    def validate_roll_no():
        roll_no = request.args.get("roll_no", "")
        hint = container.student_service.roll_no_hint(roll_no)
        return ok({"valid": not hint, "message": hint})

    @app.route("/api/students", methods=["POST"], endpoint="add_student")
    def add_student():
        data = form_data()
        try:
            student = container.student_service.enroll(
                roll_no=data.get("rollNo", ""),
                name=data.get("name", ""),
                semester=data.get("semester", ""),
            )
        except DomainError as e:
            return domain_error(e)
        except Exception:
            return internal_error("adding student")

        return ok({"message": "Student added successfully!", "student": student.to_dict()}, 201)
