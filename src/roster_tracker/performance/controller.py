from __future__ import annotations

from flask import Flask

from ..common.http import domain_error, form_data, internal_error, ok
from ..core.exceptions import DomainError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/marks", methods=["POST"], endpoint="add_marks")
    def add_marks():
        data = form_data()
        try:
            analysis = container.performance_service.add_marks(
                roll_no=data.get("rollNo"),
                subject=data.get("subject", ""),
                score=data.get("score"),
            )
        except DomainError as e:
            return domain_error(e)
        except Exception:
            return internal_error("adding marks")

        if analysis is None:
            return ok({"applied": False})
        return ok({"applied": True, "analysis": analysis.to_dict()})
