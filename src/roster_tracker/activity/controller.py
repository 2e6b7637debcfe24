from __future__ import annotations

from flask import Flask

from ..common.http import ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/activity", methods=["GET"], endpoint="activity")
    def activity():
        return ok({"entries": [e.to_dict() for e in container.activity_feed.entries]})
