from __future__ import annotations

from flask import Flask, jsonify, render_template

from ..common.decorators import login_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/dashboard", endpoint="dashboard")
    @login_required
    def dashboard():
        summary = container.dashboard_service.build_summary()
        return render_template("dashboard/overview.html", summary=summary, active_page="dashboard")

    @app.route("/api/dashboard/summary", endpoint="api_dashboard_summary")
    @login_required
    def api_dashboard_summary():
        return jsonify(container.dashboard_service.build_summary().to_dict())
