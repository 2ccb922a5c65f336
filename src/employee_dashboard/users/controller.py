from __future__ import annotations

import logging

from flask import Flask, redirect, render_template, request, session, url_for

from ..common.notifications import notify_error, notify_info, notify_success
from ..container import Container
from ..core.exceptions import AuthenticationError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/", methods=["GET", "POST"], endpoint="login")
    def login():
        if "user_id" in session:
            return redirect(url_for("dashboard"))

        if request.method == "POST":
            username = request.form.get("username", "")
            password = request.form.get("password", "")
            remember = request.form.get("remember_me")

            try:
                s_user = container.context.login(username, password)

                session.clear()
                session.permanent = bool(remember)
                session["user_id"] = s_user.user_id
                session["name"] = s_user.full_name
                session["role"] = s_user.role.value

                notify_success("Signed in successfully.")
                return redirect(url_for("dashboard"))
            except AuthenticationError as e:
                notify_error(str(e))
            except Exception:
                logger.exception("login failed unexpectedly")
                notify_error("Something went wrong while signing in.")

        return render_template("login.html")

    @app.route("/logout", endpoint="logout")
    def logout():
        session.clear()
        notify_info("You have been signed out.")
        return redirect(url_for("login"))
