from __future__ import annotations

import logging
from pathlib import Path

from flask import (
    Flask,
    jsonify,
    redirect,
    render_template,
    request,
    send_file,
    send_from_directory,
    session,
    url_for,
)
from werkzeug.exceptions import RequestEntityTooLarge

from ..common.decorators import admin_required, login_required
from ..common.notifications import notify_error, notify_success
from ..container import Container
from ..core.constants import UPLOAD_URL_PREFIX
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, DomainError, NotFoundError, ValidationError
from .export import XLSX_MIMETYPE, employees_to_xlsx
from .images import discard_employee_image, save_employee_image

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    context = container.context

    def _upload_dir() -> Path:
        return Path(app.config["UPLOAD_DIR"])

    def _max_upload_bytes() -> int:
        return int(app.config.get("MAX_UPLOAD_MB", 5)) * 1024 * 1024

    def _back_to_list():
        q = request.args.get("q") or request.form.get("q") or ""
        return redirect(url_for("employees", q=q) if q else url_for("employees"))

    @app.route("/dashboard/employees", endpoint="employees")
    @login_required
    def employees():
        query = request.args.get("q", "")
        items = context.search_employees(query)
        return render_template(
            "employees/list.html",
            employees=items,
            search_query=query,
            total=len(context.employees),
            active_page="employees",
        )

    @app.route("/dashboard/employees/add", methods=["GET", "POST"], endpoint="add_employee")
    @admin_required
    def add_employee():
        if request.method == "POST":
            image = None
            try:
                image = save_employee_image(request.files.get("image"), _upload_dir(), max_bytes=_max_upload_bytes())
                employee = context.add_employee(request.form, image=image)
                notify_success(f"Employee {employee.name} added.")
                return redirect(url_for("employees"))
            except ValidationError as e:
                discard_employee_image(image, _upload_dir())
                notify_error(str(e))
            except Exception as e:
                logger.exception("adding employee failed")
                discard_employee_image(image, _upload_dir())
                notify_error("Error adding employee.", e)

        return render_template(
            "employees/form.html",
            employee=None,
            form=request.form,
            departments=context.departments,
            active_page="employees",
        )

    @app.route("/dashboard/employees/<int:employee_id>/edit", methods=["GET", "POST"], endpoint="edit_employee")
    @admin_required
    def edit_employee(employee_id: int):
        try:
            employee = context.get_employee(employee_id)
        except NotFoundError as e:
            notify_error(str(e))
            return redirect(url_for("employees"))

        if request.method == "POST":
            previous_image = employee.image
            image = None
            try:
                image = save_employee_image(request.files.get("image"), _upload_dir(), max_bytes=_max_upload_bytes())
                employee = context.update_employee(employee_id, request.form, image=image)
            except DomainError as e:
                discard_employee_image(image, _upload_dir())
                notify_error(str(e))
            except Exception as e:
                logger.exception("updating employee %s failed", employee_id)
                discard_employee_image(image, _upload_dir())
                notify_error("Error updating employee.", e)
            else:
                if image and previous_image != image:
                    discard_employee_image(previous_image, _upload_dir())
                notify_success(f"Employee {employee.name} updated.")
                return redirect(url_for("employees"))

        return render_template(
            "employees/form.html",
            employee=employee,
            form=request.form,
            departments=context.departments,
            active_page="employees",
        )

    @app.route("/dashboard/employees/<int:employee_id>/delete", methods=["POST"], endpoint="delete_employee")
    @admin_required
    def delete_employee(employee_id: int):
        try:
            removed = context.delete_employee(employee_id)
        except DomainError as e:
            notify_error(f"Error deleting employee: {e}", e)
        except Exception as e:
            logger.exception("deleting employee %s failed", employee_id)
            notify_error("Error deleting employee.", e)
        else:
            discard_employee_image(removed.image, _upload_dir())
            notify_success("Employee deleted successfully.")

        return _back_to_list()

    @app.errorhandler(RequestEntityTooLarge)
    def upload_too_large(e):
        notify_error(f"Image is larger than {int(app.config.get('MAX_UPLOAD_MB', 5))} MB", e)
        return redirect(request.url)

    @app.route("/dashboard/employees/export", endpoint="export_employees")
    @admin_required
    def export_employees():
        output = employees_to_xlsx(context.employees)
        return send_file(output, download_name="employees.xlsx", as_attachment=True, mimetype=XLSX_MIMETYPE)

    @app.route(f"/{UPLOAD_URL_PREFIX}/<path:filename>", endpoint="uploaded_image")
    @login_required
    def uploaded_image(filename: str):
        return send_from_directory(_upload_dir(), filename)

    @app.route("/api/employees", endpoint="api_employees")
    @login_required
    def api_employees():
        items = context.search_employees(request.args.get("q", ""))
        return jsonify({"employees": [e.to_dict() for e in items]})

    @app.route("/api/employees/<int:employee_id>", methods=["GET", "DELETE"], endpoint="api_employee")
    @login_required
    def api_employee(employee_id: int):
        try:
            if request.method == "DELETE":
                if session.get("role") != Role.ADMIN.value:
                    raise AuthorizationError("Only administrators can delete employees")
                removed = context.delete_employee(employee_id)
                discard_employee_image(removed.image, _upload_dir())
                return jsonify({"success": True, "employee": removed.to_dict()})

            return jsonify({"success": True, "employee": context.get_employee(employee_id).to_dict()})
        except AuthorizationError as e:
            return jsonify({"success": False, "error": str(e)}), 403
        except NotFoundError as e:
            return jsonify({"success": False, "error": str(e)}), 404
        except DomainError as e:
            return jsonify({"success": False, "error": str(e)}), 400
