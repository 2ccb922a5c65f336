from __future__ import annotations

import logging
from dataclasses import replace
from typing import Iterable, Mapping, Optional, Sequence

from ..common.datetime_utils import parse_optional_date
from ..common.validators import (
    optional_aadhar,
    optional_pan,
    require_email,
    require_non_empty,
    require_non_negative_number,
)
from ..core.exceptions import NotFoundError, ValidationError
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


def filter_employees(employees: Iterable[Employee], query: Optional[str]) -> list[Employee]:
    """Employees whose name or department contains ``query``, ignoring case.

    An empty query keeps every employee. Order is preserved.
    """
    needle = (query or "").lower()
    if not needle:
        return list(employees)

    out: list[Employee] = []
    for employee in employees:
        name = (employee.name or "").lower()
        department = (employee.department or "").lower()
        if needle in name or needle in department:
            out.append(employee)
    return out


def _optional_text(value) -> Optional[str]:
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def clean_employee_fields(data: Mapping, *, image: Optional[str] = None) -> dict:
    """Validate raw form/JSON values into Employee keyword fields (without id)."""
    try:
        salary_date = parse_optional_date(data.get("salary_date"))
    except ValueError:
        raise ValidationError("Salary date must be in YYYY-MM-DD format")

    return {
        "name": require_non_empty(data.get("name"), "Name"),
        "email": require_email(data.get("email")),
        "mobile": _optional_text(data.get("mobile")),
        "aadhar": optional_aadhar(data.get("aadhar")),
        "pan_card": optional_pan(data.get("pan_card")),
        "job_role": _optional_text(data.get("job_role")),
        "department": _optional_text(data.get("department")),
        "salary": require_non_negative_number(data.get("salary") or 0, "Salary"),
        "salary_date": salary_date,
        "image": image if image is not None else _optional_text(data.get("image")),
    }


class EmployeeService:
    """Use cases: list, add, edit and delete employees."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def list_employees(self, query: Optional[str] = None) -> Sequence[Employee]:
        return filter_employees(self._employees.list_all(), query)

    def get_employee(self, employee_id: int) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError("Employee not found")
        return employee

    def add_employee(self, data: Mapping, *, image: Optional[str] = None) -> Employee:
        fields = clean_employee_fields(data, image=image)
        employee = self._employees.create(fields)
        logger.info("employee added id=%s name=%r", employee.id, employee.name)
        return employee

    def update_employee(self, employee_id: int, data: Mapping, *, image: Optional[str] = None) -> Employee:
        current = self.get_employee(employee_id)
        fields = clean_employee_fields(data, image=image)
        if fields["image"] is None:
            # no new upload keeps the current picture
            fields["image"] = current.image

        updated = replace(current, **fields)
        if not self._employees.replace(updated):
            raise NotFoundError("Employee not found")
        logger.info("employee updated id=%s", updated.id)
        return updated

    def delete_employee(self, employee_id: int) -> Employee:
        employee = self.get_employee(employee_id)
        if not self._employees.delete_by_id(employee.id):
            raise NotFoundError("Employee not found")
        logger.info("employee deleted id=%s name=%r", employee.id, employee.name)
        return employee
