"""Dashboard aggregation.

Pure functions over the raw collections, plus ``DashboardService`` which reads
the collections from the context and assembles one ``DashboardSummary``.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Iterable, Optional
from zoneinfo import ZoneInfo

from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import format_us_date, last_n_days, now_local, to_local_date, weekday_short
from ..core.constants import ATTENDANCE_GRAPH_COLOR, DASHBOARD_WINDOW_DAYS, LEAVE_GRAPH_COLOR
from ..core.enums import AttendanceType, LeaveStatus
from ..employees.model import Employee
from ..leaves.model import Leave


@dataclass(frozen=True)
class DayLabel:
    date: date
    full_date: str
    day: str


@dataclass(frozen=True)
class DashboardSummary:
    total_salary: float
    total_salary_in_month: float
    total_employees: int
    total_departments: int
    approved_leaves: int
    pending_leaves: int
    rejected_leaves: int
    last_7_days: list[DayLabel] = field(default_factory=list)
    leave_graph: dict = field(default_factory=dict)
    attendance_graph: dict = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "total_salary": self.total_salary,
            "total_salary_in_month": self.total_salary_in_month,
            "total_employees": self.total_employees,
            "total_departments": self.total_departments,
            "leaves": {
                "approved": self.approved_leaves,
                "pending": self.pending_leaves,
                "rejected": self.rejected_leaves,
            },
            "last_7_days": [{"full_date": d.full_date, "day": d.day} for d in self.last_7_days],
            "leave_graph": self.leave_graph,
            "attendance_graph": self.attendance_graph,
        }


def day_labels(today: date, n: int = DASHBOARD_WINDOW_DAYS) -> list[DayLabel]:
    return [DayLabel(date=d, full_date=format_us_date(d), day=weekday_short(d)) for d in last_n_days(today, n)]


def total_salary(employees: Iterable[Employee]) -> float:
    return sum(emp.salary or 0 for emp in employees)


def total_salary_in_month(employees: Iterable[Employee], today: date) -> float:
    """Salaries whose salary date falls in the same month as ``today``, any year."""
    total = 0.0
    for emp in employees:
        paid_on = emp.salary_date
        if paid_on is None:
            continue
        if paid_on.month == today.month:
            total += emp.salary or 0
    return total


def count_leaves_by_status(leaves: Iterable[Leave]) -> dict[LeaveStatus, int]:
    counts = {status: 0 for status in LeaveStatus}
    for leave in leaves:
        try:
            status = LeaveStatus(leave.status)
        except ValueError:
            continue
        counts[status] += 1
    return counts


def group_attendance_counts(
    records: Iterable[AttendanceRecord], tz: Optional[ZoneInfo] = None
) -> dict[AttendanceType, dict[date, int]]:
    """Count records per attendance type and calendar date.

    Records with any other type are ignored.
    """
    grouped: dict[AttendanceType, dict[date, int]] = {kind: {} for kind in AttendanceType}
    for record in records:
        try:
            kind = AttendanceType(record.type)
        except ValueError:
            continue
        day = to_local_date(record.date, tz)
        bucket = grouped[kind]
        bucket[day] = bucket.get(day, 0) + 1
    return grouped


def leave_graph_data(days: list[DayLabel], grouped: dict[AttendanceType, dict[date, int]]) -> dict:
    leave_counts = grouped.get(AttendanceType.LEAVE, {})
    return {
        "labels": [d.day for d in days],
        "datasets": [
            {
                "label": "Leave Count",
                "data": [leave_counts.get(d.date, 0) for d in days],
                "backgroundColor": LEAVE_GRAPH_COLOR,
                "borderWidth": 0,
            }
        ],
    }


def attendance_graph_data(days: list[DayLabel], grouped: dict[AttendanceType, dict[date, int]]) -> dict:
    full_day = grouped.get(AttendanceType.FULL_DAY, {})
    half_day = grouped.get(AttendanceType.HALF_DAY, {})
    return {
        "labels": [d.day for d in days],
        "datasets": [
            {
                "label": "Attendance Count",
                "data": [full_day.get(d.date, 0) + half_day.get(d.date, 0) for d in days],
                "backgroundColor": ATTENDANCE_GRAPH_COLOR,
                "borderWidth": 0,
            }
        ],
    }


class DashboardService:
    """Use case: overview statistics for the main dashboard."""

    def __init__(self, context, *, tz: Optional[ZoneInfo] = None):
        self._context = context
        self._tz = tz

    def today(self, now: Optional[datetime] = None) -> date:
        now = now or now_local(self._tz)
        return to_local_date(now, self._tz)

    def build_summary(self, *, now: Optional[datetime] = None) -> DashboardSummary:
        today = self.today(now)
        employees = self._context.employees
        leaves = self._context.leaves_list

        days = day_labels(today)
        grouped = group_attendance_counts(self._context.attendance_data, self._tz)
        leave_counts = count_leaves_by_status(leaves)

        return DashboardSummary(
            total_salary=total_salary(employees),
            total_salary_in_month=total_salary_in_month(employees, today),
            total_employees=len(employees),
            total_departments=len(self._context.departments),
            approved_leaves=leave_counts[LeaveStatus.APPROVED],
            pending_leaves=leave_counts[LeaveStatus.PENDING],
            rejected_leaves=leave_counts[LeaveStatus.REJECTED],
            last_7_days=days,
            leave_graph=leave_graph_data(days, grouped),
            attendance_graph=attendance_graph_data(days, grouped),
        )
