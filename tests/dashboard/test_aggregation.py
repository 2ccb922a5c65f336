from __future__ import annotations

from datetime import date, datetime, timezone
from zoneinfo import ZoneInfo

import pytest

from employee_dashboard.attendance.model import AttendanceRecord
from employee_dashboard.core.enums import AttendanceType, LeaveStatus
from employee_dashboard.dashboard.service import (
    DashboardService,
    attendance_graph_data,
    count_leaves_by_status,
    day_labels,
    group_attendance_counts,
    leave_graph_data,
    total_salary,
    total_salary_in_month,
)
from employee_dashboard.employees.department_model import Department
from employee_dashboard.employees.model import Employee
from employee_dashboard.leaves.model import Leave


class FakeContext:
    def __init__(self, employees, leaves=(), attendance=(), departments=()):
        self.employees = list(employees)
        self.leaves_list = list(leaves)
        self.attendance_data = list(attendance)
        self.departments = list(departments)


def _leave(i: int, status) -> Leave:
    return Leave(leave_id=i, employee_id=1, status=status, date=date(2026, 1, 30))


def _mark(i: int, day, kind: str) -> AttendanceRecord:
    return AttendanceRecord(record_id=i, employee_id=1, date=day, type=kind)


def test_day_labels_cover_the_week_ending_today(fixed_now):
    labels = day_labels(fixed_now.date())

    assert [d.full_date for d in labels] == [
        "1/25/2026",
        "1/26/2026",
        "1/27/2026",
        "1/28/2026",
        "1/29/2026",
        "1/30/2026",
        "1/31/2026",
    ]
    assert [d.day for d in labels] == ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]


def test_day_labels_cross_month_boundary():
    labels = day_labels(date(2026, 3, 2))
    assert labels[0].full_date == "2/24/2026"
    assert labels[-1].full_date == "3/2/2026"


def test_total_salary_sums_everyone(employees):
    assert total_salary(employees) == 85000 + 52000 + 61000 + 74000 + 79000
    assert total_salary([]) == 0


def test_monthly_salary_compares_month_only(employees, fixed_now):
    # Rohit was paid in January of the previous year and still counts, Priya has no salary date
    assert total_salary_in_month(employees, fixed_now.date()) == 85000 + 52000 + 74000


def test_monthly_salary_ignores_the_year():
    paid_last_year = Employee(id=1, name="A", email="a@example.com", salary=100, salary_date=date(2025, 1, 15))
    assert total_salary_in_month([paid_last_year], date(2026, 1, 31)) == 100
    assert total_salary_in_month([paid_last_year], date(2026, 2, 1)) == 0


def test_monthly_salary_is_zero_when_nobody_was_paid(employees):
    assert total_salary_in_month(employees, date(2024, 6, 1)) == 0


def test_leave_counts_include_every_status():
    leaves = [
        _leave(1, LeaveStatus.APPROVED),
        _leave(2, LeaveStatus.APPROVED),
        _leave(3, LeaveStatus.PENDING),
        _leave(4, "Cancelled"),
    ]

    counts = count_leaves_by_status(leaves)

    assert counts == {LeaveStatus.APPROVED: 2, LeaveStatus.PENDING: 1, LeaveStatus.REJECTED: 0}


def test_leave_counts_accept_stored_strings():
    counts = count_leaves_by_status([_leave(1, "Rejected")])
    assert counts[LeaveStatus.REJECTED] == 1


def test_group_attendance_counts_per_type_and_day():
    records = [
        _mark(1, date(2026, 1, 30), "fullDay"),
        _mark(2, datetime(2026, 1, 30, 17, 45), "fullDay"),
        _mark(3, date(2026, 1, 30), "halfDay"),
        _mark(4, date(2026, 1, 29), "leave"),
        _mark(5, date(2026, 1, 29), "remote"),
    ]

    grouped = group_attendance_counts(records)

    assert grouped[AttendanceType.FULL_DAY] == {date(2026, 1, 30): 2}
    assert grouped[AttendanceType.HALF_DAY] == {date(2026, 1, 30): 1}
    assert grouped[AttendanceType.LEAVE] == {date(2026, 1, 29): 1}


def test_group_attendance_counts_normalises_aware_timestamps():
    # 20:00 UTC on the 30th is already the 31st in India
    records = [_mark(1, datetime(2026, 1, 30, 20, 0, tzinfo=timezone.utc), "leave")]

    in_utc = group_attendance_counts(records, ZoneInfo("UTC"))
    in_india = group_attendance_counts(records, ZoneInfo("Asia/Kolkata"))

    assert in_utc[AttendanceType.LEAVE] == {date(2026, 1, 30): 1}
    assert in_india[AttendanceType.LEAVE] == {date(2026, 1, 31): 1}


def test_graphs_have_one_bar_per_day(fixed_now):
    days = day_labels(fixed_now.date())
    records = [
        _mark(1, date(2026, 1, 31), "fullDay"),
        _mark(2, date(2026, 1, 31), "halfDay"),
        _mark(3, date(2026, 1, 25), "fullDay"),
        _mark(4, date(2026, 1, 28), "leave"),
        _mark(5, date(2026, 1, 28), "leave"),
        # outside the window
        _mark(6, date(2026, 1, 20), "leave"),
    ]
    grouped = group_attendance_counts(records)

    leave = leave_graph_data(days, grouped)
    attendance = attendance_graph_data(days, grouped)

    assert leave["labels"] == ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]
    assert leave["datasets"][0]["label"] == "Leave Count"
    assert leave["datasets"][0]["data"] == [0, 0, 0, 2, 0, 0, 0]
    assert attendance["datasets"][0]["label"] == "Attendance Count"
    assert attendance["datasets"][0]["data"] == [1, 0, 0, 0, 0, 0, 2]


@pytest.mark.parametrize("kind", ["fullDay", "halfDay", "leave"])
def test_histogram_matches_record_count_per_day(fixed_now, kind):
    days = day_labels(fixed_now.date())
    records = [_mark(i, d.date, kind) for i, d in enumerate(days) for _ in range(i)]

    grouped = group_attendance_counts(records)
    graph = leave_graph_data(days, grouped) if kind == "leave" else attendance_graph_data(days, grouped)

    assert graph["datasets"][0]["data"] == list(range(7))


def test_build_summary(employees, fixed_now):
    context = FakeContext(
        employees,
        leaves=[
            _leave(1, LeaveStatus.APPROVED),
            _leave(2, LeaveStatus.PENDING),
            _leave(3, LeaveStatus.PENDING),
            _leave(4, LeaveStatus.REJECTED),
        ],
        attendance=[_mark(1, date(2026, 1, 31), "fullDay"), _mark(2, date(2026, 1, 30), "leave")],
        departments=[Department(1, "Engineering"), Department(2, "Finance")],
    )

    summary = DashboardService(context).build_summary(now=fixed_now)

    assert summary.total_salary_in_month == 211000
    assert summary.total_employees == 5
    assert summary.total_departments == 2
    assert (summary.approved_leaves, summary.pending_leaves, summary.rejected_leaves) == (1, 2, 1)
    assert summary.last_7_days[-1].full_date == "1/31/2026"
    assert summary.leave_graph["datasets"][0]["data"][-2] == 1
    assert summary.attendance_graph["datasets"][0]["data"][-1] == 1


def test_build_summary_on_empty_context(fixed_now):
    summary = DashboardService(FakeContext([])).build_summary(now=fixed_now)

    assert summary.total_salary_in_month == 0
    assert summary.total_employees == 0
    assert summary.leave_graph["datasets"][0]["data"] == [0] * 7
    assert summary.to_dict()["leaves"] == {"approved": 0, "pending": 0, "rejected": 0}


def test_today_follows_configured_timezone():
    service = DashboardService(FakeContext([]), tz=ZoneInfo("Asia/Kolkata"))
    now = datetime(2026, 1, 31, 20, 0, tzinfo=timezone.utc)
    assert service.today(now) == date(2026, 2, 1)
