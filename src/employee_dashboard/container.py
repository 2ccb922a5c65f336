from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
from zoneinfo import ZoneInfo

from .attendance.memory_attendance_repository import InMemoryAttendanceRepository
from .context import AuthContext
from .dashboard.service import DashboardService
from .employees.memory_department_repository import InMemoryDepartmentRepository
from .employees.memory_employee_repository import InMemoryEmployeeRepository
from .leaves.memory_leave_repository import InMemoryLeaveRepository
from .users.memory_user_repository import InMemoryUserRepository
from .users.service import AuthService


@dataclass(frozen=True)
class Container:
    users_repo: InMemoryUserRepository
    employees_repo: InMemoryEmployeeRepository
    departments_repo: InMemoryDepartmentRepository
    leaves_repo: InMemoryLeaveRepository
    attendance_repo: InMemoryAttendanceRepository

    auth_service: AuthService
    context: AuthContext
    dashboard_service: DashboardService


def build_container(*, tz: Optional[ZoneInfo] = None) -> Container:
    users_repo = InMemoryUserRepository()
    employees_repo = InMemoryEmployeeRepository()
    departments_repo = InMemoryDepartmentRepository()
    leaves_repo = InMemoryLeaveRepository()
    attendance_repo = InMemoryAttendanceRepository()

    auth_service = AuthService(users_repo)
    context = AuthContext(
        employees=employees_repo,
        leaves=leaves_repo,
        attendance=attendance_repo,
        departments=departments_repo,
        auth_service=auth_service,
    )
    dashboard_service = DashboardService(context, tz=tz)

    return Container(
        users_repo=users_repo,
        employees_repo=employees_repo,
        departments_repo=departments_repo,
        leaves_repo=leaves_repo,
        attendance_repo=attendance_repo,
        auth_service=auth_service,
        context=context,
        dashboard_service=dashboard_service,
    )
