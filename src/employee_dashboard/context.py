from __future__ import annotations

from typing import Mapping, Optional, Sequence

from .attendance.model import AttendanceRecord
from .attendance.repository import AttendanceRepository
from .employees.department_model import Department
from .employees.department_repository import DepartmentRepository
from .employees.model import Employee
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .leaves.model import Leave
from .leaves.repository import LeaveRepository
from .users.service import AuthService, SessionUser


class AuthContext:
    """Process-wide state holder for the dashboard views.

    Owns the employee, leave, attendance and department collections and is the
    single writer for employees. Views read the collections on every render and
    call back into the mutation methods; they never keep their own copies past
    a request.
    """

    def __init__(
        self,
        *,
        employees: EmployeeRepository,
        leaves: LeaveRepository,
        attendance: AttendanceRepository,
        departments: DepartmentRepository,
        auth_service: AuthService,
    ):
        self._employees_repo = employees
        self._leaves_repo = leaves
        self._attendance_repo = attendance
        self._departments_repo = departments
        self._auth = auth_service
        self._employee_service = EmployeeService(employees)

    @property
    def employees(self) -> Sequence[Employee]:
        return self._employees_repo.list_all()

    @property
    def leaves_list(self) -> Sequence[Leave]:
        return self._leaves_repo.list_all()

    @property
    def attendance_data(self) -> Sequence[AttendanceRecord]:
        return self._attendance_repo.list_all()

    @property
    def departments(self) -> Sequence[Department]:
        return self._departments_repo.list_all()

    def login(self, username: str, password: str) -> SessionUser:
        return self._auth.authenticate(username, password)

    def search_employees(self, query: Optional[str] = None) -> Sequence[Employee]:
        return self._employee_service.list_employees(query)

    def get_employee(self, employee_id: int) -> Employee:
        return self._employee_service.get_employee(employee_id)

    def add_employee(self, data: Mapping, *, image: Optional[str] = None) -> Employee:
        return self._employee_service.add_employee(data, image=image)

    def update_employee(self, employee_id: int, data: Mapping, *, image: Optional[str] = None) -> Employee:
        return self._employee_service.update_employee(employee_id, data, image=image)

    def delete_employee(self, employee_id: int) -> Employee:
        return self._employee_service.delete_employee(employee_id)
