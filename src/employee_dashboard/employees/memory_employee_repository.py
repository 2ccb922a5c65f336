from __future__ import annotations

import threading
from typing import Iterable, Optional, Sequence

from ..core.exceptions import ValidationError
from .model import Employee
from .repository import EmployeeRepository


class InMemoryEmployeeRepository(EmployeeRepository):
    """Process-local employee list.

    A dict keeps insertion order, which is the table order.
    """

    def __init__(self, employees: Iterable[Employee] = ()):
        self._lock = threading.RLock()
        self._by_id: dict[int, Employee] = {}
        for employee in employees:
            self.insert(employee)

    def list_all(self) -> Sequence[Employee]:
        with self._lock:
            return list(self._by_id.values())

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        return self._by_id.get(int(employee_id))

    def next_id(self) -> int:
        with self._lock:
            return max(self._by_id, default=0) + 1

    def create(self, fields: dict) -> Employee:
        # id allocation and insert share one lock
        with self._lock:
            employee = Employee(id=self.next_id(), **fields)
            self._by_id[employee.id] = employee
            return employee

    def insert(self, employee: Employee) -> None:
        with self._lock:
            if employee.id in self._by_id:
                raise ValidationError(f"Employee id {employee.id} already exists")
            self._by_id[employee.id] = employee

    def replace(self, employee: Employee) -> bool:
        with self._lock:
            if employee.id not in self._by_id:
                return False
            self._by_id[employee.id] = employee
            return True

    def delete_by_id(self, employee_id: int) -> bool:
        with self._lock:
            return self._by_id.pop(int(employee_id), None) is not None
