from __future__ import annotations

import threading
from typing import Iterable, Sequence

from .department_model import Department
from .department_repository import DepartmentRepository


class InMemoryDepartmentRepository(DepartmentRepository):
    def __init__(self, departments: Iterable[Department] = ()):
        self._lock = threading.Lock()
        self._items: list[Department] = list(departments)

    def list_all(self) -> Sequence[Department]:
        return list(self._items)

    def add(self, department: Department) -> None:
        with self._lock:
            self._items.append(department)
