from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Repository interface for employees.

    Implementations keep list order stable (insertion order) and ids unique.
    """

    def list_all(self) -> Sequence[Employee]:
        raise NotImplementedError

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        raise NotImplementedError

    def next_id(self) -> int:
        raise NotImplementedError

    def create(self, fields: dict) -> Employee:
        """Insert a new employee under a freshly allocated id."""
        raise NotImplementedError

    def insert(self, employee: Employee) -> None:
        raise NotImplementedError

    def replace(self, employee: Employee) -> bool:
        raise NotImplementedError

    def delete_by_id(self, employee_id: int) -> bool:
        raise NotImplementedError
