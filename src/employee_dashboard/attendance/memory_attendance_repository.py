from __future__ import annotations

import threading
from typing import Iterable, Sequence

from .model import AttendanceRecord
from .repository import AttendanceRepository


class InMemoryAttendanceRepository(AttendanceRepository):
    def __init__(self, records: Iterable[AttendanceRecord] = ()):
        self._lock = threading.Lock()
        self._items: list[AttendanceRecord] = list(records)

    def list_all(self) -> Sequence[AttendanceRecord]:
        return list(self._items)

    def add(self, record: AttendanceRecord) -> None:
        with self._lock:
            self._items.append(record)
