from __future__ import annotations

import threading
from typing import Iterable, Sequence

from .model import Leave
from .repository import LeaveRepository


class InMemoryLeaveRepository(LeaveRepository):
    def __init__(self, leaves: Iterable[Leave] = ()):
        self._lock = threading.Lock()
        self._items: list[Leave] = list(leaves)

    def list_all(self) -> Sequence[Leave]:
        return list(self._items)

    def add(self, leave: Leave) -> None:
        with self._lock:
            self._items.append(leave)
