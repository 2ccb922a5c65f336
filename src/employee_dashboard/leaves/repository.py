from __future__ import annotations

from typing import Protocol, Sequence

from .model import Leave


class LeaveRepository(Protocol):
    def list_all(self) -> Sequence[Leave]:
        raise NotImplementedError

    def add(self, leave: Leave) -> None:
        raise NotImplementedError
