from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Union


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one attendance mark.

    ``type`` is kept as stored ("fullDay", "halfDay", "leave"); unknown
    values are tolerated and skipped by the dashboard.
    """

    record_id: int
    employee_id: int
    date: Union[date, datetime]
    type: str
