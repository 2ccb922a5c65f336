from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import LeaveStatus


@dataclass(frozen=True)
class Leave:
    """Domain entity: a leave request. Read-only for the dashboard views."""

    leave_id: int
    employee_id: int
    status: LeaveStatus
    date: date
    reason: Optional[str] = None
