from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Account role used for authorization."""

    ADMIN = "admin"
    STAFF = "staff"


class LeaveStatus(str, Enum):
    """Leave request outcome as stored on the record."""

    APPROVED = "Approved"
    REJECTED = "Rejected"
    PENDING = "Pending"


class AttendanceType(str, Enum):
    """Attendance kinds counted by the dashboard."""

    FULL_DAY = "fullDay"
    HALF_DAY = "halfDay"
    LEAVE = "leave"
