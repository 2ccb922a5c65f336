from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class Employee:
    """Domain entity: employee record shown in the table."""

    id: int
    name: str
    email: str
    mobile: Optional[str] = None
    aadhar: Optional[str] = None
    pan_card: Optional[str] = None
    job_role: Optional[str] = None
    department: Optional[str] = None
    salary: float = 0.0
    salary_date: Optional[date] = None
    image: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "mobile": self.mobile,
            "aadhar": self.aadhar,
            "pan_card": self.pan_card,
            "job_role": self.job_role,
            "department": self.department,
            "salary": self.salary,
            "salary_date": self.salary_date.isoformat() if self.salary_date else None,
            "image": self.image,
        }
