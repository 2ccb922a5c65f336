from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from pathlib import Path
from typing import Optional, Union

from werkzeug.security import generate_password_hash

from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import parse_iso_date
from ..core.enums import LeaveStatus, Role
from ..core.exceptions import ValidationError
from ..employees.department_model import Department
from ..employees.model import Employee
from ..leaves.model import Leave

logger = logging.getLogger(__name__)

DEFAULT_SEED_PATH = Path(__file__).resolve().parent / "seed.json"


@dataclass
class SeedData:
    employees: list[Employee] = field(default_factory=list)
    departments: list[Department] = field(default_factory=list)
    leaves: list[Leave] = field(default_factory=list)
    attendance: list[AttendanceRecord] = field(default_factory=list)


@dataclass(frozen=True)
class DemoAccount:
    username: str
    password: str
    full_name: str
    role: Role


def _resolve_date(entry: dict, key: str, today: date) -> Optional[date]:
    # Either an absolute ISO date under `key` or an offset under `<key>_days_ago`.
    if entry.get(key):
        return parse_iso_date(str(entry[key])[:10])
    offset = entry.get(f"{key}_days_ago")
    if offset is not None:
        return today - timedelta(days=int(offset))
    return None


def _resolve_timestamp(entry: dict, today: date) -> Union[date, datetime]:
    raw = entry.get("date")
    if raw and "T" in str(raw):
        return datetime.fromisoformat(str(raw))
    day = _resolve_date(entry, "date", today)
    if day is None:
        raise ValidationError(f"Attendance entry without a date: {entry!r}")
    return day


def load_seed(seed_path: Path, *, today: Optional[date] = None) -> SeedData:
    today = today or date.today()
    raw = json.loads(Path(seed_path).read_text(encoding="utf-8"))

    seed = SeedData()
    for d in raw.get("departments", []):
        seed.departments.append(Department(dept_id=int(d["dept_id"]), dept_name=d["dept_name"]))

    for e in raw.get("employees", []):
        seed.employees.append(
            Employee(
                id=int(e["id"]),
                name=e["name"],
                email=e["email"],
                mobile=e.get("mobile"),
                aadhar=e.get("aadhar"),
                pan_card=e.get("pan_card"),
                job_role=e.get("job_role"),
                department=e.get("department"),
                salary=float(e.get("salary", 0)),
                salary_date=_resolve_date(e, "salary_date", today),
                image=e.get("image"),
            )
        )

    for i, lv in enumerate(raw.get("leaves", []), start=1):
        seed.leaves.append(
            Leave(
                leave_id=int(lv.get("leave_id", i)),
                employee_id=int(lv["employee_id"]),
                status=LeaveStatus(lv["status"]),
                date=_resolve_date(lv, "date", today) or today,
                reason=lv.get("reason"),
            )
        )

    for i, a in enumerate(raw.get("attendance", []), start=1):
        seed.attendance.append(
            AttendanceRecord(
                record_id=int(a.get("record_id", i)),
                employee_id=int(a["employee_id"]),
                date=_resolve_timestamp(a, today),
                type=str(a["type"]),
            )
        )

    return seed


def apply_seed(container, seed: SeedData) -> None:
    for department in seed.departments:
        container.departments_repo.add(department)
    for employee in seed.employees:
        container.employees_repo.insert(employee)
    for leave in seed.leaves:
        container.leaves_repo.add(leave)
    for record in seed.attendance:
        container.attendance_repo.add(record)

    logger.info(
        "seeded employees=%d departments=%d leaves=%d attendance=%d",
        len(seed.employees),
        len(seed.departments),
        len(seed.leaves),
        len(seed.attendance),
    )


def ensure_demo_users(users_repo, accounts: list[DemoAccount]) -> int:
    """Create the demo login accounts that do not exist yet. Returns how many were created."""
    created = 0
    for account in accounts:
        if not account.username or not account.password:
            logger.warning("skipping demo account %r without credentials", account.username)
            continue
        if users_repo.get_by_username(account.username):
            continue
        users_repo.create_user(
            full_name=account.full_name,
            username=account.username,
            password_hash=generate_password_hash(account.password),
            role=account.role,
        )
        created += 1
    return created
