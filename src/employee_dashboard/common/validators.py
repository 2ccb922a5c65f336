from __future__ import annotations

import re
from typing import Optional

from ..core.exceptions import ValidationError

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
_AADHAR_RE = re.compile(r"^\d{12}$")
_PAN_RE = re.compile(r"^[A-Z]{5}\d{4}[A-Z]$")


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_email(value: Optional[str], field_name: str = "Email") -> str:
    value = require_non_empty(value, field_name)
    if not _EMAIL_RE.match(value):
        raise ValidationError(f"{field_name} is not a valid email address")
    return value


def require_non_negative_number(value, field_name: str) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number")
    if number < 0:
        raise ValidationError(f"{field_name} cannot be negative")
    return number


def optional_aadhar(value: Optional[str]) -> Optional[str]:
    if value is None or not value.strip():
        return None
    digits = value.replace(" ", "").replace("-", "")
    if not _AADHAR_RE.match(digits):
        raise ValidationError("Aadhar number must have 12 digits")
    return digits


def optional_pan(value: Optional[str]) -> Optional[str]:
    if value is None or not value.strip():
        return None
    pan = value.strip().upper()
    if not _PAN_RE.match(pan):
        raise ValidationError("PAN card number must look like ABCDE1234F")
    return pan
