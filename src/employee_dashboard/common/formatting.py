from __future__ import annotations


def plain_number(value) -> str:
    """12000.0 -> "12000", 12000.5 -> "12000.5"."""
    if value is None:
        return ""
    number = float(value)
    return str(int(number)) if number.is_integer() else str(number)


def money(value) -> str:
    number = float(value or 0)
    if number.is_integer():
        return f"{number:,.0f}"
    return f"{number:,.2f}"
