from __future__ import annotations

import io
from typing import Iterable

import pandas as pd

from .model import Employee

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

_COLUMNS = [
    "ID",
    "Name",
    "Email",
    "Phone",
    "Aadhar No",
    "Pan Card No",
    "Job Role",
    "Department",
    "Salary",
    "Salary Date",
]


def employees_to_xlsx(employees: Iterable[Employee]) -> io.BytesIO:
    """Write the employee table into an in-memory Excel workbook."""
    data = []
    for emp in employees:
        data.append({
            "ID": emp.id,
            "Name": emp.name,
            "Email": emp.email,
            "Phone": emp.mobile or "",
            "Aadhar No": emp.aadhar or "",
            "Pan Card No": emp.pan_card or "",
            "Job Role": emp.job_role or "",
            "Department": emp.department or "",
            "Salary": emp.salary,
            "Salary Date": emp.salary_date.isoformat() if emp.salary_date else "",
        })

    df = pd.DataFrame(data, columns=_COLUMNS)

    output = io.BytesIO()
    with pd.ExcelWriter(output, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, sheet_name="Employees")

    output.seek(0)
    return output
