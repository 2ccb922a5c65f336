from __future__ import annotations

import io
from datetime import date, datetime

import pytest
from PIL import Image

from employee_dashboard.employees.department_model import Department
from employee_dashboard.employees.model import Employee
from employee_dashboard.main import create_app


def sample_employees() -> list[Employee]:
    return [
        Employee(
            id=1,
            name="Sonal Sharma",
            email="sonal@example.com",
            mobile="9876543210",
            aadhar="123412341234",
            pan_card="ABCDE1234F",
            job_role="Backend Developer",
            department="Engineering",
            salary=85000,
            salary_date=date(2026, 1, 5),
        ),
        Employee(
            id=2,
            name="Amit Kumar",
            email="amit@example.com",
            job_role="HR Executive",
            department="Human Resources",
            salary=52000,
            salary_date=date(2026, 1, 28),
        ),
        Employee(
            id=3,
            name="Aashi Jain",
            email="aashi@example.com",
            job_role="Accountant",
            department="Finance",
            salary=61000,
            salary_date=date(2025, 12, 30),
        ),
        Employee(
            id=4,
            name="Rohit Verma",
            email="rohit@example.com",
            job_role="Sales Manager",
            department="Sales",
            salary=74000,
            salary_date=date(2025, 1, 15),
        ),
        Employee(
            id=5,
            name="Priya Nair",
            email="priya@example.com",
            job_role="Frontend Developer",
            department=None,
            salary=79000,
            salary_date=None,
            image="https://cdn.example.com/priya.png",
        ),
    ]


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 1, 31, 8, 25, 0)


@pytest.fixture
def employees() -> list[Employee]:
    return sample_employees()


@pytest.fixture
def upload_dir(tmp_path):
    return tmp_path / "uploads"


@pytest.fixture
def make_app(monkeypatch, upload_dir):
    monkeypatch.setenv("APP_ENV", "testing")

    def _make(**overrides):
        app = create_app({"UPLOAD_DIR": str(upload_dir), **overrides})
        container = app.extensions["employee_dashboard"]
        for employee in sample_employees():
            container.employees_repo.insert(employee)
        container.departments_repo.add(Department(dept_id=1, dept_name="Engineering"))
        container.departments_repo.add(Department(dept_id=2, dept_name="Human Resources"))
        container.departments_repo.add(Department(dept_id=3, dept_name="Finance"))
        return app

    return _make


@pytest.fixture
def app(make_app):
    return make_app()


@pytest.fixture
def container(app):
    return app.extensions["employee_dashboard"]


@pytest.fixture
def client(app):
    return app.test_client()


def login(client, username: str = "admin", password: str = "admin123"):
    return client.post("/", data={"username": username, "password": password})


@pytest.fixture
def admin_client(client):
    login(client)
    return client


@pytest.fixture
def staff_client(app):
    c = app.test_client()
    login(c, "staff", "staff123")
    return c


@pytest.fixture
def png_bytes() -> bytes:
    buf = io.BytesIO()
    Image.new("RGB", (4, 4), (255, 0, 0)).save(buf, format="PNG")
    return buf.getvalue()
