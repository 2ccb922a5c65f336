from __future__ import annotations

import pytest
from werkzeug.security import generate_password_hash

from employee_dashboard.core.enums import Role
from employee_dashboard.core.exceptions import AuthenticationError
from employee_dashboard.users.memory_user_repository import InMemoryUserRepository
from employee_dashboard.users.service import AuthService


@pytest.fixture
def users():
    repo = InMemoryUserRepository()
    repo.create_user(
        full_name="Administrator",
        username="admin",
        password_hash=generate_password_hash("admin123"),
        role=Role.ADMIN,
    )
    repo.create_user(full_name="Broken", username="broken", password_hash="not-a-hash", role=Role.STAFF)
    return repo


def test_authenticate_ok(users):
    s_user = AuthService(users).authenticate(" admin ", "admin123")

    assert s_user.user_id == 1
    assert s_user.full_name == "Administrator"
    assert s_user.role is Role.ADMIN


@pytest.mark.parametrize(
    "username,password",
    [("admin", "wrong"), ("nobody", "admin123"), ("", ""), ("broken", "anything")],
)
def test_authenticate_rejects(users, username, password):
    with pytest.raises(AuthenticationError):
        AuthService(users).authenticate(username, password)


def test_login_page_renders(client):
    response = client.get("/")
    assert response.status_code == 200
    assert 'name="username"' in response.get_data(as_text=True)


def test_login_success_redirects_to_dashboard(client):
    response = client.post("/", data={"username": "admin", "password": "admin123"})

    assert response.status_code == 302
    assert response.headers["Location"].endswith("/dashboard")
    with client.session_transaction() as sess:
        assert sess["role"] == "admin"
        assert sess["name"] == "Administrator"


def test_login_failure_shows_toast(client):
    response = client.post("/", data={"username": "admin", "password": "nope"})

    html = response.get_data(as_text=True)
    assert response.status_code == 200
    assert "Invalid username or password" in html
    assert 'data-category="danger"' in html
    with client.session_transaction() as sess:
        assert "user_id" not in sess


def test_remember_me_makes_session_persistent(client):
    response = client.post("/", data={"username": "staff", "password": "staff123", "remember_me": "1"})
    assert "Expires=" in response.headers["Set-Cookie"]


def test_session_cookie_without_remember_me(client):
    response = client.post("/", data={"username": "staff", "password": "staff123"})
    assert "Expires=" not in response.headers["Set-Cookie"]


def test_logged_in_user_skips_login_page(admin_client):
    response = admin_client.get("/")
    assert response.status_code == 302
    assert response.headers["Location"].endswith("/dashboard")


def test_logout_clears_session(admin_client):
    response = admin_client.get("/logout", follow_redirects=True)

    assert "You have been signed out." in response.get_data(as_text=True)
    assert admin_client.get("/dashboard").status_code == 302


def test_staff_is_forbidden_from_admin_pages(staff_client):
    for url in ["/dashboard/employees/add", "/dashboard/employees/1/edit", "/dashboard/employees/export"]:
        assert staff_client.get(url).status_code == 403
