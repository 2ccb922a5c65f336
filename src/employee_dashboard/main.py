from __future__ import annotations

import importlib
import logging
from datetime import timedelta
from pathlib import Path
from typing import Mapping, Optional
from zoneinfo import ZoneInfo

from dotenv import load_dotenv
from flask import Flask, request, session

from config import get_settings_module

from .common.formatting import money, plain_number
from .container import build_container
from .core.constants import DEFAULT_LOADING_DELAY_MS, DEFAULT_SESSION_DAYS
from .core.enums import Role
from .dashboard.controller import register as register_dashboard
from .database.bootstrap import DEFAULT_SEED_PATH, DemoAccount, apply_seed, ensure_demo_users, load_seed
from .employees.controller import register as register_employees
from .employees.images import image_url
from .logging_config import setup_logging
from .users.controller import register as register_users

logger = logging.getLogger(__name__)


def _settings_dict(settings_module: str) -> dict:
    settings = importlib.import_module(settings_module)
    return {name: getattr(settings, name) for name in dir(settings) if name.isupper()}


def create_app(overrides: Optional[Mapping] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    app.config.update(_settings_dict(settings_module))
    if overrides:
        app.config.update(overrides)

    setup_logging(app.config.get("LOG_LEVEL", "INFO"))
    app.secret_key = app.config["SECRET_KEY"]
    app.permanent_session_lifetime = timedelta(days=int(app.config.get("SESSION_DAYS", DEFAULT_SESSION_DAYS)))

    upload_dir = app.config.get("UPLOAD_DIR") or str(Path(app.instance_path) / "uploads")
    app.config["UPLOAD_DIR"] = upload_dir
    # leave room for the multipart envelope around the image
    app.config["MAX_CONTENT_LENGTH"] = (int(app.config.get("MAX_UPLOAD_MB", 5)) + 1) * 1024 * 1024

    tz = ZoneInfo(app.config.get("TIMEZONE", "UTC"))
    container = build_container(tz=tz)

    ensure_demo_users(
        container.users_repo,
        [
            DemoAccount(
                username=app.config.get("DEMO_ADMIN_USERNAME", ""),
                password=app.config.get("DEMO_ADMIN_PASSWORD", ""),
                full_name="Administrator",
                role=Role.ADMIN,
            ),
            DemoAccount(
                username=app.config.get("DEMO_STAFF_USERNAME", ""),
                password=app.config.get("DEMO_STAFF_PASSWORD", ""),
                full_name="Staff Member",
                role=Role.STAFF,
            ),
        ],
    )

    if app.config.get("AUTO_SEED_DB"):
        seed_path = Path(app.config.get("SEED_PATH") or DEFAULT_SEED_PATH)
        apply_seed(container, load_seed(seed_path, today=container.dashboard_service.today()))

    logger.info(
        "settings=%s upload_dir=%s timezone=%s employees=%d",
        settings_module,
        upload_dir,
        tz.key,
        len(container.context.employees),
    )

    app.extensions["employee_dashboard"] = container
    app.jinja_env.filters["money"] = money
    app.jinja_env.filters["plain_number"] = plain_number

    @app.context_processor
    def inject_globals():
        return {
            "image_url": lambda image: image_url(
                image, app.config.get("IMAGE_BASE_URL", ""), script_root=request.script_root
            ),
            "current_user": {
                "full_name": session.get("name"),
                "role": session.get("role"),
                "is_admin": session.get("role") == Role.ADMIN.value,
            },
            "loading_delay_ms": int(app.config.get("LOADING_DELAY_MS", DEFAULT_LOADING_DELAY_MS)),
        }

    register_users(app, container)
    register_employees(app, container)
    register_dashboard(app, container)

    return app
