"""Toast notifications.

Views report outcomes through Flask's flash queue; ``base.html`` renders the
queue as toasts on the next page.
"""
from __future__ import annotations

import logging
from typing import Optional

from flask import flash

logger = logging.getLogger(__name__)


def notify_success(message: str) -> None:
    flash(message, "success")


def notify_error(message: str, error: Optional[BaseException] = None) -> None:
    if error is not None:
        logger.warning("%s %s", message, error)
    flash(message, "danger")


def notify_info(message: str) -> None:
    flash(message, "info")
