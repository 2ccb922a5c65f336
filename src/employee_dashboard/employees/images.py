from __future__ import annotations

import io
import logging
import uuid
from pathlib import Path
from typing import Optional

from PIL import Image, UnidentifiedImageError
from werkzeug.datastructures import FileStorage

from ..core.constants import ALLOWED_IMAGE_FORMATS, PLACEHOLDER_IMAGE_URL, UPLOAD_URL_PREFIX
from ..core.exceptions import ValidationError

logger = logging.getLogger(__name__)

_EXTENSIONS = {"PNG": ".png", "JPEG": ".jpg", "GIF": ".gif", "WEBP": ".webp"}


def image_url(image: Optional[str], base_url: str = "", *, script_root: str = "") -> str:
    """Resolve an employee image reference to ``<base-url>/<image-path>``.

    Pictures uploaded here (``uploads/<name>``) are only served by this app,
    so they stay relative to ``script_root`` whatever the base URL is.
    """
    if not image:
        return PLACEHOLDER_IMAGE_URL
    if image.startswith(("http://", "https://")):
        return image
    if image.startswith(f"{UPLOAD_URL_PREFIX}/"):
        return f"{script_root.rstrip('/')}/{image}"
    return f"{base_url.rstrip('/')}/{image.lstrip('/')}"


def save_employee_image(file: Optional[FileStorage], upload_dir: Path, *, max_bytes: int) -> Optional[str]:
    """Store an uploaded picture and return its reference (``uploads/<name>``).

    Returns None when no file was chosen. The content must decode as one of
    the allowed image formats; the stored name is generated, never taken
    from the client.
    """
    if file is None or not file.filename:
        return None

    data = file.read(max_bytes + 1)
    if len(data) > max_bytes:
        raise ValidationError(f"Image is larger than {max_bytes // (1024 * 1024) or 1} MB")
    if not data:
        raise ValidationError("Image file is empty")

    try:
        with Image.open(io.BytesIO(data)) as img:
            fmt = img.format
            img.verify()
    except (UnidentifiedImageError, OSError, SyntaxError):
        raise ValidationError("Uploaded file is not a valid image")

    if fmt not in ALLOWED_IMAGE_FORMATS:
        raise ValidationError(f"Image format {fmt} is not supported")

    upload_dir.mkdir(parents=True, exist_ok=True)
    name = f"{uuid.uuid4().hex}{_EXTENSIONS[fmt]}"
    (upload_dir / name).write_bytes(data)
    logger.debug("stored employee image %s (%d bytes)", name, len(data))
    return f"{UPLOAD_URL_PREFIX}/{name}"


def discard_employee_image(image: Optional[str], upload_dir: Path) -> bool:
    """Remove a stored upload; absolute URLs and missing files are left alone."""
    if not image or not image.startswith(f"{UPLOAD_URL_PREFIX}/"):
        return False
    path = upload_dir / Path(image).name
    if not path.is_file():
        return False
    path.unlink()
    logger.debug("removed employee image %s", path.name)
    return True
