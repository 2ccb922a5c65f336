"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_SESSION_DAYS = 7
DEFAULT_LOADING_DELAY_MS = 2000
DASHBOARD_WINDOW_DAYS = 7

PLACEHOLDER_IMAGE_URL = "https://via.placeholder.com/40"
UPLOAD_URL_PREFIX = "uploads"
ALLOWED_IMAGE_FORMATS = {"PNG", "JPEG", "GIF", "WEBP"}

LEAVE_GRAPH_COLOR = "rgba(75, 192, 192, 0.6)"
ATTENDANCE_GRAPH_COLOR = "rgba(153, 102, 255, 0.6)"
