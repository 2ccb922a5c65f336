import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Dashboard buckets are computed in this timezone
TIMEZONE = os.getenv("TIMEZONE", "Asia/Kolkata")

# Employee images resolve to <IMAGE_BASE_URL>/<image-path>; empty means served by this app
IMAGE_BASE_URL = os.getenv("IMAGE_BASE_URL", "")
UPLOAD_DIR = os.getenv("UPLOAD_DIR", "")
MAX_UPLOAD_MB = int(os.getenv("MAX_UPLOAD_MB", "5"))

LOADING_DELAY_MS = int(os.getenv("LOADING_DELAY_MS", "2000"))
SESSION_DAYS = int(os.getenv("SESSION_DAYS", "7"))

AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "1")))
SEED_PATH = os.getenv("SEED_PATH", "")

DEMO_ADMIN_USERNAME = os.getenv("DEMO_ADMIN_USERNAME", "admin")
DEMO_ADMIN_PASSWORD = os.getenv("DEMO_ADMIN_PASSWORD", "admin123")
DEMO_STAFF_USERNAME = os.getenv("DEMO_STAFF_USERNAME", "staff")
DEMO_STAFF_PASSWORD = os.getenv("DEMO_STAFF_PASSWORD", "staff123")
