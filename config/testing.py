SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

TIMEZONE = "UTC"

IMAGE_BASE_URL = "https://img.example.test"
UPLOAD_DIR = ""
MAX_UPLOAD_MB = 1

LOADING_DELAY_MS = 0
SESSION_DAYS = 1

AUTO_SEED_DB = False
SEED_PATH = ""

DEMO_ADMIN_USERNAME = "admin"
DEMO_ADMIN_PASSWORD = "admin123"
DEMO_STAFF_USERNAME = "staff"
DEMO_STAFF_PASSWORD = "staff123"
