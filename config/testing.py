import os

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "payroll_system_test"),
}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

UPLOAD_DIR = os.getenv("UPLOAD_DIR", "uploads-test")
MAX_UPLOAD_BYTES = 50 * 1024 * 1024

# Fast hashing keeps the test suite quick; never use outside tests.
PASSWORD_HASH_METHOD = "pbkdf2:sha256:1000"
AUTH_COOKIE_NAME = "payroll_sid"

CORS_ORIGINS = "*"

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
