import os

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "payroll_system"),
    "pool_size": int(os.getenv("DB_POOL_SIZE", "10")),
    # seconds to wait for a free pooled connection; unset waits indefinitely
    "pool_timeout": float(os.environ["DB_POOL_TIMEOUT"]) if os.getenv("DB_POOL_TIMEOUT") else None,
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
PORT = int(os.getenv("PORT", "3000"))

UPLOAD_DIR = os.getenv("UPLOAD_DIR", "uploads")
MAX_UPLOAD_BYTES = int(os.getenv("MAX_UPLOAD_BYTES", str(50 * 1024 * 1024)))

PASSWORD_HASH_METHOD = os.getenv("PASSWORD_HASH_METHOD", "scrypt")
AUTH_COOKIE_NAME = os.getenv("AUTH_COOKIE_NAME", "payroll_sid")
SESSION_COOKIE_SECURE = False

CORS_ORIGINS = os.getenv("CORS_ORIGINS", "http://localhost:4200").split(",")

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also seed the default departments on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "1")))
