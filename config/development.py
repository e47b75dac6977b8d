import os

from config import env_flag

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# file | mysql | memory
LEDGER_BACKEND = os.getenv("LEDGER_BACKEND", "file")
LEDGER_PATH = os.getenv("LEDGER_PATH", "data/attendance_ledger.json")
LEDGER_STORAGE_KEY = os.getenv("LEDGER_STORAGE_KEY", "attendance_ledger")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_ledger"),
}

# demo | sha256
FINGERPRINT_ALGORITHM = os.getenv("FINGERPRINT_ALGORITHM", "demo")
ELIGIBILITY_THRESHOLD = float(os.getenv("ELIGIBILITY_THRESHOLD", "85"))

# If enabled, an unreadable stored ledger aborts startup instead of being replaced.
STRICT_LOAD = env_flag("STRICT_LOAD", "0")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled (mysql backend), app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = env_flag("AUTO_INIT_DB", "1")
