import os

SECRET_KEY = "test-secret"

LEDGER_BACKEND = "memory"
LEDGER_PATH = os.getenv("LEDGER_PATH", "data/test_attendance_ledger.json")
LEDGER_STORAGE_KEY = "attendance_ledger_test"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_ledger_test"),
}

FINGERPRINT_ALGORITHM = "demo"
ELIGIBILITY_THRESHOLD = 85.0
STRICT_LOAD = False

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = False
