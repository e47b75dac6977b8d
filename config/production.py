import os

from config import env_flag

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

LEDGER_BACKEND = os.getenv("LEDGER_BACKEND", "mysql")
LEDGER_PATH = os.getenv("LEDGER_PATH", "/var/lib/attendance-ledger/attendance_ledger.json")
LEDGER_STORAGE_KEY = os.getenv("LEDGER_STORAGE_KEY", "attendance_ledger")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_ledger"),
}

FINGERPRINT_ALGORITHM = os.getenv("FINGERPRINT_ALGORITHM", "sha256")
ELIGIBILITY_THRESHOLD = float(os.getenv("ELIGIBILITY_THRESHOLD", "85"))
STRICT_LOAD = env_flag("STRICT_LOAD", "1")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_INIT_DB = env_flag("AUTO_INIT_DB", "0")
