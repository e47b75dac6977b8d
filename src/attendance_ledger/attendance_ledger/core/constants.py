"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

GENESIS_INDEX = 0
GENESIS_PREVIOUS_FINGERPRINT = "0"
GENESIS_SUBJECT_ID = "N/A"
GENESIS_STATUS = "Genesis Block"
GENESIS_DATE = "N/A"

FINGERPRINT_LENGTH = 64
DEFAULT_FINGERPRINT_ALGORITHM = "demo"

DEFAULT_ELIGIBILITY_THRESHOLD = 85.0
DEFAULT_STORAGE_KEY = "attendance_ledger"
FINGERPRINT_PREVIEW_CHARS = 20
