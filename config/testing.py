import os

SECRET_KEY = "test-secret"

STORAGE_CONFIG = {
    "backend": "memory",
    "dir": os.getenv("STORAGE_DIR", ""),
}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

REPLACE_SAME_DAY_ATTENDANCE = False
