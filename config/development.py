import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

STORAGE_CONFIG = {
    "backend": os.getenv("STORAGE_BACKEND", "file"),
    "dir": os.getenv("STORAGE_DIR", "instance/roster"),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, a second attendance mark on the same day replaces the first one
REPLACE_SAME_DAY_ATTENDANCE = bool(int(os.getenv("REPLACE_SAME_DAY_ATTENDANCE", "0")))
