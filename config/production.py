import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

STORAGE_CONFIG = {
    "backend": os.getenv("STORAGE_BACKEND", "file"),
    "dir": os.getenv("STORAGE_DIR", "/var/lib/roster-tracker"),
}

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

REPLACE_SAME_DAY_ATTENDANCE = bool(int(os.getenv("REPLACE_SAME_DAY_ATTENDANCE", "0")))
