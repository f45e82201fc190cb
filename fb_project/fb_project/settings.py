"""
Django settings for fb_project.

Values that differ between machines are read from the environment,
everything else has a development-friendly default.
"""
import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent


def env_bool(name, default=False):
    # "1", "true", "yes" (any case) switch a flag on
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


SECRET_KEY = os.environ.get(
    "DJANGO_SECRET_KEY", "dev-only-insecure-key-change-me")
DEBUG = env_bool("DJANGO_DEBUG", default=True)
ALLOWED_HOSTS = [
    h.strip() for h in os.environ.get(
        "DJANGO_ALLOWED_HOSTS", "localhost,127.0.0.1").split(",")
    if h.strip()
]

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    "ledger_core.apps.LedgerCoreConfig",
]

MIDDLEWARE = []

ROOT_URLCONF = "fb_project.urls"

# ---------- Database ----------
# SQLite by default; set FB_DB_ENGINE / FB_DB_NAME ... for PostgreSQL
DATABASES = {
    "default": {
        "ENGINE": os.environ.get("FB_DB_ENGINE", "django.db.backends.sqlite3"),
        "NAME": os.environ.get("FB_DB_NAME", str(BASE_DIR / "db.sqlite3")),
        "USER": os.environ.get("FB_DB_USER", ""),
        "PASSWORD": os.environ.get("FB_DB_PASSWORD", ""),
        "HOST": os.environ.get("FB_DB_HOST", ""),
        "PORT": os.environ.get("FB_DB_PORT", ""),
    }
}

if DATABASES["default"]["ENGINE"] == "django.db.backends.sqlite3":
    # BEGIN IMMEDIATE: a transaction takes the write lock before it reads,
    # so concurrent AR/AP postings queue up instead of failing mid-write.
    # timeout = seconds a writer waits for that lock
    DATABASES["default"]["OPTIONS"] = {
        "transaction_mode": "IMMEDIATE",
        "timeout": float(os.environ.get("FB_DB_TIMEOUT", "20")),
    }
    # Test database on disk (not in memory) so threaded tests
    # exercise real SQLite locking
    DATABASES["default"]["TEST"] = {
        "NAME": str(BASE_DIR / "test_db.sqlite3"),
    }

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

LANGUAGE_CODE = "en-us"
TIME_ZONE = os.environ.get("FB_TIME_ZONE", "Asia/Amman")
USE_I18N = False
USE_TZ = True

# ---------- Ledger engine ----------
# How many times the AR/AP updater re-reads and re-tries
# a ledger entry after losing an optimistic-concurrency race
LEDGER_ARAP_MAX_RETRIES = int(os.environ.get("LEDGER_ARAP_MAX_RETRIES", "5"))
# Seconds to wait before the 2nd attempt; doubled for every further attempt
LEDGER_ARAP_RETRY_BACKOFF = float(
    os.environ.get("LEDGER_ARAP_RETRY_BACKOFF", "0.01"))

# ---------- Celery ----------
CELERY_BROKER_URL = os.environ.get("CELERY_BROKER_URL", "memory://")
CELERY_RESULT_BACKEND = os.environ.get("CELERY_RESULT_BACKEND", None)
CELERY_TASK_ALWAYS_EAGER = env_bool("CELERY_TASK_ALWAYS_EAGER", default=False)
CELERY_TIMEZONE = TIME_ZONE

# ---------- Logging ----------
LOG_LEVEL = os.environ.get("FB_LOG_LEVEL", "INFO")

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {
            "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "verbose",
        },
    },
    "loggers": {
        "ledger_core": {
            "handlers": ["console"],
            "level": LOG_LEVEL,
            "propagate": False,
        },
    },
    "root": {"handlers": ["console"], "level": "WARNING"},
}
