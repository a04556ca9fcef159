"""
Django settings for the snapshare project.

There is no web surface: the project exists to configure the in-memory store,
its logging and the test runner.
"""

import os
import sys
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent


def _env_truthy(name: str, default: str = "false") -> bool:
    """Return True when env var is set to a truthy value."""
    return os.getenv(name, default).lower() in ("1", "true", "yes")


def _is_running_tests() -> bool:
    """Return True under `manage.py test` or pytest."""
    return "test" in sys.argv[1:2] or "pytest" in sys.modules


SECRET_KEY = os.getenv("DJANGO_SECRET_KEY", "django-insecure-snapshare-local-only")

DEBUG = _env_truthy("DJANGO_DEBUG")

ALLOWED_HOSTS = []

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    "rest_framework",
    "snapshare",
]

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

USE_TZ = True
TIME_ZONE = "UTC"
LANGUAGE_CODE = "en-gb"

MEDIA_ROOT = BASE_DIR / "media"
MEDIA_URL = "/media/"

if _is_running_tests():
    # MD5 is not a safe password hash; it only keeps the suite fast.
    PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]

REST_FRAMEWORK = {
    "DATETIME_FORMAT": "iso-8601",
    "UNAUTHENTICATED_USER": None,
}

# Store behaviour
SNAPSHARE_SEED_DEMO_DATA = _env_truthy("SNAPSHARE_SEED_DEMO_DATA")
SNAPSHARE_UNIQUE_LIKES = _env_truthy("SNAPSHARE_UNIQUE_LIKES", "true")
SNAPSHARE_UNKNOWN_USERNAME = os.getenv("SNAPSHARE_UNKNOWN_USERNAME", "Unknown")
SNAPSHARE_UPLOAD_DIR = os.getenv("SNAPSHARE_UPLOAD_DIR", "uploads")
SNAPSHARE_DEMO_PASSWORD = os.getenv("SNAPSHARE_DEMO_PASSWORD", "demo123")

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(asctime)s %(levelname)s %(name)s %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "simple"},
    },
    "loggers": {
        "snapshare": {
            "handlers": ["console"],
            "level": os.getenv("SNAPSHARE_LOG_LEVEL", "WARNING"),
            "propagate": False,
        },
    },
}
