"""Django settings for the review reminder service.

All values are read from environment variables with development defaults.
Production deployments must at least set SECRET_KEY, the POSTGRES_* variables,
the EMAIL_* SMTP credentials and CRON_SECRET.
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")


SECRET_KEY = os.getenv("SECRET_KEY", "django-insecure-review-service-dev-key")

DEBUG = _env_bool("DEBUG")

ALLOWED_HOSTS = os.getenv("ALLOWED_HOSTS", "localhost,127.0.0.1").split(",")

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    "rest_framework",
    "django_rq",
    "core",
]

MIDDLEWARE = [
    "core.middleware.request_id.RequestIDMiddleware",
    "django.middleware.common.CommonMiddleware",
    "core.middleware.process_time.ProcessTimeMiddleware",
]

ROOT_URLCONF = "review_service.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [],
        },
    },
]

WSGI_APPLICATION = "review_service.wsgi.application"

# Database (Postgres; schema is owned outside this service)
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.postgresql",
        "NAME": os.getenv("POSTGRES_DB", "postgres"),
        "USER": os.getenv("POSTGRES_USER", "postgres"),
        "PASSWORD": os.getenv("POSTGRES_PASSWORD", ""),
        "HOST": os.getenv("POSTGRES_HOST", "localhost"),
        "PORT": os.getenv("POSTGRES_PORT", "5432"),
        "OPTIONS": {
            "options": f"-c search_path={os.getenv('POSTGRES_SCHEMA', 'public')}",
        },
    }
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

LANGUAGE_CODE = "de-de"
TIME_ZONE = os.getenv("TIME_ZONE", "Europe/Berlin")
USE_I18N = True
USE_TZ = True

# Redis / django-rq
REDIS_HOST = os.getenv("REDIS_HOST", "localhost")
REDIS_PORT = int(os.getenv("REDIS_PORT", "6379"))
REDIS_DB = int(os.getenv("REDIS_DB", "0"))
REDIS_PASSWORD = os.getenv("REDIS_PASSWORD") or None

RQ_QUEUES = {
    "default": {
        "HOST": REDIS_HOST,
        "PORT": REDIS_PORT,
        "DB": REDIS_DB,
        "PASSWORD": REDIS_PASSWORD,
        "DEFAULT_TIMEOUT": 600,
    },
}

CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
    }
}

# SMTP transport, e.g. Gmail with an app password
EMAIL_HOST = os.getenv("EMAIL_HOST", "smtp.gmail.com")
EMAIL_PORT = int(os.getenv("EMAIL_PORT", "587"))
EMAIL_HOST_USER = os.getenv("EMAIL_HOST_USER", "")
EMAIL_HOST_PASSWORD = os.getenv("EMAIL_HOST_PASSWORD", "")
EMAIL_USE_TLS = _env_bool("EMAIL_USE_TLS", "true")
DEFAULT_FROM_EMAIL = os.getenv(
    "DEFAULT_FROM_EMAIL", f"Review Bot <{EMAIL_HOST_USER or 'noreply@localhost'}>"
)

# Public front end; review links in reminder emails point here
APP_BASE_URL = os.getenv("APP_BASE_URL", "http://localhost:3000")

# Shared secret expected as "Authorization: Bearer <secret>" on the cron trigger.
# Empty disables the check.
CRON_SECRET = os.getenv("CRON_SECRET", "")

# Reminder scheduling defaults applied when a subscriber has no stored preference
REMINDER_DEFAULT_INTERVAL_DAYS = float(
    os.getenv("REMINDER_DEFAULT_INTERVAL_DAYS", "30")
)
REMINDER_DEFAULT_TIME_SLOT = os.getenv("REMINDER_DEFAULT_TIME_SLOT", "morning")
REMINDER_SWEEP_CRON = os.getenv("REMINDER_SWEEP_CRON", "*/5 * * * *")

REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": [
        "rest_framework.permissions.AllowAny",
    ],
    "UNAUTHENTICATED_USER": None,
    "EXCEPTION_HANDLER": "core.exceptions.handlers.custom_exception_handler",
    "DEFAULT_RENDERER_CLASSES": [
        "rest_framework.renderers.JSONRenderer",
    ],
}

TEST_MODE = False

