import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.getenv("DJANGO_SECRET_KEY", "insecure-secret-key")
DEBUG = os.getenv("DJANGO_DEBUG", "1") == "1"
ALLOWED_HOSTS = ["*"] if DEBUG else []

INSTALLED_APPS = [
    "hh_calendar.apps.HhCalendarConfig",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "rest_framework",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "hh_portal.urls"

WSGI_APPLICATION = "hh_portal.wsgi.application"

# SQLite cesta lze přesměrovat mimo repo přes DJANGO_DB_PATH.
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": os.getenv("DJANGO_DB_PATH", str(BASE_DIR / "db_dev.sqlite3")),
    }
}

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

REST_FRAMEWORK = {
    "DEFAULT_RENDERER_CLASSES": ["rest_framework.renderers.JSONRenderer"],
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": ["rest_framework.permissions.AllowAny"],
    "UNAUTHENTICATED_USER": None,
}

# Hanke-Henry calendar
HH_CALENDAR_DEFAULT_ZONE = os.getenv("HH_CALENDAR_DEFAULT_ZONE", TIME_ZONE)
HH_CALENDAR_MIN_DAYS_IN_FIRST_WEEK = int(os.getenv("HH_CALENDAR_MIN_DAYS_IN_FIRST_WEEK", "7"))
_lower_limit = os.getenv("HH_CALENDAR_LOWER_LIMIT_YEAR", "1")
HH_CALENDAR_LOWER_LIMIT_YEAR = None if _lower_limit.lower() in {"", "none"} else int(_lower_limit)
