import os
from pathlib import Path

######################################################################
# SpectraColor application config
#
APP_VERSION = '1.0.0'

######################################################################
# Django apps and middlewares
#
INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "spectracolor.apps.SpectraColorConfig",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

######################################################################
# Generic application config
#
ROOT_URLCONF = "app.urls"
WSGI_APPLICATION = "app.wsgi.application"
# Build paths inside the project like this: BASE_DIR / 'subdir'.
BASE_DIR = Path(__file__).resolve().parent.parent
SECRET_KEY = os.environ.get("SECRET_KEY", "django-insecure-spectracolor-development-key")
DEBUG = os.environ.get("DJANGO_DEBUG", "false").lower() == "true"
ALLOWED_HOSTS = [host.strip() for host in os.environ.get("ALLOWED_HOSTS", "localhost,127.0.0.1,testserver").split(",") if host.strip()]
# Request bodies are size-checked by the views against SPECTRACOLOR_MAX_REQUEST_SIZE
DATA_UPLOAD_MAX_MEMORY_SIZE = None
# Internationalization & timezone
LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

######################################################################
# Logging config
#
# Application loggers are configured by spectracolor.config.logging when
# the app is ready; this only covers Django startup.
LOGGING = {
    'version': 1,
    "disable_existing_loggers": False,
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
        },
    },
    'loggers': {}
}

######################################################################
# Database
#
# No models; an in-memory database keeps the test runner satisfied.
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}
DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"
