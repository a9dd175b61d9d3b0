"""Django settings for the example development server.

Secrets are read from ``examples/.env`` (see ``python-dotenv``); everything
else uses development defaults.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent
load_dotenv(BASE_DIR / ".env")

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "example-dev-key-not-for-production")
DEBUG = True
ALLOWED_HOSTS = ["*"]

INSTALLED_APPS = [
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.messages",
    "django.contrib.sessions",
    "django.contrib.staticfiles",
    "django_confreg.registration",
    "django_confreg.visa",
    "django_confreg.invoices",
    "django_confreg.manage",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
]

ROOT_URLCONF = "urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
                "django_confreg.context_processors.confreg_features",
            ],
        },
    },
]

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": BASE_DIR / "db.sqlite3",
    }
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"
USE_TZ = True
TIME_ZONE = "Australia/Brisbane"

STATIC_URL = "static/"

LOGIN_URL = "/accounts/login/"
LOGIN_REDIRECT_URL = "/manage/customers/"

EMAIL_BACKEND = os.environ.get("EMAIL_BACKEND", "django.core.mail.backends.console.EmailBackend")
EMAIL_HOST = os.environ.get("SMTP_HOST", "")
EMAIL_PORT = int(os.environ.get("SMTP_PORT", "587"))
EMAIL_HOST_USER = os.environ.get("SMTP_USER", "")
EMAIL_HOST_PASSWORD = os.environ.get("SMTP_PASSWORD", "")
EMAIL_USE_SSL = os.environ.get("SMTP_SECURE", "") == "true"
EMAIL_USE_TLS = not EMAIL_USE_SSL
DEFAULT_FROM_EMAIL = os.environ.get("SMTP_FROM_EMAIL", "registration@example.com")

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "handlers": {"console": {"class": "logging.StreamHandler"}},
    "loggers": {"django_confreg": {"handlers": ["console"], "level": "INFO"}},
}

DJANGO_CONFREG = {
    "stripe": {
        "secret_key": os.environ.get("STRIPE_SECRET_KEY", ""),
        "publishable_key": os.environ.get("STRIPE_PUBLISHABLE_KEY", ""),
        "webhook_secret": os.environ.get("STRIPE_WEBHOOK_SECRET", ""),
    },
    "invoice": {
        "service_url": os.environ.get("INVOICE_SERVICE_URL", ""),
        "company_name": "Example Conferences Pty Ltd",
        "company_address": "123 Business Street, Sydney NSW 2000, Australia",
        "company_phone": "+61 2 1234 5678",
        "company_email": "info@example.com",
        "abn": "12 345 678 901",
        "bank_account_name": "Example Conferences Pty Ltd",
        "bank_bsb": "123-456",
        "bank_account_number": "12345678",
    },
    "storage": {
        "endpoint_url": os.environ.get("R2_END_POINT", ""),
        "bucket": os.environ.get("R2_BUCKET", ""),
        "access_key_id": os.environ.get("R2_ACCESS_KEY_ID", ""),
        "secret_access_key": os.environ.get("R2_SECRET_ACCESS_KEY", ""),
    },
    "checkout_links": {
        "provsec": {
            "1": os.environ.get("PROVSEC_AUTHOR_CHECKOUT_URL", "https://buy.stripe.com/test_provsec_author"),
            "2": os.environ.get("PROVSEC_NON_AUTHOR_CHECKOUT_URL", "https://buy.stripe.com/test_provsec_non_author"),
        },
        "raid": {
            "1": {"early": "https://buy.stripe.com/test_raid_paper_early", "late": "https://buy.stripe.com/test_raid_paper_late"},
            "2": {"early": "https://buy.stripe.com/test_raid_poster_early", "late": "https://buy.stripe.com/test_raid_poster_late"},
            "3": {"early": "https://buy.stripe.com/test_raid_student_early", "late": "https://buy.stripe.com/test_raid_student_late"},
            "4": {"early": "https://buy.stripe.com/test_raid_regular_early", "late": "https://buy.stripe.com/test_raid_regular_late"},
        },
    },
}
