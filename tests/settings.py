"""Minimal Django settings for running django-confreg tests."""

DATABASES = {"default": {"ENGINE": "django.db.backends.sqlite3", "NAME": ":memory:"}}
INSTALLED_APPS = [
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.messages",
    "django.contrib.sessions",
    "django_confreg.registration",
    "django_confreg.visa",
    "django_confreg.invoices",
    "django_confreg.manage",
]
MIDDLEWARE = [
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
]
TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
                "django_confreg.context_processors.confreg_features",
            ],
        },
    },
]
SECRET_KEY = "test-secret-key-not-for-production"
DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"
USE_TZ = True
ROOT_URLCONF = "tests.urls"
LOGIN_URL = "/accounts/login/"
EMAIL_BACKEND = "django.core.mail.backends.locmem.EmailBackend"
DEFAULT_FROM_EMAIL = "registration@example.com"

DJANGO_CONFREG = {
    "stripe": {
        "secret_key": "sk_test_123",
        "webhook_secret": "whsec_test",
    },
    "invoice": {
        "service_url": "https://invoices.example.com/api/send",
        "company_name": "Example Conferences Pty Ltd",
        "company_address": "123 Business Street, Sydney NSW 2000",
        "company_phone": "+61 2 1234 5678",
        "company_email": "info@example.com",
        "abn": "12 345 678 901",
        "bank_account_name": "Example Conferences Pty Ltd",
        "bank_bsb": "123-456",
        "bank_account_number": "12345678",
    },
    "storage": {
        "endpoint_url": "https://r2.example.com",
        "bucket": "confreg-test",
        "access_key_id": "key",
        "secret_access_key": "secret",
    },
    "pricing": {"cutoff": "2025-08-15T00:00:00+10:00"},
    "checkout_links": {
        "provsec": {
            "1": "https://buy.stripe.com/provsec_author",
            "2": "https://buy.stripe.com/provsec_non_author",
        },
        "raid": {
            "1": {"early": "https://buy.stripe.com/raid_paper_early", "late": "https://buy.stripe.com/raid_paper_late"},
            "2": {"early": "https://buy.stripe.com/raid_poster_early", "late": "https://buy.stripe.com/raid_poster_late"},
            "3": {
                "early": "https://buy.stripe.com/raid_student_early",
                "late": "https://buy.stripe.com/raid_student_late",
            },
        },
    },
}
