# PATH: apps/api/config/settings/test.py
from .base import *

DEBUG = False

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

PASSWORD_HASHERS = [
    "django.contrib.auth.hashers.MD5PasswordHasher",
]

ALIMTALK_MOCK = True
ALIMTALK_PROXY_URL = "http://alimtalk-proxy.test"
ALIMTALK_DEFAULT_SENDER_KEY = "test-default-sender-key"
SITE_URL = "https://johapon.test"

CONSENT_ASYNC_THRESHOLD = 50
CONSENT_STATUS_STRICT = False

TENANT_DEFAULT_SLUG = ""
TENANT_STRICT = False

LOGGING["root"]["level"] = "WARNING"
