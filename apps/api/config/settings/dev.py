from .base import *

DEBUG = True
ALLOWED_HOSTS = ["*"]

INSTALLED_APPS += [
    "debug_toolbar",
]

MIDDLEWARE.insert(0, "debug_toolbar.middleware.DebugToolbarMiddleware")

INTERNAL_IPS = [
    "127.0.0.1",
]

# 로컬에서는 알림톡/문자 실제 발송 금지
ALIMTALK_MOCK = True
ALIMTALK_DEFAULT_SENDER_KEY = ALIMTALK_DEFAULT_SENDER_KEY or "dev-default-sender-key"

LOGGING["root"]["level"] = "DEBUG"
