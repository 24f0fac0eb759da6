# PATH: apps/api/config/settings/prod.py
from .base import *
import os

# ==================================================
# PROD MODE (외부 공개 API 서버 기준)
# ==================================================

DEBUG = False

SECRET_KEY = os.environ["DJANGO_SECRET_KEY"]

# ==================================================
# SECURITY
# ==================================================

SECURE_PROXY_SSL_HEADER = ("HTTP_X_FORWARDED_PROTO", "https")
USE_X_FORWARDED_HOST = True

SESSION_COOKIE_SECURE = True
CSRF_COOKIE_SECURE = True

# ==================================================
# ALLOWED HOSTS / CORS / CSRF
# ==================================================
# prod 에서는 "*" 금지

ALLOWED_HOSTS = [
    h.strip()
    for h in os.environ.get("ALLOWED_HOSTS", "api.johapon.kr,localhost,127.0.0.1").split(",")
    if h.strip()
]

CORS_ALLOW_ALL_ORIGINS = False

CORS_ALLOWED_ORIGINS = [
    o.strip()
    for o in os.environ.get(
        "CORS_ALLOWED_ORIGINS",
        "https://johapon.kr,https://www.johapon.kr",
    ).split(",")
    if o.strip()
]

CORS_ALLOW_CREDENTIALS = True

CSRF_TRUSTED_ORIGINS = list(CORS_ALLOWED_ORIGINS)

# ==================================================
# MULTI TENANT (PROD 운영 기준)
# ==================================================
# 운영에서는 조합 헤더를 강제한다.
TENANT_STRICT = True
TENANT_HEADER_NAME = os.environ.get("TENANT_HEADER_NAME", TENANT_HEADER_NAME)

# 운영 가드: 기본 조합 자동선택은 다중 조합 데이터 혼입 사고로 이어질 수 있음
TENANT_DEFAULT_SLUG = os.environ.get("TENANT_DEFAULT_SLUG", "")
if TENANT_DEFAULT_SLUG:
    raise RuntimeError(
        "TENANT_DEFAULT_SLUG must be EMPTY in prod. "
        "Provide X-Union-Slug header explicitly for multi-tenant safety."
    )

# 운영에서는 실제 발송
ALIMTALK_MOCK = False

# ==================================================
# STATIC
# ==================================================
# gunicorn + nginx + CDN 전제

STATICFILES_STORAGE = "django.contrib.staticfiles.storage.ManifestStaticFilesStorage"
