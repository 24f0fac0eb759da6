# apps/api/common/middleware.py
# 뷰에서 처리되지 않은 예외를 500 JSON({"error": ...})으로 변환.
# process_exception 응답은 CorsMiddleware를 거치지 않으므로 CORS 헤더를 직접 붙인다.
from __future__ import annotations

import logging

from django.conf import settings
from django.http import JsonResponse

logger = logging.getLogger(__name__)

SERVER_ERROR_MESSAGE = "서버 오류가 발생했습니다."


def _with_cors_headers(request, response):
    origin = (request.META.get("HTTP_ORIGIN") or "").strip()
    if getattr(settings, "CORS_ALLOW_ALL_ORIGINS", False) and origin:
        response["Access-Control-Allow-Origin"] = origin
    else:
        allowed = getattr(settings, "CORS_ALLOWED_ORIGINS", []) or []
        if origin and origin in allowed:
            response["Access-Control-Allow-Origin"] = origin
    if getattr(settings, "CORS_ALLOW_CREDENTIALS", False):
        response["Access-Control-Allow-Credentials"] = "true"
    return response


class UnhandledExceptionMiddleware:
    """미처리 예외 → 500 JSON. 운영(DEBUG=False)에서는 예외 문자열을 노출하지 않는다."""

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        return self.get_response(request)

    def process_exception(self, request, exception):
        logger.exception("Unhandled exception on %s %s", request.method, request.path)
        body = {"error": SERVER_ERROR_MESSAGE}
        if settings.DEBUG:
            body["detail"] = str(exception)
        return _with_cors_headers(request, JsonResponse(body, status=500))
