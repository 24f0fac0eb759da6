# PATH: apps/core/middleware/tenant.py
from __future__ import annotations

import logging

from django.http import JsonResponse

from apps.core.tenant import (
    TenantResolutionError,
    clear_current_union,
    resolve_union_from_request,
    set_current_union,
)

logger = logging.getLogger(__name__)


class TenantMiddleware:
    """
    요청마다 조합(테넌트)을 식별해 request.tenant 와 context 에 저장.
    식별 실패는 JSON 에러로 즉시 응답.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        try:
            union = resolve_union_from_request(request)
        except TenantResolutionError as e:
            logger.info("tenant resolution failed path=%s code=%s", request.path, e.code)
            return JsonResponse(e.as_dict(), status=e.http_status)

        request.tenant = union
        set_current_union(union)
        try:
            return self.get_response(request)
        finally:
            clear_current_union()
