# ======================================================================
# PATH: apps/core/db/tenant_queryset.py
# ======================================================================
from __future__ import annotations

from django.db import models

from apps.core.tenant.context import get_current_union
from apps.core.tenant.exceptions import TenantResolutionError


class TenantQuerySet(models.QuerySet):
    """
    조합 단위 QuerySet

    규칙:
    - 조합이 resolve 되지 않으면 결과는 항상 empty
    - union FK 를 가진 모델이면 바로 사용 가능
    """

    def for_union(self, union):
        if union is None:
            return self.none()
        return self.filter(union=union)

    def for_current_tenant(self):
        return self.for_union(get_current_union())

    def require_tenant(self):
        union = get_current_union()
        if union is None:
            raise TenantResolutionError(
                code="tenant_missing",
                message="Union context required",
                http_status=400,
            )
        return self.filter(union=union)
