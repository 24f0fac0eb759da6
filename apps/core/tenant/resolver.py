# ======================================================================
# PATH: apps/core/tenant/resolver.py
# ======================================================================
from __future__ import annotations

from typing import Optional

from django.conf import settings

from apps.core.models import Union
from apps.core.tenant.exceptions import TenantResolutionError


def _normalize_slug(v: object) -> str:
    return str(v or "").strip()


def _header_name() -> str:
    return str(getattr(settings, "TENANT_HEADER_NAME", "X-Union-Slug") or "X-Union-Slug").strip()


def _query_name() -> str:
    return str(getattr(settings, "TENANT_QUERY_PARAM_NAME", "union") or "union").strip()


def _default_slug() -> str:
    return _normalize_slug(getattr(settings, "TENANT_DEFAULT_SLUG", ""))


def _strict_mode() -> bool:
    return bool(getattr(settings, "TENANT_STRICT", False))


def _bypass_paths() -> list[str]:
    """
    조합 없이 호출 가능한 endpoint.
    - 토큰 발급/갱신
    - 시스템 관리자 콘솔 (조합 횡단 관리)
    """
    return list(
        getattr(
            settings,
            "TENANT_BYPASS_PATH_PREFIXES",
            [
                "/admin/",
                "/api/token/",
                "/api/system-admin/",
                "/swagger",
                "/redoc",
            ],
        )
    )


def _is_bypass_path(path: str) -> bool:
    p = str(path or "/")
    return any(p.startswith(prefix) for prefix in _bypass_paths())


def _get_query_value(request, query_name: str) -> str:
    try:
        v = request.GET.get(query_name) or ""
    except Exception:
        v = ""
    return _normalize_slug(v)


def _find_union(slug: str, *, label: str = "Union") -> Union:
    union = Union.objects.filter(slug=slug).first()
    if union is None:
        raise TenantResolutionError(
            code="tenant_invalid",
            message=f"{label} '{slug}' not found",
            http_status=404,
        )
    if not union.is_active:
        raise TenantResolutionError(
            code="tenant_inactive",
            message=f"{label} '{slug}' is inactive",
            http_status=403,
        )
    return union


def _auto_pick_single_active_union() -> Optional[Union]:
    qs = Union.objects.filter(is_active=True).order_by("id")[:2]
    rows = list(qs)
    if len(rows) == 1:
        return rows[0]
    return None


def resolve_union_from_request(request) -> Optional[Union]:
    """
    Returns:
      - Union instance, or
      - None (bypass path 또는 non-strict 모드에서 식별 불가)

    Raises:
      - TenantResolutionError
    """
    path = getattr(request, "path", "") or "/"
    header_name = _header_name()

    # 1) header
    slug = _normalize_slug(request.headers.get(header_name))
    if slug:
        return _find_union(slug)

    # 2) query param
    slug = _get_query_value(request, _query_name())
    if slug:
        return _find_union(slug)

    # 3) settings default
    slug = _default_slug()
    if slug:
        return _find_union(slug, label="Default union")

    # 4) 단일 조합 부트스트랩
    union = _auto_pick_single_active_union()
    if union:
        return union

    if _is_bypass_path(path) or not _strict_mode():
        # non-strict: body 의 unionId 로 조합을 지정하는 API 가 있으므로 None 허용
        return None

    raise TenantResolutionError(
        code="tenant_missing",
        message=f"Union header '{header_name}' required",
        http_status=400,
    )
