"""
Core Repository — Union, User, MemberInvite.
ORM 접근은 함수 내부에서만 lazy import.
"""
from __future__ import annotations

from datetime import timedelta
from typing import Any, Optional

# ---------------------------------------------------------------------------
# Union
# ---------------------------------------------------------------------------


def union_get_by_id(union_id) -> Optional[Any]:
    from apps.core.models import Union
    return Union.objects.filter(id=union_id, is_active=True).first()


def union_get_by_id_any(union_id) -> Optional[Any]:
    from apps.core.models import Union
    return Union.objects.filter(id=union_id).first()


def union_get_by_slug(slug: str) -> Optional[Any]:
    from apps.core.models import Union
    return Union.objects.filter(slug=slug).first()


def union_member_status_counts(union) -> dict[str, int]:
    from django.db.models import Count

    from apps.core.models import User
    rows = (
        User.objects.filter(union=union)
        .values("user_status")
        .annotate(cnt=Count("id"))
    )
    return {r["user_status"]: r["cnt"] for r in rows}


# ---------------------------------------------------------------------------
# MemberInvite
# ---------------------------------------------------------------------------


def member_invite_create(
    *,
    union,
    owner,
    name: str,
    phone: str,
    property_address: str = "",
    ttl_days: int = 14,
) -> Any:
    import secrets

    from django.utils import timezone

    from apps.core.models import MemberInvite
    return MemberInvite.objects.create(
        union=union,
        owner=owner,
        name=name,
        phone=phone,
        property_address=property_address or "",
        token=secrets.token_urlsafe(24),
        expires_at=timezone.now() + timedelta(days=ttl_days),
    )
