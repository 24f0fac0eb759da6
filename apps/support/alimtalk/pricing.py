# apps/support/alimtalk/pricing.py
"""
현재 단가 조회 — 별도 is_current 플래그 없이 조회 정렬로 결정.
유형별 유효 행이 없으면 기본 단가 (KAKAO 15 / SMS 20 / LMS 50).
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional

from django.utils import timezone

from apps.support.alimtalk.models import AlimtalkPricing, MessageType

DEFAULT_PRICES: dict[str, Decimal] = {
    MessageType.KAKAO: Decimal("15"),
    MessageType.SMS: Decimal("20"),
    MessageType.LMS: Decimal("50"),
}


def get_current_pricing_row(message_type: str, now: Optional[datetime] = None) -> Optional[AlimtalkPricing]:
    now = now or timezone.now()
    return (
        AlimtalkPricing.objects.filter(message_type=message_type, effective_from__lte=now)
        .order_by("-effective_from", "-id")
        .first()
    )


def get_current_price(message_type: str, now: Optional[datetime] = None) -> Decimal:
    row = get_current_pricing_row(message_type, now)
    if row is None:
        return DEFAULT_PRICES[message_type]
    return row.unit_price


def get_current_pricing(now: Optional[datetime] = None) -> dict[str, Decimal]:
    now = now or timezone.now()
    return {t: get_current_price(t, now) for t in MessageType.values}


def pricing_history(message_type: Optional[str] = None):
    qs = AlimtalkPricing.objects.all().order_by("message_type", "-effective_from", "-id")
    if message_type:
        qs = qs.filter(message_type=message_type)
    return qs
