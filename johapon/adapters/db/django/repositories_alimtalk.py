"""
Alimtalk 도메인 DB 기록 — .objects 접근을 adapters 내부로 한정.
"""
from __future__ import annotations

from decimal import Decimal
from typing import Any, Optional


def create_alimtalk_log(
    *,
    union_id: Optional[int],
    sender_id: Optional[int],
    title: str,
    content: str,
    template_code: str,
    template_name: str,
    sender_channel_name: str,
    recipient_count: int,
    kakao_success_count: int,
    sms_success_count: int,
    fail_count: int,
    cost_per_msg: Decimal,
    estimated_cost: Decimal,
    recipient_details: list[dict],
    provider_response: Any = None,
    notice_id: Optional[int] = None,
):
    """발송 배치 1건 = AlimtalkLog 1행"""
    from apps.support.alimtalk.models import AlimtalkLog

    return AlimtalkLog.objects.create(
        union_id=union_id,
        sender_id=sender_id,
        notice_id=notice_id,
        title=(title or "")[:255],
        content=content or "",
        template_code=template_code or "",
        template_name=(template_name or "")[:255],
        sender_channel_name=sender_channel_name or "",
        recipient_count=recipient_count,
        success_count=kakao_success_count + sms_success_count,
        kakao_success_count=kakao_success_count,
        sms_success_count=sms_success_count,
        fail_count=fail_count,
        cost_per_msg=cost_per_msg,
        estimated_cost=estimated_cost,
        recipient_details=recipient_details or [],
        provider_response=provider_response,
    )


def template_get_by_code(template_code: str):
    from apps.support.alimtalk.models import AlimtalkTemplate
    return AlimtalkTemplate.objects.filter(template_code=template_code).first()
