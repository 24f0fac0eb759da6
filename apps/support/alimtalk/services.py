# apps/support/alimtalk/services.py
"""
알림톡 발송 — 채널 결정 · 수신자별 발송 · 문자 대체 · 비용 집계 · 로그 기록

- 발신 프로필: 조합 전용 sender key, 없으면 기본 채널('조합온') 키 (ALIMTALK_DEFAULT_SENDER_KEY)
- 템플릿 lms_failover=True 이면 알림톡 실패 수신자에게 SMS/LMS 대체 발송
- 예상 비용 = 카카오 성공 × KAKAO 단가 + SMS 성공 × SMS 단가 + LMS 성공 × LMS 단가
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, Optional

from django.conf import settings

from johapon.adapters.db.django import repositories_alimtalk as alimtalk_repo
from apps.support.alimtalk.channels import (
    AlimtalkRecipient,
    MessageChannel,
    get_fallback_channel,
    get_kakao_channel,
    send_templated_message,
)
from apps.support.alimtalk.models import DEFAULT_CHANNEL_NAME, MessageType
from apps.support.alimtalk.pricing import get_current_pricing
from libs.phone_util import mask_phone

logger = logging.getLogger(__name__)


class AlimtalkDispatchError(Exception):
    """발송 자체를 시작할 수 없는 경우 (수신자 없음, 발신 키 없음)."""


@dataclass
class ChannelConfig:
    sender_key: str
    channel_name: str
    is_default: bool


def resolve_channel_config(union) -> ChannelConfig:
    own_key = (getattr(union, "alimtalk_sender_key", "") or "").strip()
    if own_key:
        return ChannelConfig(
            sender_key=own_key,
            channel_name=(union.kakao_channel_id or "").strip() or DEFAULT_CHANNEL_NAME,
            is_default=False,
        )
    return ChannelConfig(
        sender_key=str(getattr(settings, "ALIMTALK_DEFAULT_SENDER_KEY", "") or ""),
        channel_name=DEFAULT_CHANNEL_NAME,
        is_default=True,
    )


def require_sender_config(union) -> ChannelConfig:
    """발신 키가 없으면 발송 시작 전에 중단."""
    config = resolve_channel_config(union)
    if not config.sender_key:
        raise AlimtalkDispatchError("발신 프로필 키가 설정되지 않았습니다.")
    return config


def _number(value: Decimal):
    return int(value) if value == value.to_integral_value() else float(value)


def dispatch_alimtalk(
    *,
    union,
    template_code: str,
    recipients: Iterable[AlimtalkRecipient],
    title: str = "",
    content: str = "",
    template_name: str = "",
    sender=None,
    notice_id: Optional[int] = None,
    kakao_channel: Optional[MessageChannel] = None,
    fallback_channel: Optional[MessageChannel] = None,
) -> dict:
    """
    Returns: {
        logId, totalRecipients, kakaoSuccessCount, smsSuccessCount, failCount,
        estimatedCost, channelName, isDefaultChannel
    }
    """
    recipients = list(recipients)
    if not recipients:
        raise AlimtalkDispatchError("발송 대상이 없습니다.")

    config = require_sender_config(union)

    template = alimtalk_repo.template_get_by_code(template_code)
    failover = bool(template and template.lms_failover)
    template_name = template_name or (template.template_name if template else "")

    pricing = get_current_pricing()
    kakao = kakao_channel or get_kakao_channel(config.sender_key)
    fallback = None
    if failover:
        fallback = fallback_channel or get_fallback_channel(template.template_content)

    counts = {MessageType.KAKAO: 0, MessageType.SMS: 0, MessageType.LMS: 0}
    fail_count = 0
    details: list[dict] = []
    responses: list[dict] = []

    for recipient in recipients:
        result = send_templated_message(kakao, recipient, template_code, recipient.variables)
        if not result.success and fallback is not None:
            logger.info("alimtalk failed, sms fallback to=%s error=%s", mask_phone(recipient.phone), result.error)
            responses.append(result.as_dict())
            result = send_templated_message(fallback, recipient, template_code, recipient.variables)

        responses.append(result.as_dict())
        if result.success:
            counts[result.message_type] = counts.get(result.message_type, 0) + 1
        else:
            fail_count += 1
        details.append({
            "name": recipient.name,
            "phoneNumber": recipient.phone,
            "variables": recipient.variables,
            "messageType": str(result.message_type),
            "success": result.success,
            "error": result.error or None,
        })

    kakao_success = counts[MessageType.KAKAO]
    sms_success = counts[MessageType.SMS] + counts[MessageType.LMS]
    estimated_cost = (
        kakao_success * pricing[MessageType.KAKAO]
        + counts[MessageType.SMS] * pricing[MessageType.SMS]
        + counts[MessageType.LMS] * pricing[MessageType.LMS]
    )

    log = alimtalk_repo.create_alimtalk_log(
        union_id=getattr(union, "id", None),
        sender_id=getattr(sender, "id", None),
        notice_id=notice_id,
        title=title or template_name,
        content=content,
        template_code=template_code,
        template_name=template_name,
        sender_channel_name=config.channel_name,
        recipient_count=len(recipients),
        kakao_success_count=kakao_success,
        sms_success_count=sms_success,
        fail_count=fail_count,
        cost_per_msg=pricing[MessageType.KAKAO],
        estimated_cost=estimated_cost,
        recipient_details=details,
        provider_response=responses,
    )
    logger.info(
        "alimtalk dispatched union=%s template=%s total=%s kakao=%s sms=%s fail=%s cost=%s",
        getattr(union, "id", None),
        template_code,
        len(recipients),
        kakao_success,
        sms_success,
        fail_count,
        estimated_cost,
    )
    return {
        "logId": log.id,
        "totalRecipients": len(recipients),
        "kakaoSuccessCount": kakao_success,
        "smsSuccessCount": sms_success,
        "failCount": fail_count,
        "estimatedCost": _number(Decimal(estimated_cost)),
        "channelName": config.channel_name,
        "isDefaultChannel": config.is_default,
    }
