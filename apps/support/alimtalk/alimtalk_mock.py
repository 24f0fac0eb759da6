"""
Mock 발송 채널 — 개발/테스트에서 실제 API 호출 없이 발송될 JSON 만 로깅.

실제 API 를 쓰면 비용이 나가고, 템플릿 미승인 시 에러가 나므로
ALIMTALK_MOCK=true 또는 DEBUG=True 일 때 이 모듈을 사용.
"""

from __future__ import annotations

import json
import logging
import uuid
from typing import Any

from apps.support.alimtalk.channels import (
    AlimtalkRecipient,
    DeliveryResult,
    MessageChannel,
)
from apps.support.alimtalk.models import MessageType
from libs.phone_util import mask_phone

logger = logging.getLogger(__name__)


def _message_to_log_payload(message: Any) -> Any:
    """RequestMessage(또는 리스트)를 로그용 dict 로 변환."""
    if isinstance(message, list):
        return [_message_to_log_payload(m) for m in message]
    if hasattr(message, "model_dump"):
        return message.model_dump(exclude_none=True)
    if isinstance(message, dict):
        return message
    return {"raw": str(message)}


class MockAlimtalkChannel(MessageChannel):
    """알림톡 발송 대신 로그만 남기고 KAKAO 성공으로 응답."""

    message_type = MessageType.KAKAO

    def __init__(self, sender_key: str = ""):
        self.sender_key = sender_key

    def send(self, recipient: AlimtalkRecipient, template_code: str, variables: dict[str, str]) -> DeliveryResult:
        payload = {
            "senderKey": (self.sender_key or "")[:6] + "…",
            "templateCode": template_code,
            "receiver": mask_phone(recipient.phone),
            "recvname": recipient.name,
            "variables": variables,
        }
        logger.info(
            "[MockAlimtalk] 발송 스킵 (실제 API 미호출)\n%s",
            json.dumps(payload, indent=2, ensure_ascii=False),
        )
        return DeliveryResult(
            success=True,
            message_type=MessageType.KAKAO,
            provider_message_id=f"mock-{uuid.uuid4().hex[:12]}",
        )


class MockSolapiMessageService:
    """SolapiMessageService.send 호환 Mock (SMS/LMS 대체 발송용)."""

    def send(self, messages: Any, request_config: Any = None) -> Any:
        if not isinstance(messages, list):
            messages = [messages]
        logger.info(
            "[MockSolapi] 발송 스킵 (실제 API 미호출)\n%s",
            json.dumps({"messages": _message_to_log_payload(messages)}, indent=2, ensure_ascii=False),
        )
        return _MockSendResponse(group_id=f"mock-{uuid.uuid4().hex[:12]}", count=len(messages))


class _MockSendResponse:
    def __init__(self, group_id: str, count: int = 1):
        self.group_info = _MockGroupInfo(group_id=group_id, count=count)


class _MockGroupInfo:
    def __init__(self, group_id: str, count: int = 1):
        self.group_id = group_id
        self.count = count
