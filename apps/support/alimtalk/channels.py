# apps/support/alimtalk/channels.py
"""
메시지 채널 인터페이스

send_templated_message(channel, recipient, template_code, variables) -> DeliveryResult

- ProxyAlimtalkChannel : 카카오 알림톡 (프록시 서버 경유)
- SolapiSmsChannel     : 알림톡 실패 시 SMS/LMS 대체 발송 (Solapi)
- 개발/테스트(ALIMTALK_MOCK=true 또는 DEBUG): alimtalk_mock 의 Mock 채널 사용
"""

from __future__ import annotations

import logging
import os
import re
from abc import ABC, abstractmethod
from dataclasses import asdict, dataclass, field
from typing import Any, Optional

from django.conf import settings
from solapi import SolapiMessageService
from solapi.model import RequestMessage

from apps.support.alimtalk.models import MessageType
from apps.support.alimtalk.proxy_client import AlimtalkProxyClient, ProxyError
from libs.phone_util import mask_phone

logger = logging.getLogger(__name__)

SMS_MAX_BYTES = 90
_PROVIDER_TYPES = {"AT": MessageType.KAKAO, "SM": MessageType.SMS, "LM": MessageType.LMS}
_VARIABLE_RE = re.compile(r"#\{([^}]+)\}")


@dataclass
class AlimtalkRecipient:
    phone: str
    name: str = ""
    variables: dict[str, str] = field(default_factory=dict)


@dataclass
class DeliveryResult:
    success: bool
    message_type: str = MessageType.KAKAO
    provider_message_id: Optional[str] = None
    error: str = ""

    def as_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["message_type"] = str(self.message_type)
        return data


def render_template(content: str, variables: dict[str, str]) -> str:
    """#{변수} 치환. 없는 변수는 빈 문자열."""
    return _VARIABLE_RE.sub(lambda m: str(variables.get(m.group(1), "")), content or "")


def sms_type_for(text: str) -> str:
    return MessageType.SMS if len(text.encode("euc-kr", errors="replace")) <= SMS_MAX_BYTES else MessageType.LMS


class MessageChannel(ABC):
    message_type: str = MessageType.KAKAO

    @abstractmethod
    def send(self, recipient: AlimtalkRecipient, template_code: str, variables: dict[str, str]) -> DeliveryResult:
        ...


class ProxyAlimtalkChannel(MessageChannel):
    message_type = MessageType.KAKAO

    def __init__(self, sender_key: str, client: Optional[AlimtalkProxyClient] = None):
        self.sender_key = sender_key
        self.client = client or AlimtalkProxyClient()

    def send(self, recipient, template_code, variables):
        payload = {
            "senderKey": self.sender_key,
            "templateCode": template_code,
            "receiver": recipient.phone,
            "recvname": recipient.name,
            "variables": variables,
        }
        try:
            body = self.client.send(payload)
        except ProxyError as e:
            return DeliveryResult(success=False, message_type=self.message_type, error=str(e)[:500])

        code = str(body.get("result_code", body.get("code", "-1")))
        message_type = _PROVIDER_TYPES.get(str(body.get("msg_type") or "AT"), MessageType.KAKAO)
        if code in ("0", "1"):
            return DeliveryResult(
                success=True,
                message_type=message_type,
                provider_message_id=body.get("msg_id"),
            )
        return DeliveryResult(
            success=False,
            message_type=message_type,
            error=str(body.get("message") or "unknown error")[:500],
        )


class SolapiSmsChannel(MessageChannel):
    """템플릿 본문을 변수 치환해 SMS(90byte 이하) / LMS 로 발송"""

    message_type = MessageType.SMS

    def __init__(self, client, sender: str, template_content: str = ""):
        self.client = client
        self.sender = sender
        self.template_content = template_content

    def send(self, recipient, template_code, variables):
        text = render_template(self.template_content, variables).strip()
        message_type = sms_type_for(text)
        if not self.sender:
            return DeliveryResult(success=False, message_type=message_type, error="sender_required")
        if not text:
            return DeliveryResult(success=False, message_type=message_type, error="empty_text")

        message = RequestMessage(from_=self.sender, to=recipient.phone, text=text)
        response = self.client.send(message)
        group_id = getattr(getattr(response, "group_info", None), "group_id", None)
        logger.info("sms fallback ok to=%s type=%s group_id=%s", mask_phone(recipient.phone), message_type, group_id)
        return DeliveryResult(success=True, message_type=message_type, provider_message_id=group_id)


def send_templated_message(
    channel: MessageChannel,
    recipient: AlimtalkRecipient,
    template_code: str,
    variables: dict[str, str],
) -> DeliveryResult:
    """채널 예외는 실패 결과로 변환 (배치 전체를 중단하지 않음)"""
    try:
        return channel.send(recipient, template_code, variables)
    except Exception as e:
        logger.warning(
            "send_templated_message failed channel=%s to=%s template=%s: %s",
            type(channel).__name__,
            mask_phone(recipient.phone),
            template_code,
            e,
            exc_info=True,
        )
        return DeliveryResult(success=False, message_type=channel.message_type, error=str(e)[:500])


# ---------------------------------------------------------------------------
# 채널 팩토리
# ---------------------------------------------------------------------------


def _is_mock_mode() -> bool:
    """ALIMTALK_MOCK=true 또는 DEBUG=True 이면 실제 발송 없이 Mock 사용."""
    if os.environ.get("ALIMTALK_MOCK", "").lower() in ("true", "1", "yes"):
        return True
    if getattr(settings, "ALIMTALK_MOCK", False):
        return True
    return bool(getattr(settings, "DEBUG", False))


def _get_solapi_credentials() -> tuple[Optional[str], Optional[str]]:
    """Solapi API Key/Secret (환경변수 우선, 설정 fallback)."""
    key = os.environ.get("SOLAPI_API_KEY") or getattr(settings, "SOLAPI_API_KEY", None)
    secret = os.environ.get("SOLAPI_API_SECRET") or getattr(settings, "SOLAPI_API_SECRET", None)
    return (key or None, secret or None)


def _sms_sender() -> str:
    return os.environ.get("SOLAPI_SENDER") or getattr(settings, "SOLAPI_SENDER", "") or ""


def get_kakao_channel(sender_key: str) -> MessageChannel:
    if _is_mock_mode():
        from apps.support.alimtalk.alimtalk_mock import MockAlimtalkChannel
        return MockAlimtalkChannel(sender_key=sender_key)
    return ProxyAlimtalkChannel(sender_key=sender_key)


def get_fallback_channel(template_content: str) -> Optional[MessageChannel]:
    """
    SMS/LMS 대체 발송 채널.
    Solapi 키가 없으면 None (대체 발송 없이 실패 처리).
    """
    if _is_mock_mode():
        from apps.support.alimtalk.alimtalk_mock import MockSolapiMessageService
        return SolapiSmsChannel(
            MockSolapiMessageService(),
            sender=_sms_sender() or "01000000000",
            template_content=template_content,
        )
    key, secret = _get_solapi_credentials()
    if not key or not secret:
        logger.info("sms fallback disabled: Solapi not configured")
        return None
    return SolapiSmsChannel(
        SolapiMessageService(api_key=key, api_secret=secret),
        sender=_sms_sender(),
        template_content=template_content,
    )
