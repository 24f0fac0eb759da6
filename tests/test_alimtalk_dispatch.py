from datetime import timedelta
from decimal import Decimal

import pytest
from django.utils import timezone

from apps.support.alimtalk.alimtalk_mock import MockSolapiMessageService
from apps.support.alimtalk.channels import (
    AlimtalkRecipient,
    DeliveryResult,
    MessageChannel,
    SolapiSmsChannel,
    render_template,
    sms_type_for,
)
from apps.support.alimtalk.models import AlimtalkLog, AlimtalkPricing, AlimtalkTemplate, MessageType
from apps.support.alimtalk.pricing import get_current_pricing
from apps.support.alimtalk.services import AlimtalkDispatchError, dispatch_alimtalk

pytestmark = pytest.mark.django_db


class RejectingKakao(MessageChannel):
    """알림톡 미수신(카카오톡 미사용자 등) 재현"""

    def __init__(self):
        self.calls = 0

    def send(self, recipient, template_code, variables):
        self.calls += 1
        return DeliveryResult(success=False, message_type=MessageType.KAKAO, error="not a kakao user")


class ExplodingChannel(MessageChannel):
    def send(self, recipient, template_code, variables):
        raise RuntimeError("provider timeout")


def _recipients(n):
    return [
        AlimtalkRecipient(phone=f"0101234{i:04d}", name=f"소유자{i}", variables={"이름": f"소유자{i}"})
        for i in range(n)
    ]


def _sms_channel(content):
    return SolapiSmsChannel(MockSolapiMessageService(), sender="0212345678", template_content=content)


def test_default_channel_and_default_prices(union):
    result = dispatch_alimtalk(union=union, template_code="NOTICE", title="공지", recipients=_recipients(3))

    assert result["channelName"] == "조합온"
    assert result["isDefaultChannel"] is True
    assert result["kakaoSuccessCount"] == 3
    assert result["estimatedCost"] == 45

    log = AlimtalkLog.objects.get(id=result["logId"])
    assert log.union_id == union.id
    assert log.success_count == 3
    assert log.sender_channel_name == "조합온"


def test_union_own_channel(union):
    union.alimtalk_sender_key = "own-key"
    union.kakao_channel_id = "장위1구역"
    union.save()

    result = dispatch_alimtalk(union=union, template_code="NOTICE", recipients=_recipients(1))

    assert result["channelName"] == "장위1구역"
    assert result["isDefaultChannel"] is False


def test_no_recipients(union):
    with pytest.raises(AlimtalkDispatchError, match="발송 대상이 없습니다."):
        dispatch_alimtalk(union=union, template_code="NOTICE", recipients=[])


def test_missing_sender_key(settings, union):
    settings.ALIMTALK_DEFAULT_SENDER_KEY = ""

    with pytest.raises(AlimtalkDispatchError, match="발신 프로필 키"):
        dispatch_alimtalk(union=union, template_code="NOTICE", recipients=_recipients(1))


def test_failover_sms_is_counted_at_sms_price(union):
    AlimtalkTemplate.objects.create(
        template_code="REMIND",
        template_name="독려",
        template_content="#{이름}님 동의서 제출 부탁드립니다.",
        lms_failover=True,
    )

    result = dispatch_alimtalk(
        union=union,
        template_code="REMIND",
        recipients=_recipients(2),
        kakao_channel=RejectingKakao(),
        fallback_channel=_sms_channel("#{이름}님 동의서 제출 부탁드립니다."),
    )

    assert result["kakaoSuccessCount"] == 0
    assert result["smsSuccessCount"] == 2
    assert result["failCount"] == 0
    assert result["estimatedCost"] == 40
    log = AlimtalkLog.objects.get(id=result["logId"])
    assert log.sms_success_count == 2
    assert log.recipient_details[0]["messageType"] == MessageType.SMS


def test_long_failover_text_is_lms(union):
    long_text = "안내 " * 60
    AlimtalkTemplate.objects.create(
        template_code="LONG",
        template_name="장문",
        template_content=long_text,
        lms_failover=True,
    )

    result = dispatch_alimtalk(
        union=union,
        template_code="LONG",
        recipients=_recipients(1),
        kakao_channel=RejectingKakao(),
        fallback_channel=_sms_channel(long_text),
    )

    assert result["smsSuccessCount"] == 1
    assert result["estimatedCost"] == 50


def test_no_failover_without_template_flag(union):
    AlimtalkTemplate.objects.create(template_code="PLAIN", template_name="일반", lms_failover=False)
    fallback = _sms_channel("unused")

    result = dispatch_alimtalk(
        union=union,
        template_code="PLAIN",
        recipients=_recipients(2),
        kakao_channel=RejectingKakao(),
        fallback_channel=fallback,
    )

    assert result["failCount"] == 2
    assert result["smsSuccessCount"] == 0
    assert result["estimatedCost"] == 0


def test_channel_exception_becomes_failure(union):
    result = dispatch_alimtalk(
        union=union,
        template_code="NOTICE",
        recipients=_recipients(2),
        kakao_channel=ExplodingChannel(),
    )

    assert result["failCount"] == 2
    log = AlimtalkLog.objects.get(id=result["logId"])
    assert "provider timeout" in log.recipient_details[0]["error"]


def test_current_pricing_ignores_future_rows(union):
    now = timezone.now()
    AlimtalkPricing.objects.create(message_type=MessageType.KAKAO, unit_price=Decimal("13"), effective_from=now - timedelta(days=30))
    AlimtalkPricing.objects.create(message_type=MessageType.KAKAO, unit_price=Decimal("14"), effective_from=now - timedelta(days=1))
    AlimtalkPricing.objects.create(message_type=MessageType.KAKAO, unit_price=Decimal("99"), effective_from=now + timedelta(days=1))

    pricing = get_current_pricing()

    assert pricing[MessageType.KAKAO] == Decimal("14")
    assert pricing[MessageType.SMS] == Decimal("20")
    assert pricing[MessageType.LMS] == Decimal("50")

    result = dispatch_alimtalk(union=union, template_code="NOTICE", recipients=_recipients(2))
    assert result["estimatedCost"] == 28


def test_render_template_and_sms_length():
    assert render_template("#{이름}님, #{단지} 안내", {"이름": "홍길동"}) == "홍길동님,  안내"
    assert sms_type_for("짧은 문자") == MessageType.SMS
    assert sms_type_for("가" * 46) == MessageType.LMS
