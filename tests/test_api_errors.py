"""API 오류 응답 형식: 모든 입력 오류는 {"error": <한국어 메시지>}"""

import pytest
from rest_framework import serializers
from rest_framework.exceptions import ErrorDetail

from apps.api.common.validation import MISSING_PARAMS, first_error_message, user_error
from apps.support.alimtalk.models import AlimtalkLog

pytestmark = pytest.mark.django_db

SEND_URL = "/api/alimtalk/send/"


def _send_payload(union, phone):
    return {
        "unionId": union.id,
        "templateCode": "UNION_NOTICE",
        "title": "총회 안내",
        "recipients": [{"phoneNumber": phone, "name": "홍길동"}],
    }


def test_user_message_is_found_in_nested_errors():
    class Row(serializers.Serializer):
        phone = serializers.CharField()

        def validate_phone(self, value):
            raise user_error("전화번호 형식이 올바르지 않습니다: 123")

    class Payload(serializers.Serializer):
        rows = Row(many=True)

    ser = Payload(data={"rows": [{"phone": "123"}]})
    assert not ser.is_valid()

    assert first_error_message(ser.errors) == "전화번호 형식이 올바르지 않습니다: 123"


def test_framework_messages_fall_back_to_field_map():
    errors = {"title": [ErrorDetail("This field is required.", code="required")]}

    assert first_error_message(errors, {"title": "제목이 필요합니다."}) == "제목이 필요합니다."
    assert first_error_message(errors) == MISSING_PARAMS


def test_send_rejects_malformed_phone(admin_client, union):
    resp = admin_client.post(SEND_URL, _send_payload(union, "12345"), format="json")

    assert resp.status_code == 400
    assert resp.json() == {"error": "전화번호 형식이 올바르지 않습니다: 12345"}
    assert AlimtalkLog.objects.count() == 0


def test_send_normalizes_entered_phone(admin_client, union):
    resp = admin_client.post(SEND_URL, _send_payload(union, "010-1234-5678"), format="json")

    assert resp.status_code == 200
    assert resp.json()["data"]["kakaoSuccessCount"] == 1
    assert AlimtalkLog.objects.get().recipient_details[0]["phoneNumber"] == "01012345678"


def test_send_missing_title_is_korean(admin_client, union):
    payload = _send_payload(union, "01012345678")
    del payload["title"]

    resp = admin_client.post(SEND_URL, payload, format="json")

    assert resp.status_code == 400
    assert resp.json() == {"error": "제목이 필요합니다."}


def test_reminder_rejects_unknown_target_type(admin_client, union):
    resp = admin_client.post(
        "/api/alimtalk/consent-reminder/",
        {"unionId": union.id, "targetType": "EVERYONE", "ownerIds": [1]},
        format="json",
    )

    assert resp.status_code == 400
    assert resp.json() == {"error": "유효하지 않은 발송 대상 유형입니다."}


def test_bulk_reminder_requires_parcels(admin_client, union):
    resp = admin_client.post(
        "/api/alimtalk/consent-reminder/bulk/",
        {"unionId": union.id, "targetType": "NON_REGISTERED", "pnus": []},
        format="json",
    )

    assert resp.status_code == 400
    assert resp.json() == {"error": "필지를 선택해주세요."}


def test_pricing_rejects_bad_price(system_client):
    resp = system_client.post(
        "/api/alimtalk/pricing/",
        {"message_type": "KAKAO", "unit_price": "abc", "effective_from": "2025-01-01T00:00:00+09:00"},
        format="json",
    )

    assert resp.status_code == 400
    assert resp.json() == {"error": "단가를 확인해주세요."}


def test_log_list_rejects_bad_date(admin_client):
    resp = admin_client.get("/api/alimtalk/logs/", {"dateFrom": "어제"})

    assert resp.status_code == 400
    assert resp.json() == {"error": "날짜 형식이 올바르지 않습니다. (YYYY-MM-DD)"}


def test_duplicate_union_slug_is_korean(system_client, union):
    resp = system_client.post(
        "/api/system-admin/unions/",
        {"name": "중복 조합", "slug": union.slug, "business_type": "REDEVELOPMENT"},
        format="json",
    )

    assert resp.status_code == 400
    assert resp.json() == {"error": "조합 식별자(slug)를 확인해주세요."}
