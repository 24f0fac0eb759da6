import pytest

from apps.core.models import Union, User
from apps.domains.consent.models import ConsentStatus
from apps.domains.consent.services import upsert_user_consent

pytestmark = pytest.mark.django_db

UNIONS_URL = "/api/system-admin/unions/"


def test_me(admin_client, union_admin):
    resp = admin_client.get("/api/core/me/")

    assert resp.status_code == 200
    assert resp.json()["username"] == union_admin.username
    assert resp.json()["role"] == User.Role.ADMIN


def test_union_admin_cannot_use_system_console(admin_client):
    assert admin_client.get(UNIONS_URL).status_code == 403


def test_system_admin_creates_union_without_leaking_sender_key(system_client):
    resp = system_client.post(
        UNIONS_URL,
        {
            "name": "대조1구역 재개발조합",
            "slug": "daejo1",
            "business_type": "REDEVELOPMENT",
            "kakao_channel_id": "대조1구역",
            "alimtalk_sender_key": "sender-key-123",
        },
        format="json",
    )

    body = resp.json()
    assert resp.status_code == 201
    assert "alimtalk_sender_key" not in body
    assert body["has_own_channel"] is True
    assert Union.objects.get(slug="daejo1").alimtalk_sender_key == "sender-key-123"


def test_delete_only_disables(system_client, union):
    resp = system_client.delete(f"{UNIONS_URL}{union.id}/")

    union.refresh_from_db()
    assert resp.status_code == 204
    assert union.is_active is False


def test_list_filters_active(system_client, union, other_union):
    other_union.is_active = False
    other_union.save()

    resp = system_client.get(UNIONS_URL, {"is_active": "true"})

    slugs = [u["slug"] for u in resp.json()["results"]]
    assert slugs == [union.slug]


def test_union_stats(system_client, union, stage, make_member):
    a = make_member("홍길동")
    make_member("대기자", status=User.Status.PENDING_APPROVAL)
    upsert_user_consent(user=a, stage=stage, status=ConsentStatus.AGREED)

    resp = system_client.get(f"{UNIONS_URL}{union.id}/stats/")

    body = resp.json()
    assert resp.status_code == 200
    assert body["memberStatusCounts"] == {"APPROVED": 1, "PENDING_APPROVAL": 1}
    assert body["stages"][0]["agreedCount"] == 1


def test_unknown_union_header_is_rejected(admin_client, union):
    resp = admin_client.get("/api/core/me/", HTTP_X_UNION_SLUG="no-such-union")

    assert resp.status_code == 404
    assert resp.json()["code"] == "tenant_invalid"


def test_inactive_union_header_is_rejected(admin_client, union):
    union.is_active = False
    union.save()

    resp = admin_client.get("/api/core/me/", HTTP_X_UNION_SLUG=union.slug)

    assert resp.status_code == 403
    assert resp.json()["code"] == "tenant_inactive"


def test_strict_mode_requires_union(settings, admin_client, union, other_union):
    settings.TENANT_STRICT = True

    assert admin_client.get("/api/core/me/").status_code == 400
    # 시스템 관리자 콘솔은 조합 헤더 없이 접근
    assert admin_client.get(UNIONS_URL).status_code == 403
