"""Pytest fixtures (pytest-django, in-memory SQLite)."""

import pytest
import requests
from rest_framework.test import APIClient

from apps.core.models import BusinessType, Union, User, UserPropertyUnit
from apps.domains.consent.models import ConsentStage
from libs.queue import QueueClient, QueueUnavailableError
from libs.redis.client import reset_redis_state


def _refuse_connection(*args, **kwargs):
    raise requests.ConnectionError("proxy offline (test)")


@pytest.fixture(autouse=True)
def offline_network(monkeypatch):
    """
    테스트 중 외부 HTTP / Redis 호출 차단.
    워커 큐 전달은 기본적으로 실패 → in-process fallback 경로.
    """
    monkeypatch.delenv("REDIS_HOST", raising=False)
    monkeypatch.delenv("ALIMTALK_MOCK", raising=False)
    reset_redis_state()
    monkeypatch.setattr(requests, "post", _refuse_connection)
    monkeypatch.setattr(requests, "get", _refuse_connection)
    yield
    reset_redis_state()


class RecordingQueue(QueueClient):
    """send_message 호출 기록용 큐 (fail=True 이면 큐 장애 재현)"""

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.sent = []

    def send_message(self, queue_name, message):
        if self.fail:
            raise QueueUnavailableError("queue down (test)")
        self.sent.append((queue_name, message))
        return {"accepted": True}


@pytest.fixture
def recording_queue():
    return RecordingQueue()


@pytest.fixture
def union(db):
    return Union.objects.create(
        name="장위1구역 재개발조합",
        slug="jangwi1",
        business_type=BusinessType.REDEVELOPMENT,
    )


@pytest.fixture
def other_union(db):
    return Union.objects.create(
        name="성수2구역 재개발조합",
        slug="seongsu2",
        business_type=BusinessType.REDEVELOPMENT,
    )


@pytest.fixture
def stage(db):
    return ConsentStage.objects.create(
        business_type=BusinessType.REDEVELOPMENT,
        stage_code="ESTABLISHMENT",
        stage_name="조합설립인가",
        required_rate=75,
        sort_order=1,
    )


@pytest.fixture
def make_member(union):
    """
    조합원 생성 헬퍼.
    units: [(지번주소, 동, 호), ...] 를 주면 물건지 행도 함께 생성.
    """
    counter = {"n": 0}

    def _make(name, *, address="", jibun="", dong="", ho="", units=(), status=User.Status.APPROVED, target=None):
        counter["n"] += 1
        member = User.objects.create_user(
            username=f"member{counter['n']}",
            password="pw",
            union=target or union,
            role=User.Role.USER,
            user_status=status,
            name=name,
            property_address=address,
            property_address_jibun=jibun,
            property_dong=dong,
            property_ho=ho,
        )
        for unit_jibun, unit_dong, unit_ho in units:
            UserPropertyUnit.objects.create(
                user=member,
                property_address_jibun=unit_jibun,
                dong=unit_dong,
                ho=unit_ho,
            )
        return member

    return _make


@pytest.fixture
def union_admin(union):
    return User.objects.create_user(
        username="union-admin",
        password="pw",
        union=union,
        role=User.Role.ADMIN,
        user_status=User.Status.APPROVED,
        name="조합관리자",
    )


@pytest.fixture
def system_admin(db):
    return User.objects.create_user(
        username="sysadmin",
        password="pw",
        role=User.Role.SYSTEM_ADMIN,
        user_status=User.Status.APPROVED,
        name="시스템관리자",
    )


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def admin_client(union_admin):
    client = APIClient()
    client.force_authenticate(user=union_admin)
    return client


@pytest.fixture
def system_client(system_admin):
    client = APIClient()
    client.force_authenticate(user=system_admin)
    return client
