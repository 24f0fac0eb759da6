import pytest

from apps.core.models import User
from apps.domains.consent.matching import find_member_for_row

pytestmark = pytest.mark.django_db


def test_name_only_matches_first_member(union, make_member):
    first = make_member("홍길동")
    make_member("홍길동")

    assert find_member_for_row(union, name="홍길동") == first


def test_name_is_trimmed_and_case_insensitive(union, make_member):
    member = make_member("Kim Minsu")

    assert find_member_for_row(union, name="  kim minsu ") == member


def test_same_name_resolved_by_address(union, make_member):
    make_member("홍길동", jibun="서울 성북구 장위동 1-1")
    second = make_member("홍길동", jibun="서울 성북구 장위동 2-2")

    assert find_member_for_row(union, name="홍길동", address="장위동 2-2") == second


def test_member_without_units_uses_member_fields(union, make_member):
    member = make_member("이영희", address="서울 성북구 장위로 10", dong="101", ho="1203")

    assert find_member_for_row(union, name="이영희", address="장위로 10", dong="101", ho="1203") == member
    assert find_member_for_row(union, name="이영희", address="장위로 10", dong="102") is None


def test_unit_dong_ho_partial_match(union, make_member):
    member = make_member(
        "박철수",
        units=[("장위동 10", "101", "1001"), ("장위동 10", "102동", "1203호")],
    )

    assert find_member_for_row(union, name="박철수", address="장위동 10", dong="102", ho="1203") == member
    assert find_member_for_row(union, name="박철수", address="장위동 10", dong="103", ho="1203") is None


def test_unit_address_matches_member_road_address(union, make_member):
    member = make_member(
        "최민호",
        address="서울 성북구 장위로 55",
        units=[("장위동 77", "201", "301")],
    )

    assert find_member_for_row(union, name="최민호", address="장위로 55", dong="201") == member


def test_only_approved_or_pre_registered_members(union, make_member):
    make_member("대기자", status=User.Status.PENDING_APPROVAL)
    pre = make_member("사전등록", status=User.Status.PRE_REGISTERED)

    assert find_member_for_row(union, name="대기자") is None
    assert find_member_for_row(union, name="사전등록") == pre


def test_other_union_members_are_never_matched(union, other_union, make_member):
    make_member("홍길동", target=other_union)

    assert find_member_for_row(union, name="홍길동") is None


def test_blank_name_matches_nobody(union, make_member):
    make_member("홍길동")

    assert find_member_for_row(union, name="   ") is None
