# PATH: apps/domains/consent/matching.py
"""
업로드 행(이름/주소/동/호) → 조합원 1명 매칭

1차: 조합 내 APPROVED / PRE_REGISTERED 조합원 중 이름 일치(대소문자 무시, trim)
     주소가 있으면 대표 주소 · 지번 주소 · 물건지 지번 주소 부분 일치로 좁힘
2차: 조합원의 물건지(user_property_units)를 id 순으로 보며
     주소/동/호가 모두 부분 일치하는 첫 물건지를 채택.
     물건지가 없는 조합원은 조합원 본인의 주소/동/호 필드로 비교.
"""

from __future__ import annotations

from typing import Iterable, Optional

from django.db.models import Prefetch, Q

from apps.core.models import User, UserPropertyUnit

MATCHABLE_STATUSES = (User.Status.APPROVED, User.Status.PRE_REGISTERED)


def _contains(needle: str, *haystacks: Optional[str]) -> bool:
    n = (needle or "").strip().lower()
    if not n:
        return True
    return any(n in (h or "").lower() for h in haystacks)


def _unit_matches(member: User, unit: UserPropertyUnit, address: str, dong: str, ho: str) -> bool:
    return (
        _contains(address, unit.property_address_jibun, member.property_address)
        and _contains(dong, unit.dong)
        and _contains(ho, unit.ho)
    )


def _member_fields_match(member: User, address: str, dong: str, ho: str) -> bool:
    return (
        _contains(address, member.property_address, member.property_address_jibun)
        and _contains(dong, member.property_dong)
        and _contains(ho, member.property_ho)
    )


def member_matches(member: User, *, address: str = "", dong: str = "", ho: str = "") -> bool:
    if not (address or dong or ho):
        return True
    units: Iterable[UserPropertyUnit] = member.property_units.all()
    units = list(units)
    if not units:
        return _member_fields_match(member, address, dong, ho)
    return any(_unit_matches(member, unit, address, dong, ho) for unit in units)


def candidate_members(union, *, name: str, address: str = ""):
    qs = User.objects.filter(
        union=union,
        user_status__in=MATCHABLE_STATUSES,
        name__iexact=name,
    )
    if address:
        qs = qs.filter(
            Q(property_address__icontains=address)
            | Q(property_address_jibun__icontains=address)
            | Q(property_units__property_address_jibun__icontains=address)
        ).distinct()
    return qs.order_by("id").prefetch_related(
        Prefetch("property_units", queryset=UserPropertyUnit.objects.order_by("id"))
    )


def find_member_for_row(
    union,
    *,
    name: str,
    address: str = "",
    dong: str = "",
    ho: str = "",
) -> Optional[User]:
    name = (name or "").strip()
    if not name:
        return None
    address = (address or "").strip()
    dong = (dong or "").strip()
    ho = (ho or "").strip()

    for member in candidate_members(union, name=name, address=address):
        if member_matches(member, address=address, dong=dong, ho=ho):
            return member
    return None
