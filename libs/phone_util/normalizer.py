"""
전화번호 정규화 / 검증 / 마스킹

엑셀·수기 입력 번호를 발송 가능한 숫자열(01012345678)로 맞춘다.
"""

import re
from typing import Optional

_STRIP_RE = re.compile(r"[\s\-\(\)\.]")
_MOBILE_RE = re.compile(r"^01[016789]\d{7,8}$")
_LANDLINE_RE = re.compile(r"^(02|0[3-6][1-5])\d{7,8}$")

# 발송 대상 최소 길이 (지역번호 포함 10자리)
MIN_REACHABLE_LENGTH = 10


class PhoneValidationError(ValueError):
    pass


def normalize_phone(phone: Optional[str]) -> Optional[str]:
    """
    >>> normalize_phone("010-1234-5678")
    '01012345678'
    >>> normalize_phone("+82 10-1234-5678")
    '01012345678'
    >>> normalize_phone("") is None
    True
    """
    if phone is None:
        return None
    value = _STRIP_RE.sub("", str(phone).strip())
    if value.startswith("+82"):
        value = "0" + value[3:]
    elif value.startswith("82") and len(value) >= 11:
        value = "0" + value[2:]
    value = re.sub(r"\D", "", value)
    return value or None


def validate_phone(phone: Optional[str], allow_empty: bool = False) -> str:
    normalized = normalize_phone(phone)
    if not normalized:
        if allow_empty:
            return ""
        raise PhoneValidationError("전화번호가 필요합니다.")
    if _MOBILE_RE.match(normalized) or _LANDLINE_RE.match(normalized):
        return normalized
    raise PhoneValidationError(f"전화번호 형식이 올바르지 않습니다: {phone}")


def reachable_phone(phone: Optional[str]) -> Optional[str]:
    """정규화 후 10자리 미만이면 None (발송·집계 제외)."""
    normalized = normalize_phone(phone)
    if not normalized or len(normalized) < MIN_REACHABLE_LENGTH:
        return None
    return normalized


def mask_phone(phone: Optional[str]) -> str:
    # 로그용
    return (phone or "")[:4] + "****"
