"""
전화번호 유틸리티

- normalize_phone : 010-1234-5678 / +82 10-1234-5678 → 01012345678
- reachable_phone : 발송 가능한 번호만 통과
- mask_phone      : 로그 출력용 마스킹
"""

from .normalizer import (
    PhoneValidationError,
    mask_phone,
    normalize_phone,
    reachable_phone,
    validate_phone,
)

__all__ = [
    "PhoneValidationError",
    "mask_phone",
    "normalize_phone",
    "reachable_phone",
    "validate_phone",
]
