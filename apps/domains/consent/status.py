# PATH: apps/domains/consent/status.py
# 동의 상태 토큰 파싱 (엑셀/CSV 입력값 → AGREED | DISAGREED)

from __future__ import annotations

from typing import Any

from django.conf import settings

from apps.domains.consent.models import ConsentStatus

AGREE_TOKENS = frozenset({"동의", "AGREED"})
DISAGREE_TOKENS = frozenset({"비동의", "미동의", "반대", "DISAGREED"})


def _token(raw: Any) -> str:
    return str(raw if raw is not None else "").strip().upper()


def parse_consent_status(raw: Any) -> str:
    """
    '동의' / 'AGREED'(대소문자 무관) → AGREED
    그 외 모든 값(빈 문자열 포함) → DISAGREED
    """
    if _token(raw) in AGREE_TOKENS:
        return ConsentStatus.AGREED
    return ConsentStatus.DISAGREED


def is_recognized_status(raw: Any) -> bool:
    token = _token(raw)
    return token in AGREE_TOKENS or token in DISAGREE_TOKENS


def strict_status_enabled() -> bool:
    """CONSENT_STATUS_STRICT=True 이면 인식 불가 토큰을 행 오류로 처리."""
    return bool(getattr(settings, "CONSENT_STATUS_STRICT", False))
