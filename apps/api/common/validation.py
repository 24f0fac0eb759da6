# PATH: apps/api/common/validation.py
"""
serializer 오류 → {"error": <한국어 메시지>}

- user_error() 로 올린 메시지는 중첩 위치(리스트 항목, 하위 serializer)와 무관하게 그대로 노출
- 그 외 DRF 기본(영문) 오류는 필드별 메시지 맵, 없으면 기본 메시지로 대체
"""

from typing import Mapping, Optional

from rest_framework import serializers
from rest_framework.exceptions import ErrorDetail
from rest_framework.response import Response

MISSING_PARAMS = "필수 파라미터가 누락되었습니다."
USER_MESSAGE_CODE = "user_message"


def user_error(message: str) -> serializers.ValidationError:
    return serializers.ValidationError(message, code=USER_MESSAGE_CODE)


def _first_user_message(errors) -> Optional[str]:
    if isinstance(errors, ErrorDetail):
        return str(errors) if errors.code == USER_MESSAGE_CODE else None
    if isinstance(errors, Mapping):
        children = errors.values()
    elif isinstance(errors, (list, tuple)):
        children = errors
    else:
        return None
    for child in children:
        found = _first_user_message(child)
        if found:
            return found
    return None


def first_error_message(
    errors,
    field_messages: Optional[Mapping[str, str]] = None,
    default: str = MISSING_PARAMS,
) -> str:
    found = _first_user_message(errors)
    if found:
        return found
    if isinstance(errors, Mapping):
        for field_name in errors:
            if field_messages and field_name in field_messages:
                return field_messages[field_name]
    return default


def validation_error_response(errors, field_messages=None, http_status: int = 400) -> Response:
    return Response({"error": first_error_message(errors, field_messages)}, status=http_status)


class ErrorMessageMixin:
    """
    APIView 에서 serializer ValidationError 를 {"error": ...} 로 응답.
    is_valid(raise_exception=True) 를 쓰는 generic view 도 같은 형식.
    """

    field_messages: Optional[Mapping[str, str]] = None

    def handle_exception(self, exc):
        if isinstance(exc, serializers.ValidationError):
            return validation_error_response(exc.detail, self.field_messages)
        return super().handle_exception(exc)
