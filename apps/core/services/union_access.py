# PATH: apps/core/services/union_access.py
# body 의 unionId 로 지정된 조합 조회 + 관리 권한 확인 (consent / alimtalk API 공통)

from __future__ import annotations

from johapon.adapters.db.django import repositories_core as core_repo
from apps.core.permissions import can_manage_union


class UnionAccessError(Exception):
    def __init__(self, message: str, http_status: int):
        super().__init__(message)
        self.message = message
        self.http_status = http_status


def get_managed_union(user, union_id):
    union = core_repo.union_get_by_id(union_id) if union_id else None
    if union is None:
        raise UnionAccessError("조합을 찾을 수 없습니다.", 404)
    if not can_manage_union(user, union):
        raise UnionAccessError("해당 조합에 대한 권한이 없습니다.", 403)
    return union
