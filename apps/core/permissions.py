# PATH: apps/core/permissions.py

from rest_framework.permissions import SAFE_METHODS, BasePermission


def is_system_admin(user) -> bool:
    return bool(user and user.is_authenticated and user.is_system_admin)


def can_manage_union(user, union) -> bool:
    """
    시스템 관리자: 전체 조합
    조합 관리자: 본인 조합만
    """
    if union is None or not user or not user.is_authenticated:
        return False
    if user.is_system_admin:
        return True
    return user.is_union_admin and user.union_id == union.id


class IsSystemAdmin(BasePermission):
    """
    시스템 관리자 전용 (조합 횡단 관리 콘솔)
    """
    message = "시스템 관리자 권한이 필요합니다."

    def has_permission(self, request, view):
        return is_system_admin(request.user)


class IsUnionAdmin(BasePermission):
    """
    조합 관리자 또는 시스템 관리자
    """
    message = "조합 관리자 권한이 필요합니다."

    def has_permission(self, request, view):
        user = request.user
        if is_system_admin(user):
            return True
        return bool(user and user.is_authenticated and user.is_union_admin and user.union_id)


class ReadOnlyOrSystemAdmin(BasePermission):
    """
    조회는 로그인 사용자 전체, 변경은 시스템 관리자
    """

    def has_permission(self, request, view):
        if request.method in SAFE_METHODS:
            return bool(request.user and request.user.is_authenticated)
        return is_system_admin(request.user)
