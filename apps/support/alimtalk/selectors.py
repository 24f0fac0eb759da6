# apps/support/alimtalk/selectors.py

from decimal import Decimal

from django.db.models import Sum

from apps.core.permissions import is_system_admin
from apps.core.tenant import get_current_union
from apps.support.alimtalk.models import AlimtalkLog


def visible_logs(user):
    """
    조합 관리자: 본인 조합 로그만
    시스템 관리자: 전체 (조합 헤더로 식별된 조합이 있으면 그 조합만)
    """
    qs = AlimtalkLog.objects.select_related("union", "sender")
    if not is_system_admin(user):
        return qs.filter(union_id=user.union_id)
    if get_current_union() is not None:
        return qs.for_current_tenant()
    return qs


def compute_log_stats(queryset) -> dict:
    """필터된 로그 행에 대한 단순 합계."""
    agg = queryset.order_by().aggregate(
        totalCount=Sum("recipient_count", default=0),
        kakaoSuccessCount=Sum("kakao_success_count", default=0),
        smsSuccessCount=Sum("sms_success_count", default=0),
        failCount=Sum("fail_count", default=0),
        totalCost=Sum("estimated_cost", default=Decimal("0")),
    )
    total_cost = Decimal(agg["totalCost"])
    agg["totalCost"] = int(total_cost) if total_cost == total_cost.to_integral_value() else float(total_cost)
    success = agg["kakaoSuccessCount"] + agg["smsSuccessCount"]
    agg["successRate"] = round(success / agg["totalCount"] * 100, 1) if agg["totalCount"] else 0
    return agg
