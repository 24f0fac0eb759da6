# apps/core/views.py

import logging

from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from johapon.adapters.db.django import repositories_core as core_repo
from apps.api.common.validation import ErrorMessageMixin
from apps.core.models import Union
from apps.core.permissions import IsSystemAdmin
from apps.core.serializers import UnionSerializer, UserSerializer
from apps.domains.consent.models import ConsentStage
from apps.domains.consent.services import stage_consent_summary

logger = logging.getLogger(__name__)


# --------------------------------------------------
# Auth: /api/core/me/
# --------------------------------------------------

class MeView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        return Response(UserSerializer(request.user).data)


# --------------------------------------------------
# System admin: /api/system-admin/unions/
# --------------------------------------------------

class UnionViewSet(ErrorMessageMixin, viewsets.ModelViewSet):
    """
    조합 CRUD (시스템 관리자 전용)
    삭제 요청은 is_active=False 로 비활성화만 함
    """
    serializer_class = UnionSerializer
    permission_classes = [IsAuthenticated, IsSystemAdmin]
    field_messages = {
        "name": "조합명을 확인해주세요.",
        "slug": "조합 식별자(slug)를 확인해주세요.",
        "business_type": "유효하지 않은 사업 유형입니다.",
    }

    def get_queryset(self):
        qs = Union.objects.all().order_by("name")
        is_active = self.request.query_params.get("is_active")
        if is_active in ("true", "false"):
            qs = qs.filter(is_active=(is_active == "true"))
        return qs

    def perform_create(self, serializer):
        union = serializer.save()
        logger.info("union created id=%s slug=%s by=%s", union.id, union.slug, self.request.user.id)

    def perform_destroy(self, instance):
        instance.is_active = False
        instance.save(update_fields=["is_active", "updated_at"])
        logger.info("union disabled id=%s slug=%s by=%s", instance.id, instance.slug, self.request.user.id)

    @action(detail=True, methods=["get"])
    def stats(self, request, pk=None):
        union = self.get_object()
        stages = ConsentStage.objects.filter(business_type=union.business_type).order_by("sort_order", "id")
        return Response({
            "unionId": union.id,
            "memberStatusCounts": core_repo.union_member_status_counts(union),
            "stages": [stage_consent_summary(union=union, stage=s) for s in stages],
        })
