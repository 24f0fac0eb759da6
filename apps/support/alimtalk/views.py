# apps/support/alimtalk/views.py
"""
알림톡 API — 발송 · 동의/가입 독려 · 발송 로그(통계) · 단가 · 템플릿
"""

import logging

from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import generics, status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.api.common.validation import ErrorMessageMixin
from apps.core.permissions import IsSystemAdmin, IsUnionAdmin, ReadOnlyOrSystemAdmin, can_manage_union
from apps.core.services.union_access import UnionAccessError, get_managed_union
from johapon.adapters.db.django import repositories_core as core_repo
from apps.support.alimtalk.channels import AlimtalkRecipient
from apps.support.alimtalk.filters import AlimtalkLogFilter
from apps.support.alimtalk.models import AlimtalkTemplate
from apps.support.alimtalk.pricing import get_current_pricing, pricing_history
from apps.support.alimtalk.reminders import send_bulk_reminder_alimtalk, send_consent_reminder_alimtalk
from apps.support.alimtalk.selectors import compute_log_stats, visible_logs
from apps.support.alimtalk.serializers import (
    ALIMTALK_FIELD_MESSAGES,
    AlimtalkLogDetailSerializer,
    AlimtalkLogSerializer,
    AlimtalkPricingSerializer,
    AlimtalkTemplateSerializer,
    BulkReminderRequestSerializer,
    ConsentReminderRequestSerializer,
    SendAlimtalkRequestSerializer,
)
from apps.support.alimtalk.services import AlimtalkDispatchError, dispatch_alimtalk
from apps.support.alimtalk.templates_sync import TemplateSyncError, sync_alimtalk_templates

logger = logging.getLogger(__name__)

SEND_FAILED = "알림톡 발송 중 오류가 발생했습니다."


class SendAlimtalkView(ErrorMessageMixin, APIView):
    """POST: 템플릿 알림톡 발송 (알림톡 실패 시 템플릿 설정에 따라 문자 대체)"""
    permission_classes = [IsAuthenticated, IsUnionAdmin]
    field_messages = ALIMTALK_FIELD_MESSAGES

    def post(self, request):
        ser = SendAlimtalkRequestSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        data = ser.validated_data

        try:
            union = get_managed_union(request.user, data["unionId"])
        except UnionAccessError as e:
            return Response({"error": e.message}, status=e.http_status)

        recipients = [
            AlimtalkRecipient(
                phone=r["phoneNumber"],
                name=r.get("name") or "",
                variables=dict(r.get("variables") or {}),
            )
            for r in data["recipients"]
        ]
        try:
            result = dispatch_alimtalk(
                union=union,
                template_code=data["templateCode"],
                template_name=data.get("templateName") or "",
                title=data["title"],
                content=data.get("content") or "",
                notice_id=data.get("noticeId"),
                recipients=recipients,
                sender=request.user,
            )
        except AlimtalkDispatchError as e:
            return Response({"success": False, "error": str(e)}, status=status.HTTP_400_BAD_REQUEST)
        except Exception:
            logger.exception("alimtalk send failed union=%s template=%s", union.id, data["templateCode"])
            return Response({"success": False, "error": SEND_FAILED}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
        return Response({"success": True, "data": result})


class ConsentReminderView(ErrorMessageMixin, APIView):
    """POST: 선택 소유자에게 동의/가입 독려 알림톡"""
    permission_classes = [IsAuthenticated, IsUnionAdmin]
    field_messages = ALIMTALK_FIELD_MESSAGES

    def post(self, request):
        ser = ConsentReminderRequestSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        data = ser.validated_data

        union_id = data.get("unionId")
        union = core_repo.union_get_by_id(union_id) if union_id else None
        if union is not None and not can_manage_union(request.user, union):
            return Response({"error": "해당 조합에 대한 권한이 없습니다."}, status=status.HTTP_403_FORBIDDEN)

        try:
            result = send_consent_reminder_alimtalk(
                union_id=union_id,
                target_type=data["targetType"],
                owner_ids=data.get("ownerIds") or [],
                stage_id=data.get("stageId"),
                message=data.get("message"),
                sender=request.user,
            )
        except Exception:
            logger.exception("consent reminder failed union=%s", union_id)
            return Response({"success": False, "message": SEND_FAILED}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
        return Response(result, status=status.HTTP_200_OK if result["success"] else status.HTTP_400_BAD_REQUEST)


class BulkConsentReminderView(ErrorMessageMixin, APIView):
    """POST: 필지 다중 선택 → 미동의/미가입 소유자 조회 후 독려 알림톡"""
    permission_classes = [IsAuthenticated, IsUnionAdmin]
    field_messages = ALIMTALK_FIELD_MESSAGES

    def post(self, request):
        ser = BulkReminderRequestSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        data = ser.validated_data

        try:
            get_managed_union(request.user, data["unionId"])
        except UnionAccessError as e:
            return Response({"error": e.message}, status=e.http_status)

        try:
            result = send_bulk_reminder_alimtalk(
                union_id=data["unionId"],
                pnus=data["pnus"],
                target_type=data["targetType"],
                stage_id=data.get("stageId"),
                message=data.get("message"),
                sender=request.user,
            )
        except Exception:
            logger.exception("bulk consent reminder failed union=%s", data["unionId"])
            return Response({"success": False, "message": SEND_FAILED}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
        return Response(result, status=status.HTTP_200_OK if result["success"] else status.HTTP_400_BAD_REQUEST)


class AlimtalkLogListView(ErrorMessageMixin, generics.ListAPIView):
    """GET: 발송 로그 목록 + 필터 적용 행 전체 통계"""
    permission_classes = [IsAuthenticated, IsUnionAdmin]
    field_messages = ALIMTALK_FIELD_MESSAGES
    serializer_class = AlimtalkLogSerializer
    filter_backends = [DjangoFilterBackend]
    filterset_class = AlimtalkLogFilter

    def get_queryset(self):
        return visible_logs(self.request.user)

    def list(self, request, *args, **kwargs):
        queryset = self.filter_queryset(self.get_queryset())
        stats = compute_log_stats(queryset)
        page = self.paginate_queryset(queryset)
        if page is not None:
            response = self.get_paginated_response(self.get_serializer(page, many=True).data)
            response.data["stats"] = stats
            return response
        return Response({"results": self.get_serializer(queryset, many=True).data, "stats": stats})


class AlimtalkLogDetailView(generics.RetrieveAPIView):
    permission_classes = [IsAuthenticated, IsUnionAdmin]
    serializer_class = AlimtalkLogDetailSerializer

    def get_queryset(self):
        return visible_logs(self.request.user)


class AlimtalkPricingListCreateView(ErrorMessageMixin, generics.ListCreateAPIView):
    """GET: 단가 이력 (message_type 쿼리로 필터). POST: 새 단가 등록 (시스템 관리자)"""
    permission_classes = [ReadOnlyOrSystemAdmin]
    field_messages = ALIMTALK_FIELD_MESSAGES
    serializer_class = AlimtalkPricingSerializer
    pagination_class = None

    def get_queryset(self):
        return pricing_history(self.request.query_params.get("message_type"))

    def perform_create(self, serializer):
        pricing = serializer.save()
        logger.info(
            "alimtalk pricing added type=%s price=%s from=%s by=%s",
            pricing.message_type,
            pricing.unit_price,
            pricing.effective_from,
            self.request.user.id,
        )


class AlimtalkCurrentPricingView(APIView):
    """GET: 유형별 현재 단가"""
    permission_classes = [IsAuthenticated]

    def get(self, request):
        return Response({k: str(v) for k, v in get_current_pricing().items()})


class AlimtalkTemplateListView(generics.ListAPIView):
    permission_classes = [IsAuthenticated, IsUnionAdmin]
    serializer_class = AlimtalkTemplateSerializer
    pagination_class = None
    queryset = AlimtalkTemplate.objects.all().order_by("template_code")


class AlimtalkTemplateDetailView(ErrorMessageMixin, generics.RetrieveUpdateAPIView):
    """GET: 템플릿 상세. PATCH: lms_failover 변경 (시스템 관리자)"""
    permission_classes = [ReadOnlyOrSystemAdmin]
    field_messages = ALIMTALK_FIELD_MESSAGES
    serializer_class = AlimtalkTemplateSerializer
    queryset = AlimtalkTemplate.objects.all()
    lookup_field = "template_code"
    http_method_names = ["get", "patch", "head", "options"]


class AlimtalkTemplateSyncView(APIView):
    """POST: 대행사 템플릿 목록 동기화 (시스템 관리자)"""
    permission_classes = [IsAuthenticated, IsSystemAdmin]

    def post(self, request):
        try:
            result = sync_alimtalk_templates()
        except TemplateSyncError as e:
            return Response({"success": False, "error": str(e)}, status=status.HTTP_502_BAD_GATEWAY)
        return Response({"success": True, "data": result})
