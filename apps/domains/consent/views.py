# PATH: apps/domains/consent/views.py
"""
동의 API — 일괄 업로드(JSON/파일) · 일괄 상태 변경 · 동의 단계
"""

import logging

from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import status, viewsets
from rest_framework.parsers import FormParser, MultiPartParser
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.api.common.validation import validation_error_response
from apps.core.permissions import IsUnionAdmin, ReadOnlyOrSystemAdmin
from apps.core.services.union_access import UnionAccessError, get_managed_union
from apps.domains.consent.dispatch import (
    JobCreationError,
    submit_consent_status_update,
    submit_consent_upload,
)
from apps.domains.consent.models import ConsentStage
from apps.domains.consent.serializers import (
    CONSENT_FIELD_MESSAGES,
    BulkUpdateRequestSerializer,
    BulkUploadFileSerializer,
    BulkUploadRequestSerializer,
    ConsentStageSerializer,
)
from apps.domains.consent.sheet_parser import SheetParseError, parse_consent_sheet

logger = logging.getLogger(__name__)

UPLOAD_FAILED = "동의 업로드 중 오류가 발생했습니다."
UPDATE_FAILED = "동의 처리 중 오류가 발생했습니다."


def _error(message: str, http_status: int) -> Response:
    return Response({"error": message}, status=http_status)


def _resolve_target(request, data):
    union = get_managed_union(request.user, data["unionId"])
    stage = ConsentStage.objects.filter(id=data["stageId"]).first()
    if stage is None:
        raise UnionAccessError("동의 단계를 찾을 수 없습니다.", 404)
    return union, stage


class ConsentBulkUploadView(APIView):
    """
    POST: 동의 일괄 업로드 {unionId, stageId, data: Row[]}
    - 50건 미만: {successCount, failCount, errors, warnings}
    - 50건 이상: {jobId, message} (진행률은 /api/jobs/<jobId>/)
    """
    permission_classes = [IsAuthenticated, IsUnionAdmin]

    def post(self, request):
        ser = BulkUploadRequestSerializer(data=request.data)
        if not ser.is_valid():
            return validation_error_response(ser.errors, CONSENT_FIELD_MESSAGES)
        data = ser.validated_data

        try:
            union, stage = _resolve_target(request, data)
            rows = list(data["data"])
            outcome = submit_consent_upload(union=union, stage=stage, rows=rows)
            return Response(outcome.to_response())
        except UnionAccessError as e:
            return _error(e.message, e.http_status)
        except JobCreationError as e:
            return _error(str(e), status.HTTP_500_INTERNAL_SERVER_ERROR)
        except Exception:
            logger.exception("consent bulk upload failed union=%s stage=%s", data.get("unionId"), data.get("stageId"))
            return _error(UPLOAD_FAILED, status.HTTP_500_INTERNAL_SERVER_ERROR)


class ConsentBulkUploadFileView(APIView):
    """POST (multipart): 동의서 엑셀/CSV 파일 업로드 → 일괄 업로드와 동일 처리"""
    permission_classes = [IsAuthenticated, IsUnionAdmin]
    parser_classes = [MultiPartParser, FormParser]

    def post(self, request):
        ser = BulkUploadFileSerializer(data=request.data)
        if not ser.is_valid():
            return validation_error_response(ser.errors, CONSENT_FIELD_MESSAGES)
        data = ser.validated_data
        upload = data["file"]

        try:
            union, stage = _resolve_target(request, data)
            rows = parse_consent_sheet(upload, upload.name)
            if not rows:
                return _error("처리할 데이터가 없습니다.", status.HTTP_400_BAD_REQUEST)
            outcome = submit_consent_upload(union=union, stage=stage, rows=rows)
            return Response(outcome.to_response())
        except UnionAccessError as e:
            return _error(e.message, e.http_status)
        except SheetParseError as e:
            return _error(str(e), status.HTTP_400_BAD_REQUEST)
        except JobCreationError as e:
            return _error(str(e), status.HTTP_500_INTERNAL_SERVER_ERROR)
        except Exception:
            logger.exception("consent file upload failed file=%s", getattr(upload, "name", ""))
            return _error(UPLOAD_FAILED, status.HTTP_500_INTERNAL_SERVER_ERROR)


class ConsentBulkUpdateView(APIView):
    """POST: 선택 조합원 동의 상태 일괄 변경 {unionId, stageId, memberIds, status}"""
    permission_classes = [IsAuthenticated, IsUnionAdmin]

    def post(self, request):
        ser = BulkUpdateRequestSerializer(data=request.data)
        if not ser.is_valid():
            return validation_error_response(ser.errors, CONSENT_FIELD_MESSAGES)
        data = ser.validated_data

        try:
            union, stage = _resolve_target(request, data)
            outcome = submit_consent_status_update(
                union=union,
                stage=stage,
                member_ids=list(data["memberIds"]),
                status=data["status"],
            )
            return Response(outcome.to_response())
        except UnionAccessError as e:
            return _error(e.message, e.http_status)
        except JobCreationError as e:
            return _error(str(e), status.HTTP_500_INTERNAL_SERVER_ERROR)
        except Exception:
            logger.exception("consent bulk update failed union=%s", data.get("unionId"))
            return _error(UPDATE_FAILED, status.HTTP_500_INTERNAL_SERVER_ERROR)


class ConsentStageViewSet(viewsets.ModelViewSet):
    """동의 단계 (조회: 로그인 사용자, 변경: 시스템 관리자)"""
    serializer_class = ConsentStageSerializer
    permission_classes = [ReadOnlyOrSystemAdmin]
    filter_backends = [DjangoFilterBackend]
    filterset_fields = ["business_type"]
    pagination_class = None

    def get_queryset(self):
        return ConsentStage.objects.all().order_by("business_type", "sort_order", "id")
