# PATH: apps/domains/consent/serializers.py
from rest_framework import serializers

from apps.api.common.validation import MISSING_PARAMS, user_error
from apps.domains.consent.models import ConsentStage, ConsentStatus

EMPTY_DATA = "처리할 데이터가 없습니다."
EMPTY_MEMBERS = "처리할 조합원이 없습니다."
INVALID_STATUS = "유효하지 않은 동의 상태입니다."
MISSING_FILE = "업로드할 파일이 없습니다."

# 필드 단위 오류(DRF 기본 영문 메시지) → 사용자 메시지
CONSENT_FIELD_MESSAGES = {
    "data": EMPTY_DATA,
    "memberIds": EMPTY_MEMBERS,
    "status": INVALID_STATUS,
    "file": MISSING_FILE,
}


class _TargetSerializer(serializers.Serializer):
    unionId = serializers.IntegerField(required=False, allow_null=True)
    stageId = serializers.IntegerField(required=False, allow_null=True)

    def validate(self, attrs):
        if not attrs.get("unionId") or not attrs.get("stageId"):
            raise user_error(MISSING_PARAMS)
        return attrs


class BulkUploadRequestSerializer(_TargetSerializer):
    # 행 단위 형식 오류는 배치를 거절하지 않고 결과 errors[] 로 보고 (services.reconcile_consent_rows)
    data = serializers.ListField(child=serializers.JSONField(allow_null=True), required=False)

    def validate(self, attrs):
        attrs = super().validate(attrs)
        if not attrs.get("data"):
            raise user_error(EMPTY_DATA)
        return attrs


class BulkUploadFileSerializer(_TargetSerializer):
    file = serializers.FileField()


class BulkUpdateRequestSerializer(_TargetSerializer):
    memberIds = serializers.ListField(child=serializers.IntegerField(), required=False)
    status = serializers.CharField(required=False, allow_blank=True)

    def validate(self, attrs):
        attrs = super().validate(attrs)
        if attrs.get("status") not in (ConsentStatus.AGREED, ConsentStatus.DISAGREED):
            raise user_error(INVALID_STATUS)
        if not attrs.get("memberIds"):
            raise user_error(EMPTY_MEMBERS)
        return attrs


class ConsentStageSerializer(serializers.ModelSerializer):
    class Meta:
        model = ConsentStage
        fields = [
            "id",
            "business_type",
            "stage_code",
            "stage_name",
            "required_rate",
            "sort_order",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "created_at", "updated_at"]
