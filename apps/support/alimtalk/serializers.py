# apps/support/alimtalk/serializers.py
from rest_framework import serializers

from apps.api.common.validation import user_error
from apps.support.alimtalk.models import AlimtalkLog, AlimtalkPricing, AlimtalkTemplate
from apps.support.alimtalk.reminders import TARGET_TYPES
from libs.phone_util import PhoneValidationError, validate_phone

# 필드 단위 오류(DRF 기본 영문 메시지) → 사용자 메시지
ALIMTALK_FIELD_MESSAGES = {
    "templateCode": "템플릿 코드가 필요합니다.",
    "title": "제목이 필요합니다.",
    "recipients": "발송 대상이 없습니다.",
    "ownerIds": "발송 대상이 없습니다.",
    "targetType": "유효하지 않은 발송 대상 유형입니다.",
    "pnus": "필지를 선택해주세요.",
    "message_type": "유효하지 않은 메시지 유형입니다.",
    "unit_price": "단가를 확인해주세요.",
    "effective_from": "적용 시작일을 확인해주세요.",
    "lms_failover": "문자 대체 발송 설정값이 올바르지 않습니다.",
    "dateFrom": "날짜 형식이 올바르지 않습니다. (YYYY-MM-DD)",
    "dateTo": "날짜 형식이 올바르지 않습니다. (YYYY-MM-DD)",
    "channel": "유효하지 않은 채널 구분입니다.",
}


class AlimtalkTemplateSerializer(serializers.ModelSerializer):
    class Meta:
        model = AlimtalkTemplate
        fields = [
            "id",
            "template_code",
            "template_name",
            "template_content",
            "status",
            "insp_status",
            "buttons",
            "lms_failover",
            "synced_at",
            "updated_at",
        ]
        read_only_fields = [f for f in fields if f != "lms_failover"]


class AlimtalkLogSerializer(serializers.ModelSerializer):
    union_name = serializers.CharField(source="union.name", read_only=True, default=None)
    sender_name = serializers.CharField(source="sender.name", read_only=True, default=None)

    class Meta:
        model = AlimtalkLog
        fields = [
            "id",
            "union",
            "union_name",
            "sender",
            "sender_name",
            "notice_id",
            "title",
            "template_code",
            "template_name",
            "sender_channel_name",
            "recipient_count",
            "success_count",
            "kakao_success_count",
            "sms_success_count",
            "fail_count",
            "cost_per_msg",
            "estimated_cost",
            "sent_at",
        ]
        read_only_fields = fields


class AlimtalkLogDetailSerializer(AlimtalkLogSerializer):
    class Meta(AlimtalkLogSerializer.Meta):
        fields = AlimtalkLogSerializer.Meta.fields + ["content", "recipient_details", "provider_response"]
        read_only_fields = fields


class AlimtalkPricingSerializer(serializers.ModelSerializer):
    class Meta:
        model = AlimtalkPricing
        fields = ["id", "message_type", "unit_price", "effective_from", "created_at"]
        read_only_fields = ["id", "created_at"]


class RecipientSerializer(serializers.Serializer):
    phoneNumber = serializers.CharField(max_length=20)
    name = serializers.CharField(max_length=50, required=False, allow_blank=True, default="")
    variables = serializers.DictField(child=serializers.CharField(allow_blank=True), required=False, default=dict)

    def validate_phoneNumber(self, value):
        try:
            return validate_phone(value)
        except PhoneValidationError as e:
            raise user_error(str(e))


class SendAlimtalkRequestSerializer(serializers.Serializer):
    unionId = serializers.IntegerField()
    templateCode = serializers.CharField(max_length=50)
    templateName = serializers.CharField(max_length=255, required=False, allow_blank=True, default="")
    title = serializers.CharField(max_length=255)
    content = serializers.CharField(required=False, allow_blank=True, default="")
    noticeId = serializers.IntegerField(required=False, allow_null=True)
    recipients = RecipientSerializer(many=True, allow_empty=False)


class ConsentReminderRequestSerializer(serializers.Serializer):
    unionId = serializers.IntegerField(required=False, allow_null=True)
    targetType = serializers.ChoiceField(choices=TARGET_TYPES)
    ownerIds = serializers.ListField(child=serializers.IntegerField(), required=False, default=list)
    stageId = serializers.IntegerField(required=False, allow_null=True)
    message = serializers.CharField(required=False, allow_blank=True, allow_null=True)


class BulkReminderRequestSerializer(serializers.Serializer):
    unionId = serializers.IntegerField()
    targetType = serializers.ChoiceField(choices=TARGET_TYPES)
    pnus = serializers.ListField(child=serializers.CharField(max_length=19), allow_empty=False)
    stageId = serializers.IntegerField(required=False, allow_null=True)
    message = serializers.CharField(required=False, allow_blank=True, allow_null=True)
