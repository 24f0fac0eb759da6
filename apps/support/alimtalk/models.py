# apps/support/alimtalk/models.py
"""
알림톡 템플릿 · 발송 로그 · 메시지 유형별 단가
"""

from decimal import Decimal

from django.db import models

from apps.core.db.tenant_queryset import TenantQuerySet

DEFAULT_CHANNEL_NAME = "조합온"


class MessageType(models.TextChoices):
    KAKAO = "KAKAO", "알림톡"
    SMS = "SMS", "SMS"
    LMS = "LMS", "LMS"


class AlimtalkTemplate(models.Model):
    """
    발송 대행사에 등록·검수된 템플릿. 원본은 대행사 콘솔, 여기는 동기화 사본.
    lms_failover 만 로컬에서 관리 (동기화 시 유지).
    """

    template_code = models.CharField(max_length=50, unique=True)
    template_name = models.CharField(max_length=255)
    template_content = models.TextField(blank=True, default="")
    status = models.CharField(max_length=20, blank=True, default="")
    insp_status = models.CharField(max_length=20, blank=True, default="", help_text="검수 상태")
    buttons = models.JSONField(default=list, blank=True)
    lms_failover = models.BooleanField(default=False, help_text="알림톡 실패 시 SMS/LMS 대체 발송")
    synced_at = models.DateTimeField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        app_label = "alimtalk"
        db_table = "alimtalk_templates"
        ordering = ["template_code"]

    def __str__(self):
        return f"{self.template_code} {self.template_name}"


class AlimtalkLog(models.Model):
    """
    발송 배치 1건 = 1행. 채널별(카카오/문자) 성공 수, 실패 수, 예상 비용 기록.
    """

    union = models.ForeignKey(
        "core.Union",
        on_delete=models.SET_NULL,
        related_name="alimtalk_logs",
        null=True,
        blank=True,
        db_index=True,
    )
    sender = models.ForeignKey(
        "core.User",
        on_delete=models.SET_NULL,
        related_name="alimtalk_logs",
        null=True,
        blank=True,
    )
    notice_id = models.BigIntegerField(null=True, blank=True)

    title = models.CharField(max_length=255, blank=True, default="")
    content = models.TextField(blank=True, default="")
    template_code = models.CharField(max_length=50, blank=True, default="", db_index=True)
    template_name = models.CharField(max_length=255, blank=True, default="")
    sender_channel_name = models.CharField(max_length=100, blank=True, default=DEFAULT_CHANNEL_NAME)

    recipient_count = models.PositiveIntegerField(default=0)
    success_count = models.PositiveIntegerField(default=0)
    kakao_success_count = models.PositiveIntegerField(default=0)
    sms_success_count = models.PositiveIntegerField(default=0)
    fail_count = models.PositiveIntegerField(default=0)

    cost_per_msg = models.DecimalField(max_digits=10, decimal_places=2, default=Decimal("0"))
    estimated_cost = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal("0"))

    recipient_details = models.JSONField(default=list, blank=True)
    provider_response = models.JSONField(null=True, blank=True)

    sent_at = models.DateTimeField(auto_now_add=True, db_index=True)

    objects = TenantQuerySet.as_manager()

    class Meta:
        app_label = "alimtalk"
        db_table = "alimtalk_logs"
        ordering = ["-sent_at", "-id"]

    def __str__(self):
        return f"[{self.sent_at:%Y-%m-%d %H:%M}] {self.title} ({self.success_count}/{self.recipient_count})"


class AlimtalkPricing(models.Model):
    """
    메시지 유형별 단가 이력 (append-only).
    현재 단가 = effective_from <= now 인 행 중 가장 최근.
    """

    message_type = models.CharField(max_length=10, choices=MessageType.choices, db_index=True)
    unit_price = models.DecimalField(max_digits=10, decimal_places=2)
    effective_from = models.DateTimeField(db_index=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        app_label = "alimtalk"
        db_table = "alimtalk_pricing"
        ordering = ["message_type", "-effective_from"]

    def __str__(self):
        return f"{self.message_type} {self.unit_price} (from {self.effective_from:%Y-%m-%d})"
