# PATH: apps/domains/consent/models.py
"""
동의 단계 · 조합원 동의 · 소유자 동의

(대상, 단계) 쌍은 DB 유니크 제약으로 1행만 존재. 쓰기는 항상 upsert.
"""

from django.db import models

from apps.core.models import BusinessType
from apps.core.models.base import TimestampModel


class ConsentStatus(models.TextChoices):
    AGREED = "AGREED", "동의"
    DISAGREED = "DISAGREED", "비동의"


class ConsentStage(TimestampModel):
    """
    사업 유형별 인허가 단계 (예: 추진위 승인, 조합설립인가)
    required_rate: 단계 통과에 필요한 동의율(%)
    """

    business_type = models.CharField(
        max_length=30,
        choices=BusinessType.choices,
        db_index=True,
    )
    stage_code = models.CharField(max_length=50)
    stage_name = models.CharField(max_length=100)
    required_rate = models.PositiveSmallIntegerField(default=75)
    sort_order = models.IntegerField(default=0)

    class Meta:
        app_label = "consent"
        db_table = "consent_stages"
        ordering = ["business_type", "sort_order", "id"]
        constraints = [
            models.UniqueConstraint(
                fields=["business_type", "stage_code"],
                name="consent_stage_business_type_code_unique",
            ),
        ]

    def __str__(self):
        return f"[{self.business_type}] {self.stage_name}"


class UserConsent(models.Model):
    user = models.ForeignKey(
        "core.User",
        on_delete=models.CASCADE,
        related_name="consents",
    )
    stage = models.ForeignKey(
        ConsentStage,
        on_delete=models.CASCADE,
        related_name="user_consents",
    )
    status = models.CharField(max_length=20, choices=ConsentStatus.choices)
    consent_date = models.DateField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        app_label = "consent"
        db_table = "user_consents"
        ordering = ["-updated_at"]
        constraints = [
            models.UniqueConstraint(
                fields=["user", "stage"],
                name="consent_userconsent_user_stage_unique",
            ),
        ]

    def __str__(self):
        return f"{self.user_id}:{self.stage_id}={self.status}"


class OwnerConsent(models.Model):
    owner = models.ForeignKey(
        "properties.Owner",
        on_delete=models.CASCADE,
        related_name="consents",
    )
    stage = models.ForeignKey(
        ConsentStage,
        on_delete=models.CASCADE,
        related_name="owner_consents",
    )
    status = models.CharField(max_length=20, choices=ConsentStatus.choices)
    consent_date = models.DateField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        app_label = "consent"
        db_table = "owner_consents"
        ordering = ["-updated_at"]
        constraints = [
            models.UniqueConstraint(
                fields=["owner", "stage"],
                name="consent_ownerconsent_owner_stage_unique",
            ),
        ]

    def __str__(self):
        return f"{self.owner_id}:{self.stage_id}={self.status}"
