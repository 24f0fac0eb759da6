# PATH: apps/core/models/union.py
from django.db import models

from apps.core.models.base import BaseModel


class BusinessType(models.TextChoices):
    REDEVELOPMENT = "REDEVELOPMENT", "재개발"
    RECONSTRUCTION = "RECONSTRUCTION", "재건축"
    HOUSING_ASSOCIATION = "HOUSING_ASSOCIATION", "지역주택조합"
    STREET_HOUSING = "STREET_HOUSING", "가로주택정비"
    SMALL_RECONSTRUCTION = "SMALL_RECONSTRUCTION", "소규모재건축"


class Union(BaseModel):
    """
    Union == 조합 (테넌트)
    모든 조합 단위 데이터의 루트. 삭제 대신 is_active 로 비활성화.
    """

    name = models.CharField(max_length=255)
    slug = models.SlugField(max_length=100, unique=True)

    phone = models.CharField(max_length=50, blank=True, default="")
    address = models.CharField(max_length=255, blank=True, default="")
    business_hours = models.CharField(max_length=255, blank=True, default="")
    business_type = models.CharField(
        max_length=30,
        choices=BusinessType.choices,
        default=BusinessType.REDEVELOPMENT,
    )

    # ---------- 알림톡 채널 ----------
    # 조합 전용 카카오 채널명 (없으면 기본 채널 '조합온' 으로 발송)
    kakao_channel_id = models.CharField(max_length=100, blank=True, default="")
    alimtalk_sender_key = models.CharField(max_length=100, blank=True, default="")

    is_active = models.BooleanField(default=True)

    class Meta:
        app_label = "core"
        db_table = "unions"
        ordering = ["name"]

    def __str__(self):
        return self.name

    @property
    def has_own_channel(self) -> bool:
        return bool((self.alimtalk_sender_key or "").strip())
