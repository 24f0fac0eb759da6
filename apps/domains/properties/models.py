# PATH: apps/domains/properties/models.py
"""
물건 정보 — 필지(PNU) / 건물 호실 / 소유자

사람이 입력한 주소 문자열을 실제 수신자(소유자)로 연결하는 기준 데이터.
"""

from decimal import Decimal

from django.db import models

from apps.core.db.tenant_queryset import TenantQuerySet
from apps.core.models.base import TimestampModel


class LandLot(TimestampModel):
    union = models.ForeignKey(
        "core.Union",
        on_delete=models.CASCADE,
        related_name="land_lots",
        db_index=True,
    )
    pnu = models.CharField(max_length=19, help_text="필지고유번호 (19자리)")
    address = models.CharField(max_length=255, blank=True, default="")
    area = models.DecimalField(max_digits=12, decimal_places=2, null=True, blank=True)

    objects = TenantQuerySet.as_manager()

    class Meta:
        app_label = "properties"
        db_table = "land_lots"
        ordering = ["pnu"]
        constraints = [
            models.UniqueConstraint(
                fields=["union", "pnu"],
                name="properties_landlot_union_pnu_unique",
            ),
        ]

    def __str__(self):
        return f"{self.pnu} {self.address}".strip()


class BuildingUnit(TimestampModel):
    land_lot = models.ForeignKey(
        LandLot,
        on_delete=models.CASCADE,
        related_name="building_units",
    )
    building_name = models.CharField(max_length=100, blank=True, default="")
    dong = models.CharField(max_length=20, blank=True, default="")
    ho = models.CharField(max_length=20, blank=True, default="")

    class Meta:
        app_label = "properties"
        db_table = "building_units"
        ordering = ["land_lot_id", "dong", "ho"]

    def __str__(self):
        parts = [self.building_name, self.dong and f"{self.dong}동", self.ho and f"{self.ho}호"]
        return " ".join(p for p in parts if p)


class Owner(TimestampModel):
    """
    소유자 — 동의 독려 알림톡 수신 대상의 원천 데이터.
    회원 가입 후에는 user 로 연결됨.
    """

    union = models.ForeignKey(
        "core.Union",
        on_delete=models.CASCADE,
        related_name="owners",
        db_index=True,
    )
    building_unit = models.ForeignKey(
        BuildingUnit,
        on_delete=models.SET_NULL,
        related_name="owners",
        null=True,
        blank=True,
    )
    user = models.ForeignKey(
        "core.User",
        on_delete=models.SET_NULL,
        related_name="owner_records",
        null=True,
        blank=True,
    )
    name = models.CharField(max_length=50)
    phone = models.CharField(max_length=20, blank=True, default="")
    share_ratio = models.DecimalField(
        max_digits=7, decimal_places=4, default=Decimal("1")
    )

    objects = TenantQuerySet.as_manager()

    class Meta:
        app_label = "properties"
        db_table = "owners"
        ordering = ["id"]

    def __str__(self):
        return self.name

    @property
    def property_label(self) -> str:
        """알림톡 '물건지' 변수용 표시 문자열"""
        unit = self.building_unit
        if unit is None:
            return ""
        parts = [unit.land_lot.address, unit.dong and f"{unit.dong}동", unit.ho and f"{unit.ho}호"]
        return " ".join(p for p in parts if p)
