# PATH: apps/core/models/user.py
from django.db import models
from django.contrib.auth.models import AbstractUser, Group, Permission

from apps.core.models.base import TimestampModel


# --------------------------------------------------
# Custom User (AUTH_USER_MODEL)
# --------------------------------------------------

class User(AbstractUser):
    """
    Custom User 모델 (조합원 / 조합 관리자 / 시스템 관리자)
    - AUTH_USER_MODEL = core.User
    - 시스템 관리자는 union 이 없을 수 있음
    """

    class Role(models.TextChoices):
        SYSTEM_ADMIN = "SYSTEM_ADMIN", "시스템 관리자"
        ADMIN = "ADMIN", "조합 관리자"
        USER = "USER", "조합원"

    class Status(models.TextChoices):
        PENDING_APPROVAL = "PENDING_APPROVAL", "승인 대기"
        APPROVED = "APPROVED", "승인"
        REJECTED = "REJECTED", "반려"
        PRE_REGISTERED = "PRE_REGISTERED", "사전 등록"
        BLOCKED = "BLOCKED", "차단"

    union = models.ForeignKey(
        "core.Union",
        on_delete=models.CASCADE,
        related_name="members",
        null=True,
        blank=True,
        db_index=True,
    )
    role = models.CharField(max_length=20, choices=Role.choices, default=Role.USER)
    user_status = models.CharField(
        max_length=20,
        choices=Status.choices,
        default=Status.PENDING_APPROVAL,
        db_index=True,
    )

    name = models.CharField(max_length=50, blank=True, default="")
    phone = models.CharField(max_length=20, blank=True, default="")

    # 대표 물건지 (property unit 이 없을 때 매칭 fallback)
    property_address = models.CharField(max_length=255, blank=True, default="")
    property_address_jibun = models.CharField(max_length=255, blank=True, default="")
    property_dong = models.CharField(max_length=20, blank=True, default="")
    property_ho = models.CharField(max_length=20, blank=True, default="")

    # auth.User 와 reverse accessor 충돌 방지
    groups = models.ManyToManyField(
        Group,
        related_name="core_users",
        blank=True,
    )
    user_permissions = models.ManyToManyField(
        Permission,
        related_name="core_users",
        blank=True,
    )

    class Meta:
        app_label = "core"
        db_table = "users"
        ordering = ["-id"]

    def __str__(self):
        return self.name or self.username

    @property
    def is_system_admin(self) -> bool:
        return self.is_superuser or self.role == self.Role.SYSTEM_ADMIN

    @property
    def is_union_admin(self) -> bool:
        return self.role in (self.Role.ADMIN, self.Role.SYSTEM_ADMIN)


class UserPropertyUnit(TimestampModel):
    """
    조합원 1명이 보유한 물건지 (여러 개 가능)
    dong / ho 는 사람이 입력한 문자열 그대로 저장 (부분 일치 매칭용)
    """

    user = models.ForeignKey(
        "core.User",
        on_delete=models.CASCADE,
        related_name="property_units",
    )
    building_unit = models.ForeignKey(
        "properties.BuildingUnit",
        on_delete=models.SET_NULL,
        related_name="member_units",
        null=True,
        blank=True,
    )
    pnu = models.CharField(max_length=19, blank=True, default="", db_index=True)
    property_address_jibun = models.CharField(max_length=255, blank=True, default="")
    dong = models.CharField(max_length=20, blank=True, default="")
    ho = models.CharField(max_length=20, blank=True, default="")
    is_primary = models.BooleanField(default=False)

    class Meta:
        app_label = "core"
        db_table = "user_property_units"
        ordering = ["id"]

    def __str__(self):
        return f"{self.user_id} {self.property_address_jibun} {self.dong} {self.ho}".strip()


class MemberInvite(TimestampModel):
    """
    미가입 소유자 초대 토큰 (가입 링크 발송용)
    """

    union = models.ForeignKey(
        "core.Union",
        on_delete=models.CASCADE,
        related_name="member_invites",
    )
    owner = models.ForeignKey(
        "properties.Owner",
        on_delete=models.CASCADE,
        related_name="invites",
        null=True,
        blank=True,
    )
    name = models.CharField(max_length=50)
    phone = models.CharField(max_length=20)
    property_address = models.CharField(max_length=255, blank=True, default="")
    token = models.CharField(max_length=64, unique=True)
    expires_at = models.DateTimeField()
    used_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        app_label = "core"
        db_table = "member_invites"
        ordering = ["-created_at"]

    def __str__(self):
        return f"{self.name} ({self.token[:8]})"
