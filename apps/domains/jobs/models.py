# PATH: apps/domains/jobs/models.py
import uuid

from django.db import models

from apps.core.db.tenant_queryset import TenantQuerySet
from apps.core.models.base import TimestampModel


class SyncJob(TimestampModel):
    """
    장시간 일괄 작업 추적 (동의 일괄 업로드 등).
    진행률(progress) 0~100, 결과 요약은 preview_data 에 기록.
    """

    class Status(models.TextChoices):
        PENDING = "PENDING", "대기"
        PROCESSING = "PROCESSING", "처리 중"
        COMPLETED = "COMPLETED", "완료"
        FAILED = "FAILED", "실패"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    union = models.ForeignKey(
        "core.Union",
        on_delete=models.CASCADE,
        related_name="sync_jobs",
        null=True,
        blank=True,
        db_index=True,
    )
    job_type = models.CharField(max_length=50, db_index=True)
    status = models.CharField(
        max_length=20,
        choices=Status.choices,
        default=Status.PENDING,
        db_index=True,
    )
    progress = models.PositiveSmallIntegerField(default=0)
    preview_data = models.JSONField(default=dict, blank=True)
    error_log = models.TextField(blank=True, default="")

    objects = TenantQuerySet.as_manager()

    class Meta:
        app_label = "jobs"
        db_table = "sync_jobs"
        ordering = ["-created_at"]

    def __str__(self):
        return f"{self.job_type}:{self.id} ({self.status} {self.progress}%)"
