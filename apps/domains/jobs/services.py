# PATH: apps/domains/jobs/services.py
"""
SyncJob 상태 전이

- DB 행이 SSOT, Redis 는 실시간 진행률 미러 (미설정 시 무시)
- 상태: PENDING → PROCESSING → COMPLETED | FAILED
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from apps.domains.jobs.models import SyncJob
from libs.redis.job_status import set_job_status

logger = logging.getLogger(__name__)


def _mirror(job: SyncJob) -> None:
    set_job_status(
        str(job.id),
        status=job.status.lower(),
        progress=job.progress,
        current_step=job.job_type,
    )


def create_job(
    *,
    union,
    job_type: str,
    preview_data: Optional[dict] = None,
    status: str = SyncJob.Status.PROCESSING,
) -> SyncJob:
    job = SyncJob.objects.create(
        union=union,
        job_type=job_type,
        status=status,
        progress=0,
        preview_data=preview_data or {},
    )
    logger.info("sync job created id=%s type=%s union=%s", job.id, job_type, getattr(union, "id", None))
    _mirror(job)
    return job


def update_progress(job: SyncJob, progress: int) -> SyncJob:
    job.progress = min(100, max(0, int(progress)))
    job.save(update_fields=["progress", "updated_at"])
    _mirror(job)
    return job


def complete_job(job: SyncJob, *, summary: Optional[dict[str, Any]] = None) -> SyncJob:
    job.status = SyncJob.Status.COMPLETED
    job.progress = 100
    if summary is not None:
        job.preview_data = summary
    job.save(update_fields=["status", "progress", "preview_data", "updated_at"])
    logger.info("sync job completed id=%s type=%s", job.id, job.job_type)
    _mirror(job)
    return job


def fail_job(job: SyncJob, *, error: str) -> SyncJob:
    job.status = SyncJob.Status.FAILED
    job.error_log = (error or "")[:5000]
    job.save(update_fields=["status", "error_log", "updated_at"])
    logger.warning("sync job failed id=%s type=%s error=%s", job.id, job.job_type, error[:200])
    _mirror(job)
    return job


def build_job_status_response(job: SyncJob) -> dict:
    """GET /api/jobs/<id>/ 응답"""
    return {
        "id": str(job.id),
        "jobType": job.job_type,
        "status": job.status,
        "progress": job.progress,
        "previewData": job.preview_data or {},
        "errorLog": job.error_log or None,
        "createdAt": job.created_at,
        "updatedAt": job.updated_at,
    }
