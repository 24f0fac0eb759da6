# PATH: apps/domains/consent/dispatch.py
"""
동의 일괄 작업 디스패치 전략

- 행 수 < 임계값(기본 50): 요청 안에서 동기 처리, 결과 즉시 반환
- 행 수 >= 임계값: sync_jobs 생성 후 외부 워커 큐로 전달
  전달 실패 시 같은 처리 루틴을 in-process 로 실행하고 진행률을 sync_jobs 에 기록
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from django.conf import settings
from django.db import DatabaseError

from apps.domains.jobs import services as job_services
from apps.domains.jobs.models import SyncJob
from libs.queue import QueueClient, QueueUnavailableError, get_queue_client

logger = logging.getLogger(__name__)

DEFAULT_ASYNC_THRESHOLD = 50

# process(on_progress) -> result dict
BatchProcessor = Callable[[Optional[Callable[[int, int], None]]], dict]


class JobCreationError(Exception):
    """sync_jobs 행 생성 실패"""


@dataclass
class DispatchOutcome:
    is_async: bool
    result: dict = field(default_factory=dict)
    job: Optional[SyncJob] = None
    delegated: bool = False

    def to_response(self) -> dict:
        if not self.is_async:
            return self.result
        return {"jobId": str(self.job.id), "message": "비동기 처리가 시작되었습니다."}


class JobProgressReporter:
    """
    in-process 처리 진행률 → sync_jobs.progress
    전체의 10% 단위 또는 마지막 행에서만 기록
    """

    def __init__(self, job: SyncJob):
        self.job = job

    def __call__(self, done: int, total: int) -> None:
        if total <= 0:
            return
        step = max(1, total // 10)
        if done % step == 0 or done == total:
            job_services.update_progress(self.job, round(done / total * 100))


def async_threshold() -> int:
    return int(getattr(settings, "CONSENT_ASYNC_THRESHOLD", DEFAULT_ASYNC_THRESHOLD))


class ConsentBatchDispatcher:
    """
    primary: 워커 큐로 위임
    fallback: 같은 처리 루틴을 in-process 실행
    """

    def __init__(self, *, threshold: Optional[int] = None, queue: Optional[QueueClient] = None):
        self.threshold = async_threshold() if threshold is None else int(threshold)
        self.queue = queue or get_queue_client()

    def should_delegate(self, row_count: int) -> bool:
        return row_count >= self.threshold

    def dispatch(
        self,
        *,
        union,
        job_type: str,
        queue_name: str,
        message: dict[str, Any],
        row_count: int,
        process: BatchProcessor,
        preview_data: Optional[dict] = None,
    ) -> DispatchOutcome:
        if not self.should_delegate(row_count):
            return DispatchOutcome(is_async=False, result=process(None))

        try:
            job = job_services.create_job(
                union=union,
                job_type=job_type,
                preview_data={"type": job_type, "rowCount": row_count, **(preview_data or {})},
            )
        except DatabaseError as e:
            logger.exception("sync job create failed type=%s union=%s", job_type, getattr(union, "id", None))
            raise JobCreationError("작업 생성 실패") from e

        try:
            self.queue.send_message(queue_name, {"jobId": str(job.id), **message})
            return DispatchOutcome(is_async=True, job=job, delegated=True)
        except QueueUnavailableError as e:
            logger.warning(
                "worker queue unavailable, processing in-process job=%s type=%s: %s",
                job.id,
                job_type,
                e,
            )

        self.run_in_process(job, process)
        return DispatchOutcome(is_async=True, job=job, delegated=False)

    def run_in_process(self, job: SyncJob, process: BatchProcessor) -> dict:
        try:
            result = process(JobProgressReporter(job))
        except Exception as e:
            job_services.fail_job(job, error=str(e))
            raise
        job_services.complete_job(job, summary=result)
        return result


UPLOAD_JOB_TYPE = "consent_bulk_upload"
UPLOAD_QUEUE = "/api/consent/upload-queue"
UPDATE_JOB_TYPE = "consent_bulk_update"
UPDATE_QUEUE = "/api/consent/queue"


def submit_consent_upload(
    *,
    union,
    stage,
    rows: list[dict],
    dispatcher: Optional[ConsentBatchDispatcher] = None,
) -> DispatchOutcome:
    from apps.domains.consent.services import reconcile_consent_rows

    dispatcher = dispatcher or ConsentBatchDispatcher()
    return dispatcher.dispatch(
        union=union,
        job_type=UPLOAD_JOB_TYPE,
        queue_name=UPLOAD_QUEUE,
        message={"unionId": union.id, "stageId": stage.id, "data": rows},
        row_count=len(rows),
        preview_data={"stageId": stage.id},
        process=lambda on_progress: reconcile_consent_rows(
            union=union, stage=stage, rows=rows, on_progress=on_progress
        ),
    )


def submit_consent_status_update(
    *,
    union,
    stage,
    member_ids: list,
    status: str,
    dispatcher: Optional[ConsentBatchDispatcher] = None,
) -> DispatchOutcome:
    from apps.domains.consent.services import apply_bulk_consent_status

    dispatcher = dispatcher or ConsentBatchDispatcher()
    return dispatcher.dispatch(
        union=union,
        job_type=UPDATE_JOB_TYPE,
        queue_name=UPDATE_QUEUE,
        message={"unionId": union.id, "stageId": stage.id, "memberIds": member_ids, "status": status},
        row_count=len(member_ids),
        preview_data={"stageId": stage.id, "status": status},
        process=lambda on_progress: apply_bulk_consent_status(
            union=union, stage=stage, member_ids=member_ids, status=status, on_progress=on_progress
        ),
    )
