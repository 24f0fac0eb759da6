# PATH: apps/domains/consent/services.py
# 동의 일괄 반영 (동기 처리 / 워커 미가용 시 in-process 처리 공통 루틴)

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Optional

from django.db import DatabaseError, transaction
from django.utils import timezone

from apps.core.models import User
from apps.domains.consent.matching import find_member_for_row
from apps.domains.consent.models import ConsentStatus, OwnerConsent, UserConsent
from apps.domains.consent.status import (
    is_recognized_status,
    parse_consent_status,
    strict_status_enabled,
)

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int], None]


def upsert_user_consent(*, user, stage, status: str) -> UserConsent:
    """(user, stage) 1행 유지. 동시 쓰기는 DB 유니크 제약에서 정리됨."""
    with transaction.atomic():
        consent, _ = UserConsent.objects.update_or_create(
            user=user,
            stage=stage,
            defaults={"status": status, "consent_date": timezone.localdate()},
        )
    return consent


def upsert_owner_consent(*, owner, stage, status: str) -> OwnerConsent:
    with transaction.atomic():
        consent, _ = OwnerConsent.objects.update_or_create(
            owner=owner,
            stage=stage,
            defaults={"status": status, "consent_date": timezone.localdate()},
        )
    return consent


def normalize_row(raw: Any, position: int) -> dict:
    item = dict(raw) if isinstance(raw, dict) else {}
    try:
        row_number = int(item.get("rowNumber") or item.get("row_number") or position)
    except (TypeError, ValueError):
        row_number = position
    return {
        "rowNumber": row_number,
        "name": str(item.get("name") or "").strip(),
        "address": str(item.get("address") or "").strip(),
        "buildingName": str(item.get("buildingName") or item.get("building_name") or "").strip(),
        "dong": str(item.get("dong") or "").strip(),
        "ho": str(item.get("ho") or "").strip(),
        "status": item.get("status"),
    }


def _report(on_progress: Optional[ProgressCallback], done: int, total: int) -> None:
    if on_progress is None:
        return
    try:
        on_progress(done, total)
    except Exception:
        logger.warning("consent progress callback failed done=%s total=%s", done, total, exc_info=True)


def reconcile_consent_rows(
    *,
    union,
    stage,
    rows: Iterable[Any],
    on_progress: Optional[ProgressCallback] = None,
    strict_status: Optional[bool] = None,
) -> dict:
    """
    업로드 행 → 조합원 매칭 → 동의 upsert.
    행 단위 실패는 errors 에 누적하고 계속 진행 (롤백 없음).

    Returns: { successCount, failCount, errors: [{row, name, message}], warnings: [...] }
    """
    rows = list(rows)
    total = len(rows)
    strict = strict_status_enabled() if strict_status is None else strict_status

    success_count = 0
    errors: list[dict] = []
    warnings: list[dict] = []

    for position, raw in enumerate(rows, start=1):
        row = normalize_row(raw, position)
        name = row["name"]
        try:
            if not isinstance(raw, dict):
                errors.append({"row": row["rowNumber"], "name": "", "message": "잘못된 행 형식입니다."})
                continue
            raw_status = row["status"]
            recognized = is_recognized_status(raw_status)
            if strict and not recognized:
                errors.append({
                    "row": row["rowNumber"],
                    "name": name,
                    "message": f"알 수 없는 동의 상태입니다: {raw_status!s}",
                })
                continue

            member = find_member_for_row(
                union,
                name=name,
                address=row["address"],
                dong=row["dong"],
                ho=row["ho"],
            )
            if member is None:
                errors.append({
                    "row": row["rowNumber"],
                    "name": name,
                    "message": f"조합원을 찾을 수 없습니다: {name}",
                })
                continue

            status = parse_consent_status(raw_status)
            try:
                upsert_user_consent(user=member, stage=stage, status=status)
            except DatabaseError as e:
                errors.append({
                    "row": row["rowNumber"],
                    "name": name,
                    "message": f"동의 처리 실패: {e}",
                })
                continue

            success_count += 1
            if not recognized:
                warnings.append({
                    "row": row["rowNumber"],
                    "name": name,
                    "message": f"인식할 수 없는 동의 상태 '{raw_status!s}' 를 비동의로 처리했습니다.",
                })
        except Exception as e:
            logger.warning(
                "reconcile_consent_rows row=%s name=%r: %s",
                row["rowNumber"],
                name,
                e,
                exc_info=True,
            )
            errors.append({
                "row": row["rowNumber"],
                "name": name,
                "message": f"처리 오류: {e}",
            })
        finally:
            _report(on_progress, position, total)

    logger.info(
        "consent reconcile union=%s stage=%s total=%s success=%s fail=%s warnings=%s",
        getattr(union, "id", None),
        getattr(stage, "id", None),
        total,
        success_count,
        len(errors),
        len(warnings),
    )
    return {
        "successCount": success_count,
        "failCount": len(errors),
        "errors": errors,
        "warnings": warnings,
    }


def apply_bulk_consent_status(
    *,
    union,
    stage,
    member_ids: Iterable[Any],
    status: str,
    on_progress: Optional[ProgressCallback] = None,
) -> dict:
    """
    선택한 조합원들의 동의 상태를 한 번에 변경.
    Returns: { successCount, failCount, errors: [{row, memberId, message}] }
    """
    if status not in (ConsentStatus.AGREED, ConsentStatus.DISAGREED):
        raise ValueError("유효하지 않은 동의 상태입니다.")

    member_ids = list(member_ids)
    total = len(member_ids)
    members = {
        str(m.id): m
        for m in User.objects.filter(union=union, id__in=[i for i in member_ids if str(i).isdigit()])
    }

    success_count = 0
    errors: list[dict] = []
    for position, member_id in enumerate(member_ids, start=1):
        try:
            member = members.get(str(member_id))
            if member is None:
                errors.append({
                    "row": position,
                    "memberId": member_id,
                    "message": f"조합원을 찾을 수 없습니다: {member_id}",
                })
                continue
            upsert_user_consent(user=member, stage=stage, status=status)
            success_count += 1
        except DatabaseError as e:
            errors.append({"row": position, "memberId": member_id, "message": f"동의 처리 실패: {e}"})
        finally:
            _report(on_progress, position, total)

    return {"successCount": success_count, "failCount": len(errors), "errors": errors}


def stage_consent_summary(*, union, stage) -> dict:
    """단계별 조합원 동의 집계 (시스템 관리자 통계용)"""
    qs = UserConsent.objects.filter(stage=stage, user__union=union)
    agreed = qs.filter(status=ConsentStatus.AGREED).count()
    disagreed = qs.filter(status=ConsentStatus.DISAGREED).count()
    return {
        "stageId": stage.id,
        "stageName": stage.stage_name,
        "requiredRate": stage.required_rate,
        "agreedCount": agreed,
        "disagreedCount": disagreed,
    }
