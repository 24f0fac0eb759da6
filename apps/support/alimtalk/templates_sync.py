# apps/support/alimtalk/templates_sync.py
"""
대행사 템플릿 목록 → alimtalk_templates 동기화

- 대행사에 없는 코드는 삭제
- 나머지는 template_code 기준 upsert (lms_failover 는 로컬 값 유지)
"""

from __future__ import annotations

import logging
from typing import Optional

from django.db import transaction
from django.utils import timezone

from apps.support.alimtalk.models import AlimtalkTemplate
from apps.support.alimtalk.proxy_client import AlimtalkProxyClient, ProxyError

logger = logging.getLogger(__name__)


class TemplateSyncError(Exception):
    pass


def _to_fields(item: dict) -> dict:
    return {
        "template_name": str(item.get("templtName") or "")[:255],
        "template_content": str(item.get("templtContent") or ""),
        "status": str(item.get("status") or "")[:20],
        "insp_status": str(item.get("inspStatus") or "")[:20],
        "buttons": item.get("buttons") or [],
    }


def sync_alimtalk_templates(client: Optional[AlimtalkProxyClient] = None) -> dict:
    """
    Returns: { totalFromProvider, inserted, updated, deleted, syncedAt }
    """
    client = client or AlimtalkProxyClient()
    try:
        upstream = client.list_templates()
    except ProxyError as e:
        logger.warning("alimtalk template sync: provider list failed: %s", e)
        raise TemplateSyncError(f"템플릿 목록 조회 실패: {e}") from e

    upstream = [t for t in upstream if isinstance(t, dict) and t.get("templtCode")]
    upstream_codes = {str(t["templtCode"]) for t in upstream}
    now = timezone.now()

    with transaction.atomic():
        existing_codes = set(AlimtalkTemplate.objects.values_list("template_code", flat=True))
        stale = existing_codes - upstream_codes
        if stale:
            AlimtalkTemplate.objects.filter(template_code__in=stale).delete()

        inserted = updated = 0
        for item in upstream:
            _, created = AlimtalkTemplate.objects.update_or_create(
                template_code=str(item["templtCode"]),
                defaults={**_to_fields(item), "synced_at": now},
            )
            if created:
                inserted += 1
            else:
                updated += 1

    logger.info(
        "alimtalk template sync total=%s inserted=%s updated=%s deleted=%s",
        len(upstream),
        inserted,
        updated,
        len(stale),
    )
    return {
        "totalFromProvider": len(upstream),
        "inserted": inserted,
        "updated": updated,
        "deleted": len(stale),
        "syncedAt": now.isoformat(),
    }
