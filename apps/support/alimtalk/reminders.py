# apps/support/alimtalk/reminders.py
"""
동의 / 가입 독려 알림톡

- NON_AGREED     : 해당 동의 단계에 동의하지 않은 소유자 → 동의 독려 템플릿
- NON_REGISTERED : 아직 회원 가입하지 않은 소유자 → 가입 링크(초대 토큰) 템플릿
- 전화번호(정규화 후) 10자리 미만인 소유자는 발송 대상/집계에서 제외
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from django.conf import settings

from johapon.adapters.db.django import repositories_core as core_repo
from apps.domains.consent.models import ConsentStage, ConsentStatus, OwnerConsent, UserConsent
from apps.domains.properties.models import Owner
from apps.support.alimtalk.channels import AlimtalkRecipient, MessageChannel
from apps.support.alimtalk.services import AlimtalkDispatchError, dispatch_alimtalk, require_sender_config
from libs.phone_util import reachable_phone

logger = logging.getLogger(__name__)

NON_AGREED = "NON_AGREED"
NON_REGISTERED = "NON_REGISTERED"
TARGET_TYPES = (NON_AGREED, NON_REGISTERED)

REMINDER_TEMPLATES = {
    NON_AGREED: {"code": "UNION_CONSENT_REMINDER", "title": "동의서 제출 안내"},
    NON_REGISTERED: {"code": "UNION_REGISTER_REMINDER", "title": "조합원 가입 안내"},
}

DEFAULT_NOTICE = "조합 사업 진행을 위해 동의서 제출을 부탁드립니다."


def _fail(message: str) -> dict:
    return {"success": False, "message": message, "sentCount": 0, "failedCount": 0}


def invite_url(union, token: str) -> str:
    base = str(getattr(settings, "SITE_URL", "") or "").rstrip("/")
    return f"{base}/{union.slug}/invite/{token}"


def build_reminder_variables(
    *,
    union,
    owner: Owner,
    target_type: str,
    stage: Optional[ConsentStage] = None,
    message: Optional[str] = None,
    phone: str = "",
) -> dict[str, str]:
    if target_type == NON_AGREED:
        return {
            "조합명": union.name,
            "소유자명": owner.name,
            "동의단계": stage.stage_name if stage else "",
            "안내문구": (message or "").strip() or DEFAULT_NOTICE,
        }
    invite = core_repo.member_invite_create(
        union=union,
        owner=owner,
        name=owner.name,
        phone=phone,
        property_address=owner.property_label,
    )
    return {
        "조합명": union.name,
        "소유자명": owner.name,
        "물건지": owner.property_label,
        "가입링크": invite_url(union, invite.token),
    }


def build_reminder_recipients(
    *,
    union,
    owners: Iterable[Owner],
    target_type: str,
    stage: Optional[ConsentStage] = None,
    message: Optional[str] = None,
) -> list[AlimtalkRecipient]:
    recipients: list[AlimtalkRecipient] = []
    skipped = 0
    for owner in owners:
        phone = reachable_phone(owner.phone)
        if phone is None:
            skipped += 1
            continue
        recipients.append(
            AlimtalkRecipient(
                phone=phone,
                name=owner.name,
                variables=build_reminder_variables(
                    union=union,
                    owner=owner,
                    target_type=target_type,
                    stage=stage,
                    message=message,
                    phone=phone,
                ),
            )
        )
    if skipped:
        logger.info("reminder recipients skipped (no valid phone) union=%s count=%s", union.id, skipped)
    return recipients


def send_consent_reminder_alimtalk(
    *,
    union_id,
    target_type: str,
    owner_ids: Iterable,
    stage_id=None,
    message: Optional[str] = None,
    sender=None,
    kakao_channel: Optional[MessageChannel] = None,
) -> dict:
    """
    Returns: { success, message, sentCount, failedCount, ... dispatch 결과 }
    """
    if not union_id:
        return _fail("조합 ID가 필요합니다.")
    owner_ids = list(owner_ids or [])
    if not owner_ids:
        return _fail("발송 대상이 없습니다.")
    if target_type not in TARGET_TYPES:
        return _fail("유효하지 않은 발송 대상 유형입니다.")

    union = core_repo.union_get_by_id(union_id)
    if union is None:
        return _fail("조합을 찾을 수 없습니다.")

    stage = None
    if stage_id:
        stage = ConsentStage.objects.filter(id=stage_id).first()
        if stage is None:
            return _fail("동의 단계를 찾을 수 없습니다.")

    # 가입 독려는 수신자 구성 시 초대 토큰을 만들므로 발신 키부터 확인
    try:
        require_sender_config(union)
    except AlimtalkDispatchError as e:
        return _fail(str(e))

    owners = (
        Owner.objects.for_union(union)
        .filter(id__in=owner_ids)
        .select_related("building_unit__land_lot")
        .order_by("id")
    )
    recipients = build_reminder_recipients(
        union=union,
        owners=owners,
        target_type=target_type,
        stage=stage,
        message=message,
    )
    if not recipients:
        return _fail("발송 대상이 없습니다.")

    template = REMINDER_TEMPLATES[target_type]
    try:
        result = dispatch_alimtalk(
            union=union,
            template_code=template["code"],
            title=template["title"],
            content=(message or "").strip(),
            recipients=recipients,
            sender=sender,
            kakao_channel=kakao_channel,
        )
    except AlimtalkDispatchError as e:
        return _fail(str(e))

    sent = result["kakaoSuccessCount"] + result["smsSuccessCount"]
    return {
        "success": True,
        "message": f"알림톡 {sent}건 발송 완료 (실패 {result['failCount']}건)",
        "sentCount": sent,
        "failedCount": result["failCount"],
        **result,
    }


def get_non_consent_owners(*, union_id, pnus: Iterable[str], target_type: str, stage_id=None) -> dict:
    """
    필지(PNU) 목록의 미동의 / 미가입 소유자 조회
    Returns: { success, owners: [{id, name, phone, pnu, address}], message? }
    """
    union = core_repo.union_get_by_id(union_id) if union_id else None
    if union is None:
        return {"success": False, "owners": [], "message": "조합을 찾을 수 없습니다."}
    if target_type not in TARGET_TYPES:
        return {"success": False, "owners": [], "message": "유효하지 않은 발송 대상 유형입니다."}

    pnus = [p for p in (pnus or []) if p]
    qs = (
        Owner.objects.for_union(union)
        .filter(building_unit__land_lot__pnu__in=pnus)
        .select_related("building_unit__land_lot")
        .order_by("id")
    )

    if target_type == NON_AGREED:
        if not stage_id:
            return {"success": False, "owners": [], "message": "동의 단계 ID가 필요합니다."}
        agreed_owner_ids = OwnerConsent.objects.filter(
            stage_id=stage_id, status=ConsentStatus.AGREED
        ).values("owner_id")
        agreed_user_ids = UserConsent.objects.filter(
            stage_id=stage_id, status=ConsentStatus.AGREED
        ).values("user_id")
        qs = qs.exclude(id__in=agreed_owner_ids).exclude(
            user__isnull=False, user_id__in=agreed_user_ids
        )
    else:
        qs = qs.filter(user__isnull=True)

    owners = [
        {
            "id": o.id,
            "name": o.name,
            "phone": o.phone or None,
            "pnu": o.building_unit.land_lot.pnu,
            "address": o.building_unit.land_lot.address or None,
        }
        for o in qs
    ]
    return {"success": True, "owners": owners}


def send_bulk_reminder_alimtalk(
    *,
    union_id,
    pnus: Iterable[str],
    target_type: str,
    stage_id=None,
    message: Optional[str] = None,
    sender=None,
    kakao_channel: Optional[MessageChannel] = None,
) -> dict:
    """여러 필지 선택 → 미동의/미가입 소유자 조회 → 독려 알림톡"""
    lookup = get_non_consent_owners(
        union_id=union_id,
        pnus=pnus,
        target_type=target_type,
        stage_id=stage_id,
    )
    if not lookup["success"]:
        return _fail(lookup.get("message") or "소유주 조회 실패")
    if not lookup["owners"]:
        return _fail("발송 대상이 없습니다.")

    return send_consent_reminder_alimtalk(
        union_id=union_id,
        target_type=target_type,
        owner_ids=[o["id"] for o in lookup["owners"]],
        stage_id=stage_id,
        message=message,
        sender=sender,
        kakao_channel=kakao_channel,
    )
