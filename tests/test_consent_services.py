import pytest

from apps.core.models import User
from apps.domains.consent.models import ConsentStatus, OwnerConsent, UserConsent
from apps.domains.consent.services import (
    apply_bulk_consent_status,
    reconcile_consent_rows,
    stage_consent_summary,
    upsert_owner_consent,
    upsert_user_consent,
)
from apps.domains.properties.models import Owner

pytestmark = pytest.mark.django_db


def test_reconcile_counts_and_row_errors(union, stage, make_member):
    hong = make_member("홍길동")
    lee = make_member("이영희")
    rows = [
        {"name": "홍길동", "status": "동의"},
        {"name": "없는사람", "status": "동의"},
        {"name": "이영희", "status": "비동의"},
    ]

    result = reconcile_consent_rows(union=union, stage=stage, rows=rows)

    assert result["successCount"] == 2
    assert result["failCount"] == 1
    assert result["errors"] == [
        {"row": 2, "name": "없는사람", "message": "조합원을 찾을 수 없습니다: 없는사람"},
    ]
    assert UserConsent.objects.get(user=hong, stage=stage).status == ConsentStatus.AGREED
    assert UserConsent.objects.get(user=lee, stage=stage).status == ConsentStatus.DISAGREED


def test_success_plus_fail_equals_row_count(union, stage, make_member):
    make_member("홍길동")
    rows = [{"name": "홍길동", "status": "동의"}, {"name": "", "status": "동의"}, {}, {"name": "김"}]

    result = reconcile_consent_rows(union=union, stage=stage, rows=rows)

    assert result["successCount"] + result["failCount"] == len(rows)


def test_row_number_from_payload_is_reported(union, stage):
    result = reconcile_consent_rows(
        union=union,
        stage=stage,
        rows=[{"rowNumber": 17, "name": "유령", "status": "동의"}],
    )

    assert result["errors"][0]["row"] == 17


def test_unrecognized_status_is_disagreed_with_warning(union, stage, make_member):
    member = make_member("홍길동")

    result = reconcile_consent_rows(
        union=union,
        stage=stage,
        rows=[{"name": "홍길동", "status": "보류"}],
        strict_status=False,
    )

    assert result["successCount"] == 1
    assert len(result["warnings"]) == 1
    assert UserConsent.objects.get(user=member, stage=stage).status == ConsentStatus.DISAGREED


def test_strict_mode_rejects_unrecognized_status(union, stage, make_member):
    member = make_member("홍길동")

    result = reconcile_consent_rows(
        union=union,
        stage=stage,
        rows=[{"name": "홍길동", "status": "보류"}],
        strict_status=True,
    )

    assert result["successCount"] == 0
    assert result["errors"][0]["message"] == "알 수 없는 동의 상태입니다: 보류"
    assert not UserConsent.objects.filter(user=member).exists()


def test_strict_mode_follows_setting(settings, union, stage, make_member):
    settings.CONSENT_STATUS_STRICT = True
    make_member("홍길동")

    result = reconcile_consent_rows(union=union, stage=stage, rows=[{"name": "홍길동", "status": "?"}])

    assert result["failCount"] == 1


def test_upload_is_idempotent_and_last_write_wins(union, stage, make_member):
    member = make_member("홍길동")

    reconcile_consent_rows(union=union, stage=stage, rows=[{"name": "홍길동", "status": "동의"}])
    reconcile_consent_rows(union=union, stage=stage, rows=[{"name": "홍길동", "status": "동의"}])
    assert UserConsent.objects.filter(user=member, stage=stage).count() == 1

    reconcile_consent_rows(union=union, stage=stage, rows=[{"name": "홍길동", "status": "반대"}])
    consent = UserConsent.objects.get(user=member, stage=stage)
    assert consent.status == ConsentStatus.DISAGREED
    assert consent.consent_date is not None


def test_progress_callback_sees_every_row(union, stage, make_member):
    make_member("홍길동")
    calls = []

    reconcile_consent_rows(
        union=union,
        stage=stage,
        rows=[{"name": "홍길동", "status": "동의"}, {"name": "유령", "status": "동의"}],
        on_progress=lambda done, total: calls.append((done, total)),
    )

    assert calls == [(1, 2), (2, 2)]


def test_progress_callback_errors_do_not_abort(union, stage, make_member):
    make_member("홍길동")

    def broken(done, total):
        raise RuntimeError("boom")

    result = reconcile_consent_rows(
        union=union,
        stage=stage,
        rows=[{"name": "홍길동", "status": "동의"}],
        on_progress=broken,
    )

    assert result["successCount"] == 1


def test_upsert_helpers_keep_single_row(union, stage, make_member):
    member = make_member("홍길동")
    owner = Owner.objects.create(union=union, name="홍길동", phone="01012345678")

    upsert_user_consent(user=member, stage=stage, status=ConsentStatus.AGREED)
    upsert_user_consent(user=member, stage=stage, status=ConsentStatus.DISAGREED)
    upsert_owner_consent(owner=owner, stage=stage, status=ConsentStatus.AGREED)
    upsert_owner_consent(owner=owner, stage=stage, status=ConsentStatus.AGREED)

    assert UserConsent.objects.filter(user=member, stage=stage).count() == 1
    assert OwnerConsent.objects.filter(owner=owner, stage=stage).count() == 1


def test_apply_bulk_status_reports_unknown_members(union, other_union, stage, make_member):
    a = make_member("홍길동")
    b = make_member("이영희")
    outsider = make_member("외부인", target=other_union)

    result = apply_bulk_consent_status(
        union=union,
        stage=stage,
        member_ids=[a.id, b.id, outsider.id],
        status=ConsentStatus.AGREED,
    )

    assert result["successCount"] == 2
    assert result["failCount"] == 1
    assert result["errors"][0]["memberId"] == outsider.id
    assert not UserConsent.objects.filter(user=outsider).exists()


def test_apply_bulk_status_rejects_unknown_status(union, stage):
    with pytest.raises(ValueError):
        apply_bulk_consent_status(union=union, stage=stage, member_ids=[1], status="MAYBE")


def test_stage_summary_counts(union, stage, make_member):
    a = make_member("홍길동")
    b = make_member("이영희")
    c = make_member("박철수", status=User.Status.PRE_REGISTERED)
    upsert_user_consent(user=a, stage=stage, status=ConsentStatus.AGREED)
    upsert_user_consent(user=b, stage=stage, status=ConsentStatus.AGREED)
    upsert_user_consent(user=c, stage=stage, status=ConsentStatus.DISAGREED)

    summary = stage_consent_summary(union=union, stage=stage)

    assert summary["agreedCount"] == 2
    assert summary["disagreedCount"] == 1
    assert summary["requiredRate"] == 75
