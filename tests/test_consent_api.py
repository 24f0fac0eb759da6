import pytest
from django.core.files.uploadedfile import SimpleUploadedFile

from apps.core.models import User
from apps.domains.consent.models import ConsentStatus, UserConsent
from apps.domains.jobs.models import SyncJob

pytestmark = pytest.mark.django_db

UPLOAD_URL = "/api/consent/bulk-upload/"
UPLOAD_FILE_URL = "/api/consent/bulk-upload/file/"
UPDATE_URL = "/api/consent/bulk-update/"


def test_missing_union_or_stage_is_rejected(admin_client, union, stage):
    resp = admin_client.post(UPLOAD_URL, {"stageId": stage.id, "data": [{"name": "a"}]}, format="json")

    assert resp.status_code == 400
    assert resp.json() == {"error": "필수 파라미터가 누락되었습니다."}


def test_empty_data_is_rejected(admin_client, union, stage):
    resp = admin_client.post(UPLOAD_URL, {"unionId": union.id, "stageId": stage.id, "data": []}, format="json")

    assert resp.status_code == 400
    assert resp.json() == {"error": "처리할 데이터가 없습니다."}


def test_unknown_union_is_404(admin_client, stage):
    resp = admin_client.post(
        UPLOAD_URL,
        {"unionId": 99999, "stageId": stage.id, "data": [{"name": "a", "status": "동의"}]},
        format="json",
    )

    assert resp.status_code == 404
    assert resp.json() == {"error": "조합을 찾을 수 없습니다."}


def test_unknown_stage_is_404(admin_client, union):
    resp = admin_client.post(
        UPLOAD_URL,
        {"unionId": union.id, "stageId": 99999, "data": [{"name": "a", "status": "동의"}]},
        format="json",
    )

    assert resp.status_code == 404
    assert resp.json() == {"error": "동의 단계를 찾을 수 없습니다."}


def test_admin_of_other_union_is_forbidden(admin_client, other_union, stage):
    resp = admin_client.post(
        UPLOAD_URL,
        {"unionId": other_union.id, "stageId": stage.id, "data": [{"name": "a", "status": "동의"}]},
        format="json",
    )

    assert resp.status_code == 403
    assert resp.json() == {"error": "해당 조합에 대한 권한이 없습니다."}


def test_regular_member_cannot_upload(api_client, union, stage, make_member):
    api_client.force_authenticate(user=make_member("홍길동"))

    resp = api_client.post(
        UPLOAD_URL,
        {"unionId": union.id, "stageId": stage.id, "data": [{"name": "a", "status": "동의"}]},
        format="json",
    )

    assert resp.status_code == 403


def test_anonymous_is_rejected(api_client, union, stage):
    resp = api_client.post(UPLOAD_URL, {"unionId": union.id, "stageId": stage.id}, format="json")

    assert resp.status_code in (401, 403)


def test_sync_upload_returns_counts(admin_client, union, stage, make_member):
    member = make_member("홍길동", jibun="장위동 1-1")

    resp = admin_client.post(
        UPLOAD_URL,
        {
            "unionId": union.id,
            "stageId": stage.id,
            "data": [
                {"rowNumber": 2, "name": "홍길동", "address": "장위동 1-1", "status": "동의"},
                {"rowNumber": 3, "name": "유령", "status": "동의"},
            ],
        },
        format="json",
    )

    body = resp.json()
    assert resp.status_code == 200
    assert body["successCount"] == 1
    assert body["failCount"] == 1
    assert body["errors"] == [{"row": 3, "name": "유령", "message": "조합원을 찾을 수 없습니다: 유령"}]
    assert UserConsent.objects.get(user=member).status == ConsentStatus.AGREED


def test_large_upload_returns_job_and_job_is_pollable(admin_client, union, stage, make_member):
    make_member("홍길동")
    rows = [{"name": "홍길동", "status": "동의"} for _ in range(50)]

    resp = admin_client.post(
        UPLOAD_URL, {"unionId": union.id, "stageId": stage.id, "data": rows}, format="json"
    )

    body = resp.json()
    assert resp.status_code == 200
    assert body["message"] == "비동기 처리가 시작되었습니다."

    job_resp = admin_client.get(f"/api/jobs/{body['jobId']}/")
    job_body = job_resp.json()
    assert job_resp.status_code == 200
    # 프록시 미가용 → in-process 처리 완료
    assert job_body["status"] == SyncJob.Status.COMPLETED
    assert job_body["progress"] == 100
    assert job_body["previewData"]["successCount"] == 50


def test_system_admin_can_upload_for_any_union(system_client, other_union, stage, make_member):
    make_member("홍길동", target=other_union)

    resp = system_client.post(
        UPLOAD_URL,
        {"unionId": other_union.id, "stageId": stage.id, "data": [{"name": "홍길동", "status": "동의"}]},
        format="json",
    )

    assert resp.status_code == 200
    assert resp.json()["successCount"] == 1


def test_file_upload_csv(admin_client, union, stage, make_member):
    member = make_member("홍길동", units=[("장위동 10", "101", "1001")])
    content = "성명,물건지,동,호,동의여부\n홍길동,장위동 10,101,1001,동의\n김없음,장위동 11,,,동의\n"
    upload = SimpleUploadedFile("consents.csv", content.encode("utf-8-sig"), content_type="text/csv")

    resp = admin_client.post(
        UPLOAD_FILE_URL,
        {"unionId": union.id, "stageId": stage.id, "file": upload},
        format="multipart",
    )

    body = resp.json()
    assert resp.status_code == 200
    assert body["successCount"] == 1
    assert body["errors"][0]["row"] == 3
    assert UserConsent.objects.get(user=member).status == ConsentStatus.AGREED


def test_file_upload_rejects_unknown_format(admin_client, union, stage):
    upload = SimpleUploadedFile("consents.txt", b"hello", content_type="text/plain")

    resp = admin_client.post(
        UPLOAD_FILE_URL,
        {"unionId": union.id, "stageId": stage.id, "file": upload},
        format="multipart",
    )

    assert resp.status_code == 400
    assert resp.json() == {"error": "지원하지 않는 파일 형식입니다. (.xlsx, .csv)"}


def test_file_upload_requires_file(admin_client, union, stage):
    resp = admin_client.post(
        UPLOAD_FILE_URL, {"unionId": union.id, "stageId": stage.id}, format="multipart"
    )

    assert resp.status_code == 400
    assert resp.json() == {"error": "업로드할 파일이 없습니다."}


def test_bulk_update_validates_status(admin_client, union, stage):
    resp = admin_client.post(
        UPDATE_URL,
        {"unionId": union.id, "stageId": stage.id, "memberIds": [1], "status": "MAYBE"},
        format="json",
    )

    assert resp.status_code == 400
    assert resp.json() == {"error": "유효하지 않은 동의 상태입니다."}


def test_bulk_update_requires_members(admin_client, union, stage):
    resp = admin_client.post(
        UPDATE_URL,
        {"unionId": union.id, "stageId": stage.id, "memberIds": [], "status": "AGREED"},
        format="json",
    )

    assert resp.status_code == 400
    assert resp.json() == {"error": "처리할 조합원이 없습니다."}


def test_bulk_update_applies_status(admin_client, union, stage, make_member):
    members = [make_member("홍길동"), make_member("이영희", status=User.Status.PRE_REGISTERED)]

    resp = admin_client.post(
        UPDATE_URL,
        {
            "unionId": union.id,
            "stageId": stage.id,
            "memberIds": [m.id for m in members],
            "status": "AGREED",
        },
        format="json",
    )

    assert resp.status_code == 200
    assert resp.json()["successCount"] == 2
    assert UserConsent.objects.filter(stage=stage, status=ConsentStatus.AGREED).count() == 2


def test_stage_list_filtered_by_business_type(admin_client, stage):
    resp = admin_client.get("/api/consent/stages/", {"business_type": "REDEVELOPMENT"})

    assert resp.status_code == 200
    assert [s["stage_code"] for s in resp.json()] == ["ESTABLISHMENT"]


def test_stage_write_requires_system_admin(admin_client):
    resp = admin_client.post(
        "/api/consent/stages/",
        {"business_type": "RECONSTRUCTION", "stage_code": "X", "stage_name": "X"},
        format="json",
    )

    assert resp.status_code == 403


def test_file_upload_corrupt_xlsx_is_bad_request(admin_client, union, stage):
    upload = SimpleUploadedFile(
        "consent.xlsx",
        b"not a zip at all",
        content_type="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    )

    resp = admin_client.post(
        UPLOAD_FILE_URL,
        {"unionId": union.id, "stageId": stage.id, "file": upload},
        format="multipart",
    )

    assert resp.status_code == 400
    assert resp.json() == {"error": "엑셀 파일을 읽을 수 없습니다."}


def test_malformed_rows_are_reported_without_aborting_batch(admin_client, union, stage, make_member):
    member = make_member("홍길동")

    resp = admin_client.post(
        UPLOAD_URL,
        {
            "unionId": union.id,
            "stageId": stage.id,
            "data": [None, {"name": "홍길동", "status": "동의"}, "홍길동"],
        },
        format="json",
    )

    body = resp.json()
    assert resp.status_code == 200
    assert body["successCount"] == 1
    assert [e["row"] for e in body["errors"]] == [1, 3]
    assert body["errors"][0]["message"] == "잘못된 행 형식입니다."
    assert UserConsent.objects.get(user=member).status == ConsentStatus.AGREED


def test_non_list_data_is_rejected_in_korean(admin_client, union, stage):
    resp = admin_client.post(
        UPLOAD_URL, {"unionId": union.id, "stageId": stage.id, "data": "홍길동"}, format="json"
    )

    assert resp.status_code == 400
    assert resp.json() == {"error": "처리할 데이터가 없습니다."}
