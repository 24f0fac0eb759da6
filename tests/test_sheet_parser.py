import io

import pytest
from openpyxl import Workbook

from apps.domains.consent.sheet_parser import SheetParseError, parse_consent_sheet, rows_from_table


def test_header_aliases_and_title_rows():
    table = [
        ["장위1구역 동의서 집계표", None, None],
        [],
        ["소유자명", "소재지", "건물명", "동", "호수", "동의 여부"],
        ["홍길동", "장위동 1-1", "래미안", 101.0, 1203.0, "동의"],
        ["", "장위동 1-2", "", "", "", "동의"],
        ["이영희", "장위동 2-2", "", "", "", "미동의"],
    ]

    rows = rows_from_table(table)

    assert rows == [
        {
            "rowNumber": 4,
            "name": "홍길동",
            "address": "장위동 1-1",
            "buildingName": "래미안",
            "dong": "101",
            "ho": "1203",
            "status": "동의",
        },
        {
            "rowNumber": 6,
            "name": "이영희",
            "address": "장위동 2-2",
            "buildingName": "",
            "dong": "",
            "ho": "",
            "status": "미동의",
        },
    ]


def test_single_char_alias_needs_exact_match():
    rows = rows_from_table([["이름", "동의여부", "동호수"], ["홍길동", "동의", "101-1203"]])

    assert rows[0]["dong"] == ""


def test_missing_required_columns():
    with pytest.raises(SheetParseError):
        rows_from_table([["주소", "동", "호"], ["장위동", "1", "2"]])


def test_xlsx_upload():
    wb = Workbook()
    ws = wb.active
    ws.append(["성명", "주소", "동의상태"])
    ws.append(["홍길동", "장위동 1-1", "AGREED"])
    buf = io.BytesIO()
    wb.save(buf)
    buf.seek(0)

    rows = parse_consent_sheet(buf, "동의서.xlsx")

    assert rows[0]["name"] == "홍길동"
    assert rows[0]["status"] == "AGREED"


def test_cp949_csv():
    data = "이름,동의여부\n홍길동,동의\n".encode("cp949")

    rows = parse_consent_sheet(io.BytesIO(data), "consent.CSV")

    assert rows == [
        {"rowNumber": 2, "name": "홍길동", "address": "", "buildingName": "", "dong": "", "ho": "", "status": "동의"}
    ]


def test_unsupported_extension():
    with pytest.raises(SheetParseError):
        parse_consent_sheet(io.BytesIO(b""), "consent.xls")


def test_consent_date_column_is_not_status():
    rows = rows_from_table([["이름", "동의일자", "동의여부"], ["홍길동", "2025-01-02", "동의"]])

    assert rows[0]["status"] == "동의"


def test_bare_status_alias_needs_exact_match():
    table = [["성명", "동의서", "상태메모", "동의"], ["홍길동", "제출", "전화 요망", "AGREED"]]

    assert rows_from_table(table)[0]["status"] == "AGREED"


def test_corrupt_xlsx_is_parse_error():
    with pytest.raises(SheetParseError) as exc:
        parse_consent_sheet(io.BytesIO(b"not a zip at all"), "consent.xlsx")

    assert str(exc.value) == "엑셀 파일을 읽을 수 없습니다."
