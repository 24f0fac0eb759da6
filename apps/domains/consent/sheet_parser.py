# PATH: apps/domains/consent/sheet_parser.py
# 동의서 엑셀/CSV → 업로드 행 파싱
# - 헤더 별칭 매칭 (조합별 양식이 달라도 인식되도록 넓게)
# - 이름 + 동의여부 컬럼이 모두 있는 첫 행을 헤더로 사용

from __future__ import annotations

import csv
import io
import logging
import re
from typing import Any, BinaryIO
from zipfile import BadZipFile

from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

logger = logging.getLogger(__name__)

HEADER_ALIASES: dict[str, tuple[str, ...]] = {
    "name": ("이름", "성명", "소유자", "소유자명", "조합원명", "성함"),
    "address": ("주소", "소재지", "물건지", "지번", "지번주소", "도로명주소"),
    "buildingName": ("건물명", "건물", "아파트명"),
    "dong": ("동",),
    "ho": ("호", "호수"),
    "status": ("동의여부", "동의 여부", "동의상태", "상태", "동의"),
}

# 동의일자 · 동의서 · 상태메모 처럼 다른 컬럼의 접두어가 되는 별칭은 완전 일치만
EXACT_ONLY_ALIASES = frozenset({"동", "호", "동의", "상태"})


class SheetParseError(ValueError):
    pass


def _normalize_header(label: str) -> str:
    """공백 제거, 전각→반각, 소문자."""
    s = re.sub(r"\s", "", (label or "").strip())
    s = "".join(chr(ord(c) - 0xFEE0) if "！" <= c <= "～" else c for c in s)
    return s.lower()


def _match_header(cell: Any, key: str, *, exact: bool = False) -> bool:
    norm = _normalize_header(str(cell or ""))
    if not norm:
        return False
    for alias in HEADER_ALIASES.get(key, ()):
        a = _normalize_header(alias)
        if norm == a:
            return True
        if exact or alias in EXACT_ONLY_ALIASES:
            continue
        if norm.startswith(a) and len(norm) <= len(a) + 4:
            return True
    return False


def _build_header_map(header_row: list[Any]) -> dict[str, int]:
    """
    완전 일치 컬럼을 먼저 잡고, 남은 키만 접두어 일치로 채운다.
    [이름, 동의일자, 동의여부] 에서 status 는 동의여부 컬럼.
    """
    out: dict[str, int] = {}
    taken: set[int] = set()
    for exact in (True, False):
        for i, cell in enumerate(header_row):
            if i in taken:
                continue
            for key in HEADER_ALIASES:
                if key in out:
                    continue
                if _match_header(cell, key, exact=exact):
                    out[key] = i
                    taken.add(i)
                    break
    return out


def _find_header_row(rows: list[list[Any]]) -> int:
    for i, row in enumerate(rows[:20]):
        col = _build_header_map(row)
        if "name" in col and "status" in col:
            return i
    return -1


def _cell_str(row: list[Any], col_index: int | None) -> str:
    if col_index is None or col_index >= len(row):
        return ""
    v = row[col_index]
    if isinstance(v, float) and v.is_integer():
        v = int(v)
    return str(v if v is not None else "").strip()


def rows_from_table(rows: list[list[Any]]) -> list[dict]:
    """표 형태(list of list) → [{rowNumber, name, address, buildingName, dong, ho, status}]"""
    header_idx = _find_header_row(rows)
    if header_idx < 0:
        raise SheetParseError("이름과 동의여부 컬럼을 찾을 수 없습니다.")
    col = _build_header_map(rows[header_idx])

    out: list[dict] = []
    for offset, row in enumerate(rows[header_idx + 1:], start=header_idx + 2):
        name = _cell_str(row, col.get("name"))
        if not name:
            continue
        out.append({
            "rowNumber": offset,
            "name": name,
            "address": _cell_str(row, col.get("address")),
            "buildingName": _cell_str(row, col.get("buildingName")),
            "dong": _cell_str(row, col.get("dong")),
            "ho": _cell_str(row, col.get("ho")),
            "status": _cell_str(row, col.get("status")),
        })
    return out


def _read_xlsx(fileobj: BinaryIO) -> list[list[Any]]:
    try:
        wb = load_workbook(fileobj, read_only=True, data_only=True)
    except (BadZipFile, InvalidFileException, KeyError) as e:
        logger.info("xlsx load failed: %s", e)
        raise SheetParseError("엑셀 파일을 읽을 수 없습니다.") from e
    try:
        ws = wb.active
        return [list(r) for r in ws.iter_rows(values_only=True)]
    finally:
        wb.close()


def _read_csv(fileobj: BinaryIO) -> list[list[Any]]:
    raw = fileobj.read()
    for encoding in ("utf-8-sig", "cp949"):
        try:
            text = raw.decode(encoding)
            break
        except UnicodeDecodeError:
            continue
    else:
        raise SheetParseError("CSV 인코딩을 인식할 수 없습니다. (UTF-8 / CP949)")
    return [list(r) for r in csv.reader(io.StringIO(text))]


def parse_consent_sheet(fileobj: BinaryIO, filename: str) -> list[dict]:
    name = (filename or "").lower()
    if name.endswith(".csv"):
        table = _read_csv(fileobj)
    elif name.endswith(".xlsx"):
        table = _read_xlsx(fileobj)
    else:
        raise SheetParseError("지원하지 않는 파일 형식입니다. (.xlsx, .csv)")
    rows = rows_from_table(table)
    logger.info("consent sheet parsed file=%s rows=%s", filename, len(rows))
    return rows
