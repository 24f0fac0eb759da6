# ======================================================================
# PATH: apps/core/tenant/exceptions.py
# ======================================================================
from __future__ import annotations


class TenantResolutionError(Exception):
    """
    조합(테넌트) 식별 실패. 운영에서 원인을 바로 알 수 있도록 code 로 구분.

    code:
      - tenant_missing
      - tenant_invalid
      - tenant_inactive
    """

    def __init__(
        self,
        *,
        code: str,
        message: str,
        http_status: int = 400,
    ):
        super().__init__(message)
        self.code = str(code)
        self.message = str(message)
        self.http_status = int(http_status)

    def as_dict(self) -> dict:
        return {"code": self.code, "detail": self.message}
