# apps/support/alimtalk/proxy_client.py
"""
알림톡 프록시 서버 HTTP 클라이언트

- POST {ALIMTALK_PROXY_URL}/api/alimtalk/send      : 단건 알림톡 발송
- GET  {ALIMTALK_PROXY_URL}/api/alimtalk/templates : 대행사 템플릿 목록
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import requests

from libs.queue.client import proxy_base_url, proxy_timeout

logger = logging.getLogger(__name__)

SEND_PATH = "/api/alimtalk/send"
TEMPLATES_PATH = "/api/alimtalk/templates"


class ProxyError(Exception):
    pass


class AlimtalkProxyClient:
    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None):
        self.base_url = (base_url or proxy_base_url()).rstrip("/")
        self.timeout = timeout if timeout is not None else proxy_timeout()

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def send(self, payload: dict[str, Any]) -> dict[str, Any]:
        try:
            resp = requests.post(self._url(SEND_PATH), json=payload, timeout=self.timeout)
            resp.raise_for_status()
            return resp.json()
        except (requests.RequestException, ValueError) as e:
            raise ProxyError(str(e)) from e

    def list_templates(self) -> list[dict[str, Any]]:
        try:
            resp = requests.get(self._url(TEMPLATES_PATH), timeout=self.timeout)
            resp.raise_for_status()
            body = resp.json()
        except (requests.RequestException, ValueError) as e:
            raise ProxyError(str(e)) from e
        if isinstance(body, dict):
            body = body.get("list") or body.get("templates") or []
        if not isinstance(body, list):
            raise ProxyError("unexpected template list response")
        return body
