"""認証付き HTTP トランスポート"""

from __future__ import annotations

from enum import StrEnum
from typing import Any
from urllib.parse import quote

import httpx
import structlog

from .credential import Credential
from .exceptions import HttpStatusError, TransportError

logger = structlog.stdlib.get_logger(__name__)


class AuthScheme(StrEnum):
    """認証情報の付与方式。"""

    API_KEY = "API_KEY"
    BEARER = "BEARER"


class AuthenticatedTransport:
    """httpx.AsyncClient に認証情報を付与してリクエストを送るトランスポート。

    ステータスコードの解釈は行わない。呼び出し側が ``ensure_success`` を使う。
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        credential: Credential,
        scheme: AuthScheme = AuthScheme.API_KEY,
    ) -> None:
        self._client = client
        self._credential = credential
        self._scheme = scheme

    def _auth_headers(self) -> dict[str, str]:
        if self._scheme == AuthScheme.BEARER:
            return {"Authorization": f"Bearer {self._credential.reveal()}"}
        return {"x-api-key": self._credential.reveal()}

    def request(
        self,
        method: str,
        url: str,
        *,
        params: dict[str, Any] | None = None,
        timeout: float | None = None,
    ) -> httpx.Request:
        """認証ヘッダー付きの送信可能なリクエストを組み立てる。"""
        extra: dict[str, Any] = {}
        if timeout is not None:
            extra["timeout"] = timeout
        return self._client.build_request(
            method,
            url,
            params=params,
            headers=self._auth_headers(),
            **extra,
        )

    async def send(self, request: httpx.Request) -> httpx.Response:
        """リクエストを送信する。httpx のエラーは TransportError に変換する。"""
        try:
            resp = await self._client.send(request)
        except httpx.HTTPError as e:
            raise TransportError(
                f"{request.method} {request.url} failed: {e}",
                cause=e,
            ) from e
        logger.debug(
            "http request sent",
            method=request.method,
            url=str(request.url),
            status=resp.status_code,
        )
        return resp

    async def get(
        self,
        url: str,
        *,
        params: dict[str, Any] | None = None,
        timeout: float | None = None,
    ) -> httpx.Response:
        return await self.send(self.request("GET", url, params=params, timeout=timeout))


def path_segment(value: object) -> str:
    """URL パスの 1 セグメントとして値をエスケープする。"""
    return quote(str(value), safe="")


def ensure_success(resp: httpx.Response, context: str) -> None:
    """2xx 以外なら HttpStatusError を送出する。"""
    if not resp.is_success:
        raise HttpStatusError(
            status_code=resp.status_code,
            message=f"{context}: HTTP {resp.status_code}: {resp.text}",
            body=resp.text,
        )
