"""Open Cloud v2 エントリポイント"""

from __future__ import annotations

from typing import TypeVar

from ..decode import decode_body
from ..transport import AuthenticatedTransport, ensure_success
from .datastore import DatastoreApi
from .groups import GroupsApi

T = TypeVar("T")


class OpenCloudV2:
    """v2 API の各リソースへの入口。状態は持たない。"""

    def __init__(self, transport: AuthenticatedTransport, base_url: str) -> None:
        self._transport = transport
        self._base_url = base_url.rstrip("/")

    @property
    def transport(self) -> AuthenticatedTransport:
        return self._transport

    @property
    def base_url(self) -> str:
        return self._base_url

    async def get_default(
        self, url: str, model: type[T], *, timeout: float | None = None
    ) -> T:
        """GET で 1 件のレコードを取得して型 model に変換する。"""
        context = f"GET {url}"
        resp = await self._transport.get(url, timeout=timeout)
        ensure_success(resp, context)
        return decode_body(resp, model, context)

    @property
    def groups(self) -> GroupsApi:
        return GroupsApi(self)

    @property
    def datastore(self) -> DatastoreApi:
        return DatastoreApi(self)
