"""Open Cloud v1 エントリポイント"""

from __future__ import annotations

from ..transport import AuthenticatedTransport
from .datastore import DatastoreApi


class OpenCloudV1:
    """v1 API の各リソースへの入口。状態は持たない。"""

    def __init__(self, transport: AuthenticatedTransport, base_url: str) -> None:
        self._transport = transport
        self._base_url = base_url.rstrip("/")

    @property
    def transport(self) -> AuthenticatedTransport:
        return self._transport

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def datastore(self) -> DatastoreApi:
        return DatastoreApi(self)
