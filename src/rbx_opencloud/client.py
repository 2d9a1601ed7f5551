"""Open Cloud トップレベルクライアント"""

from __future__ import annotations

from types import TracebackType

import httpx

from .config import OpenCloudSection
from .credential import Credential
from .transport import AuthenticatedTransport, AuthScheme
from .v1 import OpenCloudV1
from .v2 import OpenCloudV2


class OpenCloud:
    """API キーを保持し、v1 / v2 API への入口を提供するクライアント。

    http_client を渡した場合は共有し、閉じない。渡さない場合は設定の
    タイムアウトで生成し、aclose() で閉じる。aclose() 後は API キーが
    ゼロ埋めされ、以降のリクエストは失敗する。
    """

    def __init__(
        self,
        api_key: str,
        *,
        http_client: httpx.AsyncClient | None = None,
        config: OpenCloudSection | None = None,
    ) -> None:
        self._config = config or OpenCloudSection()
        self._credential = Credential(api_key)
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(timeout=self._config.timeout_seconds)
        self._transport = AuthenticatedTransport(
            self._client, self._credential, AuthScheme.API_KEY
        )

    @property
    def config(self) -> OpenCloudSection:
        return self._config

    @property
    def closed(self) -> bool:
        return self._credential.cleared

    @property
    def v1(self) -> OpenCloudV1:
        return OpenCloudV1(self._transport, self._config.base_url)

    @property
    def v2(self) -> OpenCloudV2:
        return OpenCloudV2(self._transport, self._config.base_url)

    async def aclose(self) -> None:
        """API キーを破棄し、所有している HTTP クライアントを閉じる。"""
        self._credential.clear()
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> OpenCloud:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()
