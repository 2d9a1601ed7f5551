"""rover ID 連携サービスクライアント"""

from __future__ import annotations

from types import TracebackType

import httpx

from ..config import RoverSection
from ..credential import Credential
from ..decode import decode_body
from ..exceptions import BodyDecodeError, HttpStatusError
from ..transport import AuthenticatedTransport, AuthScheme, ensure_success, path_segment
from .exceptions import ServiceError
from .models import RobloxInfo, RoverErrorPayload


class RoverClient:
    """Discord と Roblox のアカウント連携を照会するクライアント。

    http_client を渡さない場合は内部で生成し、aclose() で閉じる。
    """

    def __init__(
        self,
        secret: str,
        *,
        http_client: httpx.AsyncClient | None = None,
        config: RoverSection | None = None,
    ) -> None:
        self._config = config or RoverSection()
        self._credential = Credential(secret)
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(timeout=self._config.timeout_seconds)
        self._transport = AuthenticatedTransport(
            self._client, self._credential, AuthScheme.BEARER
        )
        self._base_url = self._config.base_url.rstrip("/")

    async def discord_to_roblox(
        self, guild_id: int, user_id: int, *, timeout: float | None = None
    ) -> RobloxInfo:
        """Discord ユーザーに紐付いた Roblox アカウントを取得する。"""
        context = f"discord_to_roblox({guild_id}, {user_id})"
        resp = await self._transport.get(
            f"{self._base_url}/guilds/{path_segment(guild_id)}"
            f"/discord-to-roblox/{path_segment(user_id)}",
            timeout=timeout,
        )
        if resp.is_client_error or resp.is_server_error:
            try:
                payload = decode_body(resp, RoverErrorPayload, context)
            except BodyDecodeError as e:
                raise HttpStatusError(
                    status_code=resp.status_code,
                    message=f"{context}: HTTP {resp.status_code}: {resp.text}",
                    body=resp.text,
                ) from e
            raise ServiceError(resp.status_code, payload)
        ensure_success(resp, context)
        return decode_body(resp, RobloxInfo, context)

    async def aclose(self) -> None:
        """認証情報を破棄し、所有している HTTP クライアントを閉じる。"""
        self._credential.clear()
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> RoverClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()
