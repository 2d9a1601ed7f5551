"""rover データモデル"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _RoverModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        strict=True,
    )


class RobloxInfo(_RoverModel):
    """Discord ユーザーに紐付いた Roblox アカウント情報。"""

    roblox_id: int
    discord_id: str
    guild_id: str
    cached_username: str


class RoverErrorPayload(_RoverModel):
    """エラーレスポンスのボディ。"""

    error_code: str
    message: str
    detail: Any = None
    context: Any = None
