"""Open Cloud v2 データモデル"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _Resource(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        strict=True,
    )


class GroupInfo(_Resource):
    """グループ情報。"""

    path: str
    create_time: str
    update_time: str
    id: str
    display_name: str
    description: str
    owner: str
    member_count: int
    public_entry_allowed: bool
    locked: bool
    verified: bool


class GroupRole(_Resource):
    """グループロール。"""

    path: str
    id: str
    display_name: str
    rank: int = Field(ge=0, le=255)
    create_time: str | None = None
    update_time: str | None = None
    description: str | None = None
    member_count: int | None = None


class GroupMembership(_Resource):
    """グループメンバーシップ。"""

    path: str
    create_time: str
    update_time: str
    user: str
    role: str


class Datastore(_Resource):
    """データストア。"""

    path: str
    create_time: str
    id: str


class DatastoreEntry(_Resource):
    """データストアエントリ。"""

    path: str
    create_time: str
    revision_id: str
    revision_create_time: str
    state: str
    etag: str
    value: Any
    id: str
    users: list[str] = Field(default_factory=list)
    attributes: dict[str, Any] = Field(default_factory=dict)
