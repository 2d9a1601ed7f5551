"""Open Cloud v1 標準データストア API"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import httpx

from ..decode import parse_header, require_header
from ..transport import ensure_success, path_segment
from ..types import UniverseId
from .models import DatastoreEntry

if TYPE_CHECKING:
    from .client import OpenCloudV1

CONTENT_MD5 = "content-md5"
ENTRY_VERSION = "roblox-entry-version"
ENTRY_CREATED_TIME = "roblox-entry-created-time"
ENTRY_VERSION_CREATED_TIME = "roblox-entry-version-created-time"
ENTRY_ATTRIBUTES = "roblox-entry-attributes"
ENTRY_USERIDS = "roblox-entry-userids"


class DatastoreApi:
    """v1 標準データストアのエントリ取得。"""

    def __init__(self, v1: OpenCloudV1) -> None:
        self._v1 = v1

    def _entry_url(self, universe_id: UniverseId) -> str:
        return (
            f"{self._v1.base_url}/datastores/v1/universes/{path_segment(universe_id)}"
            "/standard-datastores/datastore/entries/entry"
        )

    async def get_entry(
        self,
        universe_id: UniverseId,
        datastore_name: str,
        entry_key: str,
        scope: str | None = None,
        *,
        timeout: float | None = None,
    ) -> DatastoreEntry:
        """エントリを取得する。属性とユーザー ID のヘッダーが無い場合は空になる。"""
        params: dict[str, Any] = {"datastoreName": datastore_name, "entryKey": entry_key}
        if scope is not None:
            params["scope"] = scope
        resp = await self._v1.transport.get(
            self._entry_url(universe_id), params=params, timeout=timeout
        )
        ensure_success(resp, f"get_entry({datastore_name}, {entry_key})")
        return _entry_from_response(resp)


def _entry_from_response(resp: httpx.Response) -> DatastoreEntry:
    headers = resp.headers
    return DatastoreEntry(
        content=resp.text,
        content_md5=require_header(headers, CONTENT_MD5),
        entry_version=require_header(headers, ENTRY_VERSION),
        entry_created_time=require_header(headers, ENTRY_CREATED_TIME),
        entry_version_created_time=require_header(headers, ENTRY_VERSION_CREATED_TIME),
        entry_attributes=parse_header(headers, ENTRY_ATTRIBUTES, dict[str, Any]) or {},
        entry_userids=parse_header(headers, ENTRY_USERIDS, list[int]) or [],
    )
