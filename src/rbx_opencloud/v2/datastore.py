"""Open Cloud v2 データストア API"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..pager import Pager, PagerOptions
from ..transport import path_segment
from ..types import UniverseId
from .models import Datastore, DatastoreEntry

if TYPE_CHECKING:
    from .client import OpenCloudV2


class DatastoreApi:
    """データストア一覧とエントリの取得。"""

    def __init__(self, v2: OpenCloudV2) -> None:
        self._v2 = v2

    def _universe_url(self, universe_id: UniverseId) -> str:
        return f"{self._v2.base_url}/cloud/v2/universes/{path_segment(universe_id)}"

    def list_datastores(
        self, universe_id: UniverseId, options: PagerOptions | None = None
    ) -> Pager[Datastore]:
        """データストア一覧のページャーを返す。"""
        return Pager(
            self._v2.transport,
            "dataStores",
            f"{self._universe_url(universe_id)}/data-stores",
            Datastore,
            options,
        )

    async def get_entry(
        self,
        universe_id: UniverseId,
        datastore_id: str,
        entry_id: str,
        *,
        timeout: float | None = None,
    ) -> DatastoreEntry:
        """データストアエントリを取得する。"""
        url = (
            f"{self._universe_url(universe_id)}/data-stores/{path_segment(datastore_id)}"
            f"/entries/{path_segment(entry_id)}"
        )
        return await self._v2.get_default(
            url,
            DatastoreEntry,
            timeout=timeout,
        )
