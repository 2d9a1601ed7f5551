"""Open Cloud v2 グループ API"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..pager import Pager, PagerOptions
from ..transport import path_segment
from ..types import GroupId
from .models import GroupInfo, GroupMembership, GroupRole

if TYPE_CHECKING:
    from .client import OpenCloudV2


class GroupsApi:
    """グループ情報・ロール・メンバーシップの取得。"""

    def __init__(self, v2: OpenCloudV2) -> None:
        self._v2 = v2

    def _group_url(self, group_id: GroupId) -> str:
        return f"{self._v2.base_url}/cloud/v2/groups/{path_segment(group_id)}"

    async def group_info(self, group_id: GroupId, *, timeout: float | None = None) -> GroupInfo:
        """グループ情報を取得する。"""
        return await self._v2.get_default(self._group_url(group_id), GroupInfo, timeout=timeout)

    def list_roles(
        self, group_id: GroupId, options: PagerOptions | None = None
    ) -> Pager[GroupRole]:
        return Pager(
            self._v2.transport,
            "groupRoles",
            f"{self._group_url(group_id)}/roles",
            GroupRole,
            options,
        )

    def list_memberships(
        self, group_id: GroupId, options: PagerOptions | None = None
    ) -> Pager[GroupMembership]:
        return Pager(
            self._v2.transport,
            "groupMemberships",
            f"{self._group_url(group_id)}/memberships",
            GroupMembership,
            options,
        )
