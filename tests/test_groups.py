"""v2 グループ API のユニットテスト（respx モック）"""

import httpx
import pytest
import respx
from rbx_opencloud import OpenCloud
from rbx_opencloud.exceptions import BodyDecodeError, HttpStatusError, TransportError
from rbx_opencloud.v2 import GroupInfo, GroupMembership, GroupRole

BASE_URL = "https://apis.roblox.com"
GROUP_URL = f"{BASE_URL}/cloud/v2/groups/7"

GROUP_INFO = {
    "path": "groups/7",
    "createTime": "2023-07-05T12:34:56Z",
    "updateTime": "2023-07-05T12:34:56Z",
    "id": "7",
    "displayName": "Builders",
    "description": "We build things",
    "owner": "users/1",
    "memberCount": 42,
    "publicEntryAllowed": True,
    "locked": False,
    "verified": True,
}


def make_client() -> OpenCloud:
    return OpenCloud("test-key")


@respx.mock
async def test_group_info_success() -> None:
    """グループ情報取得成功。"""
    route = respx.get(GROUP_URL).mock(return_value=httpx.Response(200, json=GROUP_INFO))
    info = await make_client().v2.groups.group_info(7)
    assert isinstance(info, GroupInfo)
    assert info.display_name == "Builders"
    assert info.member_count == 42
    assert info.public_entry_allowed is True
    assert route.calls.last.request.headers["x-api-key"] == "test-key"


@respx.mock
async def test_group_info_not_found() -> None:
    """404 で HttpStatusError になること。"""
    respx.get(GROUP_URL).mock(return_value=httpx.Response(404, text="Not found"))
    with pytest.raises(HttpStatusError) as exc_info:
        await make_client().v2.groups.group_info(7)
    assert exc_info.value.status_code == 404
    assert exc_info.value.body == "Not found"


@respx.mock
async def test_group_info_missing_required_field() -> None:
    """必須フィールド欠落で BodyDecodeError になること。"""
    body = dict(GROUP_INFO)
    del body["owner"]
    respx.get(GROUP_URL).mock(return_value=httpx.Response(200, json=body))
    with pytest.raises(BodyDecodeError):
        await make_client().v2.groups.group_info(7)


@respx.mock
async def test_group_info_rejects_type_mismatch() -> None:
    """文字列の memberCount は変換せずにエラーとすること。"""
    body = dict(GROUP_INFO, memberCount="42")
    respx.get(GROUP_URL).mock(return_value=httpx.Response(200, json=body))
    with pytest.raises(BodyDecodeError):
        await make_client().v2.groups.group_info(7)


async def test_group_info_network_error() -> None:
    """ネットワークエラーは TransportError になること。"""
    with respx.mock:
        respx.get(GROUP_URL).mock(side_effect=httpx.ConnectError("Connection refused"))
        with pytest.raises(TransportError):
            await make_client().v2.groups.group_info(7)


@respx.mock
async def test_list_roles_optional_fields() -> None:
    """ロールの省略可能フィールドが無くてもデコードできること。"""
    respx.get(f"{GROUP_URL}/roles").mock(
        return_value=httpx.Response(
            200,
            json={
                "nextPageToken": "",
                "groupRoles": [
                    {
                        "path": "groups/7/roles/1",
                        "id": "1",
                        "displayName": "Guest",
                        "rank": 0,
                    },
                    {
                        "path": "groups/7/roles/255",
                        "id": "255",
                        "displayName": "Owner",
                        "description": "Owner role",
                        "rank": 255,
                        "memberCount": 1,
                        "createTime": "2023-07-05T12:34:56Z",
                        "updateTime": "2023-07-05T12:34:56Z",
                    },
                ],
            },
        )
    )
    roles = await make_client().v2.groups.list_roles(7).advance_page()
    assert all(isinstance(r, GroupRole) for r in roles)
    assert roles[0].member_count is None
    assert roles[0].description is None
    assert roles[1].member_count == 1
    assert roles[1].rank == 255


@respx.mock
async def test_list_roles_rank_out_of_range() -> None:
    """rank が 0-255 の範囲外ならページ全体が失敗すること。"""
    respx.get(f"{GROUP_URL}/roles").mock(
        return_value=httpx.Response(
            200,
            json={
                "nextPageToken": "",
                "groupRoles": [
                    {"path": "groups/7/roles/1", "id": "1", "displayName": "X", "rank": 256}
                ],
            },
        )
    )
    with pytest.raises(BodyDecodeError):
        await make_client().v2.groups.list_roles(7).advance_page()


@respx.mock
async def test_list_memberships() -> None:
    """メンバーシップ一覧の取得。"""
    route = respx.get(f"{GROUP_URL}/memberships").mock(
        return_value=httpx.Response(
            200,
            json={
                "nextPageToken": "",
                "groupMemberships": [
                    {
                        "path": "groups/7/memberships/abc",
                        "createTime": "2023-07-05T12:34:56Z",
                        "updateTime": "2023-07-05T12:34:56Z",
                        "user": "users/156",
                        "role": "groups/7/roles/99",
                    }
                ],
            },
        )
    )
    pager = make_client().v2.groups.list_memberships(7)
    memberships = await pager.advance_page()
    assert memberships == [
        GroupMembership(
            path="groups/7/memberships/abc",
            create_time="2023-07-05T12:34:56Z",
            update_time="2023-07-05T12:34:56Z",
            user="users/156",
            role="groups/7/roles/99",
        )
    ]
    assert pager.key == "groupMemberships"
    assert pager.exhausted
    assert route.call_count == 1


@respx.mock
async def test_group_info_timeout_reaches_request() -> None:
    """group_info の timeout がリクエストに反映されること。"""
    route = respx.get(GROUP_URL).mock(return_value=httpx.Response(200, json=GROUP_INFO))
    await make_client().v2.groups.group_info(7, timeout=1.5)
    assert route.calls.last.request.extensions["timeout"]["read"] == 1.5
