"""Open Cloud v1 データモデル"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class DatastoreEntry:
    """標準データストアのエントリ。

    メタデータはレスポンスヘッダー、content はレスポンスボディから組み立てる。
    """

    content: str
    content_md5: str
    entry_version: str
    entry_created_time: str
    entry_version_created_time: str
    entry_attributes: dict[str, Any] = field(default_factory=dict)
    entry_userids: list[int] = field(default_factory=list)
