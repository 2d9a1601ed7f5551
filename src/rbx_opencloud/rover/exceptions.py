"""rover クライアントの例外型定義"""

from __future__ import annotations

from typing import Any

from ..exceptions import OpenCloudError, OpenCloudErrorCodes
from .models import RoverErrorPayload


class ServiceError(OpenCloudError):
    """ID 連携サービスが返した構造化エラー。"""

    def __init__(self, status_code: int, payload: RoverErrorPayload) -> None:
        super().__init__(
            OpenCloudErrorCodes.SERVICE_ERROR,
            f"HTTP {status_code}: {payload.error_code}: {payload.message}",
        )
        self.status_code = status_code
        self.payload = payload

    @property
    def error_code(self) -> str:
        return self.payload.error_code

    @property
    def message(self) -> str:
        return self.payload.message

    @property
    def detail(self) -> Any:
        return self.payload.detail

    @property
    def context(self) -> Any:
        return self.payload.context
