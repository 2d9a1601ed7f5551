"""クライアント設定（pydantic BaseModel）と YAML 読み込み"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, ValidationError

from .exceptions import ConfigError, OpenCloudErrorCodes

DEFAULT_OPENCLOUD_BASE_URL = "https://apis.roblox.com"
DEFAULT_ROVER_BASE_URL = "https://registry.rover.link/api"


class OpenCloudSection(BaseModel):
    """Open Cloud API 接続設定。"""

    base_url: str = DEFAULT_OPENCLOUD_BASE_URL
    timeout_seconds: float = Field(default=10.0, gt=0)


class RoverSection(BaseModel):
    """ID 連携サービス接続設定。"""

    base_url: str = DEFAULT_ROVER_BASE_URL
    timeout_seconds: float = Field(default=10.0, gt=0)


class LogSection(BaseModel):
    """ログ設定。"""

    level: str = "INFO"
    format: Literal["json", "text"] = "json"


class ClientConfig(BaseModel):
    """クライアント設定全体。"""

    opencloud: OpenCloudSection = Field(default_factory=OpenCloudSection)
    rover: RoverSection = Field(default_factory=RoverSection)
    log: LogSection = Field(default_factory=LogSection)


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(
            code=OpenCloudErrorCodes.READ_FILE,
            message=f"Failed to read config file: {path}",
            cause=e,
        ) from e
    try:
        data = yaml.safe_load(text) or {}
    except yaml.YAMLError as e:
        raise ConfigError(
            code=OpenCloudErrorCodes.PARSE_YAML,
            message=f"Failed to parse YAML: {path}",
            cause=e,
        ) from e
    if not isinstance(data, dict):
        raise ConfigError(
            code=OpenCloudErrorCodes.VALIDATION,
            message=f"Config root must be a mapping: {path}",
        )
    return data


def load_config(path: Path) -> ClientConfig:
    """設定ファイルを読み込んで ClientConfig を返す。

    認証情報は設定ファイルからは読まない。クライアント生成時に渡すこと。
    """
    data = _read_yaml(path)
    try:
        return ClientConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(
            code=OpenCloudErrorCodes.VALIDATION,
            message=f"Config validation failed: {e}",
            cause=e,
        ) from e
