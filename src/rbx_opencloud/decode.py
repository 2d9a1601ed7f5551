"""JSON ボディ / HTTP ヘッダーから型付きレコードへのデコード"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from .exceptions import BodyDecodeError, HeaderDecodeError

T = TypeVar("T")


@lru_cache(maxsize=None)
def _adapter(tp: Any) -> TypeAdapter[Any]:
    return TypeAdapter(tp)


def read_json(resp: httpx.Response, context: str) -> Any:
    """レスポンスボディを JSON として読み込む。"""
    try:
        return resp.json()
    except ValueError as e:
        raise BodyDecodeError(f"{context}: response body is not valid JSON", cause=e) from e


def decode_value(raw: Any, tp: type[T], context: str) -> T:
    """JSON 値を型 tp に変換する。型の不一致は変換せずに BodyDecodeError とする。"""
    try:
        value: T = _adapter(tp).validate_python(raw, strict=True)
    except ValidationError as e:
        raise BodyDecodeError(f"{context}: {e}", cause=e) from e
    return value


def decode_body(resp: httpx.Response, tp: type[T], context: str) -> T:
    """レスポンスボディを JSON として読み込み、型 tp に変換する。"""
    return decode_value(read_json(resp, context), tp, context)


def get_header_str(headers: httpx.Headers, key: str) -> str | None:
    """ヘッダー値をテキストとして取得する。

    ヘッダーが無い場合は None。値に可視 ASCII 以外のバイトが含まれる場合は
    HeaderDecodeError を送出する。
    """
    wanted = key.lower().encode("ascii")
    for name, value in headers.raw:
        if name.lower() != wanted:
            continue
        if not all(b == 0x09 or 0x20 <= b < 0x7F for b in value):
            raise HeaderDecodeError(key, f"header {key} is not visible ASCII text")
        return value.decode("ascii")
    return None


def require_header(headers: httpx.Headers, key: str) -> str:
    """必須ヘッダーをテキストとして取得する。"""
    value = get_header_str(headers, key)
    if value is None:
        raise HeaderDecodeError(key, f"required header {key} is missing")
    return value


def parse_header(headers: httpx.Headers, key: str, tp: type[T]) -> T | None:
    """JSON エンコードされたヘッダー値を型 tp に変換する。

    ヘッダーが無い場合は None を返し、既定値の適用は呼び出し側に任せる。
    """
    text = get_header_str(headers, key)
    if text is None:
        return None
    try:
        value: T = _adapter(tp).validate_json(text, strict=True)
    except ValidationError as e:
        raise HeaderDecodeError(key, f"header {key} does not match expected type: {e}", cause=e) from e
    return value
