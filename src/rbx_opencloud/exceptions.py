"""rbx_opencloud ライブラリの例外型定義"""

from __future__ import annotations


class OpenCloudErrorCodes:
    """OpenCloudError のエラーコード定数。"""

    TRANSPORT_ERROR: str = "TRANSPORT_ERROR"
    HTTP_ERROR: str = "HTTP_ERROR"
    HEADER_DECODE_ERROR: str = "HEADER_DECODE_ERROR"
    BODY_DECODE_ERROR: str = "BODY_DECODE_ERROR"
    SERVICE_ERROR: str = "SERVICE_ERROR"
    READ_FILE: str = "READ_FILE_ERROR"
    PARSE_YAML: str = "PARSE_YAML_ERROR"
    VALIDATION: str = "VALIDATION_ERROR"


class OpenCloudError(Exception):
    """rbx_opencloud ライブラリのエラー基底クラス。"""

    def __init__(
        self,
        code: str,
        message: str,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return f"{self.code}: {super().__str__()}"


class TransportError(OpenCloudError):
    """接続・送受信レベルの失敗。"""

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        super().__init__(OpenCloudErrorCodes.TRANSPORT_ERROR, message, cause)


class HttpStatusError(OpenCloudError):
    """2xx 以外のステータスが返された。"""

    def __init__(self, status_code: int, message: str, body: str = "") -> None:
        super().__init__(OpenCloudErrorCodes.HTTP_ERROR, message)
        self.status_code = status_code
        self.body = body


class HeaderDecodeError(OpenCloudError):
    """レスポンスヘッダーの値がテキストでない、または期待する型に変換できない。"""

    def __init__(self, header: str, message: str, cause: Exception | None = None) -> None:
        super().__init__(OpenCloudErrorCodes.HEADER_DECODE_ERROR, message, cause)
        self.header = header


class BodyDecodeError(OpenCloudError):
    """レスポンスボディが JSON として不正、またはスキーマに一致しない。"""

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        super().__init__(OpenCloudErrorCodes.BODY_DECODE_ERROR, message, cause)


class ConfigError(OpenCloudError):
    """設定ファイルの読み込みエラー。"""
