"""API キーなどの秘密値の保持"""

from __future__ import annotations

from types import TracebackType
from typing import Any, NoReturn


class Credential:
    """秘密値を保持するホルダー。

    値は bytearray に格納し、``clear()`` でゼロ埋めしてから破棄する。
    コピー・pickle は禁止、``repr`` はマスクされる。
    """

    __slots__ = ("_secret",)

    def __init__(self, secret: str) -> None:
        if not secret:
            raise ValueError("credential must not be empty")
        self._secret = bytearray(secret.encode())

    @property
    def cleared(self) -> bool:
        """clear() 済みかどうか。"""
        return not self._secret

    def reveal(self) -> str:
        """ヘッダー付与のために秘密値を取り出す。"""
        if self.cleared:
            raise RuntimeError("credential has been cleared")
        return self._secret.decode()

    def clear(self) -> None:
        """秘密値をゼロ埋めして破棄する。"""
        for i in range(len(self._secret)):
            self._secret[i] = 0
        self._secret = bytearray()

    def __enter__(self) -> Credential:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.clear()

    def __repr__(self) -> str:
        state = "cleared" if self.cleared else "***"
        return f"Credential({state})"

    __str__ = __repr__

    def __copy__(self) -> NoReturn:
        raise TypeError("Credential cannot be copied")

    def __deepcopy__(self, memo: dict[int, Any]) -> NoReturn:
        raise TypeError("Credential cannot be copied")

    def __reduce__(self) -> NoReturn:
        raise TypeError("Credential cannot be pickled")
