"""Cursor-based pagination over Open Cloud v2 list endpoints."""

from __future__ import annotations

from collections.abc import AsyncIterator
from dataclasses import dataclass, replace
from typing import Any, Generic, TypeVar

import structlog

from .decode import decode_value, read_json
from .exceptions import BodyDecodeError
from .transport import AuthenticatedTransport, ensure_success

T = TypeVar("T")

logger = structlog.stdlib.get_logger(__name__)

DEFAULT_MAX_PAGE_SIZE = 20

NEXT_PAGE_TOKEN_KEY = "nextPageToken"


@dataclass(frozen=True)
class PagerOptions:
    """Page size and filter sent with every page request."""

    max_page_size: int = DEFAULT_MAX_PAGE_SIZE
    filter: str | None = None

    def __post_init__(self) -> None:
        if isinstance(self.max_page_size, bool) or self.max_page_size < 1:
            raise ValueError(
                f"invalid max_page_size: {self.max_page_size} (must be a positive integer)"
            )

    def with_max_page_size(self, size: int) -> PagerOptions:
        return replace(self, max_page_size=size)

    def with_filter(self, filter: str | None) -> PagerOptions:
        return replace(self, filter=filter)


class Pager(Generic[T]):
    """Stateful cursor over a server-paginated collection.

    Each ``advance_page()`` call fetches one page and returns its elements in
    server order. A stored empty page token means the listing is exhausted;
    further calls return ``[]`` without touching the network.

    The page token is committed only after every element on the page has
    decoded, so a failed call can be retried and re-issues the same request.
    A single pager must not be advanced from two tasks at once.
    """

    def __init__(
        self,
        transport: AuthenticatedTransport,
        key: str,
        base_url: str,
        item_type: type[T],
        options: PagerOptions | None = None,
    ) -> None:
        self._transport = transport
        self._key = key
        self._base_url = base_url
        self._item_type = item_type
        self._page_type: Any = list[item_type]  # type: ignore[valid-type]
        self._options = options or PagerOptions()
        self._page_token: str | None = None
        self._advancing = False

    @property
    def key(self) -> str:
        return self._key

    @property
    def options(self) -> PagerOptions:
        return self._options

    @property
    def page_token(self) -> str | None:
        """Token of the next page to fetch. None before the first page."""
        return self._page_token

    @property
    def exhausted(self) -> bool:
        return self._page_token == ""

    def _build_params(self) -> dict[str, Any]:
        params: dict[str, Any] = {"maxPageSize": self._options.max_page_size}
        if self._options.filter is not None:
            params["filter"] = self._options.filter
        if self._page_token is not None:
            params["pageToken"] = self._page_token
        return params

    async def _fetch_envelope(self, timeout: float | None) -> tuple[str, list[Any]]:
        # Type-independent half: fetch one page and unwrap the envelope.
        context = f"list {self._key}"
        resp = await self._transport.get(
            self._base_url, params=self._build_params(), timeout=timeout
        )
        ensure_success(resp, context)
        raw = read_json(resp, context)
        if not isinstance(raw, dict):
            raise BodyDecodeError(f"{context}: page envelope is not a JSON object")
        if NEXT_PAGE_TOKEN_KEY not in raw:
            raise BodyDecodeError(f"{context}: missing {NEXT_PAGE_TOKEN_KEY}")
        next_token = raw[NEXT_PAGE_TOKEN_KEY]
        if not isinstance(next_token, str):
            raise BodyDecodeError(f"{context}: {NEXT_PAGE_TOKEN_KEY} is not a string")
        if self._key not in raw:
            raise BodyDecodeError(f"{context}: missing {self._key}")
        items = raw[self._key]
        if not isinstance(items, list):
            raise BodyDecodeError(f"{context}: {self._key} is not an array")
        return next_token, items

    async def advance_page(self, *, timeout: float | None = None) -> list[T]:
        """Fetch the next page. Returns ``[]`` once the listing is exhausted."""
        if self.exhausted:
            logger.debug("pager exhausted", key=self._key)
            return []
        if self._advancing:
            raise RuntimeError(f"pager for {self._key} is already advancing")
        self._advancing = True
        try:
            next_token, raw_items = await self._fetch_envelope(timeout)
            items = decode_value(raw_items, self._page_type, f"list {self._key}")
        finally:
            self._advancing = False
        self._page_token = next_token
        logger.debug(
            "page fetched",
            key=self._key,
            items=len(items),
            has_more=next_token != "",
        )
        return items

    async def pages(self) -> AsyncIterator[list[T]]:
        """Yield pages until the listing is exhausted."""
        while not self.exhausted:
            yield await self.advance_page()

    async def items(self) -> AsyncIterator[T]:
        """Yield every element across pages in listing order."""
        async for page in self.pages():
            for item in page:
                yield item

    def __aiter__(self) -> AsyncIterator[T]:
        return self.items()
