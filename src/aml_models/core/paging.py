"""Paged listings and lazy pagers that follow continuation tokens."""

from __future__ import annotations

from collections.abc import AsyncIterator, Awaitable, Callable, Iterator, Mapping
from typing import Any, ClassVar, Generic, TypeVar, Union

from pydantic import Field

from aml_models.core.errors import PagingError
from aml_models.core.wire import WireModel

T = TypeVar("T")
PageT = TypeVar("PageT", bound="Continuable")

PagePayload = Union[Mapping[str, Any], str, bytes, "Continuable"]


class Continuable(WireModel):
    """A listing page that may point at the next page via ``nextLink``.

    The link is an opaque token, in practice a full request URL, and is
    handed back to the service unchanged. An absent or empty link means the
    listing is finished.
    """

    # Name of the field holding this page's items.
    items_field: ClassVar[str] = "value"

    next_link: str | None = None

    def continuation_token(self) -> str | None:
        return self.next_link or None

    @property
    def has_next_page(self) -> bool:
        return self.continuation_token() is not None

    def page_items(self) -> list[Any]:
        return list(getattr(self, self.items_field))


class PagedResult(Continuable, Generic[T]):
    """``{"value": [...], "nextLink": ...}``."""

    value: list[T] = Field(default_factory=list)


def _as_page(page_type: type[PageT], payload: PagePayload) -> PageT:
    if isinstance(payload, page_type):
        return payload
    if isinstance(payload, Continuable):
        payload = payload.to_wire()
    return page_type.from_wire(payload)  # type: ignore[arg-type]


def _next_token(page: Continuable, previous: str | None) -> str | None:
    token = page.continuation_token()
    if token is not None and token == previous:
        raise PagingError(f"Page fetched with continuation '{token}' points back at itself")
    return token


class ItemPager(Generic[PageT]):
    """Lazy, restartable iteration over every item of a paged listing.

    *fetch* is called with ``None`` for the first page and with the previous
    page's continuation token afterwards; it returns the page as a wire
    mapping, raw JSON or an already decoded page. Nothing is fetched until
    iteration starts, and each new iteration starts over from the first page::

        pager = ItemPager(fetch, PaginatedComputeResourcesList)
        for compute in pager:
            ...
        for page in pager.by_page():
            ...
    """

    def __init__(
        self,
        fetch: Callable[[str | None], PagePayload],
        page_type: type[PageT],
    ) -> None:
        self._fetch = fetch
        self.page_type = page_type

    def by_page(self, continuation: str | None = None) -> Iterator[PageT]:
        """Yield whole pages, optionally resuming from *continuation*."""
        token = continuation
        while True:
            page = _as_page(self.page_type, self._fetch(token))
            yield page
            token = _next_token(page, token)
            if token is None:
                return

    def __iter__(self) -> Iterator[Any]:
        for page in self.by_page():
            yield from page.page_items()


class AsyncItemPager(Generic[PageT]):
    """Async counterpart of :class:`ItemPager`.

    Cancelling the consuming task stops the pager at its next page fetch.
    """

    def __init__(
        self,
        fetch: Callable[[str | None], Awaitable[PagePayload]],
        page_type: type[PageT],
    ) -> None:
        self._fetch = fetch
        self.page_type = page_type

    async def by_page(self, continuation: str | None = None) -> AsyncIterator[PageT]:
        token = continuation
        while True:
            page = _as_page(self.page_type, await self._fetch(token))
            yield page
            token = _next_token(page, token)
            if token is None:
                return

    async def __aiter__(self) -> AsyncIterator[Any]:
        async for page in self.by_page():
            for item in page.page_items():
                yield item
