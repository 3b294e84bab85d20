"""
Pagers for list operations.

A ``Pager`` wraps a list operation and its options and walks the result
pages by following the ``next`` cursor of each page. It is a single-pass,
stateful object: create a new one to iterate again.

Example:
    ```python
    pager = client.config_maps.pager(ListConfigMapsOptions(project_id=pid, limit=50))
    while pager.has_next():
        for config_map in await pager.get_next():
            print(config_map.name)
    ```
"""

import logging
from enum import Enum
from typing import Awaitable, Callable, Generic, List, Optional, TypeVar
from urllib.parse import parse_qs, urlparse

from codeengine_client.exceptions import PagerExhaustedError, ValidationError
from codeengine_client.models.base import ListResponse, PaginationListNextMetadata
from codeengine_client.options import ListOptions

logger = logging.getLogger(__name__)

T = TypeVar("T")

FetchPage = Callable[[ListOptions], Awaitable[ListResponse]]


class PagerState(str, Enum):
    READY = "ready"
    EXHAUSTED = "exhausted"
    FAILED = "failed"


def next_cursor(next_meta: Optional[PaginationListNextMetadata]) -> Optional[str]:
    """
    Extract the start token of the next page.

    Prefers ``next.start``; falls back to the ``start`` query parameter of
    ``next.href``. Returns None when there is no next page.
    """
    if next_meta is None:
        return None
    if next_meta.start:
        return next_meta.start
    if next_meta.href:
        values = parse_qs(urlparse(next_meta.href).query).get("start")
        if values and values[0]:
            return values[0]
    return None


class Pager(Generic[T]):
    """
    Iterates over the pages of a list operation.

    Args:
        fetch_page: Coroutine function fetching one page for given options
        options: Options of the first request; copied, never mutated
        items_field: Name of the list field holding the page items
        start: Token to resume from instead of the first page

    Raises:
        ValidationError: If ``options.start`` is set or ``options.limit``
            is negative
    """

    def __init__(
        self,
        fetch_page: FetchPage,
        options: ListOptions,
        items_field: str,
        *,
        start: Optional[str] = None,
    ):
        if options.start is not None:
            raise ValidationError(
                "The start option is managed by the pager and must not be set",
                field_errors={"start": "Must not be set when using a pager"},
            )
        if options.limit is not None and options.limit < 0:
            raise ValidationError(
                f"Invalid limit: {options.limit}",
                field_errors={"limit": "Must not be negative"},
            )

        self._fetch_page = fetch_page
        self._options = options.model_copy(deep=True)
        self._items_field = items_field
        self._cursor = start
        self._state = PagerState.READY
        self._error: Optional[Exception] = None
        self._pages_fetched = 0

    @property
    def state(self) -> PagerState:
        return self._state

    @property
    def pages_fetched(self) -> int:
        return self._pages_fetched

    def has_next(self) -> bool:
        """True while another page can be fetched."""
        return self._state is PagerState.READY

    async def get_next(self) -> List[T]:
        """
        Fetch the next page.

        Returns:
            Items of the page, in server order (possibly empty)

        Raises:
            PagerExhaustedError: If all pages were already returned
            CodeEngineClientError: The error of the failed fetch; a failed
                pager raises it again on every call without sending requests
        """
        if self._state is PagerState.FAILED:
            raise self._error
        if self._state is PagerState.EXHAUSTED:
            raise PagerExhaustedError()

        options = self._options.model_copy(update={"start": self._cursor})
        try:
            page = await self._fetch_page(options)
        except Exception as e:
            self._state = PagerState.FAILED
            self._error = e
            logger.debug(f"Pager failed on page {self._pages_fetched + 1}: {e}")
            raise

        self._pages_fetched += 1
        items = list(getattr(page, self._items_field, None) or [])
        self._cursor = next_cursor(page.next)
        if self._cursor is None:
            self._state = PagerState.EXHAUSTED
        logger.debug(
            f"Pager fetched page {self._pages_fetched} with {len(items)} item(s), "
            f"state={self._state.value}"
        )
        return items

    async def get_all(self) -> List[T]:
        """
        Fetch all remaining pages and return their items concatenated.

        If any page fails, the error propagates and nothing is returned. A
        pager that already failed raises its error again.
        """
        results: List[T] = []
        while self._state is not PagerState.EXHAUSTED:
            results.extend(await self.get_next())
        return results

    async def __aiter__(self):
        # FAILED falls through to get_next(), which re-raises the stored error
        while self._state is not PagerState.EXHAUSTED:
            yield await self.get_next()
