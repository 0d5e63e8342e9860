"""Continuation-token pagination as a lazy, restartable sequence."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from typing import Any

logger = logging.getLogger(__name__)

PageFetcher = Callable[[str | None], dict[str, Any]]
"""Callable returning one raw response page for a continuation token."""


class PagedSequence:
    """Iterate the records of every page a list operation returns.

    Each call to :meth:`__iter__` starts again from the first page, so
    the sequence can be consumed more than once.  Iteration ends when a
    page carries no continuation token (missing, ``None`` or empty).

    Parameters
    ----------
    fetch_page:
        Called with ``None`` for the first page, then with the previous
        page's token.
    items_key:
        Response key holding the page's records (e.g. ``"Bundles"``).
    token_key:
        Response key holding the continuation token.
    """

    def __init__(
        self,
        fetch_page: PageFetcher,
        items_key: str,
        *,
        token_key: str = "NextToken",
    ) -> None:
        self._fetch_page = fetch_page
        self._items_key = items_key
        self._token_key = token_key

    def pages(self) -> Iterator[list[dict[str, Any]]]:
        """Yield the record list of each page in the order received."""
        token: str | None = None
        page_number = 0
        while True:
            response = self._fetch_page(token)
            page_number += 1
            items = response.get(self._items_key) or []
            logger.debug(
                "%s page %d: %d record(s)", self._items_key, page_number, len(items),
            )
            yield list(items)

            token = response.get(self._token_key) or None
            if token is None:
                return

    def __iter__(self) -> Iterator[dict[str, Any]]:
        for page in self.pages():
            yield from page
