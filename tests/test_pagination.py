"""Tests for :class:`PagedSequence` (core/pagination.py)."""

from __future__ import annotations

from typing import Any
from unittest.mock import MagicMock

import pytest

from wksp_admin.core.pagination import PagedSequence


def _fetcher(pages: list[list[int]], *, last_token: Any = ...) -> MagicMock:
    """Serve *pages*; the final page carries *last_token* when given."""

    def fetch(token: str | None) -> dict[str, Any]:
        index = 0 if token is None else int(token)
        response: dict[str, Any] = {"Items": [{"n": n} for n in pages[index]]}
        if index + 1 < len(pages):
            response["NextToken"] = str(index + 1)
        elif last_token is not ...:
            response["NextToken"] = last_token
        return response

    return MagicMock(side_effect=fetch)


class TestDraining:
    @pytest.mark.parametrize("page_count", [1, 2, 5])
    def test_collects_every_page_in_order(self, page_count: int) -> None:
        page_size = 3
        pages = [
            list(range(p * page_size, (p + 1) * page_size)) for p in range(page_count)
        ]
        fetch = _fetcher(pages)

        result = [item["n"] for item in PagedSequence(fetch, "Items")]

        assert result == list(range(page_count * page_size))
        assert fetch.call_count == page_count

    def test_uneven_pages_sum(self) -> None:
        pages = [[1, 2, 3], [4], [], [5, 6]]
        result = list(PagedSequence(_fetcher(pages), "Items"))
        assert len(result) == sum(len(p) for p in pages)

    def test_first_request_has_no_token(self) -> None:
        fetch = _fetcher([[1], [2]])
        list(PagedSequence(fetch, "Items"))
        assert fetch.call_args_list[0].args == (None,)
        assert fetch.call_args_list[1].args == ("1",)

    @pytest.mark.parametrize("last_token", [None, ""])
    def test_empty_or_none_token_stops(self, last_token: str | None) -> None:
        fetch = _fetcher([[1], [2]], last_token=last_token)
        assert len(list(PagedSequence(fetch, "Items"))) == 2
        assert fetch.call_count == 2

    def test_missing_items_key_is_empty_page(self) -> None:
        fetch = MagicMock(return_value={})
        assert list(PagedSequence(fetch, "Items")) == []


class TestLaziness:
    def test_nothing_fetched_until_iterated(self) -> None:
        fetch = _fetcher([[1]])
        PagedSequence(fetch, "Items")
        fetch.assert_not_called()

    def test_restartable(self) -> None:
        fetch = _fetcher([[1, 2], [3]])
        seq = PagedSequence(fetch, "Items")

        first = list(seq)
        second = list(seq)

        assert first == second
        assert fetch.call_count == 4

    def test_pages_yields_page_lists(self) -> None:
        seq = PagedSequence(_fetcher([[1, 2], [3]]), "Items")
        assert [len(page) for page in seq.pages()] == [2, 1]

    def test_error_propagates(self) -> None:
        fetch = MagicMock(side_effect=RuntimeError("boom"))
        with pytest.raises(RuntimeError, match="boom"):
            list(PagedSequence(fetch, "Items"))
