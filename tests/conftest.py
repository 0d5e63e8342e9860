"""Shared pytest fixtures and configuration for the wksp-admin test suite.

Guidelines
----------
* No network access and no real AWS credentials in any test.
* The WorkSpaces API is replaced by :class:`FakeProvider` or by a
  botocore ``Stubber`` at the infra boundary.
* Core tests must be pure — no side effects.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Sequence
from typing import Any

import pytest

from wksp_admin.config import PLATFORM_OWNER
from wksp_admin.logging_setup import LOGGER_NAME


class FakeProvider:
    """In-memory :class:`WorkspacesProvider` serving pre-built pages.

    Each page list is served in order; every page except the last
    carries a ``NextToken`` of the form ``"tok-<index>"``.
    """

    def __init__(
        self,
        *,
        platform_pages: Sequence[list[dict[str, Any]]] = (),
        own_pages: Sequence[list[dict[str, Any]]] = (),
        workspace_pages: Sequence[list[dict[str, Any]]] = (),
        terminate_response: dict[str, Any] | None = None,
    ) -> None:
        self.platform_pages = list(platform_pages)
        self.own_pages = list(own_pages)
        self.workspace_pages = list(workspace_pages)
        self.terminate_response = terminate_response or {"FailedRequests": []}
        self.bundle_calls: list[tuple[str | None, str | None]] = []
        self.workspace_calls: list[str | None] = []
        self.terminate_calls: list[tuple[str, ...]] = []

    @staticmethod
    def _page(
        pages: list[list[dict[str, Any]]],
        items_key: str,
        next_token: str | None,
    ) -> dict[str, Any]:
        index = 0 if next_token is None else int(next_token.split("-")[-1])
        items = pages[index] if index < len(pages) else []
        response: dict[str, Any] = {items_key: items}
        if index + 1 < len(pages):
            response["NextToken"] = f"tok-{index + 1}"
        return response

    def describe_bundles(
        self,
        *,
        owner: str | None = None,
        next_token: str | None = None,
    ) -> dict[str, Any]:
        self.bundle_calls.append((owner, next_token))
        pages = self.platform_pages if owner == PLATFORM_OWNER else self.own_pages
        return self._page(pages, "Bundles", next_token)

    def describe_workspaces(self, *, next_token: str | None = None) -> dict[str, Any]:
        self.workspace_calls.append(next_token)
        return self._page(self.workspace_pages, "Workspaces", next_token)

    def terminate_workspaces(self, workspace_ids: Sequence[str]) -> dict[str, Any]:
        self.terminate_calls.append(tuple(workspace_ids))
        return self.terminate_response


def raw_bundle(bundle_id: str, name: str, owner: str = PLATFORM_OWNER) -> dict[str, Any]:
    return {"BundleId": bundle_id, "Name": name, "Owner": owner}


def raw_workspace(
    workspace_id: str,
    *,
    state: str = "AVAILABLE",
    user_name: str = "jdoe",
    bundle_id: str = "wsb-1",
) -> dict[str, Any]:
    return {
        "WorkspaceId": workspace_id,
        "State": state,
        "UserName": user_name,
        "BundleId": bundle_id,
    }


@pytest.fixture()
def make_provider() -> Callable[..., FakeProvider]:
    """Return the :class:`FakeProvider` constructor."""
    return FakeProvider


@pytest.fixture()
def bundle_factory() -> Callable[..., dict[str, Any]]:
    return raw_bundle


@pytest.fixture()
def workspace_factory() -> Callable[..., dict[str, Any]]:
    return raw_workspace


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    """Drop handlers bound to a previous test's captured stderr."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
