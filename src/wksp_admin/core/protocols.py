"""Protocols (interfaces) consumed by the core layer.

These define the contract the infrastructure adapter must satisfy.
Core code depends ONLY on these protocols — never on boto3 — keeping
the services testable with plain mocks.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol


class WorkspacesProvider(Protocol):
    """Contract for the WorkSpaces API backend.

    Each ``describe_*`` method returns **one page** of the raw API
    response.  Pagination is driven by the core layer, which passes
    the ``NextToken`` of the previous page back in as *next_token*.

    Implementations must map all backend-specific exceptions to
    :class:`~wksp_admin.exceptions.WkspAdminError` subclasses.
    """

    def describe_bundles(
        self,
        *,
        owner: str | None = None,
        next_token: str | None = None,
    ) -> dict[str, Any]:
        """Return one page of bundles.

        The returned dict contains:

        * ``"Bundles"`` — list of bundle dicts (``BundleId``, ``Name``,
          ``Owner``)
        * ``"NextToken"`` — continuation token, absent on the last page

        Raises
        ------
        ProviderError
            When the request fails.
        """
        ...  # pragma: no cover

    def describe_workspaces(
        self,
        *,
        next_token: str | None = None,
    ) -> dict[str, Any]:
        """Return one page of workspaces (``"Workspaces"``, ``"NextToken"``).

        Raises
        ------
        ProviderError
            When the request fails.
        """
        ...  # pragma: no cover

    def terminate_workspaces(self, workspace_ids: Sequence[str]) -> dict[str, Any]:
        """Issue a single terminate request for every id in *workspace_ids*.

        Returns the raw response; ``"FailedRequests"`` lists the ids the
        service refused.

        Raises
        ------
        ProviderError
            When the request as a whole fails.
        """
        ...  # pragma: no cover
