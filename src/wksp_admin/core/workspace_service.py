"""Core workspace service — fetches workspaces and resolves bundle names."""

from __future__ import annotations

import logging
from typing import Any

from wksp_admin.core.models import BundleIndex, Workspace
from wksp_admin.core.pagination import PagedSequence
from wksp_admin.core.protocols import WorkspacesProvider
from wksp_admin.exceptions import ProviderError, WkspAdminError

logger = logging.getLogger(__name__)


class WorkspaceService:
    """Stateless service listing every workspace visible to the caller."""

    def __init__(self, provider: WorkspacesProvider) -> None:
        self._provider: WorkspacesProvider = provider

    def list_workspaces(self) -> list[Workspace]:
        """Return all workspaces in the configured region, in API order.

        Raises
        ------
        ProviderError
            If any page request fails.
        """
        pages = PagedSequence(self._fetch, "Workspaces")
        workspaces = [self._parse_workspace(raw) for raw in pages]
        logger.debug("Fetched %d workspace(s)", len(workspaces))
        return workspaces

    @staticmethod
    def bundle_name_for(workspace: Workspace, index: BundleIndex) -> str:
        """Return the bundle name for *workspace*, or ``""`` when unknown."""
        return index.get(workspace.bundle_id, "")

    def _fetch(self, token: str | None) -> dict[str, Any]:
        try:
            return self._provider.describe_workspaces(next_token=token)
        except WkspAdminError:
            raise
        except Exception as exc:
            raise ProviderError(
                f"Unexpected error listing workspaces: {exc}",
            ) from exc

    @staticmethod
    def _parse_workspace(raw: dict[str, Any]) -> Workspace:
        return Workspace(
            workspace_id=str(raw.get("WorkspaceId") or ""),
            state=str(raw.get("State") or ""),
            user_name=str(raw.get("UserName") or ""),
            bundle_id=str(raw.get("BundleId") or ""),
        )
