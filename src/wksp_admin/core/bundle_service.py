"""Core bundle service — fetches, merges and indexes bundles.

Depends on a :class:`~wksp_admin.core.protocols.WorkspacesProvider`
injected at construction time, keeping the core free of any boto3
import.

Guarantees
----------
* Pure orchestration — no ``print()``, no filesystem access.
* Only :class:`~wksp_admin.exceptions.WkspAdminError` subclasses escape.
* The merged listing is ordered non-decreasing by display name.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from wksp_admin.config import PLATFORM_OWNER
from wksp_admin.core.models import Bundle, BundleIndex
from wksp_admin.core.pagination import PagedSequence
from wksp_admin.core.protocols import WorkspacesProvider
from wksp_admin.exceptions import ProviderError, WkspAdminError

logger = logging.getLogger(__name__)


class BundleService:
    """Stateless service listing platform and caller-owned bundles.

    Parameters
    ----------
    provider:
        Any object satisfying the :class:`WorkspacesProvider` protocol.
    """

    def __init__(self, provider: WorkspacesProvider) -> None:
        self._provider: WorkspacesProvider = provider

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def list_bundles(self, owner: str | None = None) -> list[Bundle]:
        """Return every bundle for *owner*, following all pages.

        ``owner=None`` sends no filter, which the service answers with
        the caller's own bundles.  Order is preserved as received.

        Raises
        ------
        ProviderError
            If any page request fails.
        """
        pages = PagedSequence(
            lambda token: self._fetch(owner, token),
            "Bundles",
        )
        bundles = [self._parse_bundle(raw, owner) for raw in pages]
        logger.debug("Fetched %d bundle(s) for owner=%s", len(bundles), owner or "<caller>")
        return bundles

    def list_all_bundles(self) -> list[Bundle]:
        """Return platform and caller-owned bundles sorted by name.

        Raises
        ------
        ProviderError
            If any page request fails.
        """
        merged = self.list_bundles(PLATFORM_OWNER) + self.list_bundles(None)
        return sorted(merged, key=lambda bundle: bundle.name)

    @staticmethod
    def build_bundle_index(bundles: Iterable[Bundle]) -> BundleIndex:
        """Map each bundle id to its display name."""
        return {bundle.bundle_id: bundle.name for bundle in bundles}

    # ------------------------------------------------------------------
    # Provider delegation (safe boundary)
    # ------------------------------------------------------------------

    def _fetch(self, owner: str | None, token: str | None) -> dict[str, Any]:
        """Call the provider and ensure only our exceptions escape."""
        try:
            return self._provider.describe_bundles(owner=owner, next_token=token)
        except WkspAdminError:
            raise
        except Exception as exc:
            raise ProviderError(
                f"Unexpected error listing bundles: {exc}",
            ) from exc

    # ------------------------------------------------------------------
    # Raw-dict → domain-model parser (pure)
    # ------------------------------------------------------------------

    @staticmethod
    def _parse_bundle(raw: dict[str, Any], owner: str | None) -> Bundle:
        return Bundle(
            bundle_id=str(raw.get("BundleId") or ""),
            name=str(raw.get("Name") or ""),
            owner=str(raw.get("Owner") or owner or ""),
        )
