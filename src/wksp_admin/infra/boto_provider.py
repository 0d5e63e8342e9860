"""boto3 backed implementation of :class:`~wksp_admin.core.protocols.WorkspacesProvider`.

This module is the **only** place in the codebase that creates a
WorkSpaces client.  botocore exceptions are caught here and re-raised
as typed :class:`~wksp_admin.exceptions.WkspAdminError` subclasses —
nothing raw escapes the infrastructure boundary.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

import boto3
from botocore.config import Config
from botocore.exceptions import (
    BotoCoreError,
    ClientError,
    NoCredentialsError,
    NoRegionError,
    PartialCredentialsError,
    ProfileNotFound,
)

from wksp_admin.exceptions import CredentialsError, ProviderError

logger = logging.getLogger(__name__)

SERVICE_NAME: str = "workspaces"

# The tool performs no retry/backoff of its own; a failed request is fatal.
_CLIENT_CONFIG = Config(retries={"max_attempts": 1, "mode": "standard"})


class Boto3WorkspacesProvider:
    """Concrete :class:`WorkspacesProvider` backed by a boto3 client.

    Usage::

        provider = Boto3WorkspacesProvider.from_profile("admin", "us-east-1")
        page = provider.describe_workspaces()

    This class satisfies the protocol structurally — no explicit
    inheritance required.
    """

    def __init__(self, client: Any) -> None:
        self._client: Any = client

    @classmethod
    def from_profile(cls, profile: str, region: str) -> Boto3WorkspacesProvider:
        """Create a provider for *profile* (empty = default chain) in *region*.

        Raises
        ------
        CredentialsError
            If the named profile does not exist.
        ProviderError
            If the client cannot be created.
        """
        try:
            session = boto3.Session(profile_name=profile or None, region_name=region)
            client = session.client(SERVICE_NAME, config=_CLIENT_CONFIG)
        except ProfileNotFound as exc:
            raise CredentialsError(
                str(exc),
                hint="Check the --profile name against ~/.aws/config.",
            ) from exc
        except BotoCoreError as exc:
            raise ProviderError(f"Cannot create WorkSpaces client: {exc}") from exc
        logger.debug("WorkSpaces client ready (profile=%s, region=%s)", profile or "<default>", region)
        return cls(client)

    # ------------------------------------------------------------------
    # Protocol methods
    # ------------------------------------------------------------------

    def describe_bundles(
        self,
        *,
        owner: str | None = None,
        next_token: str | None = None,
    ) -> dict[str, Any]:
        kwargs: dict[str, Any] = {}
        if owner:
            kwargs["Owner"] = owner
        if next_token:
            kwargs["NextToken"] = next_token
        return self._call("describe_workspace_bundles", **kwargs)

    def describe_workspaces(
        self,
        *,
        next_token: str | None = None,
    ) -> dict[str, Any]:
        kwargs: dict[str, Any] = {}
        if next_token:
            kwargs["NextToken"] = next_token
        return self._call("describe_workspaces", **kwargs)

    def terminate_workspaces(self, workspace_ids: Sequence[str]) -> dict[str, Any]:
        requests = [{"WorkspaceId": ws_id} for ws_id in workspace_ids]
        return self._call("terminate_workspaces", TerminateWorkspaceRequests=requests)

    # ------------------------------------------------------------------
    # Exception mapping
    # ------------------------------------------------------------------

    def _call(self, operation: str, **kwargs: Any) -> dict[str, Any]:
        """Invoke *operation* on the client, mapping botocore errors."""
        logger.debug("Calling %s %s", operation, sorted(kwargs))
        try:
            response: Any = getattr(self._client, operation)(**kwargs)
        except (NoCredentialsError, PartialCredentialsError) as exc:
            raise CredentialsError(
                str(exc),
                hint="Configure credentials or pass --profile.",
            ) from exc
        except NoRegionError as exc:
            raise ProviderError(str(exc), hint="Pass --region.") from exc
        except ClientError as exc:
            error = exc.response.get("Error", {})
            raise ProviderError(
                f"{operation} failed: {error.get('Code', 'Unknown')}: "
                f"{error.get('Message', exc)}",
            ) from exc
        except BotoCoreError as exc:
            raise ProviderError(f"{operation} failed: {exc}") from exc

        if not isinstance(response, dict):
            raise ProviderError(f"{operation} returned an unexpected response.")
        return dict(response)
