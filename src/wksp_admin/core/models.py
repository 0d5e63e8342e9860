"""Domain models for wksp-admin.

All models are **frozen** dataclasses — immutable snapshots fetched
per run, with no behaviour beyond data access.  They carry zero I/O
and zero dependencies on external packages.
"""

from __future__ import annotations

from dataclasses import dataclass


# ---------------------------------------------------------------------------
# Bundles
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Bundle:
    """A WorkSpaces bundle (image + hardware template)."""

    bundle_id: str
    """Opaque bundle identifier (e.g. ``wsb-bh8rsxt14``)."""

    name: str
    """Human-readable display name."""

    owner: str
    """``AMAZON`` for platform bundles, the account id for custom ones."""


BundleIndex = dict[str, str]
"""Mapping of bundle id to bundle display name."""


# ---------------------------------------------------------------------------
# Workspaces
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Workspace:
    """A single provisioned virtual desktop."""

    workspace_id: str
    state: str
    """Lifecycle state as reported by the API (e.g. ``AVAILABLE``)."""

    user_name: str
    bundle_id: str


# ---------------------------------------------------------------------------
# Termination
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class TerminationRecord:
    """One row of a workspace CSV queued for termination.

    Only :attr:`workspace_id` is sent to the API; the other columns are
    shown in the confirmation preview.
    """

    workspace_id: str
    state: str = ""
    user_name: str = ""
    bundle: str = ""


@dataclass(frozen=True, slots=True)
class TerminationFailure:
    """A per-workspace failure reported by the terminate request."""

    workspace_id: str
    error_code: str
    error_message: str


@dataclass(frozen=True, slots=True)
class TerminationResult:
    """Outcome of the single bulk-terminate request."""

    requested: tuple[str, ...]
    failures: tuple[TerminationFailure, ...] = ()

    @property
    def succeeded(self) -> tuple[str, ...]:
        failed = {failure.workspace_id for failure in self.failures}
        return tuple(ws_id for ws_id in self.requested if ws_id not in failed)

    def __bool__(self) -> bool:
        return not self.failures
