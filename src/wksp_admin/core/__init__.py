"""Core / service layer — pure business logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
"""

from wksp_admin.core.bundle_service import BundleService
from wksp_admin.core.models import (
    Bundle,
    BundleIndex,
    TerminationFailure,
    TerminationRecord,
    TerminationResult,
    Workspace,
)
from wksp_admin.core.pagination import PagedSequence
from wksp_admin.core.protocols import WorkspacesProvider
from wksp_admin.core.termination import TerminationPlan, TerminationState
from wksp_admin.core.workspace_service import WorkspaceService

__all__: list[str] = [
    "Bundle",
    "BundleIndex",
    "BundleService",
    "PagedSequence",
    "TerminationFailure",
    "TerminationPlan",
    "TerminationRecord",
    "TerminationResult",
    "TerminationState",
    "Workspace",
    "WorkspaceService",
    "WorkspacesProvider",
]
