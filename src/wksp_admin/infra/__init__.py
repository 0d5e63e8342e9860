"""Infrastructure layer — external system integration.

This layer wraps all interaction with the WorkSpaces API (boto3) and
the filesystem (CSV files).  Every raw third-party or OS exception
must be caught here and re-raised as a
:class:`~wksp_admin.exceptions.WkspAdminError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from wksp_admin.infra.boto_provider import Boto3WorkspacesProvider
from wksp_admin.infra.credentials import CredentialStatus, detect_credentials
from wksp_admin.infra.csv_store import (
    read_termination_records,
    write_bundles_csv,
    write_workspaces_csv,
)

__all__: list[str] = [
    "Boto3WorkspacesProvider",
    "CredentialStatus",
    "detect_credentials",
    "read_termination_records",
    "write_bundles_csv",
    "write_workspaces_csv",
]
