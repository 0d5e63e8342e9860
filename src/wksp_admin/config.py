"""Run configuration for wksp-admin.

The CLI builds one :class:`AdminConfig` from the parsed arguments and
passes it explicitly to every operation.  Nothing reads option values
from module globals.
"""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path

DEFAULT_REGION: str = "us-east-1"
"""Region used when ``--region`` is not given."""

PLATFORM_OWNER: str = "AMAZON"
"""Owner filter selecting platform-provided bundles."""

CONFIRMATION_LITERAL: str = "DELETE"
"""Exact, case-sensitive text the operator must type to terminate."""


@dataclass(frozen=True, slots=True)
class AdminConfig:
    """Immutable options for a single invocation."""

    profile: str = ""
    """Credentials profile name.  Empty means boto3's default chain."""

    region: str = DEFAULT_REGION
    file: Path | None = None
    """CSV path to write listings to, or to read terminations from."""

    list_bundles: bool = False
    list_workspaces: bool = False
    delete_workspaces: bool = False
    doctor: bool = False
    verbose: bool = False

    @property
    def has_file(self) -> bool:
        return self.file is not None

    @property
    def has_operation(self) -> bool:
        return (
            self.list_bundles
            or self.list_workspaces
            or self.delete_workspaces
            or self.doctor
        )

    @classmethod
    def from_namespace(cls, args: argparse.Namespace) -> AdminConfig:
        """Build the config from an ``argparse`` namespace."""
        raw_file: str = args.file or ""
        return cls(
            profile=args.profile or "",
            region=args.region or DEFAULT_REGION,
            file=Path(raw_file) if raw_file else None,
            list_bundles=bool(args.list_bundles),
            list_workspaces=bool(args.list_workspaces),
            delete_workspaces=bool(args.delete_workspaces),
            doctor=bool(args.doctor),
            verbose=bool(args.verbose),
        )
