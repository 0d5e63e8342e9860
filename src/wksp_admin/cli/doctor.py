"""``aws-wksp --doctor`` — environment diagnostics command.

Gathers versions and credential information and renders a Rich table
summarising whether the runtime environment can reach WorkSpaces.
No API request is made.
"""

from __future__ import annotations

import platform
import sys

from wksp_admin.cli import exit_codes
from wksp_admin.cli.console import console, escape
from wksp_admin.cli.tables import load_rich_table
from wksp_admin.config import AdminConfig
from wksp_admin.infra.credentials import detect_credentials
from wksp_admin.version import __version__

_OK = "[green]OK[/green]"
_FAIL = "[red]FAIL[/red]"


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _python_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    ok = sys.version_info[:2] >= (3, 10)
    status = _OK if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", version, status


def _boto3_version_check() -> tuple[str, str, str]:
    import boto3
    import botocore

    return "boto3", f"{boto3.__version__} (botocore {botocore.__version__})", _OK


def _credentials_check(config: AdminConfig) -> tuple[str, str, str]:
    """Return (label, value, status) for the credentials row."""
    status = detect_credentials(config.profile, config.region)
    value = f"{status.profile}: {status.source}"
    return "Credentials", value, _OK if status.found else _FAIL


def _region_check(config: AdminConfig) -> tuple[str, str, str]:
    return "Region", config.region, _OK


def _version_check() -> tuple[str, str, str]:
    return "wksp-admin", __version__, _OK


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor(config: AdminConfig) -> int:
    """Execute all diagnostic checks and render a Rich summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when all checks pass,
        :data:`exit_codes.GENERAL_ERROR` if any check fails.
    """
    checks = [
        _version_check(),
        _python_version_check(),
        _boto3_version_check(),
        _credentials_check(config),
        _region_check(config),
    ]
    has_failure = any("FAIL" in status for _, _, status in checks)

    table_class, _ = load_rich_table()
    table = table_class(
        title="wksp-admin doctor",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Component", style="bold", min_width=12)
    table.add_column("Value", min_width=20)
    table.add_column("Status", justify="center", min_width=8)
    for label, value, status in checks:
        table.add_row(label, escape(value), status)

    console.print()
    console.print(table)
    console.print()

    if has_failure:
        console.print("[bold red]Some checks failed.[/bold red]")
        return exit_codes.GENERAL_ERROR
    console.print("[bold green]All checks passed.[/bold green]")
    return exit_codes.SUCCESS
