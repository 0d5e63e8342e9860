"""CLI application entry point and command routing for wksp-admin.

This module is the **sole error boundary** for the entire application.
It catches :class:`~wksp_admin.exceptions.WkspAdminError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages via Rich and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the core
  services and the infrastructure layer.
* Options are parsed once into an :class:`~wksp_admin.config.AdminConfig`
  that is passed explicitly to every handler.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from wksp_admin.cli import exit_codes
from wksp_admin.cli.console import console, escape
from wksp_admin.config import DEFAULT_REGION, AdminConfig
from wksp_admin.core.models import Bundle
from wksp_admin.core.protocols import WorkspacesProvider
from wksp_admin.exceptions import UsageError, WkspAdminError
from wksp_admin.logging_setup import setup_logging
from wksp_admin.version import __version__

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    The single-dash long spellings (``-list-bundles``, ``-profile`` …)
    are kept as aliases for scripts written against earlier releases.
    """
    parser = argparse.ArgumentParser(
        prog="aws-wksp",
        description="List WorkSpaces bundles and workspaces, export them "
        "to CSV, and bulk-terminate workspaces listed in a CSV file.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--profile",
        "-profile",
        default="",
        help="the AWS credentials profile to use (default: boto3 default chain)",
    )
    parser.add_argument(
        "--region",
        "-region",
        default=DEFAULT_REGION,
        help=f"the AWS region to use (default: {DEFAULT_REGION})",
    )
    parser.add_argument(
        "--file",
        "-file",
        default="",
        help="CSV file to write a listing to, or to read workspaces to delete from",
    )
    parser.add_argument(
        "--list-bundles",
        "-list-bundles",
        action="store_true",
        help="list workspace bundles",
    )
    parser.add_argument(
        "--list-workspaces",
        "-list-workspaces",
        action="store_true",
        help="list workspaces",
    )
    parser.add_argument(
        "--delete-workspaces",
        "-delete-workspaces",
        action="store_true",
        help="terminate the workspaces listed in --file",
    )
    parser.add_argument(
        "--doctor",
        action="store_true",
        help="check versions, credentials and region, then exit",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="log API calls and file operations to stderr",
    )
    return parser


# ---------------------------------------------------------------------------
# Provider construction
# ---------------------------------------------------------------------------

def _build_provider(config: AdminConfig) -> WorkspacesProvider:
    from wksp_admin.infra.boto_provider import Boto3WorkspacesProvider

    return Boto3WorkspacesProvider.from_profile(config.profile, config.region)


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_list_bundles(
    config: AdminConfig,
    provider: WorkspacesProvider,
) -> list[Bundle]:
    """Fetch all bundles and print them or export them to ``--file``."""
    from wksp_admin.cli.tables import render_bundles
    from wksp_admin.core.bundle_service import BundleService
    from wksp_admin.infra.csv_store import write_bundles_csv

    bundles = BundleService(provider).list_all_bundles()
    if config.file is not None:
        count = write_bundles_csv(config.file, bundles)
        console.print(
            f"[green]Wrote {count} bundle(s) to[/green] {escape(str(config.file))}"
        )
    else:
        render_bundles(bundles)
    return bundles


def _handle_list_workspaces(
    config: AdminConfig,
    provider: WorkspacesProvider,
    bundles: list[Bundle] | None,
) -> None:
    """Fetch all workspaces, decorate with bundle names, print or export."""
    from wksp_admin.cli.tables import render_workspaces
    from wksp_admin.core.bundle_service import BundleService
    from wksp_admin.core.workspace_service import WorkspaceService
    from wksp_admin.infra.csv_store import write_workspaces_csv

    bundle_service = BundleService(provider)
    if bundles is None:
        bundles = bundle_service.list_all_bundles()
    index = bundle_service.build_bundle_index(bundles)

    workspaces = WorkspaceService(provider).list_workspaces()
    if config.file is not None:
        count = write_workspaces_csv(config.file, workspaces, index)
        console.print(
            f"[green]Wrote {count} workspace(s) to[/green] {escape(str(config.file))}"
        )
    else:
        render_workspaces(workspaces, index)


def _handle_delete_workspaces(
    path: Path,
    provider: WorkspacesProvider,
) -> int:
    """Preview, confirm and terminate the workspaces listed in *path*.

    Flow:
    1. Read the workspace CSV (header skipped).
    2. Print every queued row.
    3. Require the operator to type the confirmation literal.
    4. Issue one terminate request and report refused ids.
    """
    from wksp_admin.cli.confirm_prompt import prompt_delete_confirmation
    from wksp_admin.cli.tables import (
        render_termination_preview,
        render_termination_result,
    )
    from wksp_admin.core.termination import TerminationPlan
    from wksp_admin.infra.csv_store import read_termination_records

    plan = TerminationPlan(read_termination_records(path))
    if not plan:
        console.print(
            f"[yellow]No workspaces listed in[/yellow] {escape(str(path))}"
        )
        return exit_codes.SUCCESS

    render_termination_preview(plan.records)
    answer = prompt_delete_confirmation(len(plan))
    if not plan.confirm(answer):
        console.print("[yellow]Workspaces NOT deleted[/yellow]")
        return exit_codes.SUCCESS

    result = plan.execute(provider)
    render_termination_result(result)
    return exit_codes.SUCCESS


def _handle_doctor(config: AdminConfig) -> int:
    """Dispatch the ``--doctor`` diagnostics command."""
    from wksp_admin.cli.doctor import run_doctor

    return run_doctor(config)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the wksp-admin CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.

    Raises
    ------
    UsageError
        If both listings are requested together with ``--file``.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    config = AdminConfig.from_namespace(args)
    setup_logging(config.verbose)

    if not config.has_operation:
        parser.print_help()
        return exit_codes.SUCCESS

    if config.list_bundles and config.list_workspaces and config.has_file:
        raise UsageError(
            "Specify one of --list-bundles or --list-workspaces with the --file option.",
            hint=parser.format_usage().strip(),
        )

    if config.doctor:
        return _handle_doctor(config)

    provider = _build_provider(config)
    code = exit_codes.SUCCESS

    bundles: list[Bundle] | None = None
    if config.list_bundles:
        bundles = _handle_list_bundles(config, provider)

    if config.list_workspaces:
        _handle_list_workspaces(config, provider, bundles)

    if config.delete_workspaces:
        if config.file is not None:
            code = _handle_delete_workspaces(config.file, provider)
        else:
            logger.warning("--delete-workspaces needs --file; nothing deleted")

    return code


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    Every failure aborts the run: the message is printed once and the
    process exits non-zero.  Nothing is retried.
    """
    try:
        code = main()
        sys.exit(code)
    except UsageError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        if exc.hint:
            console.print(escape(exc.hint))
        sys.exit(exit_codes.USAGE_ERROR)
    except WkspAdminError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
