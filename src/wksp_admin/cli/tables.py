"""Rich table rendering for listings and termination previews.

Listings are printed to stdout, one physical line per row; the
termination preview and results go to stderr alongside the confirmation
prompt.  All cell values are wrapped in :class:`rich.text.Text` so
identifiers and user names are never interpreted as markup.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from wksp_admin.cli.console import console, get_output_console
from wksp_admin.core.models import (
    Bundle,
    BundleIndex,
    TerminationRecord,
    TerminationResult,
    Workspace,
)
from wksp_admin.core.workspace_service import WorkspaceService
from wksp_admin.exceptions import EnvironmentError


def load_rich_table() -> tuple[type[Any], type[Any]]:
    """Import rich ``Table`` and ``Text`` lazily."""
    try:
        from rich.table import Table
        from rich.text import Text
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Table, Text


def _new_table(
    title: str | None,
    columns: Sequence[str],
    *,
    no_wrap: bool = False,
) -> Any:
    table_class, _ = load_rich_table()
    table = table_class(
        title=title,
        show_header=True,
        header_style="bold magenta",
        border_style="dim",
    )
    for column in columns:
        table.add_column(column, justify="left", no_wrap=no_wrap)
    return table


def _cells(*values: str) -> list[Any]:
    _, text_class = load_rich_table()
    return [text_class(value) for value in values]


# ---------------------------------------------------------------------------
# Listings (stdout)
# ---------------------------------------------------------------------------

def render_bundles(bundles: Sequence[Bundle]) -> None:
    """Print one row per bundle: id and display name."""
    table = _new_table(None, ("Bundle ID", "Name"), no_wrap=True)
    for bundle in bundles:
        table.add_row(*_cells(bundle.bundle_id, bundle.name))
    get_output_console().print(table)


def render_workspaces(workspaces: Sequence[Workspace], index: BundleIndex) -> None:
    """Print one row per workspace with its resolved bundle name."""
    table = _new_table(
        None,
        ("Workspace ID", "State", "User Name", "Bundle"),
        no_wrap=True,
    )
    for ws in workspaces:
        table.add_row(
            *_cells(
                ws.workspace_id,
                ws.state,
                ws.user_name,
                WorkspaceService.bundle_name_for(ws, index),
            ),
        )
    get_output_console().print(table)


# ---------------------------------------------------------------------------
# Termination (stderr)
# ---------------------------------------------------------------------------

def render_termination_preview(records: Sequence[TerminationRecord]) -> None:
    """Show every row queued for deletion before the prompt."""
    table = _new_table(
        "DELETING WORKSPACES",
        ("Workspace ID", "State", "User Name", "Bundle"),
    )
    for record in records:
        table.add_row(
            *_cells(record.workspace_id, record.state, record.user_name, record.bundle),
        )
    console.print()
    console.print(table)
    console.print()


def render_termination_result(result: TerminationResult) -> None:
    """Summarise the terminate response, listing refused workspaces."""
    console.print(
        f"[bold]Terminate requested for {len(result.requested)} workspace(s); "
        f"{len(result.succeeded)} accepted.[/bold]"
    )
    if not result.failures:
        return

    table = _new_table("Failed requests", ("Workspace ID", "Error Code", "Message"))
    for failure in result.failures:
        table.add_row(
            *_cells(failure.workspace_id, failure.error_code, failure.error_message),
        )
    console.print(table)
