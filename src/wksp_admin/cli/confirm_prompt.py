"""Typed confirmation prompt guarding bulk termination.

The operator must type the confirmation literal exactly; the prompt
returns whatever was typed and leaves the comparison to
:class:`~wksp_admin.core.termination.TerminationPlan`.
"""

from __future__ import annotations

from typing import Any

from wksp_admin.cli.console import console
from wksp_admin.config import CONFIRMATION_LITERAL
from wksp_admin.exceptions import EnvironmentError


def _import_questionary() -> Any:
    """Import questionary lazily for interactive input."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


def prompt_delete_confirmation(count: int) -> str | None:
    """Warn about *count* permanent terminations and read the answer.

    Returns
    -------
    str | None
        The text typed by the operator, or ``None`` when the prompt was
        cancelled (Ctrl+C / Esc).
    """
    questionary = _import_questionary()

    console.print(
        f"[bold red]This action is PERMANENT![/bold red] "
        f"{count} workspace(s) will be terminated."
    )
    answer: str | None = questionary.text(
        f"Type {CONFIRMATION_LITERAL} (in all capital letters) to confirm:",
    ).ask()
    return answer
