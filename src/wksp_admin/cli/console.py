"""CLI console helpers built on Rich.

Two consoles are used: messages, prompts and diagnostics go to stderr,
listings go to stdout so they can be piped.  Rich is imported lazily so
``--help`` and ``--version`` never depend on it.
"""

from __future__ import annotations

import sys
from typing import Any

from wksp_admin.exceptions import EnvironmentError

_PIPED_WIDTH = 4096


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console() -> Any:
	"""Create a Rich console instance targeting stderr."""
	console_class = _load_rich_console_class()
	return console_class(stderr=True)


def get_output_console() -> Any:
	"""Create a Rich console instance targeting stdout.

	When stdout is not a terminal the 80-column default is lifted so
	piped listings keep one row per line.
	"""
	console_class = _load_rich_console_class()
	if sys.stdout.isatty():
		return console_class()
	return console_class(width=_PIPED_WIDTH)


def escape(text: str) -> str:
	"""Escape Rich markup in *text* (API messages, file paths)."""
	try:
		from rich.markup import escape as rich_escape
	except ModuleNotFoundError:
		return text
	return rich_escape(text)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain stderr print."""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			print(*objects, file=sys.stderr)
			return
		rich_console.print(*objects)


console = _ConsoleProxy()
