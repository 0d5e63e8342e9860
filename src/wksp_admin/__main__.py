"""Allow ``python -m wksp_admin`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m wksp_admin`` behaves identically to the ``aws-wksp``
console script.
"""

from __future__ import annotations

from wksp_admin.cli.app import cli

if __name__ == "__main__":
    cli()
