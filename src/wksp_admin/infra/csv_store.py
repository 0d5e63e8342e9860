"""CSV export of listings and import of termination records.

Export formats
--------------
* Bundles: ``"bundle_id","bundle_name"``
* Workspaces: ``"workspace_id","state","user_name","bundle"``

Every field is quoted.  Files are written to a temporary sibling and
moved into place, so a failed export never leaves a partial file at
the requested path.  The final file gets the usual ``0o666 & ~umask``
mode rather than the private mode of the temporary file.  The
workspace export is also the input format for termination: the header
row is skipped and only the first column is sent to the API.
"""

from __future__ import annotations

import csv
import logging
import os
import tempfile
from collections.abc import Iterable, Sequence
from pathlib import Path

from wksp_admin.core.models import Bundle, BundleIndex, TerminationRecord, Workspace
from wksp_admin.core.workspace_service import WorkspaceService
from wksp_admin.exceptions import CsvFileError, CsvFormatError

logger = logging.getLogger(__name__)

BUNDLE_HEADER: tuple[str, ...] = ("bundle_id", "bundle_name")
WORKSPACE_HEADER: tuple[str, ...] = ("workspace_id", "state", "user_name", "bundle")


# ---------------------------------------------------------------------------
# Export
# ---------------------------------------------------------------------------

def write_bundles_csv(path: Path, bundles: Iterable[Bundle]) -> int:
    """Write *bundles* to *path* and return the number of data rows."""
    rows = [(bundle.bundle_id, bundle.name) for bundle in bundles]
    _write_atomic(path, BUNDLE_HEADER, rows)
    return len(rows)


def write_workspaces_csv(
    path: Path,
    workspaces: Iterable[Workspace],
    index: BundleIndex,
) -> int:
    """Write *workspaces* (decorated via *index*) to *path*."""
    rows = [
        (
            ws.workspace_id,
            ws.state,
            ws.user_name,
            WorkspaceService.bundle_name_for(ws, index),
        )
        for ws in workspaces
    ]
    _write_atomic(path, WORKSPACE_HEADER, rows)
    return len(rows)


def _write_atomic(
    path: Path,
    header: Sequence[str],
    rows: Sequence[Sequence[str]],
) -> None:
    directory = path.parent
    tmp_name: str | None = None
    try:
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            newline="",
            dir=directory,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as handle:
            tmp_name = handle.name
            writer = csv.writer(handle, quoting=csv.QUOTE_ALL, lineterminator="\n")
            writer.writerow(header)
            writer.writerows(rows)
            handle.flush()
            os.fsync(handle.fileno())
        os.chmod(tmp_name, _default_file_mode())
        os.replace(tmp_name, path)
    except OSError as exc:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise CsvFileError(f"Cannot write {path}: {exc}") from exc
    logger.info("Wrote %d row(s) to %s", len(rows), path)


def _default_file_mode() -> int:
    """Mode a plain ``open(path, "w")`` would create under the current umask."""
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


# ---------------------------------------------------------------------------
# Import
# ---------------------------------------------------------------------------

def read_termination_records(path: Path) -> list[TerminationRecord]:
    """Read a workspace CSV and return one record per data row.

    Raises
    ------
    CsvFileError
        If the file cannot be opened or read.
    CsvFormatError
        If the file has no header row, or a row has no workspace id.
    """
    try:
        with open(path, encoding="utf-8", newline="") as handle:
            rows = list(csv.reader(handle))
    except OSError as exc:
        raise CsvFileError(f"Cannot read {path}: {exc}") from exc
    except (csv.Error, UnicodeDecodeError) as exc:
        raise CsvFormatError(f"Malformed CSV in {path}: {exc}") from exc

    if not rows:
        raise CsvFormatError(
            f"{path} is empty.",
            hint="Expected a header row: " + ",".join(WORKSPACE_HEADER),
        )

    records: list[TerminationRecord] = []
    # Line 1 is the header.
    for line_number, row in enumerate(rows[1:], start=2):
        if not row:
            continue
        if not row[0].strip():
            raise CsvFormatError(
                f"{path}:{line_number}: missing workspace id.",
            )
        padded = list(row[:4]) + [""] * (4 - min(len(row), 4))
        records.append(
            TerminationRecord(
                workspace_id=padded[0].strip(),
                state=padded[1],
                user_name=padded[2],
                bundle=padded[3],
            )
        )
    logger.debug("Read %d termination record(s) from %s", len(records), path)
    return records
