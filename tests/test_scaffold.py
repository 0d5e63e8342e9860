"""Smoke tests — verify package wiring.

These tests prove that:
* The CLI entry point is importable.
* The exception hierarchy is correctly structured.
* Version, exit codes, config defaults and logging setup are in place.
"""

from __future__ import annotations

import argparse
import logging
import re
from pathlib import Path

import pytest

from wksp_admin import __version__
from wksp_admin.cli import exit_codes
from wksp_admin.cli.app import main
from wksp_admin.config import AdminConfig, DEFAULT_REGION
from wksp_admin.exceptions import (
    CredentialsError,
    CsvFileError,
    CsvFormatError,
    EnvironmentError,
    ProviderError,
    TerminationStateError,
    UsageError,
    WkspAdminError,
)
from wksp_admin.logging_setup import LOGGER_NAME, setup_logging


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)

    def test_version_flag(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [
            UsageError,
            ProviderError,
            CredentialsError,
            CsvFileError,
            CsvFormatError,
            TerminationStateError,
            EnvironmentError,
        ],
    )
    def test_all_exceptions_inherit_from_base(
        self, exc_class: type[WkspAdminError]
    ) -> None:
        assert issubclass(exc_class, WkspAdminError)

    def test_hint_is_stored(self) -> None:
        err = WkspAdminError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        assert WkspAdminError("boom").hint is None


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_values(self) -> None:
        assert exit_codes.SUCCESS == 0
        assert exit_codes.GENERAL_ERROR == 1
        assert exit_codes.UNEXPECTED_ERROR == 2
        assert exit_codes.USAGE_ERROR == 64
        assert exit_codes.KEYBOARD_INTERRUPT == 130


# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------

class TestConfig:
    def _namespace(self, **overrides: object) -> argparse.Namespace:
        values: dict[str, object] = {
            "profile": "",
            "region": DEFAULT_REGION,
            "file": "",
            "list_bundles": False,
            "list_workspaces": False,
            "delete_workspaces": False,
            "doctor": False,
            "verbose": False,
        }
        values.update(overrides)
        return argparse.Namespace(**values)

    def test_defaults(self) -> None:
        config = AdminConfig.from_namespace(self._namespace())
        assert config == AdminConfig()
        assert config.file is None
        assert not config.has_file
        assert not config.has_operation

    def test_file_becomes_path(self) -> None:
        config = AdminConfig.from_namespace(self._namespace(file="out.csv", list_bundles=True))
        assert config.file == Path("out.csv")
        assert config.has_file
        assert config.has_operation

    def test_frozen(self) -> None:
        config = AdminConfig()
        with pytest.raises(AttributeError):
            config.region = "eu-west-1"  # type: ignore[misc]


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

class TestLogging:
    def test_default_level_is_warning(self) -> None:
        logger = setup_logging()
        assert logger.name == LOGGER_NAME
        assert logger.level == logging.WARNING

    def test_verbose_is_debug(self) -> None:
        assert setup_logging(verbose=True).level == logging.DEBUG

    def test_repeated_setup_keeps_one_handler(self) -> None:
        setup_logging()
        logger = setup_logging(verbose=True)
        assert len(logger.handlers) == 1

    def test_child_loggers_reach_handler(self, capsys: pytest.CaptureFixture[str]) -> None:
        setup_logging()
        logging.getLogger("wksp_admin.core.termination").warning("kept %s", "ws-1")
        assert "kept ws-1" in capsys.readouterr().err


# ---------------------------------------------------------------------------
# Packaging
# ---------------------------------------------------------------------------

class TestPackaging:
    def test_directly_imported_libraries_declared(self) -> None:
        tomllib = pytest.importorskip("tomllib")
        pyproject = Path(__file__).resolve().parents[1] / "pyproject.toml"
        with pyproject.open("rb") as handle:
            dependencies = tomllib.load(handle)["project"]["dependencies"]

        names = {re.split(r"[<>=!~\[ ]", dep, maxsplit=1)[0].lower() for dep in dependencies}
        assert {"boto3", "botocore", "rich", "questionary"} <= names
