"""Regression tests for the optional Rich dependency.

These tests verify bootstrap commands and status reports keep working
as plain text when Rich is missing.
"""

from __future__ import annotations

import sys

import pytest

from conftest import FakeBackend, make_batch, make_l1_status
from prover_cli.cli import app as app_module
from prover_cli.cli import exit_codes
from prover_cli.cli.app import main
from prover_cli.cli.console import get_rich_console, rich_available
from prover_cli.core.models import StageStatus
from prover_cli.exceptions import EnvironmentError


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("rich", "rich.console", "rich.table", "rich.logging"):
        monkeypatch.setitem(sys.modules, name, None)


def test_help_works_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--help"])
    assert exc_info.value.code == 0


def test_rich_console_raises_environment_error(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    assert rich_available() is False
    with pytest.raises(EnvironmentError, match="rich is not installed"):
        get_rich_console()


def test_batch_table_falls_back_to_plain_text(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)
    backend = FakeBackend({6: make_batch(6, StageStatus.SUCCESSFUL, StageStatus.FAILED)})
    monkeypatch.setattr(app_module, "load_backend", lambda reference: backend)

    assert main(["status", "batch", "-n", "6", "--verbose"]) == exit_codes.SUCCESS

    out = capsys.readouterr().out
    assert "Batch 6: Failed" in out
    assert "Basic Witness Generator  Successful" in out
    assert "[" not in out


def test_l1_summary_falls_back_to_plain_text(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)
    backend = FakeBackend(l1_status=make_l1_status())
    monkeypatch.setattr(app_module, "load_backend", lambda reference: backend)

    assert main(["status", "l1"]) == exit_codes.SUCCESS

    out = capsys.readouterr().out
    assert "Node is in sync with L1." in out
    assert "[bold" not in out
