from __future__ import annotations

"""
Unit tests for the Main Entry Point and Global Supervisor.
"""

import sys

import pytest

_HOOK = sys.excepthook
from filelister import main as supervisor  # noqa: E402
sys.excepthook = _HOOK

from filelister.interface.cli import app as cli_app  # noqa: E402


def test_unexpected_failure_exits_with_failure_status(monkeypatch, capsys):
    """Crashes never reuse status 1, which means a missing --path."""

    def _crash(argv=None):
        raise RuntimeError("boom")

    monkeypatch.setattr(cli_app, "main", _crash)

    with pytest.raises(SystemExit) as exc_info:
        supervisor.main()

    assert exc_info.value.code == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "CRITICAL ERROR: RuntimeError: boom" in captured.err
    assert "Traceback" not in captured.err


def test_cli_result_passed_through(monkeypatch):
    monkeypatch.setattr(cli_app, "main", lambda argv=None: 0)

    assert supervisor.main() == 0
