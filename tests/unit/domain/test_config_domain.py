from __future__ import annotations

"""
Unit tests for listing configuration validation.
"""

import dataclasses

import pytest

from filelister.core.analysis.tree_renderer import _RENDERERS
from filelister.domain.config import OUTPUT_FORMATS, ListingConfig, validate_config
from filelister.domain.errors import InvalidArgumentError


def test_defaults():
    cfg = validate_config("/tmp")

    assert cfg == ListingConfig(path="/tmp", recursive=False, output="text")


@pytest.mark.parametrize("fmt", ["text", "json", "yaml"])
def test_accepts_known_formats(fmt):
    assert validate_config("/tmp", recursive=True, output=fmt).output == fmt


@pytest.mark.parametrize("path", [None, ""])
def test_missing_path_exit_code_1(path):
    with pytest.raises(InvalidArgumentError) as exc_info:
        validate_config(path, output="json")

    assert exc_info.value.exit_code == 1


@pytest.mark.parametrize("fmt", ["xml", "JSON", " text", ""])
def test_unknown_format_exit_code_2(fmt):
    with pytest.raises(InvalidArgumentError) as exc_info:
        validate_config("/tmp", output=fmt)

    assert exc_info.value.exit_code == 2
    assert "Invalid output format" in str(exc_info.value)


def test_missing_path_reported_before_bad_format():
    with pytest.raises(InvalidArgumentError) as exc_info:
        validate_config(None, output="xml")

    assert exc_info.value.exit_code == 1


def test_config_is_immutable():
    cfg = validate_config("/tmp")
    with pytest.raises(dataclasses.FrozenInstanceError):
        cfg.path = "/other"  # type: ignore[misc]


def test_every_format_has_a_renderer():
    assert set(OUTPUT_FORMATS) == set(_RENDERERS)
