"""Tests for config module."""

from __future__ import annotations

from pathlib import Path

import pytest

from docs_standards.config import CheckConfig, find_config, load_config
from docs_standards.exceptions import ConfigurationError


def test_load_full_config(tmp_path: Path):
    path = tmp_path / "docs-standards.yml"
    path.write_text(
        """
functions:
  - pkg.mod.func
classes:
  - pkg.mod.Client
sigil: ""
skip_private: true
ignore_methods:
  - __init__
"""
    )

    config = load_config(path)

    assert config == CheckConfig(
        functions=["pkg.mod.func"],
        classes=["pkg.mod.Client"],
        sigil="",
        skip_private=True,
        ignore_methods=["__init__"],
    )


def test_empty_file_gives_defaults(tmp_path: Path):
    path = tmp_path / "empty.yml"
    path.write_text("")

    assert load_config(path) == CheckConfig()


@pytest.mark.parametrize(
    "content, message",
    [
        ("- a\n- b\n", "top level should be a mapping"),
        ("functions: pkg.func\n", "`functions` should be a list of strings"),
        ("classes: [1, 2]\n", "`classes` should be a list of strings"),
        ("sigil: 3\n", "`sigil` should be a string"),
        ("skip_private: maybe\n", "`skip_private` should be true or false"),
        ("modules: [a]\n", "unknown keys modules"),
        ("functions: [a\n", "Could not load"),
    ],
)
def test_invalid_config(tmp_path: Path, content: str, message: str):
    path = tmp_path / "bad.yml"
    path.write_text(content)

    with pytest.raises(ConfigurationError, match=message):
        load_config(path)


def test_missing_file(tmp_path: Path):
    with pytest.raises(ConfigurationError, match="Could not load"):
        load_config(tmp_path / "nope.yml")


def test_find_config(tmp_path: Path):
    assert find_config(tmp_path) is None
    (tmp_path / "docs-standards.yml").write_text("functions: []\n")
    assert find_config(tmp_path) == tmp_path / "docs-standards.yml"


def test_merged_ignores_none():
    config = CheckConfig(functions=["a.b"], sigil="$")

    merged = config.merged(functions=None, classes=["a.C"], sigil=None)

    assert merged.functions == ["a.b"]
    assert merged.classes == ["a.C"]
    assert merged.sigil == "$"
