"""Load check targets and options from a YAML file and CLI overrides."""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any

import yaml

from docs_standards.constants import DEFAULT_SIGIL
from docs_standards.exceptions import ConfigurationError

DEFAULT_CONFIG_NAME = "docs-standards.yml"


@dataclass(frozen=True)
class CheckConfig:
    """What to check and how.

    Attributes:
        functions: Dotted paths of functions to check.
        classes: Dotted paths of classes whose methods are checked.
        sigil: Prefix of parameter names in @param tags.
        skip_private: Skip single-underscore methods.
        ignore_methods: Method names never checked.
    """

    functions: list[str] = field(default_factory=list)
    classes: list[str] = field(default_factory=list)
    sigil: str = DEFAULT_SIGIL
    skip_private: bool = False
    ignore_methods: list[str] = field(default_factory=list)

    def merged(self, **overrides: Any) -> CheckConfig:
        """Return a copy with every non-None override applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


def load_config(path: Path) -> CheckConfig:
    """Load a CheckConfig from a YAML file.

    Args:
        path: YAML file with any of the CheckConfig keys at top level.

    Returns:
        Parsed configuration. An empty file yields the defaults.

    Raises:
        ConfigurationError: If the file is unreadable, not YAML, or holds
            unknown keys or values of the wrong type.
    """
    try:
        data = yaml.safe_load(path.read_text())
    except (OSError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Could not load {path}: {e}") from e

    if data is None:
        return CheckConfig()
    if not isinstance(data, dict):
        raise ConfigurationError(f"{path}: top level should be a mapping")

    known = {f.name for f in fields(CheckConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigurationError(f"{path}: unknown keys {', '.join(unknown)}")

    for key in ("functions", "classes", "ignore_methods"):
        value = data.get(key, [])
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            raise ConfigurationError(f"{path}: `{key}` should be a list of strings")
    if not isinstance(data.get("sigil", DEFAULT_SIGIL), str):
        raise ConfigurationError(f"{path}: `sigil` should be a string")
    if not isinstance(data.get("skip_private", False), bool):
        raise ConfigurationError(f"{path}: `skip_private` should be true or false")

    return CheckConfig(**data)


def find_config(root: Path) -> Path | None:
    """Return the default config file under `root`, if present."""
    candidate = root / DEFAULT_CONFIG_NAME
    return candidate if candidate.exists() else None
