"""TOML config loading for yall.toml."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path

CONFIG_NAME = "yall.toml"


@dataclass
class ParserConfig:
    debug: bool = False


@dataclass
class DiagnosticsConfig:
    color: bool = True


@dataclass
class YallConfig:
    parser: ParserConfig = field(default_factory=ParserConfig)
    diagnostics: DiagnosticsConfig = field(default_factory=DiagnosticsConfig)


def find_config(start_path: Path | None = None) -> Path:
    """Walk up directories to find yall.toml. Raises FileNotFoundError."""
    path = (start_path or Path.cwd()).resolve()
    if path.is_file():
        path = path.parent
    while True:
        candidate = path / CONFIG_NAME
        if candidate.exists():
            return candidate
        parent = path.parent
        if parent == path:
            raise FileNotFoundError(f"No {CONFIG_NAME} found in any parent directory")
        path = parent


def load_config(path: Path) -> YallConfig:
    """Parse a yall.toml file into a YallConfig."""
    with open(path, "rb") as f:
        data = tomllib.load(f)

    config = YallConfig()

    if "parser" in data:
        config.parser = ParserConfig(debug=data["parser"].get("debug", False))

    if "diagnostics" in data:
        config.diagnostics = DiagnosticsConfig(
            color=data["diagnostics"].get("color", True),
        )

    return config


def config_for(source_path: Path) -> YallConfig:
    """The config governing ``source_path``, or defaults when there is none."""
    try:
        return load_config(find_config(source_path))
    except FileNotFoundError:
        return YallConfig()
