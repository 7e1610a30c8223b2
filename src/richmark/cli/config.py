#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/richmark/cli/config.py
"""Configuration file discovery and loading for the richmark CLI.

Configuration is read from the first of these found while walking up from
the working directory:

1. ``.richmark.toml``
2. ``.richmark.yaml`` / ``.richmark.yml``
3. ``.richmark.json``
4. ``pyproject.toml`` with a ``[tool.richmark]`` table

A configuration holds up to two tables, ``parser`` and ``console``, whose
keys are the fields of ``MarkdownParserOptions`` and
``ConsoleRendererOptions``::

    [parser]
    parse_footnotes = false

    [console]
    code_theme = "github-dark"
    show_link_urls = true

"""

from __future__ import annotations

import json
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]

import yaml

from richmark.constants import CONFIG_FILENAMES, PYPROJECT_TOOL_SECTION
from richmark.exceptions import ConfigError
from richmark.options.console import ConsoleRendererOptions
from richmark.options.markdown import MarkdownParserOptions

_SECTIONS = ("parser", "console")


@dataclass(frozen=True)
class RichmarkConfig:
    """Options resolved from a configuration file."""

    parser: MarkdownParserOptions = field(default_factory=MarkdownParserOptions)
    console: ConsoleRendererOptions = field(default_factory=ConsoleRendererOptions)
    source: Optional[Path] = None


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the ``[tool.richmark]`` table of a pyproject.toml file.

    Returns an empty dict when the table is absent.

    Raises
    ------
    ConfigError
        If the file cannot be parsed or the table is not a table

    """
    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"Error reading {pyproject_path}: {e}", str(pyproject_path), e) from e

    config = data.get("tool", {}).get(PYPROJECT_TOOL_SECTION, {})
    if not isinstance(config, dict):
        raise ConfigError(
            f"[tool.{PYPROJECT_TOOL_SECTION}] in {pyproject_path} must be a table, got {type(config).__name__}",
            str(pyproject_path),
        )
    return config


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find the nearest configuration file, walking up from ``start_dir``.

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory, defaults to the current working directory

    Returns
    -------
    Path or None
        First configuration file found, or None

    """
    current = (start_dir or Path.cwd()).resolve()

    while True:
        for filename in CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        pyproject_path = current / "pyproject.toml"
        if pyproject_path.is_file():
            try:
                if _load_pyproject_section(pyproject_path):
                    return pyproject_path
            except ConfigError:
                # An unrelated broken pyproject.toml should not stop the search
                pass

        if current.parent == current:
            return None
        current = current.parent


def load_config_file(config_path: Path) -> Dict[str, Any]:
    """Load a configuration file into a dictionary.

    Raises
    ------
    ConfigError
        If the file is missing, has an unsupported extension, or does not
        parse to a table

    """
    if not config_path.is_file():
        raise ConfigError(f"Configuration file not found: {config_path}", str(config_path))

    if config_path.name == "pyproject.toml":
        return _load_pyproject_section(config_path)

    suffix = config_path.suffix.lower()
    try:
        if suffix == ".toml":
            with open(config_path, "rb") as f:
                data = tomllib.load(f)
        elif suffix in (".yaml", ".yml"):
            with open(config_path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        elif suffix == ".json":
            with open(config_path, encoding="utf-8") as f:
                data = json.load(f)
        else:
            raise ConfigError(f"Unsupported configuration format: {config_path.suffix}", str(config_path))
    except (OSError, tomllib.TOMLDecodeError, yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigError(f"Error reading {config_path}: {e}", str(config_path), e) from e

    if not isinstance(data, dict):
        raise ConfigError(f"{config_path} must contain a table at the top level", str(config_path))
    return data


def build_config(data: Dict[str, Any], source: Optional[Path] = None) -> RichmarkConfig:
    """Turn a configuration dictionary into option objects.

    Raises
    ------
    ConfigError
        On unknown sections, unknown keys or invalid values

    """
    location = str(source) if source else None
    unknown = sorted(set(data) - set(_SECTIONS))
    if unknown:
        raise ConfigError(f"Unknown configuration section(s): {', '.join(unknown)}", location)
    for name, section in data.items():
        # An empty YAML section loads as None
        if section is not None and not isinstance(section, dict):
            kind = type(section).__name__
            raise ConfigError(f"Configuration section [{name}] must be a table, not {kind}", location)

    try:
        parser = MarkdownParserOptions.from_mapping(data.get("parser") or {})
        console = ConsoleRendererOptions.from_mapping(data.get("console") or {})
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid configuration: {e}", location, e) from e

    return RichmarkConfig(parser=parser, console=console, source=source)


def resolve_config(config_path: Optional[Path] = None, discover: bool = True) -> RichmarkConfig:
    """Load an explicit configuration file, or discover one.

    Parameters
    ----------
    config_path : Path, optional
        Explicit file to load
    discover : bool, default True
        Search parent directories when no explicit file is given

    Returns
    -------
    RichmarkConfig
        Resolved options; defaults when no file applies

    """
    if config_path is None and discover:
        config_path = find_config_in_parents()
    if config_path is None:
        return RichmarkConfig()
    return build_config(load_config_file(config_path), config_path)
