"""
Configuration loader for convcommit.

Settings are read from a JSON file. A project file named
``.convcommit.json`` in the repository root takes precedence over the
user file ``~/.convcommit/config.json``. When neither exists the
defaults are used. Only presentation is configurable; parsing behaviour
is fixed.

If a configuration file is unreadable, not valid JSON, or holds values
of the wrong type, a :class:`ConfigError` is raised.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional


logger = logging.getLogger(__name__)
# Null handler only; messages propagate once the CLI configures logging.
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


PROJECT_CONFIG_NAME = ".convcommit.json"
USER_CONFIG_NAME = "config.json"
OUTPUT_FORMATS = ("text", "json")

DEFAULT_CONFIG: Dict[str, Any] = {
    "output_format": "text",
    "json_indent": 2,
    "color": True,
}


class ConfigError(Exception):
    """Raised when a configuration file is unreadable or invalid."""

    pass


def _get_config_directory() -> Path:
    """Return the user configuration directory, ``~/.convcommit/``."""
    return Path.home() / ".convcommit"


def _find_config_file(repo_root: Optional[Path]) -> Optional[Path]:
    if repo_root is not None:
        project_path = repo_root / PROJECT_CONFIG_NAME
        if project_path.is_file():
            return project_path
    user_path = _get_config_directory() / USER_CONFIG_NAME
    if user_path.is_file():
        return user_path
    return None


def _validate(data: Dict[str, Any], source: Path) -> None:
    if "output_format" in data and data["output_format"] not in OUTPUT_FORMATS:
        raise ConfigError(
            f"'output_format' in {source.name} must be one of: {', '.join(OUTPUT_FORMATS)}"
        )
    if "json_indent" in data:
        indent = data["json_indent"]
        # bool is an int subclass
        if indent is not None and (isinstance(indent, bool) or not isinstance(indent, int) or indent < 0):
            raise ConfigError(f"'json_indent' in {source.name} must be a non-negative integer or null")
    if "color" in data and not isinstance(data["color"], bool):
        raise ConfigError(f"'color' in {source.name} must be a boolean")


def load_config(repo_root: Optional[Path] = None) -> Dict[str, Any]:
    """Load the convcommit configuration and return it merged with defaults.

    Args:
        repo_root: Root of the repository whose ``.convcommit.json`` should
                   be consulted first. If None, only the user file is read.

    Returns:
        A dictionary with the keys:
        - output_format (str): ``"text"`` or ``"json"``
        - json_indent (int|None): Indentation used for JSON output
        - color (bool): Whether text output is styled

    Raises:
        ConfigError: If the configuration file is unreadable or invalid.
    """
    config = dict(DEFAULT_CONFIG)
    config_path = _find_config_file(repo_root)
    if config_path is None:
        logger.debug("No configuration file found, using defaults")
        return config

    try:
        content = config_path.read_text(encoding="utf-8")
        data = json.loads(content)
    except (OSError, json.JSONDecodeError) as exc:
        logger.error("Failed to read or parse configuration file: %s", exc)
        raise ConfigError(f"Invalid JSON in {config_path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"{config_path} must contain a JSON object")

    _validate(data, config_path)

    unknown = sorted(set(data) - set(DEFAULT_CONFIG))
    if unknown:
        logger.debug("Ignoring unknown configuration keys: %s", unknown)

    config.update({key: value for key, value in data.items() if key in DEFAULT_CONFIG})
    logger.debug("Loaded configuration from: %s", config_path)
    return config
