"""
Configuration loader for custom commit types.

Teams that use commit types beyond the default set can describe them in
a JSON file named ``commit_types.json``, located by default in the
``~/.conventional_commits/`` directory in the user's home directory::

    {
        "types": {"hotfix": "fix", "wip": "chore"},
        "extend_defaults": true
    }

``types`` maps type tokens to category names. With ``extend_defaults``
(the default) the entries are merged on top of the built-in table;
otherwise they replace it.

The loader is only ever called explicitly. Parsing itself never touches
the filesystem. If the file is missing, malformed, or has invalid
entries, a :class:`ConfigError` is raised.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from conventional_commits.model.commit_type import TypeRegistry


logger = logging.getLogger(__name__)
# Attach a null handler to avoid "No handler" warnings in environments
# where logging has not been configured. Propagation is disabled until
# the application configures logging explicitly.
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
    logger.propagate = False


CONFIG_FILE_NAME = "commit_types.json"


class ConfigError(Exception):
    """Raised when the commit type configuration is missing or invalid."""

    pass


def _get_config_directory() -> Path:
    """Return the directory holding the user-level configuration.

    Returns:
        Path to the ``~/.conventional_commits/`` directory.
    """
    return Path.home() / ".conventional_commits"


def default_config_path() -> Path:
    return _get_config_directory() / CONFIG_FILE_NAME


def load_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """Read and validate the commit type configuration file.

    Args:
        config_path: Explicit location of the JSON file. Defaults to
                     ``~/.conventional_commits/commit_types.json``.

    Returns:
        A dictionary with keys:
        - types (dict): mapping of type token to category name
        - extend_defaults (bool): whether to merge with the default table

    Raises:
        ConfigError: If the file is missing, malformed, or invalid.
    """
    path = Path(config_path) if config_path is not None else default_config_path()

    if not path.exists():
        logger.error("Configuration file '%s' does not exist", path)
        raise ConfigError(f"Missing commit type configuration file: {path}")

    try:
        content = path.read_text(encoding="utf-8")
        data = json.loads(content)
    except (OSError, json.JSONDecodeError) as exc:
        logger.error("Failed to read or parse configuration file: %s", exc)
        raise ConfigError(f"Invalid JSON in {path.name}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError("Configuration root must be a JSON object")

    if "types" not in data:
        logger.error("Configuration file missing required key: types")
        raise ConfigError("Missing required configuration keys: types")

    types = data["types"]
    if not isinstance(types, dict):
        raise ConfigError("'types' must be an object mapping type tokens to categories")
    for token, category in types.items():
        if not isinstance(category, str):
            raise ConfigError(f"Category for type '{token}' must be a string")

    if "extend_defaults" in data and not isinstance(data["extend_defaults"], bool):
        raise ConfigError("'extend_defaults' must be a boolean")

    config = {
        "types": dict(types),
        "extend_defaults": data.get("extend_defaults", True),
    }
    logger.debug("Loaded commit type configuration from: %s", path)
    logger.debug("Configuration data: %s", config)
    return config


def load_type_registry(config_path: Optional[Path] = None) -> TypeRegistry:
    """Build a :class:`TypeRegistry` from the configuration file.

    Raises:
        ConfigError: If the file cannot be loaded or names an invalid
                     type token or unknown category.
    """
    config = load_config(config_path)
    try:
        if config["extend_defaults"]:
            registry = TypeRegistry.default().extended(config["types"])
        else:
            registry = TypeRegistry(config["types"])
    except ValueError as exc:
        logger.error("Invalid commit type configuration: %s", exc)
        raise ConfigError(f"Invalid commit type configuration: {exc}") from exc
    logger.debug("Commit type registry has %d entries", len(registry))
    return registry
