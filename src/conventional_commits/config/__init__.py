"""
Configuration loading for conventional_commits.

Provides a loader for an optional JSON file describing custom commit
types. See :mod:`conventional_commits.config.loader` for details.
"""

from .loader import ConfigError, load_config, load_type_registry  # noqa: F401
