"""
Data model for Conventional Commits.

See :mod:`conventional_commits.model.commit_type` for commit types and
the type registry, :mod:`conventional_commits.model.header` for the
header aggregate and :mod:`conventional_commits.model.commit` for
complete messages with footers.
"""

from .commit import (  # noqa: F401
    BREAKING_CHANGE_TOKENS,
    SEPARATOR_COLON,
    SEPARATOR_HASHTAG,
    Commit,
    Footer,
    FooterSeparator,
)
from .commit_type import DEFAULT_TYPES, Category, CommitType, TypeRegistry  # noqa: F401
from .header import Header  # noqa: F401
