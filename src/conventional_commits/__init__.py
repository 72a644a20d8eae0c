"""
Top-level package for conventional_commits.

Structures for working with Conventional Commits v1.0.0 messages and a
parser for commit header lines::

    >>> from conventional_commits import parse_header
    >>> header = parse_header("feat(api)!: drop legacy endpoints")
    >>> header.type.token, header.scope, header.breaking
    ('feat', 'api', True)
"""

from conventional_commits.model import (
    SEPARATOR_COLON,
    SEPARATOR_HASHTAG,
    Category,
    Commit,
    CommitType,
    Footer,
    FooterSeparator,
    Header,
    TypeRegistry,
)
from conventional_commits.parsing import (
    HeaderError,
    HeaderParser,
    MalformedHeader,
    MalformedScope,
    MissingDescription,
    MissingType,
    is_valid_header,
    parse_header,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "SEPARATOR_COLON",
    "SEPARATOR_HASHTAG",
    "Category",
    "Commit",
    "CommitType",
    "Footer",
    "FooterSeparator",
    "Header",
    "HeaderError",
    "HeaderParser",
    "MalformedHeader",
    "MalformedScope",
    "MissingDescription",
    "MissingType",
    "TypeRegistry",
    "is_valid_header",
    "parse_header",
]
