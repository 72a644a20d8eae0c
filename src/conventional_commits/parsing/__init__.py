"""
Header parsing for Conventional Commits.

See :mod:`conventional_commits.parsing.header_parser` for the grammar
and the error kinds a header can be rejected with.
"""

from .header_parser import (  # noqa: F401
    HeaderError,
    HeaderParser,
    MalformedHeader,
    MalformedScope,
    MissingDescription,
    MissingType,
    is_valid_header,
    parse_header,
)
