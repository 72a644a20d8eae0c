"""
Parsing of Conventional Commit header lines.

The grammar handled here is::

    type [ "(" scope ")" ] [ "!" ] ":" " " description

The line is scanned once, left to right: the type token, then an
optional parenthesised scope, then an optional breaking marker, then
the separator, and whatever follows is the description. A line either
yields a complete :class:`~conventional_commits.model.header.Header` or
raises one of the :class:`HeaderError` subclasses below; no partial
result is ever returned.
"""

from __future__ import annotations

import logging
from typing import Optional

from conventional_commits.model.commit_type import TYPE_TERMINATORS, TypeRegistry
from conventional_commits.model.header import Header, is_single_line


logger = logging.getLogger(__name__)
# Attach a null handler so that importing the library never emits
# "No handler" warnings. Applications that configure logging will still
# see these messages once they attach their own handlers.
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
    logger.propagate = False


class HeaderError(ValueError):
    """Base class for all header parsing failures."""

    def __init__(self, line: str, reason: str) -> None:
        super().__init__(f"{reason}: {line!r}")
        self.line = line
        self.reason = reason


class MalformedHeader(HeaderError):
    """Raised when the ``: `` separator is missing or misplaced."""


class MissingType(HeaderError):
    """Raised when the header has no type token."""


class MissingDescription(HeaderError):
    """Raised when nothing but whitespace follows the separator."""


class MalformedScope(HeaderError):
    """Raised when the scope parenthesis is unclosed or empty."""


def _strip_line_terminator(line: str) -> str:
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith("\n"):
        return line[:-1]
    return line


class HeaderParser:
    """Parse commit header lines into :class:`Header` values.

    Parameters
    ----------
    registry : TypeRegistry, optional
        Table used to attach a category to the parsed type token. The
        default table is used when omitted. Tokens missing from the
        table are accepted and categorised as ``other``.

    Notes
    -----
    A parser holds no mutable state, so one instance can be shared
    between threads.
    """

    def __init__(self, registry: Optional[TypeRegistry] = None) -> None:
        self.registry = registry if registry is not None else TypeRegistry.default()

    def parse(self, line: str) -> Header:
        """Parse ``line`` into a :class:`Header`.

        Raises
        ------
        MalformedHeader
            If the separator is missing or something unexpected sits
            between the type/scope/marker and the separator.
        MissingType
            If the type token is empty.
        MissingDescription
            If the description is empty after trimming.
        MalformedScope
            If the scope parenthesis is never closed or is empty.
        """
        try:
            return self._parse(line)
        except HeaderError as exc:
            logger.debug("Rejected commit header: %s", exc)
            raise

    def try_parse(self, line: str) -> Optional[Header]:
        """Like :meth:`parse` but return ``None`` instead of raising."""
        try:
            return self.parse(line)
        except HeaderError:
            return None

    def _parse(self, raw: str) -> Header:
        line = _strip_line_terminator(raw)
        if line and not is_single_line(line):
            raise MalformedHeader(raw, "header must be a single line")

        end = len(line)
        pos = 0
        while pos < end and line[pos] not in TYPE_TERMINATORS and not line[pos].isspace():
            pos += 1
        type_token = line[:pos]

        scope: Optional[str] = None
        if pos < end and line[pos] == "(":
            close = line.find(")", pos + 1)
            if close == -1:
                raise MalformedScope(raw, "scope parenthesis is not closed")
            scope = line[pos + 1:close]
            if not scope:
                raise MalformedScope(raw, "scope is empty")
            pos = close + 1

        breaking = False
        if pos < end and line[pos] == "!":
            breaking = True
            pos += 1

        if pos >= end or line[pos] != ":":
            raise MalformedHeader(raw, "missing ': ' separator after type")
        rest = line[pos + 1:]

        if not type_token:
            raise MissingType(raw, "commit type is empty")
        if not rest.strip():
            raise MissingDescription(raw, "description is empty")
        if not rest.startswith(" "):
            raise MalformedHeader(raw, "separator must be a colon followed by a space")

        return Header(
            type=self.registry.resolve(type_token),
            description=rest.strip(),
            scope=scope,
            breaking=breaking,
        )


_DEFAULT_PARSER = HeaderParser()


def parse_header(line: str) -> Header:
    """Parse ``line`` with the default type table.

    >>> str(parse_header("fix(parser)!: handle empty input"))
    'fix(parser)!: handle empty input'
    """
    return _DEFAULT_PARSER.parse(line)


def is_valid_header(line: str) -> bool:
    return _DEFAULT_PARSER.try_parse(line) is not None
