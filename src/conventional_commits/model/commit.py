"""
Full commit message model: header, optional body and footers.

A commit message is made of a mandatory header, an optional body and
zero or more footers, e.g.::

    feat(some scope): a short and concise description

    This is a longer body message. It can be wrapped around
    and be put onto multiple lines.

    Fixes #123
    Signed-off-by: Jane Doe

This module only holds the data. Bodies and footers are assembled by
the caller; nothing here parses or formats complete messages.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, Optional, Tuple

from conventional_commits.model.commit_type import CommitType, TypeRegistry
from conventional_commits.model.header import Header


SEPARATOR_COLON = ": "
# Mostly used when the value is an issue or PR number.
SEPARATOR_HASHTAG = " #"

BREAKING_CHANGE_TOKENS = frozenset({"BREAKING CHANGE", "BREAKING-CHANGE"})


class FooterSeparator(Enum):
    """Separator between a footer's token and its value."""

    COLON_SPACE = SEPARATOR_COLON
    SPACE_HASHTAG = SEPARATOR_HASHTAG

    @classmethod
    def default(cls) -> "FooterSeparator":
        return cls.COLON_SPACE

    @classmethod
    def from_str(cls, text: str) -> "FooterSeparator":
        """Map the exact separator text back to its member."""
        for member in cls:
            if member.value == text:
                return member
        raise ValueError("footer separator not recognized")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Footer:
    """A single commit message trailer such as ``Refs #12``."""

    token: str
    value: str
    separator: FooterSeparator = FooterSeparator.COLON_SPACE

    @property
    def is_breaking_change(self) -> bool:
        return self.token in BREAKING_CHANGE_TOKENS

    def __str__(self) -> str:
        return f"{self.token}{self.separator}{self.value}"

    def to_dict(self) -> Dict[str, Any]:
        return {"token": self.token, "separator": self.separator.value, "value": self.value}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Footer":
        separator = data.get("separator")
        return cls(
            token=data["token"],
            value=data["value"],
            separator=FooterSeparator.from_str(separator) if separator is not None else FooterSeparator.default(),
        )


@dataclass(frozen=True)
class Commit:
    """A complete commit message.

    Attributes
    ----------
    header : Header
        The parsed first line.
    body : Optional[str]
        Free-form body text, if any.
    footers : Tuple[Footer, ...]
        Trailers in message order. Empty when there are none.
    """

    header: Header
    body: Optional[str] = None
    footers: Tuple[Footer, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # Accept any iterable of footers but store a tuple to stay hashable.
        if not isinstance(self.footers, tuple):
            object.__setattr__(self, "footers", tuple(self.footers))

    @classmethod
    def from_parts(
        cls,
        header: Header,
        body: Optional[str] = None,
        footers: Iterable[Footer] = (),
    ) -> "Commit":
        return cls(header=header, body=body, footers=tuple(footers))

    @property
    def type(self) -> CommitType:
        return self.header.type

    @property
    def scope(self) -> Optional[str]:
        return self.header.scope

    @property
    def description(self) -> str:
        return self.header.description

    @property
    def is_breaking_change(self) -> bool:
        """True if the header has ``!`` or a footer announces a breaking change."""
        return self.header.breaking or any(f.is_breaking_change for f in self.footers)

    def to_dict(self) -> Dict[str, Any]:
        data = self.header.to_dict()
        data["body"] = self.body
        data["footers"] = [footer.to_dict() for footer in self.footers]
        data["is_breaking_change"] = self.is_breaking_change
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any], registry: Optional[TypeRegistry] = None) -> "Commit":
        return cls(
            header=Header.from_dict(data, registry),
            body=data.get("body"),
            footers=tuple(Footer.from_dict(item) for item in data.get("footers", [])),
        )
