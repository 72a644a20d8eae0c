"""
Data model for a Conventional Commit header.

The :class:`Header` is the structured form of the first line of a
commit message: ``type[(scope)][!]: description``. Instances are
immutable and compare by value.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from conventional_commits.model.commit_type import CommitType, TypeRegistry


def is_single_line(text: str) -> bool:
    """True if ``text`` holds no line boundary, as :meth:`str.splitlines` sees them."""
    return text.splitlines() == [text]


@dataclass(frozen=True)
class Header:
    """Representation of a parsed commit header.

    Attributes
    ----------
    type : CommitType
        The commit type (feat, fix, docs, etc.).
    description : str
        Short, single-line summary of the change.
    scope : Optional[str]
        Optional label qualifying the type, kept verbatim.
    breaking : bool
        ``True`` when the header carries the ``!`` marker.
    """

    type: CommitType
    description: str
    scope: Optional[str] = None
    breaking: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.type, CommitType):
            raise ValueError(f"type must be a CommitType, got {self.type!r}")
        if not isinstance(self.description, str) or not self.description.strip():
            raise ValueError("description must be a non-empty string")
        if not is_single_line(self.description):
            raise ValueError("description must be a single line")
        if self.description != self.description.strip():
            raise ValueError("description must not have leading or trailing whitespace")
        if self.scope is not None:
            if not isinstance(self.scope, str) or not self.scope:
                raise ValueError("scope must be a non-empty string when present")
            if ")" in self.scope or not is_single_line(self.scope):
                raise ValueError(f"scope {self.scope!r} must not contain ')' or a newline")
        if not isinstance(self.breaking, bool):
            raise ValueError(f"breaking must be a bool, got {self.breaking!r}")

    def __str__(self) -> str:
        scope = f"({self.scope})" if self.scope is not None else ""
        marker = "!" if self.breaking else ""
        return f"{self.type.token}{scope}{marker}: {self.description}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type.token,
            "category": self.type.category.value,
            "scope": self.scope,
            "breaking": self.breaking,
            "description": self.description,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any], registry: Optional[TypeRegistry] = None) -> "Header":
        """Build a header from the output of :meth:`to_dict`.

        The category is re-derived from ``registry`` (the default table
        when omitted) rather than trusted from ``data``.
        """
        if registry is None:
            registry = TypeRegistry.default()
        return cls(
            type=registry.resolve(data["type"]),
            description=data["description"],
            scope=data.get("scope"),
            breaking=data.get("breaking", False),
        )
