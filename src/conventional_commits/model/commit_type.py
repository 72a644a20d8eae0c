"""
Commit types and the lookup table that gives them meaning.

A commit type is the leading token of a Conventional Commit header
(``feat``, ``fix``, ...). The set of tokens a team uses is open, so the
mapping from token to semantic :class:`Category` lives in a
:class:`TypeRegistry` supplied by the caller. Unrecognized tokens are
still valid commit types; they simply map to :attr:`Category.OTHER`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterator, List, Mapping, Optional, Union


class Category(Enum):
    """Semantic category of a commit type."""

    FEATURE = "feature"
    FIX = "fix"
    DOCS = "docs"
    STYLE = "style"
    REFACTOR = "refactor"
    PERFORMANCE = "performance"
    TEST = "test"
    BUILD = "build"
    CI = "ci"
    CHORE = "chore"
    REVERT = "revert"
    OTHER = "other"


DEFAULT_TYPES: Dict[str, Category] = {
    "feat": Category.FEATURE,
    "fix": Category.FIX,
    "docs": Category.DOCS,
    "style": Category.STYLE,
    "refactor": Category.REFACTOR,
    "perf": Category.PERFORMANCE,
    "test": Category.TEST,
    "build": Category.BUILD,
    "ci": Category.CI,
    "chore": Category.CHORE,
    "revert": Category.REVERT,
}


# Characters that end the type token in a header line.
TYPE_TERMINATORS = frozenset("(!:")


def validate_token(token: str) -> None:
    """Raise :class:`ValueError` unless ``token`` is a usable type token.

    A token must be a non-empty string that is already lowercase and
    contains no whitespace and none of ``(``, ``!`` or ``:``.
    """
    if not isinstance(token, str) or not token:
        raise ValueError("commit type must be a non-empty string")
    if token != token.lower():
        raise ValueError(f"commit type {token!r} must be lowercase")
    if any(ch.isspace() for ch in token):
        raise ValueError(f"commit type {token!r} must not contain whitespace")
    reserved = sorted(TYPE_TERMINATORS.intersection(token))
    if reserved:
        raise ValueError(f"commit type {token!r} must not contain {''.join(reserved)!r}")


@dataclass(frozen=True)
class CommitType:
    """A commit type token together with its semantic category.

    Attributes
    ----------
    token : str
        The canonical (lowercase) type token, e.g. ``feat``.
    category : Category
        What kind of change the token denotes.
    """

    token: str
    category: Category = Category.OTHER

    def __post_init__(self) -> None:
        validate_token(self.token)
        if not isinstance(self.category, Category):
            raise ValueError(f"category must be a Category, got {self.category!r}")

    def __str__(self) -> str:
        return self.token


CategoryLike = Union[Category, str]


def _coerce_category(value: CategoryLike) -> Category:
    if isinstance(value, Category):
        return value
    try:
        return Category(value)
    except ValueError:
        valid = ", ".join(c.value for c in Category)
        raise ValueError(f"unknown category {value!r}; expected one of: {valid}") from None


class TypeRegistry:
    """Lookup table from type tokens to categories.

    Parameters
    ----------
    mapping : Mapping[str, Category | str], optional
        Token to category table. ``None`` selects :data:`DEFAULT_TYPES`.
        Keys follow the :class:`CommitType` token rules; values may be
        :class:`Category` members or their string values.
    """

    def __init__(self, mapping: Optional[Mapping[str, CategoryLike]] = None) -> None:
        source = DEFAULT_TYPES if mapping is None else mapping
        table: Dict[str, Category] = {}
        for token, category in source.items():
            validate_token(token)
            table[token] = _coerce_category(category)
        self._table = table

    @classmethod
    def default(cls) -> "TypeRegistry":
        return cls()

    def extended(self, mapping: Mapping[str, CategoryLike]) -> "TypeRegistry":
        """Return a new registry with ``mapping`` added on top of this one."""
        merged: Dict[str, CategoryLike] = dict(self._table)
        merged.update(mapping)
        return TypeRegistry(merged)

    def resolve(self, token: str) -> CommitType:
        """Return the :class:`CommitType` for ``token`` (case-insensitive)."""
        canonical = token.lower()
        return CommitType(canonical, self._table.get(canonical, Category.OTHER))

    def is_known(self, token: str) -> bool:
        return token.lower() in self._table

    def tokens(self) -> List[str]:
        return list(self._table)

    def category_of(self, token: str) -> Category:
        return self._table.get(token.lower(), Category.OTHER)

    def __contains__(self, token: object) -> bool:
        return isinstance(token, str) and self.is_known(token)

    def __iter__(self) -> Iterator[str]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TypeRegistry):
            return NotImplemented
        return self._table == other._table

    def __repr__(self) -> str:
        table = {token: category.value for token, category in self._table.items()}
        return f"TypeRegistry({table!r})"
