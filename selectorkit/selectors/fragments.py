"""
Selector fragment types.

A compound selector is built from six kinds of fragments. Each kind has a
fixed syntactic rank and a fixed way of being written out:

    element#id.class[attr]:pseudo-class::pseudo-element
              \----/\----/\----------/
              Can be several occurrences
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class FragmentKind(str, Enum):
    """Kind of a compound selector fragment, declared in rank order."""

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"

    @property
    def rank(self) -> int:
        """Position of this kind in the compound selector syntax."""
        return _RANKS[self]

    @property
    def unique(self) -> bool:
        """Whether a selector may hold at most one fragment of this kind."""
        return self in _UNIQUE_KINDS

    def wrap(self, value: str) -> str:
        """Write ``value`` with this kind's prefix (or brackets)."""
        if self is FragmentKind.ATTRIBUTE:
            return f"[{value}]"
        return f"{_PREFIXES[self]}{value}"


_RANKS = {kind: rank for rank, kind in enumerate(FragmentKind)}

_PREFIXES = {
    FragmentKind.ELEMENT: "",
    FragmentKind.ID: "#",
    FragmentKind.CLASS: ".",
    FragmentKind.PSEUDO_CLASS: ":",
    FragmentKind.PSEUDO_ELEMENT: "::",
}

_UNIQUE_KINDS = frozenset(
    {FragmentKind.ELEMENT, FragmentKind.ID, FragmentKind.PSEUDO_ELEMENT}
)


@dataclass(frozen=True)
class SelectorFragment:
    """One typed piece of a compound selector."""

    kind: FragmentKind
    value: str

    @property
    def rank(self) -> int:
        return self.kind.rank

    def render(self) -> str:
        """Render the fragment as CSS text."""
        return self.kind.wrap(self.value)

    def __str__(self) -> str:
        return self.render()


__all__ = [
    "FragmentKind",
    "SelectorFragment",
]
