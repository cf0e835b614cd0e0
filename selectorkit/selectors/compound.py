"""
Compound selector built by chaining fragment calls.

A compound selector is a single, non-combined selector such as
``div#main.container``. Fragments are appended in call order and every
append is checked against the cardinality and ordering rules before the
selector is touched, so a failed call leaves it exactly as it was.
"""

from __future__ import annotations

import logging
from typing import Iterator, Optional

from selectorkit.config.options import BuilderOptions
from selectorkit.errors import DuplicateFragmentError, OutOfOrderError
from selectorkit.selectors.base import Renderable
from selectorkit.selectors.fragments import FragmentKind, SelectorFragment

logger = logging.getLogger(__name__)


class CompoundSelector(Renderable):
    """Ordered list of selector fragments with validated appends.

    Example:
        >>> CompoundSelector().element("a").attr('href$=".png"').pseudo_class("focus").render()
        'a[href$=".png"]:focus'
    """

    def __init__(self, options: Optional[BuilderOptions] = None) -> None:
        super().__init__(options)
        self._fragments: list[SelectorFragment] = []
        self._kinds: set[FragmentKind] = set()
        self._highest: Optional[FragmentKind] = None

    @property
    def fragments(self) -> tuple[SelectorFragment, ...]:
        """Fragments in append order."""
        return tuple(self._fragments)

    @property
    def highest_kind(self) -> Optional[FragmentKind]:
        """Highest-ranked fragment kind appended so far."""
        return self._highest

    def has(self, kind: FragmentKind) -> bool:
        """Check whether a fragment of ``kind`` has been appended."""
        return kind in self._kinds

    def append(self, kind: FragmentKind, value: str) -> "CompoundSelector":
        """Append a fragment of ``kind``.

        Args:
            kind: Fragment kind.
            value: Bare name or expression, without prefix or brackets.

        Returns:
            This selector, for chaining.

        Raises:
            TypeError: If value is not a string.
            DuplicateFragmentError: If a unique kind is already present.
            OutOfOrderError: If a higher-ranked fragment is already present.
        """
        if not isinstance(value, str):
            raise TypeError(
                f"{kind.value} value must be str, not {type(value).__name__}"
            )

        if kind.unique and kind in self._kinds:
            raise DuplicateFragmentError(kind)

        if self._highest is not None and self._highest.rank > kind.rank:
            raise OutOfOrderError(kind, after=self._highest)

        self._fragments.append(SelectorFragment(kind, value))
        self._kinds.add(kind)
        if self._highest is None or kind.rank > self._highest.rank:
            self._highest = kind

        logger.debug(f"Appended {kind.value} fragment {value!r}")
        return self

    def element(self, value: str) -> "CompoundSelector":
        return self.append(FragmentKind.ELEMENT, value)

    def id(self, value: str) -> "CompoundSelector":
        return self.append(FragmentKind.ID, value)

    def class_(self, value: str) -> "CompoundSelector":
        return self.append(FragmentKind.CLASS, value)

    def attr(self, value: str) -> "CompoundSelector":
        return self.append(FragmentKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> "CompoundSelector":
        return self.append(FragmentKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> "CompoundSelector":
        return self.append(FragmentKind.PSEUDO_ELEMENT, value)

    # CSS-style spellings
    pseudoClass = pseudo_class
    pseudoElement = pseudo_element

    def render(self) -> str:
        return "".join(fragment.render() for fragment in self._fragments)

    def __iter__(self) -> Iterator[SelectorFragment]:
        return iter(self._fragments)

    def __len__(self) -> int:
        return len(self._fragments)


# ``class`` is a keyword, so it can only be reached through getattr().
setattr(CompoundSelector, "class", CompoundSelector.class_)


__all__ = [
    "CompoundSelector",
]
