"""
Exceptions raised by selectorkit.

Builder errors derive from SelectorError so callers can catch every
structural problem with one clause while tests can still tell the
individual conditions apart.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from selectorkit.selectors.fragments import FragmentKind


DUPLICATE_FRAGMENT_MESSAGE = (
    "Element, id and pseudo-element should not occur more then one time "
    "inside the selector"
)

OUT_OF_ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: element, id, "
    "class, attribute, pseudo-class, pseudo-element"
)


class SelectorError(Exception):
    """Base class for selector building errors."""

    pass


class DuplicateFragmentError(SelectorError):
    """A unique fragment kind was appended twice to one selector."""

    def __init__(self, kind: "FragmentKind", message: str = DUPLICATE_FRAGMENT_MESSAGE):
        super().__init__(message)
        self.kind = kind


class OutOfOrderError(SelectorError):
    """A fragment was appended after a fragment of higher rank."""

    def __init__(
        self,
        kind: "FragmentKind",
        after: Optional["FragmentKind"] = None,
        message: str = OUT_OF_ORDER_MESSAGE,
    ):
        super().__init__(message)
        self.kind = kind
        self.after = after


class InvalidCombinatorError(SelectorError):
    """Combinator token rejected in strict mode."""

    def __init__(self, token: str):
        super().__init__(f"Unsupported combinator: {token!r}")
        self.token = token


class SelectorSyntaxError(SelectorError):
    """Rendered selector could not be translated to XPath."""

    def __init__(self, selector: str, reason: str):
        super().__init__(f"Cannot translate selector {selector!r}: {reason}")
        self.selector = selector


class RecordShapeError(ValueError):
    """JSON text does not describe a record that fits the requested shape."""

    pass


__all__ = [
    "DUPLICATE_FRAGMENT_MESSAGE",
    "OUT_OF_ORDER_MESSAGE",
    "SelectorError",
    "DuplicateFragmentError",
    "OutOfOrderError",
    "InvalidCombinatorError",
    "SelectorSyntaxError",
    "RecordShapeError",
]
