"""
Combination of two renderable selectors with a combinator token.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional, Union

from selectorkit.config.options import BuilderOptions
from selectorkit.errors import InvalidCombinatorError
from selectorkit.selectors.base import Renderable

logger = logging.getLogger(__name__)


class Combinator(str, Enum):
    """Standard CSS combinators."""

    DESCENDANT = " "
    CHILD = ">"
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"


CombinatorToken = Union[Combinator, str]


def _token_text(token: CombinatorToken) -> str:
    if isinstance(token, Combinator):
        return token.value
    return token


class CombinedSelector(Renderable):
    """Immutable ``left <token> right`` selector.

    The operands' text is captured when the combination is created, so
    later changes to a compound operand do not leak into it. The token is
    always padded with one space on each side, which gives the descendant
    combinator three spaces in total.

    Example:
        >>> CombinedSelector(a, Combinator.CHILD, b).render()
        'ul > li'
    """

    def __init__(
        self,
        left: Renderable,
        token: CombinatorToken,
        right: Renderable,
        options: Optional[BuilderOptions] = None,
    ) -> None:
        for operand in (left, right):
            if not isinstance(operand, Renderable):
                raise TypeError(
                    f"Cannot combine {type(operand).__name__}, expected a selector"
                )
        if not isinstance(token, str):
            raise TypeError(
                f"Combinator must be str, not {type(token).__name__}"
            )

        options = options or left.options
        token = _token_text(token)
        if options.strict_combinators and token not in _STANDARD_TOKENS:
            raise InvalidCombinatorError(token)

        super().__init__(options)
        self._left = left
        self._token = token
        self._right = right
        self._text = f"{left.render()} {token} {right.render()}"

        logger.debug(f"Combined selectors with {token!r}: {self._text!r}")

    @property
    def left(self) -> Renderable:
        return self._left

    @property
    def token(self) -> str:
        return self._token

    @property
    def right(self) -> Renderable:
        return self._right

    def render(self) -> str:
        return self._text


_STANDARD_TOKENS = frozenset(c.value for c in Combinator)


__all__ = [
    "Combinator",
    "CombinatorToken",
    "CombinedSelector",
]
