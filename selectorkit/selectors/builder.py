"""
Selector builder facade.

Every fragment method starts a fresh CompoundSelector; chaining further
fragment calls on the returned selector extends it in place. combine()
joins two finished selectors and returns a new value each time, so the
facade itself never holds per-call state.

Example:
    builder = css_selector_builder

    builder.id("main").class_("container").class_("editable").render()
    # '#main.container.editable'

    builder.combine(
        builder.element("div").id("main"),
        "+",
        builder.combine(
            builder.element("tr").pseudo_class("nth-of-type(even)"),
            " ",
            builder.element("td").pseudo_class("nth-of-type(even)"),
        ),
    ).render()
    # 'div#main + tr:nth-of-type(even)   td:nth-of-type(even)'
"""

from __future__ import annotations

from typing import Optional

from selectorkit.config.options import BuilderOptions, SelectorKitConfig
from selectorkit.selectors.base import Renderable
from selectorkit.selectors.combined import CombinatorToken, CombinedSelector
from selectorkit.selectors.compound import CompoundSelector
from selectorkit.selectors.fragments import FragmentKind


class SelectorBuilder:
    """Factory for compound and combined selectors."""

    def __init__(self, options: Optional[BuilderOptions] = None) -> None:
        self._options = options or BuilderOptions()

    @classmethod
    def from_config(cls, config: SelectorKitConfig) -> "SelectorBuilder":
        """Create a builder from the builder section of a config."""
        return cls(config.builder)

    @property
    def options(self) -> BuilderOptions:
        return self._options

    def _start(self, kind: FragmentKind, value: str) -> CompoundSelector:
        return CompoundSelector(self._options).append(kind, value)

    def element(self, value: str) -> CompoundSelector:
        """Start a selector with a type selector, e.g. ``div``."""
        return self._start(FragmentKind.ELEMENT, value)

    def id(self, value: str) -> CompoundSelector:
        """Start a selector with an id selector, e.g. ``#main``."""
        return self._start(FragmentKind.ID, value)

    def class_(self, value: str) -> CompoundSelector:
        """Start a selector with a class selector, e.g. ``.container``."""
        return self._start(FragmentKind.CLASS, value)

    def attr(self, value: str) -> CompoundSelector:
        """Start a selector with an attribute selector, e.g. ``[href]``."""
        return self._start(FragmentKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> CompoundSelector:
        """Start a selector with a pseudo-class, e.g. ``:focus``."""
        return self._start(FragmentKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> CompoundSelector:
        """Start a selector with a pseudo-element, e.g. ``::before``."""
        return self._start(FragmentKind.PSEUDO_ELEMENT, value)

    pseudoClass = pseudo_class
    pseudoElement = pseudo_element

    def combine(
        self,
        left: Renderable,
        combinator: CombinatorToken,
        right: Renderable,
    ) -> CombinedSelector:
        """Join two selectors with a combinator.

        Args:
            left: Left-hand selector.
            combinator: Combinator member or any token string.
            right: Right-hand selector.

        Returns:
            New combined selector rendering ``left <combinator> right``.

        Raises:
            TypeError: If an operand is not a selector.
            InvalidCombinatorError: If strict combinators are enabled and the
                token is not a standard combinator.
        """
        return CombinedSelector(left, combinator, right, self._options)


setattr(SelectorBuilder, "class", SelectorBuilder.class_)

css_selector_builder = SelectorBuilder()


__all__ = [
    "SelectorBuilder",
    "css_selector_builder",
]
