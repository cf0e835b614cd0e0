"""
CSS selector building for selectorkit.

- **SelectorBuilder**: facade whose methods start new compound selectors
- **CompoundSelector**: ``element#id.class[attr]:pseudo-class::pseudo-element``
  built by chaining, with ordering and cardinality checks on every append
- **CombinedSelector**: two selectors joined by a combinator

Example usage:

    from selectorkit.selectors import css_selector_builder as builder

    builder.element("a").attr('href$=".png"').pseudo_class("focus").render()
    # 'a[href$=".png"]:focus'

    builder.combine(builder.element("ul"), ">", builder.element("li")).render()
    # 'ul > li'
"""

from selectorkit.selectors.base import Renderable
from selectorkit.selectors.builder import SelectorBuilder, css_selector_builder
from selectorkit.selectors.combined import (
    Combinator,
    CombinatorToken,
    CombinedSelector,
)
from selectorkit.selectors.compound import CompoundSelector
from selectorkit.selectors.fragments import FragmentKind, SelectorFragment

__all__ = [
    # Facade
    "SelectorBuilder",
    "css_selector_builder",
    # Selector types
    "Renderable",
    "CompoundSelector",
    "CombinedSelector",
    # Fragments
    "FragmentKind",
    "SelectorFragment",
    # Combinators
    "Combinator",
    "CombinatorToken",
]
