"""
selectorkit: CSS selector builder with ordering and cardinality checks.

Builds compound selectors fragment by fragment, rejects structurally
invalid ones, and combines finished selectors with combinators. Also ships
small record helpers (a rectangle factory and JSON (de)serialization).

Basic usage:
    from selectorkit import css_selector_builder as builder

    builder.id("main").class_("container").class_("editable").render()
    # '#main.container.editable'

    builder.element("a").attr('href$=".png"').pseudo_class("focus").render()
    # 'a[href$=".png"]:focus'

    builder.combine(
        builder.element("div").id("main").class_("container"),
        "+",
        builder.element("table").id("data"),
    ).render()
    # 'div#main.container + table#data'

With configuration:
    from selectorkit import SelectorBuilder
    from selectorkit.config import load_config_with_profile

    builder = SelectorBuilder.from_config(load_config_with_profile("strict"))
    builder.combine(builder.element("a"), "|", builder.element("b"))
    # raises InvalidCombinatorError
"""

__version__ = "0.1.0"
__license__ = "MIT"

from selectorkit.errors import (
    DuplicateFragmentError,
    InvalidCombinatorError,
    OutOfOrderError,
    RecordShapeError,
    SelectorError,
    SelectorSyntaxError,
)

from selectorkit.selectors import (
    Combinator,
    CombinedSelector,
    CompoundSelector,
    FragmentKind,
    Renderable,
    SelectorBuilder,
    SelectorFragment,
    css_selector_builder,
)

from selectorkit.objects import Rectangle, from_json, get_json

from selectorkit.config import (
    BuilderOptions,
    SelectorKitConfig,
    SerializationOptions,
    load_config,
)

__all__ = [
    # Version
    "__version__",
    # Builder
    "SelectorBuilder",
    "css_selector_builder",
    "Renderable",
    "CompoundSelector",
    "CombinedSelector",
    "Combinator",
    "FragmentKind",
    "SelectorFragment",
    # Errors
    "SelectorError",
    "DuplicateFragmentError",
    "OutOfOrderError",
    "InvalidCombinatorError",
    "SelectorSyntaxError",
    "RecordShapeError",
    # Objects
    "Rectangle",
    "get_json",
    "from_json",
    # Config
    "SelectorKitConfig",
    "BuilderOptions",
    "SerializationOptions",
    "load_config",
]
