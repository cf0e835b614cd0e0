"""
Base class shared by every renderable selector.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Optional, Union

from lxml.cssselect import LxmlHTMLTranslator, LxmlTranslator
from lxml.cssselect import SelectorError as CSSSelectError

from selectorkit.config.options import BuilderOptions, XPathTranslator
from selectorkit.errors import SelectorSyntaxError

logger = logging.getLogger(__name__)

_TRANSLATORS = {
    XPathTranslator.HTML: LxmlHTMLTranslator,
    XPathTranslator.XML: LxmlTranslator,
}


class Renderable(ABC):
    """Anything that can be written out as CSS selector text."""

    def __init__(self, options: Optional[BuilderOptions] = None) -> None:
        self._options = options or BuilderOptions()

    @property
    def options(self) -> BuilderOptions:
        """Builder options this selector was created with."""
        return self._options

    @abstractmethod
    def render(self) -> str:
        """Return the CSS text form of the selector."""
        ...

    def stringify(self) -> str:
        """Alias for render()."""
        return self.render()

    def to_xpath(
        self,
        translator: Optional[Union[str, XPathTranslator]] = None,
        prefix: Optional[str] = None,
    ) -> str:
        """Translate the rendered selector to an XPath expression.

        Args:
            translator: "html" or "xml". Defaults to the builder options.
            prefix: XPath axis prepended to the expression. Defaults to
                the builder options.

        Returns:
            XPath expression.

        Raises:
            SelectorSyntaxError: If cssselect cannot translate the text.
        """
        kind = XPathTranslator(translator or self._options.xpath_translator)
        if prefix is None:
            prefix = self._options.xpath_prefix

        css = self.render()
        try:
            xpath = _TRANSLATORS[kind]().css_to_xpath(css, prefix=prefix)
        except CSSSelectError as e:
            raise SelectorSyntaxError(css, str(e)) from e

        logger.debug(f"Translated {css!r} to {xpath!r}")
        return xpath

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.render()!r})"


__all__ = [
    "Renderable",
]
