"""
In-memory HTML document adapter.

Parses an HTML string with BeautifulSoup and exposes elements that satisfy
the capability protocols the engine consumes: descendant query by CSS
selector (soupsieve) and computed style (see ``style``).

This adapter parses strings only. Loading pages from disk or over the
network is the caller's business.
"""

from __future__ import annotations

from typing import Iterator, Optional

import soupsieve
from bs4 import BeautifulSoup, NavigableString, Tag

from ..config import HTML_PARSER
from ..errors import InvalidSelector
from .style import StyleResolver, parse_stylesheet


def _compile_selector(selector: str) -> soupsieve.SoupSieve:
    try:
        return soupsieve.compile(selector)
    except soupsieve.SelectorSyntaxError as e:
        raise InvalidSelector(selector, str(e)) from e


class Element:
    """
    A document element.

    Two Element wrappers are equal iff they wrap the same node; structurally
    identical siblings are distinct elements.
    """

    __slots__ = ("_tag", "_document")

    def __init__(self, tag: Tag, document: Document):
        self._tag = tag
        self._document = document

    @property
    def tag_name(self) -> str:
        return self._tag.name

    @property
    def id(self) -> Optional[str]:
        return self._tag.get("id")

    @property
    def text(self) -> str:
        return self._tag.get_text()

    @property
    def parent(self) -> Optional[Element]:
        parent = self._tag.parent
        if parent is None or isinstance(parent, BeautifulSoup):
            return None
        return self._document.wrap(parent)

    @property
    def document(self) -> Document:
        return self._document

    def get_attribute(self, name: str) -> Optional[str]:
        value = self._tag.get(name)
        # bs4 splits multi-valued attributes such as class into lists
        if isinstance(value, list):
            return " ".join(value)
        return value

    def query_selector_all(self, selector: str) -> Iterator[Element]:
        """Matching descendants (not this element itself), lazily, in document order."""
        matcher = _compile_selector(selector)
        return (self._document.wrap(tag) for tag in matcher.iselect(self._tag))

    def computed_style(self, name: str) -> Optional[str]:
        return self._document.styles.computed_value(self._tag, name.lower())

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Element) and other._tag is self._tag

    def __hash__(self) -> int:
        return id(self._tag)

    def __repr__(self) -> str:
        label = self.tag_name
        if self.id:
            label += f"#{self.id}"
        return f"<{label}>"


class Document:
    """A parsed HTML document and its stylesheet."""

    def __init__(self, html: str):
        self._soup = BeautifulSoup(html, HTML_PARSER)
        css = "\n".join(
            "".join(str(child) for child in style.contents if isinstance(child, NavigableString))
            for style in self._soup.find_all("style")
        )
        self.styles = StyleResolver(parse_stylesheet(css))

    def wrap(self, tag: Tag) -> Element:
        return Element(tag, self)

    @property
    def body(self) -> Optional[Element]:
        """The <body> element, or None for markup without one."""
        tag = self._soup.body
        return None if tag is None else self.wrap(tag)

    @property
    def root(self) -> Optional[Element]:
        tag = self._soup.find(True)
        return None if tag is None else self.wrap(tag)

    def query_selector_all(self, selector: str) -> Iterator[Element]:
        matcher = _compile_selector(selector)
        return (self.wrap(tag) for tag in matcher.iselect(self._soup))

    def query_selector(self, selector: str) -> Optional[Element]:
        return next(self.query_selector_all(selector), None)

    def get_element_by_id(self, element_id: str) -> Optional[Element]:
        tag = self._soup.find(id=element_id)
        return None if tag is None else self.wrap(tag)


def parse_document(html: str) -> Document:
    """Parse an HTML string into a Document."""
    return Document(html)
