"""
Operators over document elements.

Style operators designate the property they read ("opacity of ..."), so a
witness keeps the element as its object while its path says which aspect
of the element was inspected. FindBySelector produces a lazy sequence and
designates each item by selector and position; it is the usual domain of
a quantifier.
"""

from __future__ import annotations

import re
from typing import Any, Iterator, Optional, Sequence

from ..designator import CompoundDesignator, Designator, SelectorMatch, StyleProperty
from ..dom.protocols import SupportsComputedStyle, SupportsQuery
from ..errors import MalformedExpression, TypeMismatch
from .base import Operator


_NUMBER_PATTERN = re.compile(r"^\s*([-+]?(?:\d+(?:\.\d*)?|\.\d+))\s*(px|%)?\s*$")


def parse_css_number(text: str, allow_percent: bool = False) -> Optional[float]:
    """
    Parse a computed CSS value into a float.

    Accepts unitless numbers and px lengths; percentages only when
    ``allow_percent`` is set, in which case "50%" becomes 0.5.
    Returns None for anything else ("auto", "inherit", "1em", ...).
    """
    match = _NUMBER_PATTERN.match(text)
    if match is None:
        return None
    number, unit = float(match.group(1)), match.group(2)
    if unit == "%":
        return number / 100 if allow_percent else None
    return number


# =============================================================================
# COMPUTED STYLE
# =============================================================================

class ComputedStyle(Operator):
    """
    Read one computed style property of an element.

    With ``numeric=True`` the value is converted to a float and a value that
    cannot be converted is a TypeMismatch; otherwise the CSS text is
    returned unchanged.
    """

    arity = 1
    allow_percent = False

    def __init__(self, property_name: str, numeric: bool = False):
        if not property_name:
            raise MalformedExpression("ComputedStyle needs a property name")
        self.property_name = property_name.lower()
        self.numeric = numeric
        self.name = f"ComputedStyle({self.property_name})"

    def apply(self, args: Sequence[Any]) -> Any:
        element = args[0]
        if not isinstance(element, SupportsComputedStyle):
            raise TypeMismatch(
                f"{self.name} expects an element with computed style, "
                f"got {type(element).__name__}"
            )
        raw = element.computed_style(self.property_name)
        if not self.numeric:
            return raw
        value = None if raw is None else parse_css_number(raw, self.allow_percent)
        if value is None:
            raise TypeMismatch(
                f"{self.property_name} of {element!r} is {raw!r}, not a number"
            )
        return value

    def describe(self, index: int) -> CompoundDesignator:
        return CompoundDesignator.of(StyleProperty(self.property_name))

    def __eq__(self, other: object) -> bool:
        return (
            type(other) is type(self)
            and other.property_name == self.property_name
            and other.numeric == self.numeric
        )

    def __hash__(self) -> int:
        return hash((type(self), self.property_name, self.numeric))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.property_name!r})"


class Opacity(ComputedStyle):
    allow_percent = True

    def __init__(self):
        super().__init__("opacity", numeric=True)
        self.name = "Opacity"


class Width(ComputedStyle):
    def __init__(self):
        super().__init__("width", numeric=True)
        self.name = "Width"


class Height(ComputedStyle):
    def __init__(self):
        super().__init__("height", numeric=True)
        self.name = "Height"


class FontSize(ComputedStyle):
    def __init__(self):
        super().__init__("font-size", numeric=True)
        self.name = "FontSize"


class Color(ComputedStyle):
    def __init__(self):
        super().__init__("color")
        self.name = "Color"


class BackgroundColor(ComputedStyle):
    def __init__(self):
        super().__init__("background-color")
        self.name = "BackgroundColor"


class Display(ComputedStyle):
    def __init__(self):
        super().__init__("display")
        self.name = "Display"


class Visibility(ComputedStyle):
    def __init__(self):
        super().__init__("visibility")
        self.name = "Visibility"


# =============================================================================
# ELEMENT QUERIES
# =============================================================================

class FindBySelector(Operator):
    """Descendants of an element matching a CSS selector, in document order."""

    name = "FindBySelector"
    arity = 1

    def __init__(self, selector: str):
        if not isinstance(selector, str) or not selector.strip():
            raise MalformedExpression("FindBySelector needs a non-empty selector string")
        self.selector = selector

    def apply(self, args: Sequence[Any]) -> Iterator[Any]:
        element = args[0]
        if not isinstance(element, SupportsQuery):
            raise TypeMismatch(
                f"FindBySelector('{self.selector}') expects an element supporting "
                f"descendant queries, got {type(element).__name__}"
            )
        return element.query_selector_all(self.selector)

    def item_designator(self, index: int) -> Designator:
        return SelectorMatch(self.selector, index)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, FindBySelector) and other.selector == self.selector

    def __hash__(self) -> int:
        return hash((FindBySelector, self.selector))

    def __repr__(self) -> str:
        return f"FindBySelector({self.selector!r})"


class Count(Operator):
    """Number of items in a sequence operand. Consumes the sequence."""

    name = "Count"
    arity = 1

    def apply(self, args: Sequence[Any]) -> int:
        items = args[0]
        if isinstance(items, (str, bytes)) or not hasattr(items, "__iter__"):
            raise TypeMismatch(
                f"Count expects a sequence, got {type(items).__name__}"
            )
        return sum(1 for _ in items)
