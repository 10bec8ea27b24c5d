"""
Capabilities the engine consumes from a document implementation.

Any element type that provides these methods can be evaluated, whether it
comes from the bundled BeautifulSoup adapter or from a live browser bridge.
Element identity is plain ``==``/``hash`` on the element objects.
"""

from __future__ import annotations

from typing import Any, Iterator, Optional, Protocol, runtime_checkable


@runtime_checkable
class SupportsQuery(Protocol):
    def query_selector_all(self, selector: str) -> Iterator[Any]:
        """Matching descendants in document order.

        Raises InvalidSelector for malformed selectors.
        """
        ...


@runtime_checkable
class SupportsComputedStyle(Protocol):
    def computed_style(self, name: str) -> Optional[str]:
        """Computed value of a CSS property, as CSS text."""
        ...
