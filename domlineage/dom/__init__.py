# Document package for domlineage
"""
The document collaborator: capability protocols consumed by the engine,
and an in-memory HTML adapter built on BeautifulSoup and tinycss2.
"""

from .document import Document, Element, parse_document
from .protocols import SupportsComputedStyle, SupportsQuery
