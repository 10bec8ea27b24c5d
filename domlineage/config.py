"""
Configuration constants for domlineage.

There is no configuration file. Every tunable is a module-level constant,
read once at import time. The only environment override is the log level
(see ``domlineage.logging``).
"""

from __future__ import annotations


# =============================================================================
# EXPRESSION LIMITS
# =============================================================================

# Deepest expression tree accepted at construction time. Evaluation is plain
# recursion, so this bounds the interpreter's stack usage.
MAX_EXPRESSION_DEPTH = 200


# =============================================================================
# DOCUMENT ADAPTER
# =============================================================================

# Parser handed to BeautifulSoup. "html.parser" ships with Python and keeps
# the adapter free of compiled dependencies.
HTML_PARSER = "html.parser"

# CSS properties that inherit their computed value from the parent element
INHERITED_STYLE_PROPERTIES = frozenset({
    "color",
    "cursor",
    "direction",
    "font-family",
    "font-size",
    "font-style",
    "font-variant",
    "font-weight",
    "letter-spacing",
    "line-height",
    "text-align",
    "text-indent",
    "text-transform",
    "visibility",
    "white-space",
    "word-spacing",
})

# Initial values used when nothing in the cascade sets a property
INITIAL_STYLE_VALUES: dict[str, str] = {
    "opacity": "1",
    "display": "inline",
    "visibility": "visible",
    "color": "rgb(0, 0, 0)",
    "background-color": "rgba(0, 0, 0, 0)",
    "font-size": "16px",
    "width": "auto",
    "height": "auto",
}

# User-agent defaults for "display"
BLOCK_LEVEL_TAGS = frozenset({
    "address", "article", "aside", "blockquote", "body", "div", "dl",
    "fieldset", "figure", "footer", "form", "h1", "h2", "h3", "h4", "h5",
    "h6", "header", "hr", "html", "main", "nav", "ol", "p", "pre",
    "section", "table", "ul",
})
HIDDEN_TAGS = frozenset({"head", "link", "meta", "script", "style", "title"})


# =============================================================================
# LOGGING
# =============================================================================

LOG_LEVEL_ENV = "DOMLINEAGE_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
