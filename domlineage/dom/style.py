"""
Computed-style resolution for the HTML adapter.

Resolution order for one property of one element:
    1. the element's inline ``style`` attribute
    2. ``<style>`` sheet rules, the last matching rule in source order wins
    3. the parent's computed value, for inherited properties or "inherit"
    4. the initial value from config

Selector specificity and ``!important`` are not ranked; source order alone
decides between sheet rules.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import soupsieve
import tinycss2
from bs4 import BeautifulSoup, Tag

from ..config import (
    BLOCK_LEVEL_TAGS,
    HIDDEN_TAGS,
    INHERITED_STYLE_PROPERTIES,
    INITIAL_STYLE_VALUES,
)
from ..logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class StyleRule:
    """One qualified rule of a stylesheet."""
    selector: str
    matcher: soupsieve.SoupSieve
    declarations: dict[str, str]

    def matches(self, tag: Tag) -> bool:
        return self.matcher.match(tag)


def parse_declarations(css) -> dict[str, str]:
    """
    Parse a declaration list ("opacity: 0.5; color: red") into a dict.

    Accepts CSS text or the token list of a rule's block. Later
    declarations of the same property override earlier ones.
    """
    declarations: dict[str, str] = {}
    for item in tinycss2.parse_declaration_list(
        css, skip_comments=True, skip_whitespace=True
    ):
        if item.type == "declaration":
            declarations[item.lower_name] = tinycss2.serialize(item.value).strip()
        elif item.type == "error":
            logger.warning("Skipping malformed CSS declaration: %s", item.message)
    return declarations


def parse_stylesheet(css: str) -> list[StyleRule]:
    """Parse stylesheet text into rules, in source order."""
    rules: list[StyleRule] = []
    for node in tinycss2.parse_stylesheet(css, skip_comments=True, skip_whitespace=True):
        if node.type == "error":
            logger.warning("Skipping malformed CSS rule: %s", node.message)
            continue
        if node.type != "qualified-rule":
            # At-rules (@media, @font-face, ...) do not apply to a static document
            continue

        selector = tinycss2.serialize(node.prelude).strip()
        try:
            matcher = soupsieve.compile(selector)
        except soupsieve.SelectorSyntaxError as e:
            logger.warning("Skipping CSS rule with unsupported selector '%s': %s", selector, e)
            continue

        rules.append(StyleRule(
            selector=selector,
            matcher=matcher,
            declarations=parse_declarations(node.content),
        ))
    return rules


class StyleResolver:
    """Computes style values for the elements of one document."""

    def __init__(self, rules: list[StyleRule]):
        self._rules = rules

    @property
    def rules(self) -> list[StyleRule]:
        return list(self._rules)

    def declared_value(self, tag: Tag, name: str) -> Optional[str]:
        """The value set on this element itself, or None."""
        inline = tag.get("style")
        if inline:
            declarations = parse_declarations(inline)
            if name in declarations:
                return declarations[name]

        for rule in reversed(self._rules):
            if name in rule.declarations and rule.matches(tag):
                return rule.declarations[name]
        return None

    def computed_value(self, tag: Tag, name: str) -> Optional[str]:
        node = tag
        while isinstance(node, Tag) and not isinstance(node, BeautifulSoup):
            value = self.declared_value(node, name)
            if value == "initial":
                return self.initial_value(node, name)
            if value is not None and value != "inherit":
                return value
            if value is None and name not in INHERITED_STYLE_PROPERTIES:
                return self.initial_value(node, name)
            node = node.parent
        return INITIAL_STYLE_VALUES.get(name)

    @staticmethod
    def initial_value(tag: Tag, name: str) -> Optional[str]:
        if name == "display":
            if tag.name in HIDDEN_TAGS:
                return "none"
            if tag.name in BLOCK_LEVEL_TAGS:
                return "block"
        return INITIAL_STYLE_VALUES.get(name)
