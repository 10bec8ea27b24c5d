"""
Bundled sample page and conditions for the demo CLI.

The page and the conditions are fixed, so every run is deterministic.
Nothing is read from disk or from the network.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..dom import Document, parse_document
from ..function import ComposedFunction
from ..operators import (
    BooleanNot,
    Display,
    FindBySelector,
    FontSize,
    GreaterOrEqual,
    GreaterThan,
    IsEqualTo,
    Opacity,
)
from ..quantifier import ExistentialQuantifier, UniversalQuantifier
from ..verdict import TestCondition, TestDriver, TestResult


# =============================================================================
# SAMPLE DATA
# =============================================================================

SAMPLE_PAGE = """<!DOCTYPE html>
<html>
  <head>
    <title>Sample page</title>
    <style>
      body { font-size: 16px; }
      .fine-print { font-size: 10px; }
      nav li { opacity: 0.9; }
      nav li.disabled { opacity: 0.3; }
      .hidden { display: none; }
    </style>
  </head>
  <body>
    <h1 id="h1">Welcome</h1>
    <h2 id="h2">Latest news</h2>
    <nav>
      <ul>
        <li>Home</li>
        <li>Articles</li>
        <li class="disabled">Archive</li>
      </ul>
    </nav>
    <p>Regular paragraph.</p>
    <p class="fine-print">Terms and conditions apply.</p>
    <button class="hidden">Hidden action</button>
    <button>Subscribe</button>
  </body>
</html>
"""


def build_sample_conditions() -> list[TestCondition]:
    """The conditions checked by the demo, in display order."""
    return [
        TestCondition(
            "The #h2 heading is fully opaque",
            UniversalQuantifier(
                "$x",
                FindBySelector("#h2"),
                ComposedFunction(
                    GreaterThan(),
                    ComposedFunction(Opacity(), "$x"),
                    0.9,
                ),
            ),
        ),
        TestCondition(
            "Every paragraph is at least 12px",
            UniversalQuantifier(
                "$p",
                FindBySelector("p"),
                ComposedFunction(
                    GreaterOrEqual(),
                    ComposedFunction(FontSize(), "$p"),
                    12,
                ),
            ),
        ),
        TestCondition(
            "Some button is displayed",
            ExistentialQuantifier(
                "$b",
                FindBySelector("button"),
                ComposedFunction(
                    BooleanNot(),
                    ComposedFunction(
                        IsEqualTo(),
                        ComposedFunction(Display(), "$b"),
                        "none",
                    ),
                ),
            ),
        ),
        TestCondition(
            "Every menu item is more than half opaque",
            UniversalQuantifier(
                "$item",
                FindBySelector("nav li"),
                ComposedFunction(
                    GreaterThan(),
                    ComposedFunction(Opacity(), "$item"),
                    0.5,
                ),
            ),
        ),
    ]


# =============================================================================
# SAMPLE RUN
# =============================================================================

@dataclass
class SampleRun:
    """The parsed sample page and the result of checking it."""
    document: Document
    conditions: list[TestCondition]
    result: TestResult


def run_samples(html: str = SAMPLE_PAGE) -> SampleRun:
    """Evaluate the sample conditions with the page's <body> bound to @0."""
    document = parse_document(html)
    conditions = build_sample_conditions()
    driver = TestDriver(*conditions)
    driver.evaluate_all(document.body)
    return SampleRun(
        document=document,
        conditions=conditions,
        result=driver.get_result(),
    )
