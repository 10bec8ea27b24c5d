# Operators package for domlineage
"""
Primitive computations used as nodes of expression trees.

Every operator applies to raw values and declares the provenance step it
contributes to each argument.
"""

from .base import Operator, is_number, require_boolean, require_number
from .boolean import BooleanAnd, BooleanNot, BooleanOr, Implies
from .numeric import (
    Addition,
    GreaterOrEqual,
    GreaterThan,
    IsEqualTo,
    LessOrEqual,
    LessThan,
    Multiplication,
    Subtraction,
)
from .web import (
    BackgroundColor,
    Color,
    ComputedStyle,
    Count,
    Display,
    FindBySelector,
    FontSize,
    Height,
    Opacity,
    Visibility,
    Width,
    parse_css_number,
)
