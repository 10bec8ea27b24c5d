"""
Comparison and arithmetic operators.

All of these are transparent for provenance: they add no designator step,
so a literal compared against an input keeps its trivial path.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Any, Sequence

from .base import Operator, require_number


class BinaryNumericOperator(Operator):
    """Binary operator over two numbers."""

    arity = 2

    def apply(self, args: Sequence[Any]) -> Any:
        left = require_number(self, 0, args[0])
        right = require_number(self, 1, args[1])
        return self.compute(left, right)

    @abstractmethod
    def compute(self, left, right):
        ...


# =============================================================================
# COMPARISONS
# =============================================================================

class GreaterThan(BinaryNumericOperator):
    """``a > b``; equality is false."""
    name = "GreaterThan"

    def compute(self, left, right) -> bool:
        return left > right


class GreaterOrEqual(BinaryNumericOperator):
    name = "GreaterOrEqual"

    def compute(self, left, right) -> bool:
        return left >= right


class LessThan(BinaryNumericOperator):
    name = "LessThan"

    def compute(self, left, right) -> bool:
        return left < right


class LessOrEqual(BinaryNumericOperator):
    name = "LessOrEqual"

    def compute(self, left, right) -> bool:
        return left <= right


class IsEqualTo(Operator):
    """Equality over arbitrary values (elements compare by identity)."""
    name = "IsEqualTo"
    arity = 2

    def apply(self, args: Sequence[Any]) -> bool:
        return args[0] == args[1]


# =============================================================================
# ARITHMETIC
# =============================================================================

class Addition(BinaryNumericOperator):
    name = "Addition"

    def compute(self, left, right):
        return left + right


class Subtraction(BinaryNumericOperator):
    name = "Subtraction"

    def compute(self, left, right):
        return left - right


class Multiplication(BinaryNumericOperator):
    name = "Multiplication"

    def compute(self, left, right):
        return left * right
