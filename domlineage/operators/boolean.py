"""
Boolean connectives.

Connectives do not short-circuit: ComposedFunction resolves every operand
before applying the operator, so the witness of ``a AND b`` always lists
the leaves of both sides. Short-circuiting belongs to the quantifiers.
"""

from __future__ import annotations

from typing import Any, Sequence

from .base import Operator, require_boolean


class BooleanAnd(Operator):
    name = "And"
    arity = 2

    def apply(self, args: Sequence[Any]) -> bool:
        left = require_boolean(self, 0, args[0])
        right = require_boolean(self, 1, args[1])
        return left and right


class BooleanOr(Operator):
    name = "Or"
    arity = 2

    def apply(self, args: Sequence[Any]) -> bool:
        left = require_boolean(self, 0, args[0])
        right = require_boolean(self, 1, args[1])
        return left or right


class BooleanNot(Operator):
    name = "Not"
    arity = 1

    def apply(self, args: Sequence[Any]) -> bool:
        return not require_boolean(self, 0, args[0])


class Implies(Operator):
    """Material implication: false only when the premise holds and the conclusion does not."""
    name = "Implies"
    arity = 2

    def apply(self, args: Sequence[Any]) -> bool:
        premise = require_boolean(self, 0, args[0])
        conclusion = require_boolean(self, 1, args[1])
        return (not premise) or conclusion
