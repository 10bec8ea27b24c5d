"""
Expression trees and their evaluation.

An expression is one of:
    Constant          a literal value
    PositionalRef     a root input, written "@0", "@1", ...
    NamedRef          a name bound by an enclosing quantifier, written "$x"
    ComposedFunction  an operator applied to operand expressions
    Quantifier        see ``quantifier``

Evaluating a node yields an Evaluation carrying two separate lineages:

    witness     the leaf DesignatedObjects (literals and references) in
                left-to-right order. Operators never add a leaf of their own;
                a leaf passing through argument i only gets the operator's
                describe(i) step appended to its path.
    designator  the node's own result path, used when the computed value is
                itself of interest (e.g. "how was this number obtained").

Keeping the two apart is what lets ``Opacity(@0) > 0.9`` report the element
and the constant, rather than the intermediate opacity value.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from .config import MAX_EXPRESSION_DEPTH
from .context import Context
from .designator import CompoundDesignator, DesignatedObject, Designator, NthItem
from .errors import MalformedExpression
from .operators.base import Operator


# =============================================================================
# EVALUATION RESULT
# =============================================================================

@dataclass(frozen=True)
class Evaluation:
    """The outcome of evaluating one expression node."""
    value: Any
    witness: tuple[DesignatedObject, ...]
    designator: CompoundDesignator

    @property
    def result(self) -> DesignatedObject:
        """The computed value paired with its result path."""
        return DesignatedObject(self.value, self.designator)


# =============================================================================
# EXPRESSION BASE
# =============================================================================

class Expression(ABC):
    """Base class of all expression tree nodes. Nodes are immutable."""

    @abstractmethod
    def evaluate(self, context: Context) -> Evaluation:
        ...

    @property
    def leaf_count(self) -> int:
        """Leaf-term occurrences (literals and references), duplicates included."""
        return 1

    @property
    def depth(self) -> int:
        return 1

    def item_designator(self, index: int) -> Designator:
        """Step designating the index-th item of a sequence-valued result."""
        return NthItem(index)

    def __setattr__(self, name: str, value: Any) -> None:
        if hasattr(self, "_frozen"):
            raise AttributeError(f"{type(self).__name__} is immutable")
        super().__setattr__(name, value)

    def _freeze(self) -> None:
        object.__setattr__(self, "_frozen", True)


class Constant(Expression):
    """A literal leaf; its witness is the value with a trivial path."""

    def __init__(self, value: Any):
        self.value = value
        self._freeze()

    def evaluate(self, context: Context) -> Evaluation:
        leaf = DesignatedObject.of(self.value)
        return Evaluation(self.value, (leaf,), leaf.designator)

    # 1, 1.0 and True are distinct literals: operators type-check them differently
    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, Constant)
            and type(other.value) is type(self.value)
            and other.value == self.value
        )

    def __hash__(self) -> int:
        try:
            return hash((Constant, type(self.value), self.value))
        except TypeError:
            return hash((Constant, type(self.value), repr(self.value)))

    def __repr__(self) -> str:
        return repr(self.value)


class Reference(Expression):
    """A leaf resolved against the context at evaluation time."""

    def evaluate(self, context: Context) -> Evaluation:
        binding = self.resolve(context)
        return Evaluation(binding.value, (binding.origin,), binding.origin.designator)

    @abstractmethod
    def resolve(self, context: Context):
        ...


class PositionalRef(Reference):
    """Reference to the index-th root input of the evaluation."""

    def __init__(self, index: int):
        if index < 0:
            raise MalformedExpression(f"Positional reference index must be >= 0, got {index}")
        self.index = index
        self._freeze()

    def resolve(self, context: Context):
        return context.resolve_positional(self.index)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, PositionalRef) and other.index == self.index

    def __hash__(self) -> int:
        return hash((PositionalRef, self.index))

    def __repr__(self) -> str:
        return f"@{self.index}"


class NamedRef(Reference):
    """Reference to a name bound by an enclosing quantifier."""

    def __init__(self, name: str):
        if not name:
            raise MalformedExpression("Named reference needs a name")
        self.name = name
        self._freeze()

    def resolve(self, context: Context):
        return context.resolve_named(self.name)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, NamedRef) and other.name == self.name

    def __hash__(self) -> int:
        return hash((NamedRef, self.name))

    def __repr__(self) -> str:
        return self.name


# =============================================================================
# OPERAND COERCION
# =============================================================================

_POSITIONAL_PATTERN = re.compile(r"^@(\d+)$")


def as_expression(operand: Any) -> Expression:
    """
    Turn an operand given at construction time into an expression node.

    Strings "@<n>" become positional references and strings starting with
    "$" become named references; use Constant() to pass such a string as a
    literal. Operators must be wrapped in a ComposedFunction.
    """
    if isinstance(operand, Expression):
        return operand
    if isinstance(operand, Operator):
        raise MalformedExpression(
            f"{operand!r} used as an operand; wrap it in a ComposedFunction"
        )
    if isinstance(operand, str):
        match = _POSITIONAL_PATTERN.match(operand)
        if match:
            return PositionalRef(int(match.group(1)))
        if operand.startswith("$"):
            return NamedRef(operand)
    return Constant(operand)


# =============================================================================
# COMPOSED FUNCTION
# =============================================================================

class ComposedFunction(Expression):
    """An operator applied to an ordered list of operand expressions."""

    def __init__(self, operator: Operator, *operands: Any):
        if not isinstance(operator, Operator):
            raise MalformedExpression(
                f"ComposedFunction needs an Operator, got {type(operator).__name__}"
            )
        if len(operands) != operator.arity:
            raise MalformedExpression(
                f"{operator.name} takes {operator.arity} argument(s), got {len(operands)}"
            )
        self.operator = operator
        self.operands = tuple(as_expression(operand) for operand in operands)

        depth = 1 + max((operand.depth for operand in self.operands), default=0)
        if depth > MAX_EXPRESSION_DEPTH:
            raise MalformedExpression(
                f"Expression depth {depth} exceeds the limit of {MAX_EXPRESSION_DEPTH}"
            )
        self._depth = depth
        self._leaf_count = sum(operand.leaf_count for operand in self.operands)
        self._freeze()

    @property
    def depth(self) -> int:
        return self._depth

    @property
    def leaf_count(self) -> int:
        return self._leaf_count

    def item_designator(self, index: int) -> Designator:
        return self.operator.item_designator(index)

    def evaluate(self, context: Context) -> Evaluation:
        values: list[Any] = []
        witness: list[DesignatedObject] = []
        paths: list[CompoundDesignator] = []

        # Strictly left to right, every operand before the operator
        for index, operand in enumerate(self.operands):
            evaluation = operand.evaluate(context)
            step = self.operator.describe(index)
            values.append(evaluation.value)
            witness.extend(leaf.compose(step) for leaf in evaluation.witness)
            paths.append(evaluation.designator.compose(step))

        value = self.operator.apply(values)
        return Evaluation(value, tuple(witness), CompoundDesignator.concat(paths))

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, ComposedFunction)
            and other.operator == self.operator
            and other.operands == self.operands
        )

    def __hash__(self) -> int:
        return hash((ComposedFunction, self.operator, self.operands))

    def __repr__(self) -> str:
        args = ", ".join(repr(operand) for operand in self.operands)
        return f"{self.operator.name}({args})"
