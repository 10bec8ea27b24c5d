"""
Operator base class and operand checks.

An operator is a primitive computation with two capabilities:
    - apply(args)            raw operand values -> raw result
    - describe(index)        the provenance step contributed to argument i

Operators never see designators or witnesses; ComposedFunction threads
provenance around them. Adding an operator means adding a subclass.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from numbers import Real
from typing import Any, Sequence

from ..designator import CompoundDesignator, Designator, NthItem
from ..errors import TypeMismatch


class Operator(ABC):
    """Abstract base of every operator."""

    name: str = "operator"
    arity: int = 1

    @abstractmethod
    def apply(self, args: Sequence[Any]) -> Any:
        """Compute the raw result from raw operand values."""

    def describe(self, index: int) -> CompoundDesignator:
        """Provenance step this operator adds to its index-th argument."""
        return CompoundDesignator.trivial()

    def item_designator(self, index: int) -> Designator:
        """Step designating the index-th item, for sequence-valued results."""
        return NthItem(index)

    # Parameterless operators are interchangeable; subclasses with
    # parameters compare those too
    def __eq__(self, other: object) -> bool:
        return type(other) is type(self)

    def __hash__(self) -> int:
        return hash(type(self))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


# =============================================================================
# OPERAND CHECKS
# =============================================================================

def is_number(value: Any) -> bool:
    # bool is an int subclass, but True > 0 is not a meaningful comparison
    return isinstance(value, Real) and not isinstance(value, bool)


def require_number(operator: Operator, index: int, value: Any) -> Real:
    if not is_number(value):
        raise TypeMismatch(
            f"{operator.name} expects a number as argument {index}, "
            f"got {type(value).__name__} ({value!r})"
        )
    return value


def require_boolean(operator: Operator, index: int, value: Any) -> bool:
    if not isinstance(value, bool):
        raise TypeMismatch(
            f"{operator.name} expects a boolean as argument {index}, "
            f"got {type(value).__name__} ({value!r})"
        )
    return value
