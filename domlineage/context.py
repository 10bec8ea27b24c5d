"""
Evaluation contexts.

A Context is an immutable scope chain. The root holds the positional
inputs of one evaluation (``@0``, ``@1``, ...); each quantifier step adds
a child scope binding one name. Binding never mutates the parent, so a
quantifier's scope simply disappears when evaluation returns from it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional

from .designator import DesignatedObject
from .errors import UnboundReference


@dataclass(frozen=True)
class Binding:
    """
    What a reference resolves to.

    ``value`` is handed to operators; ``origin`` is reported in witnesses.
    For a root input both describe the same object. For a quantifier
    candidate, ``origin`` keeps the original root object and a path to the
    candidate, while ``value`` is the candidate itself.
    """
    value: Any
    origin: DesignatedObject

    @classmethod
    def of(cls, value: Any) -> Binding:
        return cls(value, DesignatedObject.of(value))


class Context:
    """A persistent scope chain of positional and named bindings."""

    __slots__ = ("_inputs", "_name", "_binding", "_parent")

    def __init__(
        self,
        inputs: tuple[Binding, ...] = (),
        name: Optional[str] = None,
        binding: Optional[Binding] = None,
        parent: Optional[Context] = None,
    ):
        self._inputs = inputs
        self._name = name
        self._binding = binding
        self._parent = parent

    @classmethod
    def root(cls, *inputs: Any) -> Context:
        """Create the outermost scope from raw root inputs."""
        return cls(inputs=tuple(Binding.of(value) for value in inputs))

    def bind(self, name: str, binding: Binding) -> Context:
        """Return a child scope in which ``name`` resolves to ``binding``."""
        return Context(self._inputs, name, binding, self)

    def resolve_positional(self, index: int) -> Binding:
        if 0 <= index < len(self._inputs):
            return self._inputs[index]
        raise UnboundReference(
            f"No input at position @{index} ({len(self._inputs)} input(s) supplied)"
        )

    def resolve_named(self, name: str) -> Binding:
        scope: Optional[Context] = self
        while scope is not None:
            if scope._name == name:
                return scope._binding
            scope = scope._parent
        raise UnboundReference(f"Name '{name}' is not bound in this context")

    def names(self) -> Iterator[str]:
        """Bound names, innermost first; shadowed names appear once."""
        seen: set[str] = set()
        scope: Optional[Context] = self
        while scope is not None:
            if scope._name is not None and scope._name not in seen:
                seen.add(scope._name)
                yield scope._name
            scope = scope._parent

    @property
    def input_count(self) -> int:
        return len(self._inputs)
