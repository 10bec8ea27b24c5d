"""
Designators: the provenance vocabulary of domlineage.

A Designator is one atomic step of provenance ("opacity of", "element #2
matching 'h2'"). A CompoundDesignator is an ordered path of such steps,
stored root-first: the first step applies to the original leaf object, the
last step is the one closest to the point where the value was consumed.

A DesignatedObject pairs an original leaf value with the path describing
which part of it mattered. The object is always a value that was supplied
to the evaluation (a literal or a root input), never an intermediate
result.

Composition invariants:
    - compose() is associative and order preserving
    - Identity steps vanish on composition; the trivial path is the unit
    - a CompoundDesignator is never empty (the trivial path is (Identity(),))
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, Union


# =============================================================================
# ATOMIC DESIGNATORS
# =============================================================================

@dataclass(frozen=True)
class Designator(ABC):
    """
    Base of all atomic provenance steps.

    Two designators are equal iff they are of the same kind and carry the
    same parameters, which frozen dataclass equality gives for free.
    """

    @abstractmethod
    def describe(self) -> str:
        ...

    def __str__(self) -> str:
        return self.describe()


@dataclass(frozen=True)
class Identity(Designator):
    """The trivial step: the object itself."""

    def describe(self) -> str:
        return "itself"


@dataclass(frozen=True)
class NthItem(Designator):
    """The item at a (zero-based) position of a sequence."""
    index: int

    def describe(self) -> str:
        return f"item #{self.index + 1}"


@dataclass(frozen=True)
class SelectorMatch(Designator):
    """The index-th descendant matching a CSS selector."""
    selector: str
    index: int = 0

    def describe(self) -> str:
        return f"element #{self.index + 1} matching '{self.selector}'"


@dataclass(frozen=True)
class StyleProperty(Designator):
    """A computed style property of an element."""
    name: str

    def describe(self) -> str:
        return self.name


# =============================================================================
# COMPOUND DESIGNATOR
# =============================================================================

PathLike = Union[Designator, "CompoundDesignator"]


def _flatten(parts: Iterable[PathLike]) -> tuple[Designator, ...]:
    steps: list[Designator] = []
    for part in parts:
        if isinstance(part, CompoundDesignator):
            steps.extend(part.elements)
        else:
            steps.append(part)
    return tuple(step for step in steps if not isinstance(step, Identity))


@dataclass(frozen=True)
class CompoundDesignator:
    """
    A full provenance path: an ordered, non-empty tuple of Designators.

    Identity steps are normalised away on construction, so a path with
    redundant Identity steps equals the same path without them.
    """
    elements: tuple[Designator, ...] = (Identity(),)

    def __post_init__(self):
        steps = _flatten(self.elements)
        object.__setattr__(self, "elements", steps or (Identity(),))

    @classmethod
    def of(cls, *parts: PathLike) -> CompoundDesignator:
        """Create a path from designators and/or other paths, in order."""
        return cls(_flatten(parts))

    @classmethod
    def trivial(cls) -> CompoundDesignator:
        return cls((Identity(),))

    @classmethod
    def concat(cls, paths: Iterable[PathLike]) -> CompoundDesignator:
        return cls(_flatten(paths))

    def compose(self, other: PathLike) -> CompoundDesignator:
        """Return this path followed by ``other``."""
        return CompoundDesignator(_flatten((self, other)))

    def is_trivial(self) -> bool:
        return all(isinstance(step, Identity) for step in self.elements)

    def head(self) -> Designator:
        """The step closest to the original object."""
        return self.elements[0]

    def tail(self) -> Designator:
        """The step closest to the point of use."""
        return self.elements[-1]

    def __len__(self) -> int:
        return len(self.elements)

    def __iter__(self) -> Iterator[Designator]:
        return iter(self.elements)

    def __str__(self) -> str:
        # Read outermost-first: "opacity of element #1 matching '#h2'"
        return " of ".join(step.describe() for step in reversed(self.elements))


# =============================================================================
# DESIGNATED OBJECT
# =============================================================================

@dataclass(frozen=True)
class DesignatedObject:
    """
    An original leaf value paired with the path that explains its use.

    Equality and hashing are structural; hashing requires the wrapped
    object to be hashable.
    """
    obj: Any
    designator: CompoundDesignator = field(default_factory=CompoundDesignator.trivial)

    @classmethod
    def of(cls, value: Any) -> DesignatedObject:
        """Wrap a raw value with the trivial designator."""
        return cls(value, CompoundDesignator.trivial())

    def get_object(self) -> Any:
        return self.obj

    def get_designator(self) -> CompoundDesignator:
        return self.designator

    def compose(self, path: PathLike) -> DesignatedObject:
        """Same object, with ``path`` appended to its designator."""
        return DesignatedObject(self.obj, self.designator.compose(path))

    def describe(self) -> str:
        if self.designator.is_trivial():
            return repr(self.obj)
        return f"{self.designator} of {self.obj!r}"
