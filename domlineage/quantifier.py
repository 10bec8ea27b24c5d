"""
Quantifiers over element collections.

A quantifier binds a name to each candidate of a domain sequence in turn
and evaluates its body under that binding. Candidates are visited in the
domain's iteration order and the domain is consumed lazily: once a
candidate decides the outcome, later candidates are never produced, bound
or evaluated.

Witness policy:
    - deciding candidate found  -> that candidate's body witness
    - domain exhausted          -> the last evaluated candidate's witness
    - empty domain              -> the domain's own witness (e.g. the element
                                   that has no matching descendants)

A candidate's origin keeps the domain's root object. ForAll $x in
FindBySelector("h2") over @0=body binds $x to the matched h2, while
witnesses report (body, "element #k matching 'h2'").
"""

from __future__ import annotations

from typing import Any, Iterable, Optional, Union

from .config import MAX_EXPRESSION_DEPTH
from .context import Binding, Context
from .designator import CompoundDesignator, DesignatedObject
from .errors import MalformedExpression, TypeMismatch
from .function import ComposedFunction, Evaluation, Expression, PositionalRef, as_expression
from .logging import get_logger
from .operators.base import Operator

logger = get_logger(__name__)


class Quantifier(Expression):
    """
    Shared machinery of universal and existential quantification.

    Subclasses set ``decisive``: the body outcome that stops iteration and
    becomes the quantifier's result.
    """

    decisive: bool = False
    symbol = "Q"

    def __init__(
        self,
        variable: str,
        domain: Union[Expression, Operator],
        body: Any,
    ):
        # Only "$name" operands resolve to a binding; any other string is a literal
        if not isinstance(variable, str) or not variable.startswith("$") or len(variable) < 2:
            raise MalformedExpression(
                f"Quantified variable must be written '$name', got {variable!r}"
            )
        self.variable = variable
        self.domain = self._as_domain(domain)
        self.body = as_expression(body)
        if self.depth > MAX_EXPRESSION_DEPTH:
            raise MalformedExpression(
                f"Expression depth {self.depth} exceeds the limit of {MAX_EXPRESSION_DEPTH}"
            )
        self._freeze()

    @staticmethod
    def _as_domain(domain: Union[Expression, Operator]) -> Expression:
        # A bare operator is applied to the root inputs @0..@arity-1
        if isinstance(domain, Operator):
            return ComposedFunction(domain, *(PositionalRef(i) for i in range(domain.arity)))
        if isinstance(domain, Expression):
            return domain
        return as_expression(domain)

    @property
    def leaf_count(self) -> int:
        """
        Leaf count of the body, which is the witness length whenever the
        domain has at least one candidate.

        An empty domain is the exception: its witness is the domain's own
        witness, so its length is ``self.domain.leaf_count`` instead.
        """
        return self.body.leaf_count

    @property
    def depth(self) -> int:
        return 1 + max(self.domain.depth, self.body.depth)

    def evaluate(self, context: Context) -> Evaluation:
        domain_evaluation = self.domain.evaluate(context)
        candidates = self._iterate(domain_evaluation.value)
        root_leaf = self._root_leaf(domain_evaluation)

        last: Optional[Evaluation] = None
        for index, candidate in enumerate(candidates):
            step = self.domain.item_designator(index)
            if root_leaf is not None:
                origin = root_leaf.compose(step)
            else:
                origin = DesignatedObject(candidate, CompoundDesignator.of(step))

            scope = context.bind(self.variable, Binding(candidate, origin))
            body_evaluation = self.body.evaluate(scope)
            outcome = body_evaluation.value
            if not isinstance(outcome, bool):
                raise TypeMismatch(
                    f"Body of {self!r} must produce a boolean, "
                    f"got {type(outcome).__name__} ({outcome!r})"
                )

            if outcome is self.decisive:
                logger.debug(
                    "%s stopped at candidate #%d (%s)",
                    self.symbol, index + 1, origin.describe(),
                )
                return Evaluation(outcome, body_evaluation.witness, body_evaluation.designator)
            last = body_evaluation

        if last is None:
            logger.debug("%s over an empty domain %r", self.symbol, self.domain)
            return Evaluation(
                not self.decisive,
                domain_evaluation.witness,
                domain_evaluation.designator,
            )
        return Evaluation(not self.decisive, last.witness, last.designator)

    def _iterate(self, value: Any) -> Iterable[Any]:
        if isinstance(value, (str, bytes)) or not hasattr(value, "__iter__"):
            raise TypeMismatch(
                f"Domain of {self!r} must be a sequence, got {type(value).__name__}"
            )
        return value

    @staticmethod
    def _root_leaf(evaluation: Evaluation) -> Optional[DesignatedObject]:
        if len(evaluation.witness) == 1:
            return evaluation.witness[0]
        return None

    def __eq__(self, other: object) -> bool:
        return (
            type(other) is type(self)
            and other.variable == self.variable
            and other.domain == self.domain
            and other.body == self.body
        )

    def __hash__(self) -> int:
        return hash((type(self), self.variable, self.domain, self.body))

    def __repr__(self) -> str:
        return f"{self.symbol} {self.variable} in {self.domain!r}: {self.body!r}"


class UniversalQuantifier(Quantifier):
    """True iff the body holds for every candidate; stops at the first counter-example."""
    decisive = False
    symbol = "ForAll"


class ExistentialQuantifier(Quantifier):
    """True iff the body holds for some candidate; stops at the first example."""
    decisive = True
    symbol = "Exists"
