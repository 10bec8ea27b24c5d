"""
Failure taxonomy for domlineage.

A failure is never a verdict. When evaluation cannot complete, the
affected condition is aborted and the error propagates to the caller;
nothing is silently recorded as ``False`` and nothing is retried
(evaluation is pure, so a retry would fail the same way).

Failure kinds:
    TYPE_MISMATCH            Operator received an operand of the wrong shape
    UNBOUND_REFERENCE        A positional index or name has no binding
    INVALID_SELECTOR         The document rejected a selector string
    QUERY_BEFORE_EVALUATION  A result was requested before any evaluation
    MALFORMED_EXPRESSION     An expression tree was built incorrectly
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .verdict import TestResult


class FailureKind(Enum):
    """The kinds of evaluation-time and construction-time failure."""
    TYPE_MISMATCH = "type_mismatch"
    UNBOUND_REFERENCE = "unbound_reference"
    INVALID_SELECTOR = "invalid_selector"
    QUERY_BEFORE_EVALUATION = "query_before_evaluation"
    MALFORMED_EXPRESSION = "malformed_expression"


class EvaluationError(Exception):
    """
    Base class of every failure raised by the engine.

    Carries the failure kind and a human-readable reason, so callers can
    branch on ``kind`` without matching message text.
    """

    kind: FailureKind = FailureKind.TYPE_MISMATCH

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"[{self.kind.value}] {reason}")


class TypeMismatch(EvaluationError):
    """Raised when an operand does not have the shape an operator needs."""
    kind = FailureKind.TYPE_MISMATCH


class UnboundReference(EvaluationError):
    """Raised when a reference has no binding in the current context."""
    kind = FailureKind.UNBOUND_REFERENCE


class InvalidSelector(EvaluationError):
    """Raised when the document collaborator rejects a selector."""
    kind = FailureKind.INVALID_SELECTOR

    def __init__(self, selector: str, reason: str):
        self.selector = selector
        super().__init__(f"Invalid selector '{selector}': {reason}")


class QueryBeforeEvaluation(EvaluationError):
    """Raised when a driver's result is read before any evaluation."""
    kind = FailureKind.QUERY_BEFORE_EVALUATION


class MalformedExpression(EvaluationError):
    """Raised when an expression tree cannot be built as requested."""
    kind = FailureKind.MALFORMED_EXPRESSION


class ConditionFailure(Exception):
    """
    Raised by a driver when one or more of its conditions failed.

    The remaining conditions were still evaluated; their verdicts are
    available in ``partial_result``. The first underlying error is chained
    as ``__cause__``.
    """

    def __init__(
        self,
        failures: list[tuple[str, EvaluationError]],
        partial_result: Optional[TestResult] = None,
    ):
        self.failures = failures
        self.partial_result = partial_result
        names = ", ".join(f"'{name}'" for name, _ in failures)
        super().__init__(
            f"{len(failures)} condition(s) failed to evaluate: {names}"
        )
