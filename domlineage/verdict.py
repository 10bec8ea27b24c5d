"""
Test conditions, verdicts and the driver that evaluates them.

Core principle:
    A verdict is never just pass/fail. Every verdict carries its witness:
    the original objects and constants that decided it, each with the path
    explaining which part of it was inspected.

Aggregation:
    TestResult.get_result() = AND of every verdict
    A condition that fails to evaluate produces no verdict at all; the
    failure is raised, never recorded as False.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .context import Context
from .designator import DesignatedObject
from .errors import (
    ConditionFailure,
    EvaluationError,
    MalformedExpression,
    QueryBeforeEvaluation,
    TypeMismatch,
)
from .function import Expression, as_expression
from .logging import get_logger

logger = get_logger(__name__)


# =============================================================================
# VERDICT
# =============================================================================

@dataclass(frozen=True)
class Verdict:
    """The outcome of one condition on one set of inputs."""
    __test__ = False

    condition_name: str
    result: bool
    witness: tuple[DesignatedObject, ...]

    def get_result(self) -> bool:
        return self.result

    def get_witness(self) -> list[DesignatedObject]:
        return list(self.witness)

    def explain(self) -> str:
        """Plain-text explanation: the outcome, then one line per witness leaf."""
        status = "PASS" if self.result else "FAIL"
        lines = [f"[{status}] {self.condition_name}"]
        if not self.witness:
            lines.append("  (no witness)")
        for leaf in self.witness:
            lines.append(f"  - {leaf.describe()}")
        return "\n".join(lines)


# =============================================================================
# TEST CONDITION
# =============================================================================

@dataclass(frozen=True)
class TestCondition:
    """A named boolean expression, built once and evaluated any number of times."""
    __test__ = False

    name: str
    expression: Expression

    def __post_init__(self):
        if not self.name:
            raise MalformedExpression("A test condition needs a name")
        object.__setattr__(self, "expression", as_expression(self.expression))

    def evaluate(self, *inputs: Any) -> Verdict:
        evaluation = self.expression.evaluate(Context.root(*inputs))
        if not isinstance(evaluation.value, bool):
            raise TypeMismatch(
                f"Condition '{self.name}' must produce a boolean, "
                f"got {type(evaluation.value).__name__} ({evaluation.value!r})"
            )
        return Verdict(
            condition_name=self.name,
            result=evaluation.value,
            witness=evaluation.witness,
        )


# =============================================================================
# TEST RESULT
# =============================================================================

@dataclass(frozen=True)
class TestResult:
    """
    Aggregated outcome of a driver run.

    Exposes:
    - the overall result (conjunction of all verdicts)
    - every verdict, in condition order
    """
    __test__ = False

    verdicts: tuple[Verdict, ...]

    @property
    def result(self) -> bool:
        return all(verdict.result for verdict in self.verdicts)

    def get_result(self) -> bool:
        return self.result

    def get_verdicts(self) -> list[Verdict]:
        return list(self.verdicts)

    def get_failed_verdicts(self) -> list[Verdict]:
        return [verdict for verdict in self.verdicts if not verdict.result]

    def explain(self) -> str:
        passed = sum(1 for verdict in self.verdicts if verdict.result)
        lines = [
            f"{passed}/{len(self.verdicts)} condition(s) passed, "
            f"overall {'PASS' if self.result else 'FAIL'}",
        ]
        for verdict in self.verdicts:
            lines.append("")
            lines.append(verdict.explain())
        return "\n".join(lines)


# =============================================================================
# TEST DRIVER
# =============================================================================

class TestDriver:
    """
    Evaluates a fixed set of conditions against root inputs.

    The only state kept between calls is the last successful TestResult.
    Concurrent evaluate_all() calls on one driver need external locking.
    """
    __test__ = False

    def __init__(self, *conditions: TestCondition):
        if not conditions:
            raise MalformedExpression("A test driver needs at least one condition")
        self._conditions = tuple(conditions)
        self._result: Optional[TestResult] = None

    @property
    def conditions(self) -> tuple[TestCondition, ...]:
        return self._conditions

    def evaluate_all(self, *inputs: Any) -> None:
        """
        Evaluate every condition with ``inputs`` bound to @0, @1, ...

        Raises:
            ConditionFailure: if any condition failed to evaluate. The other
                conditions are still evaluated and returned in
                ``partial_result``. The stored result is cleared, so
                get_result() raises QueryBeforeEvaluation until a later
                call succeeds.
        """
        verdicts: list[Verdict] = []
        failures: list[tuple[str, EvaluationError]] = []

        for condition in self._conditions:
            try:
                verdict = condition.evaluate(*inputs)
            except EvaluationError as e:
                logger.error("Condition '%s' failed to evaluate: %s", condition.name, e)
                failures.append((condition.name, e))
                continue
            logger.debug(
                "Condition '%s' -> %s (witness of %d)",
                condition.name, verdict.result, len(verdict.witness),
            )
            verdicts.append(verdict)

        result = TestResult(verdicts=tuple(verdicts))
        if failures:
            self._result = None
            raise ConditionFailure(failures, partial_result=result) from failures[0][1]
        self._result = result

    def get_result(self) -> TestResult:
        if self._result is None:
            raise QueryBeforeEvaluation(
                "No result available: evaluate_all() has not completed successfully"
            )
        return self._result
