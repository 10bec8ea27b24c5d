# domlineage: explainable test oracles for DOM-like data
"""
Core invariant: no verdict exists without a witness.

Conditions are expression trees built programmatically from operators,
references, constants and quantifiers. Evaluating them yields a verdict
plus the lineage of original objects and constants that decided it.
"""

from .context import Binding, Context
from .designator import (
    CompoundDesignator,
    DesignatedObject,
    Designator,
    Identity,
    NthItem,
    SelectorMatch,
    StyleProperty,
)
from .errors import (
    ConditionFailure,
    EvaluationError,
    FailureKind,
    InvalidSelector,
    MalformedExpression,
    QueryBeforeEvaluation,
    TypeMismatch,
    UnboundReference,
)
from .function import (
    ComposedFunction,
    Constant,
    Evaluation,
    Expression,
    NamedRef,
    PositionalRef,
    as_expression,
)
from .operators import (
    Addition,
    BackgroundColor,
    BooleanAnd,
    BooleanNot,
    BooleanOr,
    Color,
    ComputedStyle,
    Count,
    Display,
    FindBySelector,
    FontSize,
    GreaterOrEqual,
    GreaterThan,
    Height,
    Implies,
    IsEqualTo,
    LessOrEqual,
    LessThan,
    Multiplication,
    Opacity,
    Operator,
    Subtraction,
    Visibility,
    Width,
)
from .quantifier import ExistentialQuantifier, Quantifier, UniversalQuantifier
from .verdict import TestCondition, TestDriver, TestResult, Verdict

__version__ = "0.1.0"
