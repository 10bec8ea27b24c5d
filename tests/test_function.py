"""
Tests for expression trees, references and contexts.

These tests verify:
1. Operands are coerced once, at construction
2. Witness leaves and result paths are computed separately
3. Operands are evaluated strictly left to right
4. Contexts are immutable scope chains
5. Construction errors are reported, not deferred
"""

import pytest

from domlineage.context import Binding, Context
from domlineage.designator import CompoundDesignator, DesignatedObject, StyleProperty
from domlineage.errors import MalformedExpression, UnboundReference
from domlineage.function import (
    ComposedFunction,
    Constant,
    NamedRef,
    PositionalRef,
    as_expression,
)
from domlineage.operators import (
    Addition,
    BooleanNot,
    GreaterThan,
    Opacity,
    Operator,
)


# =============================================================================
# TEST FIXTURES
# =============================================================================

class FakeElement:
    """Minimal element exposing the computed-style capability."""

    def __init__(self, name: str, styles: dict):
        self.name = name
        self.styles = styles

    def computed_style(self, name):
        return self.styles.get(name)

    def __repr__(self):
        return f"<{self.name}>"


class Probe(Operator):
    """Identity operator that records every value it is applied to."""
    name = "Probe"
    arity = 1

    def __init__(self):
        self.calls = []

    def apply(self, args):
        self.calls.append(args[0])
        return args[0]


def evaluate(expression, *inputs):
    return expression.evaluate(Context.root(*inputs))


# =============================================================================
# OPERAND COERCION
# =============================================================================

class TestOperandCoercion:
    """Reference tokens are parsed once when the tree is built."""

    def test_positional_token(self):
        assert as_expression("@0") == PositionalRef(0)
        assert as_expression("@12") == PositionalRef(12)

    def test_named_token(self):
        assert as_expression("$x") == NamedRef("$x")

    def test_other_values_become_constants(self):
        assert as_expression(50) == Constant(50)
        assert as_expression("hello") == Constant("hello")
        assert as_expression("@x") == Constant("@x")

    def test_explicit_constant_keeps_token_literal(self):
        f = ComposedFunction(Addition(), Constant("@0"), 1)
        assert f.operands[0] == Constant("@0")

    def test_operator_as_operand_is_rejected(self):
        with pytest.raises(MalformedExpression, match="wrap it"):
            ComposedFunction(BooleanNot(), GreaterThan())

    def test_arity_is_checked(self):
        with pytest.raises(MalformedExpression, match="takes 2 argument"):
            ComposedFunction(GreaterThan(), "@0")

    def test_operator_is_required(self):
        with pytest.raises(MalformedExpression):
            ComposedFunction("GreaterThan", "@0", 1)

    def test_negative_positional_index_is_rejected(self):
        with pytest.raises(MalformedExpression):
            PositionalRef(-1)


# =============================================================================
# EVALUATION
# =============================================================================

class TestComposedFunctionEvaluation:
    """Evaluation threads witnesses and result paths separately."""

    def test_literal_and_reference_witness(self):
        evaluation = evaluate(ComposedFunction(GreaterThan(), "@0", 50), 100)

        assert evaluation.value is True
        assert evaluation.witness == (
            DesignatedObject.of(100),
            DesignatedObject.of(50),
        )

    def test_operator_adds_no_leaf_of_its_own(self):
        element = FakeElement("h2", {"opacity": "1"})
        f = ComposedFunction(GreaterThan(), ComposedFunction(Opacity(), "@0"), 0.9)

        evaluation = evaluate(f, element)

        assert evaluation.value is True
        assert len(evaluation.witness) == 2
        assert evaluation.witness[0].get_object() is element
        assert evaluation.witness[1].get_object() == 0.9

    def test_witness_leaf_records_inspected_property(self):
        element = FakeElement("h2", {"opacity": "0.5"})

        evaluation = evaluate(ComposedFunction(Opacity(), "@0"), element)

        opacity_path = CompoundDesignator.of(StyleProperty("opacity"))
        assert evaluation.witness == (DesignatedObject(element, opacity_path),)

    def test_result_path_is_separate_from_witness(self):
        element = FakeElement("h2", {"opacity": "0.5"})

        evaluation = evaluate(ComposedFunction(Opacity(), "@0"), element)

        # The result is the computed number, described by its own path
        assert evaluation.result.get_object() == 0.5
        assert evaluation.result.get_designator() == CompoundDesignator.of(
            StyleProperty("opacity")
        )
        # The witness still names the element, never the intermediate number
        assert all(leaf.get_object() is element for leaf in evaluation.witness)

    def test_constants_keep_trivial_path_through_comparisons(self):
        evaluation = evaluate(ComposedFunction(GreaterThan(), 3, 2))
        assert all(leaf.get_designator().is_trivial() for leaf in evaluation.witness)
        assert evaluation.designator.is_trivial()

    def test_duplicate_leaves_are_all_reported(self):
        f = ComposedFunction(GreaterThan(), ComposedFunction(Addition(), "@0", "@0"), 3)

        evaluation = evaluate(f, 2)

        assert f.leaf_count == 3
        assert [leaf.get_object() for leaf in evaluation.witness] == [2, 2, 3]
        assert evaluation.value is True

    def test_operands_are_evaluated_left_to_right(self):
        probe = Probe()
        f = ComposedFunction(
            Addition(),
            ComposedFunction(probe, "@0"),
            ComposedFunction(probe, "@1"),
        )

        evaluate(f, 1, 2)

        assert probe.calls == [1, 2]

    def test_unbound_positional_reference_fails(self):
        with pytest.raises(UnboundReference, match="@1"):
            evaluate(ComposedFunction(GreaterThan(), "@1", 0), 5)

    def test_unbound_named_reference_fails(self):
        with pytest.raises(UnboundReference, match=r"\$x"):
            evaluate(ComposedFunction(GreaterThan(), "$x", 0), 5)

    def test_evaluation_is_repeatable(self):
        f = ComposedFunction(GreaterThan(), "@0", 50)
        assert evaluate(f, 70) == evaluate(f, 70)


# =============================================================================
# TREE STRUCTURE
# =============================================================================

class TestExpressionTree:
    """Trees are immutable and depth-limited."""

    def test_tree_is_immutable(self):
        f = ComposedFunction(GreaterThan(), "@0", 50)
        with pytest.raises(AttributeError):
            f.operands = ()
        with pytest.raises(AttributeError):
            Constant(1).value = 2

    def test_structural_equality(self):
        assert ComposedFunction(GreaterThan(), "@0", 50) == ComposedFunction(GreaterThan(), "@0", 50)
        assert ComposedFunction(GreaterThan(), "@0", 50) != ComposedFunction(GreaterThan(), "@0", 51)

    def test_literals_of_different_types_are_distinct(self):
        assert Constant(1) != Constant(True)
        assert Constant(1) != Constant(1.0)
        assert ComposedFunction(GreaterThan(), "@0", 1) != ComposedFunction(GreaterThan(), "@0", True)

    def test_equal_trees_hash_equal(self):
        trees = {
            ComposedFunction(GreaterThan(), "@0", 1),
            ComposedFunction(GreaterThan(), "@0", 1),
            ComposedFunction(GreaterThan(), "@0", True),
        }
        assert len(trees) == 2

    def test_unhashable_literal(self):
        assert Constant([1, 2]) == Constant([1, 2])
        assert hash(Constant([1, 2])) == hash(Constant([1, 2]))

    def test_depth_limit(self, monkeypatch):
        monkeypatch.setattr("domlineage.function.MAX_EXPRESSION_DEPTH", 3)
        inner = ComposedFunction(BooleanNot(), ComposedFunction(BooleanNot(), True))
        assert inner.depth == 3
        with pytest.raises(MalformedExpression, match="depth"):
            ComposedFunction(BooleanNot(), inner)

    def test_repr(self):
        f = ComposedFunction(GreaterThan(), ComposedFunction(Opacity(), "$x"), 0.9)
        assert repr(f) == "GreaterThan(Opacity($x), 0.9)"


# =============================================================================
# CONTEXT
# =============================================================================

class TestContext:
    """Contexts are persistent scope chains."""

    def test_root_binds_positional_inputs(self):
        context = Context.root("a", "b")
        assert context.input_count == 2
        assert context.resolve_positional(1) == Binding.of("b")

    def test_bind_does_not_mutate_parent(self):
        parent = Context.root()
        child = parent.bind("$x", Binding.of(1))

        assert child.resolve_named("$x").value == 1
        with pytest.raises(UnboundReference):
            parent.resolve_named("$x")

    def test_inner_scope_shadows_outer(self):
        context = Context.root().bind("$x", Binding.of(1)).bind("$x", Binding.of(2))

        assert context.resolve_named("$x").value == 2
        assert list(context.names()) == ["$x"]

    def test_child_keeps_positional_inputs(self):
        child = Context.root(7).bind("$y", Binding.of(1))
        assert child.resolve_positional(0).value == 7
