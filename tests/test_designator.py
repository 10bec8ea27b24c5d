"""
Tests for designators and designated objects.

These tests verify:
1. Designator equality is by kind and parameters
2. Composition is associative, order preserving, and has a unit
3. Designated objects are immutable structural values
"""

import dataclasses

import pytest

from domlineage.designator import (
    CompoundDesignator,
    DesignatedObject,
    Designator,
    Identity,
    NthItem,
    SelectorMatch,
    StyleProperty,
)


# =============================================================================
# ATOMIC DESIGNATORS
# =============================================================================

class TestDesignatorEquality:
    """Two designators are equal iff same kind and same parameters."""

    def test_same_kind_same_parameters_are_equal(self):
        assert SelectorMatch("#h2", 0) == SelectorMatch("#h2", 0)
        assert hash(SelectorMatch("#h2", 0)) == hash(SelectorMatch("#h2", 0))

    def test_different_parameters_are_not_equal(self):
        assert SelectorMatch("#h2", 0) != SelectorMatch("#h2", 1)
        assert StyleProperty("opacity") != StyleProperty("color")

    def test_different_kinds_are_not_equal(self):
        assert NthItem(0) != SelectorMatch("p", 0)
        assert Identity() != NthItem(0)

    def test_designators_are_immutable(self):
        step = NthItem(3)
        with pytest.raises(dataclasses.FrozenInstanceError):
            step.index = 4

    def test_descriptions_are_human_readable(self):
        assert str(NthItem(0)) == "item #1"
        assert str(SelectorMatch("nav li", 2)) == "element #3 matching 'nav li'"
        assert str(StyleProperty("opacity")) == "opacity"

    def test_base_designator_is_abstract(self):
        with pytest.raises(TypeError):
            Designator()


# =============================================================================
# COMPOUND DESIGNATORS
# =============================================================================

class TestCompoundDesignator:
    """Paths compose by concatenation."""

    def setup_method(self):
        self.p1 = CompoundDesignator.of(SelectorMatch("div", 0))
        self.p2 = CompoundDesignator.of(SelectorMatch("span", 1), NthItem(2))
        self.p3 = CompoundDesignator.of(StyleProperty("opacity"))

    def test_composition_is_associative(self):
        left = self.p1.compose(self.p2).compose(self.p3)
        right = self.p1.compose(self.p2.compose(self.p3))
        flat = CompoundDesignator((
            SelectorMatch("div", 0),
            SelectorMatch("span", 1),
            NthItem(2),
            StyleProperty("opacity"),
        ))
        assert left == right == flat

    def test_composition_preserves_order(self):
        path = self.p3.compose(self.p1)
        assert path.head() == StyleProperty("opacity")
        assert path.tail() == SelectorMatch("div", 0)

    def test_composition_does_not_mutate_operands(self):
        self.p1.compose(self.p3)
        assert len(self.p1) == 1
        assert len(self.p3) == 1

    def test_trivial_path_is_the_unit(self):
        trivial = CompoundDesignator.trivial()
        assert self.p2.compose(trivial) == self.p2
        assert trivial.compose(self.p2) == self.p2
        assert trivial.compose(trivial) == trivial

    def test_trivial_path_is_not_empty(self):
        trivial = CompoundDesignator.trivial()
        assert trivial.is_trivial()
        assert len(trivial) == 1
        assert list(trivial) == [Identity()]

    def test_empty_construction_gives_trivial_path(self):
        assert CompoundDesignator(()) == CompoundDesignator.trivial()
        assert CompoundDesignator.of() == CompoundDesignator.trivial()

    def test_identity_steps_are_normalised_away(self):
        path = CompoundDesignator((Identity(), NthItem(0), Identity()))
        assert path == CompoundDesignator.of(NthItem(0))
        assert not path.is_trivial()

    def test_of_flattens_nested_paths(self):
        nested = CompoundDesignator.of(self.p1, NthItem(5), self.p3)
        assert list(nested) == [
            SelectorMatch("div", 0),
            NthItem(5),
            StyleProperty("opacity"),
        ]

    def test_concat_of_nothing_is_trivial(self):
        assert CompoundDesignator.concat([]).is_trivial()

    def test_string_reads_outermost_first(self):
        path = CompoundDesignator.of(SelectorMatch("#h2", 0), StyleProperty("opacity"))
        assert str(path) == "opacity of element #1 matching '#h2'"


# =============================================================================
# DESIGNATED OBJECTS
# =============================================================================

class TestDesignatedObject:
    """Designated objects pair a leaf value with its path."""

    def test_raw_value_gets_trivial_designator(self):
        dob = DesignatedObject.of(0.9)
        assert dob.get_object() == 0.9
        assert dob.get_designator().is_trivial()

    def test_default_designator_is_trivial(self):
        assert DesignatedObject(50) == DesignatedObject.of(50)

    def test_structural_equality_and_hashing(self):
        path = CompoundDesignator.of(NthItem(1))
        assert DesignatedObject("x", path) == DesignatedObject("x", path)
        assert hash(DesignatedObject("x", path)) == hash(DesignatedObject("x", path))
        assert DesignatedObject("x", path) != DesignatedObject("x")

    def test_compose_keeps_object_and_extends_path(self):
        dob = DesignatedObject.of("body")
        composed = dob.compose(StyleProperty("opacity"))
        assert composed.get_object() == "body"
        assert composed.get_designator() == CompoundDesignator.of(StyleProperty("opacity"))
        assert dob.get_designator().is_trivial()

    def test_is_immutable(self):
        dob = DesignatedObject.of(1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            dob.obj = 2

    def test_describe(self):
        assert DesignatedObject.of(0.9).describe() == "0.9"
        dob = DesignatedObject("body", CompoundDesignator.of(StyleProperty("opacity")))
        assert dob.describe() == "opacity of 'body'"
