"""Tests for the display name entry points."""

import pytest
from unittest.mock import Mock

from display_names.dispatch import (
    declared_generation,
    display_name_for_class,
    display_name_for_method,
    generator_for,
    name_for_class,
    name_for_method,
    name_for_nested_class,
)
from display_names.errors import ConfigurationError, InvalidDisplayNameError, InvalidInputError
from display_names.generators import CAMEL_CASE, DEFAULT
from display_names.models import ClassInfo, DisplayNameGeneration, MethodInfo, Style

SENTENCES = DisplayNameGeneration(style=Style.SENTENCES)
UNDERSCORE = DisplayNameGeneration(style=Style.UNDERSCORE)


def _returning(value):
    """Custom generator whose operations all return the given value."""
    generator = Mock(spec=["name_for_class", "name_for_nested_class", "name_for_method"])
    generator.name_for_class.return_value = value
    generator.name_for_nested_class.return_value = value
    generator.name_for_method.return_value = value
    return DisplayNameGeneration(generator=generator)


class TestExplicitGeneration:
    """Tests for naming with an explicit generation."""

    def test_unset_generation_equals_default(self, outer_class, inner_class, add_method):
        """Every operation gives the same result unset and with explicit DEFAULT."""
        # Arrange
        default = DisplayNameGeneration(style=Style.DEFAULT)

        # Assert
        assert name_for_class(outer_class) == name_for_class(outer_class, default)
        assert name_for_nested_class(inner_class) == name_for_nested_class(inner_class, default)
        assert name_for_method(add_method) == name_for_method(add_method, default)

    def test_default_method_name(self, add_method):
        """DEFAULT method name lists parameter types."""
        assert name_for_method(add_method) == "add(int, int)"

    def test_style_is_applied(self, inner_class):
        """The declared style's generator produces the name."""
        assert name_for_nested_class(inner_class, SENTENCES) == "Inner..."

    def test_custom_generator_output_is_returned(self, outer_class):
        """Custom generator output passes through unchanged."""
        assert name_for_class(outer_class, _returning("Custom")) == "Custom"

    @pytest.mark.parametrize("value", ["", None, 42])
    def test_custom_output_must_be_non_empty_string(self, outer_class, value):
        """Empty or non-string output from a custom generator is rejected."""
        with pytest.raises(InvalidDisplayNameError, match="name_for_class"):
            name_for_class(outer_class, _returning(value))

    @pytest.mark.parametrize(
        "operation", [name_for_class, name_for_nested_class, name_for_method]
    )
    def test_missing_input_fails_before_resolution(self, operation):
        """A missing entity is rejected even when the generation is unresolvable."""
        # Arrange
        unresolvable = DisplayNameGeneration(generator="no_such_package:Generator")

        # Act / Assert
        with pytest.raises(InvalidInputError):
            operation(None, unresolvable)

    def test_unresolvable_generator_is_configuration_error(self, outer_class):
        """A custom generator that cannot be loaded is reported to the caller."""
        generation = DisplayNameGeneration(generator="no_such_package:Generator")
        with pytest.raises(ConfigurationError):
            name_for_class(outer_class, generation)


class TestDeclaredGeneration:
    """Tests for declarations inherited through enclosing classes."""

    def test_nothing_declared_returns_default_argument(self, inner_class):
        """Without declarations the supplied default is returned."""
        assert declared_generation(inner_class) is None
        assert declared_generation(inner_class, UNDERSCORE) is UNDERSCORE

    def test_nested_class_inherits_enclosing_declaration(self):
        """A declaration on the enclosing class applies to nested classes."""
        # Arrange
        outer = ClassInfo(qualified_name="specs.Outer", generation=SENTENCES)
        inner = ClassInfo(qualified_name="specs.Outer.Inner", enclosing=outer)

        # Act
        result = declared_generation(inner)

        # Assert
        assert result is SENTENCES

    def test_nested_declaration_overrides_enclosing(self):
        """The closest declaration wins."""
        # Arrange
        outer = ClassInfo(qualified_name="specs.Outer", generation=SENTENCES)
        inner = ClassInfo(
            qualified_name="specs.Outer.Inner", enclosing=outer, generation=UNDERSCORE
        )
        innermost = ClassInfo(qualified_name="specs.Outer.Inner.Deep", enclosing=inner)

        # Act
        result = declared_generation(innermost)

        # Assert
        assert result is UNDERSCORE

    def test_generator_for_resolves_declaration(self):
        """generator_for() resolves the inherited declaration."""
        outer = ClassInfo(
            qualified_name="specs.Outer",
            generation=DisplayNameGeneration(style=Style.CAMEL_CASE),
        )
        assert generator_for(ClassInfo(qualified_name="specs.Outer.In", enclosing=outer)) is CAMEL_CASE

    def test_generator_for_undeclared_is_default(self, outer_class):
        """Undeclared classes use the DEFAULT generator."""
        assert generator_for(outer_class) is DEFAULT

    def test_missing_class_is_rejected(self):
        """A missing class cannot be searched for declarations."""
        with pytest.raises(InvalidInputError):
            declared_generation(None)


class TestDeclaredNames:
    """Tests for naming with declared generations."""

    @pytest.fixture
    def spec_classes(self):
        """a_stack (SENTENCES) containing when_empty."""
        top = ClassInfo(qualified_name="specs.a_stack", generation=SENTENCES)
        nested = ClassInfo(qualified_name="specs.a_stack.when_empty", enclosing=top)
        return top, nested

    def test_top_level_class_uses_class_operation(self, spec_classes):
        """Top-level classes are named by name_for_class."""
        top, _ = spec_classes
        assert display_name_for_class(top) == "a_stack"

    def test_nested_class_uses_nested_operation(self, spec_classes):
        """Nested classes are named by name_for_nested_class."""
        _, nested = spec_classes
        assert display_name_for_class(nested) == "when empty..."

    def test_method_uses_declaring_class_generation(self, spec_classes):
        """Methods use the generation inherited by their declaring class."""
        # Arrange
        _, nested = spec_classes
        method = MethodInfo(name="it_is_empty", declaring_class=nested)

        # Act
        result = display_name_for_method(method)

        # Assert
        assert result == "when empty it is empty."

    def test_undeclared_method_uses_default(self, add_method):
        """Methods of undeclared classes get DEFAULT names."""
        assert display_name_for_method(add_method) == "add(int, int)"

    def test_missing_method_is_rejected(self):
        """A missing method is rejected."""
        with pytest.raises(InvalidInputError, match="Test method must not be null"):
            display_name_for_method(None)
