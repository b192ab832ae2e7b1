"""Pytest configuration for human-readable test names.

Test items are renamed by the package's own pytest hook: docstring summaries
first, then generated display names for classes that declare a generation.
"""

import pytest

from display_names.models import ClassInfo, MethodInfo
from display_names.pytest_plugin import pytest_collection_modifyitems  # noqa: F401
from display_names.settings import get_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    """Reload settings from the environment for every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def outer_class():
    """Top-level class view 'tests.test_stack.Outer'."""
    return ClassInfo(qualified_name="tests.test_stack.Outer")


@pytest.fixture
def inner_class(outer_class):
    """Class view 'Inner' nested in Outer."""
    return ClassInfo(qualified_name="tests.test_stack.Outer.Inner", enclosing=outer_class)


@pytest.fixture
def add_method(outer_class):
    """Method view add(int, int) declared in Outer."""
    return MethodInfo(name="add", declaring_class=outer_class, parameter_types=("int", "int"))
