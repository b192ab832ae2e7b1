"""Display name generation entry points.

Two ways to name an entity:

* ``name_for_class`` / ``name_for_nested_class`` / ``name_for_method`` take an
  explicit generation declaration (None meaning the DEFAULT style).
* ``display_name_for_class`` / ``display_name_for_method`` use the declaration
  found on the class or inherited from an enclosing class.

Every call validates its input, resolves the generator, and checks that the
generator produced a non-empty string.
"""

from __future__ import annotations

import logging
from typing import Optional

from .errors import InvalidDisplayNameError
from .generators import resolve_generator
from .generators.base import DisplayNameGenerator, require
from .models import ClassInfo, DisplayNameGeneration, MethodInfo

logger = logging.getLogger(__name__)


def declared_generation(
    class_info: ClassInfo, default: Optional[DisplayNameGeneration] = None
) -> Optional[DisplayNameGeneration]:
    """
    Return the generation declared on the class or its nearest enclosing class.

    Args:
        class_info: Class to start from
        default: Returned when nothing in the chain declares a generation

    Returns:
        The closest declaration, or ``default``
    """
    current: Optional[ClassInfo] = require(class_info, "Test class must not be null")
    while current is not None:
        if current.generation is not None:
            return current.generation
        current = current.enclosing
    return default


def generator_for(class_info: ClassInfo) -> DisplayNameGenerator:
    """Resolve the generator that applies to a class."""
    return resolve_generator(declared_generation(class_info))


def name_for_class(
    class_info: ClassInfo, generation: Optional[DisplayNameGeneration] = None
) -> str:
    require(class_info, "Test class must not be null")
    generator = resolve_generator(generation)
    return _checked(generator.name_for_class(class_info), generator, "name_for_class")


def name_for_nested_class(
    class_info: ClassInfo, generation: Optional[DisplayNameGeneration] = None
) -> str:
    require(class_info, "Nested test class must not be null")
    generator = resolve_generator(generation)
    return _checked(
        generator.name_for_nested_class(class_info), generator, "name_for_nested_class"
    )


def name_for_method(
    method_info: MethodInfo, generation: Optional[DisplayNameGeneration] = None
) -> str:
    require(method_info, "Test method must not be null")
    generator = resolve_generator(generation)
    return _checked(generator.name_for_method(method_info), generator, "name_for_method")


def display_name_for_class(class_info: ClassInfo) -> str:
    """
    Name a class with the generation it declares or inherits.

    Nested classes go through ``name_for_nested_class``, top-level classes
    through ``name_for_class``.
    """
    generation = declared_generation(class_info)
    if class_info.is_nested:
        return name_for_nested_class(class_info, generation)
    return name_for_class(class_info, generation)


def display_name_for_method(method_info: MethodInfo) -> str:
    """Name a method with the generation its declaring class declares or inherits."""
    require(method_info, "Test method must not be null")
    return name_for_method(method_info, declared_generation(method_info.declaring_class))


def _checked(name: object, generator: DisplayNameGenerator, operation: str) -> str:
    if not isinstance(name, str) or not name:
        logger.error("%r.%s returned %r", generator, operation, name)
        raise InvalidDisplayNameError(
            f"{type(generator).__name__}.{operation} must return a non-empty string, "
            f"got {name!r}"
        )
    return name
