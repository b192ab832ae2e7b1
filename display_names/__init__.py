"""Human-readable display names for test classes and methods."""

from .dispatch import (
    declared_generation,
    display_name_for_class,
    display_name_for_method,
    generator_for,
    name_for_class,
    name_for_method,
    name_for_nested_class,
)
from .errors import (
    ConfigurationError,
    DisplayNameError,
    InvalidDisplayNameError,
    InvalidInputError,
)
from .generators import DisplayNameGenerator, get_generator, resolve_generator
from .introspection import class_info_for, display_name_generation, method_info_for
from .models import ClassInfo, DisplayNameGeneration, MethodInfo, Style

__version__ = "0.1.0"

__all__ = [
    "ClassInfo",
    "ConfigurationError",
    "DisplayNameError",
    "DisplayNameGeneration",
    "DisplayNameGenerator",
    "InvalidDisplayNameError",
    "InvalidInputError",
    "MethodInfo",
    "Style",
    "class_info_for",
    "declared_generation",
    "display_name_for_class",
    "display_name_for_method",
    "display_name_generation",
    "generator_for",
    "get_generator",
    "method_info_for",
    "name_for_class",
    "name_for_method",
    "name_for_nested_class",
    "resolve_generator",
]
