"""Default generator: names as they appear in the source."""

from ..models import ClassInfo, MethodInfo, Style
from ..transforms import format_method_signature, simple_name_of
from .base import require
from .registry import register_generator


class DefaultGenerator:
    """Generator for the DEFAULT style."""

    style = Style.DEFAULT

    def name_for_class(self, class_info: ClassInfo) -> str:
        """Simple name taken from the qualified class name."""
        require(class_info, "Test class must not be null")
        return simple_name_of(class_info.qualified_name)

    def name_for_nested_class(self, class_info: ClassInfo) -> str:
        require(class_info, "Nested test class must not be null")
        return class_info.simple_name

    def name_for_method(self, method_info: MethodInfo) -> str:
        """Method name followed by its parameter types, e.g. ``add(int, int)``."""
        require(method_info, "Test method must not be null")
        return format_method_signature(method_info.name, method_info.parameter_types)


DEFAULT = DefaultGenerator()
register_generator(Style.DEFAULT, DEFAULT)
