"""Underscore generator: default names with underscores read as spaces."""

from ..models import ClassInfo, MethodInfo, Style
from ..transforms import replace_underscores_with_spaces
from .default import DEFAULT
from .registry import register_generator


class UnderscoreGenerator:
    """Generator for the UNDERSCORE style (``my_test_class`` -> ``my test class``)."""

    style = Style.UNDERSCORE

    def name_for_class(self, class_info: ClassInfo) -> str:
        return replace_underscores_with_spaces(DEFAULT.name_for_class(class_info))

    def name_for_nested_class(self, class_info: ClassInfo) -> str:
        return replace_underscores_with_spaces(DEFAULT.name_for_nested_class(class_info))

    def name_for_method(self, method_info: MethodInfo) -> str:
        return replace_underscores_with_spaces(DEFAULT.name_for_method(method_info))


UNDERSCORE = UnderscoreGenerator()
register_generator(Style.UNDERSCORE, UNDERSCORE)
