"""Camel case generator: default names split at camel case boundaries."""

from ..models import ClassInfo, MethodInfo, Style
from ..transforms import split_camel_case_boundaries
from .default import DEFAULT
from .registry import register_generator


class CamelCaseGenerator:
    """
    Generator for the CAMEL_CASE style.

    Splits the DEFAULT name before acronym-to-word transitions, before
    upper case letters that follow anything else, and between letters and
    non-letters. ``shouldParseHTTPResponse2`` becomes
    ``should Parse HTTP Response 2``.
    """

    style = Style.CAMEL_CASE

    def name_for_class(self, class_info: ClassInfo) -> str:
        return split_camel_case_boundaries(DEFAULT.name_for_class(class_info))

    def name_for_nested_class(self, class_info: ClassInfo) -> str:
        return split_camel_case_boundaries(DEFAULT.name_for_nested_class(class_info))

    def name_for_method(self, method_info: MethodInfo) -> str:
        return split_camel_case_boundaries(DEFAULT.name_for_method(method_info))


CAMEL_CASE = CamelCaseGenerator()
register_generator(Style.CAMEL_CASE, CAMEL_CASE)
