"""Sentences generator: nested classes and methods read as one sentence."""

from ..models import ClassInfo, MethodInfo, Style
from ..transforms import replace_underscores_with_spaces
from .base import require
from .default import DEFAULT
from .registry import register_generator

ELLIPSIS = "..."


class SentencesGenerator:
    """
    Generator for the SENTENCES style.

    A method ``it_returns_zero`` declared in ``when_empty`` nested in
    ``A_stack`` (top-level) reads ``when empty it returns zero.``, while the
    nested class itself reads ``when empty...``.
    """

    style = Style.SENTENCES

    def name_for_class(self, class_info: ClassInfo) -> str:
        return DEFAULT.name_for_class(class_info)

    def name_for_nested_class(self, class_info: ClassInfo) -> str:
        require(class_info, "Nested test class must not be null")
        return replace_underscores_with_spaces(class_info.simple_name) + ELLIPSIS

    def name_for_method(self, method_info: MethodInfo) -> str:
        require(method_info, "Test method must not be null")

        # Outermost class is not part of the sentence
        segments = []
        current = method_info.declaring_class
        while current.enclosing is not None:
            segments.insert(0, current.simple_name)
            current = current.enclosing

        segments.append(method_info.name + ".")
        return replace_underscores_with_spaces(" ".join(segments))


SENTENCES = SentencesGenerator()
register_generator(Style.SENTENCES, SENTENCES)
