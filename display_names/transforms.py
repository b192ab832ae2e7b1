"""String transformation rules used by the display name generators."""

import re
from collections.abc import Iterable

# Boundaries: acronym-to-word, lower-to-upper, letter-to-non-letter.
# The alternatives are zero-width, so a position matching more than one
# of them still receives a single space.
CAMEL_CASE_BOUNDARY = re.compile(
    "|".join(
        (
            r"(?<=[A-Z])(?=[A-Z][a-z])",
            r"(?<=[^A-Z])(?=[A-Z])",
            r"(?<=[A-Za-z])(?=[^A-Za-z])",
        )
    )
)


def simple_name_of(qualified_name: str) -> str:
    """Return the last dot-separated segment of a qualified name."""
    return qualified_name[qualified_name.rfind(".") + 1 :]


def replace_underscores_with_spaces(name: str) -> str:
    """Replace every underscore with a single space."""
    return name.replace("_", " ")


def split_camel_case_boundaries(name: str) -> str:
    """
    Insert a space at every camel case boundary of an identifier.

    Examples:
        fooBar -> foo Bar
        ABCdef -> AB Cdef
        foo2   -> foo 2
    """
    return CAMEL_CASE_BOUNDARY.sub(" ", name)


def format_method_signature(name: str, parameter_types: Iterable[str]) -> str:
    """Render ``name(T1, T2)``; no parameters gives ``name()``."""
    return f"{name}({', '.join(parameter_types)})"
