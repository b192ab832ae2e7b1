"""Pytest hook that reports tests under their display names.

Load it from a ``conftest.py``::

    from display_names.pytest_plugin import pytest_collection_modifyitems

For each collected test, in order:

1. the first non-empty docstring line, when docstrings are enabled;
2. the generated name ``path::Class::Nested::method``, when the class chain
   declares a generation or a default is configured;
3. otherwise the node id is left as pytest built it.

Parametrize ids (``[...]``) are kept in both renamed forms.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from .dispatch import declared_generation, name_for_class, name_for_method, name_for_nested_class
from .introspection import class_info_for, method_info_for
from .models import ClassInfo, DisplayNameGeneration
from .settings import Settings, get_settings

logger = logging.getLogger(__name__)


def pytest_collection_modifyitems(items):
    """Rename collected test items to their display names."""
    settings = get_settings()
    for item in items:
        display_name = display_name_for_item(item, settings)
        if display_name:
            item._nodeid = display_name


def display_name_for_item(item: Any, settings: Optional[Settings] = None) -> Optional[str]:
    """Return the display name for a collected pytest item, or None to keep its node id."""
    if settings is None:
        settings = get_settings()

    function = getattr(item, "function", None)
    if function is None:
        return None

    parameter_part = _parameter_part(item)

    if settings.use_docstrings:
        summary = docstring_summary(function)
        if summary:
            return summary + parameter_part

    default = settings.default_generation()
    cls = getattr(item, "cls", None)
    if cls is not None:
        declaring_class = class_info_for(cls)
    else:
        declaring_class = ClassInfo(qualified_name=item.module.__name__)

    generation = declared_generation(declaring_class, default)
    if generation is None:
        return None

    segments = [item.nodeid.split("::")[0]]
    if cls is not None:
        segments.extend(_class_segments(declaring_class, default))
    segments.append(name_for_method(method_info_for(function, declaring_class), generation))

    logger.debug("Renaming %s to %s", item.nodeid, segments[-1])
    return "::".join(segments) + parameter_part


def docstring_summary(function: Any) -> Optional[str]:
    """First non-empty line of a function docstring."""
    doc = getattr(function, "__doc__", None)
    if not doc:
        return None
    return next(
        (line.strip() for line in doc.strip().splitlines() if line.strip()),
        None,
    )


def _class_segments(
    class_info: ClassInfo, default: Optional[DisplayNameGeneration]
) -> list[str]:
    """Display names of the class chain, outermost first."""
    segments = []
    current: Optional[ClassInfo] = class_info
    while current is not None:
        generation = declared_generation(current, default)
        if current.is_nested:
            segments.insert(0, name_for_nested_class(current, generation))
        else:
            segments.insert(0, name_for_class(current, generation))
        current = current.enclosing
    return segments


def _parameter_part(item: Any) -> str:
    # For parameterized tests, preserve parameter id from the original nodeid
    if not hasattr(item, "callspec"):
        return ""
    start = item.nodeid.find("[")
    return item.nodeid[start:] if start != -1 else ""
