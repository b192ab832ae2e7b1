"""Build class and method views from live Python objects.

Python classes do not know the class they are nested in, so the enclosing
class is found by following ``__qualname__`` through the defining module.
Classes defined inside function bodies are treated as top-level.
"""

from __future__ import annotations

import inspect
import sys
from typing import Any, Callable, Optional, Union

from .models import ClassInfo, DisplayNameGeneration, MethodInfo, Style
from .transforms import simple_name_of

DECLARATION_ATTRIBUTE = "__display_name_generation__"
UNANNOTATED_TYPE = "Any"


def display_name_generation(
    style: Union[Style, str] = Style.DEFAULT, generator: Any = None
) -> Callable[[type], type]:
    """
    Class decorator declaring how display names are generated for a test class.

    The declaration also applies to classes nested inside the decorated one,
    unless they declare their own. Subclasses do not inherit it.

    Example:
        @display_name_generation(Style.SENTENCES)
        class A_stack:
            class when_empty:
                def it_returns_zero(self): ...
    """
    if isinstance(style, str) and not isinstance(style, Style):
        style = Style.parse(style)
    generation = DisplayNameGeneration(style=style, generator=generator)

    def decorate(cls: type) -> type:
        setattr(cls, DECLARATION_ATTRIBUTE, generation)
        return cls

    return decorate


def declared_on(cls: type) -> Optional[DisplayNameGeneration]:
    """Return the declaration made directly on the class, ignoring base classes."""
    return cls.__dict__.get(DECLARATION_ATTRIBUTE)


def enclosing_class_of(cls: type) -> Optional[type]:
    """Return the class the given class is nested in, or None."""
    parts = cls.__qualname__.split(".")
    if len(parts) < 2 or "<locals>" in parts:
        return None

    target: Any = sys.modules.get(cls.__module__)
    for part in parts[:-1]:
        target = getattr(target, part, None)
        if target is None:
            return None
    return target if isinstance(target, type) else None


def class_info_for(cls: type) -> ClassInfo:
    """Build the view of a class, including its chain of enclosing classes."""
    enclosing = enclosing_class_of(cls)
    return ClassInfo(
        qualified_name=f"{cls.__module__}.{cls.__qualname__}",
        simple_name=cls.__name__,
        enclosing=class_info_for(enclosing) if enclosing is not None else None,
        generation=declared_on(cls),
    )


def method_info_for(function: Callable[..., Any], declaring_class: ClassInfo) -> MethodInfo:
    """
    Build the view of a method.

    Parameter types are the simple names of the annotations of every
    parameter except ``self`` and ``cls``; unannotated parameters are
    reported as ``Any``.
    """
    parameters = [
        parameter
        for parameter in inspect.signature(function).parameters.values()
        if parameter.name not in ("self", "cls")
    ]
    return MethodInfo(
        name=function.__name__,
        declaring_class=declaring_class,
        parameter_types=tuple(type_name_of(p.annotation) for p in parameters),
    )


def type_name_of(annotation: Any) -> str:
    """Simple name of a parameter annotation."""
    if annotation is inspect.Parameter.empty:
        return UNANNOTATED_TYPE
    if isinstance(annotation, str):
        return _origin_name(annotation)
    name = getattr(annotation, "__name__", None)
    if name:
        return name
    return _origin_name(str(annotation))


def _origin_name(text: str) -> str:
    # Generic arguments are dropped: 'Optional[pathlib.Path]' -> 'Optional'
    return simple_name_of(text.partition("[")[0].strip())
