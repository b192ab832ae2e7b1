"""Display name generators with a style registry."""

from .base import DisplayNameGenerator
from .registry import (
    get_generator,
    get_registered_generators,
    load_custom_generator,
    register_generator,
    resolve_generator,
)

# Import built-in generators to trigger registration
from .default import DEFAULT, DefaultGenerator
from .underscore import UNDERSCORE, UnderscoreGenerator
from .camel_case import CAMEL_CASE, CamelCaseGenerator
from .sentences import SENTENCES, SentencesGenerator

__all__ = [
    "DisplayNameGenerator",
    "get_generator",
    "get_registered_generators",
    "load_custom_generator",
    "register_generator",
    "resolve_generator",
    "DEFAULT",
    "DefaultGenerator",
    "UNDERSCORE",
    "UnderscoreGenerator",
    "CAMEL_CASE",
    "CamelCaseGenerator",
    "SENTENCES",
    "SentencesGenerator",
]
