"""Pydantic models describing the entities that receive display names."""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .errors import ConfigurationError
from .transforms import simple_name_of


class Style(str, Enum):
    """Built-in display name generation styles."""

    DEFAULT = "DEFAULT"
    UNDERSCORE = "UNDERSCORE"
    CAMEL_CASE = "CAMEL_CASE"
    SENTENCES = "SENTENCES"

    @classmethod
    def parse(cls, text: str) -> Style:
        """
        Parse a style from user supplied text.

        Matching ignores case and accepts dashes for underscores, so
        ``camel-case`` and ``CAMEL_CASE`` name the same style.

        Raises:
            ConfigurationError: If the text names no built-in style
        """
        key = text.strip().upper().replace("-", "_")
        try:
            return cls[key]
        except KeyError:
            choices = ", ".join(style.name for style in cls)
            raise ConfigurationError(
                f"Unknown display name style '{text}'. Expected one of: {choices}"
            ) from None


class DisplayNameGeneration(BaseModel):
    """Declaration of how names are generated for a test grouping."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    style: Style = Style.DEFAULT
    """Built-in style, used when no custom generator is declared."""
    generator: Any = None
    """Custom generator: a class, an instance, or an import path string."""

    @property
    def is_custom(self) -> bool:
        return self.generator is not None


class ClassInfo(BaseModel):
    """Read-only view of a test class."""

    model_config = ConfigDict(frozen=True)

    qualified_name: str = Field(min_length=1)
    """Dot-separated qualified name (e.g., 'tests.test_math.TestAdd')."""
    simple_name: str = Field(min_length=1)
    """Last segment of the qualified name; derived when omitted."""
    enclosing: Optional[ClassInfo] = None
    """Class this one is nested in, None for top-level classes."""
    generation: Optional[DisplayNameGeneration] = None
    """Generation declared directly on this class, if any."""

    @model_validator(mode="before")
    @classmethod
    def _derive_simple_name(cls, data: Any) -> Any:
        if (
            isinstance(data, dict)
            and "simple_name" not in data
            and isinstance(data.get("qualified_name"), str)
        ):
            data = {**data, "simple_name": simple_name_of(data["qualified_name"])}
        return data

    @field_validator("qualified_name")
    @classmethod
    def _require_last_segment(cls, value: str) -> str:
        if not simple_name_of(value):
            raise ValueError(f"Qualified name '{value}' has an empty last segment")
        return value

    @property
    def is_nested(self) -> bool:
        return self.enclosing is not None


class MethodInfo(BaseModel):
    """Read-only view of a test method."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    """Simple method name."""
    declaring_class: ClassInfo
    """Class that declares the method."""
    parameter_types: tuple[str, ...] = ()
    """Simple names of the parameter types, in declaration order."""
