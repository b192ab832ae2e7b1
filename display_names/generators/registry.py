"""Style registry and generator resolution."""

import importlib
import logging
from typing import Any, Optional

from ..errors import ConfigurationError
from ..models import DisplayNameGeneration, Style
from .base import GENERATOR_OPERATIONS, DisplayNameGenerator

logger = logging.getLogger(__name__)

_registered_generators: dict[Style, DisplayNameGenerator] = {}


def register_generator(style: Style, generator: DisplayNameGenerator) -> None:
    """Register the generator used for a built-in style."""
    _registered_generators[style] = generator


def get_registered_generators() -> dict[Style, DisplayNameGenerator]:
    """Get a copy of the style to generator table."""
    return _registered_generators.copy()


def get_generator(style: Optional[Style] = None) -> DisplayNameGenerator:
    """
    Look up the generator registered for a style.

    Args:
        style: Built-in style, None meaning DEFAULT

    Returns:
        The registered generator

    Raises:
        ConfigurationError: If no generator is registered for the style
    """
    if style is None:
        style = Style.DEFAULT
    try:
        return _registered_generators[style]
    except KeyError:
        logger.error("No generator registered for style %s", style.name)
        raise ConfigurationError(
            f"No display name generator registered for style {style.name}"
        ) from None


def resolve_generator(
    generation: Optional[DisplayNameGeneration] = None,
) -> DisplayNameGenerator:
    """
    Resolve a generation declaration to a generator.

    A declared custom generator takes precedence over the declared style.
    No declaration resolves to the DEFAULT style.

    Raises:
        ConfigurationError: If the custom generator cannot be loaded or built
    """
    if generation is None:
        return get_generator(Style.DEFAULT)
    if generation.is_custom:
        return load_custom_generator(generation.generator)
    logger.debug("Resolved display name style %s", generation.style.name)
    return get_generator(generation.style)


def load_custom_generator(reference: Any) -> DisplayNameGenerator:
    """
    Build a custom generator from a class, an instance or an import path.

    Import paths may use either ``package.module:Name`` or
    ``package.module.Name``. Classes are instantiated without arguments.

    Raises:
        ConfigurationError: If the reference cannot be imported or
            instantiated, or the result lacks a generator operation
    """
    target = _import_reference(reference) if isinstance(reference, str) else reference

    if isinstance(target, type):
        try:
            generator = target()
        except Exception as e:
            logger.error("Failed to instantiate generator %s: %s", target.__qualname__, e)
            raise ConfigurationError(
                f"Cannot instantiate display name generator {target.__qualname__}: {e}"
            ) from e
    else:
        generator = target

    missing = [
        operation
        for operation in GENERATOR_OPERATIONS
        if not callable(getattr(generator, operation, None))
    ]
    if missing:
        logger.error("Generator %r is missing operations %s", generator, missing)
        raise ConfigurationError(
            f"{generator!r} is not a display name generator; "
            f"missing: {', '.join(missing)}"
        )

    logger.debug("Resolved custom display name generator %r", generator)
    return generator


def _import_reference(path: str) -> Any:
    """Import the object named by ``module:attribute`` or ``module.attribute``."""
    if ":" in path:
        module_name, _, attribute = path.partition(":")
    else:
        module_name, _, attribute = path.rpartition(".")

    if not module_name or not attribute:
        logger.error("Invalid generator reference %r", path)
        raise ConfigurationError(f"Invalid display name generator reference '{path}'")

    # Module bodies may raise anything while importing
    try:
        module = importlib.import_module(module_name)
    except Exception as e:
        logger.error("Failed to import generator module %s: %s", module_name, e)
        raise ConfigurationError(
            f"Cannot import display name generator module '{module_name}': {e}"
        ) from e

    target = module
    for part in attribute.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as e:
            logger.error("Generator %s not found in %s", attribute, module_name)
            raise ConfigurationError(
                f"Module '{module_name}' has no display name generator '{attribute}'"
            ) from e
    return target
