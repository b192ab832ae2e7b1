"""Print the display names generated for the test classes of a module."""

from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import os
import sys
from typing import Iterator, Optional, Union

from pydantic import ValidationError

from .dispatch import declared_generation, name_for_class, name_for_method, name_for_nested_class
from .errors import DisplayNameError
from .introspection import class_info_for, enclosing_class_of, method_info_for
from .models import ClassInfo, DisplayNameGeneration, MethodInfo, Style
from .settings import get_settings

logger = logging.getLogger(__name__)

Entry = tuple[int, Union[ClassInfo, MethodInfo]]


def load_classes(target: str) -> list[type]:
    """
    Import a target of the form ``package.module`` or ``package.module:Class``.

    Returns:
        The named class, or every class defined in the module, in
        definition order
    """
    module_name, _, class_path = target.partition(":")
    module = importlib.import_module(module_name)

    if class_path:
        obj = module
        for part in class_path.split("."):
            obj = getattr(obj, part)
        if not isinstance(obj, type):
            raise TypeError(f"{target} is not a class")
        return [obj]

    return [
        value
        for value in vars(module).values()
        if isinstance(value, type)
        and value.__module__ == module.__name__
        and enclosing_class_of(value) is None
    ]


def collect_entries(cls: type, method_prefix: str = "test", depth: int = 0) -> Iterator[Entry]:
    """Yield the class, its test methods and its nested classes, depth first."""
    class_info = class_info_for(cls)
    yield depth, class_info

    for name, value in vars(cls).items():
        if name.startswith("_"):
            continue
        if inspect.isfunction(value) and name.startswith(method_prefix):
            yield depth + 1, method_info_for(value, class_info)
        elif isinstance(value, type) and enclosing_class_of(value) is cls:
            yield from collect_entries(value, method_prefix, depth + 1)


def name_entry(
    info: Union[ClassInfo, MethodInfo], generation: Optional[DisplayNameGeneration]
) -> str:
    """Display name of one entry under the given generation."""
    if isinstance(info, MethodInfo):
        return name_for_method(info, generation)
    if info.is_nested:
        return name_for_nested_class(info, generation)
    return name_for_class(info, generation)


def render_tree(entries: list[Entry], default: Optional[DisplayNameGeneration]) -> list[str]:
    """One indented line per entry, honoring each class's declared generation."""
    lines = []
    for depth, info in entries:
        owner = info.declaring_class if isinstance(info, MethodInfo) else info
        generation = declared_generation(owner, default)
        lines.append(f"{'  ' * depth}{name_entry(info, generation)}")
    return lines


def render_table(entries: list[Entry]) -> list[str]:
    """One column per built-in style, ignoring declarations."""
    rows = [
        [
            "  " * depth + name_entry(info, DisplayNameGeneration(style=style))
            for style in Style
        ]
        for depth, info in entries
    ]
    headers = [style.name for style in Style]
    widths = [
        max(len(row[index]) for row in [headers, *rows])
        for index in range(len(headers))
    ]

    def format_row(cells: list[str]) -> str:
        return " | ".join(f"{cell:<{width}}" for cell, width in zip(cells, widths)).rstrip()

    lines = [format_row(headers), "-+-".join("-" * width for width in widths)]
    lines.extend(format_row(row) for row in rows)
    return lines


def main(argv: Optional[list[str]] = None) -> None:
    """Main entry point for the display-names command."""
    parser = argparse.ArgumentParser(
        description="Print the display names generated for the test classes of a module"
    )
    parser.add_argument(
        "target",
        help="Module to inspect, optionally narrowed to a class: package.module[:Class]",
    )
    parser.add_argument(
        "-s", "--style",
        default=None,
        help="Style for classes that declare none (default, underscore, camel-case, sentences)",
    )
    parser.add_argument(
        "-g", "--generator",
        default=None,
        help="Custom generator for classes that declare none (package.module:Name)",
    )
    parser.add_argument(
        "-a", "--all-styles",
        action="store_true",
        help="Show every built-in style side by side",
    )
    parser.add_argument(
        "-p", "--method-prefix",
        default="test",
        help="Prefix of the methods to include (default: test; empty for all)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args(argv)
    try:
        settings = get_settings()
    except (DisplayNameError, ValidationError) as e:
        print(f"Error: Invalid configuration: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        logging.basicConfig(
            level=logging.DEBUG if args.verbose else settings.log_level,
            format="%(levelname)s %(name)s: %(message)s",
        )
    except ValueError as e:
        print(f"Error: Invalid configuration: {e}", file=sys.stderr)
        sys.exit(1)

    # Targets are usually local test modules
    if os.getcwd() not in sys.path:
        sys.path.insert(0, os.getcwd())

    try:
        classes = load_classes(args.target)
    except (ImportError, AttributeError, TypeError) as e:
        print(f"Error: Cannot load {args.target}: {e}", file=sys.stderr)
        sys.exit(1)

    if not classes:
        print(f"Error: No classes found in {args.target}", file=sys.stderr)
        sys.exit(1)

    entries = [entry for cls in classes for entry in collect_entries(cls, args.method_prefix)]
    logger.debug("Collected %d entries from %s", len(entries), args.target)

    try:
        if args.all_styles:
            lines = render_table(entries)
        else:
            if args.generator:
                default = DisplayNameGeneration(generator=args.generator)
            elif args.style:
                default = DisplayNameGeneration(style=Style.parse(args.style))
            else:
                default = settings.default_generation()
            lines = render_tree(entries, default)
    except DisplayNameError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    for line in lines:
        print(line)


if __name__ == "__main__":
    main()
