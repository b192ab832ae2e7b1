"""Base protocol for display name generators."""

from typing import Protocol

from ..errors import InvalidInputError
from ..models import ClassInfo, MethodInfo

GENERATOR_OPERATIONS = ("name_for_class", "name_for_nested_class", "name_for_method")


class DisplayNameGenerator(Protocol):
    """Protocol for display name generators."""

    def name_for_class(self, class_info: ClassInfo) -> str:
        """
        Generate the display name of a top-level test class.

        Args:
            class_info: View of the test class

        Returns:
            Non-empty display name
        """
        ...

    def name_for_nested_class(self, class_info: ClassInfo) -> str:
        """
        Generate the display name of a test class nested in another one.

        Args:
            class_info: View of the nested class

        Returns:
            Non-empty display name
        """
        ...

    def name_for_method(self, method_info: MethodInfo) -> str:
        """
        Generate the display name of a test method.

        Args:
            method_info: View of the method, including its declaring class

        Returns:
            Non-empty display name
        """
        ...


def require(value, message: str):
    """Return value, raising InvalidInputError when it is None."""
    if value is None:
        raise InvalidInputError(message)
    return value
