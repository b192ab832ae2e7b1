"""Exception hierarchy for display name generation.

Errors are raised where they are detected and propagate to the caller of the
generation or resolution call. Host adapters (the CLI) turn them into a
message and an exit status.
"""

from __future__ import annotations


class DisplayNameError(Exception):
    """Base exception for the whole package."""


# ── Input validation ────────────────────────────────────────────────────────


class InvalidInputError(DisplayNameError, ValueError):
    """A required class or method view was missing."""


# ── Strategy resolution ─────────────────────────────────────────────────────


class ConfigurationError(DisplayNameError):
    """A declared style or custom generator could not be resolved."""


# ── Generator output ────────────────────────────────────────────────────────


class InvalidDisplayNameError(DisplayNameError):
    """A generator returned something other than a non-empty string."""
