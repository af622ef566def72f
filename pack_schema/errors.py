"""
errors.py - exception hierarchy shared by every pack_schema module.

Contract violations (malformed schemas, flags or explanations) fail fast
with :class:`SchemaError`.  Predicate failures are *never* raised; they
degrade to "does not match" inside the matcher / explainer.
"""

from __future__ import annotations

from typing import Any, Mapping

__all__ = [
    "SchemaError",
    "ConfigurationError",
    "ValidationError",
]


class SchemaError(ValueError):
    """Raised when a caller violates an API contract."""


class ConfigurationError(SchemaError):
    """Raised when a defaults pack fails its own build-time self-check."""


class ValidationError(SchemaError):
    """Raised by :func:`pack_schema.assertions.validate` on a non-conforming value."""

    def __init__(self, message: str, explanation: Mapping[str, Any]):
        super().__init__(message)
        self.explanation = explanation
