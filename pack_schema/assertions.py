"""
assertions.py - validate-and-pass-through helpers that can be switched off.

    user = validate(payload, schema=USER)       # returns payload or raises

    @checked(USER, exact=True)
    def load_user(...): ...

When :data:`pack_schema.config.settings` has ``validation_enabled=False``
both helpers become pure pass-throughs and no predicate is evaluated.
"""

from __future__ import annotations

import functools
import logging
from typing import Any, Callable, Mapping

from . import config
from .errors import SchemaError, ValidationError
from .explainer import explain, explained_conforms_exact, explained_conforms_permissive
from .report import flatten

__all__ = ["validate", "checked"]

log = logging.getLogger(__name__)


def _require_flag(exact: Any) -> None:
    if not isinstance(exact, bool):
        raise SchemaError(f"exact must be a bool, got {type(exact).__name__}")


def validate(
    value: Any,
    *,
    schema: Mapping[Any, Any],
    exact: bool = False,
    settings: config.Settings | None = None,
) -> Any:
    """Return *value* if it conforms to *schema*; raise otherwise.

    Raises
    ------
    ValidationError
        *value* does not conform.  ``exc.explanation`` holds the full diff.
    """
    _require_flag(exact)
    active = settings if settings is not None else config.settings
    if not active.validation_enabled:
        log.debug("validation disabled; passing value through")
        return value

    explanation = explain(schema, value)
    ok = explained_conforms_exact(explanation) if exact else explained_conforms_permissive(explanation)
    if ok:
        return value

    # permissive mode only reports what made it fail
    reported = explanation if exact else {"invalid": explanation["invalid"], "extra": []}
    problems = "\n".join(
        f"  {path}: {kind} {val!r}" for path, kind, val in flatten(reported)
    )
    raise ValidationError(f"value does not conform to schema:\n{problems}", explanation)


def checked(schema: Mapping[Any, Any], *, exact: bool = False) -> Callable:
    """Decorator validating the wrapped function's return value.

    If validation is disabled when the decorator is applied, the function
    is returned unwrapped.
    """
    _require_flag(exact)

    def decorate(fn: Callable) -> Callable:
        if not config.settings.validation_enabled:
            return fn

        @functools.wraps(fn)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            return validate(fn(*args, **kwargs), schema=schema, exact=exact)

        return wrapper

    return decorate
