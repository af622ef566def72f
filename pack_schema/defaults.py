"""
defaults.py - build a pack and its default values from one source mapping.

A *defaults source* pairs every rule with a default value::

    AGE_COLOR = {
        "age":   [is_number, 0],
        "color": [is_one_of(["red", "blue"]), "blue"],
    }
    schema, defaults = build_with_defaults(AGE_COLOR, name="AGE_COLOR")

The derived defaults are checked against the derived schema (exact mode)
before anything is returned, so a default that violates its own rule
fails at definition time instead of at first use.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping
from typing import Any, Tuple

from .errors import ConfigurationError, SchemaError
from .explainer import explain
from .matcher import conforms
from .report import flatten
from .rules import compile_pack

__all__ = [
    "build_with_defaults",
    "with_defaults",
]

log = logging.getLogger(__name__)


def build_with_defaults(
    source: Mapping[Any, Any], name: str = "defaults"
) -> Tuple[dict[Any, Any], dict[Any, Any]]:
    """Split *source* into ``(schema, defaults)`` and self-check the result.

    Raises
    ------
    SchemaError
        *source* is not a mapping, or an entry is not a ``(rule, default)`` pair.
    ConfigurationError
        The defaults do not exactly conform to the schema.
    """
    if not isinstance(source, Mapping):
        raise SchemaError(f"{name}: defaults source must be a mapping, got {type(source).__name__}")

    schema: dict[Any, Any] = {}
    defaults: dict[Any, Any] = {}
    for key, pair in source.items():
        if not isinstance(pair, (list, tuple)) or len(pair) != 2:
            raise SchemaError(f"{name}.{key}: expected a (rule, default) pair, got {pair!r}")
        schema[key], defaults[key] = pair

    compile_pack(schema)  # malformed rules surface as SchemaError here

    if not conforms(schema, defaults, True):
        problems = "; ".join(
            f"{path}: {kind} {value!r}"
            for path, kind, value in flatten(explain(schema, defaults), root=name)
        )
        raise ConfigurationError(f"{name}: defaults do not conform to their own schema ({problems})")

    log.debug("built defaults pack %s with keys %s", name, list(schema))
    return schema, defaults


def with_defaults(value: Mapping[Any, Any], defaults: Mapping[Any, Any]) -> dict[Any, Any]:
    """Return a new dict: *defaults* overlaid by *value*.  Inputs are not mutated."""
    out = copy.deepcopy(dict(defaults))
    out.update(value)
    return out
