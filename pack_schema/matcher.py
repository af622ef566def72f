"""
matcher.py - boolean conformance checks
=======================================

Public API
----------
conforms(schema, value, exact_keys) -> bool
    Recursive, short-circuiting check of *value* against *schema*.
conforms_permissive(schema, value) -> bool
    Extra keys on *value* are allowed.
conforms_exact(schema, value) -> bool
    Every key of *value* must also be a key of *schema* (a subset check,
    not equality: absent keys are read as ``None`` and handed to their
    predicate).  A non-mapping wherever a pack is applied fails exact
    mode, even when that pack is empty.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .errors import SchemaError
from .rules import Pack, compile_pack

__all__ = [
    "conforms",
    "conforms_permissive",
    "conforms_exact",
]


def _conforms(pack: Pack, value: Any, exact_keys: bool) -> bool:
    if not isinstance(value, Mapping):
        # exact: key extraction fails closed; permissive: only an empty
        # pack has nothing to report against a non-mapping
        return False if exact_keys else not pack

    if exact_keys and any(k not in pack for k in value):
        return False

    for key, rule in pack.items():
        if rule.nested:
            ok = _conforms(rule.pack, value.get(key), exact_keys)
        else:
            ok = rule.check(value.get(key))
        if not ok:
            return False
    return True


def conforms(schema: Mapping[Any, Any], value: Any, exact_keys: bool) -> bool:
    """Return ``True`` iff *value* satisfies every rule in *schema*."""
    if not isinstance(exact_keys, bool):
        raise SchemaError(f"exact_keys must be a bool, got {type(exact_keys).__name__}")
    return _conforms(compile_pack(schema), value, exact_keys)


def conforms_permissive(schema: Mapping[Any, Any], value: Any) -> bool:
    return conforms(schema, value, False)


def conforms_exact(schema: Mapping[Any, Any], value: Any) -> bool:
    return conforms(schema, value, True)
