"""
rules.py - the pack (schema) model
==================================

A *pack* is a mapping from key to *rule*.  Callers write packs as ordinary
nested dicts whose values are either callables (predicates) or further
mappings (nested packs).  Before walking a value the engine compiles that
raw mapping into a :class:`Pack` of tagged rules so the recursion can
dispatch on ``rule.nested`` instead of re-inspecting types at every level.

Public API
----------
Predicate, Nested
    The two rule variants.
to_rule(raw) -> Rule
    Normalise a single raw rule.
compile_pack(schema) -> Pack
    Normalise a whole (nested) pack.  Idempotent on a compiled ``Pack``.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Callable, Iterator

from .errors import SchemaError

__all__ = [
    "Rule",
    "Predicate",
    "Nested",
    "Pack",
    "to_rule",
    "compile_pack",
]

log = logging.getLogger(__name__)

# --------------------------------------------------------------------------- #
# Rule variants                                                               #
# --------------------------------------------------------------------------- #

class Rule:
    """Common base of the two rule variants."""

    __slots__ = ()
    nested: bool = False


class Predicate(Rule):
    """A leaf rule wrapping a unary, boolean-coercible function."""

    __slots__ = ("fn",)
    nested = False

    def __init__(self, fn: Callable[[Any], Any]):
        self.fn = fn

    def check(self, value: Any) -> bool:
        """Apply the predicate; anything it raises counts as ``False``."""
        try:
            return bool(self.fn(value))
        except Exception as exc:
            log.debug("predicate %r raised %s on %r", self.fn, type(exc).__name__, value)
            return False

    def __repr__(self) -> str:
        return f"Predicate({self.fn!r})"


class Nested(Rule):
    """A rule that applies a sub-pack to the value found at its key."""

    __slots__ = ("pack",)
    nested = True

    def __init__(self, pack: "Pack"):
        self.pack = pack

    def __repr__(self) -> str:
        return f"Nested({self.pack!r})"


# --------------------------------------------------------------------------- #
# Compiled pack                                                               #
# --------------------------------------------------------------------------- #

class Pack(Mapping):
    """Read-only mapping of key -> :class:`Rule`, in schema order."""

    __slots__ = ("_rules",)

    def __init__(self, rules: dict[Any, Rule]):
        self._rules = rules

    def __getitem__(self, key: Any) -> Rule:
        return self._rules[key]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"Pack({self._rules!r})"


def to_rule(raw: Any) -> Rule:
    """Return the tagged :class:`Rule` for one raw schema value."""
    if isinstance(raw, Rule):
        return raw
    if isinstance(raw, Mapping):
        return Nested(compile_pack(raw))
    if callable(raw):
        return Predicate(raw)
    raise SchemaError(
        f"rule must be a predicate or a nested mapping, got {type(raw).__name__}"
    )


def compile_pack(schema: Any) -> Pack:
    """Compile a raw (possibly nested) mapping into a :class:`Pack`.

    The input is never mutated.  Passing an already compiled ``Pack``
    returns it unchanged.
    """
    if isinstance(schema, Pack):
        return schema
    if not isinstance(schema, Mapping):
        raise SchemaError(f"schema must be a mapping, got {type(schema).__name__}")
    return Pack({key: to_rule(raw) for key, raw in schema.items()})
