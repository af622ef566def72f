"""
explainer.py - path-annotated diagnostics for a pack
====================================================

Unlike :mod:`pack_schema.matcher`, which stops at the first failure, the
explainer walks the whole pack and collects *every* violation into an
*explanation*::

    {"invalid": [(key, observed_value_or_nested_list), ...],
     "extra":   [(key, value_or_nested_list), ...]}

Nesting mirrors the pack: a failing sub-pack contributes
``(key, sub_invalid)`` / ``(key, sub_extra)`` rather than the raw value.

Public API
----------
explain(schema, value) -> dict
is_valid_explanation(explanation) -> bool
explained_conforms_permissive(explanation) -> bool
explained_conforms_exact(explanation) -> bool
explain_conforms(schema, value) / explain_conforms_exact(schema, value)
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .errors import SchemaError
from .matcher import conforms
from .predicates import is_sequence
from .rules import Pack, compile_pack

__all__ = [
    "NestedEntries",
    "EXPLANATION_PACK",
    "explain",
    "is_valid_explanation",
    "explained_conforms_permissive",
    "explained_conforms_exact",
    "explain_conforms",
    "explain_conforms_exact",
]

class NestedEntries(list):
    """A sub-pack's entries inside an explanation.

    Compares equal to a plain list; the type only tells a nested entry
    list apart from an observed value that happens to be a list.
    """


# The explanation's own shape, checked with the engine itself.
EXPLANATION_PACK = compile_pack({"invalid": is_sequence, "extra": is_sequence})

# --------------------------------------------------------------------------- #
# Core recursive explainer                                                    #
# --------------------------------------------------------------------------- #

def _explain(pack: Pack, value: Any) -> dict[str, list]:
    if not isinstance(value, Mapping):
        return {"invalid": [(key, None) for key in pack], "extra": []}

    invalid: list = []
    nested_extra: list = []
    for key, rule in pack.items():
        observed = value.get(key)
        if rule.nested:
            sub = _explain(rule.pack, observed)
            if sub["invalid"]:
                invalid.append((key, NestedEntries(sub["invalid"])))
            if sub["extra"]:
                nested_extra.append((key, NestedEntries(sub["extra"])))
        elif not rule.check(observed):
            invalid.append((key, observed))

    root_extra = [(key, v) for key, v in value.items() if key not in pack]
    return {"invalid": invalid, "extra": root_extra + nested_extra}


def explain(schema: Mapping[Any, Any], value: Any) -> dict[str, list]:
    """Return the full explanation of how *value* deviates from *schema*.

    ``invalid`` follows schema key order; ``extra`` lists this level's
    unexpected keys in *value* order, followed by any nested extras.
    """
    return _explain(compile_pack(schema), value)


# --------------------------------------------------------------------------- #
# Checks over an already computed explanation                                 #
# --------------------------------------------------------------------------- #

def is_valid_explanation(explanation: Any) -> bool:
    """True iff *explanation* has exactly the two sequence fields."""
    return conforms(EXPLANATION_PACK, explanation, True)


def _require_explanation(explanation: Any) -> None:
    if not is_valid_explanation(explanation):
        raise SchemaError(
            f"not an explanation (expected exactly 'invalid' and 'extra' sequences): {explanation!r}"
        )


def explained_conforms_permissive(explanation: Mapping[str, Any]) -> bool:
    _require_explanation(explanation)
    return not explanation["invalid"]


def explained_conforms_exact(explanation: Mapping[str, Any]) -> bool:
    _require_explanation(explanation)
    return not explanation["invalid"] and not explanation["extra"]


def explain_conforms(schema: Mapping[Any, Any], value: Any) -> bool:
    return explained_conforms_permissive(explain(schema, value))


def explain_conforms_exact(schema: Mapping[Any, Any], value: Any) -> bool:
    return explained_conforms_exact(explain(schema, value))
