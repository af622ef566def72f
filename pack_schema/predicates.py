"""
predicates.py - a small library of ready-made rules for packs.

Every function here returns a strict ``bool`` and never raises on
wrongly shaped input, so they are safe to use as leaf rules or inside
other predicates (``all_count(2, is_string, ...)``).

Factories (``is_one_of``, ``is_type``, ``optional``, ``both``, ``either``)
return a new predicate; the plain checks are used as-is.
"""

from __future__ import annotations

import datetime as _dt
import re
from collections.abc import Iterable as _Iterable, Mapping, Sized
from typing import Any, Callable, Iterable, Tuple, Union

import pandas as pd

__all__ = [
    "is_bool",
    "is_string",
    "is_number",
    "is_integer",
    "is_positive_number",
    "is_mapping",
    "is_sequence",
    "is_datetime",
    "is_type",
    "is_one_of",
    "optional",
    "both",
    "either",
    "has_count",
    "all_count",
    "same_size",
    "map_structure",
]

Pred = Callable[[Any], bool]

# --------------------------------------------------------------------------- #
# Kind checks                                                                 #
# --------------------------------------------------------------------------- #

def is_bool(x: Any) -> bool:
    return isinstance(x, bool)


def is_string(x: Any) -> bool:
    return isinstance(x, str)


def is_number(x: Any) -> bool:
    """Ints and floats; ``True``/``False`` are not numbers here."""
    return isinstance(x, (int, float)) and not isinstance(x, bool)


def is_integer(x: Any) -> bool:
    return isinstance(x, int) and not isinstance(x, bool)


def is_positive_number(x: Any) -> bool:
    return is_number(x) and x > 0


def is_mapping(x: Any) -> bool:
    return isinstance(x, Mapping)


def is_sequence(x: Any) -> bool:
    """Lists and tuples only; strings are scalars for our purposes."""
    return isinstance(x, (list, tuple))


_DT_RE = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(?:\.\d{1,6})?(?:Z|[+\-]\d{2}:\d{2})$")

def is_datetime(x: Any) -> bool:
    """Return True iff *x* is an ISO-8601 date-time string with a timezone."""
    if not isinstance(x, str) or not _DT_RE.fullmatch(x):
        return False
    try:
        _dt.datetime.fromisoformat(x.replace("Z", "+00:00"))
        return True
    except ValueError:
        return False


_TYPE_MAP: dict[str, Union[type, Tuple[type, ...]]] = {
    "string": str,
    "integer": int,
    "number": (int, float),
    "boolean": bool,
    "object": Mapping,
    "list": (list, tuple),
    "dataframe": pd.DataFrame,
}

def is_type(name: str) -> Pred:
    """Predicate for one of the named kinds in the type table.

    ``"integer"`` and ``"number"`` reject booleans.
    """
    if name not in _TYPE_MAP:
        raise KeyError(f"unknown type name {name!r}; expected one of {sorted(_TYPE_MAP)}")
    kind = _TYPE_MAP[name]
    numeric = name in ("integer", "number")

    def check(x: Any) -> bool:
        if numeric and isinstance(x, bool):
            return False
        return isinstance(x, kind)

    check.__name__ = f"is_type_{name}"
    return check


# --------------------------------------------------------------------------- #
# Combinators                                                                 #
# --------------------------------------------------------------------------- #

def is_one_of(choices: Iterable[Any]) -> Pred:
    options = list(choices)

    def check(x: Any) -> bool:
        try:
            return x in options
        except Exception:
            return False

    return check


def optional(pred: Pred) -> Pred:
    """Accept ``None`` (an absent key) as well as whatever *pred* accepts."""
    return lambda x: x is None or bool(pred(x))


def both(*preds: Pred) -> Pred:
    return lambda x: all(bool(p(x)) for p in preds)


def either(*preds: Pred) -> Pred:
    return lambda x: any(bool(p(x)) for p in preds)


# --------------------------------------------------------------------------- #
# Collection checks                                                           #
# --------------------------------------------------------------------------- #

def _count(x: Any) -> int | None:
    # None behaves as an empty collection; non-sized values have no count
    if x is None:
        return 0
    if isinstance(x, Sized):
        return len(x)
    return None


def has_count(n: int, coll: Any) -> bool:
    """True iff *coll* is countable and holds exactly *n* items."""
    return _count(coll) == n


def all_count(n: int, pred: Pred, coll: Any) -> bool:
    """True iff *coll* holds exactly *n* items and each satisfies *pred*.

    Strings and mappings are not treated as item collections.  Lazy
    iterables (generators, iterators) are materialised first.
    """
    if coll is None:
        return n == 0
    if isinstance(coll, (str, bytes, Mapping)) or not isinstance(coll, _Iterable):
        return False
    try:
        items = coll if isinstance(coll, Sized) else list(coll)
        if len(items) != n:
            return False
        return all(bool(pred(item)) for item in items)
    except Exception:
        return False


def same_size(*colls: Any) -> bool:
    """True iff every argument is countable and all counts agree."""
    counts = [_count(c) for c in colls]
    if any(c is None for c in counts):
        return False
    return len(set(counts)) <= 1


def map_structure(key_pred: Pred, val_pred: Pred, m: Any) -> bool:
    """True iff *m* is a mapping whose keys/values all satisfy the predicates."""
    if not isinstance(m, Mapping):
        return False
    try:
        return all(bool(key_pred(k)) and bool(val_pred(v)) for k, v in m.items())
    except Exception:
        return False
