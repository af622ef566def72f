"""
report.py - human- and table-friendly views of an explanation.

Public API
----------
flatten(explanation, root="root") -> Iterator[(path, kind, value)]
to_frame(explanation) -> pandas.DataFrame
to_markdown_report(explanation, heading_level=2) -> str
"""

from __future__ import annotations

from typing import Any, Iterator, Mapping, Sequence, Tuple

import pandas as pd

from .errors import SchemaError
from .explainer import NestedEntries, is_valid_explanation

__all__ = ["flatten", "to_frame", "to_markdown_report"]


def _walk(entries: Sequence[Any], path: str, kind: str) -> Iterator[Tuple[str, str, Any]]:
    for key, value in entries:
        child_path = f"{path}.{key}" if path else str(key)
        if isinstance(value, NestedEntries):
            yield from _walk(value, child_path, kind)
        else:
            yield child_path, kind, value


def _check_entries(entries: Sequence[Any]) -> None:
    for entry in entries:
        if not isinstance(entry, (tuple, list)) or len(entry) != 2:
            raise SchemaError(f"explanation entry is not a (key, value) pair: {entry!r}")
        if isinstance(entry[1], NestedEntries):
            _check_entries(entry[1])


def _check_shape(explanation: Any) -> None:
    if not is_valid_explanation(explanation):
        raise SchemaError(f"not an explanation: {explanation!r}")
    _check_entries(explanation["invalid"])
    _check_entries(explanation["extra"])


def flatten(explanation: Mapping[str, Any], root: str = "root") -> Iterator[Tuple[str, str, Any]]:
    """Yield one ``(dotted_path, kind, value)`` triple per violation.

    ``kind`` is ``"invalid"`` or ``"extra"``.
    """
    _check_shape(explanation)
    yield from _walk(explanation["invalid"], root, "invalid")
    yield from _walk(explanation["extra"], root, "extra")


def to_frame(explanation: Mapping[str, Any]) -> pd.DataFrame:
    """Return the flattened explanation as a ``path / kind / value`` table."""
    rows = list(flatten(explanation))
    return pd.DataFrame(rows, columns=["path", "kind", "value"])


def _format_scalar(v: Any) -> str:
    if v is True:   return "true"
    if v is False:  return "false"
    if v is None:   return "null"
    return repr(v)


def to_markdown_report(explanation: Mapping[str, Any], *, heading_level: int = 2) -> str:
    """Render *explanation* as a Markdown card with Invalid / Extra sections.

    Empty sections are rendered as ``_none_``.
    """
    h = "#" * heading_level
    sections: dict[str, list[str]] = {"invalid": [], "extra": []}
    for path, kind, value in flatten(explanation):
        sections[kind].append(f"- **{path}**: {_format_scalar(value)}")

    parts: list[str] = []
    for kind, lines in sections.items():
        parts.append(f"{h} {kind.title()}")
        parts.append("\n".join(lines) if lines else "_none_")
        parts.append("")
    return "\n".join(parts).rstrip()
