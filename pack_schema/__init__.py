"""
pack_schema – structural validation of nested mappings against predicate packs.
"""
from .errors import SchemaError, ConfigurationError, ValidationError
from .rules import Pack, compile_pack
from .matcher import conforms, conforms_permissive, conforms_exact
from .explainer import (
    explain,
    is_valid_explanation,
    explained_conforms_permissive,
    explained_conforms_exact,
    explain_conforms,
    explain_conforms_exact,
)
from .defaults import build_with_defaults, with_defaults
from .assertions import validate, checked
from .report import to_frame, to_markdown_report

__all__ = [
    "SchemaError",
    "ConfigurationError",
    "ValidationError",
    "Pack",
    "compile_pack",
    "conforms",
    "conforms_permissive",
    "conforms_exact",
    "explain",
    "is_valid_explanation",
    "explained_conforms_permissive",
    "explained_conforms_exact",
    "explain_conforms",
    "explain_conforms_exact",
    "build_with_defaults",
    "with_defaults",
    "validate",
    "checked",
    "to_frame",
    "to_markdown_report",
]
