"""
config.py - startup configuration for the validating pass-through.

Validation can be switched off for optimised deployments, in which case
:func:`pack_schema.assertions.validate` returns its argument untouched.
The switch is resolved once at import (environment) and may be
re-resolved at startup with :func:`configure`.

Public API
----------
Settings
    ``validation_enabled`` flag plus ``from_env`` / ``from_file`` builders.
settings
    The process-wide instance used when no explicit ``Settings`` is passed.
configure(validation_enabled=None, path=None) -> Settings
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Mapping

__all__ = ["ENV_VAR", "Settings", "settings", "configure"]

log = logging.getLogger(__name__)

ENV_VAR = "PACK_SCHEMA_VALIDATION"
_FALSY = {"0", "false", "off", "no"}

# --------------------------------------------------------------------------- #
# Helpers                                                                     #
# --------------------------------------------------------------------------- #

def _read(path: Path) -> Mapping[str, Any]:
    """Read & parse a JSON config file, raising crisp errors on failure."""
    try:
        with path.open(encoding="utf-8") as fd:
            return json.load(fd)
    except FileNotFoundError as exc:
        raise FileNotFoundError(f"Config not found: {path}") from exc
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {path}: {exc}") from exc


class Settings:
    """Runtime switches for the validating pass-through."""

    def __init__(self, validation_enabled: bool = True):
        if not isinstance(validation_enabled, bool):
            raise ValueError(
                f"validation_enabled must be a bool, got {type(validation_enabled).__name__}"
            )
        self.validation_enabled = validation_enabled

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        env = os.environ if environ is None else environ
        raw = env.get(ENV_VAR)
        if raw is None:
            return cls()
        return cls(validation_enabled=raw.strip().lower() not in _FALSY)

    @classmethod
    def from_file(cls, path: str | Path) -> "Settings":
        data = _read(Path(path))
        if not isinstance(data, Mapping):
            raise ValueError(f"Config at '{path}' must be a JSON object.")
        return cls(validation_enabled=data.get("validation_enabled", True))

    def __repr__(self) -> str:
        return f"Settings(validation_enabled={self.validation_enabled!r})"


settings = Settings.from_env()


def configure(validation_enabled: bool | None = None, path: str | Path | None = None) -> Settings:
    """Re-resolve the process-wide :data:`settings`.

    An explicit *validation_enabled* wins over *path*, which wins over the
    environment.
    """
    global settings
    if validation_enabled is not None:
        settings = Settings(validation_enabled=validation_enabled)
    elif path is not None:
        settings = Settings.from_file(path)
    else:
        settings = Settings.from_env()
    log.info("pack_schema validation %s", "enabled" if settings.validation_enabled else "disabled")
    return settings
