"""Scope name validation."""

from __future__ import annotations

import re

_SCOPE_NAME_RE = re.compile(r"[A-Za-z0-9_-]+")


def is_valid_scope_name(name: str) -> bool:
    """Return True if *name* is non-empty ASCII letters, digits, ``_`` or ``-``."""
    return _SCOPE_NAME_RE.fullmatch(name) is not None
