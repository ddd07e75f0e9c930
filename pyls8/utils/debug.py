"""Lightweight debug logging helpers for the LS-8 machine."""

from __future__ import annotations

import os
import sys
from typing import Iterable

# Names accepted in LS8_DEBUG besides "all"; anything else is ignored.
CATEGORIES = frozenset({"cpu", "mem", "loader", "app", "trace"})

_CATEGORIES: set[str] | None = None


def _load_categories() -> set[str]:
    global _CATEGORIES
    if _CATEGORIES is not None:
        return _CATEGORIES
    value = os.environ.get("LS8_DEBUG", "")
    if not value:
        _CATEGORIES = set()
        return _CATEGORIES
    parts: Iterable[str] = (part.strip().lower() for part in value.split(","))
    _CATEGORIES = {part for part in parts if part in CATEGORIES or part == "all"}
    return _CATEGORIES


def debug_enabled(category: str | None = None) -> bool:
    categories = _load_categories()
    if not categories:
        return False
    if "all" in categories:
        return True
    if category is None:
        return True
    return category.lower() in categories


def debug_log(category: str, message: str, *args) -> None:
    if not debug_enabled(category):
        return
    prefix = f"[LS8][{category}]"
    if args:
        try:
            message = message % args
        except (TypeError, ValueError):
            message = f"{message} {args!r}"
    # stderr keeps diagnostics apart from PRN output on stdout
    print(f"{prefix} {message}", file=sys.stderr)
