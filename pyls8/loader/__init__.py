"""Loaders for LS-8 program sources."""

from __future__ import annotations

from .binary_text import (
    ProgramFormatError,
    load_program,
    load_program_from_path,
    parse_program,
)
from .program import ProgramImage

__all__ = [
    "ProgramImage",
    "ProgramFormatError",
    "parse_program",
    "load_program",
    "load_program_from_path",
]
