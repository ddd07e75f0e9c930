"""Loader for LS-8 machine code written as lines of binary digits.

Each non-blank line holds one byte as an 8-digit binary literal. Anything
after ``#`` is a comment and whitespace is ignored anywhere in the line.
Bytes are placed at consecutive addresses starting at 0.
"""

from __future__ import annotations

import io
import re
from pathlib import Path
from typing import Iterable, TextIO

from pyls8.bus import Memory
from pyls8.utils import debug_log

from .program import ProgramImage


class ProgramFormatError(RuntimeError):
    """Raised when a program source line is not a binary byte literal."""


_COMMENT_OR_SPACE = re.compile(r"#.*|\s")
_BINARY_BYTE = re.compile(r"^[01]{8}$")


def _canonicalize_line(raw_line: str) -> str:
    return _COMMENT_OR_SPACE.sub("", raw_line)


def _iter_program_bytes(lines: Iterable[str], image: ProgramImage) -> Iterable[int]:
    for line_number, raw_line in enumerate(lines, start=1):
        line = _canonicalize_line(raw_line)
        if not line:
            continue
        if not _BINARY_BYTE.match(line):
            raise ProgramFormatError(f"line {line_number}: expected 8 binary digits, got {line!r}")
        image.source_lines.append(line_number)
        yield int(line, 2)


def parse_program(text: str, *, name: str = "") -> ProgramImage:
    """Parse program source ``text`` without touching any memory."""

    image = ProgramImage(name=name)
    image.data = bytes(_iter_program_bytes(io.StringIO(text), image))
    return image


def load_program(handle: TextIO, memory: Memory, *, name: str = "") -> ProgramImage:
    """Parse the program read from ``handle`` and store it at address 0.

    Raises :class:`~pyls8.bus.AddressOutOfRangeError` when the program does
    not fit in ``memory``.
    """

    image = parse_program(handle.read(), name=name)
    memory.load_image(image.data)
    debug_log("loader", "loaded %s: %d bytes", name or "<stream>", len(image))
    return image


def load_program_from_path(path: Path, memory: Memory, *, encoding: str = "utf-8") -> ProgramImage:
    """Load an LS-8 program from ``path``."""

    with path.open("r", encoding=encoding) as handle:
        return load_program(handle, memory, name=path.name)
