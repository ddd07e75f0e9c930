"""Tests for the binary-text program loader."""

from __future__ import annotations

import io
from pathlib import Path

import pytest

from pyls8.bus import AddressOutOfRangeError, Memory
from pyls8.loader import ProgramFormatError, load_program, load_program_from_path, parse_program

SOURCE = """\
# print8.ls8
10000010 # LDI R0,8

  0000 0000
00001000
01000111 # PRN R0
"""


def test_parse_skips_comments_blank_lines_and_whitespace() -> None:
    image = parse_program(SOURCE)

    assert image.data == bytes([0b10000010, 0x00, 0x08, 0b01000111])
    assert image.source_lines == [2, 4, 5, 6]
    assert image.source_line(1) == 4
    assert image.source_line(9) is None
    assert len(image) == 4


@pytest.mark.parametrize("line", ["0000000", "000000001", "00000002", "LDI"])
def test_parse_rejects_malformed_lines(line: str) -> None:
    with pytest.raises(ProgramFormatError, match="line 2"):
        parse_program(f"00000000\n{line}\n")


def test_load_program_writes_from_address_zero() -> None:
    memory = Memory(16)

    image = load_program(io.StringIO(SOURCE), memory, name="print8")

    assert image.name == "print8"
    assert memory.snapshot()[:5] == bytes([0b10000010, 0x00, 0x08, 0b01000111, 0x00])


def test_load_program_longer_than_memory_traps() -> None:
    memory = Memory(2)

    with pytest.raises(AddressOutOfRangeError):
        load_program(io.StringIO("00000001\n00000010\n00000011\n"), memory)


def test_load_program_from_path(tmp_path: Path) -> None:
    path = tmp_path / "halt.ls8"
    path.write_text("00011011 # HLT\n", encoding="utf-8")
    memory = Memory()

    image = load_program_from_path(path, memory)

    assert image.name == "halt.ls8"
    assert memory.load8(0) == 0b00011011
