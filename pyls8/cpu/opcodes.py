"""Opcode metadata for the LS-8 instruction set."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING, Callable, Final, FrozenSet, Iterable, List, Sequence

if TYPE_CHECKING:
    from pyls8.bus import Memory

    from .registers import RegisterFile


class Opcode(IntEnum):
    """LS-8 v2 opcode bytes."""

    NOP = 0b00000000
    LDI = 0b00000100
    MUL = 0b00000101
    PRN = 0b00000110
    PRA = 0b00000111
    STR = 0b00001001
    PSH = 0b00001010
    POP = 0b00001011
    ADD = 0b00001100
    SUB = 0b00001101
    DIV = 0b00001110
    CAL = 0b00001111
    RET = 0b00010000
    JMP = 0b00010001
    LDS = 0b00010010
    JEQ = 0b00010011
    JNE = 0b00010100
    CMP = 0b00010110
    INC = 0b00010111
    DEC = 0b00011000
    INT = 0b00011001
    IRT = 0b00011010
    HLT = 0b00011011


# Declared by the instruction set but given no semantics; the engine treats
# them like any other undefined opcode.
RESERVED_OPCODES: Final[FrozenSet[Opcode]] = frozenset(
    {Opcode.CAL, Opcode.RET, Opcode.INT, Opcode.IRT, Opcode.STR, Opcode.PRA}
)

MAX_OPERANDS: Final[int] = 2


def encoded_operand_count(opcode: int) -> int:
    """Operand count implied by the two high bits of ``opcode``.

    Only a documentation convention: the dispatch table is authoritative and
    the LS-8 v2 byte values above predate the convention.
    """

    return (opcode >> 6) & 0b11


@dataclass(frozen=True)
class Outcome:
    """What a handler commits once it has executed."""

    pc: int
    halted: bool = False


OutputSink = Callable[[int], None]
Handler = Callable[["RegisterFile", "Memory", OutputSink], Outcome]


@dataclass(frozen=True)
class Instruction:
    """Metadata describing a single LS-8 opcode."""

    opcode: Opcode
    mnemonic: str
    operands: int
    handler: Handler

    def __post_init__(self) -> None:
        if not 0 <= self.opcode <= 0xFF:
            raise ValueError(f"opcode out of range: {self.opcode}")
        if not 0 <= self.operands <= MAX_OPERANDS:
            raise ValueError(f"{self.mnemonic}: operand count must be 0-{MAX_OPERANDS}")

    @property
    def width(self) -> int:
        return 1 + self.operands


class OpcodeTable:
    """Mutable builder for the 256-entry instruction table."""

    _TABLE_SIZE: Final[int] = 0x100

    def __init__(self) -> None:
        self._table: List[Instruction | None] = [None] * self._TABLE_SIZE

    def register(self, instruction: Instruction) -> None:
        opcode = instruction.opcode
        if opcode in RESERVED_OPCODES:
            raise ValueError(f"opcode {opcode.name} is reserved")
        existing = self._table[opcode]
        if existing is not None:
            raise ValueError(
                f"opcode {opcode:#04x} already registered as {existing.mnemonic}")
        self._table[opcode] = instruction

    def register_all(self, instructions: Iterable[Instruction]) -> None:
        for instruction in instructions:
            self.register(instruction)

    def freeze(self) -> Sequence[Instruction | None]:
        return tuple(self._table)


def build_instruction_table(instructions: Iterable[Instruction]) -> Sequence[Instruction | None]:
    """Build an immutable 256-entry instruction lookup table."""

    table = OpcodeTable()
    table.register_all(instructions)
    return table.freeze()
