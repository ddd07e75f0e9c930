"""Arithmetic/logic unit for the LS-8.

The ALU works on values, never on register indices: callers read the
operands out of the register file and decide where a result lands.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class AluOp(Enum):
    ADD = auto()
    SUB = auto()
    MUL = auto()
    DIV = auto()
    INC = auto()
    DEC = auto()
    CMP = auto()


@dataclass(frozen=True)
class AluResult:
    """Outcome of a single ALU operation.

    ``value`` is ``None`` when there is nothing to write back (CMP, or DIV by
    zero). ``equal`` is only set by CMP.
    """

    value: int | None = None
    equal: bool | None = None


def apply(op: AluOp, a: int, b: int = 0) -> AluResult:
    """Apply ``op`` to ``a`` and ``b``, wrapping results modulo 256."""

    a &= 0xFF
    b &= 0xFF
    if op is AluOp.ADD:
        return AluResult((a + b) & 0xFF)
    if op is AluOp.SUB:
        return AluResult((a - b) & 0xFF)
    if op is AluOp.MUL:
        return AluResult((a * b) & 0xFF)
    if op is AluOp.DIV:
        if b == 0:
            # division by zero is absorbed; the target register is left alone
            return AluResult()
        return AluResult(a // b)
    if op is AluOp.INC:
        return AluResult((a + 1) & 0xFF)
    if op is AluOp.DEC:
        return AluResult((a - 1) & 0xFF)
    if op is AluOp.CMP:
        return AluResult(equal=a == b)
    raise ValueError(f"unsupported ALU operation: {op!r}")
