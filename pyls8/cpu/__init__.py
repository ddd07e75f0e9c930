"""CPU package for the LS-8 machine."""

from .alu import AluOp, AluResult
from .core import LS8, CPUError, CPUStatus, IllegalOpcodeError
from .instructions import DISPATCH_TABLE
from .opcodes import Instruction, Opcode, Outcome
from .registers import RegisterError, RegisterFile
from . import alu, opcodes

__all__ = [
    "LS8",
    "CPUStatus",
    "CPUError",
    "IllegalOpcodeError",
    "RegisterError",
    "RegisterFile",
    "AluOp",
    "AluResult",
    "Instruction",
    "Opcode",
    "Outcome",
    "DISPATCH_TABLE",
    "alu",
    "opcodes",
]
