"""LS-8 register file."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

GENERAL_REGISTER_COUNT = 8
STACK_POINTER = 7
STACK_POINTER_RESET = 0xF8


class RegisterError(Exception):
    """Raised when an instruction names a register outside R0-R7."""


def _reset_general() -> List[int]:
    general = [0x00] * GENERAL_REGISTER_COUNT
    general[STACK_POINTER] = STACK_POINTER_RESET
    return general


@dataclass
class RegisterFile:
    """Eight 8-bit general-purpose registers plus the special registers.

    Only ``general`` is masked to 8 bits. ``program_counter`` is a plain
    address that memory bounds-checks when it is dereferenced.
    """

    general: List[int] = field(default_factory=_reset_general)
    program_counter: int = 0x00
    instruction_register: int = 0x00
    equal_flag: bool = False

    def get(self, index: int) -> int:
        return self.general[self._require_index(index)]

    def set(self, index: int, value: int) -> None:
        self.general[self._require_index(index)] = value & 0xFF

    @property
    def stack_pointer(self) -> int:
        return self.general[STACK_POINTER]

    @stack_pointer.setter
    def stack_pointer(self, value: int) -> None:
        self.general[STACK_POINTER] = value & 0xFF

    def clone(self) -> "RegisterFile":
        return RegisterFile(
            list(self.general),
            self.program_counter,
            self.instruction_register,
            self.equal_flag,
        )

    @staticmethod
    def _require_index(index: int) -> int:
        if not 0 <= index < GENERAL_REGISTER_COUNT:
            raise RegisterError(f"register index out of range: {index}")
        return index
