"""Tests for the LS-8 register file."""

import pytest

from pyls8.cpu import RegisterError, RegisterFile
from pyls8.cpu.registers import STACK_POINTER_RESET


def test_power_on_state() -> None:
    registers = RegisterFile()

    assert registers.general == [0, 0, 0, 0, 0, 0, 0, 0xF8]
    assert registers.stack_pointer == STACK_POINTER_RESET
    assert registers.program_counter == 0
    assert registers.instruction_register == 0
    assert registers.equal_flag is False


@pytest.mark.parametrize("value, expected", [(0, 0), (255, 255), (256, 0), (300, 44), (-1, 255)])
def test_set_masks_to_eight_bits(value: int, expected: int) -> None:
    registers = RegisterFile()
    registers.set(3, value)

    assert registers.get(3) == expected


def test_stack_pointer_aliases_register_seven() -> None:
    registers = RegisterFile()
    registers.stack_pointer = 0x100

    assert registers.get(7) == 0x00

    registers.set(7, 0x42)
    assert registers.stack_pointer == 0x42


@pytest.mark.parametrize("index", [-1, 8, 255])
def test_invalid_register_index(index: int) -> None:
    registers = RegisterFile()

    with pytest.raises(RegisterError):
        registers.get(index)
    with pytest.raises(RegisterError):
        registers.set(index, 1)


def test_clone_is_independent() -> None:
    registers = RegisterFile()
    registers.set(0, 9)
    registers.equal_flag = True

    copy = registers.clone()
    copy.set(0, 1)

    assert registers.get(0) == 9
    assert copy.equal_flag is True
