"""End-to-end runs of the bundled sample programs."""

from __future__ import annotations

from pathlib import Path

import pytest

from pyls8.loader import load_program_from_path
from pyls8.system import MachineConfig, create_machine

PROGRAMS = Path(__file__).resolve().parents[2] / "programs"


def run_program(name: str) -> tuple[list[int], object]:
    output: list[int] = []
    machine = create_machine(MachineConfig(output=output.append))
    load_program_from_path(PROGRAMS / name, machine.memory)
    machine.run()
    return output, machine


@pytest.mark.parametrize(
    "name, expected",
    [
        ("mult.ls8", [72]),
        ("stack.ls8", [5]),
        ("countdown.ls8", [3, 2, 1]),
    ],
)
def test_sample_program_output(name: str, expected: list[int]) -> None:
    output, machine = run_program(name)

    assert output == expected
    assert machine.cpu.halted


def test_single_hlt_halts_immediately() -> None:
    output: list[int] = []
    machine = create_machine(MachineConfig(output=output.append))
    machine.load(bytes([0b00011011]))

    executed = machine.run()

    assert executed == 1
    assert output == []
    assert machine.cpu.registers.general == [0, 0, 0, 0, 0, 0, 0, 0xF8]
    assert machine.cpu.registers.program_counter == 1


def test_stack_program_restores_stack_pointer() -> None:
    _, machine = run_program("stack.ls8")

    assert machine.cpu.registers.stack_pointer == 0xF8
