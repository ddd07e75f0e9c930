"""Tests for LS-8 machine assembly."""

import pytest

from pyls8.bus import AddressOutOfRangeError
from pyls8.cpu import IllegalOpcodeError
from pyls8.system import MachineConfig, create_machine
from pyls8.utils import debug


def test_default_machine() -> None:
    machine = create_machine()

    assert machine.memory.length == 256
    assert machine.cpu.memory is machine.memory
    assert machine.trace is None
    assert machine.cpu.strict_illegal is False


def test_machine_options_are_forwarded() -> None:
    machine = create_machine(MachineConfig(memory_size=64, strict_illegal=True, trace_capacity=4))

    assert machine.memory.length == 64
    assert machine.cpu.trace is machine.trace
    machine.load(bytes([0xFF]))
    with pytest.raises(IllegalOpcodeError):
        machine.run()


def test_trace_category_enables_tracing(monkeypatch) -> None:
    monkeypatch.setattr(debug, "_CATEGORIES", {"trace"})

    machine = create_machine()

    assert machine.trace is not None


def test_loading_past_memory_traps() -> None:
    machine = create_machine(MachineConfig(memory_size=2))

    with pytest.raises(AddressOutOfRangeError):
        machine.load(bytes(3))


def test_default_output_prints_decimal(capsys) -> None:
    machine = create_machine()
    machine.load(bytes([0b00000100, 0, 72, 0b00000110, 0, 0b00011011]))

    machine.run()

    assert capsys.readouterr().out == "72\n"
