from types import SimpleNamespace

import pytest

from pyls8.utils.trace import TraceRecorder


def _registers(*general, equal=False):
    values = list(general) + [0] * (8 - len(general))
    return SimpleNamespace(general=values, equal_flag=equal)


def test_trace_recorder_overwrites_old_entries():
    recorder = TraceRecorder(capacity=2)

    recorder.record_step(_registers(1), 0x00, 0b00000100, halted=False, mnemonic="LDI")
    recorder.record_step(_registers(1, 2), 0x03, 0b00000100, halted=False, mnemonic="LDI")
    recorder.record_step(_registers(1, 2, equal=True), 0x06, 0b00010110, halted=False, mnemonic="CMP")

    lines = list(recorder.format_entries())
    assert len(lines) == 2
    assert len(recorder) == 2
    assert "pc=03" in lines[0]
    assert "pc=06" in lines[1]
    assert "opcode=00010110 CMP" in lines[1]
    assert "R1=02" in lines[1]
    assert "flags=EQ" in lines[1]


def test_trace_recorder_limit_returns_most_recent():
    recorder = TraceRecorder(4)
    for pc in range(3):
        recorder.record_step(_registers(), pc, 0, halted=False, mnemonic="NOP")

    lines = list(recorder.format_entries(1))
    assert len(lines) == 1
    assert "pc=02" in lines[0]
    assert recorder.last_entry().pc == 2


def test_trace_recorder_handles_missing_opcode():
    recorder = TraceRecorder(1)
    recorder.record_step(_registers(), 0x10, None, halted=True, note="illegal")
    lines = list(recorder.format_entries())
    assert len(lines) == 1
    assert "opcode=--" in lines[0]
    assert "flags=HALT,illegal" in lines[0]


def test_trace_recorder_requires_positive_capacity():
    with pytest.raises(ValueError):
        TraceRecorder(0)
