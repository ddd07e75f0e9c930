"""LS-8 fetch/decode/execute engine."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Sequence

from pyls8.bus import Memory, MemoryError
from pyls8.utils import TraceRecorder, debug_enabled, debug_log

from .instructions import DISPATCH_TABLE
from .opcodes import RESERVED_OPCODES, Instruction, Opcode, OutputSink
from .registers import RegisterError, RegisterFile


class CPUError(Exception):
    """Base error for CPU-related failures."""


class IllegalOpcodeError(CPUError):
    """Raised in strict mode when the CPU fetches an undefined opcode."""

    def __init__(self, opcode: int, pc: int) -> None:
        if opcode in RESERVED_OPCODES:
            detail = f"reserved opcode {Opcode(opcode).name}"
        else:
            detail = f"illegal opcode {opcode:#010b}"
        super().__init__(f"{detail} at {pc:#04x}")
        self.opcode = opcode
        self.pc = pc


class CPUStatus(Enum):
    RUNNING = auto()
    HALTED = auto()


def print_value(value: int) -> None:
    """Default PRN sink: one decimal value per line on stdout."""

    print(value)


@dataclass
class LS8:
    """The LS-8 CPU driving a flat memory."""

    memory: Memory
    instruction_table: Sequence[Instruction | None] = field(default=DISPATCH_TABLE)
    output: OutputSink = field(default=print_value)
    strict_illegal: bool = False
    trace: TraceRecorder | None = None

    registers: RegisterFile = field(default_factory=RegisterFile)
    status: CPUStatus = CPUStatus.RUNNING
    cycle_count: int = 0

    def __post_init__(self) -> None:
        self._running = False

    @property
    def halted(self) -> bool:
        return self.status is CPUStatus.HALTED

    @property
    def running(self) -> bool:
        """True while :meth:`run` is driving cycles."""

        return self._running

    def reset(self) -> None:
        """Restore power-on registers and status. Memory is left untouched."""

        self.registers = RegisterFile()
        self.status = CPUStatus.RUNNING
        self.cycle_count = 0

    def poke(self, address: int, value: int) -> None:
        """Store ``value`` at ``address``; used for program loading."""

        self.memory.store8(address, value)

    def step(self) -> bool:
        """Execute a single cycle and return whether the CPU is still running."""

        if self.halted:
            return False

        registers = self.registers
        pc = registers.program_counter
        try:
            opcode = self.memory.load8(pc)
            registers.instruction_register = opcode
            instruction = self._decode(opcode, pc)
            if instruction is None:
                # implicit HLT; the program counter stays on the bad byte
                self.status = CPUStatus.HALTED
                self._record(pc, opcode, "", "illegal")
                return False

            if debug_enabled("cpu"):
                debug_log("cpu", "pc=%02x opcode=%08b %s", pc, opcode, instruction.mnemonic)
            outcome = instruction.handler(registers, self.memory, self.output)
        except (CPUError, MemoryError, RegisterError):
            self.status = CPUStatus.HALTED
            raise
        finally:
            self.cycle_count += 1

        registers.program_counter = outcome.pc
        if outcome.halted:
            self.status = CPUStatus.HALTED
        self._record(pc, opcode, instruction.mnemonic)
        return not self.halted

    def run(self, max_cycles: int | None = None, interval: float = 0.0) -> int:
        """Drive cycles until halted, stopped or ``max_cycles`` is reached.

        ``interval`` paces the loop with a sleep after every cycle; the default
        is a tight loop. Calling ``run`` again after :meth:`stop` resumes from
        the current state. Returns the number of cycles executed by this call.
        """

        self._running = True
        executed = 0
        try:
            while self._running and not self.halted:
                if max_cycles is not None and executed >= max_cycles:
                    break
                self.step()
                executed += 1
                if interval > 0:
                    time.sleep(interval)
        finally:
            self._running = False
        if debug_enabled("cpu"):
            debug_log("cpu", "run executed=%d status=%s", executed, self.status.name)
        return executed

    def stop(self) -> None:
        """Pause :meth:`run` at the next cycle boundary without resetting state."""

        self._running = False

    def _decode(self, opcode: int, pc: int) -> Instruction | None:
        instruction = self.instruction_table[opcode]
        if instruction is None:
            if self.strict_illegal:
                raise IllegalOpcodeError(opcode, pc)
            if debug_enabled("cpu"):
                debug_log("cpu", "pc=%02x opcode=%08b undefined, halting", pc, opcode)
        return instruction

    def _record(self, pc: int, opcode: int, mnemonic: str, note: str = "") -> None:
        if self.trace is None:
            return
        self.trace.record_step(
            self.registers,
            pc,
            opcode,
            halted=self.halted,
            mnemonic=mnemonic,
            note=note,
        )
