"""LS-8 machine assembly."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from pyls8.bus import DEFAULT_MEMORY_SIZE, Memory
from pyls8.cpu import LS8
from pyls8.cpu.core import print_value
from pyls8.cpu.opcodes import OutputSink
from pyls8.utils import TraceRecorder, debug_enabled

DEFAULT_TRACE_CAPACITY = 256


@dataclass
class MachineConfig:
    """Runtime configuration for the LS-8 machine."""

    memory_size: int = DEFAULT_MEMORY_SIZE
    strict_illegal: bool = False
    trace_capacity: int = 0
    output: Optional[OutputSink] = None


@dataclass
class Machine:
    """Aggregates the core components of the LS-8."""

    memory: Memory
    cpu: LS8
    trace: TraceRecorder | None = None

    def load(self, data: bytes) -> None:
        for address, value in enumerate(data):
            self.cpu.poke(address, value)

    def run(self, max_cycles: int | None = None, interval: float = 0.0) -> int:
        return self.cpu.run(max_cycles=max_cycles, interval=interval)


def create_machine(config: MachineConfig | None = None) -> Machine:
    """Instantiate an LS-8 machine with the requested configuration."""

    config = config or MachineConfig()
    memory = Memory(config.memory_size)

    capacity = config.trace_capacity
    if capacity <= 0 and debug_enabled("trace"):
        capacity = DEFAULT_TRACE_CAPACITY
    trace = TraceRecorder(capacity) if capacity > 0 else None

    cpu = LS8(
        memory,
        output=config.output or print_value,
        strict_illegal=config.strict_illegal,
        trace=trace,
    )
    return Machine(memory=memory, cpu=cpu, trace=trace)
