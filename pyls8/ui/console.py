"""Console front end: load a program, run it, print PRN output."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, TextIO

from pyls8.bus import DEFAULT_MEMORY_SIZE
from pyls8.loader import ProgramImage, load_program, load_program_from_path
from pyls8.system import Machine, MachineConfig, create_machine
from pyls8.system.machine import DEFAULT_TRACE_CAPACITY
from pyls8.utils import debug_enabled, debug_log


@dataclass
class AppConfig:
    """Configuration for a single console run."""

    program_path: Optional[Path] = None
    memory_size: int = DEFAULT_MEMORY_SIZE
    strict_illegal: bool = False
    trace_limit: int = 0
    interval: float = 0.0
    max_cycles: Optional[int] = None


class ConsoleApp:
    """Runs one program to completion against text streams."""

    def __init__(
        self,
        config: AppConfig,
        *,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ) -> None:
        self._config = config
        self._stdin = stdin
        self._stdout = stdout
        self._stderr = stderr
        self._machine: Machine | None = None
        self._program: ProgramImage | None = None

    @property
    def machine(self) -> Machine | None:
        return self._machine

    @property
    def program(self) -> ProgramImage | None:
        return self._program

    def run(self) -> Machine:
        """Load and execute the configured program.

        Loader, memory and CPU errors propagate to the caller; the trace, if
        enabled, is written to stderr either way.
        """

        machine = create_machine(
            MachineConfig(
                memory_size=self._config.memory_size,
                strict_illegal=self._config.strict_illegal,
                trace_capacity=self._config.trace_limit,
                output=self._emit,
            )
        )
        self._machine = machine
        self._program = self._load_program(machine)
        try:
            executed = machine.run(
                max_cycles=self._config.max_cycles,
                interval=self._config.interval,
            )
            debug_log("app", "cycles=%d halted=%s", executed, machine.cpu.halted)
        finally:
            self._dump_trace(machine)
        return machine

    def _load_program(self, machine: Machine) -> ProgramImage:
        path = self._config.program_path
        if path is not None:
            return load_program_from_path(path, machine.memory)
        return load_program(self._stdin or sys.stdin, machine.memory, name="<stdin>")

    def _emit(self, value: int) -> None:
        print(value, file=self._stdout or sys.stdout)

    def _dump_trace(self, machine: Machine) -> None:
        if machine.trace is None:
            return
        if self._config.trace_limit <= 0:
            if debug_enabled("trace"):
                machine.trace.dump("trace", limit=DEFAULT_TRACE_CAPACITY)
            return
        stream = self._stderr or sys.stderr
        for line in machine.trace.format_entries(self._config.trace_limit):
            print(line, file=stream)
