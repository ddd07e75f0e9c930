"""Python implementation of the LS-8 eight-bit virtual machine.

The packages mirror the machine's layers: ``bus`` (memory), ``cpu``
(registers, ALU, dispatch table and engine), ``loader`` (program sources),
``system`` (machine assembly), ``ui`` (console front end) and ``utils``
(debug logging and tracing). ``run.py`` is the command-line entry point.
"""

from __future__ import annotations

from . import bus, cpu, loader, system, ui, utils

__all__: list[str] = [
    "bus",
    "cpu",
    "loader",
    "system",
    "ui",
    "utils",
]
