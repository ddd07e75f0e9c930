"""Program metadata structures for LS-8 loaders."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass
class ProgramImage:
    """Bytes parsed from a program source together with where they came from."""

    name: str = ""
    data: bytes = b""
    source_lines: List[int] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.data)

    def source_line(self, address: int) -> int | None:
        """Return the 1-based source line that produced ``address``."""

        if 0 <= address < len(self.source_lines):
            return self.source_lines[address]
        return None
