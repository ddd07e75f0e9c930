"""Flat byte-addressable memory for the LS-8 machine.

Every cell holds a single byte and is zero-initialised. Accesses outside
``0..length-1`` trap with :class:`AddressOutOfRangeError` rather than
returning a filler value, so a malformed program fails loudly instead of
silently reading zeros.
"""

from __future__ import annotations

from dataclasses import dataclass

from pyls8.utils import debug_enabled, debug_log

DEFAULT_MEMORY_SIZE = 256


class MemoryError(Exception):
    """Raised when the memory is misconfigured or used incorrectly."""


class AddressOutOfRangeError(MemoryError):
    """Raised when an address falls outside the allocated memory."""

    def __init__(self, address: int, length: int) -> None:
        super().__init__(f"address {address:#04x} outside memory 0x00-{length - 1:#04x}")
        self.address = address
        self.length = length


@dataclass
class Memory:
    """Fixed-size RAM backing both program code and the stack."""

    length: int = DEFAULT_MEMORY_SIZE

    def __post_init__(self) -> None:
        if self.length <= 0:
            raise MemoryError("memory must have a positive length")
        self._data = bytearray(self.length)

    def _check(self, address: int) -> int:
        if not 0 <= address < self.length:
            raise AddressOutOfRangeError(address, self.length)
        return address

    def load8(self, address: int) -> int:
        value = self._data[self._check(address)]
        if debug_enabled("mem"):
            debug_log("mem", "load8 addr=%02x val=%02x", address, value)
        return value

    def store8(self, address: int, value: int) -> None:
        self._data[self._check(address)] = value & 0xFF
        if debug_enabled("mem"):
            debug_log("mem", "store8 addr=%02x val=%02x", address, value & 0xFF)

    def load_image(self, data: bytes, start: int = 0) -> None:
        """Copy ``data`` into memory starting at ``start``.

        The whole image is bounds-checked before any cell is written so an
        oversized program never leaves a truncated copy behind.
        """

        if data:
            self._check(start)
            self._check(start + len(data) - 1)
        self._data[start:start + len(data)] = data

    def snapshot(self) -> bytes:
        return bytes(self._data)
