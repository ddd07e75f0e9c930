"""Bus-related helpers for the LS-8 machine."""

from .memory import DEFAULT_MEMORY_SIZE, AddressOutOfRangeError, Memory, MemoryError

__all__ = [
    "AddressOutOfRangeError",
    "DEFAULT_MEMORY_SIZE",
    "Memory",
    "MemoryError",
]
