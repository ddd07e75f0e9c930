"""Unit tests for the LS-8 memory."""

import pytest

from pyls8.bus import AddressOutOfRangeError, Memory, MemoryError


def test_memory_is_zero_initialised() -> None:
    memory = Memory(16)

    assert memory.snapshot() == bytes(16)


def test_store_and_load_masks_to_byte() -> None:
    memory = Memory()
    memory.store8(0x10, 0x1FF)

    assert memory.load8(0x10) == 0xFF
    assert memory.length == 256


@pytest.mark.parametrize("address", [-1, 256, 0x1000])
def test_out_of_range_access_traps(address: int) -> None:
    memory = Memory(256)

    with pytest.raises(AddressOutOfRangeError):
        memory.load8(address)
    with pytest.raises(AddressOutOfRangeError):
        memory.store8(address, 0x01)


def test_address_error_is_a_memory_error() -> None:
    memory = Memory(4)

    with pytest.raises(MemoryError) as excinfo:
        memory.load8(4)

    assert excinfo.value.address == 4
    assert excinfo.value.length == 4


def test_non_positive_length_rejected() -> None:
    with pytest.raises(MemoryError):
        Memory(0)


def test_load_image_rejects_oversized_program_without_partial_write() -> None:
    memory = Memory(4)

    with pytest.raises(AddressOutOfRangeError):
        memory.load_image(b"\x01\x02\x03\x04\x05")

    assert memory.snapshot() == bytes(4)


def test_load_image_at_offset() -> None:
    memory = Memory(8)
    memory.load_image(b"\xAA\xBB", start=6)

    assert memory.snapshot() == bytes(6) + b"\xAA\xBB"
