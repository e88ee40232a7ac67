"""Single-bit operations, masking of bit ranges and counting set bits."""

from __future__ import annotations


def _check_position(position: int) -> None:
    if position < 0:
        raise ValueError("bit position must not be negative")


def get_bit(number: int, position: int) -> int:
    """The bit of ``number`` at ``position``, 0 or 1."""
    _check_position(position)
    return 1 if number & (1 << position) else 0


def set_bit(number: int, position: int) -> int:
    """``number`` with the bit at ``position`` set to 1."""
    _check_position(position)
    return number | (1 << position)


def clear_bit(number: int, position: int) -> int:
    """``number`` with the bit at ``position`` set to 0."""
    _check_position(position)
    return number & ~(1 << position)


def update_bit(number: int, position: int, value: int) -> int:
    """``number`` with the bit at ``position`` set to ``value`` (0 or 1)."""
    _check_position(position)
    if value not in (0, 1):
        raise ValueError("bit value must be 0 or 1")
    return (number & ~(1 << position)) | (value << position)


def clear_last_bits(number: int, count: int) -> int:
    """``number`` with its lowest ``count`` bits set to 0."""
    _check_position(count)
    return number & (-1 << count)


def clear_bits_range(number: int, start: int, end: int) -> int:
    """``number`` with the bits from ``start`` to ``end``, both included, set to 0."""
    _check_position(start)
    if end < start:
        raise ValueError("end must not be before start")
    mask = (-1 << (end + 1)) | ((1 << start) - 1)
    return number & mask


def _check_unsigned(number: int) -> None:
    if number < 0:
        raise ValueError("number must not be negative")


def count_set_bits(number: int) -> int:
    """Number of 1 bits, found by testing each bit in turn."""
    _check_unsigned(number)
    total = 0
    while number > 0:
        total += number & 1
        number >>= 1
    return total


def count_set_bits_fast(number: int) -> int:
    """Number of 1 bits, found by clearing the lowest set bit until none is left."""
    _check_unsigned(number)
    total = 0
    while number > 0:
        number &= number - 1
        total += 1
    return total