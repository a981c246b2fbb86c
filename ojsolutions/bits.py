"""Bit manipulation helpers for non-negative integers and fixed-width words."""

from __future__ import annotations


def _mask(width: int) -> int:
    if width <= 0:
        raise ValueError(f"width must be positive, got {width}")
    return (1 << width) - 1


def low_bit(x: int) -> int:
    """Return the value of the lowest set bit of ``x`` (0 for 0)."""
    return x & -x


def high_bit(x: int) -> int:
    """Return the value of the highest set bit of ``x`` (0 for 0)."""
    if x < 0:
        raise ValueError(f"high_bit needs a non-negative integer, got {x}")
    return 1 << (x.bit_length() - 1) if x else 0


def cover_bit(x: int) -> int:
    """Return the smallest power of two that is not less than ``x`` (at least 1)."""
    if x <= 1:
        return 1
    return 1 << (x - 1).bit_length()


def reverse_bits(x: int, width: int = 32) -> int:
    """Reverse the order of the lowest ``width`` bits of ``x``."""
    x &= _mask(width)
    return int(format(x, f"0{width}b")[::-1], 2)


def low_idx(x: int) -> int:
    """Return the 1-based position of the lowest set bit, or 0 when ``x`` is 0."""
    return (x & -x).bit_length()


def high_idx(x: int, width: int = 32) -> int:
    """Return the 1-based position, counted from the top of a ``width``-bit word,
    of the highest set bit, or 0 when no bit is set."""
    return low_idx(reverse_bits(x, width))


def clz(x: int, width: int = 32) -> int:
    """Count the leading zero bits of ``x`` as a ``width``-bit word."""
    x &= _mask(width)
    if not x:
        raise ValueError("clz is undefined for zero")
    return width - x.bit_length()


def ctz(x: int) -> int:
    """Count the trailing zero bits of ``x``."""
    if not x:
        raise ValueError("ctz is undefined for zero")
    return low_idx(x) - 1


def count_bits(x: int) -> int:
    """Return the number of set bits in ``x``."""
    if x < 0:
        raise ValueError(f"count_bits needs a non-negative integer, got {x}")
    return bin(x).count("1")


def parity(x: int) -> int:
    """Return 1 if ``x`` has an odd number of set bits, else 0."""
    return count_bits(x) & 1


def lg2(x: int) -> int:
    """Return the floor of the base-2 logarithm of a positive ``x``."""
    if x <= 0:
        raise ValueError(f"lg2 needs a positive integer, got {x}")
    return x.bit_length() - 1


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def ceil_div(x: int, y: int) -> int:
    """Return ``(x - 1) / y + 1`` with division truncating toward zero.

    For positive ``x`` and ``y`` this is the ceiling of ``x / y``.
    """
    if y == 0:
        raise ZeroDivisionError("ceil_div by zero")
    return _trunc_div(x - 1, y) + 1