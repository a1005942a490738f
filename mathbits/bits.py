"""Bit-level queries on non-negative integers."""


def is_kth_bit_set(n: int, k: int) -> bool:
    """Return whether the k-th bit of ``n`` is set, counting from 1 at the least significant bit."""
    if k < 1:
        raise ValueError(f"bit position must be at least 1, got {k}")
    return (n >> (k - 1)) & 1 == 1


def _build_table() -> tuple[int, ...]:
    table = [0]
    for i in range(1, 256):
        table.append(table[i & (i - 1)] + 1)
    return tuple(table)


_BYTE_BITS = _build_table()


def count_set_bits(n: int) -> int:
    """Return the number of 1 bits in the binary form of ``n``."""
    if n < 0:
        raise ValueError(f"cannot count set bits of a negative number: {n}")
    total = 0
    while n:
        total += _BYTE_BITS[n & 0xFF]
        n >>= 8
    return total