"""Factorials and the trailing zeros they end with."""


def factorial(n: int) -> int:
    """Return ``n!``."""
    if n < 0:
        raise ValueError(f"factorial is not defined for negative numbers: {n}")
    result = 1
    for i in range(2, n + 1):
        result *= i
    return result


def count_trailing_zeros(n: int) -> int:
    """Return the number of trailing zeros of ``n!`` without computing it."""
    if n < 0:
        raise ValueError(f"factorial is not defined for negative numbers: {n}")
    count = 0
    divisor = 5
    while divisor <= n:
        count += n // divisor
        divisor *= 5
    return count