"""Integer exponentiation by repeated squaring."""


def power(x: int, n: int) -> int:
    """Return ``x`` raised to the non-negative ``n``, halving the exponent recursively."""
    if n < 0:
        raise ValueError(f"exponent must be non-negative, got {n}")
    if n == 0:
        return 1
    half = power(x, n // 2)
    square = half * half
    return square if n % 2 == 0 else square * x


def power_iterative(x: int, n: int) -> int:
    """Return ``x`` raised to the non-negative ``n`` using binary exponentiation in a loop."""
    if n < 0:
        raise ValueError(f"exponent must be non-negative, got {n}")
    result = 1
    while n > 0:
        if n % 2:
            result *= x
        x *= x
        n //= 2
    return result