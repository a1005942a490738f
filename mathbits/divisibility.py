"""Greatest common divisor, least common multiple and divisor lists."""


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor of ``a`` and ``b`` by Euclid's algorithm."""
    while b:
        a, b = b, a % b
    return abs(a)


def lcm(a: int, b: int) -> int:
    """Return the least common multiple of ``a`` and ``b``."""
    if a == 0 and b == 0:
        raise ValueError("least common multiple of 0 and 0 is undefined")
    return abs(a * b) // gcd(a, b)


def divisors(n: int) -> list[int]:
    """Return every positive divisor of ``n`` in ascending order; empty for ``n <= 0``."""
    small: list[int] = []
    large: list[int] = []
    i = 1
    while i * i <= n:
        if n % i == 0:
            small.append(i)
            if i != n // i:
                large.append(n // i)
        i += 1
    return small + large[::-1]