"""Primality tests, prime factorisation and the sieve of Eratosthenes."""


def is_prime(n: int) -> bool:
    """Return whether ``n`` is prime, testing divisors of the form 6k ± 1."""
    if n <= 1:
        return False
    if n in (2, 3):
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False
    i = 5
    while i * i <= n:
        if n % i == 0 or n % (i + 2) == 0:
            return False
        i += 6
    return True


def prime_factors(n: int) -> list[int]:
    """Return the prime factors of ``n`` in ascending order, with repetition."""
    result: list[int] = []
    if n <= 1:
        return result
    for p in (2, 3):
        while n % p == 0:
            result.append(p)
            n //= p
    i = 5
    while i * i <= n:
        for p in (i, i + 2):
            while n % p == 0:
                result.append(p)
                n //= p
        i += 6
    if n > 3:
        result.append(n)
    return result


def sieve(n: int) -> list[int]:
    """Return every prime up to and including ``n``."""
    if n < 2:
        return []
    flags = [True] * (n + 1)
    flags[0] = flags[1] = False
    i = 2
    while i * i <= n:
        if flags[i]:
            flags[i * i :: i] = [False] * len(range(i * i, n + 1, i))
        i += 1
    return [i for i, prime in enumerate(flags) if prime]