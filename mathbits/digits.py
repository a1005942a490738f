"""Decimal digit queries on integers."""


def count_digits(x: int) -> int:
    """Return the number of decimal digits of a positive ``x``; zero and negatives give 0."""
    count = 0
    while x > 0:
        x //= 10
        count += 1
    return count


def is_palindrome(n: int) -> bool:
    """Return whether the decimal digits of ``n`` read the same in both directions."""
    digits = str(abs(n))
    return digits == digits[::-1]