"""Integer utilities: bits, digits, factorials, divisibility, primes and powers."""

__version__ = "0.1.0"
__all__ = ["bits", "digits", "factorial", "divisibility", "primes", "power"]