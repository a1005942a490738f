# mathbits

A small collection of integer utilities covering bit manipulation, decimal
digits, factorials, divisibility, primes and exponentiation. It has no runtime
dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

```python
from mathbits.bits import is_kth_bit_set, count_set_bits
from mathbits.digits import count_digits, is_palindrome
from mathbits.factorial import factorial, count_trailing_zeros
from mathbits.divisibility import gcd, lcm, divisors
from mathbits.primes import is_prime, prime_factors, sieve
from mathbits.power import power, power_iterative

is_kth_bit_set(5, 3)       # True  (5 = 0b101; bits are counted from 1)
count_set_bits(13)         # 3

count_digits(9235)         # 4
is_palindrome(4554)        # True

factorial(5)               # 120
count_trailing_zeros(100)  # 24

gcd(12, 15)                # 3
lcm(4, 6)                  # 12
divisors(36)               # [1, 2, 3, 4, 6, 9, 12, 18, 36]

is_prime(97)               # True
prime_factors(450)         # [2, 3, 3, 5, 5]
sieve(20)                  # [2, 3, 5, 7, 11, 13, 17, 19]

power(3, 5)                # 243
power_iterative(2, 10)     # 1024
```

## Modules

### `mathbits.bits`

- `is_kth_bit_set(n, k)`: `True` if bit `k` of `n` is set, with bit 1 the
  least significant. Raises `ValueError` if `k < 1`.
- `count_set_bits(n)`: number of 1 bits in `n`, counted a byte at a time from
  a lookup table. Raises `ValueError` for negative `n`.

### `mathbits.digits`

- `count_digits(x)`: number of decimal digits of a positive `x`. Zero and
  negative numbers give 0.
- `is_palindrome(n)`: whether the decimal digits of `n` read the same both
  ways. The sign is ignored.

### `mathbits.factorial`

- `factorial(n)`: `n!`.
- `count_trailing_zeros(n)`: trailing zeros of `n!`, found by counting factors
  of 5 without computing the factorial.

Both raise `ValueError` for negative `n`.

### `mathbits.divisibility`

- `gcd(a, b)`: greatest common divisor by Euclid's algorithm. The result is
  never negative.
- `lcm(a, b)`: least common multiple. Raises `ValueError` when both arguments
  are 0.
- `divisors(n)`: every positive divisor of `n` in ascending order. Returns an
  empty list when `n <= 0`.

### `mathbits.primes`

- `is_prime(n)`: trial division by 2, 3 and numbers of the form 6k ± 1.
  Anything below 2 is not prime.
- `prime_factors(n)`: prime factors in ascending order, repeated as often as
  they divide `n`. Returns an empty list when `n <= 1`.
- `sieve(n)`: all primes up to and including `n` by the sieve of
  Eratosthenes. Returns an empty list when `n < 2`.

### `mathbits.power`

- `power(x, n)`: `x ** n` by recursive repeated squaring.
- `power_iterative(x, n)`: `x ** n` by binary exponentiation in a loop.

Both raise `ValueError` for a negative exponent.

## What it does not do

mathbits is a library only: it installs no command-line program. It works on
Python integers and does no modular reduction; `power` and `power_iterative`
compute exact powers rather than powers modulo a number.