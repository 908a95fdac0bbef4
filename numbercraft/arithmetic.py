"""Elementary number theory and arithmetic on integers."""

from __future__ import annotations

import math


def _trunc_mod(a: int, b: int) -> int:
    """Remainder of division truncated toward zero; takes the sign of ``a``."""
    remainder = abs(a) % abs(b)
    return -remainder if a < 0 else remainder


def factorial(n: int) -> int:
    """Return ``n!``; raise ValueError for a negative ``n``."""
    if n < 0:
        raise ValueError("Factorial of a negative number doesn't exist.")
    return math.factorial(n)


def fibonacci(count: int) -> list[int]:
    """Return the first ``count`` terms of the Fibonacci series, starting at 0."""
    terms: list[int] = []
    current, following = 0, 1
    for _ in range(max(count, 0)):
        terms.append(current)
        current, following = following, current + following
    return terms


def greatest(a: int, b: int, c: int) -> int:
    """Return the greatest of three numbers."""
    return max(a, b, c)


def hcf(a: int, b: int) -> int:
    """Return the highest common factor of ``a`` and ``b`` by Euclid's algorithm.

    Remainders are truncated toward zero, so with negative arguments the
    result may be negative.
    """
    while b != 0:
        a, b = b, _trunc_mod(a, b)
    return a


def lcm(a: int, b: int) -> int:
    """Return the least common multiple of two positive integers."""
    if a <= 0 or b <= 0:
        raise ValueError("LCM needs two positive integers")
    return a * b // math.gcd(a, b)


def is_leap_year(year: int) -> bool:
    """Tell whether ``year`` is a leap year in the Gregorian calendar."""
    return year % 400 == 0 or (year % 4 == 0 and year % 100 != 0)


def is_perfect(number: int) -> bool:
    """Tell whether ``number`` equals the sum of its proper divisors."""
    if number <= 0:
        raise ValueError("Please enter a positive integer.")
    return sum(d for d in range(1, number) if number % d == 0) == number


def power(base: int, exponent: int) -> float:
    """Return ``base`` raised to an integer ``exponent`` as a float.

    A zero base with a negative exponent raises ZeroDivisionError.
    """
    result = 1.0
    for _ in range(abs(exponent)):
        if exponent >= 0:
            result *= base
        else:
            result /= base
    return result


def is_prime(number: int) -> bool:
    """Tell whether ``number`` is prime; numbers below 2 are not."""
    if number <= 1:
        return False
    return all(number % d for d in range(2, math.isqrt(number) + 1))


def primes_in_range(start: int, end: int) -> list[int]:
    """Return the primes from ``start`` to ``end`` inclusive."""
    return [n for n in range(start, end + 1) if is_prime(n)]


def sum_natural(n: int) -> int:
    """Return the sum of the first ``n`` natural numbers; zero when ``n`` < 1."""
    if n < 1:
        return 0
    return n * (n + 1) // 2


def swap(a, b):
    """Return the two values in exchanged order."""
    return b, a