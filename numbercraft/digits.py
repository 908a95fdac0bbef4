"""Properties and transformations of the decimal digits of an integer.

Digits of a negative number carry its sign, so ``-123`` has the digits
``-1, -2, -3``. Every function here follows that rule.
"""

from __future__ import annotations

from collections.abc import Iterator
from math import factorial


def _digits(number: int) -> Iterator[int]:
    """Yield the signed digits of ``number``, least significant first."""
    sign = -1 if number < 0 else 1
    magnitude = abs(number)
    while magnitude:
        magnitude, digit = divmod(magnitude, 10)
        yield sign * digit


def digit_count(number: int) -> int:
    """Return how many decimal digits ``number`` has; zero has one."""
    if number == 0:
        return 1
    return sum(1 for _ in _digits(number))


def is_armstrong(number: int) -> bool:
    """Tell whether ``number`` equals the sum of its digits raised to its digit count.

    Zero counts as an Armstrong number, since it has no non-zero digits
    and the empty sum is zero.
    """
    digits = list(_digits(number))
    width = len(digits)
    return sum(digit**width for digit in digits) == number


def armstrong_numbers(start: int, end: int) -> list[int]:
    """Return the Armstrong numbers from ``start`` to ``end`` inclusive."""
    return [n for n in range(start, end + 1) if is_armstrong(n)]


def binary_to_decimal(number: int) -> int:
    """Read the decimal digits of ``number`` as binary digits.

    Each digit is weighted by a power of two according to its position;
    digits are not checked to be 0 or 1.
    """
    return sum(digit << position for position, digit in enumerate(_digits(number)))


def decimal_to_binary(number: int) -> str:
    """Return the binary digits of ``number``.

    Zero gives ``"0"``; a negative number has no digits and gives ``""``.
    """
    if number == 0:
        return "0"
    bits = []
    while number > 0:
        number, bit = divmod(number, 2)
        bits.append(str(bit))
    return "".join(reversed(bits))


def has_repeated_digit(number: int) -> bool:
    """Tell whether any decimal digit occurs more than once in ``number``."""
    seen: set[int] = set()
    for digit in _digits(abs(number)):
        if digit in seen:
            return True
        seen.add(digit)
    return False


def reverse_number(number: int) -> int:
    """Return ``number`` with its digits in reverse order, keeping its sign."""
    reversed_number = 0
    for digit in _digits(number):
        reversed_number = reversed_number * 10 + digit
    return reversed_number


def is_palindrome(number: int) -> bool:
    """Tell whether ``number`` reads the same with its digits reversed."""
    return reverse_number(number) == number


def is_strong(number: int) -> bool:
    """Tell whether ``number`` equals the sum of the factorials of its digits.

    Negative numbers are never strong; zero is, as its digit sum is empty.
    """
    if number < 0:
        return False
    return sum(factorial(digit) for digit in _digits(number)) == number


def digit_sum(number: int) -> int:
    """Return the sum of the signed digits of ``number``."""
    return sum(_digits(number))


def even_odd_digit_sums(number: int) -> tuple[int, int]:
    """Return the sums of the even digits and of the odd digits of ``number``."""
    even_sum = 0
    odd_sum = 0
    for digit in _digits(number):
        if digit % 2 == 0:
            even_sum += digit
        else:
            odd_sum += digit
    return even_sum, odd_sum