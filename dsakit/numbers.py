"""Small number-theory and digit utilities on non-negative integers."""

from __future__ import annotations

from math import isqrt

NOTE_VALUES = (100, 50, 20, 1)
"""Denominations handed out by :func:`dispense_notes`, largest first."""

_POWERS_OF_TWO = frozenset(1 << exponent for exponent in range(31))


def _require_non_negative(**named: int) -> None:
    for name, value in named.items():
        if value < 0:
            raise ValueError(f"{name} must not be negative, got {value}")


def gcd_brute(a: int, b: int) -> int:
    """Greatest common divisor found by trying every candidate divisor."""
    _require_non_negative(a=a, b=b)
    if a == 0:
        return b
    if b == 0:
        return a
    return max(i for i in range(1, min(a, b) + 1) if a % i == 0 and b % i == 0)


def gcd_euclid(a: int, b: int) -> int:
    """Greatest common divisor by reducing the larger value modulo the smaller."""
    _require_non_negative(a=a, b=b)
    while a > 0 and b > 0:
        if a > b:
            a %= b
        else:
            b %= a
    return b if a == 0 else a


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's remainder algorithm."""
    _require_non_negative(a=a, b=b)
    while b != 0:
        a, b = b, a % b
    return a


def gcd_recursive(a: int, b: int) -> int:
    """Greatest common divisor by recursive Euclid."""
    _require_non_negative(a=a, b=b)
    if b == 0:
        return a
    return gcd_recursive(b, a % b)


def lcm(a: int, b: int) -> int:
    """Least common multiple of ``a`` and ``b``."""
    divisor = gcd(a, b)
    if divisor == 0:
        raise ValueError("least common multiple of 0 and 0 is undefined")
    return a * b // divisor


def is_armstrong(n: int) -> bool:
    """Tell whether ``n`` equals the sum of the cubes of its digits (sign kept)."""
    sign = -1 if n < 0 else 1
    return sign * sum(int(digit) ** 3 for digit in str(abs(n))) == n


def decimal_to_binary(n: int) -> int:
    """Return the integer whose decimal digits spell ``n`` in binary."""
    _require_non_negative(n=n)
    return int(format(n, "b"))


def binary_to_decimal(n: int) -> int:
    """Read the decimal digits of ``n`` as a binary numeral."""
    _require_non_negative(n=n)
    result = 0
    for digit in str(n):
        if digit not in "01":
            raise ValueError(f"{n} is not made of binary digits")
        result = result * 2 + int(digit)
    return result


def is_power_of_two(n: int) -> bool:
    """Tell whether ``n`` is one of 2**0 .. 2**30."""
    return n in _POWERS_OF_TWO


def is_power_of_two_bitwise(n: int) -> bool:
    """Tell whether ``n`` is a positive power of two, by its single set bit."""
    return n > 0 and n & (n - 1) == 0


def is_prime(n: int) -> bool:
    """Tell whether ``n`` is a prime number."""
    if n < 2:
        return False
    return all(n % divisor for divisor in range(2, isqrt(n) + 1))


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number, counting F(0) = 0 and F(1) = 1."""
    _require_non_negative(n=n)
    previous, current = 0, 1
    if n == 0:
        return previous
    for _ in range(2, n + 1):
        previous, current = current, previous + current
    return current


def is_even(n: int) -> bool:
    """Tell whether ``n`` is divisible by two."""
    return n % 2 == 0


def reverse_digits(n: int) -> int:
    """Reverse the decimal digits of ``n``, keeping its sign."""
    sign = -1 if n < 0 else 1
    return sign * int(str(abs(n))[::-1])


def count_set_bits(n: int) -> int:
    """Count the one bits in the binary form of ``n``."""
    _require_non_negative(n=n)
    return bin(n).count("1")


def sum_of_digits(n: int) -> int:
    """Add up the decimal digits of ``n``."""
    _require_non_negative(n=n)
    return sum(int(digit) for digit in str(n))


def dispense_notes(amount: int) -> dict[int, int]:
    """Split ``amount`` greedily into notes; maps each denomination to its count."""
    _require_non_negative(amount=amount)
    notes: dict[int, int] = {}
    for value in NOTE_VALUES:
        notes[value], amount = divmod(amount, value)
    return notes