"""
Arithmetic primitives.

Responsibility: gcd / lcm / modular arithmetic, plus argument validation
shared by every other module. No primality logic here.
"""

import numbers
from typing import Tuple


def check_integral(name: str, value) -> int:
    """
    Validate that value is an integer and return it as a plain int.

    Accepts Python ints and numpy integer scalars. Rejects bools, floats,
    strings and anything else that is not integral.

    Parameters
    ----------
    name : str
        Argument name, used in the error message.
    value : object
        Value to validate.

    Returns
    -------
    int
        The value converted to a Python int.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    return int(value)


def gcd(a: int, b: int) -> int:
    """Greatest common divisor (Euclid). Always non-negative."""
    a = check_integral("a", a)
    b = check_integral("b", b)
    while b != 0:
        a, b = b, a % b
    return abs(a)


def lcm(a: int, b: int) -> int:
    """Least common multiple. lcm(0, x) = 0."""
    a = check_integral("a", a)
    b = check_integral("b", b)
    if a == 0 or b == 0:
        return 0
    return abs((a // gcd(a, b)) * b)


def modpow(base: int, exp: int, modulus: int) -> int:
    """
    Fast modular exponentiation (square-and-multiply).

    Parameters
    ----------
    base : int
        Base.
    exp : int
        Exponent, must be >= 0.
    modulus : int
        Modulus, must be >= 1.

    Returns
    -------
    int
        base**exp mod modulus, in [0, modulus).
    """
    base = check_integral("base", base)
    exp = check_integral("exp", exp)
    modulus = check_integral("modulus", modulus)
    if modulus < 1:
        raise ValueError(f"modulus must be >= 1, got {modulus}")
    if exp < 0:
        raise ValueError(f"exp must be >= 0, got {exp}")
    if modulus == 1:
        return 0

    result = 1
    base = base % modulus
    while exp > 0:
        if exp & 1:
            result = (result * base) % modulus
        exp >>= 1
        base = (base * base) % modulus
    return result


def _extended_gcd(a: int, b: int) -> Tuple[int, int]:
    if a == 0:
        return (0, 1)
    x, y = _extended_gcd(b % a, a)
    return (y - (b // a) * x, x)


def extended_gcd(a: int, b: int) -> Tuple[int, int]:
    """
    Bezout coefficients (x, y) with a*x + b*y == gcd(a, b).

    For non-negative inputs the identity holds with gcd as returned by
    gcd(). Recursion depth is O(log min(a, b)).
    """
    a = check_integral("a", a)
    b = check_integral("b", b)
    return _extended_gcd(a, b)


def mod_inverse(a: int, m: int) -> int:
    """
    Modular multiplicative inverse of a modulo m, normalized to [0, m).

    Raises ValueError if m < 1 or if a has no inverse (gcd(a, m) != 1).
    """
    a = check_integral("a", a)
    m = check_integral("m", m)
    if m < 1:
        raise ValueError(f"modulus must be >= 1, got {m}")
    if gcd(a, m) != 1:
        raise ValueError(f"{a} has no inverse modulo {m}")
    x, _ = _extended_gcd(a % m, m)
    return (x % m + m) % m
