"""Numeric primitives for SciCalc.

Arithmetic with domain checks, combinatorics, integer sequences, Taylor
series approximations and degree-based trigonometry.
"""

from __future__ import annotations

import math

from scicalc.core.errors import InvalidArgument
from scicalc.utils.constants import DEG_TO_RAD, RAD_TO_DEG
from scicalc.utils.validation import require_non_negative_int, require_positive


# --- Arithmetic ---


def divide(a: float, b: float) -> float:
    """Quotient a / b; division by zero is rejected."""
    if b == 0:
        raise InvalidArgument("Division by zero")
    return a / b


def power(base: float, exponent: float) -> float:
    return base**exponent


def square_root(x: float) -> float:
    if x < 0:
        raise InvalidArgument(f"Square root of a negative number ({x}) is not real")
    return math.sqrt(x)


def absolute_value(x: float) -> float:
    return abs(x)


def logarithm(x: float, base: float = math.e) -> float:
    """Logarithm of x in the given base."""
    require_positive("x", x)
    require_positive("base", base)
    if base == 1.0:
        raise InvalidArgument("Logarithm base cannot be 1")
    return math.log(x) / math.log(base)


# --- Combinatorics ---


def factorial(n: int) -> int:
    """n! computed iteratively for a non-negative integer n."""
    require_non_negative_int("n", n)
    result = 1
    for i in range(2, n + 1):
        result *= i
    return result


def _check_choose(n: int, r: int) -> None:
    require_non_negative_int("n", n)
    require_non_negative_int("r", r)
    if r > n:
        raise InvalidArgument(f"r ({r}) cannot exceed n ({n})")


def combination(n: int, r: int) -> int:
    """Number of r-subsets of an n-set (nCr)."""
    _check_choose(n, r)
    return factorial(n) // (factorial(r) * factorial(n - r))


def permutation(n: int, r: int) -> int:
    """Number of ordered r-arrangements from an n-set (nPr)."""
    _check_choose(n, r)
    return factorial(n) // factorial(n - r)


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by the Euclidean algorithm."""
    a, b = abs(a), abs(b)
    while b != 0:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    if a == 0 or b == 0:
        raise InvalidArgument("LCM is undefined when an argument is zero")
    return abs(a * b) // gcd(a, b)


# --- Sequences ---


def arithmetic_term(first: float, difference: float, n: int) -> float:
    """n-th term (1-based) of an arithmetic sequence."""
    if n < 1:
        raise InvalidArgument(f"n must be >= 1, got {n}")
    return first + (n - 1) * difference


def geometric_term(first: float, ratio: float, n: int) -> float:
    """n-th term (1-based) of a geometric sequence."""
    if n < 1:
        raise InvalidArgument(f"n must be >= 1, got {n}")
    return first * ratio ** (n - 1)


def fibonacci(n: int) -> int:
    """n-th Fibonacci number with F(0) = 0, F(1) = 1."""
    require_non_negative_int("n", n)
    a, b = 0, 1
    for _ in range(n):
        a, b = b, a + b
    return a


# --- Taylor series ---


def taylor_exp(x: float, terms: int) -> float:
    """Partial sum of the Maclaurin series of e^x with the given number of terms."""
    require_non_negative_int("terms", terms)
    return sum(x**i / factorial(i) for i in range(terms))


def taylor_sin(x: float, terms: int) -> float:
    """Partial sum of the Maclaurin series of sin(x), x in radians."""
    require_non_negative_int("terms", terms)
    return sum((-1) ** i * x ** (2 * i + 1) / factorial(2 * i + 1) for i in range(terms))


def taylor_cos(x: float, terms: int) -> float:
    """Partial sum of the Maclaurin series of cos(x), x in radians."""
    require_non_negative_int("terms", terms)
    return sum((-1) ** i * x ** (2 * i) / factorial(2 * i) for i in range(terms))


# --- Trigonometry in degrees ---

_TRIG_EPS = 1e-12


def sin_deg(angle: float) -> float:
    return math.sin(angle * DEG_TO_RAD)


def cos_deg(angle: float) -> float:
    return math.cos(angle * DEG_TO_RAD)


def tan_deg(angle: float) -> float:
    c = cos_deg(angle)
    if abs(c) < _TRIG_EPS:
        raise InvalidArgument(f"tan is undefined at {angle} degrees")
    return sin_deg(angle) / c


def sec_deg(angle: float) -> float:
    c = cos_deg(angle)
    if abs(c) < _TRIG_EPS:
        raise InvalidArgument(f"sec is undefined at {angle} degrees")
    return 1.0 / c


def csc_deg(angle: float) -> float:
    s = sin_deg(angle)
    if abs(s) < _TRIG_EPS:
        raise InvalidArgument(f"csc is undefined at {angle} degrees")
    return 1.0 / s


def cot_deg(angle: float) -> float:
    s = sin_deg(angle)
    if abs(s) < _TRIG_EPS:
        raise InvalidArgument(f"cot is undefined at {angle} degrees")
    return cos_deg(angle) / s


def asin_deg(value: float) -> float:
    if not -1.0 <= value <= 1.0:
        raise InvalidArgument(f"asin argument must lie in [-1, 1], got {value}")
    return math.asin(value) * RAD_TO_DEG


def acos_deg(value: float) -> float:
    if not -1.0 <= value <= 1.0:
        raise InvalidArgument(f"acos argument must lie in [-1, 1], got {value}")
    return math.acos(value) * RAD_TO_DEG


def atan_deg(value: float) -> float:
    return math.atan(value) * RAD_TO_DEG
