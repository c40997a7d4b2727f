# SPDX-FileCopyrightText: 2025 ShamirsSecret contributors
# SPDX-License-Identifier: MIT

"""Arithmetic in the prime field GF(p).

Division modulo ``p`` means multiplying the numerator by the inverse of the
denominator, where the inverse of ``a`` is the ``b`` with ``a * b % p == 1``.
The inverse is computed with the extended Euclidean algorithm rather than
``pow(a, -1, p)`` so that the Bézout coefficient is returned unreduced, which
keeps :func:`mod_divide` numerically identical to the reference tool.
"""
from __future__ import annotations

from .errors import NotInvertibleError

MERSENNE_EXPONENTS = (127, 521, 607, 1279, 2203, 2281)

PRIMES: dict[str, int] = {f"mersenne-{exp}": 2**exp - 1 for exp in MERSENNE_EXPONENTS}

MERSENNE_127 = PRIMES["mersenne-127"]
MERSENNE_521 = PRIMES["mersenne-521"]
MERSENNE_2281 = PRIMES["mersenne-2281"]


def mod_reduce(a: int, p: int) -> int:
    """Return ``a`` reduced into ``[0, p)``, negative ``a`` included."""
    return a % p


def extended_gcd(a: int, b: int) -> tuple[int, int]:
    """Return Bézout coefficients ``(x, y)`` with ``a*x + b*y == gcd(a, b)``."""
    x, last_x = 0, 1
    y, last_y = 1, 0
    while b != 0:
        quot = a // b
        a, b = b, a % b
        last_x, x = x, last_x - quot * x
        last_y, y = y, last_y - quot * y
    return last_x, last_y


def mod_inverse(den: int, p: int) -> int:
    """Return ``x`` such that ``den * x % p == 1``.

    The result is not reduced into ``[0, p)``. Raises
    :class:`NotInvertibleError` when ``den`` is a multiple of ``p``.
    """
    if den % p == 0:
        raise NotInvertibleError("cannot invert zero modulo p")
    x, y = extended_gcd(den, p)
    # floor division keeps every remainder non-negative, so gcd > 0 here
    if den * x + p * y != 1:
        raise NotInvertibleError(f"{den} has no inverse modulo {p}")
    return x


def mod_divide(num: int, den: int, p: int) -> int:
    """Return ``num / den`` in GF(p), left unreduced for the caller."""
    return num * mod_inverse(den, p)


__all__ = [
    "MERSENNE_EXPONENTS",
    "PRIMES",
    "MERSENNE_127",
    "MERSENNE_521",
    "MERSENNE_2281",
    "mod_reduce",
    "extended_gcd",
    "mod_inverse",
    "mod_divide",
]
