# SPDX-FileCopyrightText: 2025 ShamirsSecret contributors
# SPDX-License-Identifier: MIT

"""Shamir's Secret Sharing over GF(p).

This module provides two helper functions:

``generate_shares``
    Split an integer secret into ``total`` shares with a reconstruction
    threshold of ``threshold`` using a random polynomial whose constant term
    is the secret.

``recover_secret``
    Reconstruct the secret from share points produced by
    :func:`generate_shares` via Lagrange interpolation at ``x = 0``.

Fewer than ``threshold`` genuine shares still interpolate *some* curve and
yield a value without error; that value is simply not the secret. The scheme
has no way to tell the two cases apart.
"""
from __future__ import annotations

import logging
import secrets
from math import prod
from typing import Iterable, NamedTuple

from .errors import ConfigurationError, DuplicatePointError, InsufficientSharesError
from .field import mod_divide, mod_reduce

_logger = logging.getLogger(__name__)


class Share(NamedTuple):
    """A point ``(x, y)`` on the sharing polynomial."""

    x: int
    y: int


def _eval_at(poly: list[int], x: int, prime: int) -> int:
    """Evaluate ``poly`` (constant term first) at ``x`` using Horner's method."""
    accum = 0
    for coeff in reversed(poly):
        accum = (accum * x + coeff) % prime
    return accum


def _random_polynomial(secret: int, degree: int, prime: int) -> list[int]:
    return [secret] + [1 + secrets.randbelow(prime - 1) for _ in range(degree)]


def generate_shares(secret: int, threshold: int, total: int, prime: int) -> list[Share]:
    """Split ``secret`` into ``total`` shares, any ``threshold`` of which recover it."""
    if threshold > total:
        raise ConfigurationError("threshold exceeds share count")
    if threshold < 1:
        raise ConfigurationError("threshold must be at least 1")
    if not 0 <= secret < prime:
        raise ConfigurationError("secret out of range for the field")

    poly = _random_polynomial(secret, threshold - 1, prime)
    shares = [Share(x, _eval_at(poly, x, prime)) for x in range(1, total + 1)]
    _logger.debug("generated %d shares with threshold %d", total, threshold)
    return shares


def _lagrange_interpolate(x: int, x_s: list[int], y_s: list[int], prime: int) -> int:
    """Return the value at ``x`` of the curve through the points ``(x_s, y_s)``.

    Numerators and denominators are kept as exact integers to avoid inexact
    division; only the final combination happens in the field.
    """
    nums = []
    dens = []
    for i, cur in enumerate(x_s):
        others = x_s[:i] + x_s[i + 1:]
        nums.append(prod(x - o for o in others))
        dens.append(prod(cur - o for o in others))
    den = prod(dens)
    num = sum(
        mod_divide(mod_reduce(nums[i] * den * y_s[i], prime), dens[i], prime)
        for i in range(len(x_s))
    )
    return mod_reduce(mod_divide(num, den, prime) + prime, prime)


def recover_secret(shares: Iterable[tuple[int, int]], prime: int) -> int:
    """Recover the secret integer from ``(x, y)`` points on the polynomial."""
    points = [Share(x, y) for x, y in shares]
    if not all(isinstance(v, int) for point in points for v in point):
        raise TypeError("share coordinates must be integers")
    if len(points) < 2:
        raise InsufficientSharesError("need at least two shares")
    x_s = [point.x for point in points]
    if len(set(x_s)) != len(x_s):
        raise DuplicatePointError("points must be distinct")
    y_s = [point.y for point in points]
    _logger.debug("recovering secret from %d shares", len(points))
    return _lagrange_interpolate(0, x_s, y_s, prime)


__all__ = ["Share", "generate_shares", "recover_secret"]
