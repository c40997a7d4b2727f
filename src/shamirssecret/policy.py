# SPDX-FileCopyrightText: 2025 ShamirsSecret contributors
# SPDX-License-Identifier: MIT

"""Centralised sharing policy configuration.

The policy only picks defaults: the prime is still passed explicitly to every
sharing call, so sessions with different security levels can run side by
side. Values can be overridden by environment variables.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from .errors import ConfigurationError
from .field import PRIMES

DEFAULT_PRIME_NAME = "mersenne-127"


def _load_int(name: str, default: int) -> int:
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _load_bool(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _load_prime_name(name: str, default: str) -> str:
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        return normalize_prime_name(value)
    except ConfigurationError:
        return default


def normalize_prime_name(name: str) -> str:
    """Map ``"2281"`` or ``"Mersenne-2281"`` to the canonical ``"mersenne-2281"``."""
    key = name.strip().lower()
    if key.isdigit():
        key = f"mersenne-{key}"
    if key not in PRIMES:
        choices = ", ".join(PRIMES)
        raise ConfigurationError(f"unknown prime {name!r}; choose one of: {choices}")
    return key


def resolve_prime(name: str) -> int:
    """Return the value of the named prime."""
    return PRIMES[normalize_prime_name(name)]


@dataclass(frozen=True)
class SharingPolicy:
    """Holds the defaults used when the caller does not supply parameters."""

    prime_name: str = DEFAULT_PRIME_NAME
    minimum: int = 3
    total: int = 6
    audit_enabled: bool = False
    audit_dir: Path = Path.home() / ".shamirssecret_audit"

    @property
    def prime(self) -> int:
        return resolve_prime(self.prime_name)


def load_policy() -> SharingPolicy:
    """Load the sharing policy considering environment overrides."""

    audit_dir = os.environ.get("SHAMIR_AUDIT_DIR")
    return SharingPolicy(
        prime_name=_load_prime_name("SHAMIR_PRIME", DEFAULT_PRIME_NAME),
        minimum=_load_int("SHAMIR_MINIMUM", 3),
        total=_load_int("SHAMIR_TOTAL", 6),
        audit_enabled=_load_bool("SHAMIR_AUDIT", False),
        audit_dir=Path(audit_dir).expanduser() if audit_dir else Path.home() / ".shamirssecret_audit",
    )


policy = load_policy()


__all__ = ["SharingPolicy", "policy", "load_policy", "resolve_prime", "normalize_prime_name"]
