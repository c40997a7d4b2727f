# SPDX-FileCopyrightText: 2025 ShamirsSecret contributors
# SPDX-License-Identifier: MIT

"""Exception hierarchy shared by the sharing core and its helpers."""
from __future__ import annotations


class ShamirError(Exception):
    """Base class for every error raised by :mod:`shamirssecret`."""


class ConfigurationError(ShamirError, ValueError):
    """Raised when sharing parameters are inconsistent (e.g. t > n)."""


class InsufficientSharesError(ShamirError, ValueError):
    """Raised when fewer than two points are supplied for reconstruction."""


class DuplicatePointError(ShamirError, ValueError):
    """Raised when two shares carry the same x-coordinate."""


class NotInvertibleError(ShamirError, ArithmeticError):
    """Raised when asked for the inverse of zero in the field."""


class CodecError(ShamirError, ValueError):
    """Raised when an integer does not decode back into bytes."""


class ShareFormatError(ShamirError, ValueError):
    """Raised when a share file does not follow the ``<n>;<t>`` layout."""


class KeyFormatError(ShamirError, ValueError):
    """Raised when a private key file cannot be parsed."""


class DecryptionError(ShamirError):
    """Raised when an encrypted string cannot be opened with the given key."""


class AuditError(ShamirError):
    """Raised when an audit record cannot be signed or written."""


__all__ = [
    "ShamirError",
    "ConfigurationError",
    "InsufficientSharesError",
    "DuplicatePointError",
    "NotInvertibleError",
    "CodecError",
    "ShareFormatError",
    "KeyFormatError",
    "DecryptionError",
    "AuditError",
]
