# SPDX-FileCopyrightText: 2025 ShamirsSecret contributors
# SPDX-License-Identifier: MIT

"""Shamir's (t, n)-threshold secret sharing over a prime field."""

from .codec import decode_bytes, decode_text, encode_bytes
from .errors import (
    CodecError,
    ConfigurationError,
    DecryptionError,
    DuplicatePointError,
    InsufficientSharesError,
    KeyFormatError,
    NotInvertibleError,
    ShamirError,
    ShareFormatError,
)
from .field import MERSENNE_127, MERSENNE_521, MERSENNE_2281, PRIMES
from .sharing import Share, generate_shares, recover_secret

__version__ = "0.1.0"

__all__ = [
    "generate_shares",
    "recover_secret",
    "encode_bytes",
    "decode_bytes",
    "decode_text",
    "Share",
    "PRIMES",
    "MERSENNE_127",
    "MERSENNE_521",
    "MERSENNE_2281",
    "ShamirError",
    "ConfigurationError",
    "InsufficientSharesError",
    "DuplicatePointError",
    "NotInvertibleError",
    "CodecError",
    "ShareFormatError",
    "KeyFormatError",
    "DecryptionError",
]
