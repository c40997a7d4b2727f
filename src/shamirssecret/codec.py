# SPDX-FileCopyrightText: 2025 ShamirsSecret contributors
# SPDX-License-Identifier: MIT

"""Reversible mapping between byte strings and field-sized integers.

Each byte is written as a fixed-width group of three decimal digits
(``7`` becomes ``"007"``) and the concatenated digits are read back as one
integer, so ``b"AB"`` encodes to ``65066``. Leading zero bytes vanish when the
digit string is parsed; :func:`decode_bytes` restores them only when told the
original length.
"""
from __future__ import annotations

import logging
from typing import Iterable

from .errors import CodecError

_logger = logging.getLogger(__name__)

GROUP_WIDTH = 3


def encode_bytes(data: bytes) -> int:
    """Encode ``data`` as a single non-negative integer."""
    digits = "".join(f"{byte:03d}" for byte in bytes(data))
    try:
        return int(digits) if digits else 0
    except ValueError as exc:
        # interpreter cap on decimal conversions (sys.get_int_max_str_digits)
        raise CodecError("byte string too long for a single integer; use encode_chunks") from exc


def decode_bytes(value: int, length: int | None = None) -> bytes:
    """Decode an integer produced by :func:`encode_bytes`.

    ``length`` pads the result back to the original byte count, which is the
    only way to recover leading ``0x00`` bytes.
    """
    if value < 0:
        raise CodecError("encoded value must be non-negative")
    try:
        digits = str(value)
    except ValueError as exc:
        raise CodecError("encoded value too large to render") from exc
    if length == 0:
        if value:
            raise CodecError("encoded value holds more than 0 bytes")
        return b""
    if length is not None:
        if len(digits) > GROUP_WIDTH * length:
            raise CodecError(f"encoded value holds more than {length} bytes")
        digits = digits.zfill(GROUP_WIDTH * length)
    elif len(digits) % GROUP_WIDTH:
        digits = digits.zfill(len(digits) + GROUP_WIDTH - len(digits) % GROUP_WIDTH)

    out = bytearray()
    for start in range(0, len(digits), GROUP_WIDTH):
        group = int(digits[start:start + GROUP_WIDTH])
        if group > 255:
            raise CodecError(f"byte group {digits[start:start + GROUP_WIDTH]!r} exceeds 255")
        out.append(group)
    return bytes(out)


def decode_text(value: int, encoding: str = "ascii") -> str:
    """Decode ``value`` into text, raising :class:`CodecError` on bad bytes."""
    raw = decode_bytes(value)
    try:
        return raw.decode(encoding)
    except UnicodeDecodeError as exc:
        raise CodecError(f"decoded bytes are not valid {encoding} text") from exc


def chunk_capacity(prime: int) -> int:
    """Return how many bytes always encode to an integer below ``prime``."""
    capacity = (len(str(prime)) - 1) // GROUP_WIDTH
    if capacity < 1:
        raise CodecError("prime is too small to hold a single byte")
    return capacity


def encode_chunks(data: bytes, prime: int) -> list[int]:
    """Split ``data`` into sub-secrets that each fit in GF(prime)."""
    if not data:
        raise CodecError("nothing to encode")
    size = chunk_capacity(prime)
    chunks = [encode_bytes(data[i:i + size]) for i in range(0, len(data), size)]
    _logger.debug("encoded %d bytes into %d chunk(s) of up to %d bytes", len(data), len(chunks), size)
    return chunks


def decode_chunks(values: Iterable[int], prime: int) -> bytes:
    """Reverse :func:`encode_chunks`; every chunk but the last has full width."""
    values = list(values)
    size = chunk_capacity(prime)
    parts = [decode_bytes(value, size) for value in values[:-1]]
    if values:
        parts.append(decode_bytes(values[-1]))
    return b"".join(parts)


__all__ = [
    "encode_bytes",
    "decode_bytes",
    "decode_text",
    "chunk_capacity",
    "encode_chunks",
    "decode_chunks",
]
