# SPDX-FileCopyrightText: 2025 ShamirsSecret contributors
# SPDX-License-Identifier: MIT

"""EC key helpers: string encryption and private key sharding.

Strings are sealed to a P-256 public key with an ephemeral ECDH exchange,
HKDF-SHA256 and AES-GCM. The token is the base64 of::

    ephemeral public point (65 bytes, uncompressed) || nonce (12) || ciphertext

Sharding turns the PEM text of a private key into field integers with the
byte codec (one integer per chunk) and splits each of them.
"""
from __future__ import annotations

import base64
import binascii
import logging
import os
from pathlib import Path

from cryptography.exceptions import InvalidTag, UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.ciphers.aead import AESGCM
from cryptography.hazmat.primitives.kdf.hkdf import HKDF

from .codec import decode_chunks, encode_chunks
from .errors import CodecError, DecryptionError, KeyFormatError
from .sharing import Share, generate_shares
from .store import ShareFile, recover_from_file

_logger = logging.getLogger(__name__)

CURVE = ec.SECP256R1()
_POINT_LEN = 65
_NONCE_LEN = 12
_HKDF_INFO = b"shamirssecret/ecies/v1"


def generate_private_key() -> ec.EllipticCurvePrivateKey:
    return ec.generate_private_key(CURVE)


def private_key_to_pem(private_key: ec.EllipticCurvePrivateKey) -> bytes:
    return private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    )


def parse_private_key(data: bytes) -> ec.EllipticCurvePrivateKey:
    """Parse an unencrypted PEM private key on the P-256 curve."""
    try:
        key = serialization.load_pem_private_key(data, password=None)
    except (ValueError, TypeError, UnsupportedAlgorithm) as exc:
        raise KeyFormatError(f"cannot load private key: {exc}") from exc
    if not isinstance(key, ec.EllipticCurvePrivateKey) or key.curve.name != CURVE.name:
        raise KeyFormatError("private key must be an EC key on secp256r1")
    return key


def load_private_key(path: str | os.PathLike[str]) -> ec.EllipticCurvePrivateKey:
    return parse_private_key(Path(path).read_bytes())


def _derive_key(shared_secret: bytes) -> bytes:
    return HKDF(
        algorithm=hashes.SHA256(),
        length=32,
        salt=None,
        info=_HKDF_INFO,
    ).derive(shared_secret)


def encrypt_text(text: str, public_key: ec.EllipticCurvePublicKey) -> str:
    """Seal ``text`` to ``public_key`` and return a base64 token."""
    ephemeral = ec.generate_private_key(CURVE)
    point = ephemeral.public_key().public_bytes(
        serialization.Encoding.X962,
        serialization.PublicFormat.UncompressedPoint,
    )
    key = _derive_key(ephemeral.exchange(ec.ECDH(), public_key))
    nonce = os.urandom(_NONCE_LEN)
    ciphertext = AESGCM(key).encrypt(nonce, text.encode("utf-8"), point)
    return base64.b64encode(point + nonce + ciphertext).decode("ascii")


def decrypt_text(token: str, private_key: ec.EllipticCurvePrivateKey) -> str:
    """Open a token produced by :func:`encrypt_text`."""
    try:
        raw = base64.b64decode(token.strip(), validate=True)
    except (binascii.Error, ValueError) as exc:
        raise DecryptionError("encrypted string is not valid base64") from exc
    if len(raw) <= _POINT_LEN + _NONCE_LEN:
        raise DecryptionError("encrypted string is truncated")
    point = raw[:_POINT_LEN]
    nonce = raw[_POINT_LEN:_POINT_LEN + _NONCE_LEN]
    ciphertext = raw[_POINT_LEN + _NONCE_LEN:]
    try:
        peer = ec.EllipticCurvePublicKey.from_encoded_point(CURVE, point)
    except ValueError as exc:
        raise DecryptionError("encrypted string carries an invalid EC point") from exc
    key = _derive_key(private_key.exchange(ec.ECDH(), peer))
    try:
        plain = AESGCM(key).decrypt(nonce, ciphertext, point)
    except InvalidTag as exc:
        raise DecryptionError("encrypted string does not match this key") from exc
    return plain.decode("utf-8")


def shard_key(pem: bytes, threshold: int, total: int, prime: int) -> list[list[Share]]:
    """Split the PEM text of a key into one share list per codec chunk."""
    chunks = encode_chunks(pem, prime)
    _logger.debug("sharding key of %d bytes into %d chunk(s)", len(pem), len(chunks))
    return [generate_shares(chunk, threshold, total, prime) for chunk in chunks]


def deshard_key(share_file: ShareFile, prime: int) -> bytes:
    """Re-assemble the PEM text of a key from its share file."""
    pem = decode_chunks(recover_from_file(share_file, prime), prime)
    try:
        pem.decode("ascii")
    except UnicodeDecodeError as exc:
        raise CodecError("recovered key is not ASCII text") from exc
    try:
        parse_private_key(pem)
    except KeyFormatError as exc:
        raise CodecError("recovered bytes are not a PEM private key") from exc
    return pem


__all__ = [
    "CURVE",
    "generate_private_key",
    "private_key_to_pem",
    "parse_private_key",
    "load_private_key",
    "encrypt_text",
    "decrypt_text",
    "shard_key",
    "deshard_key",
]
