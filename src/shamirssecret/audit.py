# SPDX-FileCopyrightText: 2025 ShamirsSecret contributors
# SPDX-License-Identifier: MIT

"""Offline audit logging with Ed25519 signatures and hash chaining.

Records describe what was done (command, t, n, prime name, file names) and
never carry secrets or share values.
"""
from __future__ import annotations

import hashlib
import json
import os
import time
import uuid
from pathlib import Path
from typing import Any, Dict

from cryptography.exceptions import InvalidSignature, UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey

from .errors import AuditError
from .policy import policy

KEY_NAME = "signing_key.pem"
CHAIN_STATE_NAME = "chain.state"


def _resolve_audit_dir(audit_dir: os.PathLike[str] | str | None = None) -> Path:
    """Return the directory where audit artefacts are stored, creating it."""

    directory = Path(audit_dir).expanduser() if audit_dir is not None else policy.audit_dir
    directory.mkdir(parents=True, exist_ok=True)
    return directory


def _load_private_key(directory: Path, *, create: bool = True) -> Ed25519PrivateKey | None:
    key_path = directory / KEY_NAME
    if key_path.exists():
        key = serialization.load_pem_private_key(key_path.read_bytes(), password=None)
        if not isinstance(key, Ed25519PrivateKey):
            raise TypeError(f"{key_path} is not an Ed25519 key")
        return key
    if not create:
        return None
    private_key = Ed25519PrivateKey.generate()
    key_path.write_bytes(
        private_key.private_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PrivateFormat.PKCS8,
            encryption_algorithm=serialization.NoEncryption(),
        )
    )
    return private_key


def _load_prev_hash(directory: Path) -> str:
    try:
        return (directory / CHAIN_STATE_NAME).read_text().strip()
    except FileNotFoundError:
        return "GENESIS"


def _store_chain_hash(directory: Path, hash_hex: str) -> None:
    (directory / CHAIN_STATE_NAME).write_text(hash_hex)


def _canonical(payload: Dict[str, Any]) -> bytes:
    return json.dumps(payload, ensure_ascii=False, sort_keys=True).encode("utf-8")


def record_event(
    event: str,
    *,
    details: Dict[str, Any] | None = None,
    audit_dir: os.PathLike[str] | str | None = None,
) -> Path:
    try:
        return _write_record(_resolve_audit_dir(audit_dir), event, details or {})
    except (OSError, ValueError, TypeError, UnsupportedAlgorithm) as exc:
        raise AuditError(f"cannot write audit record: {exc}") from exc


def _write_record(directory: Path, event: str, details: Dict[str, Any]) -> Path:
    timestamp = int(time.time())
    payload = {
        "event": event,
        "details": details,
        "timestamp": timestamp,
        "prev_hash": _load_prev_hash(directory),
    }
    message = _canonical(payload)
    signature = _load_private_key(directory).sign(message)
    chain_hash = hashlib.sha3_512(message + signature).hexdigest()
    entry = {
        "payload": payload,
        "signature": signature.hex(),
        "chain_hash": chain_hash,
    }
    file_path = directory / f"audit_{timestamp}_{uuid.uuid4().hex}.json"
    file_path.write_text(json.dumps(entry, ensure_ascii=False, indent=2))
    _store_chain_hash(directory, chain_hash)
    return file_path


def verify_log(path: os.PathLike[str] | str) -> bool:
    """Check the signature and chain hash of one audit record."""
    record_path = Path(path)
    data = json.loads(record_path.read_text())
    payload = _canonical(data["payload"])
    signature = bytes.fromhex(data.get("signature") or "")
    private_key = _load_private_key(record_path.parent, create=False)
    if private_key is None:
        return False
    public_key = private_key.public_key()
    try:
        public_key.verify(signature, payload)
    except InvalidSignature:
        return False
    expected_chain_hash = hashlib.sha3_512(payload + signature).hexdigest()
    return expected_chain_hash == data.get("chain_hash")


__all__ = ["record_event", "verify_log"]
