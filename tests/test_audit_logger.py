import json

import pytest

from shamirssecret import audit
from shamirssecret.errors import AuditError
from shamirssecret.keys import generate_private_key, private_key_to_pem


def test_record_event_creates_signed_chain(tmp_path):
    first_path = audit.record_event("first", details={"value": 1}, audit_dir=tmp_path)
    second_path = audit.record_event("second", details={"value": 2}, audit_dir=tmp_path)

    assert first_path.exists()
    assert second_path.exists()
    assert first_path != second_path

    for path in (first_path, second_path):
        assert audit.verify_log(path)

    chain_state = (tmp_path / "chain.state").read_text().strip()
    second_data = json.loads(second_path.read_text())
    assert chain_state == second_data["chain_hash"]
    assert second_data["payload"]["prev_hash"] == json.loads(first_path.read_text())["chain_hash"]


def test_first_record_starts_chain(tmp_path):
    path = audit.record_event("genesis", audit_dir=tmp_path)
    data = json.loads(path.read_text())
    assert data["payload"]["prev_hash"] == "GENESIS"
    assert data["payload"]["details"] == {}


def test_tampered_record_fails(tmp_path):
    path = audit.record_event("shares.created", details={"minimum": 3}, audit_dir=tmp_path)
    data = json.loads(path.read_text())
    data["payload"]["details"]["minimum"] = 1
    path.write_text(json.dumps(data))
    assert not audit.verify_log(path)


def test_custom_directory_is_created(tmp_path):
    target = tmp_path / "nested" / "audit"
    log_path = audit.record_event("test", audit_dir=target)
    assert log_path.parent == target
    assert (target / "signing_key.pem").exists()


def test_verify_without_signing_key(tmp_path):
    source = tmp_path / "source"
    copy_dir = tmp_path / "copy"
    copy_dir.mkdir()
    path = audit.record_event("copied", audit_dir=source)
    copied = copy_dir / path.name
    copied.write_text(path.read_text())

    assert not audit.verify_log(copied)
    assert not (copy_dir / "signing_key.pem").exists()


def test_corrupt_signing_key_raises_audit_error(tmp_path):
    (tmp_path / "signing_key.pem").write_text("garbage")
    with pytest.raises(AuditError):
        audit.record_event("broken", audit_dir=tmp_path)


def test_non_ed25519_signing_key_raises_audit_error(tmp_path):
    (tmp_path / "signing_key.pem").write_bytes(private_key_to_pem(generate_private_key()))
    with pytest.raises(AuditError):
        audit.record_event("broken", audit_dir=tmp_path)
