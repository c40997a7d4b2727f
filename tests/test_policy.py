import importlib
from pathlib import Path

import pytest

from shamirssecret.errors import ConfigurationError
from shamirssecret.policy import normalize_prime_name, resolve_prime

_ENV = ("SHAMIR_PRIME", "SHAMIR_MINIMUM", "SHAMIR_TOTAL", "SHAMIR_AUDIT", "SHAMIR_AUDIT_DIR")


@pytest.fixture
def reload_policy(monkeypatch):
    policy_module = importlib.import_module("shamirssecret.policy")
    for name in _ENV:
        monkeypatch.delenv(name, raising=False)

    yield lambda: importlib.reload(policy_module)

    for name in _ENV:
        monkeypatch.delenv(name, raising=False)
    importlib.reload(policy_module)


def test_policy_defaults(reload_policy):
    policy = reload_policy().policy
    assert policy.prime_name == "mersenne-127"
    assert policy.prime == 2**127 - 1
    assert (policy.minimum, policy.total) == (3, 6)
    assert policy.audit_enabled is False


def test_policy_env_overrides(monkeypatch, reload_policy, tmp_path):
    monkeypatch.setenv("SHAMIR_PRIME", "2281")
    monkeypatch.setenv("SHAMIR_MINIMUM", "2")
    monkeypatch.setenv("SHAMIR_TOTAL", "4")
    monkeypatch.setenv("SHAMIR_AUDIT", "yes")
    monkeypatch.setenv("SHAMIR_AUDIT_DIR", str(tmp_path))

    policy = reload_policy().policy
    assert policy.prime_name == "mersenne-2281"
    assert policy.prime == 2**2281 - 1
    assert (policy.minimum, policy.total) == (2, 4)
    assert policy.audit_enabled is True
    assert policy.audit_dir == Path(tmp_path)


def test_policy_invalid_values_fall_back(monkeypatch, reload_policy):
    monkeypatch.setenv("SHAMIR_PRIME", "mersenne-13")
    monkeypatch.setenv("SHAMIR_MINIMUM", "three")

    policy = reload_policy().policy
    assert policy.prime_name == "mersenne-127"
    assert policy.minimum == 3


def test_prime_names():
    assert normalize_prime_name(" Mersenne-521 ") == "mersenne-521"
    assert resolve_prime("607") == 2**607 - 1
    with pytest.raises(ConfigurationError):
        resolve_prime("bogus")
