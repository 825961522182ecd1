"""Shared fixtures for credential resolution tests."""

import base64

import pytest

from nack_auth.config.settings import get_settings
from nack_auth.core.nkey_seed import PREFIX_BYTE_SEED, PREFIX_BYTE_USER, crc16
from nack_auth.credentials.local import LocalCredentialStore
from nack_auth.credentials.memory import InMemoryCredentialStore


def encode_key(payload: bytes) -> str:
    """Append the checksum and base32 encode without padding."""
    raw = payload + crc16(payload).to_bytes(2, "little")
    return base64.b32encode(raw).decode().rstrip("=")


def make_seed(raw_seed: bytes = bytes(range(32)), public_prefix: int = PREFIX_BYTE_USER) -> str:
    """Encode a raw ed25519 seed the way nk and nsc write seed files."""
    b1 = PREFIX_BYTE_SEED | (public_prefix >> 5)
    b2 = (public_prefix & 31) << 3
    return encode_key(bytes([b1, b2]) + raw_seed)


VALID_SEED = make_seed()


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch, tmp_path):
    """Keep settings isolated from the host environment and .env files."""
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def memory_store():
    return InMemoryCredentialStore()


@pytest.fixture
def disk_store(tmp_path):
    return LocalCredentialStore(
        creds_dir=str(tmp_path / "nack-accounts" / "creds"),
        nkey_dir=str(tmp_path / "nack-accounts" / "keys"),
        dir_mode=0o755,
        file_mode=0o644,
    )
