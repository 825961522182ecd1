"""
NKEY seed decoding.

A seed is base32 (no padding) of:
    [seed prefix | type prefix][type prefix][32 byte ed25519 seed][crc16 LE]
"""
import base64
import binascii
import re

from nack_auth.core.errors import NkeySeedError

PREFIX_BYTE_SEED = 18 << 3

# Public key types a seed may carry
PREFIX_BYTE_OPERATOR = 14 << 3
PREFIX_BYTE_SERVER = 13 << 3
PREFIX_BYTE_CLUSTER = 2 << 3
PREFIX_BYTE_ACCOUNT = 0
PREFIX_BYTE_USER = 20 << 3
PREFIX_BYTE_CURVE = 23 << 3

PUBLIC_PREFIXES = {
    PREFIX_BYTE_OPERATOR,
    PREFIX_BYTE_SERVER,
    PREFIX_BYTE_CLUSTER,
    PREFIX_BYTE_ACCOUNT,
    PREFIX_BYTE_USER,
    PREFIX_BYTE_CURVE,
}

SEED_LENGTH = 32

# 'S' followed by 57 base32 characters, alone on its line
SEED_LINE_PATTERN = re.compile(r"^\s*(S[A-Z2-7]{57})\s*$", re.MULTILINE)


def crc16(data: bytes) -> int:
    """CRC-16/XMODEM as used by NKEYS."""
    crc = 0
    for byte in data:
        crc ^= byte << 8
        for _ in range(8):
            if crc & 0x8000:
                crc = ((crc << 1) ^ 0x1021) & 0xFFFF
            else:
                crc = (crc << 1) & 0xFFFF
    return crc


def decode_seed(seed: str) -> tuple[int, bytes]:
    """
    Decode a seed string into its public key prefix byte and raw seed.

    Raises NkeySeedError on bad encoding, checksum, prefix or length.
    """
    try:
        raw = base64.b32decode(seed + "=" * (-len(seed) % 8))
    except (binascii.Error, ValueError) as e:
        raise NkeySeedError(f"invalid nkey seed encoding: {e}") from e

    if len(raw) != SEED_LENGTH + 4:
        raise NkeySeedError("invalid nkey seed length")

    payload, checksum = raw[:-2], int.from_bytes(raw[-2:], "little")
    if crc16(payload) != checksum:
        raise NkeySeedError("invalid nkey seed checksum")

    if payload[0] & 0xF8 != PREFIX_BYTE_SEED:
        raise NkeySeedError("invalid nkey seed prefix")

    public_prefix = ((payload[0] & 0x07) << 5) | ((payload[1] & 0xF8) >> 3)
    if public_prefix not in PUBLIC_PREFIXES:
        raise NkeySeedError("invalid nkey seed public key type")

    return public_prefix, payload[2:]


def find_seed(contents: str) -> str:
    """Find the seed in a bare or decorated seed file and validate it."""
    match = SEED_LINE_PATTERN.search(contents)
    if not match:
        raise NkeySeedError("no nkey seed found")
    seed = match.group(1)
    decode_seed(seed)
    return seed
