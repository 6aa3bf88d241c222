"""Decoders for chain-native key encodings.

Every decoder returns the algorithm the key belongs to together with the raw
key bytes in that algorithm's native form.
"""
from __future__ import annotations

import hashlib
from typing import Tuple

import base58
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec

from chain_token.crypto.algorithms import Algorithm
from chain_token.exceptions import InvalidKeyMaterial

RIPPLE_ALPHABET = base58.RIPPLE_ALPHABET
JINGTUM_ALPHABET = b"jpshnaf39wBUDNEGHJKLM4PQRST7VWXYZ2bcdeCg65rkm8oFqi1tuvAxyz"
BITCOIN_ALPHABET = base58.BITCOIN_ALPHABET

_ED25519_SEED_PREFIX = b"\x01\xe1\x4b"
_SECP256K1_SEED_PREFIX = b"\x21"
_SEED_ENTROPY_SIZE = 16

_ED25519_KEY_PREFIX = 0xED
_SECP256K1_PRIVATE_PREFIX = 0x00
_UNCOMPRESSED_POINT_PREFIX = b"\x04"

_WIF_VERSIONS = (0x80, 0xEF)
_WIF_COMPRESSED_FLAG = 0x01

# Order of the secp256k1 group.
SECP256K1_ORDER = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141

KeyBytes = Tuple[Algorithm, bytes]


def parse_key_bytes(material: str | bytes) -> bytes:
    """Raw bytes pass through; strings are read as hex with an optional ``0x``."""
    if isinstance(material, (bytes, bytearray)):
        return bytes(material)
    if not isinstance(material, str):
        raise InvalidKeyMaterial("Key material must be bytes or a hex string")
    text = material.strip()
    if text[:2].lower() == "0x":
        text = text[2:]
    try:
        return bytes.fromhex(text)
    except ValueError as exc:
        raise InvalidKeyMaterial("Key material is not valid hex") from exc


def plain_secp256k1_private(material: str | bytes) -> KeyBytes:
    return Algorithm.SECP256K1, parse_key_bytes(material)


def plain_secp256k1_public(material: str | bytes) -> KeyBytes:
    raw = parse_key_bytes(material)
    # Ethereum wallets report the uncompressed point without its 0x04 tag.
    if len(raw) == 64:
        raw = _UNCOMPRESSED_POINT_PREFIX + raw
    return Algorithm.SECP256K1, raw


def prefixed_private(material: str | bytes) -> KeyBytes:
    """Ripple-style private key: ``ED`` + seed, ``00`` + scalar, or a bare scalar."""
    raw = parse_key_bytes(material)
    if len(raw) == 33 and raw[0] == _ED25519_KEY_PREFIX:
        return Algorithm.ED25519, raw[1:]
    if len(raw) == 33 and raw[0] == _SECP256K1_PRIVATE_PREFIX:
        return Algorithm.SECP256K1, raw[1:]
    return Algorithm.SECP256K1, raw


def prefixed_public(material: str | bytes) -> KeyBytes:
    """Ripple-style public key: ``ED`` + point for ed25519, SEC1 point otherwise."""
    raw = parse_key_bytes(material)
    if len(raw) == 33 and raw[0] == _ED25519_KEY_PREFIX:
        return Algorithm.ED25519, raw[1:]
    return Algorithm.SECP256K1, raw


def _sha512_half(data: bytes) -> bytes:
    return hashlib.sha512(data).digest()[:32]


def derive_scalar(data: bytes, discriminator: int | None = None) -> int:
    """First SHA-512-half of ``data [+ discriminator] + counter`` inside (0, n)."""
    for counter in range(0x100000000):
        hasher = hashlib.sha512(data)
        if discriminator is not None:
            hasher.update(discriminator.to_bytes(4, "big"))
        hasher.update(counter.to_bytes(4, "big"))
        candidate = int.from_bytes(hasher.digest()[:32], "big")
        if 0 < candidate < SECP256K1_ORDER:
            return candidate
    raise InvalidKeyMaterial("Seed does not yield a valid secp256k1 scalar")  # pragma: no cover


def _compressed_point(scalar: int) -> bytes:
    public = ec.derive_private_key(scalar, ec.SECP256K1()).public_key()
    return public.public_bytes(
        serialization.Encoding.X962, serialization.PublicFormat.CompressedPoint
    )


def derive_secp256k1_private(entropy: bytes, account_index: int = 0) -> bytes:
    root = derive_scalar(entropy)
    intermediate = derive_scalar(_compressed_point(root), account_index)
    return ((root + intermediate) % SECP256K1_ORDER).to_bytes(32, "big")


def derive_ed25519_private(entropy: bytes) -> bytes:
    return _sha512_half(entropy)


def _b58decode_check(value: str, alphabet: bytes) -> bytes:
    try:
        return base58.b58decode_check(value.strip(), alphabet=alphabet)
    except ValueError as exc:
        raise InvalidKeyMaterial(f"Invalid base58check encoding: {exc}") from exc


def decode_family_seed(secret: str, alphabet: bytes = RIPPLE_ALPHABET) -> Tuple[Algorithm, bytes]:
    """Return the algorithm and 16-byte entropy encoded in a Ripple-family seed."""
    if not isinstance(secret, str):
        raise InvalidKeyMaterial("Seed must be a base58 string")
    payload = _b58decode_check(secret, alphabet)
    if payload.startswith(_ED25519_SEED_PREFIX):
        algorithm, entropy = Algorithm.ED25519, payload[len(_ED25519_SEED_PREFIX):]
    elif payload.startswith(_SECP256K1_SEED_PREFIX):
        algorithm, entropy = Algorithm.SECP256K1, payload[len(_SECP256K1_SEED_PREFIX):]
    else:
        raise InvalidKeyMaterial("Seed has an unknown type prefix")
    if len(entropy) != _SEED_ENTROPY_SIZE:
        raise InvalidKeyMaterial(
            f"Seed entropy must be {_SEED_ENTROPY_SIZE} bytes, got {len(entropy)}"
        )
    return algorithm, entropy


def encode_family_seed(
    entropy: bytes, algorithm: Algorithm, alphabet: bytes = RIPPLE_ALPHABET
) -> str:
    if len(entropy) != _SEED_ENTROPY_SIZE:
        raise InvalidKeyMaterial(f"Seed entropy must be {_SEED_ENTROPY_SIZE} bytes")
    prefix = _ED25519_SEED_PREFIX if algorithm is Algorithm.ED25519 else _SECP256K1_SEED_PREFIX
    return base58.b58encode_check(prefix + entropy, alphabet=alphabet).decode("ascii")


def family_seed_private(secret: str, alphabet: bytes = RIPPLE_ALPHABET) -> KeyBytes:
    algorithm, entropy = decode_family_seed(secret, alphabet)
    if algorithm is Algorithm.ED25519:
        return algorithm, derive_ed25519_private(entropy)
    return algorithm, derive_secp256k1_private(entropy)


def wif_private(secret: str) -> KeyBytes:
    if not isinstance(secret, str):
        raise InvalidKeyMaterial("WIF secret must be a base58 string")
    payload = _b58decode_check(secret, BITCOIN_ALPHABET)
    if not payload or payload[0] not in _WIF_VERSIONS:
        raise InvalidKeyMaterial("WIF secret has an unknown version byte")
    key = payload[1:]
    if len(key) == 33 and key[-1] == _WIF_COMPRESSED_FLAG:
        key = key[:-1]
    if len(key) != 32:
        raise InvalidKeyMaterial(f"WIF secret carries {len(key)} key bytes, expected 32")
    return Algorithm.SECP256K1, key


def encode_wif(private_key: bytes, *, compressed: bool = True, testnet: bool = False) -> str:
    version = bytes([_WIF_VERSIONS[1] if testnet else _WIF_VERSIONS[0]])
    suffix = bytes([_WIF_COMPRESSED_FLAG]) if compressed else b""
    return base58.b58encode_check(version + private_key + suffix).decode("ascii")


__all__ = [
    "BITCOIN_ALPHABET",
    "JINGTUM_ALPHABET",
    "RIPPLE_ALPHABET",
    "SECP256K1_ORDER",
    "decode_family_seed",
    "derive_ed25519_private",
    "derive_scalar",
    "derive_secp256k1_private",
    "encode_family_seed",
    "encode_wif",
    "family_seed_private",
    "parse_key_bytes",
    "plain_secp256k1_private",
    "plain_secp256k1_public",
    "prefixed_private",
    "prefixed_public",
    "wif_private",
]
