from __future__ import annotations

import os
from dataclasses import dataclass

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec, ed25519

from chain_token.chains import codecs
from chain_token.crypto import Algorithm, KeyEncoder


@dataclass(frozen=True)
class Wallet:
    """Key material the way each chain's wallet library reports it."""

    private_key: str
    public_key: str
    raw_private: bytes
    raw_public: bytes
    secret: str | None = None


def _secp256k1_raw() -> tuple[bytes, bytes, bytes]:
    key = ec.generate_private_key(ec.SECP256K1())
    private = key.private_numbers().private_value.to_bytes(32, "big")
    public = key.public_key()
    compressed = public.public_bytes(
        serialization.Encoding.X962, serialization.PublicFormat.CompressedPoint
    )
    uncompressed = public.public_bytes(
        serialization.Encoding.X962, serialization.PublicFormat.UncompressedPoint
    )
    return private, compressed, uncompressed


def make_ethereum_wallet() -> Wallet:
    private, compressed, uncompressed = _secp256k1_raw()
    return Wallet(
        private_key="0x" + private.hex(),
        public_key="0x" + uncompressed[1:].hex(),
        raw_private=private,
        raw_public=uncompressed,
    )


def make_bitcoin_wallet() -> Wallet:
    private, compressed, _ = _secp256k1_raw()
    return Wallet(
        private_key=private.hex(),
        public_key=compressed.hex(),
        raw_private=private,
        raw_public=compressed,
        secret=codecs.encode_wif(private),
    )


def make_ripple_wallet(algorithm: Algorithm, alphabet: bytes = codecs.RIPPLE_ALPHABET) -> Wallet:
    entropy = os.urandom(16)
    secret = codecs.encode_family_seed(entropy, algorithm, alphabet)
    if algorithm is Algorithm.ED25519:
        private = codecs.derive_ed25519_private(entropy)
        public = (
            ed25519.Ed25519PrivateKey.from_private_bytes(private)
            .public_key()
            .public_bytes(serialization.Encoding.Raw, serialization.PublicFormat.Raw)
        )
        prefix = "ED"
    else:
        private = codecs.derive_secp256k1_private(entropy)
        public = KeyEncoder(Algorithm.SECP256K1).public_from_private(private)
        prefix = "00"
    return Wallet(
        private_key=prefix + private.hex().upper(),
        public_key=(("ED" + public.hex()) if algorithm is Algorithm.ED25519 else public.hex()).upper(),
        raw_private=private,
        raw_public=public,
        secret=secret,
    )


@pytest.fixture(scope="session")
def eth_wallet() -> Wallet:
    return make_ethereum_wallet()


@pytest.fixture(scope="session")
def bitcoin_wallet() -> Wallet:
    return make_bitcoin_wallet()


@pytest.fixture(scope="session")
def ripple_secp256k1_wallet() -> Wallet:
    return make_ripple_wallet(Algorithm.SECP256K1)


@pytest.fixture(scope="session")
def ripple_ed25519_wallet() -> Wallet:
    return make_ripple_wallet(Algorithm.ED25519)


@pytest.fixture(scope="session")
def jingtum_ed25519_wallet() -> Wallet:
    return make_ripple_wallet(Algorithm.ED25519, codecs.JINGTUM_ALPHABET)


@pytest.fixture(scope="session")
def jingtum_secp256k1_wallet() -> Wallet:
    return make_ripple_wallet(Algorithm.SECP256K1, codecs.JINGTUM_ALPHABET)


@pytest.fixture
def sample_data() -> dict:
    return {
        "header": {
            "x5c": ["*****public key*****"],
            "type": "CWT",
            "chain": "ethereum",
        },
        "payload": {
            "usr": "zhye",
            "time": 1718084540,
        },
    }
