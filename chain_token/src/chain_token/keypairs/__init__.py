"""Key pairs over the closed set of supported signature algorithms."""
from __future__ import annotations

from typing import Union

from chain_token.crypto.algorithms import Algorithm

from .base import KeyMaterial, VerificationFailure, VerificationResult
from .ed25519 import Ed25519KeyPair
from .secp256k1 import Secp256k1KeyPair

KeyPair = Union[Secp256k1KeyPair, Ed25519KeyPair]

_VARIANTS = {
    Algorithm.SECP256K1: Secp256k1KeyPair,
    Algorithm.ED25519: Ed25519KeyPair,
}


def keypair_for(algorithm: Algorithm | str, material: KeyMaterial) -> KeyPair:
    return _VARIANTS[Algorithm.parse(algorithm)](material)


__all__ = [
    "Ed25519KeyPair",
    "KeyMaterial",
    "KeyPair",
    "Secp256k1KeyPair",
    "VerificationFailure",
    "VerificationResult",
    "keypair_for",
]
