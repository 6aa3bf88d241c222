"""Compact identity tokens signed with blockchain account keys."""
from __future__ import annotations

from .chains import KeyRole, resolve_chain, supported_chains
from .crypto import Algorithm, KeyEncoder, der_to_jose, get_private_pem, get_public_pem, jose_to_der
from .exceptions import (
    ChainTokenError,
    InvalidKeyLength,
    InvalidKeyMaterial,
    MalformedSignature,
    MalformedToken,
    MissingKey,
    UnsupportedChain,
)
from .jws import DecodedToken
from .keypairs import (
    Ed25519KeyPair,
    KeyMaterial,
    KeyPair,
    Secp256k1KeyPair,
    VerificationFailure,
    VerificationResult,
    keypair_for,
)
from .token import ChainToken
from .version import __version__

__all__ = [
    "Algorithm",
    "ChainToken",
    "ChainTokenError",
    "DecodedToken",
    "Ed25519KeyPair",
    "InvalidKeyLength",
    "InvalidKeyMaterial",
    "KeyEncoder",
    "KeyMaterial",
    "KeyPair",
    "KeyRole",
    "MalformedSignature",
    "MalformedToken",
    "MissingKey",
    "Secp256k1KeyPair",
    "UnsupportedChain",
    "VerificationFailure",
    "VerificationResult",
    "__version__",
    "der_to_jose",
    "get_private_pem",
    "get_public_pem",
    "jose_to_der",
    "keypair_for",
    "resolve_chain",
    "supported_chains",
]
