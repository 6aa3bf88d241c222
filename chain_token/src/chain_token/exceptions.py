"""Central exception hierarchy"""
from __future__ import annotations


class ChainTokenError(Exception):
    """Base exception for all failures"""


class UnsupportedChain(ChainTokenError):
    """Raised when a chain name has no entry in the chain table"""


class MalformedToken(ChainTokenError):
    """Raised when a token cannot be split or its segments cannot be decoded"""


class MalformedSignature(ChainTokenError):
    """Raised for invalid DER or JOSE signature framing"""


class InvalidKeyLength(ChainTokenError):
    """Raised when raw key bytes do not match the algorithm's key size"""


class MissingKey(ChainTokenError):
    """Raised when an operation needs a key half the instance does not hold"""


class InvalidKeyMaterial(ChainTokenError):
    """Raised when supplied key material cannot be decoded for its chain and role"""


__all__ = [
    "ChainTokenError",
    "InvalidKeyLength",
    "InvalidKeyMaterial",
    "MalformedSignature",
    "MalformedToken",
    "MissingKey",
    "UnsupportedChain",
]
