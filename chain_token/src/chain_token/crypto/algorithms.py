"""Signature algorithms supported for chain account keys."""
from __future__ import annotations

from enum import Enum
from typing import Tuple


class Algorithm(str, Enum):
    SECP256K1 = "secp256k1"
    ED25519 = "ed25519"

    @classmethod
    def parse(cls, value: "str | Algorithm") -> "Algorithm":
        if isinstance(value, Algorithm):
            return value
        if not isinstance(value, str):
            raise ValueError(f"Unsupported algorithm: {value!r}")
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise ValueError(f"Unsupported algorithm: {value}") from None

    @property
    def token_alg(self) -> str:
        """JOSE ``alg`` tag of the native signing algorithm."""
        return _TOKEN_ALGS[self]

    @property
    def private_key_size(self) -> int:
        return 32

    @property
    def public_key_sizes(self) -> Tuple[int, ...]:
        return _PUBLIC_KEY_SIZES[self]

    @property
    def signature_size(self) -> int:
        return 64

    @property
    def curve_size(self) -> int:
        return 32


_TOKEN_ALGS = {
    Algorithm.SECP256K1: "ES256K",
    Algorithm.ED25519: "EdDSA",
}

# Compressed and uncompressed SEC1 points for secp256k1.
_PUBLIC_KEY_SIZES = {
    Algorithm.SECP256K1: (33, 65),
    Algorithm.ED25519: (32,),
}


__all__ = ["Algorithm"]
