"""Conversion between ASN.1/DER ECDSA signatures and fixed-width JOSE signatures.

ECDSA signers emit ``SEQUENCE { INTEGER r, INTEGER s }`` in DER, whose length
varies with the magnitude of ``r`` and ``s``. Compact token verifiers expect
``r || s`` with each integer left padded to the curve's byte size.
"""
from __future__ import annotations

from cryptography.hazmat.primitives.asymmetric.utils import (
    decode_dss_signature,
    encode_dss_signature,
)

from chain_token.exceptions import MalformedSignature

_CURVE_SIZES = {
    "ES256": 32,
    "ES256K": 32,
    "ES384": 48,
    "ES512": 66,
}


def curve_size_for(token_alg: str) -> int:
    try:
        return _CURVE_SIZES[token_alg]
    except KeyError:
        raise ValueError(f"No JOSE curve size for algorithm {token_alg!r}") from None


def der_to_jose(signature: bytes, curve_size: int) -> bytes:
    """Convert a DER signature into ``r || s`` padded to ``curve_size`` bytes each."""
    try:
        r, s = decode_dss_signature(bytes(signature))
    except ValueError as exc:
        raise MalformedSignature(f"Invalid DER signature: {exc}") from exc
    limit = 1 << (8 * curve_size)
    for name, value in (("r", r), ("s", s)):
        if not 0 <= value < limit:
            raise MalformedSignature(f"DER integer {name} does not fit in {curve_size} bytes")
    return r.to_bytes(curve_size, "big") + s.to_bytes(curve_size, "big")


def jose_to_der(signature: bytes, curve_size: int) -> bytes:
    """Convert a fixed-width ``r || s`` signature into minimal DER."""
    signature = bytes(signature)
    if len(signature) != 2 * curve_size:
        raise MalformedSignature(
            f"JOSE signature must be {2 * curve_size} bytes, got {len(signature)}"
        )
    r = int.from_bytes(signature[:curve_size], "big")
    s = int.from_bytes(signature[curve_size:], "big")
    return encode_dss_signature(r, s)


__all__ = ["curve_size_for", "der_to_jose", "jose_to_der"]
