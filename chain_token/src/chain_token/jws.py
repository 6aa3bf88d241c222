"""Compact token primitive: segment encoding plus native signing and verification.

Signatures handled here are in each algorithm's native ``cryptography``
representation: DER for ECDSA over secp256k1 and the raw 64-byte blob for
Ed25519. Conversion to the JOSE wire shape happens in the key pairs.
"""
from __future__ import annotations

import binascii
import json
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping

import structlog
from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec, ed25519

from chain_token.crypto.algorithms import Algorithm
from chain_token.exceptions import MalformedToken
from chain_token.utils import b64d, b64e

logger = structlog.get_logger(__name__)


@dataclass(frozen=True, slots=True)
class TokenSegments:
    header: str
    payload: str
    signature: str

    @property
    def signing_input(self) -> bytes:
        return f"{self.header}.{self.payload}".encode("ascii")

    @property
    def signature_bytes(self) -> bytes:
        return b64d(self.signature)


@dataclass(frozen=True, slots=True)
class DecodedToken:
    """Read-only view of a token's header and payload. The signature is not checked."""

    header: Mapping[str, Any]
    payload: Mapping[str, Any]


def _encode_json(value: Mapping[str, Any]) -> str:
    return b64e(json.dumps(value, separators=(",", ":"), ensure_ascii=False).encode("utf-8"))


def _decode_segment(segment: str, name: str) -> bytes:
    try:
        raw = b64d(segment)
    except (binascii.Error, ValueError) as exc:
        raise MalformedToken(f"Token {name} is not valid base64url") from exc
    if b64e(raw) != segment:
        raise MalformedToken(f"Token {name} is not canonical base64url")
    return raw


def _decode_json(segment: str, name: str) -> Mapping[str, Any]:
    raw = _decode_segment(segment, name)
    try:
        value = json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise MalformedToken(f"Token {name} is not valid JSON") from exc
    if not isinstance(value, dict):
        raise MalformedToken(f"Token {name} must be a JSON object")
    return MappingProxyType(value)


def split_token(token: str) -> TokenSegments:
    if not isinstance(token, str):
        raise MalformedToken("Token must be a string")
    parts = token.split(".")
    if len(parts) != 3:
        raise MalformedToken(f"Token must have 3 segments, got {len(parts)}")
    for name, part in zip(("header", "payload", "signature"), parts):
        _decode_segment(part, name)
    return TokenSegments(*parts)


def decode_token(token: str) -> DecodedToken:
    segments = split_token(token)
    return DecodedToken(
        header=_decode_json(segments.header, "header"),
        payload=_decode_json(segments.payload, "payload"),
    )


def replace_signature(segments: TokenSegments, signature: bytes) -> str:
    return f"{segments.header}.{segments.payload}.{b64e(signature)}"


class TokenSigner:
    """Builds a signed compact token with the algorithm's native signature."""

    def __init__(self, algorithm: Algorithm, private_key) -> None:
        self.algorithm = algorithm
        self._private_key = private_key

    def sign(self, payload: Mapping[str, Any], header: Mapping[str, Any]) -> str:
        signing_input = f"{_encode_json(header)}.{_encode_json(payload)}"
        signature = self._sign_bytes(signing_input.encode("ascii"))
        return f"{signing_input}.{b64e(signature)}"

    def _sign_bytes(self, data: bytes) -> bytes:
        if self.algorithm is Algorithm.ED25519:
            return self._private_key.sign(data)
        return self._private_key.sign(data, ec.ECDSA(hashes.SHA256()))


class TokenVerifier:
    """Verifies a compact token carrying the algorithm's native signature."""

    def __init__(self, algorithm: Algorithm, public_key) -> None:
        self.algorithm = algorithm
        self._public_key = public_key

    def verify(self, token: str) -> bool:
        try:
            segments = split_token(token)
        except MalformedToken as exc:
            logger.debug("token_malformed", reason=str(exc))
            return False
        return self.verify_segments(segments)

    def verify_segments(self, segments: TokenSegments) -> bool:
        try:
            if isinstance(self._public_key, ed25519.Ed25519PublicKey):
                self._public_key.verify(segments.signature_bytes, segments.signing_input)
            else:
                self._public_key.verify(
                    segments.signature_bytes, segments.signing_input, ec.ECDSA(hashes.SHA256())
                )
        except InvalidSignature:
            return False
        return True


__all__ = [
    "DecodedToken",
    "TokenSegments",
    "TokenSigner",
    "TokenVerifier",
    "decode_token",
    "replace_signature",
    "split_token",
]
