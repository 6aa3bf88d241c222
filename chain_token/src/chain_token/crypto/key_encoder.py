"""PEM encoding for raw chain account keys."""
from __future__ import annotations

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec, ed25519

from chain_token.crypto.algorithms import Algorithm
from chain_token.exceptions import InvalidKeyLength, InvalidKeyMaterial


class KeyEncoder:
    """Converts raw key bytes to and from PEM for one algorithm."""

    def __init__(self, algorithm: Algorithm | str) -> None:
        self.algorithm = Algorithm.parse(algorithm)

    def _check_private(self, raw: bytes) -> bytes:
        raw = bytes(raw)
        if len(raw) != self.algorithm.private_key_size:
            raise InvalidKeyLength(
                f"{self.algorithm.value} private key must be "
                f"{self.algorithm.private_key_size} bytes, got {len(raw)}"
            )
        return raw

    def _check_public(self, raw: bytes) -> bytes:
        raw = bytes(raw)
        if len(raw) not in self.algorithm.public_key_sizes:
            sizes = " or ".join(str(size) for size in self.algorithm.public_key_sizes)
            raise InvalidKeyLength(
                f"{self.algorithm.value} public key must be {sizes} bytes, got {len(raw)}"
            )
        return raw

    # Raw -> key objects
    def load_private(self, raw: bytes) -> ec.EllipticCurvePrivateKey | ed25519.Ed25519PrivateKey:
        raw = self._check_private(raw)
        try:
            if self.algorithm is Algorithm.ED25519:
                return ed25519.Ed25519PrivateKey.from_private_bytes(raw)
            return ec.derive_private_key(int.from_bytes(raw, "big"), ec.SECP256K1())
        except ValueError as exc:
            raise InvalidKeyMaterial(f"Invalid {self.algorithm.value} private key") from exc

    def load_public(self, raw: bytes) -> ec.EllipticCurvePublicKey | ed25519.Ed25519PublicKey:
        raw = self._check_public(raw)
        try:
            if self.algorithm is Algorithm.ED25519:
                return ed25519.Ed25519PublicKey.from_public_bytes(raw)
            return ec.EllipticCurvePublicKey.from_encoded_point(ec.SECP256K1(), raw)
        except ValueError as exc:
            raise InvalidKeyMaterial(f"Invalid {self.algorithm.value} public key") from exc

    def public_from_private(self, raw: bytes, *, compressed: bool = True) -> bytes:
        return self._raw_public(self.load_private(raw).public_key(), compressed=compressed)

    def _raw_public(self, key, *, compressed: bool) -> bytes:
        if self.algorithm is Algorithm.ED25519:
            return key.public_bytes(serialization.Encoding.Raw, serialization.PublicFormat.Raw)
        point_format = (
            serialization.PublicFormat.CompressedPoint
            if compressed
            else serialization.PublicFormat.UncompressedPoint
        )
        return key.public_bytes(serialization.Encoding.X962, point_format)

    # Serialization
    def encode_public(self, raw: bytes) -> str:
        key = self.load_public(raw)
        return key.public_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PublicFormat.SubjectPublicKeyInfo,
        ).decode("ascii")

    def encode_private(self, raw: bytes) -> str:
        key = self.load_private(raw)
        if self.algorithm is Algorithm.ED25519:
            private_format = serialization.PrivateFormat.PKCS8
        else:
            private_format = serialization.PrivateFormat.TraditionalOpenSSL
        return key.private_bytes(
            encoding=serialization.Encoding.PEM,
            format=private_format,
            encryption_algorithm=serialization.NoEncryption(),
        ).decode("ascii")

    def decode_public(self, pem: str | bytes, *, compressed: bool = True) -> bytes:
        if isinstance(pem, str):
            pem = pem.encode("ascii")
        try:
            key = serialization.load_pem_public_key(pem)
        except ValueError as exc:
            raise InvalidKeyMaterial("Public key PEM could not be parsed") from exc
        self._ensure_matches(key)
        return self._raw_public(key, compressed=compressed)

    def decode_private(self, pem: str | bytes) -> bytes:
        if isinstance(pem, str):
            pem = pem.encode("ascii")
        try:
            key = serialization.load_pem_private_key(pem, password=None)
        except (ValueError, TypeError) as exc:
            raise InvalidKeyMaterial("Private key PEM could not be parsed") from exc
        self._ensure_matches(key)
        if self.algorithm is Algorithm.ED25519:
            return key.private_bytes(
                serialization.Encoding.Raw,
                serialization.PrivateFormat.Raw,
                serialization.NoEncryption(),
            )
        return key.private_numbers().private_value.to_bytes(32, "big")

    def _ensure_matches(self, key) -> None:
        if self.algorithm is Algorithm.ED25519:
            if not isinstance(key, (ed25519.Ed25519PrivateKey, ed25519.Ed25519PublicKey)):
                raise InvalidKeyMaterial("Key is not an ed25519 key")
            return
        if not isinstance(key, (ec.EllipticCurvePrivateKey, ec.EllipticCurvePublicKey)):
            raise InvalidKeyMaterial("Key is not an elliptic curve key")
        if not isinstance(key.curve, ec.SECP256K1):
            raise InvalidKeyMaterial(f"Key is on curve {key.curve.name}, expected secp256k1")


def get_public_pem(raw: bytes, algorithm: Algorithm | str) -> str:
    return KeyEncoder(algorithm).encode_public(raw)


def get_private_pem(raw: bytes, algorithm: Algorithm | str) -> str:
    return KeyEncoder(algorithm).encode_private(raw)


__all__ = ["KeyEncoder", "get_private_pem", "get_public_pem"]
