from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional

import structlog

from chain_token.core.header import PLACEHOLDER_HEADER, TokenHeader
from chain_token.crypto.algorithms import Algorithm
from chain_token.crypto.key_encoder import KeyEncoder
from chain_token.exceptions import MalformedSignature, MalformedToken, MissingKey
from chain_token.jws import TokenSigner, TokenVerifier

logger = structlog.get_logger(__name__)


@dataclass(frozen=True, slots=True)
class KeyMaterial:
    """Raw private and/or public key bytes in the algorithm's native form."""

    private_key: Optional[bytes] = None
    public_key: Optional[bytes] = None

    def __repr__(self) -> str:
        return (
            f"KeyMaterial(private_key={'<redacted>' if self.private_key else None}, "
            f"public_key={self.public_key.hex() if self.public_key else None})"
        )


class VerificationFailure(str, Enum):
    MALFORMED_TOKEN = "malformed_token"
    MALFORMED_SIGNATURE = "malformed_signature"
    BAD_SIGNATURE = "bad_signature"


@dataclass(frozen=True, slots=True)
class VerificationResult:
    valid: bool
    reason: Optional[VerificationFailure] = None

    def __bool__(self) -> bool:
        return self.valid


VERIFIED = VerificationResult(valid=True)


class BaseKeyPair:
    """Shared key handling for the secp256k1 and ed25519 key pairs."""

    algorithm: Algorithm

    def __init__(self, material: KeyMaterial) -> None:
        if material.private_key is None and material.public_key is None:
            raise MissingKey("At least one of private_key or public_key is required")
        self._encoder = KeyEncoder(self.algorithm)
        self._private_key = None
        if material.private_key is not None:
            self._private_key = self._encoder.load_private(material.private_key)
            public_raw = material.public_key or self._encoder.public_from_private(
                material.private_key
            )
        else:
            public_raw = material.public_key
        self._public_key = self._encoder.load_public(public_raw)
        self._material = KeyMaterial(private_key=material.private_key, public_key=bytes(public_raw))

    @property
    def has_private_key(self) -> bool:
        return self._private_key is not None

    @property
    def public_key(self) -> bytes:
        return self._material.public_key  # type: ignore[return-value]

    def _signer(self) -> TokenSigner:
        if self._private_key is None:
            raise MissingKey("Signing requested without private key material")
        return TokenSigner(self.algorithm, self._private_key)

    def _verifier(self) -> TokenVerifier:
        return TokenVerifier(self.algorithm, self._public_key)

    def _build_header(self, custom: Mapping[str, Any] | None) -> dict[str, Any]:
        return TokenHeader.merge(PLACEHOLDER_HEADER, custom).to_dict()

    def sign(self, data: Mapping[str, Any]) -> str:
        payload = data.get("payload") or {}
        header = self._build_header(data.get("header"))
        token = self._sign_native(payload, header)
        logger.debug("token_signed", algorithm=self.algorithm.value)
        return token

    def _sign_native(self, payload: Mapping[str, Any], header: Mapping[str, Any]) -> str:
        raise NotImplementedError

    def verify(self, token: str) -> bool:
        return self.verify_detailed(token).valid

    def verify_detailed(self, token: str) -> VerificationResult:
        try:
            result = self._verify_native(token)
        except MalformedToken as exc:
            result = VerificationResult(False, VerificationFailure.MALFORMED_TOKEN)
            logger.debug("token_malformed", reason=str(exc))
        except MalformedSignature as exc:
            result = VerificationResult(False, VerificationFailure.MALFORMED_SIGNATURE)
            logger.debug("signature_malformed", reason=str(exc))
        if not result.valid:
            logger.debug(
                "token_rejected", algorithm=self.algorithm.value, reason=result.reason.value
            )
        return result

    def _verify_native(self, token: str) -> VerificationResult:
        raise NotImplementedError

    def get_public_pem(self) -> str:
        if self._material.public_key is None:
            raise MissingKey("No public key held")
        return self._encoder.encode_public(self._material.public_key)

    def get_private_pem(self) -> str:
        if self._material.private_key is None:
            raise MissingKey("No private key held")
        return self._encoder.encode_private(self._material.private_key)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._material!r})"
