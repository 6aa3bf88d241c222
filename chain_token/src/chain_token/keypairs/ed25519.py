from __future__ import annotations

from typing import Any, Mapping

from chain_token.crypto.algorithms import Algorithm
from chain_token.jws import split_token

from .base import VERIFIED, BaseKeyPair, VerificationFailure, VerificationResult


class Ed25519KeyPair(BaseKeyPair):
    """EdDSA key pair; the native 64-byte signature is already the wire form."""

    algorithm = Algorithm.ED25519

    def _sign_native(self, payload: Mapping[str, Any], header: Mapping[str, Any]) -> str:
        return self._signer().sign(payload, header)

    def _verify_native(self, token: str) -> VerificationResult:
        segments = split_token(token)
        if self._verifier().verify_segments(segments):
            return VERIFIED
        return VerificationResult(False, VerificationFailure.BAD_SIGNATURE)
