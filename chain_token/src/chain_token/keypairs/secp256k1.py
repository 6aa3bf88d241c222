from __future__ import annotations

from typing import Any, Mapping

from chain_token.crypto.algorithms import Algorithm
from chain_token.crypto.signature_format import der_to_jose, jose_to_der
from chain_token.jws import replace_signature, split_token

from .base import VERIFIED, BaseKeyPair, VerificationFailure, VerificationResult


class Secp256k1KeyPair(BaseKeyPair):
    """ES256K key pair; tokens carry the fixed-width JOSE ``r || s`` signature."""

    algorithm = Algorithm.SECP256K1

    def _sign_native(self, payload: Mapping[str, Any], header: Mapping[str, Any]) -> str:
        native = self._signer().sign(payload, header)
        segments = split_token(native)
        jose = der_to_jose(segments.signature_bytes, self.algorithm.curve_size)
        return replace_signature(segments, jose)

    def _verify_native(self, token: str) -> VerificationResult:
        segments = split_token(token)
        der = jose_to_der(segments.signature_bytes, self.algorithm.curve_size)
        native = split_token(replace_signature(segments, der))
        if self._verifier().verify_segments(native):
            return VERIFIED
        return VerificationResult(False, VerificationFailure.BAD_SIGNATURE)
