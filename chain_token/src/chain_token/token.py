"""Chain web tokens signed with blockchain account keys."""
from __future__ import annotations

from typing import Any, Mapping

import structlog

from chain_token.chains import KeyRole, resolve_chain
from chain_token.crypto.algorithms import Algorithm
from chain_token.jws import DecodedToken, decode_token
from chain_token.keypairs import KeyPair, VerificationResult, keypair_for

logger = structlog.get_logger(__name__)

SUBJECT_CLAIM = "subject"


class ChainToken:
    """Signs and verifies tokens with the key of one chain account.

    ``key_material`` is interpreted according to ``role``: ``public`` and
    ``private`` take raw bytes or hex, ``secret`` takes the chain's native
    secret encoding (a Ripple-family seed or a Bitcoin WIF).
    """

    def __init__(self, chain: str, key_material: str | bytes, role: KeyRole | str = KeyRole.PRIVATE) -> None:
        spec = resolve_chain(chain)
        role = KeyRole.parse(role)
        algorithm, material = spec.decode(key_material, role)
        self._chain = spec.name
        self._keypair = keypair_for(algorithm, material)
        logger.debug("chain_token_ready", chain=spec.name, algorithm=algorithm.value, role=role.value)

    @property
    def chain(self) -> str:
        return self._chain

    @property
    def algorithm(self) -> Algorithm:
        return self._keypair.algorithm

    @property
    def keypair(self) -> KeyPair:
        return self._keypair

    def sign(self, data: Mapping[str, Any]) -> str:
        """Sign ``data["payload"]`` with ``data["header"]`` as the custom header."""
        return self._keypair.sign(data)

    def verify(self, token: str) -> bool:
        return self._keypair.verify(token)

    def verify_detailed(self, token: str) -> VerificationResult:
        return self._keypair.verify_detailed(token)

    def get_public_pem(self) -> str:
        return self._keypair.get_public_pem()

    @staticmethod
    def decode(token: str) -> DecodedToken:
        """Decode header and payload. No signature check is performed."""
        return decode_token(token)

    @staticmethod
    def quick_sign(private_key: str | bytes, subject: Any, chain: str) -> str:
        """Sign a ``{"subject": ...}`` payload with an empty custom header."""
        spec = resolve_chain(chain)
        algorithm, material = spec.decode(private_key, KeyRole.PRIVATE)
        keypair = keypair_for(algorithm, material)
        return keypair.sign({"payload": {SUBJECT_CLAIM: subject}, "header": {}})

    def __repr__(self) -> str:
        return f"ChainToken(chain={self._chain!r}, algorithm={self.algorithm.value!r})"


__all__ = ["ChainToken", "SUBJECT_CLAIM"]
