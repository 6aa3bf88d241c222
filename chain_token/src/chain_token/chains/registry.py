"""Chain table: which algorithms a chain uses and how its key material decodes."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from functools import partial
from types import MappingProxyType
from typing import Callable, FrozenSet, Mapping, Tuple

import structlog

from chain_token.crypto.algorithms import Algorithm
from chain_token.exceptions import InvalidKeyMaterial, UnsupportedChain
from chain_token.keypairs import KeyMaterial

from . import codecs

logger = structlog.get_logger(__name__)

UNSUPPORTED_CHAIN_MESSAGE = "chain network is not supported"


class KeyRole(str, Enum):
    PUBLIC = "public"
    PRIVATE = "private"
    SECRET = "secret"

    @classmethod
    def parse(cls, value: "str | KeyRole") -> "KeyRole":
        if isinstance(value, KeyRole):
            return value
        if not isinstance(value, str):
            raise ValueError(f"Unknown key role: {value!r}")
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise ValueError(f"Unknown key role: {value}") from None


Decoder = Callable[[object], codecs.KeyBytes]


@dataclass(frozen=True)
class ChainSpec:
    name: str
    algorithms: FrozenSet[Algorithm]
    decoders: Mapping[KeyRole, Decoder] = field(default_factory=dict)

    def decode(self, material: str | bytes, role: KeyRole | str) -> Tuple[Algorithm, KeyMaterial]:
        role = KeyRole.parse(role)
        decoder = self.decoders.get(role)
        if decoder is None:
            raise InvalidKeyMaterial(f"Chain {self.name!r} does not accept {role.value} keys")
        algorithm, raw = decoder(material)
        if algorithm not in self.algorithms:
            raise InvalidKeyMaterial(
                f"Chain {self.name!r} does not use {algorithm.value} keys"
            )
        if role is KeyRole.PUBLIC:
            return algorithm, KeyMaterial(public_key=raw)
        return algorithm, KeyMaterial(private_key=raw)


def _ripple_family(name: str, alphabet: bytes) -> ChainSpec:
    return ChainSpec(
        name=name,
        algorithms=frozenset({Algorithm.SECP256K1, Algorithm.ED25519}),
        decoders=MappingProxyType(
            {
                KeyRole.PUBLIC: codecs.prefixed_public,
                KeyRole.PRIVATE: codecs.prefixed_private,
                KeyRole.SECRET: partial(codecs.family_seed_private, alphabet=alphabet),
            }
        ),
    )


CHAINS: Mapping[str, ChainSpec] = MappingProxyType(
    {
        "ethereum": ChainSpec(
            name="ethereum",
            algorithms=frozenset({Algorithm.SECP256K1}),
            decoders=MappingProxyType(
                {
                    KeyRole.PUBLIC: codecs.plain_secp256k1_public,
                    KeyRole.PRIVATE: codecs.plain_secp256k1_private,
                }
            ),
        ),
        "bitcoin": ChainSpec(
            name="bitcoin",
            algorithms=frozenset({Algorithm.SECP256K1}),
            decoders=MappingProxyType(
                {
                    KeyRole.PUBLIC: codecs.plain_secp256k1_public,
                    KeyRole.PRIVATE: codecs.plain_secp256k1_private,
                    KeyRole.SECRET: codecs.wif_private,
                }
            ),
        ),
        "ripple": _ripple_family("ripple", codecs.RIPPLE_ALPHABET),
        "jingtum": _ripple_family("jingtum", codecs.JINGTUM_ALPHABET),
    }
)


def resolve_chain(name: str) -> ChainSpec:
    try:
        return CHAINS[name]
    except (KeyError, TypeError):
        logger.warning("chain_unsupported", chain=name)
        raise UnsupportedChain(UNSUPPORTED_CHAIN_MESSAGE) from None


def supported_chains() -> Tuple[str, ...]:
    return tuple(CHAINS)


__all__ = [
    "CHAINS",
    "ChainSpec",
    "KeyRole",
    "UNSUPPORTED_CHAIN_MESSAGE",
    "resolve_chain",
    "supported_chains",
]
