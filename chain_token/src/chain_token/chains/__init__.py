from .registry import (
    CHAINS,
    UNSUPPORTED_CHAIN_MESSAGE,
    ChainSpec,
    KeyRole,
    resolve_chain,
    supported_chains,
)

__all__ = [
    "CHAINS",
    "ChainSpec",
    "KeyRole",
    "UNSUPPORTED_CHAIN_MESSAGE",
    "resolve_chain",
    "supported_chains",
]
