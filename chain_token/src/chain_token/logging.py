"""Structured logging setup for chain-token."""
from __future__ import annotations

import logging
import os
import sys
from typing import Dict

import structlog

_DEFAULT_LEVEL = "info"
_LEVEL_ENV = "CHAIN_TOKEN_LOG_LEVEL"

# Event keys that may carry key material; their values never reach a log line.
_SENSITIVE_KEYS = frozenset({"key", "private_key", "secret", "seed", "key_material"})

EventDict = Dict[str, object]


def configure_logging(level: str | None = None) -> None:
    """Configure structlog to emit one JSON object per line on stderr.

    Records carry ``ts``, ``level``, ``msg`` and ``component`` plus caller
    context. ``CHAIN_TOKEN_LOG_LEVEL`` overrides ``level`` when set. Stdout is
    left to command output so tokens can be piped.
    """

    log_level = (os.getenv(_LEVEL_ENV) or level or _DEFAULT_LEVEL).lower()
    numeric_level = _LEVELS.get(log_level, logging.INFO)

    logging.basicConfig(
        level=numeric_level,
        handlers=[logging.StreamHandler(sys.stderr)],
        format="%(message)s",
        force=True,
    )

    structlog.configure(
        processors=[
            _redact_key_material,
            structlog.processors.TimeStamper(fmt="iso", key="ts"),
            structlog.stdlib.add_log_level,
            _add_component,
            structlog.processors.EventRenamer("msg"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        cache_logger_on_first_use=True,
    )


def _redact_key_material(_logger: object, _name: str, event_dict: EventDict) -> EventDict:
    for key in _SENSITIVE_KEYS.intersection(event_dict):
        event_dict[key] = "<redacted>"
    return event_dict


def _add_component(logger: object, _name: str, event_dict: EventDict) -> EventDict:
    event_dict.setdefault("component", getattr(logger, "name", None) or "chain_token")
    return event_dict


_LEVELS: Dict[str, int] = {
    "critical": logging.CRITICAL,
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}


__all__ = ["configure_logging"]
