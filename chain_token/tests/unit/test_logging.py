import json
import logging

import structlog

from chain_token.logging import configure_logging


def test_log_lines_are_json_with_component(capsys) -> None:
    configure_logging("debug")
    try:
        structlog.get_logger("chain_token.test").warning("chain_unsupported", chain="solana")
        line = capsys.readouterr().err.strip().splitlines()[-1]
        record = json.loads(line)
        assert record["msg"] == "chain_unsupported"
        assert record["level"] == "warning"
        assert record["component"] == "chain_token.test"
        assert record["chain"] == "solana"
        assert "ts" in record
    finally:
        structlog.reset_defaults()
        logging.getLogger().handlers.clear()


def test_level_filters_debug(capsys) -> None:
    configure_logging("warning")
    try:
        structlog.get_logger("chain_token.test").debug("token_signed")
        assert capsys.readouterr().err == ""
    finally:
        structlog.reset_defaults()
        logging.getLogger().handlers.clear()


def test_key_material_is_redacted(capsys, monkeypatch) -> None:
    monkeypatch.delenv("CHAIN_TOKEN_LOG_LEVEL", raising=False)
    configure_logging("info")
    try:
        structlog.get_logger("chain_token.test").info("token_created", secret="sEdSKaCy2JT7", chain="ripple")
        record = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert record["secret"] == "<redacted>"
        assert record["chain"] == "ripple"
    finally:
        structlog.reset_defaults()
        logging.getLogger().handlers.clear()


def test_environment_overrides_level(capsys, monkeypatch) -> None:
    monkeypatch.setenv("CHAIN_TOKEN_LOG_LEVEL", "error")
    configure_logging("debug")
    try:
        structlog.get_logger("chain_token.test").warning("ignored")
        assert capsys.readouterr().err == ""
    finally:
        structlog.reset_defaults()
        logging.getLogger().handlers.clear()
