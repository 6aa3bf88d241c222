from pathlib import Path

import pytest

from chain_token.chains import KeyRole
from chain_token.config import AppConfig, dump_default_config, load_config


def test_defaults_when_no_file(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("chain_token.config.user_config_dir", lambda: tmp_path / "user")
    config = load_config()
    assert config == AppConfig()
    assert config.tokens.default_chain == "ethereum"
    assert config.tokens.default_role is KeyRole.PRIVATE


def test_explicit_file_is_loaded(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("logging:\n  level: debug\ntokens:\n  default_chain: ripple\n  default_role: secret\n")
    config = load_config(path)
    assert config.logging.normalized_level() == "DEBUG"
    assert config.tokens.default_chain == "ripple"
    assert config.tokens.default_role is KeyRole.SECRET


def test_project_file_is_found(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    target = tmp_path / ".chain-token" / "config.yaml"
    target.parent.mkdir()
    target.write_text("tokens:\n  default_chain: bitcoin\n")
    assert load_config().tokens.default_chain == "bitcoin"


def test_invalid_chain_is_reported(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("tokens:\n  default_chain: dogecoin\n")
    with pytest.raises(ValueError, match="Invalid configuration"):
        load_config(path)


def test_dump_default_round_trips(tmp_path: Path) -> None:
    target = tmp_path / "nested" / "config.yaml"
    dump_default_config(target)
    assert load_config(target) == AppConfig()


def test_environment_path_precedes_project_file(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    project = tmp_path / ".chain-token" / "config.yaml"
    project.parent.mkdir()
    project.write_text("tokens:\n  default_chain: bitcoin\n")
    env_file = tmp_path / "env.yaml"
    env_file.write_text("tokens:\n  default_chain: jingtum\n")
    monkeypatch.setenv("CHAIN_TOKEN_CONFIG", str(env_file))
    assert load_config().tokens.default_chain == "jingtum"
