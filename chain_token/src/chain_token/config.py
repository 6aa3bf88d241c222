"""Configuration loading utilities for chain-token."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .chains import KeyRole, supported_chains
from .paths import project_config_path, user_config_dir

CONFIG_ENV = "CHAIN_TOKEN_CONFIG"


class LoggingConfig(BaseModel):
    level: str = Field(default="INFO", description="Logging verbosity level")

    def normalized_level(self) -> str:
        return self.level.upper()


class TokenDefaults(BaseModel):
    default_chain: str = Field(default="ethereum", description="Chain used when none is given")
    default_role: KeyRole = Field(default=KeyRole.PRIVATE, description="public|private|secret")

    @field_validator("default_chain")
    @classmethod
    def _validate_chain(cls, value: str) -> str:
        if value not in supported_chains():
            raise ValueError(f"Unsupported chain {value!r}")
        return value


class AppConfig(BaseModel):
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    tokens: TokenDefaults = Field(default_factory=TokenDefaults)


DEFAULT_CONFIG = AppConfig()


def config_search_paths(explicit: Optional[Path] = None) -> Iterable[Path]:
    if explicit:
        yield explicit
    env_path = os.getenv(CONFIG_ENV)
    if env_path:
        yield Path(env_path).expanduser()
    yield project_config_path()
    yield user_config_dir() / "config.yaml"


def load_config(path: Optional[Path] = None) -> AppConfig:
    for candidate in config_search_paths(path):
        if candidate.is_file():
            with candidate.open("r", encoding="utf-8") as handle:
                data = yaml.safe_load(handle) or {}
            try:
                return AppConfig.model_validate(data)
            except ValidationError as exc:
                raise ValueError(f"Invalid configuration in {candidate}: {exc}") from exc
    return DEFAULT_CONFIG.model_copy(deep=True)


def dump_default_config(target: Path) -> None:
    target.parent.mkdir(parents=True, exist_ok=True)
    with target.open("w", encoding="utf-8") as handle:
        yaml.safe_dump(DEFAULT_CONFIG.model_dump(mode="json"), handle, sort_keys=False)
