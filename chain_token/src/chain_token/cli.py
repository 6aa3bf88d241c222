"""Typer-based command line interface for chain-token."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, NoReturn, Optional

import typer

from .config import AppConfig, dump_default_config, load_config
from .exceptions import ChainTokenError
from .logging import configure_logging
from .paths import user_config_dir
from .token import ChainToken

app = typer.Typer(help="Sign and verify tokens with blockchain account keys")


@app.callback()
def main(ctx: typer.Context, config: Optional[Path] = typer.Option(None, "--config", metavar="PATH")) -> None:
    ctx.obj = load_config(config)
    configure_logging(ctx.obj.logging.normalized_level())


def _config(ctx: typer.Context) -> AppConfig:
    return ctx.obj if isinstance(ctx.obj, AppConfig) else load_config()


def _fail(exc: Exception) -> NoReturn:
    typer.echo(f"error: {exc}", err=True)
    raise typer.Exit(code=2)


def _json_object(raw: str, name: str) -> Dict[str, Any]:
    try:
        value = json.loads(raw)
    except json.JSONDecodeError as exc:
        typer.echo(f"error: --{name} is not valid JSON: {exc}", err=True)
        raise typer.Exit(code=2)
    if not isinstance(value, dict):
        typer.echo(f"error: --{name} must be a JSON object", err=True)
        raise typer.Exit(code=2)
    return value


def _chain_token(
    ctx: typer.Context, chain: Optional[str], key: str, role: Optional[str]
) -> ChainToken:
    defaults = _config(ctx).tokens
    try:
        return ChainToken(chain or defaults.default_chain, key, role or defaults.default_role)
    except (ChainTokenError, ValueError) as exc:
        _fail(exc)


@app.command()
def sign(
    ctx: typer.Context,
    key: str = typer.Option(..., "--key", help="Key material for the chosen role"),
    payload: str = typer.Option(..., "--payload", help="Payload claims as a JSON object"),
    header: str = typer.Option("{}", "--header", help="Custom header fields as a JSON object"),
    chain: Optional[str] = typer.Option(None, "--chain", help="Chain name"),
    role: Optional[str] = typer.Option(None, "--role", help="public|private|secret"),
) -> None:
    token = _chain_token(ctx, chain, key, role)
    data = {"payload": _json_object(payload, "payload"), "header": _json_object(header, "header")}
    try:
        typer.echo(token.sign(data))
    except ChainTokenError as exc:
        _fail(exc)


@app.command()
def verify(
    ctx: typer.Context,
    token: str = typer.Argument(..., help="Token to verify"),
    key: str = typer.Option(..., "--key", help="Key material for the chosen role"),
    chain: Optional[str] = typer.Option(None, "--chain", help="Chain name"),
    role: str = typer.Option("public", "--role", help="public|private|secret"),
) -> None:
    result = _chain_token(ctx, chain, key, role).verify_detailed(token)
    typer.echo(json.dumps({"valid": result.valid, "reason": result.reason.value if result.reason else None}))
    if not result.valid:
        raise typer.Exit(code=1)


@app.command()
def decode(token: str = typer.Argument(..., help="Token to decode without verification")) -> None:
    try:
        decoded = ChainToken.decode(token)
    except ChainTokenError as exc:
        _fail(exc)
    typer.echo(
        json.dumps(
            {"header": dict(decoded.header), "payload": dict(decoded.payload)},
            ensure_ascii=False,
            indent=2,
        )
    )


@app.command("quick-sign")
def quick_sign(
    ctx: typer.Context,
    key: str = typer.Option(..., "--key", help="Private key as hex"),
    subject: str = typer.Option(..., "--subject", help="Subject claim"),
    chain: Optional[str] = typer.Option(None, "--chain", help="Chain name"),
) -> None:
    try:
        typer.echo(ChainToken.quick_sign(key, subject, chain or _config(ctx).tokens.default_chain))
    except ChainTokenError as exc:
        _fail(exc)


@app.command("public-pem")
def public_pem(
    ctx: typer.Context,
    key: str = typer.Option(..., "--key", help="Key material for the chosen role"),
    chain: Optional[str] = typer.Option(None, "--chain", help="Chain name"),
    role: Optional[str] = typer.Option(None, "--role", help="public|private|secret"),
) -> None:
    typer.echo(_chain_token(ctx, chain, key, role).get_public_pem(), nl=False)


@app.command("init-config")
def init_config(
    destination: Path = typer.Option(
        user_config_dir() / "config.yaml", "--destination", help="Where to write the default config"
    ),
) -> None:
    dump_default_config(destination)
    typer.echo(f"Default configuration written to {destination}")


@app.command()
def version() -> None:
    from .version import __version__

    typer.echo(__version__)


if __name__ == "__main__":  # pragma: no cover
    app()
