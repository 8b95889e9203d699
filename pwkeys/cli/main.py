"""Typer CLI for pwkeys.

Derives an Ed25519 keypair from -p/-s, prints it in hex and optionally writes
hex (-w) and PEM (-wp) key files.
"""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from pwkeys import __version__
from pwkeys.cli.config import RunConfig, validate_config
from pwkeys.cli.output import write_hex_files, write_pem_files
from pwkeys.sdk.encoding import to_hex
from pwkeys.sdk.errors import DerivationError, InvalidCredentialError, MissingCredentialError, WriteFailureError
from pwkeys.sdk.models import KeyPair, PemFormat
from pwkeys.sdk.pipeline import derive_keypair

app = typer.Typer(
    name="pwkeys",
    help="Derive a deterministic Ed25519 keypair from a password and salt.",
    add_completion=False,
    rich_markup_mode=None,
)
err_console = Console(stderr=True, soft_wrap=True)
logger = logging.getLogger(__name__)


def version_callback(show_version: bool) -> None:
    """Show version and exit."""
    if show_version:
        typer.echo(f"pwkeys version {__version__}")
        raise typer.Exit()


@app.command()
def main(
    ctx: typer.Context,
    password: str = typer.Option("", "-p", help="Password for Argon2id hashing.", show_default=False),
    salt: str = typer.Option("", "-s", help="Salt for Argon2id hashing.", show_default=False),
    write_hex: bool = typer.Option(False, "-w", help="Write keys to files."),
    write_pem: bool = typer.Option(False, "-wp", help="Write keys to PEM files."),
    pem_format: PemFormat = typer.Option(PemFormat.RAW, "--pem-format", help="PEM body layout: raw or pkcs8."),
    out_dir: Path = typer.Option(Path("."), "--out-dir", "-o", help="Directory for key files."),
    verbose: bool = typer.Option(False, "--verbose", help="Log derivation stages to stderr."),
    version: bool = typer.Option(
        None,
        "--version",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """Derive an Ed25519 keypair from a password and salt."""
    config = RunConfig(
        password=password,
        salt=salt,
        write_hex=write_hex,
        write_pem=write_pem,
        pem_format=pem_format,
        out_dir=out_dir,
        verbose=verbose,
    )
    try:
        validate_config(config)
    except MissingCredentialError:
        typer.echo(ctx.get_help(), err=True)
        raise typer.Exit(1)
    except InvalidCredentialError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        typer.echo(ctx.get_help(), err=True)
        raise typer.Exit(1)

    _configure_logging(config.verbose)
    run(config)


def run(config: RunConfig) -> KeyPair:
    """Derive, print and optionally persist the keypair for ``config``."""
    try:
        keypair = derive_keypair(config.credentials())
    except DerivationError as e:
        err_console.print(f"[red]Error deriving key: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    # Use typer.echo() so key material is never run through rich markup
    typer.echo(f"Public Key: {to_hex(keypair.public_key)}")
    typer.echo(f"Private Key: {to_hex(keypair.private_key)}")

    try:
        if config.write_hex:
            _log_written(write_hex_files(keypair, config.out_dir))
        if config.write_pem:
            _log_written(write_pem_files(keypair, config.out_dir, config.pem_format))
    except WriteFailureError as e:
        err_console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)
    return keypair


def _log_written(paths: list[Path]) -> None:
    for path in paths:
        logger.info("Wrote %s", path)


def _configure_logging(verbose: bool) -> None:
    """Attach a rich stderr handler to the package logger when verbose."""
    if not verbose:
        return
    root = logging.getLogger("pwkeys")
    root.setLevel(logging.DEBUG)
    if not any(isinstance(h, RichHandler) for h in root.handlers):
        root.addHandler(RichHandler(console=err_console, show_path=False))


if __name__ == "__main__":
    app()
