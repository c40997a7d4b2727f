# SPDX-FileCopyrightText: 2025 ShamirsSecret contributors
# SPDX-License-Identifier: MIT

"""Command line interface: create/solve shares, shard keys, encrypt strings."""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Sequence

import click

from .audit import record_event
from .errors import ConfigurationError, DecryptionError, ShamirError
from .keys import (
    decrypt_text,
    deshard_key,
    encrypt_text,
    generate_private_key,
    load_private_key,
    parse_private_key,
    private_key_to_pem,
    shard_key,
)
from .policy import normalize_prime_name, policy, resolve_prime
from .sharing import Share, generate_shares, recover_secret
from .store import dump_chunked_shares, dump_shares, format_shares, load_share_file

_logger = logging.getLogger(__name__)


@dataclass
class _Settings:
    prime_name: str
    prime: int


def _handle_errors(func: Callable[..., Any]) -> Callable[..., Any]:
    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except ShamirError as exc:
            raise click.ClickException(str(exc)) from exc

    return wrapper


def _audit(event: str, **details: Any) -> None:
    if policy.audit_enabled:
        path = record_event(event, details=details, audit_dir=policy.audit_dir)
        _logger.debug("audit record written to %s", path)


def _thresholds(minimum: int | None, total: int | None) -> tuple[int, int]:
    if (minimum is None) != (total is None):
        raise click.UsageError("Must provide both minimum shares and total shares. Or ignore both.")
    if minimum is None or total is None:
        minimum, total = policy.minimum, policy.total
    if minimum < 2:
        raise click.UsageError("The minimum shares must be at least 2.")
    if minimum > total:
        raise click.UsageError("The minimum shares must not exceed the total shares.")
    return minimum, total


def _echo_shares(shares: Sequence[Share]) -> None:
    for share in shares:
        click.echo(f"({share.x}, {share.y})")


def _echo_recoveries(shares: Sequence[Share], minimum: int, prime: int) -> None:
    click.echo("Secret recovered from minimum subset of shares:")
    click.echo(recover_secret(shares[:minimum], prime))
    click.echo("Secret recovered from a different minimum subset of shares:")
    click.echo(recover_secret(shares[-minimum:], prime))


_minimum_option = click.option(
    "-m", "--minimum", type=int, default=None,
    help="The minimum shares. It must not exceed the total shares.",
)
_total_option = click.option("-t", "--total", type=int, default=None, help="The total shares.")
_dump_option = click.option(
    "-d", "--dump", type=click.Path(dir_okay=False, path_type=Path), default=None,
    help="The path to save the shares to a new text file.",
)


@click.group()
@click.option(
    "--prime", "prime_name", default=None,
    help="Named Mersenne prime for the field, e.g. mersenne-127 or 2281.",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def main(ctx: click.Context, prime_name: str | None, verbose: bool) -> None:
    """Shamir's secret sharing over a Mersenne prime field."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        name = normalize_prime_name(prime_name) if prime_name else policy.prime_name
    except ConfigurationError as exc:
        raise click.BadParameter(str(exc), param_hint="--prime") from exc
    ctx.obj = _Settings(prime_name=name, prime=resolve_prime(name))


@main.command()
@click.argument("secret", type=int)
@_minimum_option
@_total_option
@_dump_option
@click.pass_obj
@_handle_errors
def create(settings: _Settings, secret: int, minimum: int | None, total: int | None, dump: Path | None) -> None:
    """Create shares from a given secret."""
    minimum, total = _thresholds(minimum, total)
    shares = generate_shares(secret, minimum, total, settings.prime)

    click.echo(f"Secret: {secret}")
    click.echo("Shares")
    _echo_shares(shares)
    _echo_recoveries(shares, minimum, settings.prime)

    if dump is not None:
        dump_shares(dump, shares, minimum)
        click.echo(f"-> Saved the shares to: {dump}")
    _audit("shares.created", minimum=minimum, total=total, prime=settings.prime_name, dump=str(dump or ""))


@main.command()
@click.argument("input_path", metavar="INPUT", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.pass_obj
@_handle_errors
def solve(settings: _Settings, input_path: Path) -> None:
    """Solve secret from a share file."""
    share_file = load_share_file(input_path)
    if share_file.chunk_count != 1:
        raise click.ClickException("This share file holds a sharded key; use 'deshard' instead.")
    shares = share_file.shares()

    click.echo(f"Total shares: {share_file.total}")
    click.echo(f"Minimum shares to solve the secret: {share_file.threshold}")
    click.echo("Shares:")
    _echo_shares(shares)
    _echo_recoveries(shares, share_file.threshold, settings.prime)
    _audit("secret.recovered", input=str(input_path), prime=settings.prime_name)


@main.command()
@click.argument("string")
@click.option("-k", "--keyname", type=click.Path(dir_okay=False, path_type=Path), default=Path("eccKey"),
              show_default=True, help="The file to save the private ECC key to.")
@click.option("-s", "--stringname", type=click.Path(dir_okay=False, path_type=Path),
              default=Path("stringOutputFile.txt"), show_default=True,
              help="The file to save the encrypted string to.")
@_handle_errors
def encrypt(string: str, keyname: Path, stringname: Path) -> None:
    """Create an ECC key pair and encrypt STRING with the public key."""
    private_key = generate_private_key()
    token = encrypt_text(string, private_key.public_key())

    keyname.write_bytes(private_key_to_pem(private_key))
    click.echo(f"-> Saved the private ECC key to: {keyname}")
    stringname.write_text(token, encoding="ascii")
    click.echo(f"-> Saved the encrypted string to: {stringname}")
    _audit("string.encrypted", key=str(keyname), output=str(stringname))


@main.command()
@click.option("-s", "--stringpath", required=True, type=click.Path(exists=True, dir_okay=False, path_type=Path),
              help="The file holding the encrypted string.")
@click.option("-k", "--keypath", required=True, type=click.Path(exists=True, dir_okay=False, path_type=Path),
              help="The file holding the private ECC key.")
@_handle_errors
def decrypt(stringpath: Path, keypath: Path) -> None:
    """Decrypt a string with a private ECC key."""
    private_key = load_private_key(keypath)
    try:
        token = stringpath.read_text(encoding="ascii")
    except UnicodeDecodeError as exc:
        raise DecryptionError(f"{stringpath} does not hold a base64 token") from exc

    click.echo("Encrypted string:")
    click.echo(token.strip())
    click.echo("Decrypted string:")
    click.echo(decrypt_text(token, private_key))
    _audit("string.decrypted", key=str(keypath), input=str(stringpath))


@main.command()
@click.argument("keypath", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@_minimum_option
@_total_option
@_dump_option
@click.pass_obj
@_handle_errors
def shard(settings: _Settings, keypath: Path, minimum: int | None, total: int | None, dump: Path | None) -> None:
    """Create shares from a private ECC key."""
    minimum, total = _thresholds(minimum, total)
    pem = keypath.read_bytes()
    parse_private_key(pem)
    chunk_shares = shard_key(pem, minimum, total, settings.prime)
    click.echo(f"Key split into {len(chunk_shares)} chunk(s) of {total} shares each.")

    if dump is not None:
        dump_chunked_shares(dump, chunk_shares, minimum)
        click.echo(f"-> Saved the shares to: {dump}")
    else:
        click.echo(format_shares(chunk_shares, minimum), nl=False)
    _audit("key.sharded", minimum=minimum, total=total, prime=settings.prime_name, dump=str(dump or ""))


@main.command()
@click.argument("input_path", metavar="INPUT", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-k", "--keyname", type=click.Path(dir_okay=False, path_type=Path), default=None,
              help="The file to save the private ECC key to.")
@click.pass_obj
@_handle_errors
def deshard(settings: _Settings, input_path: Path, keyname: Path | None) -> None:
    """Load the ECC key from a share file."""
    pem = deshard_key(load_share_file(input_path), settings.prime)

    click.echo("Deshard result:")
    click.echo(pem.decode("ascii"), nl=False)
    if keyname is not None:
        keyname.write_bytes(pem)
        click.echo(f"-> Saved the private ECC key to: {keyname}")
    _audit("key.desharded", input=str(input_path), prime=settings.prime_name, output=str(keyname or ""))


__all__ = ["main"]
