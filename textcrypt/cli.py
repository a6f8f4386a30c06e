"""textcrypt command line."""

import functools
import logging
from typing import Any, Callable

import click

from . import __version__
from .errors import TextCryptoError
from .keyio import write_keys
from .passwords import generate_passwords
from .process import (
    process_text_decrypt,
    process_text_encrypt,
    process_text_generate,
    process_text_sign,
    process_text_verify,
)
from .text.algorithm import Algorithm

FORMATS = [a.value for a in Algorithm] + ["blake"]


def format_option(default: Algorithm) -> Callable[..., Any]:
    """Add ``--format`` / ``-f`` as an :class:`Algorithm`."""
    def decorator(f: Callable[..., Any]) -> Callable[..., Any]:
        @click.option(
            "--format", "-f", "algorithm",
            type=click.Choice(FORMATS, case_sensitive=False),
            default=default.value,
            show_default=True,
            callback=lambda ctx, param, value: Algorithm.parse(value),
            help="Algorithm",
        )
        @functools.wraps(f)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            return f(*args, **kwargs)
        return wrapper
    return decorator


def input_option(f: Callable[..., Any]) -> Callable[..., Any]:
    return click.option(
        "--input", "-i", "input_",
        default="-",
        show_default=True,
        help="Input file, or - for stdin",
    )(f)


def key_option(f: Callable[..., Any]) -> Callable[..., Any]:
    return click.option(
        "--key", "-k",
        required=True,
        envvar="TEXTCRYPT_KEY",
        type=click.Path(dir_okay=False),
        help="Key file",
    )(f)


def reports_errors(f: Callable[..., Any]) -> Callable[..., Any]:
    """Turn TextCryptoError into ``Error: ...`` and exit status 1."""
    @functools.wraps(f)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return f(*args, **kwargs)
        except TextCryptoError as e:
            raise click.ClickException(str(e)) from e
    return wrapper


@click.group()
@click.version_option(__version__, prog_name="textcrypt")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def main(verbose: bool) -> None:
    """Sign, verify, encrypt and decrypt text."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@main.group()
def text() -> None:
    """Text signing and encryption."""
    pass


@text.command("sign")
@input_option
@key_option
@format_option(Algorithm.BLAKE3)
@reports_errors
def text_sign(input_: str, key: str, algorithm: Algorithm) -> None:
    """Sign text."""
    click.echo(process_text_sign(input_, key, algorithm))


@text.command("verify")
@input_option
@key_option
@click.option("--signature", "-s", required=True, help="Signature to check")
@format_option(Algorithm.BLAKE3)
@reports_errors
def text_verify(input_: str, key: str, signature: str, algorithm: Algorithm) -> None:
    """Verify a signature. Prints true or false."""
    ok = process_text_verify(input_, key, signature, algorithm)
    click.echo("true" if ok else "false")


@text.command("generate")
@format_option(Algorithm.BLAKE3)
@click.option(
    "--output", "-o",
    default=".",
    show_default=True,
    type=click.Path(exists=True, file_okay=False),
    help="Directory to write key files to",
)
@reports_errors
def text_generate(algorithm: Algorithm, output: str) -> None:
    """Generate key files."""
    keys = process_text_generate(algorithm)
    for path in write_keys(keys, output):
        click.echo(f"{path.name}: {path}")


@text.command("encrypt")
@input_option
@key_option
@format_option(Algorithm.CHACHA20POLY1305)
@reports_errors
def text_encrypt(input_: str, key: str, algorithm: Algorithm) -> None:
    """Encrypt text."""
    click.echo(process_text_encrypt(input_, key, algorithm))


@text.command("decrypt")
@input_option
@key_option
@format_option(Algorithm.CHACHA20POLY1305)
@reports_errors
def text_decrypt(input_: str, key: str, algorithm: Algorithm) -> None:
    """Decrypt text and print it as UTF-8."""
    plaintext = process_text_decrypt(input_, key, algorithm)
    try:
        click.echo(plaintext.decode("utf-8"))
    except UnicodeDecodeError as e:
        raise click.ClickException(
            "decrypted successfully, but the plaintext is not valid UTF-8"
        ) from e


@main.command("genpass")
@click.option("--length", "-l", default=16, show_default=True, type=click.IntRange(min=1))
@click.option("--count", "-c", default=1, show_default=True, type=click.IntRange(min=1))
@click.option("--no-uppercase", is_flag=True, help="Leave out uppercase letters")
@click.option("--no-lowercase", is_flag=True, help="Leave out lowercase letters")
@click.option("--no-number", is_flag=True, help="Leave out digits")
@click.option("--no-symbol", is_flag=True, help="Leave out symbols")
def genpass(length: int, count: int, no_uppercase: bool, no_lowercase: bool,
            no_number: bool, no_symbol: bool) -> None:
    """Generate random passwords."""
    try:
        passwords = generate_passwords(
            count, length,
            uppercase=not no_uppercase,
            lowercase=not no_lowercase,
            number=not no_number,
            symbol=not no_symbol,
        )
    except ValueError as e:
        raise click.ClickException(str(e)) from e
    for password in passwords:
        click.echo(password)


if __name__ == "__main__":
    main()
