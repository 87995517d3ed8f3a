from __future__ import annotations

import logging
from typing import Optional

import typer

from tabularecta.classical import register_all
from tabularecta.core.alphabet import STRAIGHT, columnar_alphabet, keyed_alphabet
from tabularecta.core.engine import substitute
from tabularecta.core.errors import CipherError
from tabularecta.core.registry import decrypt_known, encrypt_known, get_plugin, list_plugins
from tabularecta.core.results import CipherResult
from tabularecta.core.shifts import choose_shift_source

logger = logging.getLogger(__name__)

app = typer.Typer(help="Tabula recta CLI: periodic polyalphabetic ciphers on a shared substitution engine.")


@app.callback()
def _init(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", envvar="TABULARECTA_VERBOSE", help="Log engine calls at DEBUG level."
    ),
):
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    # Register plugins exactly once per CLI run
    register_all()


def _parse_shifts(raw: str) -> list[int]:
    parts = [p for p in raw.replace(" ", ",").split(",") if p]
    try:
        return [int(p) for p in parts]
    except ValueError as e:
        raise typer.BadParameter(f"Shifts must be integers like '3,1,4' (got {raw!r}).") from e


def _echo_meta(result: CipherResult) -> None:
    typer.echo(f"cipher={result.cipher_name}")
    for k, v in result.keys.items():
        typer.echo(f"  {k}: {v}")
    for k, v in result.meta.items():
        typer.echo(f"  {k}: {v}")
    typer.echo(f"plain:     {result.plaintext}")
    typer.echo(f"encrypted: {result.ciphertext}")


def _key_options(key, key1, key2, key3, align, interrupt, index) -> dict:
    return {
        "key": key,
        "key1": key1,
        "key2": key2,
        "key3": key3,
        "align": align,
        "interrupt": interrupt,
        "index": index,
    }


@app.command()
def ciphers():
    """List all registered ciphers and the keys they take."""
    for name in list_plugins():
        plugin = get_plugin(name)
        req = ", ".join(plugin.required_keys) or "-"
        opt = ", ".join(plugin.optional_keys)
        typer.echo(f"{name:16s} keys: {req}" + (f"  [optional: {opt}]" if opt else ""))


@app.command()
def encrypt(
    cipher: str = typer.Option(..., "--cipher", "-c", help="Cipher name (e.g., vigenere, quagmire3)."),
    key: Optional[str] = typer.Option(None, "--key", "-k", help="Single key for one-key ciphers."),
    key1: Optional[str] = typer.Option(None, "--key1", help="First keyword."),
    key2: Optional[str] = typer.Option(None, "--key2", help="Second keyword / indicator."),
    key3: Optional[str] = typer.Option(None, "--key3", help="Third keyword / indicator."),
    align: Optional[str] = typer.Option(None, "--align", "-a", help="Alignment letter (default A)."),
    interrupt: Optional[str] = typer.Option(None, "--interrupt", help="'word' or run lengths like 3,4."),
    index: Optional[int] = typer.Option(None, "--index", help="Progression index (progressive_key)."),
    meta: bool = typer.Option(False, "--meta", "-m", help="Show keys and derived settings."),
    text: str = typer.Argument(..., help="Plaintext to encrypt."),
):
    """Encrypt TEXT with a named cipher."""
    try:
        result = encrypt_known(cipher, text, **_key_options(key, key1, key2, key3, align, interrupt, index))
    except CipherError as e:
        raise typer.BadParameter(str(e))
    if meta:
        _echo_meta(result)
    else:
        typer.echo(result.ciphertext)


@app.command()
def decrypt(
    cipher: str = typer.Option(..., "--cipher", "-c", help="Cipher name (e.g., vigenere, quagmire3)."),
    key: Optional[str] = typer.Option(None, "--key", "-k", help="Single key for one-key ciphers."),
    key1: Optional[str] = typer.Option(None, "--key1", help="First keyword."),
    key2: Optional[str] = typer.Option(None, "--key2", help="Second keyword / indicator."),
    key3: Optional[str] = typer.Option(None, "--key3", help="Third keyword / indicator."),
    align: Optional[str] = typer.Option(None, "--align", "-a", help="Alignment letter (default A)."),
    interrupt: Optional[str] = typer.Option(None, "--interrupt", help="'word' or run lengths like 3,4."),
    index: Optional[int] = typer.Option(None, "--index", help="Progression index (progressive_key)."),
    meta: bool = typer.Option(False, "--meta", "-m", help="Show keys and derived settings."),
    text: str = typer.Argument(..., help="Ciphertext to decrypt."),
):
    """Decrypt TEXT when you know the cipher and its keys."""
    try:
        result = decrypt_known(cipher, text, **_key_options(key, key1, key2, key3, align, interrupt, index))
    except CipherError as e:
        raise typer.BadParameter(str(e))
    if meta:
        _echo_meta(result)
    else:
        typer.echo(result.plaintext)


@app.command()
def alphabet(
    keyword: str = typer.Argument(..., help="Keyword to mix the alphabet with."),
    hat: Optional[str] = typer.Option(None, "--hat", help="Also transpose by this hat (Headlines)."),
):
    """Print the keyed alphabet for KEYWORD."""
    try:
        result = columnar_alphabet(hat, keyword) if hat else keyed_alphabet(keyword)
    except CipherError as e:
        raise typer.BadParameter(str(e))
    typer.echo(result.letters)


@app.command(name="substitute")
def substitute_cmd(
    text: str = typer.Argument(...),
    plain: Optional[str] = typer.Option(None, "--plain", help="Plaintext alphabet (default A-Z)."),
    cipher_alphabet: Optional[str] = typer.Option(None, "--cipher", help="Ciphertext alphabet (default A-Z)."),
    mode: str = typer.Option("add", "--mode", help="add or sub."),
    direction: str = typer.Option("encrypt", "--direction", "-d", help="encrypt or decrypt."),
    key: Optional[str] = typer.Option(None, "--key", "-k", help="Repeating key."),
    keystream: Optional[str] = typer.Option(None, "--keystream", help="Keystream letters (overrides --key)."),
    shifts: Optional[str] = typer.Option(None, "--shifts", help="Explicit shifts like 3,1,4 (overrides both)."),
):
    """Run the substitution engine directly."""
    try:
        source = choose_shift_source(
            shift_stream=_parse_shifts(shifts) if shifts else None,
            keystream=keystream,
            key=key,
        )
        out = substitute(
            text,
            plain or STRAIGHT,
            cipher_alphabet or STRAIGHT,
            direction,
            mode,
            source,
        )
    except CipherError as e:
        raise typer.BadParameter(str(e))
    logger.debug("substitute produced %d letters", len(out))
    typer.echo(out)


def main():
    app()


if __name__ == "__main__":
    main()
