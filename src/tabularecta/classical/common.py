from __future__ import annotations

from typing import Any, Union

from tabularecta.core.engine import Direction
from tabularecta.core.errors import EmptyKeyError, InvalidInterruptError
from tabularecta.core.results import CipherResult
from tabularecta.core.utils import normalize_az

DEFAULT_ALIGN = "A"


def norm_key_alpha(key: str) -> str:
    """Uppercase and keep only A-Z."""
    return normalize_az(key)


def require_letters(key: str, label: str = "Key") -> str:
    """Normalized key, or EmptyKeyError if nothing is left."""
    k = norm_key_alpha(key)
    if not k:
        raise EmptyKeyError(f"{label} must contain at least one letter A-Z.")
    return k


def parse_align(align: str | None) -> str:
    """First A-Z letter of align, uppercased; 'A' when there is none."""
    a = norm_key_alpha(align or "")
    return a[0] if a else DEFAULT_ALIGN


def parse_digits(key: str) -> list[int]:
    """Gronsfeld keys: keep digits 0-9 in order."""
    digits = [int(ch) for ch in f"{key}" if "0" <= ch <= "9"]
    if not digits:
        raise EmptyKeyError("Key must contain at least one digit 0-9.")
    return digits


def parse_run_lengths(interrupt: Union[str, list[int], tuple[int, ...]]) -> Union[str, list[int]]:
    """
    Interrupted Key schedules: 'word', or run lengths given as a list or a
    string like "3,4" / "3 4" / "3:4".
    Returns 'word' or a list of positive ints.
    """
    if isinstance(interrupt, str):
        raw = interrupt.strip()
        if raw.lower() == "word":
            return "word"
        parts = [p for p in raw.replace(":", ",").replace(" ", ",").split(",") if p]
        if not parts:
            raise InvalidInterruptError("interrupt must be 'word' or a list of run lengths.")
        try:
            runs = [int(p) for p in parts]
        except ValueError as e:
            raise InvalidInterruptError(
                f"interrupt must be 'word' or a list of run lengths (got {interrupt!r})."
            ) from e
    else:
        runs = list(interrupt)
        if not runs:
            raise InvalidInterruptError("interrupt run lengths must not be empty.")

    for r in runs:
        if isinstance(r, bool) or not isinstance(r, int) or r <= 0:
            raise InvalidInterruptError(f"interrupt run lengths must be positive integers (got {r!r}).")
    return runs


def make_result(
    cipher_name: str,
    direction: Direction,
    text_in: str,
    text_out: str,
    keys: dict[str, Any],
    meta: dict[str, Any] | None = None,
) -> CipherResult:
    """Put input/output in the plaintext/ciphertext slots for the direction."""
    if direction is Direction.ENCRYPT:
        plaintext, ciphertext = text_in, text_out
    else:
        plaintext, ciphertext = text_out, text_in
    return CipherResult(
        cipher_name=cipher_name,
        plaintext=plaintext,
        ciphertext=ciphertext,
        keys=dict(keys),
        meta=dict(meta or {}),
    )
