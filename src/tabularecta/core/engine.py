from __future__ import annotations

import logging
from enum import Enum
from typing import Optional, Sequence, Union

from .alphabet import STRAIGHT, AlphabetLike, as_alphabet
from .errors import CipherError, UnencodableSymbolError
from .shifts import ShiftSource, choose_shift_source, resolve_shift_stream
from .utils import normalize_az

logger = logging.getLogger(__name__)


class Direction(Enum):
    ENCRYPT = 1
    DECRYPT = -1

    @classmethod
    def parse(cls, value: Union["Direction", str, int]) -> "Direction":
        """Accept a member, its name ('encrypt'/'decrypt'), or 1 / -1."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            name = value.strip().lower()
            if name in ("encrypt", "enc", "e"):
                return cls.ENCRYPT
            if name in ("decrypt", "dec", "d"):
                return cls.DECRYPT
        elif isinstance(value, int) and not isinstance(value, bool):
            if value == 1:
                return cls.ENCRYPT
            if value == -1:
                return cls.DECRYPT
        raise CipherError(f"Direction must be 'encrypt'/'decrypt' or 1/-1 (got {value!r}).")


class Mode(Enum):
    ADD = 1
    SUBTRACT = -1

    @classmethod
    def parse(cls, value: Union["Mode", str]) -> "Mode":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            name = value.strip().lower()
            if name in ("add", "+"):
                return cls.ADD
            if name in ("sub", "subtract", "-"):
                return cls.SUBTRACT
        raise CipherError(f"Mode must be 'add' or 'sub' (got {value!r}).")


def substitute(
    text: str,
    plain_alphabet: AlphabetLike,
    cipher_alphabet: AlphabetLike,
    direction: Union[Direction, str, int],
    mode: Union[Mode, str],
    shifts: Union[ShiftSource, Sequence[int]],
) -> str:
    """
    Periodic polyalphabetic substitution over two alphabets.

    For each letter, p is its position in the plaintext alphabet (encrypt)
    or c its position in the ciphertext alphabet (decrypt), and k the shift
    for that position:

      ADD       encrypt c = p + k    decrypt p = c - k   (mod 26)
      SUBTRACT  encrypt c = p - k    decrypt p = c + k   (mod 26)

    The result index is read from the other alphabet. Text is reduced to
    A-Z first; all validation happens before any letter is produced, so a
    failing call never yields partial output.
    """
    plain = as_alphabet(plain_alphabet)
    cipher = as_alphabet(cipher_alphabet)
    direction = Direction.parse(direction)
    mode = Mode.parse(mode)

    t = normalize_az(text)
    stream = resolve_shift_stream(shifts, len(t))

    logger.debug(
        "substitute: n=%d direction=%s mode=%s plain=%s cipher=%s",
        len(t),
        direction.name,
        mode.name,
        plain.letters,
        cipher.letters,
    )

    if not t:
        return ""

    if direction is Direction.ENCRYPT:
        src, dst = plain, cipher
        sign = mode.value
    else:
        src, dst = cipher, plain
        sign = -mode.value

    try:
        idx = [src.position(ch) for ch in t]
    except UnencodableSymbolError as e:
        which = "PlainAlphabet" if direction is Direction.ENCRYPT else "CipherAlphabet"
        raise UnencodableSymbolError(f"Text contains letters not in {which}: {e}") from e

    return "".join(dst.letter(i + sign * k) for i, k in zip(idx, stream))


def transform(
    text: str,
    key: Optional[str],
    direction: Union[Direction, str, int],
    *,
    mode: Union[Mode, str] = Mode.ADD,
    plain_alphabet: AlphabetLike = STRAIGHT,
    cipher_alphabet: AlphabetLike = STRAIGHT,
    keystream: Optional[str] = None,
    shift_stream: Optional[Sequence[int]] = None,
    keystream_alphabet: AlphabetLike = STRAIGHT,
) -> str:
    """
    Extended Vigenere call: alphabets and mode are optional, and the shift
    stream comes from shift_stream, keystream or key in that order of
    precedence.

      transform("ATTACKATDAWN", "LEMON", "encrypt") -> "LXFOPVEFRNHR"
    """
    if not normalize_az(text):
        # no letters: nothing to key, so a missing key is not an error here
        return ""
    source = choose_shift_source(
        shift_stream=shift_stream,
        keystream=keystream,
        key=key,
        keystream_alphabet=keystream_alphabet,
    )
    return substitute(text, plain_alphabet, cipher_alphabet, direction, mode, source)
