from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from .errors import EmptyKeyError, InvalidAlphabetError, UnencodableSymbolError
from .utils import normalize_az

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
A_ORD = ord("A")


@dataclass(frozen=True)
class Alphabet:
    """
    An ordered permutation of A-Z.

    Position i holds one letter; `position()` is the inverse lookup. The
    constructor only accepts a true permutation, so every Alphabet value
    can encode every normalized letter.
    """

    letters: str
    # letter code (A=0) -> position in this alphabet
    _positions: tuple[int, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        given = f"{self.letters}" if self.letters is not None else ""
        raw = given.upper() if given.isascii() else ""
        if len(raw) != 26 or set(raw) != set(ALPHABET):
            raise InvalidAlphabetError(
                f"Alphabet must contain 26 unique letters A-Z (got {self.letters!r})."
            )
        object.__setattr__(self, "letters", raw)

        positions = [0] * 26
        for i, ch in enumerate(raw):
            positions[ord(ch) - A_ORD] = i
        object.__setattr__(self, "_positions", tuple(positions))

    def position(self, letter: str) -> int:
        """0-based position of letter in this alphabet."""
        if len(letter) != 1 or not ("A" <= letter <= "Z"):
            raise UnencodableSymbolError(f"Symbol {letter!r} is not in alphabet {self.letters}.")
        return self._positions[ord(letter) - A_ORD]

    def letter(self, index: int) -> str:
        return self.letters[index % 26]

    def is_straight(self) -> bool:
        return self.letters == ALPHABET

    def __len__(self) -> int:
        return 26

    def __iter__(self):
        return iter(self.letters)

    def __getitem__(self, index):
        return self.letters[index]

    def __str__(self) -> str:
        return self.letters


AlphabetLike = Union[Alphabet, str]

STRAIGHT = Alphabet(ALPHABET)


def as_alphabet(value: AlphabetLike | None) -> Alphabet:
    """Coerce a string (or None, meaning straight) into a validated Alphabet."""
    if value is None:
        return STRAIGHT
    if isinstance(value, Alphabet):
        return value
    return Alphabet(value)


def keyed_alphabet(keyword: str) -> Alphabet:
    """
    Keyword-mixed alphabet: the keyword's letters at first occurrence,
    then the rest of A-Z in order.

      keyed_alphabet("LEPRACHAUN") -> LEPRACHUNBDFGIJKMOQSTVWXYZ
      keyed_alphabet("")           -> ABCDEFGHIJKLMNOPQRSTUVWXYZ
    """
    seen: list[str] = []
    for ch in normalize_az(keyword):
        if ch not in seen:
            seen.append(ch)
    rest = [ch for ch in ALPHABET if ch not in seen]
    return Alphabet("".join(seen + rest))


def column_order(hat: str) -> list[int]:
    """
    Column indices of hat in reading order: alphabetical by letter,
    left to right among equal letters.
    """
    return sorted(range(len(hat)), key=lambda i: (hat[i], i))


def columnar_alphabet(hat: str, keyword: str) -> Alphabet:
    """
    Mixed alphabet used by Headlines.

    keyed_alphabet(keyword) is written row-wise into a block as wide as the
    hat, then the columns are read top-down in the hat's alphabetical order.
    """
    h = normalize_az(hat)
    if not h:
        raise EmptyKeyError("Hat keyword must contain at least one letter A-Z.")

    base = keyed_alphabet(keyword).letters
    ncols = len(h)
    columns = [base[c::ncols] for c in range(ncols)]
    mixed = "".join(columns[c] for c in column_order(h))
    return Alphabet(mixed)
