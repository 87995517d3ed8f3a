from __future__ import annotations

import numbers
from dataclasses import dataclass, field
from typing import Optional, Sequence, Union

from .alphabet import STRAIGHT, Alphabet, AlphabetLike, as_alphabet
from .errors import EmptyKeyError, ShiftLengthError, ShiftRangeError
from .utils import cycle_to_length, normalize_az

# ============================================================
# Shift sources
#   NumericShifts : explicit per-position shifts (highest precedence)
#   Keystream     : letters read through an alphabet, repeated
#   RepeatingKey  : classic Vigenere key, A=0..Z=25, repeated
# Each one resolves to a tuple of exactly N ints in 0..25.
# ============================================================


@dataclass(frozen=True)
class NumericShifts:
    values: tuple[int, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", tuple(self.values))

    def resolve(self, length: int) -> tuple[int, ...]:
        for i, v in enumerate(self.values):
            # bool is an int subclass; a True/False shift is a caller bug
            if isinstance(v, bool) or not isinstance(v, numbers.Integral):
                raise ShiftRangeError(f"Shift at position {i} must be an integer 0..25 (got {v!r}).")
            if not 0 <= v <= 25:
                raise ShiftRangeError(f"Shift at position {i} is out of range 0..25 (got {v}).")
        if len(self.values) != length:
            raise ShiftLengthError(
                f"Shift stream length must match filtered text length ({length}); got {len(self.values)}."
            )
        return tuple(int(v) for v in self.values)


@dataclass(frozen=True)
class Keystream:
    letters: str
    alphabet: Alphabet = field(default=STRAIGHT)

    def __post_init__(self) -> None:
        object.__setattr__(self, "alphabet", as_alphabet(self.alphabet))

    def resolve(self, length: int) -> tuple[int, ...]:
        if length == 0:
            return ()
        ks = normalize_az(self.letters)
        if not ks:
            raise EmptyKeyError("Keystream must contain at least one letter A-Z.")
        codes = [self.alphabet.position(ch) for ch in ks]
        return tuple(cycle_to_length(codes, length))


@dataclass(frozen=True)
class RepeatingKey:
    key: str

    def resolve(self, length: int) -> tuple[int, ...]:
        if length == 0:
            return ()
        k = normalize_az(self.key)
        if not k:
            raise EmptyKeyError("Key must contain at least one alphabetic letter A-Z.")
        return tuple(cycle_to_length([STRAIGHT.position(ch) for ch in k], length))


ShiftSource = Union[NumericShifts, Keystream, RepeatingKey]


def as_shift_source(value: ShiftSource | Sequence[int]) -> ShiftSource:
    if isinstance(value, (NumericShifts, Keystream, RepeatingKey)):
        return value
    if isinstance(value, str):
        # a bare string is ambiguous between key and keystream; make callers say which
        raise TypeError("Pass RepeatingKey(...) or Keystream(...) instead of a bare string.")
    return NumericShifts(tuple(value))


def choose_shift_source(
    shift_stream: Optional[Sequence[int]] = None,
    keystream: Optional[str] = None,
    key: Optional[str] = None,
    *,
    keystream_alphabet: AlphabetLike = STRAIGHT,
) -> ShiftSource:
    """
    Pick one shift policy. Precedence: numeric stream > keystream > key.

    An input counts as supplied when it is not None and not empty, so a
    precomputed stream can override the default repeating key without
    changing the call.
    """
    if shift_stream is not None and len(shift_stream) > 0:
        return NumericShifts(tuple(shift_stream))
    if keystream:
        return Keystream(keystream, as_alphabet(keystream_alphabet))
    if key:
        return RepeatingKey(key)
    raise EmptyKeyError("A key, keystream or shift stream is required.")


def resolve_shift_stream(source: ShiftSource | Sequence[int], length: int) -> tuple[int, ...]:
    return as_shift_source(source).resolve(length)


def indicator_shifts(
    indicator: str,
    indicator_alphabet: AlphabetLike,
    align_index: int,
    length: int,
) -> tuple[int, ...]:
    """
    Per-position shifts for an indicator key written under an alignment letter.

    shift[i] = (pos(indicator[i mod period]) - align_index) mod 26, where pos
    is taken in indicator_alphabet. Used by the Quagmire family.
    """
    ind = normalize_az(indicator)
    if not ind:
        raise EmptyKeyError("Indicator key must contain at least one letter A-Z.")
    alpha = as_alphabet(indicator_alphabet)
    period_shifts = [(alpha.position(ch) - align_index) % 26 for ch in ind]
    return tuple(cycle_to_length(period_shifts, length))
