from __future__ import annotations


class CipherError(ValueError):
    """Base class for every error raised by the cipher library."""


class InvalidAlphabetError(CipherError):
    """An alphabet is not a 26-letter permutation of A-Z."""


class ShiftLengthError(CipherError):
    """A shift stream does not match the normalized text length."""


class ShiftRangeError(CipherError):
    """A shift value is not an integer in 0..25."""


class UnencodableSymbolError(CipherError):
    """A text letter is missing from the alphabet it is looked up in."""


class EmptyKeyError(CipherError):
    """A required key has no usable symbols after normalization."""


class InvalidInterruptError(CipherError):
    pass


class UnknownCipherError(CipherError):
    pass


class MissingKeyError(CipherError):
    pass


class UnexpectedKeyError(CipherError):
    """A key name was passed that the cipher does not take."""
