from .alphabet import ALPHABET, STRAIGHT, Alphabet, as_alphabet, columnar_alphabet, keyed_alphabet
from .engine import Direction, Mode, substitute, transform
from .errors import (
    CipherError,
    EmptyKeyError,
    InvalidAlphabetError,
    InvalidInterruptError,
    MissingKeyError,
    ShiftLengthError,
    ShiftRangeError,
    UnencodableSymbolError,
    UnexpectedKeyError,
    UnknownCipherError,
)
from .registry import decrypt_known, encrypt_known, list_plugins, register_plugin
from .results import CipherResult
from .shifts import Keystream, NumericShifts, RepeatingKey, choose_shift_source, resolve_shift_stream
from .utils import normalize_az

__all__ = [
    "ALPHABET",
    "STRAIGHT",
    "Alphabet",
    "as_alphabet",
    "columnar_alphabet",
    "keyed_alphabet",
    "Direction",
    "Mode",
    "substitute",
    "transform",
    "CipherError",
    "EmptyKeyError",
    "InvalidAlphabetError",
    "InvalidInterruptError",
    "MissingKeyError",
    "ShiftLengthError",
    "ShiftRangeError",
    "UnencodableSymbolError",
    "UnexpectedKeyError",
    "UnknownCipherError",
    "register_plugin",
    "encrypt_known",
    "decrypt_known",
    "list_plugins",
    "CipherResult",
    "Keystream",
    "NumericShifts",
    "RepeatingKey",
    "choose_shift_source",
    "resolve_shift_stream",
    "normalize_az",
]
