from __future__ import annotations

from tabularecta.classical.common import make_result, parse_digits, require_letters
from tabularecta.core.alphabet import ALPHABET, STRAIGHT
from tabularecta.core.engine import Direction, Mode, substitute
from tabularecta.core.registry import register_plugin
from tabularecta.core.results import CipherResult
from tabularecta.core.shifts import Keystream, NumericShifts, RepeatingKey
from tabularecta.core.utils import cycle_to_length, normalize_az


def _vigenere(text: str, key: str, direction: Direction, mode: Mode = Mode.ADD) -> str:
    return substitute(text, STRAIGHT, STRAIGHT, direction, mode, RepeatingKey(key))


class VigenereCipher:
    """Repeating-key Vigenere: C = P + K (mod 26)."""

    name = "vigenere"
    required_keys = ("key",)
    optional_keys: tuple[str, ...] = ()
    mode = Mode.ADD

    def _run(self, text: str, key: str, direction: Direction) -> CipherResult:
        k = require_letters(key)
        t = normalize_az(text)
        out = _vigenere(t, k, direction, self.mode)
        return make_result(self.name, direction, t, out, {"key": key}, {"period": len(k)})

    def encrypt(self, text: str, key: str) -> CipherResult:
        return self._run(text, key, Direction.ENCRYPT)

    def decrypt(self, text: str, key: str) -> CipherResult:
        return self._run(text, key, Direction.DECRYPT)


class VariantCipher(VigenereCipher):
    """Variant Vigenere: C = P - K, P = C + K (mod 26)."""

    name = "variant"
    mode = Mode.SUBTRACT


class GronsfeldCipher:
    """Vigenere with a numeric key; each digit is the shift."""

    name = "gronsfeld"
    required_keys = ("key",)
    optional_keys: tuple[str, ...] = ()

    def _run(self, text: str, key: str, direction: Direction) -> CipherResult:
        digits = parse_digits(key)
        t = normalize_az(text)
        shifts = NumericShifts(tuple(cycle_to_length(digits, len(t))))
        out = substitute(t, STRAIGHT, STRAIGHT, direction, Mode.ADD, shifts)
        return make_result(self.name, direction, t, out, {"key": key}, {"period": len(digits)})

    def encrypt(self, text: str, key: str) -> CipherResult:
        return self._run(text, key, Direction.ENCRYPT)

    def decrypt(self, text: str, key: str) -> CipherResult:
        return self._run(text, key, Direction.DECRYPT)


class TrithemiusCipher:
    """Progressive shift 0, 1, 2, ... (the straight alphabet as a keystream)."""

    name = "trithemius"
    required_keys: tuple[str, ...] = ()
    optional_keys: tuple[str, ...] = ()

    def _run(self, text: str, direction: Direction) -> CipherResult:
        t = normalize_az(text)
        out = substitute(t, STRAIGHT, STRAIGHT, direction, Mode.ADD, Keystream(ALPHABET))
        return make_result(self.name, direction, t, out, {}, {"period": 26})

    def encrypt(self, text: str) -> CipherResult:
        return self._run(text, Direction.ENCRYPT)

    def decrypt(self, text: str) -> CipherResult:
        return self._run(text, Direction.DECRYPT)


register_plugin(VigenereCipher())
register_plugin(VariantCipher())
register_plugin(GronsfeldCipher())
register_plugin(TrithemiusCipher())
