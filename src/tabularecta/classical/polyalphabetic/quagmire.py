from __future__ import annotations

from typing import Any

from tabularecta.classical.common import make_result, parse_align, require_letters
from tabularecta.core.alphabet import STRAIGHT, Alphabet, keyed_alphabet
from tabularecta.core.engine import Direction, Mode, substitute
from tabularecta.core.errors import MissingKeyError
from tabularecta.core.registry import register_plugin
from tabularecta.core.results import CipherResult
from tabularecta.core.shifts import NumericShifts, indicator_shifts
from tabularecta.core.utils import normalize_az

# ============================================================
# Quagmire I-IV (ACA)
# All four share one layout: the indicator key is written under the
# ALIGN letter of the plaintext alphabet and read in the ciphertext
# alphabet, so
#     shift[i] = pos_cipher(indicator[i mod period]) - pos_plain(align)
# What differs is which alphabets are keyed:
#     I    keyed plain  / straight cipher
#     II   straight plain / keyed cipher
#     III  same keyed alphabet for both
#     IV   keyed plain (key1) / keyed cipher (key2), indicator key3
# ============================================================


class _Quagmire:
    name = ""
    required_keys: tuple[str, ...] = ("key1", "key2")
    optional_keys: tuple[str, ...] = ("align",)

    def alphabets(self, **keys: str) -> tuple[Alphabet, Alphabet]:
        raise NotImplementedError

    def indicator(self, **keys: str) -> str:
        return require_letters(keys["key2"], "key2")

    def _run(self, text: str, direction: Direction, keys: dict[str, Any]) -> CipherResult:
        for k in self.required_keys:
            if keys.get(k) is None:
                raise MissingKeyError(f"Cipher '{self.name}' requires {k}.")
            require_letters(keys[k], k)
        plain, cipher = self.alphabets(**keys)
        indicator = self.indicator(**keys)
        align = parse_align(keys.get("align"))

        t = normalize_az(text)
        shifts = indicator_shifts(indicator, cipher, plain.position(align), len(t))
        out = substitute(t, plain, cipher, direction, Mode.ADD, NumericShifts(shifts))

        meta = {
            "period": len(indicator),
            "align": align,
            "plain_alphabet": plain.letters,
            "cipher_alphabet": cipher.letters,
        }
        return make_result(self.name, direction, t, out, keys, meta)

    def encrypt(self, text: str, **keys: str) -> CipherResult:
        return self._run(text, Direction.ENCRYPT, keys)

    def decrypt(self, text: str, **keys: str) -> CipherResult:
        return self._run(text, Direction.DECRYPT, keys)


class Quagmire1(_Quagmire):
    name = "quagmire1"

    def alphabets(self, **keys: str) -> tuple[Alphabet, Alphabet]:
        return keyed_alphabet(keys["key1"]), STRAIGHT


class Quagmire2(_Quagmire):
    name = "quagmire2"

    def alphabets(self, **keys: str) -> tuple[Alphabet, Alphabet]:
        return STRAIGHT, keyed_alphabet(keys["key1"])


class Quagmire3(_Quagmire):
    name = "quagmire3"

    def alphabets(self, **keys: str) -> tuple[Alphabet, Alphabet]:
        keyed = keyed_alphabet(keys["key1"])
        return keyed, keyed


class Quagmire4(_Quagmire):
    name = "quagmire4"
    required_keys = ("key1", "key2", "key3")

    def alphabets(self, **keys: str) -> tuple[Alphabet, Alphabet]:
        return keyed_alphabet(keys["key1"]), keyed_alphabet(keys["key2"])

    def indicator(self, **keys: str) -> str:
        return require_letters(keys["key3"], "key3")


register_plugin(Quagmire1())
register_plugin(Quagmire2())
register_plugin(Quagmire3())
register_plugin(Quagmire4())
