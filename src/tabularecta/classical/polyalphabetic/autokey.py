from __future__ import annotations

import numbers

from tabularecta.classical.common import make_result, require_letters
from tabularecta.core.alphabet import STRAIGHT
from tabularecta.core.engine import Direction, Mode, substitute
from tabularecta.core.errors import CipherError
from tabularecta.core.registry import register_plugin
from tabularecta.core.results import CipherResult
from tabularecta.core.shifts import Keystream, NumericShifts, RepeatingKey
from tabularecta.core.utils import chunked, normalize_az


class AutokeyCipher:
    """
    Vigenere whose keystream is the primer followed by the plaintext itself.

    Decryption runs block by block: block j (primer-sized) is keyed by the
    plaintext recovered from block j-1.
    """

    name = "autokey"
    required_keys = ("key",)
    optional_keys: tuple[str, ...] = ()

    def encrypt(self, text: str, key: str) -> CipherResult:
        primer = require_letters(key)
        t = normalize_az(text)
        stream = (primer + t)[: len(t)]
        out = substitute(t, STRAIGHT, STRAIGHT, Direction.ENCRYPT, Mode.ADD, Keystream(stream))
        return make_result(self.name, Direction.ENCRYPT, t, out, {"key": key}, {"primer_length": len(primer)})

    def decrypt(self, text: str, key: str) -> CipherResult:
        primer = require_letters(key)
        t = normalize_az(text)

        recovered: list[str] = []
        prev = primer
        for block in chunked(t, len(primer)):
            piece = substitute("".join(block), STRAIGHT, STRAIGHT, Direction.DECRYPT, Mode.ADD, Keystream(prev))
            recovered.append(piece)
            prev = piece

        out = "".join(recovered)
        return make_result(self.name, Direction.DECRYPT, t, out, {"key": key}, {"primer_length": len(primer)})


class ProgressiveKeyCipher:
    """
    Vigenere followed by a second pass that adds g * index to every letter
    of period-sized group g.
    """

    name = "progressive_key"
    required_keys = ("key",)
    optional_keys = ("index",)

    def _progression(self, length: int, period: int, index: int) -> NumericShifts:
        return NumericShifts(tuple(((i // period) * index) % 26 for i in range(length)))

    def _check_index(self, index) -> int:
        idx = None
        if isinstance(index, str):
            text = index.strip()
            if text.isascii() and text.isdigit():
                idx = int(text)
        elif isinstance(index, bool):
            pass
        elif isinstance(index, numbers.Integral):
            idx = int(index)
        elif isinstance(index, float) and index.is_integer():
            idx = int(index)
        if idx is None or not 1 <= idx <= 25:
            raise CipherError(f"Progression index must be an integer 1..25 (got {index!r}).")
        return idx

    def encrypt(self, text: str, key: str, index: int = 1) -> CipherResult:
        k = require_letters(key)
        idx = self._check_index(index)
        t = normalize_az(text)

        primary = substitute(t, STRAIGHT, STRAIGHT, Direction.ENCRYPT, Mode.ADD, RepeatingKey(k))
        out = substitute(
            primary, STRAIGHT, STRAIGHT, Direction.ENCRYPT, Mode.ADD, self._progression(len(t), len(k), idx)
        )
        return make_result(
            self.name, Direction.ENCRYPT, t, out, {"key": key, "index": index}, {"period": len(k), "index": idx}
        )

    def decrypt(self, text: str, key: str, index: int = 1) -> CipherResult:
        k = require_letters(key)
        idx = self._check_index(index)
        t = normalize_az(text)

        primary = substitute(
            t, STRAIGHT, STRAIGHT, Direction.DECRYPT, Mode.ADD, self._progression(len(t), len(k), idx)
        )
        out = substitute(primary, STRAIGHT, STRAIGHT, Direction.DECRYPT, Mode.ADD, RepeatingKey(k))
        return make_result(
            self.name, Direction.DECRYPT, t, out, {"key": key, "index": index}, {"period": len(k), "index": idx}
        )


register_plugin(AutokeyCipher())
register_plugin(ProgressiveKeyCipher())
