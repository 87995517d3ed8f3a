from __future__ import annotations

from tabularecta.classical.common import make_result, require_letters
from tabularecta.core.alphabet import columnar_alphabet
from tabularecta.core.engine import Direction, Mode, substitute
from tabularecta.core.registry import register_plugin
from tabularecta.core.results import CipherResult
from tabularecta.core.shifts import Keystream
from tabularecta.core.utils import normalize_az


class HeadlinesCipher:
    """
    Headlines (ACA): a mixed alphabet slid against itself.

    key1 is the hat that orders the columnar transposition, key2 the keyword
    alphabet written into the block, key3 the setting. Each setting letter
    shifts by its own position in the mixed alphabet.
    """

    name = "headlines"
    required_keys = ("key1", "key2", "key3")
    optional_keys: tuple[str, ...] = ()

    def _run(self, text: str, key1: str, key2: str, key3: str, direction: Direction) -> CipherResult:
        t = normalize_az(text)
        keys = {"key1": key1, "key2": key2, "key3": key3}
        if not t:
            return make_result(self.name, direction, t, "", keys)

        require_letters(key1, "key1 (hat)")
        require_letters(key2, "key2 (keyword)")
        setting = require_letters(key3, "key3 (setting)")

        mixed = columnar_alphabet(key1, key2)
        out = substitute(t, mixed, mixed, direction, Mode.ADD, Keystream(setting, mixed))
        return make_result(self.name, direction, t, out, keys, {"period": len(setting), "mixed_alphabet": mixed.letters})

    def encrypt(self, text: str, key1: str, key2: str, key3: str) -> CipherResult:
        return self._run(text, key1, key2, key3, Direction.ENCRYPT)

    def decrypt(self, text: str, key1: str, key2: str, key3: str) -> CipherResult:
        return self._run(text, key1, key2, key3, Direction.DECRYPT)


register_plugin(HeadlinesCipher())
