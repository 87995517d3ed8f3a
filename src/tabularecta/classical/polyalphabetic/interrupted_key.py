from __future__ import annotations

from typing import Union

from tabularecta.classical.common import make_result, parse_run_lengths, require_letters
from tabularecta.core.alphabet import STRAIGHT
from tabularecta.core.engine import Direction, Mode, substitute
from tabularecta.core.registry import register_plugin
from tabularecta.core.results import CipherResult
from tabularecta.core.shifts import NumericShifts
from tabularecta.core.utils import letter_mask, splice_letters

Interrupt = Union[str, list[int], tuple[int, ...]]


def _word_schedule(upper: str, key_codes: list[int]) -> list[int]:
    """Key restarts at the first letter after any separator."""
    shifts: list[int] = []
    key_pos = 0
    prev_was_letter = False
    for ch in upper:
        if "A" <= ch <= "Z":
            if not prev_was_letter:
                key_pos = 0
            shifts.append(key_codes[key_pos])
            key_pos = (key_pos + 1) % len(key_codes)
            prev_was_letter = True
        else:
            prev_was_letter = False
    return shifts


def _run_schedule(n_letters: int, key_codes: list[int], runs: list[int]) -> list[int]:
    """Key restarts at every run boundary; run lengths are reused cyclically."""
    shifts: list[int] = []
    r = 0
    while len(shifts) < n_letters:
        n = min(runs[r % len(runs)], n_letters - len(shifts))
        shifts.extend(key_codes[i % len(key_codes)] for i in range(n))
        r += 1
    return shifts


class InterruptedKeyCipher:
    """
    Interrupted-key Vigenere (ACA). Layout is kept: only letters change,
    spaces and punctuation stay where they are.
    """

    name = "interrupted_key"
    required_keys = ("key",)
    optional_keys = ("interrupt",)

    def _run(self, text: str, key: str, interrupt: Interrupt, direction: Direction) -> CipherResult:
        k = require_letters(key)
        schedule = parse_run_lengths(interrupt)

        upper, positions = letter_mask(text)
        letters = "".join(upper[i] for i in positions)
        key_codes = [STRAIGHT.position(ch) for ch in k]

        if schedule == "word":
            shifts = _word_schedule(upper, key_codes)
        else:
            shifts = _run_schedule(len(letters), key_codes, schedule)

        out_letters = substitute(letters, STRAIGHT, STRAIGHT, direction, Mode.ADD, NumericShifts(tuple(shifts)))
        out = splice_letters(upper, positions, out_letters)
        return make_result(self.name, direction, upper, out, {"key": key, "interrupt": interrupt}, {"interrupt": schedule})

    def encrypt(self, text: str, key: str, interrupt: Interrupt = "word") -> CipherResult:
        return self._run(text, key, interrupt, Direction.ENCRYPT)

    def decrypt(self, text: str, key: str, interrupt: Interrupt = "word") -> CipherResult:
        return self._run(text, key, interrupt, Direction.DECRYPT)


register_plugin(InterruptedKeyCipher())
