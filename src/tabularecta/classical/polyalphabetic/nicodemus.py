from __future__ import annotations

from tabularecta.classical.common import make_result, require_letters
from tabularecta.core.alphabet import STRAIGHT, column_order
from tabularecta.core.engine import Direction, Mode, substitute
from tabularecta.core.registry import register_plugin
from tabularecta.core.results import CipherResult
from tabularecta.core.shifts import RepeatingKey
from tabularecta.core.utils import normalize_az

BLOCK_ROWS = 5


class NicodemusCipher:
    """
    Columnar transposition under the key, then Vigenere on each row with the
    alphabetically sorted key, read out column by column in blocks of five
    rows.

    The text is written into rows of len(key) letters; only the last row can
    be short. A short row keeps just the columns it has, packed to the left,
    so the sorted key always starts at its first letter.
    """

    name = "nicodemus"
    required_keys = ("key",)
    optional_keys: tuple[str, ...] = ()

    def _grid(self, key: str) -> tuple[list[int], str]:
        k = require_letters(key)
        order = column_order(k)
        return order, "".join(k[c] for c in order)

    @staticmethod
    def _row_lengths(total: int, width: int) -> list[int]:
        full, rest = divmod(total, width)
        return [width] * full + ([rest] if rest else [])

    def _read_blocks(self, rows: list[str], width: int) -> str:
        out: list[str] = []
        for start in range(0, len(rows), BLOCK_ROWS):
            block = rows[start : start + BLOCK_ROWS]
            for col in range(width):
                out.extend(row[col] for row in block if col < len(row))
        return "".join(out)

    def _fill_blocks(self, text: str, lengths: list[int], width: int) -> list[str]:
        cells = [[""] * n for n in lengths]
        pos = 0
        for start in range(0, len(lengths), BLOCK_ROWS):
            block = range(start, min(start + BLOCK_ROWS, len(lengths)))
            for col in range(width):
                for r in block:
                    if col < lengths[r]:
                        cells[r][col] = text[pos]
                        pos += 1
        return ["".join(row) for row in cells]

    def encrypt(self, text: str, key: str) -> CipherResult:
        order, skey = self._grid(key)
        width = len(order)
        t = normalize_az(text)

        rows: list[str] = []
        for start in range(0, len(t), width):
            row = t[start : start + width]
            moved = "".join(row[c] for c in order if c < len(row))
            rows.append(substitute(moved, STRAIGHT, STRAIGHT, Direction.ENCRYPT, Mode.ADD, RepeatingKey(skey)))

        out = self._read_blocks(rows, width)
        return make_result(self.name, Direction.ENCRYPT, t, out, {"key": key}, {"period": width, "sorted_key": skey})

    def decrypt(self, text: str, key: str) -> CipherResult:
        order, skey = self._grid(key)
        width = len(order)
        t = normalize_az(text)

        plain_rows: list[str] = []
        for row in self._fill_blocks(t, self._row_lengths(len(t), width), width):
            moved = substitute(row, STRAIGHT, STRAIGHT, Direction.DECRYPT, Mode.ADD, RepeatingKey(skey))
            # columns present in a short row, in transposed order
            cols = [c for c in order if c < len(row)]
            restored = [""] * len(row)
            for c, ch in zip(cols, moved):
                restored[c] = ch
            plain_rows.append("".join(restored))

        out = "".join(plain_rows)
        return make_result(self.name, Direction.DECRYPT, t, out, {"key": key}, {"period": width, "sorted_key": skey})


register_plugin(NicodemusCipher())
