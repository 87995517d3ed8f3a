from __future__ import annotations

import re
from string import ascii_letters
from typing import Iterable


# filter before upper(): "ß".upper() == "SS"
_AZ_ONLY_RE = re.compile(r"[^A-Za-z]+")


def normalize_az(s: str) -> str:
    """Keep only A-Z, uppercase. None and empty input give ''."""
    if s is None:
        return ""
    return _AZ_ONLY_RE.sub("", f"{s}").upper()


def letter_mask(text: str) -> tuple[str, list[int]]:
    """
    Uppercase the ASCII letters of the text and report where they sit.

    Returns (upper_text, positions). upper_text has the same length as text;
    everything outside the positions is a separator that ciphers preserving
    layout leave untouched.
    """
    text = f"{text}" if text is not None else ""
    positions = [i for i, ch in enumerate(text) if ch in ascii_letters]
    upper = "".join(ch.upper() if ch in ascii_letters else ch for ch in text)
    return upper, positions


def splice_letters(template: str, positions: Iterable[int], letters: str) -> str:
    """Write letters back into template at positions (same count required)."""
    out = list(template)
    positions = list(positions)
    if len(positions) != len(letters):
        raise ValueError(
            f"Cannot splice {len(letters)} letters into {len(positions)} positions."
        )
    for pos, ch in zip(positions, letters):
        out[pos] = ch
    return "".join(out)


def cycle_to_length(seq, length: int) -> list:
    """Repeat seq cyclically and cut to exactly length items."""
    if length <= 0:
        return []
    if not seq:
        raise ValueError("Cannot cycle an empty sequence.")
    reps = -(-length // len(seq))
    return (list(seq) * reps)[:length]


def chunked(seq: Iterable, size: int):
    buf = []
    for x in seq:
        buf.append(x)
        if len(buf) == size:
            yield buf
            buf = []
    if buf:
        yield buf
