from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class CipherResult:
    cipher_name: str

    # Processed texts; letters-only except where a cipher preserves layout
    plaintext: str
    ciphertext: str

    # Keys exactly as the caller gave them
    keys: dict[str, Any] = field(default_factory=dict)

    # Derived settings worth reporting (period, alignment letter, alphabets)
    meta: dict[str, Any] = field(default_factory=dict)
