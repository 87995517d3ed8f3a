from __future__ import annotations

def register_all() -> None:
    from .polyalphabetic import vigenere, autokey  # noqa: F401
    from .polyalphabetic import quagmire, headlines, interrupted_key, nicodemus  # noqa: F401
