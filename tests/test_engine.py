import logging
import random

import pytest

from tabularecta.core.alphabet import ALPHABET, STRAIGHT, Alphabet, keyed_alphabet
from tabularecta.core.engine import Direction, Mode, substitute, transform
from tabularecta.core.errors import (
    CipherError,
    EmptyKeyError,
    InvalidAlphabetError,
    ShiftLengthError,
    ShiftRangeError,
)
from tabularecta.core.shifts import Keystream, NumericShifts, RepeatingKey


def _classic_vigenere(text: str, key: str) -> str:
    return "".join(
        chr((ord(t) - 65 + ord(key[i % len(key)]) - 65) % 26 + 65) for i, t in enumerate(text)
    )


def test_attack_at_dawn():
    ct = substitute("ATTACKATDAWN", STRAIGHT, STRAIGHT, Direction.ENCRYPT, Mode.ADD, RepeatingKey("LEMON"))
    assert ct == "LXFOPVEFRNHR"
    pt = substitute(ct, STRAIGHT, STRAIGHT, Direction.DECRYPT, Mode.ADD, RepeatingKey("LEMON"))
    assert pt == "ATTACKATDAWN"


def test_straight_alphabets_match_classic_vigenere():
    rng = random.Random(7)
    for _ in range(50):
        text = "".join(rng.choice(ALPHABET) for _ in range(rng.randint(1, 60)))
        key = "".join(rng.choice(ALPHABET) for _ in range(rng.randint(1, 12)))
        ct = substitute(text, STRAIGHT, STRAIGHT, "encrypt", "add", RepeatingKey(key))
        assert ct == _classic_vigenere(text, key)


def test_empty_text_gives_empty_output():
    assert substitute("", STRAIGHT, keyed_alphabet("X"), Direction.ENCRYPT, Mode.SUBTRACT, []) == ""
    assert substitute("  123 ", STRAIGHT, STRAIGHT, Direction.DECRYPT, Mode.ADD, RepeatingKey("KEY")) == ""


def test_zero_shift_is_pure_keyed_substitution():
    plain = keyed_alphabet("LEPRACHAUN")
    text = "HELLOWORLD"
    ct = substitute(text, plain, STRAIGHT, Direction.ENCRYPT, Mode.ADD, [0] * len(text))
    assert ct == "".join(STRAIGHT.letter(plain.position(ch)) for ch in text)
    assert ct[:5] == "GBAAR"


def test_subtract_mode_is_variant():
    # C = P - K
    assert substitute("HIDE", STRAIGHT, STRAIGHT, Direction.ENCRYPT, Mode.SUBTRACT, RepeatingKey("LEPR")) == "WEON"
    assert substitute("WEON", STRAIGHT, STRAIGHT, Direction.DECRYPT, Mode.SUBTRACT, RepeatingKey("LEPR")) == "HIDE"


def test_text_is_normalized_before_lookup():
    assert substitute("attack at dawn!", STRAIGHT, STRAIGHT, 1, "add", RepeatingKey("lemon")) == "LXFOPVEFRNHR"


def test_non_ascii_letters_are_dropped_not_expanded():
    ct = substitute("Straße", STRAIGHT, STRAIGHT, Direction.ENCRYPT, Mode.ADD, RepeatingKey("K"))
    assert ct == "CDBKO"
    assert substitute(ct, STRAIGHT, STRAIGHT, Direction.DECRYPT, Mode.ADD, RepeatingKey("K")) == "STRAE"


def test_plain_integer_list_is_numeric_shifts():
    assert substitute("AAA", STRAIGHT, STRAIGHT, Direction.ENCRYPT, Mode.ADD, [1, 2, 3]) == "BCD"


def test_length_mismatch_is_reported():
    with pytest.raises(ShiftLengthError):
        substitute("ABCD", STRAIGHT, STRAIGHT, Direction.ENCRYPT, Mode.ADD, NumericShifts((1, 2, 3)))


def test_out_of_range_shift_is_reported():
    with pytest.raises(ShiftRangeError):
        substitute("AB", STRAIGHT, STRAIGHT, Direction.ENCRYPT, Mode.ADD, [1, 26])


def test_invalid_alphabet_is_reported():
    with pytest.raises(InvalidAlphabetError):
        substitute("AB", "ABC", STRAIGHT, Direction.ENCRYPT, Mode.ADD, [1, 2])
    with pytest.raises(InvalidAlphabetError):
        substitute("AB", STRAIGHT, "A" * 26, Direction.DECRYPT, Mode.ADD, [1, 2])


@pytest.mark.parametrize("bad", ["sideways", 0, 2, True])
def test_bad_direction(bad):
    with pytest.raises(CipherError):
        substitute("AB", STRAIGHT, STRAIGHT, bad, Mode.ADD, [1, 2])


def test_bad_mode():
    with pytest.raises(CipherError):
        substitute("AB", STRAIGHT, STRAIGHT, Direction.ENCRYPT, "multiply", [1, 2])


def test_direction_and_mode_parsing():
    assert Direction.parse("Encrypt") is Direction.ENCRYPT
    assert Direction.parse(-1) is Direction.DECRYPT
    assert Mode.parse("sub") is Mode.SUBTRACT
    assert Mode.parse("subtract") is Mode.SUBTRACT
    assert Mode.parse(Mode.ADD) is Mode.ADD


def test_transform_precedence():
    # keystream wins over key
    assert transform("AAAA", "LEMON", "encrypt", keystream="BC") == "BCBC"
    # numeric stream wins over both
    assert transform("AAAA", "LEMON", "encrypt", keystream="BC", shift_stream=[3, 3, 3, 3]) == "DDDD"
    # nothing but the key
    assert transform("ATTACKATDAWN", "LEMON", "encrypt") == "LXFOPVEFRNHR"


def test_transform_empty_text_needs_no_key():
    assert transform("", None, "encrypt") == ""
    assert transform("", "", "decrypt") == ""
    assert transform("12 ?!", None, Direction.ENCRYPT, keystream="") == ""
    with pytest.raises(EmptyKeyError):
        transform("A", None, "encrypt")


def test_transform_keystream_through_keyed_alphabet():
    keyed = keyed_alphabet("LEPRACHAUN")
    # 'L' is at position 0 of the keyed alphabet -> zero shift
    assert transform("HELLO", None, "encrypt", keystream="L", keystream_alphabet=keyed) == "HELLO"


def test_engine_logs_at_debug(caplog):
    with caplog.at_level(logging.DEBUG, logger="tabularecta.core.engine"):
        substitute("ABC", STRAIGHT, STRAIGHT, Direction.ENCRYPT, Mode.ADD, [0, 0, 0])
    assert any("substitute: n=3" in rec.getMessage() for rec in caplog.records)


def _random_alphabet(rng: random.Random) -> Alphabet:
    if rng.random() < 0.5:
        key = "".join(rng.choice(ALPHABET) for _ in range(rng.randint(0, 12)))
        return keyed_alphabet(key)
    letters = list(ALPHABET)
    rng.shuffle(letters)
    return Alphabet("".join(letters))


def test_round_trip_fuzz():
    rng = random.Random(20261017)
    for _ in range(300):
        n = rng.randint(0, 80)
        text = "".join(rng.choice(ALPHABET) for _ in range(n))
        plain = _random_alphabet(rng)
        cipher = _random_alphabet(rng)
        mode = rng.choice([Mode.ADD, Mode.SUBTRACT])

        kind = rng.randint(0, 2)
        if kind == 0:
            shifts = NumericShifts(tuple(rng.randint(0, 25) for _ in range(n)))
        elif kind == 1:
            shifts = Keystream("".join(rng.choice(ALPHABET) for _ in range(rng.randint(1, 9))), _random_alphabet(rng))
        else:
            shifts = RepeatingKey("".join(rng.choice(ALPHABET) for _ in range(rng.randint(1, 9))))

        ct = substitute(text, plain, cipher, Direction.ENCRYPT, mode, shifts)
        assert len(ct) == n
        assert substitute(ct, plain, cipher, Direction.DECRYPT, mode, shifts) == text
