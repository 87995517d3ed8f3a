import pytest
from typer.testing import CliRunner

from tabularecta.classical import register_all
from tabularecta.cli import app
from tabularecta.core.errors import MissingKeyError, UnexpectedKeyError, UnknownCipherError
from tabularecta.core.registry import encrypt_known, list_plugins

register_all()

runner = CliRunner()


def test_ciphers_lists_every_plugin():
    result = runner.invoke(app, ["ciphers"])
    assert result.exit_code == 0
    for name in ("vigenere", "quagmire1", "quagmire4", "headlines", "interrupted_key", "nicodemus"):
        assert name in result.output


def test_encrypt_and_decrypt_vigenere():
    result = runner.invoke(app, ["encrypt", "-c", "vigenere", "-k", "LEMON", "attack at dawn"])
    assert result.exit_code == 0
    assert result.output.strip() == "LXFOPVEFRNHR"

    result = runner.invoke(app, ["decrypt", "-c", "vigenere", "-k", "LEMON", "LXFOPVEFRNHR"])
    assert result.exit_code == 0
    assert result.output.strip() == "ATTACKATDAWN"


def test_encrypt_quagmire3_with_meta():
    result = runner.invoke(
        app,
        ["encrypt", "-c", "quagmire3", "--key1", "LEPRACHAUN", "--key2", "FLOWER", "--meta", "Hide the gold"],
    )
    assert result.exit_code == 0
    assert "period: 6" in result.output
    assert "align: A" in result.output
    assert "encrypted: IBXSOCNNAQU" in result.output


def test_interrupted_key_keeps_layout():
    result = runner.invoke(app, ["encrypt", "-c", "interrupted_key", "-k", "leprachaun", "Hide the gold"])
    assert result.exit_code == 0
    assert result.output.strip() == "SMSV ELT RSAU"


def test_encrypt_and_decrypt_nicodemus():
    result = runner.invoke(app, ["encrypt", "-c", "nicodemus", "-k", "leprachaun", "Hide the gold into the tree stump"])
    assert result.exit_code == 0
    assert result.output.strip() == "TOUGEMJVGMMTLOLSODYEGSCVKIN"

    result = runner.invoke(app, ["decrypt", "-c", "nicodemus", "-k", "leprachaun", "TOUGEMJVGMMTLOLSODYEGSCVKIN"])
    assert result.exit_code == 0
    assert result.output.strip() == "HIDETHEGOLDINTOTHETREESTUMP"


def test_key_the_cipher_does_not_take_is_a_usage_error():
    result = runner.invoke(app, ["encrypt", "-c", "vigenere", "-k", "LEMON", "--key2", "X", "HELLO"])
    assert result.exit_code != 0
    assert "key2" in result.output


def test_missing_key_is_a_usage_error():
    result = runner.invoke(app, ["encrypt", "-c", "quagmire1", "--key1", "LEPRACHAUN", "HELLO"])
    assert result.exit_code != 0
    assert "key2" in result.output


def test_unknown_cipher_is_a_usage_error():
    result = runner.invoke(app, ["encrypt", "-c", "enigma", "-k", "X", "HELLO"])
    assert result.exit_code != 0


def test_alphabet_command():
    result = runner.invoke(app, ["alphabet", "LEPRACHAUN"])
    assert result.output.strip() == "LEPRACHUNBDFGIJKMOQSTVWXYZ"
    result = runner.invoke(app, ["alphabet", "GOBLIN", "--hat", "LEPRACHAUN"])
    assert result.output.strip() == "IMYCRNPZOHVAQGFUETBJWLKXDS"


def test_substitute_command_precedence():
    result = runner.invoke(app, ["substitute", "AAAA", "--key", "LEMON", "--keystream", "BC"])
    assert result.exit_code == 0
    assert result.output.strip() == "BCBC"

    result = runner.invoke(app, ["substitute", "AAAA", "--key", "LEMON", "--shifts", "1,2,3,4"])
    assert result.output.strip() == "BCDE"


def test_substitute_command_subtract_decrypt():
    result = runner.invoke(app, ["substitute", "WEON", "--key", "LEPR", "--mode", "sub", "-d", "decrypt"])
    assert result.exit_code == 0
    assert result.output.strip() == "HIDE"


def test_substitute_command_rejects_bad_stream():
    result = runner.invoke(app, ["substitute", "AAAA", "--shifts", "1,2"])
    assert result.exit_code != 0


def test_registry_errors():
    assert "quagmire2" in list_plugins()
    with pytest.raises(UnknownCipherError):
        encrypt_known("nope", "ABC", key="K")
    with pytest.raises(MissingKeyError):
        encrypt_known("vigenere", "ABC")
    with pytest.raises(UnexpectedKeyError) as excinfo:
        encrypt_known("vigenere", "ABC", key="K", key3="Z")
    assert not isinstance(excinfo.value, MissingKeyError)
    assert "key3" in str(excinfo.value)
