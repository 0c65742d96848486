"""Tests for the cipher strategies and registry."""

import pytest

import caesar_engine
from caesar_engine import (
    CIPHER_REGISTRY,
    DEFAULT_KEY,
    CaesarCipher,
    CipherStrategy,
    Rot13Cipher,
    register_cipher,
)


def test_registry_contents() -> None:
    assert CIPHER_REGISTRY["caesar"] is CaesarCipher
    assert CIPHER_REGISTRY["rot13"] is Rot13Cipher


def test_strategy_is_abstract() -> None:
    with pytest.raises(TypeError):
        CipherStrategy()


def test_caesar_default_key() -> None:
    cipher = CaesarCipher()
    assert cipher.key == DEFAULT_KEY
    assert cipher.encode("abc xyz") == "def abc"
    assert cipher.decode("def abc") == "abc xyz"


def test_caesar_custom_key_is_normalized() -> None:
    cipher = CaesarCipher(28)
    assert cipher.key == 2
    assert cipher.encode("Hello world!") == "Jgnnq yqtnf!"


def test_rot13_is_its_own_inverse() -> None:
    cipher = Rot13Cipher()
    assert cipher.key == 13
    assert cipher.encode("Attack at dawn") == "Nggnpx ng qnja"
    assert cipher.decode("Attack at dawn") == "Nggnpx ng qnja"


def test_rot13_ignores_other_keys(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
    monkeypatch.setattr(caesar_engine, "VERBOSE", True)
    cipher = Rot13Cipher(5)
    assert cipher.key == 13
    assert "[WARN] rot13 always uses key 13; ignoring key 5." in capsys.readouterr().err


def test_register_cipher_adds_class(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(caesar_engine, "CIPHER_REGISTRY", {})

    @register_cipher
    class Rot1Cipher(CaesarCipher):
        name = "rot1"
        description = "Shift by one."

        def __init__(self, key=1):
            super().__init__(1)

    assert caesar_engine.CIPHER_REGISTRY == {"rot1": Rot1Cipher}
    assert Rot1Cipher().encode("HAL") == "IBM"
