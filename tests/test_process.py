"""Text operation facade and key/input I/O."""

import io
import sys

import pytest

from textcrypt.errors import (
    AuthenticationFailed,
    IOFailure,
    KeyLengthMismatch,
    UnsupportedOperation,
)
from textcrypt.keyio import load_key, open_input, write_keys
from textcrypt.process import (
    process_text_decrypt,
    process_text_encrypt,
    process_text_generate,
    process_text_sign,
    process_text_verify,
)

MSG = b"Sign me, seal me, send me."


@pytest.fixture
def keydir(tmp_path):
    for algorithm in ("blake3", "ed25519", "chacha20poly1305"):
        write_keys(process_text_generate(algorithm), tmp_path)
    return tmp_path


@pytest.fixture
def message(tmp_path):
    path = tmp_path / "message.txt"
    path.write_bytes(MSG)
    return path


# ── Key persistence ──────────────────────────────────────────────────────────
def test_generate_writes_one_file_per_key(tmp_path):
    keys = process_text_generate("ed25519")
    written = write_keys(keys, tmp_path)
    assert sorted(p.name for p in written) == ["ed25519.pk", "ed25519.sk"]
    for path in written:
        assert load_key(path) == keys[path.name]


def test_write_keys_missing_directory(tmp_path):
    with pytest.raises(IOFailure):
        write_keys({"blake3.key": b"k" * 32}, tmp_path / "missing")


def test_load_key_missing_file(tmp_path):
    with pytest.raises(IOFailure):
        load_key(tmp_path / "nope.key")


# ── Input sources ────────────────────────────────────────────────────────────
def test_open_input_path(message):
    with open_input(str(message)) as reader:
        assert reader.read() == MSG


def test_open_input_stream_left_open():
    stream = io.BytesIO(MSG)
    with open_input(stream) as reader:
        assert reader.read() == MSG
    assert not stream.closed


def test_open_input_stdin(monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(MSG)))
    with open_input("-") as reader:
        assert reader.read() == MSG


def test_open_input_missing(tmp_path):
    with pytest.raises(IOFailure):
        with open_input(tmp_path / "missing.txt"):
            pass


# ── Sign / verify ────────────────────────────────────────────────────────────
def test_blake_sign_verify(keydir, message):
    key = keydir / "blake3.key"
    sig = process_text_sign(message, key, "blake3")
    assert process_text_verify(message, key, sig, "blake3") is True
    assert process_text_verify(io.BytesIO(MSG + b"!"), key, sig, "blake3") is False


def test_default_format_is_blake(keydir, message):
    key = keydir / "blake3.key"
    assert process_text_sign(message, key) == process_text_sign(message, key, "blake")


def test_ed25519_sign_verify(keydir, message):
    sig = process_text_sign(message, keydir / "ed25519.sk", "ed25519")
    assert process_text_verify(message, keydir / "ed25519.pk", sig, "ed25519") is True


def test_key_as_bytes(keydir):
    key = (keydir / "blake3.key").read_bytes()
    sig = process_text_sign(io.BytesIO(MSG), key, "blake3")
    assert process_text_verify(io.BytesIO(MSG), keydir / "blake3.key", sig, "blake3")


def test_sign_with_wrong_key_file(keydir, message):
    with pytest.raises(KeyLengthMismatch):
        process_text_sign(message, keydir / "chacha20poly1305.key", "blake3")


def test_sign_missing_input(keydir, tmp_path):
    with pytest.raises(IOFailure):
        process_text_sign(tmp_path / "missing.txt", keydir / "blake3.key", "blake3")


# ── Encrypt / decrypt ────────────────────────────────────────────────────────
def test_encrypt_decrypt(keydir, message, tmp_path):
    key = keydir / "chacha20poly1305.key"
    ct = process_text_encrypt(message, key)
    ct_file = tmp_path / "message.enc"
    ct_file.write_text(ct + "\n")
    assert process_text_decrypt(ct_file, key) == MSG


def test_decrypt_tampered(keydir):
    key = keydir / "chacha20poly1305.key"
    ct = process_text_encrypt(io.BytesIO(MSG), key)
    flipped = ("B" if ct[0] == "A" else "A") + ct[1:]
    with pytest.raises(AuthenticationFailed):
        process_text_decrypt(io.BytesIO(flipped.encode()), key)


def test_encrypt_with_blake(keydir, message):
    with pytest.raises(UnsupportedOperation):
        process_text_encrypt(message, keydir / "blake3.key", "blake3")
