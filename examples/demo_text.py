"""
textcrypt — Live Demo: sign, verify, encrypt, decrypt
======================================================
Run:  python examples/demo_text.py

Generates fresh keys for every algorithm into a temporary directory and
walks each one through its operations, printing sizes and timings.
"""

import io
import os
import sys
import tempfile
import time
from pathlib import Path

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from textcrypt import (
    AuthenticationFailed,
    process_text_decrypt,
    process_text_encrypt,
    process_text_generate,
    process_text_sign,
    process_text_verify,
)
from textcrypt.keyio import write_keys

LINE = "═" * 70
MSG  = b"hello world!"


def header(name):
    print(f"\n{LINE}")
    print(f"  {name}")
    print(LINE)


def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")


def main():
    keydir = Path(tempfile.mkdtemp(prefix="textcrypt-"))
    print(f"\n{LINE}")
    print("  textcrypt — Demo")
    print(LINE)
    print(f"  Message:  {MSG.decode()}")
    print(f"  Key dir:  {keydir}")

    # ── BLAKE3 ───────────────────────────────────────────────────────────────
    header("BLAKE3 keyed hash")
    write_keys(process_text_generate("blake3"), keydir)
    key = keydir / "blake3.key"
    t0  = time.perf_counter()
    sig = process_text_sign(io.BytesIO(MSG), key, "blake3")
    elapsed = time.perf_counter() - t0
    ok("Key",        f"{len(key.read_bytes())} bytes (printable ASCII)")
    ok("Signature",  sig)
    ok("Sign",       f"{elapsed*1000:.2f} ms")
    ok("Verify",     process_text_verify(io.BytesIO(MSG), key, sig, "blake3"))
    ok("Tampered",   process_text_verify(io.BytesIO(MSG[:-1]), key, sig, "blake3"))

    # ── Ed25519 ──────────────────────────────────────────────────────────────
    header("Ed25519 signatures")
    write_keys(process_text_generate("ed25519"), keydir)
    t0  = time.perf_counter()
    sig = process_text_sign(io.BytesIO(MSG), keydir / "ed25519.sk", "ed25519")
    elapsed = time.perf_counter() - t0
    ok("Keys",       "ed25519.sk (32 bytes), ed25519.pk (32 bytes)")
    ok("Signature",  sig[:40] + "...")
    ok("Sign",       f"{elapsed*1000:.2f} ms")
    ok("Verify",     process_text_verify(io.BytesIO(MSG), keydir / "ed25519.pk",
                                         sig, "ed25519"))

    # ── ChaCha20-Poly1305 ────────────────────────────────────────────────────
    header("ChaCha20-Poly1305")
    write_keys(process_text_generate("chacha20poly1305"), keydir)
    key = keydir / "chacha20poly1305.key"
    t0  = time.perf_counter()
    ct  = process_text_encrypt(io.BytesIO(MSG), key)
    pt  = process_text_decrypt(io.BytesIO(ct.encode()), key)
    elapsed = time.perf_counter() - t0
    ok("Key file",   "44 bytes (nonce=12 + key=32)")
    ok("Ciphertext", f"{ct} ({len(MSG)} + 16 tag bytes)")
    ok("Round-trip", f"{elapsed*1000:.2f} ms")
    ok("Decrypted",  pt.decode())

    flipped = ("B" if ct[0] == "A" else "A") + ct[1:]
    try:
        process_text_decrypt(io.BytesIO(flipped.encode()), key)
    except AuthenticationFailed as e:
        ok("Tampered", f"rejected ({e})")

    print(f"\n{LINE}\n")


if __name__ == "__main__":
    main()
