import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from textcrypt.text import create_generator


@pytest.fixture
def blake_key():
    return create_generator("blake3").generate()["blake3.key"]


@pytest.fixture
def ed25519_keys():
    return create_generator("ed25519").generate()


@pytest.fixture
def chacha_key():
    return create_generator("chacha20poly1305").generate()["chacha20poly1305.key"]
