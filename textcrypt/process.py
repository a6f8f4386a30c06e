"""
Text operations
================
Load key bytes, build the capability for the chosen algorithm, run it
once over the whole input and hand back the encoded result.

Key bytes are loaded before the input is opened and every step raises on
failure, so nothing is returned unless the whole operation succeeded.
"""

import logging
from typing import BinaryIO, Dict, Union

from .keyio import PathLike, load_key, open_input
from .text import (
    AlgorithmLike,
    create_decryptor,
    create_encryptor,
    create_generator,
    create_signer,
    create_verifier,
)
from .text.algorithm import Algorithm

logger = logging.getLogger(__name__)

InputSource = Union[PathLike, BinaryIO]
KeyReference = Union[PathLike, bytes]


def _key_bytes(key: KeyReference) -> bytes:
    if isinstance(key, (bytes, bytearray, memoryview)):
        return bytes(key)
    return load_key(key)


def process_text_sign(input: InputSource, key: KeyReference,
                      algorithm: AlgorithmLike = Algorithm.BLAKE3) -> str:
    algorithm = Algorithm.parse(algorithm)
    signer = create_signer(algorithm, _key_bytes(key))
    with open_input(input) as reader:
        signature = signer.sign(reader)
    logger.debug("signed input with %s", algorithm)
    return signature


def process_text_verify(input: InputSource, key: KeyReference, signature: str,
                        algorithm: AlgorithmLike = Algorithm.BLAKE3) -> bool:
    algorithm = Algorithm.parse(algorithm)
    verifier = create_verifier(algorithm, _key_bytes(key))
    with open_input(input) as reader:
        ok = verifier.verify(reader, signature)
    logger.debug("verified input with %s: %s", algorithm, ok)
    return ok


def process_text_generate(
        algorithm: AlgorithmLike = Algorithm.BLAKE3) -> Dict[str, bytes]:
    algorithm = Algorithm.parse(algorithm)
    keys = create_generator(algorithm).generate()
    logger.debug("generated %s keys: %s", algorithm, ", ".join(sorted(keys)))
    return keys


def process_text_encrypt(input: InputSource, key: KeyReference,
                         algorithm: AlgorithmLike = Algorithm.CHACHA20POLY1305) -> str:
    algorithm = Algorithm.parse(algorithm)
    encryptor = create_encryptor(algorithm, _key_bytes(key))
    with open_input(input) as reader:
        ciphertext = encryptor.encrypt(reader)
    logger.debug("encrypted input with %s", algorithm)
    return ciphertext


def process_text_decrypt(input: InputSource, key: KeyReference,
                         algorithm: AlgorithmLike = Algorithm.CHACHA20POLY1305) -> bytes:
    """Decrypt to raw bytes; interpreting them as text is up to the caller."""
    algorithm = Algorithm.parse(algorithm)
    decryptor = create_decryptor(algorithm, _key_bytes(key))
    with open_input(input) as reader:
        plaintext = decryptor.decrypt(reader)
    logger.debug("decrypted %d bytes with %s", len(plaintext), algorithm)
    return plaintext
