"""AES-CBC with PKCS#7 padding and SHA-1 signatures for user data."""

from __future__ import annotations

import hashlib
import hmac
import os
from typing import Iterable, Optional

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

PKCS7_BLOCK_SIZE = 32
AES_BLOCK_SIZE = 16


def pkcs7_pad(data: bytes) -> bytes:
    """Pad ``data`` to a multiple of 32 bytes; a full block is added when already aligned."""
    pad = PKCS7_BLOCK_SIZE - len(data) % PKCS7_BLOCK_SIZE
    return bytes(data) + bytes([pad]) * pad


def pkcs7_unpad(data: bytes) -> bytes:
    """Strip padding; a last byte outside 1..32 leaves the data untouched."""
    if not data:
        raise ValueError("cannot unpad empty data")
    pad = data[-1]
    if pad < 1 or pad > PKCS7_BLOCK_SIZE:
        pad = 0
    return bytes(data[: len(data) - pad])


def _cipher(key: bytes, iv: bytes) -> Cipher:
    if len(iv) < AES_BLOCK_SIZE:
        raise ValueError("iv is shorter than the block size")
    return Cipher(algorithms.AES(key), modes.CBC(iv[:AES_BLOCK_SIZE]))


def cbc_encrypt(key: bytes, iv: Optional[bytes], plaintext: bytes) -> bytes:
    """Encrypt ``plaintext``; the result is the IV block followed by the ciphertext.

    A random IV is used when ``iv`` is None.
    """
    if iv is None:
        iv = os.urandom(AES_BLOCK_SIZE)
    padded = pkcs7_pad(plaintext)
    encryptor = _cipher(key, iv).encryptor()
    return bytes(iv[:AES_BLOCK_SIZE]) + encryptor.update(padded) + encryptor.finalize()


def cbc_decrypt(key: bytes, iv: bytes, ciphertext: bytes) -> bytes:
    """Decrypt ``ciphertext`` and strip its padding."""
    cipher = _cipher(key, iv)
    if len(ciphertext) < AES_BLOCK_SIZE:
        raise ValueError("ciphertext too short")
    if len(ciphertext) % AES_BLOCK_SIZE:
        raise ValueError("ciphertext is not a multiple of the block size")
    decryptor = cipher.decryptor()
    return pkcs7_unpad(decryptor.update(ciphertext) + decryptor.finalize())


def sign(parts: Iterable[str], sort_parts: bool = False) -> str:
    """SHA-1 hex digest of the concatenated parts, sorted first if asked."""
    items = list(parts)
    if sort_parts:
        items.sort()
    return hashlib.sha1("".join(items).encode("utf-8")).hexdigest()


def verify_signature(signature: str, parts: Iterable[str], sort_parts: bool = False) -> bool:
    """Whether ``signature`` matches the signature of ``parts``."""
    return hmac.compare_digest(signature, sign(parts, sort_parts))