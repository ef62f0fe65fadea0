"""Textbook RSA with PKCS#1 v1.5 style padding applied to each chunk."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .algebra import generate_prime, inv_mod, mod_exp

BytesLike = Union[bytes, bytearray, memoryview, str]
Key = tuple[int, int]

E = 65537
BITS = 1024
ITERATIONS = 7


def _as_bytes(data: BytesLike) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def _modulus_size(n: int) -> int:
    return (n.bit_length() + 7) // 8


@dataclass(frozen=True)
class RSAKeys:
    """A key pair: sk is (d, n) and pk is (e, n)."""

    sk: Key
    pk: Key


def pkcs1_pad(data: BytesLike, n_size: int) -> bytes:
    """Pad to n_size bytes as 00 01 FF..FF 00 data."""
    raw = _as_bytes(data)
    padding_len = n_size - 3 - len(raw)
    if padding_len < 0:
        raise ValueError(f"{len(raw)} bytes do not fit a padded block of {n_size} bytes")
    return b"\x00\x01" + b"\xff" * padding_len + b"\x00" + raw


def pkcs1_unpad(data: BytesLike) -> bytes:
    """Strip 00 01 ... 00 padding; data without the 00 01 prefix is returned as is."""
    raw = _as_bytes(data)
    if len(raw) < 3 or raw[0] != 0x00 or raw[1] != 0x01:
        return raw
    separator = raw.find(b"\x00", 1)
    if separator == -1:
        raise ValueError("padding has no terminating zero byte")
    return raw[separator + 1:]


def generate_keys(bits: int = BITS) -> RSAKeys:
    """Generate a key pair with e = 65537 from two random primes of up to ``bits`` bits."""
    while True:
        p = generate_prime(bits, ITERATIONS)
        q = generate_prime(bits, ITERATIONS)
        n = p * q
        totient = (p - 1) * (q - 1)
        d = inv_mod(E, totient)
        if d is not None:
            return RSAKeys(sk=(d, n), pk=(E, n))


def encrypt_with_key(key: Key, plaintext: BytesLike) -> bytes:
    """Pad and exponentiate each chunk of n_size - 3 bytes; output is n_size per chunk."""
    exponent, n = key
    n_size = _modulus_size(n)
    if n_size <= 3:
        raise ValueError("modulus too small to carry padded data")
    raw = _as_bytes(plaintext)
    step = n_size - 3
    ciphertext = bytearray()
    for start in range(0, len(raw), step):
        m = int.from_bytes(pkcs1_pad(raw[start:start + step], n_size), "big")
        ciphertext.extend(mod_exp(m, exponent, n).to_bytes(n_size, "big"))
    return bytes(ciphertext)


def decrypt_with_key(key: Key, ciphertext: BytesLike) -> bytes:
    """Exponentiate each n_size chunk and strip its padding."""
    exponent, n = key
    n_size = _modulus_size(n)
    if n_size == 0:
        raise ValueError("modulus must be positive")
    raw = _as_bytes(ciphertext)
    plaintext = bytearray()
    for start in range(0, len(raw), n_size):
        c = int.from_bytes(raw[start:start + n_size], "big")
        block = mod_exp(c, exponent, n).to_bytes(n_size, "big")
        plaintext.extend(pkcs1_unpad(block))
    return bytes(plaintext)