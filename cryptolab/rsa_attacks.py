"""Attacks on textbook RSA: broadcast, unpadded recovery, e=3 forgery, parity oracle."""

from __future__ import annotations

import math
import secrets
from fractions import Fraction
from typing import Iterable, Union

from .algebra import cbrt, generate_prime, inv_mod, mod_exp
from .rsa import (
    ITERATIONS,
    Key,
    RSAKeys,
    decrypt_with_key,
    encrypt_with_key,
    generate_keys,
    pkcs1_unpad,
)
from .sha1 import SHA1_DIGEST_SIZE, sha1

BytesLike = Union[bytes, bytearray, memoryview, str]

_MAX_ATTEMPTS = 32
_SIGNATURE_PREFIX = b"\x00\x01\xff\xff\xff\xff\x00"


def _as_bytes(data: BytesLike) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def _to_int(value: Union[int, BytesLike]) -> int:
    if isinstance(value, int):
        return value
    return int.from_bytes(_as_bytes(value), "big")


def _modulus_size(n: int) -> int:
    return (n.bit_length() + 7) // 8


def _chunks(data: bytes, size: int) -> list[bytes]:
    return [data[start:start + size] for start in range(0, len(data), size)]


def crt_cube_root(
    ciphertexts: Iterable[Union[int, BytesLike]], moduli: Iterable[int]
) -> int:
    """Combine m^3 mod n_i by the Chinese remainder theorem and take the cube root."""
    values = [_to_int(c) for c in ciphertexts]
    mods = list(moduli)
    if not values or len(values) != len(mods):
        raise ValueError("need as many ciphertexts as moduli, and at least one")
    total = math.prod(mods)
    combined = 0
    for value, n in zip(values, mods):
        others = total // n
        inverse = inv_mod(others, n)
        if inverse is None:
            raise ValueError("moduli must be pairwise coprime")
        combined += value * others * inverse
    return cbrt(combined % total)


class DecryptOnceServer:
    """Decrypts any ciphertext, but refuses one it has already decrypted."""

    def __init__(self, bits: int = 128) -> None:
        self._keys = generate_keys(bits)
        self.public_key: Key = self._keys.pk
        self._seen: set[bytes] = set()

    def encrypt_with_timestamp(self, message: BytesLike) -> bytes:
        stamp = str(secrets.randbits(32)).encode()
        text = (
            _as_bytes(message)
            + b"\n{\n  time: "
            + stamp
            + b",\n  social: '[national-id]',\n}"
        )
        return encrypt_with_key(self.public_key, text)

    def decrypt(self, ciphertext: BytesLike) -> bytes:
        raw = _as_bytes(ciphertext)
        digest = sha1(raw)
        if digest in self._seen:
            raise ValueError("Message already decrypted.")
        self._seen.add(digest)
        return decrypt_with_key(self._keys.sk, raw)


def unpadded_message_recovery(server: DecryptOnceServer, ciphertext: BytesLike) -> bytes:
    """Recover a refused plaintext by decrypting S^e * C and dividing out S."""
    e, n = server.public_key
    size = _modulus_size(n)
    raw = _as_bytes(ciphertext)
    if not raw or len(raw) % size:
        raise ValueError(f"ciphertext must be whole blocks of {size} bytes")
    blocks = _chunks(raw, size)
    for _ in range(_MAX_ATTEMPTS):
        s = 2 + secrets.randbelow(n - 2)
        inv_s = inv_mod(s, n)
        if inv_s is None:
            continue
        factor = mod_exp(s, e, n)
        altered = b"".join(
            ((factor * int.from_bytes(block, "big")) % n).to_bytes(size, "big")
            for block in blocks
        )
        try:
            leaked = server.decrypt(altered)
        except ValueError:
            continue
        if len(leaked) != len(raw):
            continue
        return b"".join(
            pkcs1_unpad(((int.from_bytes(block, "big") * inv_s) % n).to_bytes(size, "big"))
            for block in _chunks(leaked, size)
        )
    raise ValueError("could not recover the plaintext")


def _small_exponent_keys(bits: int, e: int = 3) -> RSAKeys:
    while True:
        p = generate_prime(bits, ITERATIONS)
        q = generate_prime(bits, ITERATIONS)
        if p == q:
            continue
        d = inv_mod(e, (p - 1) * (q - 1))
        if d is not None:
            n = p * q
            return RSAKeys(sk=(d, n), pk=(e, n))


class SignerVerifier:
    """RSA signatures with e = 3 and a verifier that ignores what follows the digest."""

    def __init__(self, bits: int = 1024) -> None:
        self._keys = _small_exponent_keys(bits)
        self.public_key: Key = self._keys.pk

    def sign(self, digest: BytesLike) -> bytes:
        return encrypt_with_key(self._keys.sk, digest)

    def verify(self, message: BytesLike, signature: BytesLike) -> bool:
        try:
            data = decrypt_with_key(self.public_key, signature)
        except ValueError:
            return False
        return len(data) >= SHA1_DIGEST_SIZE and data[:SHA1_DIGEST_SIZE] == sha1(message)


def forge_signature(message: BytesLike, n: int) -> bytes:
    """A signature the lax e = 3 verifier accepts, built by an integer cube root."""
    size = _modulus_size(n)
    digest = sha1(message)
    zeros = size - len(_SIGNATURE_PREFIX) - len(digest)
    if zeros <= 0:
        raise ValueError("modulus too small to forge a signature")
    block = _SIGNATURE_PREFIX + digest + bytes(zeros)
    root = cbrt(int.from_bytes(block, "big")) + 1
    return root.to_bytes(size, "big")


class ParityOracle:
    """Tells whether the plaintext behind a ciphertext is odd."""

    def __init__(self, bits: int = 1024) -> None:
        self._keys = generate_keys(bits)
        self.public_key: Key = self._keys.pk

    def encrypt(self, plaintext: BytesLike) -> bytes:
        return encrypt_with_key(self.public_key, plaintext)

    def is_plaintext_odd(self, ciphertext: BytesLike) -> bool:
        d, n = self._keys.sk
        return mod_exp(_to_int(ciphertext), d, n) % 2 == 1


def parity_attack(ciphertext: BytesLike, public_key: Key, oracle: ParityOracle) -> bytes:
    """Decrypt one ciphertext block by repeated doubling, one bit per oracle query."""
    e, n = public_key
    size = _modulus_size(n)
    raw = _as_bytes(ciphertext)
    if len(raw) != size:
        raise ValueError(f"the attack works on one block of {size} bytes")
    factor = mod_exp(2, e, n)
    c = int.from_bytes(raw, "big")
    lower, upper = Fraction(0), Fraction(n)
    for _ in range(n.bit_length()):
        c = (c * factor) % n
        middle = (lower + upper) / 2
        if oracle.is_plaintext_odd(c.to_bytes(size, "big")):
            lower = middle
        else:
            upper = middle
    m = math.ceil(upper) - 1
    return pkcs1_unpad(m.to_bytes(size, "big"))