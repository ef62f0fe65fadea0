"""DSA signatures over SHA-1 with the standard 1024/160-bit parameters."""

from __future__ import annotations

import secrets
from typing import Union

from .algebra import inv_mod, mod_exp
from .sha1 import sha1

BytesLike = Union[bytes, bytearray, memoryview, str]
Signature = tuple[int, int]

DEFAULT_P = int(
    "800000000000000089e1855218a0e7dac38136ffafa72eda7859f2171e25e65eac698c17"
    "02578b07dc2a1076da241c76c62d374d8389ea5aeffd3226a0530cc565f3bf6b50929139eb"
    "eac04f48c3c84afb796d61e5a4f9a8fda812ab59494232c7d2b4deb50aa18ee9e132bfa85a"
    "c4374d7f9091abc3d015efc871a584471bb1",
    16,
)
DEFAULT_Q = int("f4f47f05794b256174bba6e9b396a7707e563c5b", 16)
DEFAULT_G = int(
    "5958c9d3898b224b12672c0b98e06c60df923cb8bc999d119458fef538b8fa4046c8db53"
    "039db620c094c9fa077ef389b5322a559946a71903f990f1f7e0e025e2d7f7cf494aff1a04"
    "70f5b64c36b625a097f1651fe775323556fe00b3608c887892878480e99041be601a62166c"
    "a6894bdd41a7054ec89f756ba9fc95302291",
    16,
)


def _random_between(low: int, high: int) -> int:
    """Random integer in [low, high)."""
    if high <= low:
        raise ValueError("empty range for a random value")
    return low + secrets.randbelow(high - low)


def _message_hash(message: BytesLike, q: int) -> int:
    return int.from_bytes(sha1(message), "big") % q


def _inverse(value: int, modulus: int) -> int:
    inverse = inv_mod(value, modulus)
    if inverse is None:
        raise ValueError(f"{value} has no inverse modulo {modulus}")
    return inverse


class DSA:
    """Public DSA parameters; key pairs are (x, y) = (secret, public)."""

    def __init__(self, p: int, q: int, g: int) -> None:
        self.p = p
        self.q = q
        self.g = g

    @classmethod
    def with_default_params(cls) -> "DSA":
        p, q, g = DEFAULT_P, DEFAULT_Q, DEFAULT_G
        if (p - 1) % q != 0 or mod_exp(g, q, p) != 1:
            raise ValueError("inconsistent DSA parameters")
        return cls(p, q, g)

    def params(self) -> tuple[int, int, int]:
        return self.p, self.q, self.g

    def generate_keys(self) -> tuple[int, int]:
        """Return (x, y) with x random in [2, q - 1) and y = g^x mod p."""
        x = _random_between(2, self.q - 1)
        return x, mod_exp(self.g, x, self.p)

    def sign(self, x: int, message: BytesLike) -> Signature:
        h = _message_hash(message, self.q)
        r = s = 0
        while r == 0 or s == 0:
            k = _random_between(2, self.q)
            r = mod_exp(self.g, k, self.p) % self.q
            if r == 0:
                continue
            s = (_inverse(k, self.q) * (h + x * r)) % self.q
        return r, s

    def verify(self, y: int, message: BytesLike, signature: Signature) -> bool:
        r, s = signature
        if s == 0 or r >= self.q or s >= self.q:
            return False
        w = _inverse(s, self.q)
        h = _message_hash(message, self.q)
        u1 = (h * w) % self.q
        u2 = (r * w) % self.q
        v = (mod_exp(self.g, u1, self.p) * mod_exp(y, u2, self.p)) % self.p % self.q
        return r == v

    def __repr__(self) -> str:
        return f"DSA(p={self.p:#x}, q={self.q:#x}, g={self.g:#x})"