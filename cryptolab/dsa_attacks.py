"""Attacks on DSA: known or repeated nonces and a maliciously chosen generator."""

from __future__ import annotations

import secrets
from typing import Optional, Union

from .algebra import inv_mod, mod_exp
from .dsa import DSA
from .sha1 import sha1

BytesLike = Union[bytes, bytearray, memoryview, str]
Signature = tuple[int, int]

DEFAULT_MAX_K = 65535


def _inverse(value: int, modulus: int) -> int:
    inverse = inv_mod(value % modulus, modulus)
    if inverse is None:
        raise ValueError(f"{value} has no inverse modulo {modulus}")
    return inverse


def private_key_from_nonce(k: int, h: int, r: int, s: int, q: int) -> int:
    """The private key x = (s*k - H(m)) / r mod q, given the nonce k."""
    return ((s * k - h) * _inverse(r, q)) % q


def brute_force_private_key(
    dsa: DSA, y: int, h: int, r: int, s: int, max_k: int = DEFAULT_MAX_K
) -> Optional[int]:
    """Try every nonce from 0 to max_k until g^x matches the public key y."""
    p, q, g = dsa.params()
    inv_r = _inverse(r, q)
    for k in range(max_k + 1):
        x = ((s * k - h) * inv_r) % q
        if mod_exp(g, x, p) == y:
            return x
    return None


class FixedNonceDSA:
    """DSA that signs every message with the same nonce."""

    def __init__(self, dsa: Optional[DSA] = None, k: Optional[int] = None) -> None:
        self.dsa = DSA.with_default_params() if dsa is None else dsa
        q = self.dsa.q
        self.k = 2 + secrets.randbelow(q - 2) if k is None else k
        if not 0 < self.k < q:
            raise ValueError("the nonce must lie strictly between 0 and q")

    def sign(self, x: int, message: BytesLike) -> Signature:
        p, q, g = self.dsa.params()
        h = int.from_bytes(sha1(message), "big") % q
        r = mod_exp(g, self.k, p) % q
        s = (_inverse(self.k, q) * (h + x * r)) % q
        return r, s


def recover_repeated_nonce(q: int, h1: int, s1: int, h2: int, s2: int) -> int:
    """The shared nonce k = (H(m1) - H(m2)) / (s1 - s2) mod q."""
    numerator = (h1 - h2) % q
    denominator = (s1 - s2) % q
    return (numerator * _inverse(denominator, q)) % q


def forge_magic_signature(p: int, q: int, y: int, z: int) -> Signature:
    """A signature valid for any message when the generator is 1 mod p."""
    r = mod_exp(y, z, p) % q
    s = (r * _inverse(z, q)) % q
    return r, s