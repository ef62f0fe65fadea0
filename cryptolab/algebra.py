"""Number theory helpers: GF(2^8) arithmetic, modular inverses, roots and primes."""

from __future__ import annotations

import secrets
from functools import lru_cache
from typing import Optional

_NIST_PRIME_HEX = (
    "ffffffffffffffffc90fdaa22168c234c4c6628b80dc1cd129024"
    "e088a67cc74020bbea63b139b22514a08798e3404ddef9519b3cd"
    "3a431b302b0a6df25f14374fe1356d6d51c245e485b576625e7ec"
    "6f44c42e9a637ed6b0bff5cb6f406b7edee386bfb5a899fa5ae9f"
    "24117c4b1fe649286651ece45b3dc2007cb8a163bf0598da48361"
    "c55d39a69163fa8fd24cf5f83655d23dca3ad961c62f356208552"
    "bb9ed529077096966d670c354e4abc9804f1746c08ca237327fff"
    "fffffffffffff"
)


def galois_multiply(x: int, y: int) -> int:
    """Multiply two bytes in GF(2^8) modulo the AES polynomial."""
    product = 0
    a, b = x & 0xFF, y & 0xFF
    for _ in range(8):
        if b & 1:
            product ^= a
        high_bit = a & 0x80
        a = (a << 1) & 0xFF
        if high_bit:
            a ^= 0x1B
        b >>= 1
    return product


def mod_exp(base: int, exponent: int, modulus: int) -> int:
    """Compute base ** exponent modulo modulus; a zero exponent gives 1."""
    if exponent < 0:
        raise ValueError("exponent must not be negative")
    if modulus <= 0:
        raise ValueError("modulus must be positive")
    if exponent == 0:
        return 1
    return pow(base, exponent, modulus)


def _truncating_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def extended_gcd(x: int, y: int) -> tuple[int, int, int]:
    """Return (a, b, g) with a*x + b*y == g, the greatest common divisor."""
    old_r, r = x, y
    old_s, s = 1, 0
    old_t, t = 0, 1
    while r != 0:
        q = _truncating_div(old_r, r)
        old_r, r = r, old_r - q * r
        old_s, s = s, old_s - q * s
        old_t, t = t, old_t - q * t
    return old_s, old_t, old_r


def inv_mod(a: int, m: int) -> Optional[int]:
    """Inverse of a modulo m, or None when a and m are not coprime."""
    if m <= 0:
        raise ValueError("modulus must be positive")
    x, _, gcd = extended_gcd(a, m)
    if gcd != 1:
        return None
    return (x + m) % m


def cbrt(n: int) -> int:
    """Integer cube root by binary search, exact for perfect cubes."""
    if n < 0:
        raise ValueError("cube root of a negative number")
    if n == 0:
        return 0
    low, high = 1, n
    while low < high:
        mid = (low + high) >> 1
        cube = mid * mid * mid
        if cube == n:
            return mid
        if cube < n:
            low = mid + 1
        else:
            high = mid
    return low - 1


def _to_bytes_be(n: int) -> bytes:
    return n.to_bytes(max(1, (n.bit_length() + 7) // 8), "big")


def concat_ints(a: int, b: int) -> int:
    """Join the big-endian bytes of a and b and read them back little-endian."""
    if a < 0 or b < 0:
        raise ValueError("values must not be negative")
    return int.from_bytes(_to_bytes_be(a) + _to_bytes_be(b), "little")


@lru_cache(maxsize=None)
def nist_prime() -> int:
    """The 1536-bit MODP prime used for Diffie-Hellman."""
    return int(_NIST_PRIME_HEX, 16)


def miller_rabin(n: int, rounds: int) -> bool:
    """Probabilistic primality test with the given number of random witnesses."""
    if n < 2:
        raise ValueError("primality is only tested for integers of at least 2")
    if n in (2, 3):
        return True
    if n % 2 == 0:
        return False
    d, r = n - 1, 0
    while d % 2 == 0:
        d >>= 1
        r += 1
    for _ in range(rounds):
        a = secrets.randbelow(n - 2) + 2
        x = mod_exp(a, d, n)
        if x in (1, n - 1):
            continue
        for _ in range(r - 1):
            x = pow(x, 2, n)
            if x == 1:
                return False
            if x == n - 1:
                break
        else:
            return False
    return True


def generate_prime(bits: int, iterations: int) -> int:
    """Draw random odd numbers below 2**bits until one passes Miller-Rabin."""
    if bits < 2:
        raise ValueError("bits must be at least 2")
    while True:
        candidate = secrets.randbits(bits)
        if candidate % 2 == 0:
            candidate += 1
        if candidate < 2:
            continue
        if miller_rabin(candidate, iterations):
            return candidate