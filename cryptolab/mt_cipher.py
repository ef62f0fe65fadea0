"""A stream cipher keyed by a 16-bit MT19937 seed, and attacks on time seeds."""

from __future__ import annotations

import time
from typing import Iterator, Optional, Union

from .mt19937 import F, MT19937, N, W, temper

BytesLike = Union[bytes, bytearray, memoryview, str]

_MASK32 = 0xFFFFFFFF
_MASK16 = 0xFFFF
TOKEN_MAX_AGE = 600


def _as_bytes(data: BytesLike) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def _now(now: Optional[int]) -> int:
    return int(time.time()) if now is None else now


def _keystream(seed: int) -> Iterator[int]:
    """Low bytes of the generator's outputs, deriving seed states only as needed."""
    states = []
    state = seed
    for i in range(N):
        if i:
            state = ((state ^ (state >> (W - 2))) * F + i) & _MASK32
        states.append(state)
        yield temper(state) & 0xFF
    rng = MT19937.from_states(states)
    for _ in range(N):
        rng.extract_number()
    while True:
        yield rng.extract_number() & 0xFF


class MTStreamCipher:
    """XOR stream cipher whose keystream is the low byte of each MT19937 output."""

    def __init__(self, seed: int) -> None:
        if not 0 <= seed <= _MASK16:
            raise ValueError(f"{seed} is not a 16-bit seed")
        self.seed = seed

    def apply(self, data: BytesLike) -> bytes:
        """Encrypt or decrypt: the same operation both ways."""
        return bytes(b ^ k for b, k in zip(_as_bytes(data), _keystream(self.seed)))


def recover_seed(cipher: MTStreamCipher, ciphertext: BytesLike) -> Optional[int]:
    """Brute-force the 16-bit seed that maps the plaintext to this ciphertext."""
    cipher_bytes = _as_bytes(ciphertext)
    if not cipher_bytes:
        raise ValueError("ciphertext must not be empty")
    plaintext = cipher.apply(cipher_bytes)
    for seed in range(_MASK16 + 1):
        if all(
            p ^ k == c for p, c, k in zip(plaintext, cipher_bytes, _keystream(seed))
        ):
            return seed
    return None


def password_reset_token(password: BytesLike, now: Optional[int] = None) -> bytes:
    """Encrypt the password with a cipher seeded by the current Unix time."""
    return MTStreamCipher(_now(now) & _MASK16).apply(password)


def is_recent_mt_token(
    password: BytesLike,
    token: BytesLike,
    now: Optional[int] = None,
    max_age: int = TOKEN_MAX_AGE,
) -> bool:
    """True if the token came from a time seed at most ``max_age`` seconds old."""
    data, token_bytes, current = _as_bytes(password), _as_bytes(token), _now(now)
    for age in range(max_age + 1):
        moment = current - age
        if moment < 0:
            break
        if MTStreamCipher(moment & _MASK16).apply(data) == token_bytes:
            return True
    return False


def recover_time_seed(
    output: int,
    now: Optional[int] = None,
    min_age: int = 10,
    max_age: int = 82,
) -> Optional[int]:
    """Find the recent Unix-time seed whose first MT19937 output is ``output``."""
    current = _now(now)
    for age in range(min_age, max_age + 1):
        seed = (current - age) & _MASK32
        if MT19937(seed).extract_number() == output:
            return seed
    return None