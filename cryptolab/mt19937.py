"""The MT19937 Mersenne Twister generator and its tempering functions."""

from __future__ import annotations

from typing import Iterable

W = 32
N = 624
M = 397
A = 0x9908B0DF
U = 11
S = 7
T = 15
B = 0x9D2C5680
C = 0xEFC60000
L = 18
F = 1812433253
UMASK = 1 << 31
LMASK = (1 << 31) - 1

_MASK32 = 0xFFFFFFFF


def _check_word(value: int) -> int:
    if not 0 <= value <= _MASK32:
        raise ValueError(f"{value} is not a 32-bit unsigned value")
    return value


def temper(y: int) -> int:
    """Apply the MT19937 output tempering to a state word."""
    _check_word(y)
    y ^= y >> U
    y ^= (y << S) & B
    y ^= (y << T) & C
    y ^= y >> L
    return y & _MASK32


def untemper(y: int) -> int:
    """Invert ``temper``, recovering the state word behind an output."""
    _check_word(y)
    y ^= y >> L
    y ^= (y << T) & C
    for step in range(1, 5):
        y ^= (y << S) & B & ((0x7F << (S * step)) & _MASK32)
    for _ in range(3):
        y ^= y >> U
    return y & _MASK32


class MT19937:
    """32-bit Mersenne Twister; the first outputs are the tempered seed states."""

    def __init__(self, seed: int) -> None:
        _check_word(seed)
        states = [seed]
        for i in range(1, N):
            prev = states[-1]
            states.append(((prev ^ (prev >> (W - 2))) * F + i) & _MASK32)
        self._states = states
        self._index = 0

    @classmethod
    def from_states(cls, states: Iterable[int]) -> "MT19937":
        """Build a generator whose next outputs temper the given state words."""
        words = [_check_word(word) for word in states]
        if len(words) != N:
            raise ValueError(f"expected {N} state words, got {len(words)}")
        rng = cls.__new__(cls)
        rng._states = words
        rng._index = 0
        return rng

    def extract_number(self) -> int:
        if self._index == N:
            self._twist()
        y = self._states[self._index]
        self._index += 1
        return temper(y)

    def _twist(self) -> None:
        states = self._states
        for i in range(N):
            x = (states[i] & UMASK) | (states[(i + 1) % N] & LMASK)
            x_a = x >> 1
            if x & 1:
                x_a ^= A
            states[i] = states[(i + M) % N] ^ x_a
        self._index = 0