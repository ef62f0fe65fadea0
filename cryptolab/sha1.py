"""SHA-1 with resumable state, and the secret-prefix MAC and HMAC built on it."""

from __future__ import annotations

import struct
from typing import Iterable, Union

BytesLike = Union[bytes, bytearray, memoryview, str]

SHA1_BLOCK_SIZE = 64
SHA1_DIGEST_SIZE = 20

_INITIAL_STATE = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476, 0xC3D2E1F0)
_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF


def _as_bytes(data: BytesLike) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def _rotate_left(value: int, amount: int) -> int:
    return ((value << amount) | (value >> (32 - amount))) & _MASK32


def _compress(state: tuple[int, ...], block: bytes) -> tuple[int, ...]:
    words = list(struct.unpack(">16I", block))
    for i in range(16, 80):
        words.append(
            _rotate_left(words[i - 3] ^ words[i - 8] ^ words[i - 14] ^ words[i - 16], 1)
        )
    a, b, c, d, e = state
    for i, word in enumerate(words):
        if i < 20:
            f, k = (b & c) | (~b & d), 0x5A827999
        elif i < 40:
            f, k = b ^ c ^ d, 0x6ED9EBA1
        elif i < 60:
            f, k = (b & c) | (b & d) | (c & d), 0x8F1BBCDC
        else:
            f, k = b ^ c ^ d, 0xCA62C1D6
        temp = (_rotate_left(a, 5) + f + e + k + word) & _MASK32
        a, b, c, d, e = temp, a, _rotate_left(b, 30), c, d
    return tuple((x + y) & _MASK32 for x, y in zip(state, (a, b, c, d, e)))


class Sha1:
    """Incremental SHA-1 hasher."""

    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        """Return to the initial state with no data processed."""
        self._state: tuple[int, ...] = _INITIAL_STATE
        self._buffer = bytearray()
        self._length = 0

    @classmethod
    def from_state(cls, state: Iterable[int], length: int) -> "Sha1":
        """Resume hashing from five state words after ``length`` bytes of input."""
        words = tuple(state)
        if len(words) != 5 or any(not 0 <= w <= _MASK32 for w in words):
            raise ValueError("state must be five 32-bit words")
        if length < 0:
            raise ValueError("length must not be negative")
        hasher = cls()
        hasher._state = words
        hasher._length = length
        return hasher

    def update(self, data: BytesLike) -> None:
        raw = _as_bytes(data)
        self._buffer.extend(raw)
        self._length += len(raw)
        while len(self._buffer) >= SHA1_BLOCK_SIZE:
            block = bytes(self._buffer[:SHA1_BLOCK_SIZE])
            del self._buffer[:SHA1_BLOCK_SIZE]
            self._state = _compress(self._state, block)

    def finalize(self) -> bytes:
        """Return the 20-byte digest of everything hashed so far."""
        tail = bytearray(self._buffer)
        tail.append(0x80)
        tail.extend(b"\x00" * ((56 - len(tail)) % SHA1_BLOCK_SIZE))
        tail.extend(((self._length * 8) & _MASK64).to_bytes(8, "big"))
        state = self._state
        for start in range(0, len(tail), SHA1_BLOCK_SIZE):
            state = _compress(state, bytes(tail[start:start + SHA1_BLOCK_SIZE]))
        return struct.pack(">5I", *state)


def sha1(data: BytesLike) -> bytes:
    """SHA-1 digest of the data."""
    hasher = Sha1()
    hasher.update(data)
    return hasher.finalize()


class Sha1Mac:
    """Secret-prefix MAC: SHA1(key || message)."""

    def __init__(self, key: BytesLike) -> None:
        self._key = _as_bytes(key)

    def authenticate(self, message: BytesLike) -> bytes:
        hasher = Sha1()
        hasher.update(self._key)
        hasher.update(message)
        return hasher.finalize()

    def verify(self, message: BytesLike, expected: BytesLike) -> bool:
        return self.authenticate(message) == _as_bytes(expected)


class Sha1HMac:
    """HMAC with SHA-1."""

    def __init__(self, key: BytesLike) -> None:
        self._key = _as_bytes(key)

    def _block_key(self) -> bytes:
        key = sha1(self._key) if len(self._key) > SHA1_BLOCK_SIZE else self._key
        return key.ljust(SHA1_BLOCK_SIZE, b"\x00")

    def authenticate(self, message: BytesLike) -> bytes:
        block_key = self._block_key()
        inner_pad = bytes(b ^ 0x36 for b in block_key)
        outer_pad = bytes(b ^ 0x5C for b in block_key)
        inner = sha1(inner_pad + _as_bytes(message))
        return sha1(outer_pad + inner)

    def verify(self, message: BytesLike, expected: BytesLike) -> bool:
        return self.authenticate(message) == _as_bytes(expected)