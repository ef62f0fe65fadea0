"""SHA-1 length-extension forgery against the secret-prefix MAC."""

from __future__ import annotations

import struct
from typing import NamedTuple, Optional, Union

from .sha1 import SHA1_BLOCK_SIZE, SHA1_DIGEST_SIZE, Sha1, Sha1Mac

BytesLike = Union[bytes, bytearray, memoryview, str]

_MASK64 = 0xFFFFFFFFFFFFFFFF
ADMIN_SUFFIX = b";admin=true"


def _as_bytes(data: BytesLike) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


class Forgery(NamedTuple):
    """A forged message and its MAC, with the key length that produced them."""

    key_len: int
    message: bytes
    digest: bytes


def md_padding(key_len: int, message: BytesLike) -> bytes:
    """The message followed by the SHA-1 padding a key of key_len bytes would give it."""
    if key_len < 0:
        raise ValueError("key length must not be negative")
    padded = bytearray(_as_bytes(message))
    bit_length = ((key_len + len(padded)) * 8) & _MASK64
    padded.append(0x80)
    padded.extend(bytes((56 - (key_len + len(padded))) % SHA1_BLOCK_SIZE))
    padded.extend(bit_length.to_bytes(8, "big"))
    return bytes(padded)


def extend_mac(
    message: BytesLike, digest: BytesLike, key_len: int, suffix: BytesLike
) -> tuple[bytes, bytes]:
    """Append suffix to a MAC'd message and compute its MAC without the key.

    Returns the forged message (message, glue padding, suffix) and its digest.
    """
    digest_bytes = _as_bytes(digest)
    if len(digest_bytes) != SHA1_DIGEST_SIZE:
        raise ValueError(f"a SHA-1 digest has {SHA1_DIGEST_SIZE} bytes")
    padded = md_padding(key_len, message)
    extra = _as_bytes(suffix)
    hasher = Sha1.from_state(struct.unpack(">5I", digest_bytes), key_len + len(padded))
    hasher.update(extra)
    return padded + extra, hasher.finalize()


def forge_with_unknown_key_length(
    mac: Sha1Mac,
    message: BytesLike,
    suffix: BytesLike = ADMIN_SUFFIX,
    min_len: int = 16,
    max_len: int = 32,
) -> Optional[Forgery]:
    """Try key lengths min_len..max_len (inclusive) until a forgery verifies."""
    digest = mac.authenticate(message)
    for key_len in range(min_len, max_len + 1):
        forged, forged_digest = extend_mac(message, digest, key_len, suffix)
        if mac.verify(forged, forged_digest):
            return Forgery(key_len, forged, forged_digest)
    return None