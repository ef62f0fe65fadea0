"""Hex, binary and Base64 conversions, plus XOR helpers for byte strings."""

from __future__ import annotations

import base64
from itertools import cycle
from typing import Union

BytesLike = Union[bytes, bytearray, memoryview, str]

_BASE64_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
_BASE64_INDEX = {ord(ch): value for value, ch in enumerate(_BASE64_ALPHABET)}
_ASCII_WHITESPACE = frozenset(b" \t\n\r\x0c")
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_HEX_SKIPPED = frozenset(" \n\t")


class ConversionError(ValueError):
    """Raised when data cannot be converted between representations."""


def _as_bytes(data: BytesLike) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def _check_byte(byte: int) -> int:
    if not 0 <= byte <= 0xFF:
        raise ValueError(f"{byte} is not a byte value")
    return byte


def hex_char_to_binary(c: str) -> str:
    """Return the four-bit binary text of a hex digit; blanks map to ''."""
    if c in _HEX_SKIPPED:
        return ""
    if c in _HEX_DIGITS:
        return format(int(c, 16), "04b")
    raise ConversionError(f"Invalid char {c} processed when reading a hex string")


def bytes_to_base64(data: BytesLike) -> str:
    """Encode bytes as padded standard Base64."""
    return base64.b64encode(_as_bytes(data)).decode("ascii")


def base64_to_bytes(text: BytesLike) -> bytes:
    """Decode Base64, skipping ASCII whitespace and stopping at the first '='."""
    decoded = bytearray()
    buffer = 0
    bits_collected = 0
    for byte in _as_bytes(text):
        if byte == ord("="):
            break
        if byte in _ASCII_WHITESPACE:
            continue
        value = _BASE64_INDEX.get(byte)
        if value is None:
            raise ConversionError(f"Character {byte} is invalid in Base64.")
        buffer = ((buffer << 6) | value) & 0xFFFFFFFF
        bits_collected += 6
        while bits_collected >= 8:
            bits_collected -= 8
            decoded.append((buffer >> bits_collected) & 0xFF)
    return bytes(decoded)


def xor_bytes(a: BytesLike, b: BytesLike) -> bytes:
    """XOR two byte strings of equal length."""
    first, second = _as_bytes(a), _as_bytes(b)
    if len(first) != len(second):
        raise ConversionError(
            f"Sizes of strings must be equal, they are {len(first)} and {len(second)}"
        )
    return bytes(x ^ y for x, y in zip(first, second))


def repeating_key_xor(text: BytesLike, key: BytesLike) -> bytes:
    """XOR the text with the key repeated over its whole length."""
    key_bytes = _as_bytes(key)
    if not key_bytes:
        raise ValueError("key must not be empty")
    return bytes(x ^ k for x, k in zip(_as_bytes(text), cycle(key_bytes)))


class HexString:
    """A validated, lower-case hexadecimal string."""

    __slots__ = ("_text",)

    def __init__(self, text: str) -> None:
        if text.startswith("0x"):
            text = text[2:]
        text = "".join(ch for ch in text.lower() if not ch.isspace())
        invalid = next((ch for ch in text if ch not in _HEX_DIGITS), None)
        if invalid is not None:
            raise ConversionError(
                f"Invalid char {invalid} processed when reading a hex string"
            )
        self._text = text

    @classmethod
    def from_bytes(cls, data: BytesLike) -> "HexString":
        """Build the hex form of a byte string."""
        return BinaryString.from_bytes(data).to_hex()

    def to_binary(self) -> "BinaryString":
        bits = "".join(hex_char_to_binary(ch) for ch in self._text)
        if len(self._text) % 2:
            bits = "0000" + bits
        return BinaryString(bits)

    def to_bytes(self) -> bytes:
        return self.to_binary().to_bytes()

    def to_base64(self) -> str:
        return self.to_binary().to_base64()

    def xor_with(self, other: "HexString") -> "HexString":
        return HexString.from_bytes(xor_bytes(self.to_bytes(), other.to_bytes()))

    def xor_with_byte(self, byte: int) -> "HexString":
        _check_byte(byte)
        return HexString.from_bytes(bytes(b ^ byte for b in self.to_bytes()))

    def to_text(self) -> str:
        return self.to_binary().to_text()

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"HexString({self._text!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HexString):
            return NotImplemented
        return self._text == other._text

    def __hash__(self) -> int:
        return hash(("hex", self._text))


class BinaryString:
    """A validated string of '0' and '1' whose length is a multiple of eight."""

    __slots__ = ("_text",)

    def __init__(self, text: str) -> None:
        if len(text.encode("utf-8")) % 8:
            raise ConversionError("Size of binary string must be a multiple of 8")
        invalid = next((ch for ch in text if ch not in "01"), None)
        if invalid is not None:
            raise ConversionError(
                f"Invalid char {invalid} processed when reading a binary string"
            )
        self._text = text

    @classmethod
    def from_bytes(cls, data: BytesLike) -> "BinaryString":
        """Build the eight-bits-per-byte form of a byte string."""
        return cls("".join(format(byte, "08b") for byte in _as_bytes(data)))

    def to_bytes(self) -> bytes:
        return bytes(
            int(self._text[start:start + 8], 2) for start in range(0, len(self._text), 8)
        )

    def to_hex(self) -> HexString:
        return HexString(self.to_bytes().hex())

    def to_base64(self) -> str:
        return bytes_to_base64(self.to_bytes())

    def xor_with(self, other: "BinaryString") -> "BinaryString":
        return BinaryString.from_bytes(xor_bytes(self.to_bytes(), other.to_bytes()))

    def xor_with_byte(self, byte: int) -> "BinaryString":
        _check_byte(byte)
        return BinaryString.from_bytes(bytes(b ^ byte for b in self.to_bytes()))

    def to_text(self) -> str:
        try:
            return self.to_bytes().decode("utf-8")
        except UnicodeDecodeError as err:
            raise ConversionError(f"UTF8 conversion error {err}.") from err

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"BinaryString({self._text!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BinaryString):
            return NotImplemented
        return self._text == other._text

    def __hash__(self) -> int:
        return hash(("bin", self._text))