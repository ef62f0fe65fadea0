"""Diffie-Hellman key agreement deriving AES and MAC keys with SHA-256."""

from __future__ import annotations

import hashlib
import secrets
from dataclasses import dataclass

from .algebra import mod_exp


@dataclass(frozen=True)
class DiffieHellmanSession:
    """Keys a party derives from the shared secret."""

    encryption_key: bytes
    mac_key: bytes


def session_from_secret(secret: int) -> DiffieHellmanSession:
    """Split SHA-256 of the secret's big-endian bytes into two 16-byte keys."""
    if secret < 0:
        raise ValueError("the shared secret must not be negative")
    encoded = secret.to_bytes(max(1, (secret.bit_length() + 7) // 8), "big")
    digest = hashlib.sha256(encoded).digest()
    return DiffieHellmanSession(encryption_key=digest[:16], mac_key=digest[16:32])


class DiffieHellmanParty:
    """One side of the exchange, holding a random private exponent below p."""

    def __init__(self, p: int, g: int) -> None:
        if p <= 0:
            raise ValueError("p must be positive")
        self.p = p
        self._sk = secrets.randbelow(p)
        self.pk = mod_exp(g, self._sk, p)

    def create_session_with(self, other_pk: int) -> DiffieHellmanSession:
        return session_from_secret(mod_exp(other_pk, self._sk, self.p))

    @classmethod
    def from_other_party_params(
        cls, p: int, g: int, other_pk: int
    ) -> tuple["DiffieHellmanParty", DiffieHellmanSession]:
        """Join an exchange started by another party and derive the session at once."""
        party = cls(p, g)
        return party, party.create_session_with(other_pk)

    def __repr__(self) -> str:
        return f"DiffieHellmanParty(p={self.p}, pk={self.pk})"