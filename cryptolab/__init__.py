"""Classic cryptographic primitives (SHA-1, MT19937, RSA, DSA, Diffie-Hellman) and attacks on their misuse."""

__version__ = "0.1.0"