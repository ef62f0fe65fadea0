# cryptolab

Pure-Python implementations of classic cryptographic building blocks, together
with the attacks that break them when they are misused. It is meant for studying
how the primitives work and how they fail. It is not meant to protect real data.
The package has no dependencies outside the standard library.

## Modules

- `cryptolab.encoding`: `HexString` and `BinaryString` (validated text forms
  of byte strings that convert to bytes, Base64 and text, and can be XORed),
  `hex_char_to_binary`, `bytes_to_base64`, `base64_to_bytes` (skips ASCII
  whitespace and stops at the first `=`), `xor_bytes` for equal-length inputs
  and `repeating_key_xor`. Conversion failures raise `ConversionError`.
- `cryptolab.algebra`: `galois_multiply` in GF(2^8), `mod_exp`,
  `extended_gcd`, `inv_mod` (returns `None` when there is no inverse), the
  integer cube root `cbrt`, `concat_ints`, `nist_prime` (the 1536-bit MODP
  prime), `miller_rabin` and `generate_prime`.
- `cryptolab.sha1`: the incremental hasher `Sha1` (with `update`, `finalize`,
  `reset` and `Sha1.from_state` to resume from a digest), the one-shot `sha1`,
  the secret-prefix MAC `Sha1Mac` and `Sha1HMac`.
- `cryptolab.mt19937`: the `MT19937` generator, `MT19937.from_states`, and
  `temper` / `untemper`.
- `cryptolab.mt_cipher`: `MTStreamCipher`, an XOR stream cipher keyed by a
  16-bit seed; `recover_seed` brute-forces that seed; `password_reset_token`
  and `is_recent_mt_token` (tokens up to 600 seconds old by default) build and
  check time-seeded tokens; `recover_time_seed` finds a recent Unix-time seed
  from a generator's first output.
- `cryptolab.length_extension`: `md_padding`, `extend_mac` and
  `forge_with_unknown_key_length`, a SHA-1 length-extension attack on `Sha1Mac`.
- `cryptolab.rsa`: `generate_keys` (e = 65537), `encrypt_with_key` and
  `decrypt_with_key`, which pad every chunk with `pkcs1_pad` / `pkcs1_unpad`;
  key pairs are `RSAKeys` with `sk = (d, n)` and `pk = (e, n)`.
- `cryptolab.dh`: `DiffieHellmanParty` and `DiffieHellmanSession`; the shared
  secret is hashed with SHA-256 into an encryption key and a MAC key
  (`session_from_secret`).
- `cryptolab.dsa`: `DSA` over SHA-1, with `DSA.with_default_params`,
  `generate_keys`, `sign` and `verify`.
- `cryptolab.rsa_attacks`: `crt_cube_root` (the e = 3 broadcast attack),
  `DecryptOnceServer` with `unpadded_message_recovery`, `SignerVerifier` (e = 3
  with a lax verifier) with `forge_signature`, and `ParityOracle` with
  `parity_attack` on a single ciphertext block.
- `cryptolab.dsa_attacks`: `private_key_from_nonce`, `brute_force_private_key`
  over small nonces, `FixedNonceDSA` with `recover_repeated_nonce`, and
  `forge_magic_signature` for a generator equal to 1 mod p.

## Examples

Hash a message and authenticate it:

```python
from cryptolab.sha1 import sha1, Sha1HMac

digest = sha1(b"abc").hex()  # "a9993e364706816aba3e25717850c26c9cd0d89d"
mac = Sha1HMac(b"secret")
tag = mac.authenticate(b"message")
assert mac.verify(b"message", tag)
```

Forge a secret-prefix MAC by length extension:

```python
from cryptolab.sha1 import Sha1Mac
from cryptolab.length_extension import forge_with_unknown_key_length

mac = Sha1Mac(b"secret-of-20-bytes!!")
forgery = forge_with_unknown_key_length(mac, b"user=guest")
assert forgery is not None and forgery.message.endswith(b";admin=true")
assert mac.verify(forgery.message, forgery.digest)
```

Clone a Mersenne Twister from 624 of its outputs:

```python
from cryptolab.mt19937 import MT19937, untemper

rng = MT19937(5489)
outputs = [rng.extract_number() for _ in range(624)]
clone = MT19937.from_states([untemper(y) for y in outputs])
assert [clone.extract_number() for _ in range(624)] == outputs
assert clone.extract_number() == rng.extract_number()
```

Encrypt with RSA and sign with DSA:

```python
from cryptolab.rsa import generate_keys, encrypt_with_key, decrypt_with_key
from cryptolab.dsa import DSA

keys = generate_keys(512)
ciphertext = encrypt_with_key(keys.pk, b"hello")
assert decrypt_with_key(keys.sk, ciphertext) == b"hello"

dsa = DSA.with_default_params()
x, y = dsa.generate_keys()
assert dsa.verify(y, b"hello", dsa.sign(x, b"hello"))
```

## What it does not do

- There is no block cipher: the package has no AES and no ECB, CBC or CTR
  modes, and so no attacks on them.
- There are no frequency-analysis tools for breaking XOR ciphers; only the
  XOR operations themselves are in `cryptolab.encoding`.
- It is a library only. There is no command-line program and no network
  service; the "servers" and "oracles" in the attack modules are in-process
  objects.

## Tests

```
pip install -e .[test]
pytest
```