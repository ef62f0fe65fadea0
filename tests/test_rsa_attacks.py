import pytest

from cryptolab.rsa_attacks import (
    DecryptOnceServer,
    ParityOracle,
    SignerVerifier,
    crt_cube_root,
    forge_signature,
    parity_attack,
    unpadded_message_recovery,
)
from cryptolab.sha1 import sha1

MODULI = [1000000007, 998244353, 1000000009]


@pytest.fixture(scope="module")
def signer():
    return SignerVerifier(512)


@pytest.fixture(scope="module")
def parity_oracle():
    return ParityOracle(256)


def test_crt_cube_root_recovers_message():
    m = 123456
    ciphertexts = [pow(m, 3, n) for n in MODULI]
    assert crt_cube_root(ciphertexts, MODULI) == m


def test_crt_cube_root_accepts_bytes():
    m = 98765
    ciphertexts = [pow(m, 3, n).to_bytes(8, "big") for n in MODULI]
    assert crt_cube_root(ciphertexts, MODULI) == m


def test_crt_cube_root_rejects_shared_factors():
    with pytest.raises(ValueError):
        crt_cube_root([1, 2, 3], [15, 21, 22])


def test_crt_cube_root_rejects_length_mismatch():
    with pytest.raises(ValueError):
        crt_cube_root([1, 2], MODULI)


def test_decrypt_once_server_refuses_replay():
    server = DecryptOnceServer(128)
    ciphertext = server.encrypt_with_timestamp(b"hello")
    plaintext = server.decrypt(ciphertext)
    assert plaintext.startswith(b"hello\n{\n  time: ")
    assert plaintext.endswith(b",\n  social: '[national-id]',\n}")
    with pytest.raises(ValueError):
        server.decrypt(ciphertext)


def test_unpadded_message_recovery():
    server = DecryptOnceServer(128)
    ciphertext = server.encrypt_with_timestamp(b"hello")
    expected = server.decrypt(ciphertext)
    assert unpadded_message_recovery(server, ciphertext) == expected


def test_unpadded_message_recovery_rejects_partial_block():
    server = DecryptOnceServer(128)
    with pytest.raises(ValueError):
        unpadded_message_recovery(server, b"\x01\x02\x03")


def test_sign_and_verify(signer):
    message = b"hi mom"
    signature = signer.sign(sha1(message))
    assert signer.public_key[0] == 3
    assert signer.verify(message, signature)
    assert not signer.verify(b"hi dad", signature)


def test_forged_signature_verifies(signer):
    message = b"hi mom"
    _, n = signer.public_key
    forged = forge_signature(message, n)
    assert signer.verify(message, forged)
    assert not signer.verify(b"hi dad", forged)


def test_forge_signature_needs_room():
    with pytest.raises(ValueError):
        forge_signature(b"hi mom", 2**100)


def test_parity_oracle_reports_last_bit(parity_oracle):
    assert parity_oracle.is_plaintext_odd(parity_oracle.encrypt(b"A"))
    assert not parity_oracle.is_plaintext_odd(parity_oracle.encrypt(b"B"))


def test_parity_attack_decrypts(parity_oracle):
    message = b"That's why I found you"
    ciphertext = parity_oracle.encrypt(message)
    assert parity_attack(ciphertext, parity_oracle.public_key, parity_oracle) == message


def test_parity_attack_rejects_wrong_length(parity_oracle):
    with pytest.raises(ValueError):
        parity_attack(b"\x00\x01", parity_oracle.public_key, parity_oracle)