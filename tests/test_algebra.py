import math

import pytest

from cryptolab.algebra import (
    cbrt,
    concat_ints,
    extended_gcd,
    galois_multiply,
    generate_prime,
    inv_mod,
    miller_rabin,
    mod_exp,
    nist_prime,
)


def test_mod_exp():
    assert mod_exp(5, 1000, 37) == 7


def test_mod_exp_zero_exponent_is_one():
    assert mod_exp(12, 0, 1) == 1


def test_mod_exp_rejects_negative_exponent():
    with pytest.raises(ValueError):
        mod_exp(2, -1, 7)


def test_inv_mod_simple():
    assert inv_mod(3, 7) == 5


def test_inv_mod_no_inverse():
    assert inv_mod(2, 4) is None


def test_inv_mod_large_prime():
    assert inv_mod(123456789, 1000000007) == 18633540


@pytest.mark.parametrize("a, m", [(17, 3120), (65537, 1000000006), (10, 21)])
def test_inv_mod_is_inverse(a, m):
    inverse = inv_mod(a, m)
    assert 0 <= inverse < m
    assert (a * inverse) % m == 1


@pytest.mark.parametrize("x, y", [(240, 46), (17, 5), (0, 9), (123456, 7890)])
def test_extended_gcd_bezout(x, y):
    a, b, g = extended_gcd(x, y)
    assert g == math.gcd(x, y)
    assert a * x + b * y == g


def test_cube_root():
    assert cbrt(1000000000000000000000000000000000) == 100000000000


def test_cube_root_of_cube():
    n = 987654321
    assert cbrt(n ** 3) == n


def test_cube_root_zero():
    assert cbrt(0) == 0


def test_cube_root_non_cube_is_floor():
    n = 12345 ** 3 + 7
    assert cbrt(n) == 12345


def test_galois_multiply_known_products():
    assert galois_multiply(0x57, 0x83) == 0xC1
    assert galois_multiply(0x57, 0x13) == 0xFE


def test_galois_multiply_identity_and_commutative():
    for value in (0x00, 0x01, 0x53, 0xCA, 0xFF):
        assert galois_multiply(value, 1) == value
        assert galois_multiply(value, 0x1B) == galois_multiply(0x1B, value)


def test_concat_ints():
    assert concat_ints(1, 2) == 0x0201
    assert concat_ints(0x01, 0x0203) == 0x030201


def test_nist_prime_shape():
    p = nist_prime()
    assert p.bit_length() == 1536
    assert format(p, "x").startswith("f" * 16)
    assert format(p, "x").endswith("f" * 16)


def test_nist_prime_is_probably_prime():
    assert miller_rabin(nist_prime(), 5)


def test_miller_rabin_prime():
    assert miller_rabin(7, 3)


def test_miller_rabin_composite():
    assert not miller_rabin(15, 3)


def test_miller_rabin_small_primes():
    assert miller_rabin(2, 1)
    assert miller_rabin(3, 1)


def test_miller_rabin_rejects_values_below_two():
    with pytest.raises(ValueError):
        miller_rabin(1, 3)


def test_generate_prime():
    prime = generate_prime(256, 15)
    assert miller_rabin(prime, 15)
    assert prime.bit_length() <= 256
    assert prime % 2 == 1


def test_generate_prime_rejects_tiny_sizes():
    with pytest.raises(ValueError):
        generate_prime(1, 5)