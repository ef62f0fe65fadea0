import pytest

from cryptolab.encoding import (
    BinaryString,
    ConversionError,
    HexString,
    base64_to_bytes,
    bytes_to_base64,
    hex_char_to_binary,
    repeating_key_xor,
    xor_bytes,
)


def test_hex_to_binary_valid_char():
    assert hex_char_to_binary("0") == "0000"
    assert hex_char_to_binary("A") == "1010"
    assert hex_char_to_binary("c") == "1100"


def test_hex_to_binary_blank_char():
    assert hex_char_to_binary(" ") == ""
    assert hex_char_to_binary("\n") == ""


def test_hex_to_binary_invalid_char():
    with pytest.raises(ConversionError, match="Invalid char x"):
        hex_char_to_binary("x")


def test_valid_hex_string_to_binary_string():
    assert HexString("534").to_binary() == BinaryString("0000010100110100")


def test_invalid_hex_string():
    with pytest.raises(ConversionError, match="Invalid char x"):
        HexString("51ab7x9")


def test_valid_hex_string_starting_with_0x():
    assert HexString("0x534").to_binary() == BinaryString("0000010100110100")


def test_hex_string_normalises_case_and_whitespace():
    assert HexString("AB cd\nEF") == HexString("abcdef")
    assert str(HexString("AB cd")) == "abcd"


def test_valid_binary_string_to_bytes():
    assert BinaryString("0000010100110100").to_bytes() == bytes([5, 52])


def test_invalid_size_binary_string():
    with pytest.raises(ConversionError, match="multiple of 8"):
        BinaryString("010100110100")


def test_invalid_char_binary_string():
    with pytest.raises(ConversionError, match="Invalid char 2"):
        BinaryString("0000010200110100")


def test_bytes_to_base64():
    assert bytes_to_base64(bytes([72, 79, 76, 65, 81, 85, 69, 84, 65, 76])) == "SE9MQVFVRVRBTA=="


def test_hex_to_base64():
    hex_string = HexString(
        "49276d206b696c6c696e6720796f757220627261696e206c696b65206120706f69736f6e6f7573206d757368726f6f6d"
    )
    assert hex_string.to_base64() == "SSdtIGtpbGxpbmcgeW91ciBicmFpbiBsaWtlIGEgcG9pc29ub3VzIG11c2hyb29t"


def test_xor_two_hex():
    hex1 = HexString("1c0111001f010100061a024b53535009181c")
    hex2 = HexString("686974207468652062756c6c277320657965")
    assert hex1.xor_with(hex2) == HexString("746865206b696420646f6e277420706c6179")


def test_hex_as_text():
    hex_string = HexString("486F6C61207175652074616C2C20616775616E746520426F6361")
    assert hex_string.to_text() == "Hola que tal, aguante Boca"


def test_hex_xor_with_byte():
    assert HexString("12784ab31871").xor_with_byte(238) == HexString("fc96a45df69f")


def test_hex_xor_with_byte_rejects_non_byte():
    with pytest.raises(ValueError):
        HexString("12").xor_with_byte(256)


def test_hex_to_text_invalid_utf8():
    with pytest.raises(ConversionError, match="UTF8"):
        HexString("ff").to_text()


def test_hex_from_bytes():
    assert str(HexString.from_bytes(b"\x00\xff\x10")) == "00ff10"


def test_binary_from_bytes_and_hex():
    binary = BinaryString.from_bytes(bytes([5, 52]))
    assert str(binary) == "0000010100110100"
    assert binary.to_hex() == HexString("0534")


def test_binary_xor_with():
    result = BinaryString("11110000").xor_with(BinaryString("10101010"))
    assert result == BinaryString("01011010")


def test_binary_xor_with_byte_and_text():
    assert BinaryString.from_bytes(b"A").xor_with_byte(0x20).to_text() == "a"


@pytest.mark.parametrize("data", [b"", b"a", b"ab", b"abc", b"abcd", bytes(range(256))])
def test_base64_round_trip(data):
    assert base64_to_bytes(bytes_to_base64(data)) == data


def test_base64_skips_whitespace():
    assert base64_to_bytes("SE9M QVFV\nRVRB\tTA==") == b"HOLAQUETAL"


def test_base64_stops_at_padding():
    assert base64_to_bytes("SE9M=QVFV") == b"HOL"


def test_base64_invalid_character():
    with pytest.raises(ConversionError, match="Character 42"):
        base64_to_bytes("SE9*")


def test_xor_bytes():
    assert xor_bytes(b"\x0f\xf0", b"\xff\xff") == b"\xf0\x0f"


def test_xor_bytes_size_mismatch():
    with pytest.raises(ConversionError, match="they are 3 and 2"):
        xor_bytes(b"abc", b"ab")


def test_repeating_key_xor():
    expected = HexString(
        "0b3637272a2b2e63622c2e69692a23693a2a3c6324202d623d63343c2a26226324272765272a282b2f20430a652e2c652a3124333a653e2b2027630c692b20283165286326302e27282f"
    ).to_bytes()
    result = repeating_key_xor(
        "Burning 'em, if you ain't quick and nimble\nI go crazy when I hear a cymbal", "ICE"
    )
    assert result == expected


def test_repeating_key_xor_is_involution():
    text = b"some plain bytes"
    assert repeating_key_xor(repeating_key_xor(text, b"key"), b"key") == text


def test_repeating_key_xor_empty_key():
    with pytest.raises(ValueError):
        repeating_key_xor(b"abc", b"")