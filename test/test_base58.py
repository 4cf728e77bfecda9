import logging

import pytest
from hypothesis import assume, given, strategies as st

import radixcodec
from radixcodec import (
    base58_to_ascii,
    base58_to_hex,
    base58_to_text,
    ascii_to_base58,
    count_leading,
    decode_base16,
    decode_base58,
    encode_base16,
    encode_base58,
    hex_to_base58,
    text_to_base58,
)
from radixcodec.alphabet import BASE58_SYMBOLS
from radixcodec.errors import (
    MalformedHexError,
    MalformedInputError,
    UnknownCharacterError,
)

# Test vectors from https://digitalbazaar.github.io/base58-spec/
VECTORS = [
    (b"Hello World!", "2NEpo7TZRRrLZSi2U"),
    (
        b"The quick brown fox jumps over the lazy dog.",
        "USm3fpXnKG5EUBx2ndxBDMPVciP5hGey2Jh4NDv6gmeo1LkMeiKrLJUUBk6Z",
    ),
    (b"\0\0\0\0", "1111"),
    (b"", ""),
]

HEX_VECTORS = [
    ("0000287fb4cd", "11233QC4"),
    ("0000000000000000", "11111111"),
]


@pytest.mark.parametrize(("data", "text"), VECTORS)
def test_vectors(data, text):
    assert encode_base58(data) == text
    assert decode_base58(text) == data


@pytest.mark.parametrize(("hex_text", "text"), HEX_VECTORS)
def test_hex_vectors(hex_text, text):
    assert hex_to_base58(hex_text) == text
    assert base58_to_hex(text) == hex_text


def test_hex_upper_case():
    assert hex_to_base58("0000287FB4CD") == "11233QC4"


def test_hex_odd_leading_zero():
    # "0a" has no whole zero byte, the single "0" is part of the number
    # and still counts as one leading zero digit when converted.
    assert hex_to_base58("0a") == "1B"
    assert hex_to_base58("000a") == "11B"
    assert base58_to_hex("1B") == "00a"


def test_hex_malformed():
    with pytest.raises(MalformedHexError):
        hex_to_base58("abc")

    # Odd lengths are reported as bad characters too
    with pytest.raises(UnknownCharacterError):
        hex_to_base58("0")

    with pytest.raises(UnknownCharacterError) as e:
        hex_to_base58("00zz")
    assert e.value.character == "z"
    assert e.value.alphabet == "hex"


def test_decode_unknown_character():
    for text in ["0", "O", "I", "l", "2NEpo7TZRRrLZSi2U!"]:
        with pytest.raises(UnknownCharacterError):
            decode_base58(text)

    with pytest.raises(UnknownCharacterError):
        base58_to_hex("11O")


def test_ascii():
    assert ascii_to_base58("Hello World!") == "2NEpo7TZRRrLZSi2U"
    assert base58_to_ascii("2NEpo7TZRRrLZSi2U") == "Hello World!"
    assert ascii_to_base58("\0\0\0\0") == "1111"

    with pytest.raises(UnknownCharacterError):
        ascii_to_base58("€")


def test_text():
    raw = "\0\0Foo © bar 𝌆 baz ☃ qux 😍 你好"
    text = "11nzMmRFLZNVUS1TWzUWYfXZVuS7UfXuHffDBW37qWUikSX33xH7RjA"

    assert text_to_base58(raw) == text
    assert base58_to_text(text) == raw


def test_text_not_utf8():
    with pytest.raises(MalformedInputError):
        base58_to_text(encode_base58(b"\xff"))


def test_base16():
    assert encode_base16(b"\x00\x0a\xff") == "000aff"
    assert encode_base16(b"") == ""
    assert decode_base16("000AFF") == b"\x00\x0a\xff"

    with pytest.raises(MalformedHexError):
        decode_base16("abc")

    with pytest.raises(UnknownCharacterError):
        decode_base16("0x")


def test_codec_instance(codec, caplog):
    with caplog.at_level(logging.DEBUG, logger="radixcodec"):
        assert codec.from_hex("0000287fb4cd") == "11233QC4"
        assert codec.to_hex("11233QC4") == "0000287fb4cd"

    assert "2 leading zero bytes in hex" in caplog.text
    assert "2 leading zero bytes in base58" in caplog.text


def test_codec_defaults():
    codec = radixcodec.Base58Codec()

    assert isinstance(codec.converter, radixcodec.RadixConverter)
    assert codec.log is codec.converter.log
    assert codec.encode(b"\0") == "1"


@given(st.binary())
def test_round_trip_bytes(data):
    assert decode_base58(encode_base58(data)) == data


@given(st.text(alphabet=BASE58_SYMBOLS))
def test_round_trip_text(text):
    assert encode_base58(decode_base58(text)) == text


@given(st.integers(min_value=0, max_value=32), st.binary())
def test_leading_zero_bytes(zeros, data):
    assume(not data.startswith(b"\0"))

    text = encode_base58(bytes(zeros) + data)

    assert text[:zeros] == "1" * zeros
    assert count_leading(text, "1") == zeros


@given(st.binary())
def test_round_trip_hex(data):
    hex_text = encode_base16(data)
    assume(count_leading(hex_text, "0") % 2 == 0)

    assert base58_to_hex(hex_to_base58(hex_text)) == hex_text
    assert hex_to_base58(hex_text) == encode_base58(data)


@given(st.text())
def test_round_trip_unicode(raw):
    assert base58_to_text(text_to_base58(raw)) == raw
