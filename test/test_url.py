import pytest
from hypothesis import given, strategies as st

from radixcodec import url
from radixcodec.errors import MalformedInputError, UnknownCharacterError

# https://www.urlencoder.org/
VECTORS = [
    (
        "http://example.com/path/to/file.html?param=value&param2=value2"
        "&param3=Foo © bar 𝌆 baz ☃ qux 😍 你好",
        "http%3A%2F%2Fexample.com%2Fpath%2Fto%2Ffile.html%3Fparam%3Dvalue"
        "%26param2%3Dvalue2%26param3%3DFoo%20%C2%A9%20bar%20%F0%9D%8C%86%20baz"
        "%20%E2%98%83%20qux%20%F0%9F%98%8D%20%E4%BD%A0%E5%A5%BD",
    ),
    (
        "http://www.baeldung.com?key1=value 1&key2=value@!$2&key3=value%3",
        "http%3A%2F%2Fwww.baeldung.com%3Fkey1%3Dvalue%201%26key2%3Dvalue%40"
        "%21%242%26key3%3Dvalue%253",
    ),
]


@pytest.mark.parametrize(("raw", "encoded"), VECTORS)
def test_vectors(raw, encoded):
    assert url.encode(raw) == encoded
    assert url.decode(encoded) == raw


def test_unreserved_characters_are_kept():
    assert url.encode("AZaz09-_.~'") == "AZaz09-_.~'"


def test_decode_lower_case_escapes():
    assert url.decode("%c2%a9%20x") == "© x"


def test_decode_malformed():
    with pytest.raises(MalformedInputError):
        url.decode("abc%4")

    with pytest.raises(MalformedInputError):
        url.decode("%")

    # Escaped bytes must be whole UTF-8 sequences
    with pytest.raises(MalformedInputError):
        url.decode("%C3x")

    with pytest.raises(UnknownCharacterError):
        url.decode("%zz")


@given(st.text())
def test_round_trip(raw):
    assert url.decode(url.encode(raw)) == raw
