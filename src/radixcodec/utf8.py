"""
UTF-8 transcoding between code points and bytes.

Besides the 1 to 4 byte forms of RFC 3629, the historic 5 and 6 byte forms
of the original UTF-8 definition are supported, so every code point up to
``0x7FFFFFFF`` round-trips.
"""

from typing import Iterable

from radixcodec.errors import InvalidDigitError, MalformedInputError

MAX_CODE_POINT: int = 0x7FFFFFFF

# (exclusive upper bound of the code point, lead byte marker, continuation
# byte count)
SEQUENCE_FORMS: list[tuple[int, int, int]] = [
    (0x80, 0b00000000, 0),
    (0x800, 0b11000000, 1),
    (0x10000, 0b11100000, 2),
    (0x200000, 0b11110000, 3),
    (0x4000000, 0b11111000, 4),
    (0x80000000, 0b11111100, 5),
]


def encode_code_points(code_points: Iterable[int]) -> bytes:
    """Encode code points as UTF-8 bytes.

    :raises InvalidDigitError: If a code point is negative or larger than
        :data:`MAX_CODE_POINT`
    """
    out = bytearray()
    for position, code in enumerate(code_points):
        if not isinstance(code, int) or not 0 <= code <= MAX_CODE_POINT:
            raise InvalidDigitError(code, MAX_CODE_POINT + 1, position=position)

        for limit, marker, rest in SEQUENCE_FORMS:
            if code < limit:
                break

        out.append(marker | (code >> (rest * 6)))
        while rest > 0:
            rest -= 1
            out.append(0b10000000 | ((code >> (rest * 6)) & 0x3F))
    return bytes(out)


def _sequence_length(lead: int) -> tuple[int, int]:
    """Number of continuation bytes and payload bits of a lead byte"""
    if lead >> 7 == 0:
        return 0, lead
    if lead >> 6 == 0b10:
        raise ValueError("unexpected continuation byte")
    if lead >> 5 == 0b110:
        return 1, lead & 0b00011111
    if lead >> 4 == 0b1110:
        return 2, lead & 0b00001111
    if lead >> 3 == 0b11110:
        return 3, lead & 0b00000111
    if lead >> 2 == 0b111110:
        return 4, lead & 0b00000011
    if lead >> 1 == 0b1111110:
        return 5, lead & 0b00000001
    raise ValueError(f"invalid lead byte 0x{lead:02X}")


def decode_code_points(data: Iterable[int]) -> list[int]:
    """Decode UTF-8 bytes into code points.

    :raises MalformedInputError: On an invalid lead byte, a truncated
        sequence or a missing continuation byte
    """
    data = bytes(data)
    code_points = []
    i = 0
    while i < len(data):
        try:
            rest, code = _sequence_length(data[i])
        except ValueError as e:
            raise MalformedInputError("UTF-8", str(e), position=i) from None

        if i + rest >= len(data):
            raise MalformedInputError("UTF-8", "truncated sequence", position=i)

        for j in range(i + 1, i + 1 + rest):
            if data[j] >> 6 != 0b10:
                raise MalformedInputError(
                    "UTF-8", "expected continuation byte", position=j
                )
            code = (code << 6) | (data[j] & 0x3F)

        code_points.append(code)
        i += 1 + rest
    return code_points


def encode(text: str) -> bytes:
    """Encode text as UTF-8."""
    return encode_code_points(ord(char) for char in text)


def decode(data: Iterable[int]) -> str:
    """Decode UTF-8 bytes into text.

    :raises MalformedInputError: If the bytes are not valid UTF-8 or hold a
        code point that a Python string cannot represent
    """
    code_points = decode_code_points(data)
    try:
        return "".join(map(chr, code_points))
    except ValueError as e:
        raise MalformedInputError("UTF-8", str(e)) from None
