from radixcodec import utf8
from radixcodec.alphabet import HEX
from radixcodec.errors import MalformedInputError

# Characters escaped on top of everything outside of ASCII
RESERVED: str = "!*();:@&=+$,/?#[]% "

ESCAPE: str = "%"


def _escape(byte: int) -> str:
    high, low = divmod(byte, 16)
    return ESCAPE + (HEX.to_char(high) + HEX.to_char(low)).upper()


def encode(text: str) -> str:
    """Percent-encode text.

    Non-ASCII characters and the characters in :data:`RESERVED` are replaced
    by their UTF-8 bytes, each written as ``%XX``.
    """
    out = []
    for char in text:
        if ord(char) >= 0x80 or char in RESERVED:
            out.extend(_escape(byte) for byte in utf8.encode(char))
        else:
            out.append(char)
    return "".join(out)


def decode(text: str) -> str:
    """Decode percent-encoded text.

    A run of consecutive escapes is decoded as one UTF-8 byte sequence, so
    multi-byte characters may be split over several escapes.

    :raises MalformedInputError: On a truncated escape or escaped bytes that
        are not valid UTF-8
    :raises UnknownCharacterError: If an escape has a non hex digit
    """
    out = []
    i = 0
    while i < len(text):
        if text[i] != ESCAPE:
            out.append(text[i])
            i += 1
            continue

        data = bytearray()
        while i < len(text) and text[i] == ESCAPE:
            if i + 3 > len(text):
                raise MalformedInputError("percent-encoded", "truncated escape", i)
            high, low = HEX.decode(text[i + 1 : i + 3].lower())
            data.append(high * 16 + low)
            i += 3
        out.append(utf8.decode(data))
    return "".join(out)
