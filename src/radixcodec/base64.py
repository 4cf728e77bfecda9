from radixcodec.alphabet import BASE64
from radixcodec.errors import MalformedInputError

PAD: str = "="


def encode(data: bytes) -> str:
    """Encode bytes as padded Base64 text.

    Every 3 bytes are packed into a 24-bit group and written as 4 symbols of
    6 bits. A final group of 1 or 2 bytes is written as 2 or 3 symbols
    followed by ``=`` padding.
    """
    data = bytes(data)
    out = []
    for i in range(0, len(data), 3):
        chunk = data[i : i + 3]
        group = int.from_bytes(chunk.ljust(3, b"\0"), "big")
        symbols = len(chunk) + 1
        for shift in (18, 12, 6, 0)[:symbols]:
            out.append(BASE64.to_char((group >> shift) & 0x3F))
        out.append(PAD * (4 - symbols))
    return "".join(out)


def decode(text: str) -> bytes:
    """Decode Base64 text into bytes. Padding is optional.

    :raises UnknownCharacterError: If text has a non Base64 character
    :raises MalformedInputError: If the last group has a single symbol
    """
    text = text.rstrip(PAD)
    if len(text) % 4 == 1:
        raise MalformedInputError(
            "Base64", "dangling symbol in the last group", position=len(text) - 1
        )

    out = bytearray()
    for i in range(0, len(text), 4):
        chunk = text[i : i + 4]
        group = 0
        for char in chunk.ljust(4, BASE64.zero):
            group = (group << 6) | BASE64.to_digit(char)
        # n symbols carry n - 1 whole bytes
        out += group.to_bytes(3, "big")[: len(chunk) - 1]
    return bytes(out)
