import logging
from typing import Optional

from radixcodec import utf8
from radixcodec.alphabet import ASCII, BASE58, HEX, Alphabet
from radixcodec.errors import MalformedHexError
from radixcodec.radix_converter import RadixConverter, count_leading


class Base58Codec:
    """
    Base58 and Base16 text rendering of byte buffers.

    Bytes are converted as one big number, so the Base58 text has no fixed
    width per byte. Leading zero bytes are kept as leading ``'1'`` symbols,
    the Base58 zero glyph, one per byte:

    - ``b"\\x00\\x00\\x00\\x00"`` <-> ``"1111"``
    - hex ``"0000287fb4cd"`` <-> ``"11233QC4"``

    :param converter: The radix converter to use, a new one is created if
        omitted
    :param log: The logger to use, defaults to the ``radixcodec`` logger
    """

    RADIX: int = 58
    BYTE_RADIX: int = 256
    HEX_RADIX: int = 16

    def __init__(
        self,
        converter: Optional[RadixConverter] = None,
        log: Optional[logging.Logger] = None,
    ):
        if log is None:
            log = logging.getLogger("radixcodec")
        if converter is None:
            converter = RadixConverter(log=log)

        self.log = log
        self.converter = converter
        self.alphabet: Alphabet = BASE58

    def encode(self, data: bytes) -> str:
        """Encode a byte buffer as Base58 text."""
        digits = self.converter.convert(data, self.BYTE_RADIX, self.RADIX)
        return self.alphabet.encode(digits)

    def decode(self, text: str) -> bytes:
        """Decode Base58 text into a byte buffer.

        :raises UnknownCharacterError: If text has a non Base58 character
        """
        digits = self.alphabet.decode(text)
        return bytes(self.converter.convert(digits, self.RADIX, self.BYTE_RADIX))

    def from_hex(self, hex_text: str) -> str:
        """Encode hex text as Base58 text.

        Each ``"00"`` pair at the start of the hex text becomes one leading
        ``'1'``. With an odd number of leading ``'0'`` digits the last one is
        left to the number itself.

        :raises MalformedHexError: If hex_text has an odd number of digits
        :raises UnknownCharacterError: If hex_text has a non hex character
        """
        if len(hex_text) % 2:
            raise MalformedHexError(hex_text)

        hex_text = hex_text.lower()
        zeros = count_leading(hex_text, HEX.zero) // 2 * 2

        self.log.debug(f"Base58Codec: {zeros // 2} leading zero bytes in hex")

        digits = self.converter.convert(
            HEX.decode(hex_text[zeros:]), self.HEX_RADIX, self.RADIX
        )
        return self.alphabet.encode([0] * (zeros // 2) + digits)

    def to_hex(self, text: str) -> str:
        """Decode Base58 text into hex text.

        Each leading ``'1'`` becomes one ``"00"`` pair.

        :raises UnknownCharacterError: If text has a non Base58 character
        """
        zeros = count_leading(text, self.alphabet.zero)

        self.log.debug(f"Base58Codec: {zeros} leading zero bytes in base58")

        digits = self.converter.convert(
            [0] * zeros + self.alphabet.decode(text), self.RADIX, self.HEX_RADIX
        )
        return HEX.encode(digits)

    def from_ascii(self, text: str) -> str:
        """Encode text made of byte-valued characters as Base58 text.

        :raises UnknownCharacterError: If a character is above ``'\\xff'``
        """
        return self.encode(bytes(ASCII.decode(text)))

    def to_ascii(self, text: str) -> str:
        return ASCII.encode(self.decode(text))

    def from_text(self, text: str) -> str:
        """Encode the UTF-8 form of text as Base58 text."""
        return self.encode(utf8.encode(text))

    def to_text(self, text: str) -> str:
        """Decode Base58 text whose bytes are UTF-8 into text.

        :raises MalformedInputError: If the decoded bytes are not UTF-8
        """
        return utf8.decode(self.decode(text))


def encode_base16(data: bytes) -> str:
    """Render every byte as two lower case hex digits."""
    return HEX.encode(digit for byte in data for digit in divmod(byte, 16))


def decode_base16(hex_text: str) -> bytes:
    """Parse hex text, two digits per byte. Upper case digits are accepted.

    :raises MalformedHexError: If hex_text has an odd number of digits
    :raises UnknownCharacterError: If hex_text has a non hex character
    """
    if len(hex_text) % 2:
        raise MalformedHexError(hex_text)

    digits = HEX.decode(hex_text.lower())
    return bytes(high * 16 + low for high, low in zip(digits[::2], digits[1::2]))


_codec = Base58Codec()


def encode_base58(data: bytes) -> str:
    return _codec.encode(data)


def decode_base58(text: str) -> bytes:
    return _codec.decode(text)


def hex_to_base58(hex_text: str) -> str:
    return _codec.from_hex(hex_text)


def base58_to_hex(text: str) -> str:
    return _codec.to_hex(text)


def ascii_to_base58(text: str) -> str:
    return _codec.from_ascii(text)


def base58_to_ascii(text: str) -> str:
    return _codec.to_ascii(text)


def text_to_base58(text: str) -> str:
    return _codec.from_text(text)


def base58_to_text(text: str) -> str:
    return _codec.to_text(text)
