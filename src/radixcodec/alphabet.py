import enum
from typing import Iterable

from radixcodec.big_radix_int import BigRadixInt
from radixcodec.errors import InvalidDigitError, InvalidRadixError, UnknownCharacterError

HEX_SYMBOLS: str = "0123456789abcdef"

# Bitcoin alphabet, without 0, O, I and l
BASE58_SYMBOLS: str = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"

# RFC 4648, section 4
BASE64_SYMBOLS: str = (
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
)


class AlphabetId(enum.Enum):
    HEX = "hex"
    BASE58 = "base58"
    BASE64 = "base64"
    ASCII = "ascii"


class Alphabet:
    """
    Bijection between the digit values of a radix and display characters.

    The radix is the length of the alphabet, digit value ``i`` is rendered as
    ``symbols[i]``.

    :param symbols: The characters of the alphabet, without duplicates
    :param name: Name used in error messages
    :raises InvalidRadixError: If the alphabet has fewer than 2 or more
        than 256 characters
    :raises ValueError: If a character appears more than once
    """

    def __init__(self, symbols: str, name: str):
        if not BigRadixInt.MIN_RADIX <= len(symbols) <= BigRadixInt.MAX_RADIX:
            raise InvalidRadixError(len(symbols))

        self.symbols = symbols
        self.name = name
        self.cached_map = {char: value for value, char in enumerate(symbols)}

        if len(self.cached_map) != len(symbols):
            raise ValueError(f"Duplicate characters found in '{symbols}'")

    @property
    def radix(self) -> int:
        return len(self.symbols)

    @property
    def zero(self) -> str:
        """The leading-zero glyph, i.e. the character of digit value 0"""
        return self.to_char(0)

    def to_char(self, value: int) -> str:
        if not isinstance(value, int) or not 0 <= value < self.radix:
            raise InvalidDigitError(value, self.radix)
        return self.symbols[value]

    def to_digit(self, char: str) -> int:
        try:
            return self.cached_map[char]
        except KeyError:
            raise UnknownCharacterError(char, self.name) from None

    def encode(self, digits: Iterable[int]) -> str:
        """Render a digit sequence as text."""
        return "".join(self.to_char(value) for value in digits)

    def decode(self, text: str) -> list[int]:
        """Parse text into its digit values."""
        return [self.to_digit(char) for char in text]

    def __contains__(self, char: str) -> bool:
        return char in self.cached_map

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r}, radix={self.radix})"


class AsciiAlphabet(Alphabet):
    """Passthrough alphabet of radix 256.

    The digit value of a character is its code point, so this alphabet is
    used for text whose characters are raw byte values.
    """

    def __init__(self):
        super().__init__("".join(map(chr, range(BigRadixInt.MAX_RADIX))), "ascii")

    def to_char(self, value: int) -> str:
        if not isinstance(value, int) or not 0 <= value < self.radix:
            raise InvalidDigitError(value, self.radix)
        return chr(value)

    def to_digit(self, char: str) -> int:
        if len(char) != 1 or ord(char) >= self.radix:
            raise UnknownCharacterError(char, self.name)
        return ord(char)


HEX: Alphabet = Alphabet(HEX_SYMBOLS, "hex")
BASE58: Alphabet = Alphabet(BASE58_SYMBOLS, "base58")
BASE64: Alphabet = Alphabet(BASE64_SYMBOLS, "base64")
ASCII: Alphabet = AsciiAlphabet()

ALPHABETS: dict[AlphabetId, Alphabet] = {
    AlphabetId.HEX: HEX,
    AlphabetId.BASE58: BASE58,
    AlphabetId.BASE64: BASE64,
    AlphabetId.ASCII: ASCII,
}


def get_alphabet(alphabet_id: AlphabetId) -> Alphabet:
    """Look up one of the built-in alphabets.

    :param alphabet_id: The alphabet to look up, an :class:`AlphabetId` or
        its value, e.g. ``"base58"``
    :raises ValueError: If there is no such alphabet
    """
    return ALPHABETS[AlphabetId(alphabet_id)]
