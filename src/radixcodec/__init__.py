from .big_radix_int import BigRadixInt
from .radix_converter import RadixConverter, convert_digits, count_leading
from .alphabet import Alphabet, AlphabetId, get_alphabet
from .base58 import (
    Base58Codec,
    encode_base58,
    decode_base58,
    hex_to_base58,
    base58_to_hex,
    ascii_to_base58,
    base58_to_ascii,
    text_to_base58,
    base58_to_text,
    encode_base16,
    decode_base16,
)
from . import utf8
from . import base64
from . import url

from .errors import (
    RadixCodecError,
    InvalidRadixError,
    DivisionByZeroError,
    InvalidDigitError,
    UnknownCharacterError,
    MalformedHexError,
    MalformedInputError,
)

__version__ = "1.0.0"
