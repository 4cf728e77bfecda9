class RadixCodecError(Exception):
    """Base class for all radixcodec exceptions"""

    def __init__(self, message):
        super().__init__(message)


class InvalidRadixError(RadixCodecError):
    """Exception for a radix outside the supported range"""

    def __init__(self, radix, min_radix=2, max_radix=256):
        super().__init__(
            f"Radix must be between {min_radix} and {max_radix}, was {radix!r}"
        )
        self.radix = radix


class DivisionByZeroError(InvalidRadixError):
    """Exception for dividing a big integer by a non-positive divisor"""

    def __init__(self, divisor):
        RadixCodecError.__init__(
            self, f"Divisor must be a positive integer, was {divisor!r}"
        )
        self.radix = divisor
        self.divisor = divisor


class InvalidDigitError(RadixCodecError):
    """Exception for a digit value that does not fit its radix"""

    def __init__(self, digit, radix, position=None):
        """New InvalidDigitError object

        :param digit: The offending digit value
        :param radix: The radix the digit was checked against
        :param position: Index of the digit in its buffer, if known
        """
        message = f"Digit {digit!r} is not valid in radix {radix}"
        if position is not None:
            message += f" (at position {position})"

        super().__init__(message)
        self.digit = digit
        self.radix = radix
        self.position = position


class UnknownCharacterError(RadixCodecError):
    """Exception for a character absent from the active alphabet"""

    def __init__(self, character, alphabet):
        super().__init__(f"Character {character!r} is not in the {alphabet} alphabet")
        self.character = character
        self.alphabet = alphabet


class MalformedHexError(UnknownCharacterError):
    """Exception for hex text that does not split into whole bytes"""

    def __init__(self, text):
        RadixCodecError.__init__(
            self,
            f"Hex text must have an even number of digits, got {len(text)}",
        )
        self.character = None
        self.alphabet = "hex"
        self.text = text


class MalformedInputError(RadixCodecError):
    """Exception for structurally broken UTF-8, Base64 or percent-encoded
    input.
    """

    def __init__(self, codec, reason, position=None):
        message = f"Malformed {codec} input: {reason}"
        if position is not None:
            message += f" (at position {position})"

        super().__init__(message)
        self.codec = codec
        self.reason = reason
        self.position = position
