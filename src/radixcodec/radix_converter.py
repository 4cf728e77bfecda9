import logging
from typing import Any, Optional, Sequence

from radixcodec.big_radix_int import BigRadixInt, check_radix
from radixcodec.errors import InvalidDigitError


def count_leading(sequence: Sequence[Any], element: Any) -> int:
    """Count how many items at the start of sequence are equal to element."""
    count = 0
    for item in sequence:
        if item != element:
            break
        count += 1
    return count


class RadixConverter:
    """Convert digit sequences between two radices.

    The digits are read as a single number in the source radix and written
    out again in the target radix. Leading zero digits carry no magnitude, so
    they are counted up front and re-emitted as the same number of zero
    digits in the target radix. This is what makes one ``0x00`` byte come
    out as one Base58 ``'1'`` and back again.
    """

    def __init__(self, log: Optional[logging.Logger] = None):
        """Create a new RadixConverter object

        :param log: The logger to use, defaults to the ``radixcodec`` logger
        """
        if log is None:
            log = logging.getLogger("radixcodec")

        self.log = log

    def convert(
        self, buffer: Sequence[int], from_radix: int, to_radix: int
    ) -> list[int]:
        """Convert a most-significant-first digit buffer to another radix.

        :param buffer: The digits in ``from_radix``, e.g. a ``bytes`` object
        :param from_radix: The radix of ``buffer``
        :param to_radix: The radix of the result
        :returns: The digits in ``to_radix``, most-significant first
        :raises InvalidRadixError: If a radix is not in [2, 256]
        :raises InvalidDigitError: If a digit of buffer does not fit from_radix
        """
        check_radix(from_radix)
        check_radix(to_radix)

        for position, digit in enumerate(buffer):
            if not isinstance(digit, int) or not 0 <= digit < from_radix:
                raise InvalidDigitError(digit, from_radix, position=position)

        zeros = count_leading(buffer, 0)

        value = BigRadixInt.from_digits(buffer[zeros:], from_radix)

        digits = []
        while not value.is_zero():
            value, remainder = value.divmod(to_radix)
            digits.append(remainder)
        digits.reverse()

        self.log.debug(
            f"RadixConverter: {len(buffer)} digits radix {from_radix} -> "
            f"{zeros + len(digits)} digits radix {to_radix} "
            f"({zeros} leading zeros)"
        )

        return [0] * zeros + digits


_converter = RadixConverter()


def convert_digits(
    buffer: Sequence[int], from_radix: int, to_radix: int
) -> list[int]:
    """Convert a digit buffer from one radix to another.

    See :meth:`RadixConverter.convert`.
    """
    return _converter.convert(buffer, from_radix, to_radix)
