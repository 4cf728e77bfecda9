from dataclasses import dataclass
from typing import ClassVar, Iterable, Self

from radixcodec.errors import DivisionByZeroError, InvalidDigitError, InvalidRadixError


def strip_leading_zeros(digits: list[int]) -> list[int]:
    """Drop the redundant leading zeros of a most-significant-first digit list.

    A value of zero keeps exactly one zero digit.
    """
    i = 0
    while i < len(digits) - 1 and digits[i] == 0:
        i += 1
    return digits[i:] if digits else [0]


def check_radix(radix: int) -> None:
    """Raise :class:`InvalidRadixError` unless radix is in the supported range."""
    if (
        not isinstance(radix, int)
        or isinstance(radix, bool)
        or not BigRadixInt.MIN_RADIX <= radix <= BigRadixInt.MAX_RADIX
    ):
        raise InvalidRadixError(
            radix, min_radix=BigRadixInt.MIN_RADIX, max_radix=BigRadixInt.MAX_RADIX
        )


@dataclass(frozen=True)
class BigRadixInt:
    """
    Non-negative big integer stored as digits in an explicit radix.

    Digits are kept most-significant first. The representation is canonical:
    there is always at least one digit and there are no leading zero digits,
    except for the value zero which is exactly ``(0,)``.

    Only the arithmetic needed for radix conversion is provided, that is
    division by a small integer. Instances are immutable and every operation
    returns a new instance.

    :cvar MIN_RADIX: Smallest supported radix.
    :cvar MAX_RADIX: Largest supported radix, one unsigned byte per digit.
    :cvar ACCUMULATOR_MAX: Upper bound of the running remainder of a
        division, ``radix * divisor`` must stay below it.
    :param digits: Canonical digit tuple, most-significant first
    :param radix: The radix of the digits

    .. note::
        Use :meth:`from_digits` to build an instance from an arbitrary digit
        sequence, the constructor expects canonical digits.
    """

    MIN_RADIX: ClassVar[int] = 2
    MAX_RADIX: ClassVar[int] = 256
    ACCUMULATOR_MAX: ClassVar[int] = 2**32 - 1

    digits: tuple[int, ...]
    radix: int

    @classmethod
    def from_digits(cls, digits: Iterable[int], radix: int) -> Self:
        """Build a big integer from a most-significant-first digit sequence.

        An empty sequence is zero, a leading run of zero digits is dropped.

        :param digits: The digits of the value in ``radix``
        :param radix: The radix of the digits
        :returns: The canonical big integer
        :raises InvalidRadixError: If radix is not in [2, 256]
        :raises InvalidDigitError: If a digit is negative or not below radix
        """
        check_radix(radix)
        digits = list(digits)
        for position, digit in enumerate(digits):
            if not isinstance(digit, int) or not 0 <= digit < radix:
                raise InvalidDigitError(digit, radix, position=position)
        return cls(digits=tuple(strip_leading_zeros(digits)), radix=radix)

    @classmethod
    def zero(cls, radix: int) -> Self:
        return cls.from_digits((), radix)

    def __post_init__(self):
        check_radix(self.radix)

        if not self.digits:
            raise ValueError(f"{self.__class__.__name__}: digits must not be empty")

        if len(self.digits) > 1 and self.digits[0] == 0:
            raise ValueError(
                f"{self.__class__.__name__}: digits {self.digits!r} have a "
                "redundant leading zero"
            )

        for position, digit in enumerate(self.digits):
            if not 0 <= digit < self.radix:
                raise InvalidDigitError(digit, self.radix, position=position)

    def is_zero(self) -> bool:
        return self.digits == (0,)

    def divmod(self, divisor: int) -> tuple[Self, int]:
        """Divide by a small integer.

        Schoolbook long division, one digit at a time from the most-significant
        end, carrying the running remainder.

        :param divisor: A positive integer no larger than :attr:`MAX_RADIX`
        :returns: The quotient and the remainder in ``[0, divisor)``
        :raises DivisionByZeroError: If divisor is zero or negative
        :raises InvalidRadixError: If divisor is larger than :attr:`MAX_RADIX`
        """
        if not isinstance(divisor, int) or divisor <= 0:
            raise DivisionByZeroError(divisor)
        if divisor > self.MAX_RADIX:
            raise InvalidRadixError(
                divisor, min_radix=1, max_radix=self.MAX_RADIX
            )

        # The remainder is always below divisor, so r * radix + digit
        # stays below radix * divisor.
        assert self.radix * divisor <= self.ACCUMULATOR_MAX

        quotient = []
        remainder = 0
        for digit in self.digits:
            remainder = remainder * self.radix + digit
            quotient.append(remainder // divisor)
            remainder %= divisor

        return (
            type(self)(digits=tuple(strip_leading_zeros(quotient)), radix=self.radix),
            remainder,
        )

    def __int__(self) -> int:
        value = 0
        for digit in self.digits:
            value = value * self.radix + digit
        return value

    def __len__(self) -> int:
        return len(self.digits)

    def __str__(self) -> str:
        return f"{'.'.join(map(str, self.digits))} (radix {self.radix})"
