"""Roman numeral parsing and evaluation for the merchant guide package.

This module validates Roman numeral strings against the canonical
subtractive-notation grammar and converts them to integers and back. Only
numerals in the range 1 to 3999 are representable.
"""
import re
from enum import Enum
from typing import Iterable, Tuple

from .errors import InvalidNumeralError, UnknownDigitError


# Canonical Roman numeral grammar, one group per decimal place
# Each group allows at most three repetitions of a digit and only the
# subtractive pairs CM, CD, XC, XL, IX and IV
ROMAN_NUMERAL_PATTERN = re.compile(
    r'M{0,3}'                  # thousands: M, MM, MMM
    r'(CM|CD|D?C{0,3})'        # hundreds: 900, 400, 0-300, 500-800
    r'(XC|XL|L?X{0,3})'        # tens: 90, 40, 0-30, 50-80
    r'(IX|IV|V?I{0,3})'        # units: 9, 4, 0-3, 5-8
)

MIN_ROMAN_VALUE = 1
MAX_ROMAN_VALUE = 3999

# Characters accepted by parse_roman_digit()
ROMAN_DIGIT_CHARACTERS = "IVXLCDMivxlcdm"


class RomanDigit(Enum):
    """One of the seven Roman digits, valued by its magnitude."""
    I = 1
    V = 5
    X = 10
    L = 50
    C = 100
    D = 500
    M = 1000

    @property
    def symbol(self) -> str:
        return self.name

    def __str__(self) -> str:
        return self.name


class RomanNumber:
    """A validated canonical Roman numeral.

    Instances are only created through parse() or from_digits(), so the digit
    sequence always satisfies ROMAN_NUMERAL_PATTERN. The numeral is immutable
    and can be evaluated any number of times.

    Attributes:
        digits: The digits of the numeral, most significant first

    Example:
        >>> number = RomanNumber.parse("MCMXLIV")
        >>> number.value
        1944
        >>> str(number)
        'MCMXLIV'
    """

    __slots__ = ("_digits",)

    def __init__(self, digits: Tuple[RomanDigit, ...]):
        # Use parse() or from_digits(); this does not validate
        self._digits = digits

    @classmethod
    def parse(cls, text: str) -> "RomanNumber":
        """Parse a canonical uppercase Roman numeral string.

        Args:
            text: Roman numeral string (e.g., "XLII")

        Returns:
            RomanNumber: The validated numeral

        Raises:
            InvalidNumeralError: If text is empty or does not match the grammar
        """
        if not text or ROMAN_NUMERAL_PATTERN.fullmatch(text) is None:
            raise InvalidNumeralError(text)
        return cls(tuple(RomanDigit[char] for char in text))

    @classmethod
    def from_digits(cls, digits: Iterable[RomanDigit]) -> "RomanNumber":
        """Compose digits, in order, into a numeral.

        The digits are rendered to their symbols and the resulting string goes
        through the same validation as parse(), so e.g. four I digits are
        rejected just like the string "IIII".

        Raises:
            InvalidNumeralError: If the composed string is not a valid numeral
        """
        return cls.parse("".join(digit.symbol for digit in digits))

    @property
    def digits(self) -> Tuple[RomanDigit, ...]:
        return self._digits

    @property
    def value(self) -> int:
        """Integer value of the numeral, see roman_number_value()."""
        return roman_number_value(self)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return "".join(digit.symbol for digit in self._digits)

    def __repr__(self) -> str:
        return f"RomanNumber('{self}')"

    def __eq__(self, other) -> bool:
        if not isinstance(other, RomanNumber):
            return NotImplemented
        return self._digits == other._digits

    def __hash__(self) -> int:
        return hash(self._digits)


def parse_roman_digit(char: str) -> RomanDigit:
    """Parse a single Roman digit character.

    Matching is case-insensitive, so "x" and "X" both give RomanDigit.X.

    Args:
        char: A one-character string

    Returns:
        RomanDigit: The matching digit

    Raises:
        UnknownDigitError: If char is not exactly one of I, V, X, L, C, D, M
    """
    # Only the Latin letters, upper() also maps e.g. dotless i to I
    if len(char) != 1 or char not in ROMAN_DIGIT_CHARACTERS:
        raise UnknownDigitError(char)
    return RomanDigit[char.upper()]


def parse_roman_number(text: str) -> RomanNumber:
    """Parse a canonical Roman numeral string, see RomanNumber.parse()."""
    return RomanNumber.parse(text)


def roman_number_value(number: RomanNumber) -> int:
    """Evaluate a Roman numeral using the subtractive principle.

    Digits are scanned left to right. A digit whose magnitude is strictly less
    than the magnitude of the digit right after it is subtracted from the
    total, every other digit is added. The last digit is always added.

    Args:
        number: A validated RomanNumber

    Returns:
        int: The value of the numeral, between 1 and 3999

    Examples:
        >>> roman_number_value(RomanNumber.parse("III"))
        3
        >>> roman_number_value(RomanNumber.parse("IX"))
        9
    """
    digits = number.digits
    int_value = 0

    for i, digit in enumerate(digits):
        # Check for subtractive notation (smaller value before larger)
        if i + 1 < len(digits) and digit.value < digits[i + 1].value:
            int_value -= digit.value
        else:
            int_value += digit.value

    return int_value


def convert_roman_to_int(roman: str) -> int:
    """Convert a Roman numeral string to an integer.

    Unlike parse_roman_number(), surrounding whitespace is stripped and the
    input is uppercased first, so "  xiv " is accepted.

    Args:
        roman: Roman numeral string (e.g., "XIV", "iv", "MCMXCIV")

    Returns:
        Integer value of the Roman numeral

    Raises:
        InvalidNumeralError: If the normalized string is not a canonical numeral

    Examples:
        >>> convert_roman_to_int("XIV")
        14
        >>> convert_roman_to_int("mcmxciv")
        1994
    """
    roman = roman.strip()
    if any(char not in ROMAN_DIGIT_CHARACTERS for char in roman):
        raise InvalidNumeralError(roman)
    return RomanNumber.parse(roman.upper()).value


def convert_int_to_roman(num: int) -> str:
    """Convert an integer to its canonical uppercase Roman numeral.

    This is the inverse of convert_roman_to_int() on the representable range:
    for every canonical numeral s, convert_int_to_roman(convert_roman_to_int(s))
    gives back s.

    Args:
        num: Integer between 1 and 3999

    Returns:
        Canonical Roman numeral string

    Raises:
        ValueError: If num is not an integer in the representable range

    Examples:
        >>> convert_int_to_roman(1903)
        'MCMIII'
        >>> convert_int_to_roman(4)
        'IV'
    """
    if isinstance(num, bool) or not isinstance(num, int):
        raise ValueError("Input must be an integer")
    if not MIN_ROMAN_VALUE <= num <= MAX_ROMAN_VALUE:
        raise ValueError(f"Input must be between {MIN_ROMAN_VALUE} and {MAX_ROMAN_VALUE}, got {num}")

    # Roman numerals in descending order of value, subtractive pairs included
    roman_numerals = [
        ("M", 1000),
        ("CM", 900),
        ("D", 500),
        ("CD", 400),
        ("C", 100),
        ("XC", 90),
        ("L", 50),
        ("XL", 40),
        ("X", 10),
        ("IX", 9),
        ("V", 5),
        ("IV", 4),
        ("I", 1)
    ]

    result = []

    # Build the numeral by subtracting the largest possible values
    for roman, value in roman_numerals:
        while num >= value:
            result.append(roman)
            num -= value

    return ''.join(result)
