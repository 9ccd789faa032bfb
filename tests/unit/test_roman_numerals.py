"""
Tests for the Roman numeral grammar

Checks:
1. Canonical numerals parse and evaluate to their standard value
2. Malformed numerals are rejected with InvalidNumeralError
3. Single digits parse case-insensitively
4. Integer rendering is the inverse of parsing on 1..3999
"""

import pytest

from merchant_guide.common.errors import InvalidNumeralError, MerchantGuideError, UnknownDigitError
from merchant_guide.common.roman_numerals import (
    RomanDigit,
    RomanNumber,
    convert_int_to_roman,
    convert_roman_to_int,
    parse_roman_digit,
    parse_roman_number,
    roman_number_value,
)


class TestRomanDigit:
    """Magnitudes and symbols of the seven digits"""

    def test_magnitudes(self) -> None:
        assert [digit.value for digit in RomanDigit] == [1, 5, 10, 50, 100, 500, 1000]

    def test_symbols(self) -> None:
        assert "".join(digit.symbol for digit in RomanDigit) == "IVXLCDM"
        assert str(RomanDigit.M) == "M"


class TestParseRomanDigit:
    """Parsing single digit characters"""

    @pytest.mark.parametrize("char, expected", [
        ("I", RomanDigit.I),
        ("v", RomanDigit.V),
        ("x", RomanDigit.X),
        ("L", RomanDigit.L),
        ("c", RomanDigit.C),
        ("D", RomanDigit.D),
        ("m", RomanDigit.M),
    ])
    def test_case_insensitive(self, char: str, expected: RomanDigit) -> None:
        assert parse_roman_digit(char) is expected

    @pytest.mark.parametrize("char", ["A", "z", "1", "?", "", "II", "\u0131", "\u0130"])
    def test_unknown_digit(self, char: str) -> None:
        with pytest.raises(UnknownDigitError) as exc_info:
            parse_roman_digit(char)
        assert exc_info.value.char == char


class TestParseRomanNumber:
    """Grammar validation and evaluation"""

    @pytest.mark.parametrize("text, expected", [
        ("MCMIII", 1903),
        ("MMVI", 2006),
        ("MCMXLIV", 1944),
        ("I", 1),
        ("III", 3),
        ("IV", 4),
        ("IX", 9),
        ("XLII", 42),
        ("XCIX", 99),
        ("CDXLIV", 444),
        ("MMMCMXCIX", 3999),
    ])
    def test_valid_numerals(self, text: str, expected: int) -> None:
        number = parse_roman_number(text)
        assert roman_number_value(number) == expected
        assert number.value == expected
        assert int(number) == expected

    @pytest.mark.parametrize("text", ["IIII", "XXXX", "CCCC", "MMMM", "CCM", "IMIM", "", "IC", "XM", "VV", "IIV", "ABC", "XIV "])
    def test_invalid_numerals(self, text: str) -> None:
        with pytest.raises(InvalidNumeralError) as exc_info:
            parse_roman_number(text)
        assert exc_info.value.text == text

    def test_lowercase_numeral_rejected(self) -> None:
        with pytest.raises(InvalidNumeralError):
            parse_roman_number("xiv")

    def test_errors_are_value_errors(self) -> None:
        with pytest.raises(ValueError):
            parse_roman_number("IIII")
        assert issubclass(InvalidNumeralError, MerchantGuideError)

    def test_evaluation_is_repeatable(self) -> None:
        number = RomanNumber.parse("MCMXLIV")
        assert number.value == number.value == 1944

    def test_str_and_digits(self) -> None:
        number = RomanNumber.parse("XIV")
        assert str(number) == "XIV"
        assert number.digits == (RomanDigit.X, RomanDigit.I, RomanDigit.V)
        assert number == RomanNumber.parse("XIV")


class TestFromDigits:
    """Composing digits into a numeral"""

    def test_valid_composition(self) -> None:
        number = RomanNumber.from_digits([RomanDigit.X, RomanDigit.L, RomanDigit.I, RomanDigit.I])
        assert number.value == 42

    def test_four_in_a_row_rejected(self) -> None:
        with pytest.raises(InvalidNumeralError):
            RomanNumber.from_digits([RomanDigit.I] * 4)

    def test_empty_rejected(self) -> None:
        with pytest.raises(InvalidNumeralError):
            RomanNumber.from_digits([])


class TestConversions:
    """convert_roman_to_int / convert_int_to_roman"""

    def test_roman_to_int_normalizes(self) -> None:
        assert convert_roman_to_int("  xiv ") == 14
        assert convert_roman_to_int("mcmxciv") == 1994

    def test_roman_to_int_rejects_invalid(self) -> None:
        with pytest.raises(InvalidNumeralError):
            convert_roman_to_int("iiii")

    def test_roman_to_int_rejects_non_latin_letters(self) -> None:
        with pytest.raises(InvalidNumeralError):
            convert_roman_to_int("x\u0131v")

    @pytest.mark.parametrize("num, expected", [(1, "I"), (4, "IV"), (1903, "MCMIII"), (3999, "MMMCMXCIX")])
    def test_int_to_roman(self, num: int, expected: str) -> None:
        assert convert_int_to_roman(num) == expected

    @pytest.mark.parametrize("num", [0, -1, 4000, 2.5, True])
    def test_int_to_roman_out_of_range(self, num) -> None:
        with pytest.raises(ValueError):
            convert_int_to_roman(num)

    def test_round_trip_over_full_range(self) -> None:
        """Invariant: every value renders to a numeral that parses back to it"""
        for num in range(1, 4000):
            text = convert_int_to_roman(num)
            assert parse_roman_number(text).value == num
            assert convert_int_to_roman(parse_roman_number(text).value) == text
