"""Knowledge base of custom numerals and material prices.

This module keeps what a trader has learned so far: which made-up words stand
for which Roman digit, and what one unit of each material costs in credits.
It understands two kinds of statements and two kinds of questions:

    glob is I                          digit definition
    glob glob Silver is 34 Credits     material price definition
    how much is pish tegj glob glob ?  value question
    how many Credits is glob prok Silver ?  price question

Definitions build on earlier definitions, so statements must be fed in order.
"""
import re
from typing import Dict, List, Optional, Tuple

from .common.config import CREDITS_SUFFIX, QUESTION_MARK, STATEMENT_SEPARATOR
from .common.errors import (
    EmptyLeftSideError,
    InvalidAmountError,
    MalformedStatementError,
    UnknownQuestionError,
    UnknownTokenError,
    ZeroQuantityError,
)
from .common.roman_numerals import RomanDigit, RomanNumber, parse_roman_digit


# Credit amounts are plain integers, optionally signed
CREDIT_AMOUNT_PATTERN = re.compile(r'[+-]?[0-9]+')


def format_value(value: float) -> str:
    """Format a numeric answer, dropping the fractional part of whole numbers.

    Examples:
        >>> format_value(782.0)
        '782'
        >>> format_value(8.5)
        '8.5'
    """
    if float(value).is_integer():
        return str(int(value))
    return str(value)


class KnowledgeBase:
    """Incrementally built mapping of numeral tokens and material rates.

    The knowledge base is mutated only by define() and read by answer(). A
    define() call that fails leaves both mappings exactly as they were.
    Instances share nothing, use one per conversation.

    Attributes:
        numerals: Dictionary mapping tokens to the Roman digit they stand for
        materials: Dictionary mapping material names to credits per unit

    Example:
        >>> kb = KnowledgeBase()
        >>> kb.define("glob is I")
        >>> kb.define("prok is V")
        >>> kb.answer("how much is prok glob glob ?")
        'prok glob glob is 7'
    """

    def __init__(self):
        self.numerals: Dict[str, RomanDigit] = {}
        self.materials: Dict[str, float] = {}

    @classmethod
    def from_definitions(cls, text: str) -> "KnowledgeBase":
        """Build a knowledge base from a block of definition lines.

        Lines are applied in order; blank lines are skipped.

        Args:
            text: Definitions, one per line

        Returns:
            KnowledgeBase: A knowledge base holding all the definitions

        Raises:
            MerchantGuideError: The error of the first line that fails
        """
        kb = cls()
        for line in text.splitlines():
            if line.strip():
                kb.define(line)
        return kb

    def __len__(self) -> int:
        return len(self.numerals) + len(self.materials)

    def is_numeral(self, token: str) -> bool:
        return token in self.numerals

    def is_material(self, token: str) -> bool:
        return token in self.materials

    def define(self, statement: str) -> None:
        """Apply a digit definition or a material price definition.

        The statement is split on the first " is ". A right-hand side of a
        single character defines a digit: the left-hand side becomes a name
        for that Roman digit. Anything else defines a material price: the last
        word on the left is the material, the words before it are numeral
        tokens giving the quantity, and the first word on the right is the
        price of that quantity in credits.

        Unknown words in front of the material are skipped, so
        "glob foo Silver is 34 Credits" prices Silver as if "foo" was absent.

        Args:
            statement: One definition line, e.g. "glob is I" or
                       "glob glob Silver is 34 Credits"

        Raises:
            MalformedStatementError: If the statement has no " is " separator
            EmptyLeftSideError: If there is nothing left of the separator
            UnknownDigitError: If a one-character right side is not a Roman digit
            InvalidNumeralError: If the known numeral tokens do not compose into a
                                 valid Roman numeral
            ZeroQuantityError: If no known numeral token precedes the material
            InvalidAmountError: If the credit amount is not an integer
        """
        line = statement.rstrip()
        left, separator, right = line.partition(STATEMENT_SEPARATOR)
        if not separator:
            raise MalformedStatementError(statement)

        left = left.strip()
        if not left:
            raise EmptyLeftSideError(statement)

        if len(right) == 1:
            self.numerals[left] = parse_roman_digit(right)
        else:
            material, rate = self._parse_material_price(left, right)
            self.materials[material] = rate

    def _parse_material_price(self, left: str, right: str) -> Tuple[str, float]:
        """Work out the material name and its credits-per-unit rate.

        Nothing is stored here so that define() can stay all-or-nothing.
        """
        *numeral_tokens, material = left.split()

        digits = [self.numerals[token] for token in numeral_tokens if token in self.numerals]
        if not digits:
            raise ZeroQuantityError(material)
        quantity = RomanNumber.from_digits(digits).value

        amount_words = right.split()
        amount_text = amount_words[0] if amount_words else ""
        if CREDIT_AMOUNT_PATTERN.fullmatch(amount_text) is None:
            raise InvalidAmountError(amount_text)

        # Huge amounts overflow int parsing or float division
        try:
            rate = int(amount_text) / quantity
        except (ValueError, OverflowError):
            raise InvalidAmountError(amount_text)

        return material, rate

    def answer(self, question: str) -> str:
        """Answer a value question or a price question.

        Everything after the first " is " is the phrase being asked about,
        minus a trailing question mark. If the last word of the phrase is a
        known material, the answer is the price of that many units in credits;
        otherwise the whole phrase is read as a number.

        Args:
            question: e.g. "how much is pish tegj glob glob ?" or
                      "how many Credits is glob prok Silver ?"

        Returns:
            str: "<phrase> is <value>", with " Credits" appended for prices

        Raises:
            UnknownQuestionError: If the question has no " is " or nothing to ask about
            UnknownTokenError: If a numeral token in the phrase was never defined
            InvalidNumeralError: If the tokens do not form a valid Roman numeral

        Examples:
            >>> kb.answer("how much is pish tegj glob glob ?")
            'pish tegj glob glob is 42'
            >>> kb.answer("how many Credits is glob prok Iron ?")
            'glob prok Iron is 782 Credits'
        """
        _, separator, phrase = question.partition(STATEMENT_SEPARATOR)
        if not separator:
            raise UnknownQuestionError(question)

        phrase = phrase.strip()
        if phrase.endswith(QUESTION_MARK):
            phrase = phrase[:-len(QUESTION_MARK)].rstrip()

        tokens = phrase.split()
        if not tokens:
            raise UnknownQuestionError(question)

        # The last word is only a material if it has been priced
        material: Optional[str] = tokens[-1] if self.is_material(tokens[-1]) else None
        numeral_tokens = tokens[:-1] if material is not None else tokens

        amount = self._evaluate_tokens(numeral_tokens)

        if material is None:
            return f"{phrase}{STATEMENT_SEPARATOR}{amount}"

        credits = amount * self.materials[material]
        return f"{phrase}{STATEMENT_SEPARATOR}{format_value(credits)}{CREDITS_SUFFIX}"

    def _evaluate_tokens(self, tokens: List[str]) -> int:
        for token in tokens:
            if token not in self.numerals:
                raise UnknownTokenError(token)
        return RomanNumber.from_digits(self.numerals[token] for token in tokens).value
