"""Error types raised by the numeral grammar and the knowledge base.

Every error derives from MerchantGuideError, which itself is a ValueError, so
callers that only care about bad input can keep catching ValueError. None of
these errors is fatal: the driver reports the message and moves on to the
next line.
"""
from .config import UNKNOWN_QUESTION_MESSAGE


class MerchantGuideError(ValueError):
    """Base class for all knowledge base and numeral errors."""


class InvalidNumeralError(MerchantGuideError):
    """Raised when a string is not a canonical Roman numeral."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"Invalid Roman numeral: '{text}'")


class UnknownDigitError(MerchantGuideError):
    """Raised when a single character is not one of the seven Roman digits."""

    def __init__(self, char: str):
        self.char = char
        super().__init__(f"Unknown Roman digit: '{char}'")


class MalformedStatementError(MerchantGuideError):
    """Raised when a definition line has no ' is ' separator."""

    def __init__(self, line: str):
        self.line = line
        super().__init__(f"Invalid line '{line}', failed to split on ' is '")


class EmptyLeftSideError(MerchantGuideError):
    """Raised when a definition has nothing to the left of ' is '."""

    def __init__(self, line: str):
        self.line = line
        super().__init__(f"Empty left side in '{line}'")


class InvalidAmountError(MerchantGuideError):
    """Raised when the credit amount of a material definition is not an integer."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"Invalid credit amount: '{text}'")


class UnknownTokenError(MerchantGuideError):
    """Raised when a question uses a token that was never defined."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Unknown token: '{token}'")


class UnknownQuestionError(MerchantGuideError):
    """Raised when a question does not follow one of the known templates."""

    def __init__(self, question: str):
        self.question = question
        super().__init__(UNKNOWN_QUESTION_MESSAGE)


class ZeroQuantityError(MerchantGuideError):
    """Raised when a material price is given for a quantity of zero.

    This happens when none of the tokens in front of the material name is a
    known numeral, e.g. "Silver is 34 Credits" or "foo Silver is 34 Credits"
    before "foo" was defined.
    """

    def __init__(self, material: str):
        self.material = material
        super().__init__(f"Cannot price '{material}': no known numerals before the material name")
