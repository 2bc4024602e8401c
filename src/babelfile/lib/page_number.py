"""
Page <-> page number positional encoding.

A page is read as a base-29 numeral, most significant symbol first, with the
digit value of each symbol being its index in ``PAGE_ALPHABET``
(``a=0 ... z=25, ','=26, ' '=27, '.'=28``). Python integers carry the
arbitrary precision this needs: ``29 ** 3239`` has well over ten thousand bits.
"""

import re

from babelfile import config
from babelfile.errors import (
    InvalidAddressError,
    InvalidAlphabetError,
    InvalidPageLengthError,
    VerificationFailure,
)

ALPHABET = config.PAGE_ALPHABET
BASE = config.PAGE_BASE
ZERO_SYMBOL = ALPHABET[0]

# Reverse lookup: character -> digit value
CHAR_TO_INDEX = {c: i for i, c in enumerate(ALPHABET)}

# Number of distinct pages; every page number is strictly below this.
PAGE_SPACE = BASE**config.LENGTH_OF_PAGE

_BASE36_PATTERN = re.compile(r"[0-9A-Za-z]+")


def to_number(page: str) -> int:
    """Return the base-29 positional value of a page."""
    if len(page) != config.LENGTH_OF_PAGE:
        raise InvalidPageLengthError(
            f"Page must be {config.LENGTH_OF_PAGE} characters, got {len(page)}"
        )

    result = 0
    for position, char in enumerate(page):
        digit = CHAR_TO_INDEX.get(char)
        if digit is None:
            raise InvalidAlphabetError(
                f"Invalid page character {char!r} at position {position}"
            )
        result = result * BASE + digit
    return result


def to_page(number: int) -> str:
    """Return the page whose base-29 value is ``number``.

    The numeral is left-padded with ``'a'`` (digit zero) to the full page
    length, so ``to_page(0)`` is a page of all ``'a'``.
    """
    if not 0 <= number < PAGE_SPACE:
        raise InvalidAddressError(
            f"Page number outside the page space [0, 29^{config.LENGTH_OF_PAGE})"
        )

    digits = []
    while number > 0:
        number, remainder = divmod(number, BASE)
        digits.append(ALPHABET[remainder])
    digits.reverse()

    page = "".join(digits).rjust(config.LENGTH_OF_PAGE, ZERO_SYMBOL)
    if len(page) != config.LENGTH_OF_PAGE:
        raise VerificationFailure(
            f"Generated page has {len(page)} characters, "
            f"expected {config.LENGTH_OF_PAGE}"
        )
    return page


def to_base36(number: int) -> str:
    """Render a non-negative integer with digits 0-9A-Z."""
    if number < 0:
        raise ValueError(f"Cannot render negative number in base 36: {number}")
    if number == 0:
        return config.BASE36_DIGITS[0]

    digits = []
    while number > 0:
        number, remainder = divmod(number, 36)
        digits.append(config.BASE36_DIGITS[remainder])
    return "".join(reversed(digits))


# Every address integer is below 10^7 * 30^L (a 7-digit packed coordinate
# times the multiplier), so longer digit strings cannot name a page.
MAX_BASE36_DIGITS = len(to_base36(10**7 * 30**config.LENGTH_OF_PAGE))


def from_base36(text: str) -> int:
    """Parse base-36 digits (either case) into an integer.

    Only ASCII alphanumerics are accepted; ``int()`` on its own would also
    take signs, underscores and surrounding whitespace. Overlong input is
    rejected before conversion.
    """
    if not _BASE36_PATTERN.fullmatch(text):
        raise InvalidAddressError(f"Invalid base-36 digits: {text[:32]!r}")
    if len(text) > MAX_BASE36_DIGITS:
        raise InvalidAddressError(
            f"Base-36 field has {len(text)} digits, at most {MAX_BASE36_DIGITS} allowed"
        )
    return int(text, 36)
