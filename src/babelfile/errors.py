"""Exceptions raised by the babelfile codecs."""


class BabelError(Exception):
    """Base exception for babelfile errors"""

    pass


class InvalidAlphabetError(BabelError, ValueError):
    """Text contains a symbol outside the expected alphabet"""

    pass


class InvalidPageLengthError(BabelError, ValueError):
    """A page does not have exactly LENGTH_OF_PAGE characters"""

    pass


class InvalidAddressError(BabelError, ValueError):
    """An address cannot be parsed or points outside the page space"""

    pass


class ContainerFormatError(BabelError, ValueError):
    """A .babel container has a malformed header"""

    pass


class VerificationFailure(BabelError, RuntimeError):
    """An encoded page did not decode back to itself.

    This is never a user error: it means the arithmetic is broken, and the
    whole file operation must be abandoned.
    """

    pass
