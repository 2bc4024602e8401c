"""babelfile - store any file as addresses in the Library of Babel."""

__version__ = "0.1.0"
__description__ = "Store any file as addresses in the Library of Babel"

from . import lib
from .errors import (
    BabelError,
    ContainerFormatError,
    InvalidAddressError,
    InvalidAlphabetError,
    InvalidPageLengthError,
    VerificationFailure,
)
from .lib.batch import BatchProcessor
from .lib.container import BabelFile
from .lib.files import decode_file, encode_file
from .lib.location import LocationCoordinate

__all__ = [
    "lib",
    "BabelError",
    "BabelFile",
    "BatchProcessor",
    "ContainerFormatError",
    "InvalidAddressError",
    "InvalidAlphabetError",
    "InvalidPageLengthError",
    "LocationCoordinate",
    "VerificationFailure",
    "decode_file",
    "encode_file",
]
