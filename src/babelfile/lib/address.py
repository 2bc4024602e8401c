"""
Page <-> address composition.

An address is ``"{base36}:{wall}:{shelf}:{volume}:{page}"``. The base-36
integer combines the page content and its coordinate::

    combined = page_number + loc_int * MULTIPLIER,  MULTIPLIER = 30 ** L

Every page number is below ``29 ** L``, which is below ``MULTIPLIER``, so for
a known coordinate the page number is recovered by plain subtraction. No
search is involved.
"""

from typing import Optional, Tuple

from babelfile import config
from babelfile.errors import InvalidAddressError, VerificationFailure
from babelfile.lib import page_number
from babelfile.lib.location import (
    CoordinateSource,
    LocationCoordinate,
    RandomCoordinateSource,
)
from babelfile.log import get_logger, log

logger = get_logger(__name__)

MULTIPLIER = 30**config.LENGTH_OF_PAGE
FIELD_SEPARATOR = ":"

_default_source = RandomCoordinateSource()


def parse(address: str) -> Tuple[int, LocationCoordinate]:
    """Split an address into its combined integer and coordinate."""
    parts = address.strip().split(FIELD_SEPARATOR)
    if len(parts) != 5:
        raise InvalidAddressError(
            f"Address requires 5 colon-separated fields, got {len(parts)}"
        )
    combined = page_number.from_base36(parts[0])
    coordinate = LocationCoordinate.from_fields(parts[1:])
    return combined, coordinate


def format_address(combined: int, coordinate: LocationCoordinate) -> str:
    """Assemble the address string for a combined integer and coordinate."""
    return FIELD_SEPARATOR.join(
        (page_number.to_base36(combined),) + coordinate.fields()
    )


def decode(address: str) -> str:
    """
    Regenerate the page an address points to.

    Raises:
        InvalidAddressError: the address is malformed, or the recovered page
            number falls outside ``[0, MULTIPLIER)``.
    """
    combined, coordinate = parse(address)
    key = combined - coordinate.loc_int * MULTIPLIER
    if not 0 <= key < MULTIPLIER:
        raise InvalidAddressError(
            f"Address does not belong to coordinate {coordinate}: "
            "page number outside [0, 30^L)"
        )
    return page_number.to_page(key)


def _first_difference(a: str, b: str) -> int:
    for i, (x, y) in enumerate(zip(a, b)):
        if x != y:
            return i
    return min(len(a), len(b))


def compare(original: str, retrieved: str) -> Optional[str]:
    """Compare two pages ignoring trailing padding.

    Returns None when they match, otherwise a description of the mismatch.
    """
    original = original.rstrip(config.PAD_CHAR)
    retrieved = retrieved.rstrip(config.PAD_CHAR)
    if original == retrieved:
        return None

    position = _first_difference(original, retrieved)
    if len(original) != len(retrieved):
        return (
            f"length mismatch after trimming: original={len(original)} "
            f"retrieved={len(retrieved)} first_difference={position}"
        )
    return (
        f"content mismatch at position {position}: "
        f"original={original[position]!r} retrieved={retrieved[position]!r}"
    )


def verify(page: str, address: str) -> bool:
    """Return True when ``address`` regenerates ``page``."""
    mismatch = compare(page, decode(address))
    if mismatch is None:
        return True
    log(logger, "error", "Page verification failed", detail=mismatch, address=address[:32])
    return False


def encode(
    page: str,
    coordinate: Optional[LocationCoordinate] = None,
    source: Optional[CoordinateSource] = None,
    index: int = 0,
) -> str:
    """
    Compute the address of a page.

    The coordinate is either given directly or drawn from ``source`` for the
    page at ``index``. The produced address is decoded again before it is
    returned.

    Raises:
        InvalidPageLengthError: the page is not exactly LENGTH_OF_PAGE long.
        InvalidAlphabetError: the page contains a symbol outside the alphabet.
        VerificationFailure: the address does not regenerate the page.
    """
    number = page_number.to_number(page)

    if coordinate is None:
        coordinate = (source or _default_source).coordinate_for(index, page)

    address = format_address(number + coordinate.loc_int * MULTIPLIER, coordinate)

    mismatch = compare(page, decode(address))
    if mismatch is not None:
        raise VerificationFailure(
            f"Address for page {index} does not regenerate it: {mismatch}"
        )
    return address
