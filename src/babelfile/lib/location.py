"""
Location coordinates and the sources that assign them.

A coordinate names a page's shelf position: wall, shelf, volume and page
index. It is a label, not a search result; any coordinate can carry any page
content. Its canonical packing is the decimal string
``page(3) volume(2) shelf(1) wall(1)``.
"""

import random
import re
from dataclasses import dataclass
from typing import Optional, Protocol, Sequence

from babelfile import config
from babelfile.errors import InvalidAddressError

# Every valid field fits in three digits; longer input is rejected before int().
_DIGITS = re.compile(r"[0-9]{1,3}")


@dataclass(frozen=True)
class LocationCoordinate:
    wall: int
    shelf: int
    volume: int
    page: int

    def __post_init__(self):
        for name, limit in (
            ("wall", config.WALLS),
            ("shelf", config.SHELVES),
            ("volume", config.VOLUMES),
            ("page", config.PAGES),
        ):
            value = getattr(self, name)
            if not 0 <= value < limit:
                raise InvalidAddressError(
                    f"Coordinate {name} must be 0-{limit - 1}, got {value}"
                )

    @property
    def packed(self) -> str:
        """Fixed-width decimal packing, e.g. ``'0070312'``."""
        return f"{self.page:03d}{self.volume:02d}{self.shelf}{self.wall}"

    @property
    def loc_int(self) -> int:
        return int(self.packed)

    def fields(self) -> tuple:
        """Address field strings: wall, shelf, volume(2), page(3)."""
        return (
            str(self.wall),
            str(self.shelf),
            f"{self.volume:02d}",
            f"{self.page:03d}",
        )

    @classmethod
    def from_fields(cls, fields: Sequence[str]) -> "LocationCoordinate":
        """Parse ``(wall, shelf, volume, page)`` strings from an address.

        Values are read numerically, so ``'7'`` and ``'007'`` name the same
        volume or page. Fields are at most three digits long.
        """
        if len(fields) != 4:
            raise InvalidAddressError(
                f"Coordinate requires 4 fields, got {len(fields)}"
            )
        for value in fields:
            if not _DIGITS.fullmatch(value):
                raise InvalidAddressError(f"Invalid coordinate field: {value!r}")
        wall, shelf, volume, page = (int(v) for v in fields)
        return cls(wall=wall, shelf=shelf, volume=volume, page=page)

    def __str__(self):
        return ":".join(self.fields())


class CoordinateSource(Protocol):
    """Assigns a coordinate to the page at a given position in a file."""

    def coordinate_for(self, index: int, page: str) -> LocationCoordinate: ...


def _draw(rng: random.Random) -> LocationCoordinate:
    return LocationCoordinate(
        wall=rng.randrange(config.WALLS),
        shelf=rng.randrange(config.SHELVES),
        volume=rng.randrange(config.VOLUMES),
        page=rng.randrange(config.PAGES),
    )


class RandomCoordinateSource:
    """
    Uniformly random coordinates.

    Without a seed, coordinates come from the operating system's entropy
    source. With a seed, each page's coordinate depends only on the seed and
    the page index, so results do not depend on worker scheduling.
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._system = random.SystemRandom()

    def coordinate_for(self, index: int, page: str) -> LocationCoordinate:
        if self.seed is None:
            return _draw(self._system)
        return _draw(random.Random(f"{self.seed}:{index}"))


class FixedCoordinateSource:
    """Always returns the same coordinate."""

    def __init__(self, coordinate: LocationCoordinate):
        self.coordinate = coordinate

    def coordinate_for(self, index: int, page: str) -> LocationCoordinate:
        return self.coordinate


class SequenceCoordinateSource:
    """Returns ``coordinates[index]``, cycling when there are more pages."""

    def __init__(self, coordinates: Sequence[LocationCoordinate]):
        if not coordinates:
            raise ValueError("Cannot build a coordinate source with no coordinates.")
        self.coordinates = list(coordinates)

    def coordinate_for(self, index: int, page: str) -> LocationCoordinate:
        return self.coordinates[index % len(self.coordinates)]
