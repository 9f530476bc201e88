"""GeoCoordinate value type and great-circle distance."""

import math
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from .errors import MalformedData, SourceUnavailable

EARTH_RADIUS_KM = 6371.0


@dataclass(frozen=True)
class GeoCoordinate:
    """A latitude/longitude pair in plain degrees (no range checks)."""

    latitude: float = 0.0
    longitude: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, "latitude", float(self.latitude))
        object.__setattr__(self, "longitude", float(self.longitude))

    def distance_to(self, other: "GeoCoordinate") -> float:
        """Haversine distance to another coordinate, in kilometers."""
        lat1 = math.radians(self.latitude)
        lat2 = math.radians(other.latitude)
        lat_diff = math.radians(other.latitude - self.latitude)
        lon_diff = math.radians(other.longitude - self.longitude)

        a = min(
            1.0,
            math.sin(lat_diff / 2) ** 2
            + math.cos(lat1) * math.cos(lat2) * math.sin(lon_diff / 2) ** 2,
        )
        c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
        return EARTH_RADIUS_KM * c

    def to_canonical_string(self) -> str:
        """Render as ``"<latitude>,<longitude>"`` for routing queries."""
        return f"{self.latitude},{self.longitude}"

    def __str__(self) -> str:
        return self.to_canonical_string()

    @classmethod
    def load_from_file(cls, filename: Union[str, Path]) -> "GeoCoordinate":
        """
        Load a coordinate from a file holding "<lat> <lon>".

        Any whitespace separates the two fields; extra tokens are ignored.

        Raises:
            SourceUnavailable: the file cannot be opened
            MalformedData: fewer than two numeric fields
        """
        try:
            with open(filename, "r") as fp:
                tokens = fp.read().split()
        except OSError as err:
            raise SourceUnavailable(f"Unable to open GPS data file: {filename}") from err

        if len(tokens) < 2:
            raise MalformedData(
                f"Expected latitude and longitude in {filename}, got {len(tokens)} field(s)"
            )
        try:
            latitude, longitude = float(tokens[0]), float(tokens[1])
        except ValueError as err:
            raise MalformedData(f"Non-numeric coordinate in {filename}: {err}") from err
        return cls(latitude, longitude)
