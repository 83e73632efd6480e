"""Great-circle distance between coordinates and airports."""

import math

from haversine import Unit, haversine

from charter.models import AirportRecord

EARTH_RADIUS_KM = 6371.0


class DistanceCalculator:
    """Calculate great-circle distances on a 6371 km sphere."""

    def km(self, lat1: float, lon1: float, lat2: float, lon2: float) -> float:
        """Return haversine distance in kilometres between two points in degrees.

        Out-of-range coordinates are wrapped onto the sphere (latitude 95 is
        latitude 85 on the opposite meridian). Returns 0.0 for identical points.
        """
        if lat1 == lat2 and lon1 == lon2:
            return 0.0

        # Central angle from haversine, scaled to our fixed radius rather
        # than the library's mean radius.
        try:
            angle = haversine((lat1, lon1), (lat2, lon2), unit=Unit.RADIANS, normalize=True)
        except ValueError as exc:
            # Float error can push an antipodal pair just outside asin's domain.
            if "math domain" not in str(exc):
                raise
            angle = math.pi
        return angle * EARTH_RADIUS_KM

    def between(self, origin: AirportRecord, dest: AirportRecord) -> float:
        """Return distance in kilometres between two airports."""
        return self.km(origin.lat, origin.lon, dest.lat, dest.lon)


def distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Module-level shortcut for DistanceCalculator().km()."""
    return DistanceCalculator().km(lat1, lon1, lat2, lon2)
