#!/usr/bin/env python3

import math
from typing import Optional
from dataclasses import dataclass

from ..utils.geo import EARTH_RADIUS_METER, normalize_course

@dataclass
class NavPoint:
    """
    A geographic position with an optional name.

    All coordinates are stored in decimal degrees:
    - Latitude: -90 to +90 degrees (negative for South, positive for North)
    - Longitude: -180 to +180 degrees (negative for West, positive for East)

    Distances are in meters since scenery files give runway widths and
    lengths in meters. Bearings are true courses in degrees [0, 360).
    """

    latitude: float  # Decimal degrees, -90 to +90
    longitude: float  # Decimal degrees, -180 to +180
    name: Optional[str] = None  # Optional identifier for the point

    def __post_init__(self):
        """Validate coordinates after initialization."""
        if not -90 <= self.latitude <= 90:
            raise ValueError(f"Latitude must be between -90 and 90 degrees, got {self.latitude}")
        if not -180 <= self.longitude <= 180:
            raise ValueError(f"Longitude must be between -180 and 180 degrees, got {self.longitude}")

    def distance_meters(self, other: 'NavPoint') -> float:
        """
        Great circle distance to another point using the Haversine formula.

        Args:
            other: The target NavPoint

        Returns:
            Distance in meters
        """
        lat1 = math.radians(self.latitude)
        lat2 = math.radians(other.latitude)
        dlat = lat2 - lat1
        dlon = math.radians(other.longitude - self.longitude)

        a = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
        c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
        return EARTH_RADIUS_METER * c

    def bearing_to(self, other: 'NavPoint') -> float:
        """
        Initial great circle bearing to another point.

        Returns:
            Bearing in degrees, 0-360 (0/360 is North, 90 is East, etc.)
        """
        lat1 = math.radians(self.latitude)
        lat2 = math.radians(other.latitude)
        dlon = math.radians(other.longitude - self.longitude)

        y = math.sin(dlon) * math.cos(lat2)
        x = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(dlon)
        return normalize_course(math.degrees(math.atan2(y, x)))

    def interpolate(self, other: 'NavPoint', fraction: float, distance: Optional[float] = None) -> 'NavPoint':
        """
        Point on the great circle between this point and another.

        Args:
            other: End point
            fraction: 0.0 returns this point, 1.0 returns the other point
            distance: Precomputed distance in meters, calculated if omitted

        Returns:
            The intermediate NavPoint
        """
        if distance is None:
            distance = self.distance_meters(other)
        if distance <= 0.0:
            return NavPoint(latitude=self.latitude, longitude=self.longitude)

        delta = distance / EARTH_RADIUS_METER
        sin_delta = math.sin(delta)
        if sin_delta == 0.0:
            return NavPoint(latitude=self.latitude, longitude=self.longitude)

        a = math.sin((1 - fraction) * delta) / sin_delta
        b = math.sin(fraction * delta) / sin_delta

        lat1 = math.radians(self.latitude)
        lon1 = math.radians(self.longitude)
        lat2 = math.radians(other.latitude)
        lon2 = math.radians(other.longitude)

        x = a * math.cos(lat1) * math.cos(lon1) + b * math.cos(lat2) * math.cos(lon2)
        y = a * math.cos(lat1) * math.sin(lon1) + b * math.cos(lat2) * math.sin(lon2)
        z = a * math.sin(lat1) + b * math.sin(lat2)

        lat = math.atan2(z, math.sqrt(x * x + y * y))
        lon = math.atan2(y, x)
        return NavPoint(latitude=math.degrees(lat), longitude=math.degrees(lon))

    def __str__(self) -> str:
        """String representation of the NavPoint."""
        name_str = f"{self.name} " if self.name else ""
        return f"{name_str}({self.latitude}, {self.longitude})"

    def __repr__(self) -> str:
        """Detailed string representation of the NavPoint."""
        return f"NavPoint(name={self.name!r}, latitude={self.latitude}, longitude={self.longitude})"
