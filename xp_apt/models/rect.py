from dataclasses import dataclass

from .navpoint import NavPoint

@dataclass
class BoundingRect:
    """
    Axis aligned bounding rectangle in decimal degrees.

    Rectangles crossing the anti-meridian are not handled; airports are
    small enough for this not to matter in practice.
    """

    west: float
    north: float
    east: float
    south: float

    @classmethod
    def from_point(cls, point: NavPoint) -> 'BoundingRect':
        """Create a single point rectangle."""
        return cls(west=point.longitude, north=point.latitude, east=point.longitude, south=point.latitude)

    def extend(self, point: NavPoint) -> None:
        """Grow the rectangle so that it covers the given point."""
        self.west = min(self.west, point.longitude)
        self.east = max(self.east, point.longitude)
        self.north = max(self.north, point.latitude)
        self.south = min(self.south, point.latitude)

    def inflate(self, delta_lon: float, delta_lat: float) -> None:
        """Grow the rectangle by the given margins on every side."""
        self.west = max(self.west - delta_lon, -180.0)
        self.east = min(self.east + delta_lon, 180.0)
        self.north = min(self.north + delta_lat, 90.0)
        self.south = max(self.south - delta_lat, -90.0)

    def inflated(self, delta_lon: float, delta_lat: float) -> 'BoundingRect':
        """Return an inflated copy and leave this rectangle untouched."""
        rect = BoundingRect(west=self.west, north=self.north, east=self.east, south=self.south)
        rect.inflate(delta_lon, delta_lat)
        return rect

    def contains(self, point: NavPoint) -> bool:
        return self.west <= point.longitude <= self.east and self.south <= point.latitude <= self.north

    def is_point(self) -> bool:
        return self.west == self.east and self.north == self.south

    @property
    def center(self) -> NavPoint:
        return NavPoint(latitude=(self.north + self.south) / 2.0, longitude=(self.west + self.east) / 2.0)
