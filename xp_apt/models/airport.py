from dataclasses import dataclass, asdict
from typing import Optional

from .navpoint import NavPoint
from .rect import BoundingRect

@dataclass
class AirportRecord:
    """
    Airport row produced when an airport block is finalized.

    Counters and the bounding rectangle are filled by the airport session
    just before the record is written to the sink.
    """

    airport_id: int
    ident: str
    file_id: Optional[int] = None
    name: Optional[str] = None
    airport_type: Optional[str] = None  # land, seaplane or heliport
    elevation_ft: float = 0.0

    # Metadata rows
    city: Optional[str] = None
    country: Optional[str] = None
    region: Optional[str] = None
    iata_code: Optional[str] = None
    faa_code: Optional[str] = None

    # Flags
    is_closed: bool = False
    is_military: bool = False
    is_addon: bool = False
    is_3d: bool = False
    has_avgas: bool = False
    has_jetfuel: bool = False

    # Tower from viewpoint row
    has_tower_object: bool = False
    tower_latitude_deg: Optional[float] = None
    tower_longitude_deg: Optional[float] = None
    tower_elevation_ft: Optional[float] = None

    # Frequencies in kHz
    atis_frequency: Optional[int] = None
    awos_frequency: Optional[int] = None
    asos_frequency: Optional[int] = None
    unicom_frequency: Optional[int] = None
    tower_frequency: Optional[int] = None

    # Longest runway summary
    longest_runway_length_ft: float = 0.0
    longest_runway_width_ft: float = 0.0
    longest_runway_heading_degT: float = 0.0
    longest_runway_surface: str = "UNKNOWN"

    # Counts
    num_runways: int = 0
    num_runway_hard: int = 0
    num_runway_soft: int = 0
    num_runway_water: int = 0
    num_runway_light: int = 0
    num_runway_end_als: int = 0
    num_runway_end_vasi: int = 0
    num_helipad: int = 0
    num_com: int = 0
    num_starts: int = 0
    num_apron: int = 0
    num_taxi_path: int = 0
    num_parking: int = 0
    num_parking_gate: int = 0
    num_parking_ga_ramp: int = 0
    num_parking_cargo: int = 0
    num_parking_mil_cargo: int = 0
    num_parking_mil_combat: int = 0
    largest_parking_gate: Optional[str] = None
    largest_parking_ramp: Optional[str] = None

    rating: int = 0

    # Bounding rectangle and representative position
    bounds_west_deg: Optional[float] = None
    bounds_north_deg: Optional[float] = None
    bounds_east_deg: Optional[float] = None
    bounds_south_deg: Optional[float] = None
    latitude_deg: Optional[float] = None
    longitude_deg: Optional[float] = None
    mag_var: float = 0.0

    # Origin
    scenery_local_path: Optional[str] = None
    filename: Optional[str] = None

    @property
    def navpoint(self) -> Optional[NavPoint]:
        """Representative position as NavPoint if known."""
        if self.latitude_deg is None or self.longitude_deg is None:
            return None
        return NavPoint(latitude=self.latitude_deg, longitude=self.longitude_deg, name=self.ident)

    @property
    def bounds(self) -> Optional[BoundingRect]:
        if self.bounds_west_deg is None:
            return None
        return BoundingRect(west=self.bounds_west_deg, north=self.bounds_north_deg,
                            east=self.bounds_east_deg, south=self.bounds_south_deg)

    @bounds.setter
    def bounds(self, rect: Optional[BoundingRect]):
        if rect is None:
            self.bounds_west_deg = self.bounds_north_deg = None
            self.bounds_east_deg = self.bounds_south_deg = None
        else:
            self.bounds_west_deg = rect.west
            self.bounds_north_deg = rect.north
            self.bounds_east_deg = rect.east
            self.bounds_south_deg = rect.south

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return asdict(self)

    def __repr__(self):
        return f"AirportRecord(airport_id={self.airport_id}, ident='{self.ident}', name='{self.name}')"

    def __str__(self):
        """Return a human-readable string representation of the airport."""
        status = []
        if self.is_closed:
            status.append("CLOSED")
        if self.is_military:
            status.append("MILITARY")

        info = f"{self.ident} {self.name or ''}".strip()
        if status:
            info += f" ({', '.join(status)})"
        info += f"\nRunways: {self.num_runways} Longest: {self.longest_runway_length_ft:.0f}ft"
        info += f"\nRating: {self.rating}"
        return info


@dataclass
class AirportFileRecord:
    """Audit record of an airport ident seen in a scenery file."""

    airport_file_id: int
    ident: str
    file_id: Optional[int] = None

    def to_dict(self) -> dict:
        return asdict(self)
