from dataclasses import dataclass
from typing import Optional

@dataclass
class Runway:
    """Data class for storing runway information."""

    runway_id: int
    airport_id: Optional[int]
    primary_end_id: int
    secondary_end_id: int
    surface: str = "UNKNOWN"
    shoulder: Optional[str] = None
    length_ft: float = 0.0
    width_ft: float = 0.0
    heading_degT: float = 0.0
    marking_flags: int = 0
    edge_light: Optional[str] = None
    center_light: Optional[str] = None
    elevation_ft: float = 0.0

    # Primary end coordinates
    primary_latitude_deg: Optional[float] = None
    primary_longitude_deg: Optional[float] = None

    # Secondary end coordinates
    secondary_latitude_deg: Optional[float] = None
    secondary_longitude_deg: Optional[float] = None

    # Center
    latitude_deg: Optional[float] = None
    longitude_deg: Optional[float] = None

    @property
    def lighted(self) -> bool:
        return self.edge_light is not None or self.center_light is not None

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            'runway_id': self.runway_id,
            'airport_id': self.airport_id,
            'primary_end_id': self.primary_end_id,
            'secondary_end_id': self.secondary_end_id,
            'surface': self.surface,
            'shoulder': self.shoulder,
            'length_ft': self.length_ft,
            'width_ft': self.width_ft,
            'heading_degT': self.heading_degT,
            'marking_flags': self.marking_flags,
            'edge_light': self.edge_light,
            'center_light': self.center_light,
            'elevation_ft': self.elevation_ft,
            'primary_latitude_deg': self.primary_latitude_deg,
            'primary_longitude_deg': self.primary_longitude_deg,
            'secondary_latitude_deg': self.secondary_latitude_deg,
            'secondary_longitude_deg': self.secondary_longitude_deg,
            'latitude_deg': self.latitude_deg,
            'longitude_deg': self.longitude_deg,
        }

    def __repr__(self):
        return (f"Runway(runway_id={self.runway_id}, primary_end_id={self.primary_end_id}, "
                f"secondary_end_id={self.secondary_end_id})")

    def __str__(self):
        """Return a human-readable string representation of the runway."""
        runway_info = f"Runway {self.runway_id}"
        if self.lighted:
            runway_info += " (LIGHTED)"
        runway_info += f"\nLength: {self.length_ft:.0f}ft Width: {self.width_ft:.0f}ft"
        runway_info += f"\nSurface: {self.surface}"
        return runway_info


@dataclass
class RunwayEnd:
    """
    One named threshold of a runway.

    Ends are kept by the airport session until the airport is finalized
    since lighting object rows can still attach a VASI to them.
    """

    runway_end_id: int
    airport_id: Optional[int]
    name: str
    end_type: str  # P primary, S secondary
    heading_degT: float = 0.0
    latitude_deg: Optional[float] = None
    longitude_deg: Optional[float] = None
    offset_threshold_ft: float = 0.0
    blast_pad_ft: float = 0.0
    app_light_system_type: Optional[str] = None
    has_reils: bool = False
    has_touchdown_lights: bool = False
    has_closed_markings: bool = False
    left_vasi_type: Optional[str] = None
    left_vasi_pitch: Optional[float] = None
    right_vasi_type: Optional[str] = None
    right_vasi_pitch: Optional[float] = None

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            'runway_end_id': self.runway_end_id,
            'airport_id': self.airport_id,
            'name': self.name,
            'end_type': self.end_type,
            'heading_degT': self.heading_degT,
            'latitude_deg': self.latitude_deg,
            'longitude_deg': self.longitude_deg,
            'offset_threshold_ft': self.offset_threshold_ft,
            'blast_pad_ft': self.blast_pad_ft,
            'app_light_system_type': self.app_light_system_type,
            'has_reils': self.has_reils,
            'has_touchdown_lights': self.has_touchdown_lights,
            'has_closed_markings': self.has_closed_markings,
            'left_vasi_type': self.left_vasi_type,
            'left_vasi_pitch': self.left_vasi_pitch,
            'right_vasi_type': self.right_vasi_type,
            'right_vasi_pitch': self.right_vasi_pitch,
        }

    def __repr__(self):
        return f"RunwayEnd(runway_end_id={self.runway_end_id}, name='{self.name}', end_type='{self.end_type}')"
