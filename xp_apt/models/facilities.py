"""
Airport facility records: taxi paths, parking stands, com frequencies,
helipads and start positions.
"""

from dataclasses import dataclass, asdict
from typing import Optional

@dataclass
class TaxiPath:
    """Taxiway edge with resolved end positions."""

    taxi_path_id: int
    airport_id: Optional[int]
    name: str = ""
    type: str = "T"
    surface: Optional[str] = None
    width_ft: float = 0.0
    start_latitude_deg: Optional[float] = None
    start_longitude_deg: Optional[float] = None
    end_latitude_deg: Optional[float] = None
    end_longitude_deg: Optional[float] = None

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class Parking:
    """
    Parking stand or ramp start.

    Type codes: G gate (GS, GM, GH with size), RGA ramp GA (RGAS, RGAM, RGAL),
    RC ramp cargo, RM ramp military, H hangar, T tie down, FUEL fuel station
    and empty for unknown.
    """

    parking_id: int
    airport_id: Optional[int]
    type: str = ""
    name: str = ""
    number: int = -1
    radius: float = 50.0
    heading_degT: float = 0.0
    airline_codes: Optional[str] = None
    has_jetway: bool = False
    has_avgas: bool = False
    has_jetfuel: bool = False
    latitude_deg: Optional[float] = None
    longitude_deg: Optional[float] = None

    @property
    def is_fuel(self) -> bool:
        return self.type == "FUEL"

    def to_dict(self) -> dict:
        return asdict(self)

    def __repr__(self):
        return f"Parking(parking_id={self.parking_id}, name='{self.name}', type='{self.type}')"


@dataclass
class Com:
    """Communication frequency. The frequency is stored in kHz."""

    com_id: int
    airport_id: Optional[int]
    type: str = "NONE"
    frequency: int = 0
    name: str = ""

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class Helipad:
    helipad_id: int
    airport_id: Optional[int]
    start_id: Optional[int] = None
    surface: str = "UNKNOWN"
    type: str = "H"
    length_ft: float = 0.0
    width_ft: float = 0.0
    heading_degT: float = 0.0
    is_transparent: bool = False
    is_closed: bool = False
    elevation_ft: float = 0.0
    latitude_deg: Optional[float] = None
    longitude_deg: Optional[float] = None

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class Start:
    """Start position, R for runway ends and H for helipads."""

    start_id: int
    airport_id: Optional[int]
    type: str
    runway_end_id: Optional[int] = None
    runway_name: Optional[str] = None
    number: Optional[int] = None
    heading_degT: float = 0.0
    elevation_ft: float = 0.0
    latitude_deg: Optional[float] = None
    longitude_deg: Optional[float] = None

    def to_dict(self) -> dict:
        return asdict(self)
