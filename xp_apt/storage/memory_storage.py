import logging
from typing import Dict, List, Optional

from ..models import (
    AirportRecord, AirportFileRecord, Runway, RunwayEnd, Apron,
    TaxiPath, Parking, Com, Helipad, Start,
)
from .base import SinkInterface

logger = logging.getLogger(__name__)

class MemoryStorage(SinkInterface):
    """Sink keeping all written entities in lists."""

    def __init__(self):
        self.airports: List[AirportRecord] = []
        self.airport_files: List[AirportFileRecord] = []
        self.runways: List[Runway] = []
        self.runway_ends: List[RunwayEnd] = []
        self.starts: List[Start] = []
        self.helipads: List[Helipad] = []
        self.coms: List[Com] = []
        self.parkings: List[Parking] = []
        self.taxi_paths: List[TaxiPath] = []
        self.aprons: List[Apron] = []

    def write_airport(self, airport: AirportRecord) -> None:
        self.airports.append(airport)

    def write_airport_file(self, record: AirportFileRecord) -> None:
        self.airport_files.append(record)

    def write_runway(self, runway: Runway) -> None:
        self.runways.append(runway)

    def write_runway_ends(self, runway_ends: List[RunwayEnd]) -> None:
        self.runway_ends.extend(runway_ends)

    def write_start(self, start: Start) -> None:
        self.starts.append(start)

    def write_helipad(self, helipad: Helipad) -> None:
        self.helipads.append(helipad)

    def write_com(self, com: Com) -> None:
        self.coms.append(com)

    def write_parking(self, parking: Parking) -> None:
        self.parkings.append(parking)

    def write_taxi_path(self, taxi_path: TaxiPath) -> None:
        self.taxi_paths.append(taxi_path)

    def write_apron(self, apron: Apron) -> None:
        self.aprons.append(apron)

    def get_airport(self, ident: str) -> Optional[AirportRecord]:
        """Find a written airport by ident."""
        for airport in self.airports:
            if airport.ident == ident:
                return airport
        return None

    def get_counts(self) -> Dict[str, int]:
        return {
            'airports': len(self.airports),
            'airport_files': len(self.airport_files),
            'runways': len(self.runways),
            'runway_ends': len(self.runway_ends),
            'starts': len(self.starts),
            'helipads': len(self.helipads),
            'coms': len(self.coms),
            'parkings': len(self.parkings),
            'taxi_paths': len(self.taxi_paths),
            'aprons': len(self.aprons),
        }
