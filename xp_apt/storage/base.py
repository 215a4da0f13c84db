from abc import ABC, abstractmethod
from typing import List

from ..models import (
    AirportRecord, AirportFileRecord, Runway, RunwayEnd, Apron,
    TaxiPath, Parking, Com, Helipad, Start,
)

class SinkInterface(ABC):
    """
    Base interface for storage backends receiving airport entities.

    The reader calls one write method per finished entity. Child records
    are written after their airport id is assigned, the airport record
    itself and the batch of runway ends follow when the airport block is
    finalized.
    """

    @abstractmethod
    def write_airport(self, airport: AirportRecord) -> None:
        """
        Store a finalized airport.

        Args:
            airport: Airport with counters, bounds and position filled
        """
        pass

    @abstractmethod
    def write_airport_file(self, record: AirportFileRecord) -> None:
        """Store the audit record of an airport header seen in a file."""
        pass

    @abstractmethod
    def write_runway(self, runway: Runway) -> None:
        pass

    @abstractmethod
    def write_runway_ends(self, runway_ends: List[RunwayEnd]) -> None:
        """
        Store all runway ends of an airport in one batch.

        Args:
            runway_ends: Ends including VASI annotations
        """
        pass

    @abstractmethod
    def write_start(self, start: Start) -> None:
        pass

    @abstractmethod
    def write_helipad(self, helipad: Helipad) -> None:
        pass

    @abstractmethod
    def write_com(self, com: Com) -> None:
        pass

    @abstractmethod
    def write_parking(self, parking: Parking) -> None:
        pass

    @abstractmethod
    def write_taxi_path(self, taxi_path: TaxiPath) -> None:
        pass

    @abstractmethod
    def write_apron(self, apron: Apron) -> None:
        pass
