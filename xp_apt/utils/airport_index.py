import logging
from typing import Dict, Optional, Tuple

logger = logging.getLogger(__name__)

class AirportIndex:
    """
    Registry of airport idents and runway end names seen while loading.

    An airport ident can only be registered once, later airports with the
    same ident are ignored by the reader. Runway ends are registered per
    airport so that other data sources can find them by name.
    """

    def __init__(self):
        self._airports: Dict[str, int] = {}
        self._runway_ends: Dict[Tuple[str, str], int] = {}

    def add_airport(self, ident: str, airport_id: int) -> bool:
        """
        Register an airport.

        Returns:
            False if the ident was already registered
        """
        if not ident or ident in self._airports:
            return False
        self._airports[ident] = airport_id
        return True

    def add_runway_end(self, ident: str, name: str, runway_end_id: int) -> None:
        key = (ident, name)
        if key in self._runway_ends:
            logger.debug(f"Runway end {name} of {ident} registered twice")
        self._runway_ends[key] = runway_end_id

    def get_airport_id(self, ident: str) -> Optional[int]:
        return self._airports.get(ident)

    def get_runway_end_id(self, ident: str, name: str) -> Optional[int]:
        return self._runway_ends.get((ident, name))

    def __len__(self):
        return len(self._airports)

    def __contains__(self, ident: str) -> bool:
        return ident in self._airports
