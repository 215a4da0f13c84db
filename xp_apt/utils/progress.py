import logging
from typing import Optional

logger = logging.getLogger(__name__)

class ProgressHandler:
    """Counts written airports and logs progress at a fixed interval."""

    def __init__(self, interval: int = 1000):
        self.interval = interval
        self.num_airports = 0
        self.current_file: Optional[str] = None

    def start_file(self, file_name: str) -> None:
        self.current_file = file_name
        logger.info(f"Reading {file_name}")

    def increment_airport(self, ident: str) -> None:
        self.num_airports += 1
        logger.debug(f"Airport {ident} written")
        if self.interval > 0 and self.num_airports % self.interval == 0:
            logger.info(f"{self.num_airports} airports written ({self.current_file})")
